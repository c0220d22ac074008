from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the contacts directory schema (idempotent)."""
    cur = conn.cursor()

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS contacts (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  name TEXT NOT NULL,\n"
            "  company TEXT NOT NULL,\n"
            "  email TEXT NOT NULL,\n"
            "  created_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    # Helpful index on company lookup
    cur.execute("CREATE INDEX IF NOT EXISTS idx_contacts_company ON contacts(company);")

    conn.commit()
