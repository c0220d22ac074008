from __future__ import annotations

import sqlite3
from typing import Optional

from models import ContactRecord
from services.errors import DirectoryLookupError


def _casefold(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return str(value).casefold()


class ContactsRepo:
    """SQLite-backed contact directory. Reads only."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        # SQLite's lower() is ASCII-only; match with Python's casefold instead
        self.conn.create_function("casefold", 1, _casefold, deterministic=True)

    def find_by_company(self, query: str) -> Optional[ContactRecord]:
        """Return the first contact whose company contains ``query`` (case-insensitive)."""
        sql = (
            "SELECT name, company, email FROM contacts "
            "WHERE instr(casefold(company), ?) > 0 "
            "ORDER BY id LIMIT 1;"
        )
        try:
            cur = self.conn.cursor()
            cur.execute(sql, (query.casefold(),))
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise DirectoryLookupError(f"SQLite contact directory read failed: {e}") from e
        if not row:
            return None
        name, company, email = row
        return ContactRecord(name=name, company=company, email=email)

    def close(self) -> None:
        self.conn.close()
