from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a read-write SQLite connection with sane pragmas for local use.

    - WAL journal for fewer writer blocks
    - NORMAL synchronous for performance
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    # Pragmas
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def get_readonly_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open an existing SQLite directory for reads only.

    Fails with sqlite3.OperationalError when the file does not exist instead of
    creating an empty database.
    """
    uri = f"{Path(db_path).resolve().as_uri()}?mode=ro"
    conn = sqlite3.connect(uri, uri=True, timeout=timeout or 30.0, check_same_thread=False)
    conn.execute("PRAGMA query_only=ON;")
    return conn
