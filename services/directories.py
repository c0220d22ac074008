from __future__ import annotations

import sqlite3
from typing import Optional

from config.settings import Settings, get_settings
from db.connection import get_readonly_connection
from db.repos.contacts_repo import ContactsRepo
from ports.directory import ContactDirectoryPort
from services.errors import DirectoryLookupError
from services.http_directory import HttpContactDirectory


def open_directory(settings: Optional[Settings] = None, db_path: Optional[str] = None) -> ContactDirectoryPort:
    """Open the configured contact directory backend (sqlite | http)."""
    settings = settings or get_settings()
    backend = (settings.directory_backend or "sqlite").lower()
    if backend == "http":
        return HttpContactDirectory(settings)
    if backend == "sqlite":
        path = db_path or settings.db_path
        try:
            conn = get_readonly_connection(path)
        except sqlite3.Error as e:
            raise DirectoryLookupError(f"Cannot open contact directory at {path}: {e}") from e
        return ContactsRepo(conn)
    raise ValueError(f"Unknown directory backend: {settings.directory_backend}")
