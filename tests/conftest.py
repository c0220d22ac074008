from __future__ import annotations

import sqlite3
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.validate_query'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    from config.settings import get_settings
    for key in ("RESOLVER_MODE", "DIRECTORY_BACKEND", "DIRECTORY_URL", "DIRECTORY_API_KEY", "DB_PATH", "LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def seed_contacts(db_path: Path, rows) -> None:
    from db import schema
    conn = sqlite3.connect(str(db_path))
    try:
        schema.bootstrap(conn)
        conn.executemany(
            "INSERT INTO contacts (name, company, email) VALUES (?, ?, ?)",
            [(r["name"], r["company"], r["email"]) for r in rows],
        )
        conn.commit()
    finally:
        conn.close()


@pytest.fixture
def directory_db(tmp_path):
    db_path = tmp_path / "contacts.db"
    seed_contacts(db_path, [
        {"name": "Jane Doe", "company": "Acme Corporation", "email": "jane@acme.com"},
        {"name": "Max Mustermann", "company": "Müller Logistik GmbH", "email": "max@mueller.de"},
        {"name": "Ann Lee", "company": "Globex 100% Solutions", "email": "ann@globex.io"},
    ])
    return db_path
