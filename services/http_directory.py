"""
REST contact directory (PostgREST-style ``/contacts`` endpoint).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings
from models import ContactRecord
from services.errors import DirectoryLookupError


logger = logging.getLogger(__name__)


# Rows fetched when a literal '*' forces a client-side containment check
_WILDCARD_PAGE_SIZE = 50


def _ilike_pattern(query: str) -> str:
    """Build a PostgREST ``ilike`` filter matching ``query`` as a literal substring.

    ``\\``, ``%`` and ``_`` are escaped for LIKE. PostgREST rewrites every ``*``
    to ``%`` before the query runs, so a literal ``*`` goes out as the
    single-character wildcard ``_`` and the caller re-checks the rows.
    """
    escaped = (
        query.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
        .replace("*", "_")
    )
    return f"ilike.*{escaped}*"


def _contains(row: Any, query: str) -> bool:
    return isinstance(row, dict) and query.casefold() in str(row.get("company") or "").casefold()


class HttpContactDirectory:
    """Reads contacts from a remote directory service; one GET per lookup, no retries."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        if not self.settings.directory_url:
            raise ValueError("DIRECTORY_URL must be set to use the HTTP contact directory")
        self.base_url = self.settings.directory_url.rstrip("/")
        self.timeout = self.settings.directory_timeout_seconds
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        api_key = self.settings.directory_api_key
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def close(self) -> None:
        self.session.close()

    def find_by_company(self, query: str) -> Optional[ContactRecord]:
        needs_recheck = "*" in query
        params = {
            "select": "name,company,email",
            "company": _ilike_pattern(query),
            "limit": _WILDCARD_PAGE_SIZE if needs_recheck else 1,
        }
        url = f"{self.base_url}/contacts"
        try:
            logger.debug("GET %s params=%s", url, params)
            response = self.session.get(url, params=params, headers=self._headers(), timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise DirectoryLookupError(f"Contact directory timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise DirectoryLookupError(f"Contact directory request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise DirectoryLookupError(
                f"Contact directory returned status {response.status_code}: {response.text[:200]}"
            )
        try:
            rows = response.json()
        except ValueError as e:
            raise DirectoryLookupError("Contact directory returned a non-JSON body") from e
        if not isinstance(rows, list):
            raise DirectoryLookupError("Contact directory returned an unexpected payload")
        if needs_recheck:
            rows = [row for row in rows if _contains(row, query)]
        if not rows:
            return None
        return _to_record(rows[0])


def _to_record(row: Any) -> ContactRecord:
    if not isinstance(row, dict):
        raise DirectoryLookupError("Contact directory returned a malformed row")
    try:
        return ContactRecord.model_validate(row)
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        raise DirectoryLookupError(f"Contact directory row failed validation: {e}") from e
