from __future__ import annotations

import logging
import time
from typing import Optional

from config.settings import Settings, get_settings
from models import ContactRecord, Found, NOT_FOUND, ResolutionResult
from ports.directory import ContactDirectoryPort
from ports.resolver import ResolverPort
from services.directories import open_directory
from services.domain_utils import normalize_query, synthetic_hr_email
from services.errors import QueryValidationError


logger = logging.getLogger(__name__)


def _validated(query: Optional[str]) -> str:
    normalized = normalize_query(query)
    if not normalized:
        raise QueryValidationError("Please enter a company name")
    return normalized


class DirectoryResolver:
    """Resolve a company name against a real contact directory."""

    mode = "directory"

    def __init__(self, directory: ContactDirectoryPort) -> None:
        self.directory = directory

    def resolve(self, query: str) -> ResolutionResult:
        normalized = _validated(query)
        t0 = time.time()
        # DirectoryLookupError propagates to the caller untouched
        record = self.directory.find_by_company(normalized)
        duration_ms = int((time.time() - t0) * 1000)
        status = "found" if record else "not_found"
        logger.info(
            "Resolved company query %r",
            normalized,
            extra={"step": "resolve", "status": status, "duration_ms": duration_ms, "mode": self.mode},
        )
        if record is None:
            return NOT_FOUND
        return Found(record)

    def close(self) -> None:
        close = getattr(self.directory, "close", None)
        if close is not None:
            close()


class SyntheticResolver:
    """Fabricate a generic HR contact from the query when no directory exists."""

    mode = "synthetic"

    def resolve(self, query: str) -> ResolutionResult:
        normalized = _validated(query)
        record = ContactRecord(
            name=f"Hiring Manager at {normalized}",
            company=normalized,
            email=synthetic_hr_email(normalized),
        )
        return Found(record)


def build_resolver(
    settings: Optional[Settings] = None,
    directory: Optional[ContactDirectoryPort] = None,
) -> ResolverPort:
    """Pick the resolution strategy from ``settings.resolver_mode``.

    In directory mode the directory is opened from settings unless one is passed in.
    """
    settings = settings or get_settings()
    mode = (settings.resolver_mode or "").lower()
    if mode == "synthetic":
        return SyntheticResolver()
    if mode == "directory":
        if directory is None:
            directory = open_directory(settings)
        return DirectoryResolver(directory)
    raise ValueError(f"Unknown resolver mode: {settings.resolver_mode}")
