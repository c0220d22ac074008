from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


RESOLVER_MODES = ("directory", "synthetic")
DIRECTORY_BACKENDS = ("sqlite", "http")


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: str | None

    # Core/runtime
    db_path: str

    # Resolution strategy
    resolver_mode: str  # directory | synthetic
    directory_backend: str  # sqlite | http

    # Remote directory (DIRECTORY_BACKEND=http)
    directory_url: str | None = None
    directory_api_key: str | None = None
    directory_timeout_seconds: float = 10.0

    linkedin_company_base_url: str = "https://www.linkedin.com/company/"


def validate_settings(settings: Settings) -> Settings:
    """Reject combinations that cannot produce a working resolver."""
    if settings.resolver_mode not in RESOLVER_MODES:
        raise RuntimeError(
            f"RESOLVER_MODE must be one of {', '.join(RESOLVER_MODES)} (got {settings.resolver_mode!r})"
        )
    if settings.directory_backend not in DIRECTORY_BACKENDS:
        raise RuntimeError(
            f"DIRECTORY_BACKEND must be one of {', '.join(DIRECTORY_BACKENDS)} (got {settings.directory_backend!r})"
        )
    if (
        settings.resolver_mode == "directory"
        and settings.directory_backend == "http"
        and not settings.directory_url
    ):
        raise RuntimeError(
            "DIRECTORY_URL required when DIRECTORY_BACKEND=http and RESOLVER_MODE=directory"
        )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return validate_settings(Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
        db_path=os.getenv("DB_PATH", "contacts.db"),
        resolver_mode=os.getenv("RESOLVER_MODE", "directory").strip().lower(),
        directory_backend=os.getenv("DIRECTORY_BACKEND", "sqlite").strip().lower(),
        directory_url=os.getenv("DIRECTORY_URL") or None,
        directory_api_key=os.getenv("DIRECTORY_API_KEY") or None,
        directory_timeout_seconds=float(os.getenv("DIRECTORY_TIMEOUT_SECONDS", "10")),
        linkedin_company_base_url=os.getenv(
            "LINKEDIN_COMPANY_BASE_URL", "https://www.linkedin.com/company/"
        ),
    ))
