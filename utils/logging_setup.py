from __future__ import annotations

import logging
import os
import sys

from config.settings import get_settings


# Lookup context passed through ``extra=``; rendered after the message when set
CONTEXT_KEYS: tuple[str, ...] = ("step", "status", "mode", "duration_ms", "error", "run_id")

BASE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_INITIALIZED: bool = False


class KeyValueFormatter(logging.Formatter):
    """Append lookup context as ``key=value`` pairs, skipping keys a record lacks.

    ``run_id`` falls back to the RUN_ID environment variable so every line of a
    CLI invocation can be correlated.
    """

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        line = super().format(record)
        context = {key: getattr(record, key, None) for key in CONTEXT_KEYS}
        if context["run_id"] is None:
            context["run_id"] = os.getenv("RUN_ID")
        pairs = " ".join(f"{key}={value}" for key, value in context.items() if value not in (None, ""))
        return f"{line} {pairs}" if pairs else line


def _has_file_handler(root: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target
        for h in root.handlers
    )


def init_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure the root logger once: stderr console plus an optional file.

    The console handler is skipped when something (a test runner, an embedding
    app) already attached handlers; stdout stays free for ``--json`` output.
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    if level is None or log_file is None:
        settings = get_settings()
        level = level or settings.log_level
        log_file = log_file or settings.log_file
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    formatter = KeyValueFormatter(BASE_FORMAT)

    if not root_logger.handlers:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        root_logger.addHandler(console)

    if log_file and not _has_file_handler(root_logger, log_file):
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _INITIALIZED = True
