from __future__ import annotations


class QueryValidationError(ValueError):
    """Raised when a company-name query is empty after trimming."""


class DirectoryLookupError(LookupError):
    """Raised when the contact directory could not be read.

    Distinct from a valid "no match" result, which is returned as NotFound.
    """
