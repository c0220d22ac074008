from __future__ import annotations

from typing import Optional, Protocol

from models import ContactRecord


class ContactDirectoryPort(Protocol):
    def find_by_company(self, query: str) -> Optional[ContactRecord]:
        """Return one record whose company contains ``query`` (case-insensitive), or None.

        Raises DirectoryLookupError when the directory cannot be read.
        """
        ...
