from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .contact_record import ContactRecord


@dataclass(frozen=True)
class Found:
    record: ContactRecord


@dataclass(frozen=True)
class NotFound:
    pass


NOT_FOUND = NotFound()

ResolutionResult = Union[Found, NotFound]
