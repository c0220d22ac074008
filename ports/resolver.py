from __future__ import annotations

from typing import Protocol

from models import ResolutionResult


class ResolverPort(Protocol):
    mode: str

    def resolve(self, query: str) -> ResolutionResult:
        ...
