from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, List, Optional

from models import CompanyInfo, ResolutionResult
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    query: Optional[str] = None
    resolution: Optional[ResolutionResult] = None
    info: Optional[CompanyInfo] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
