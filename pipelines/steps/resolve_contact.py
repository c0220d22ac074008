from __future__ import annotations

from pipelines.runner import RunContext
from ports.resolver import ResolverPort


class ResolveContact:
    def __init__(self, resolver: ResolverPort) -> None:
        self.resolver = resolver

    def run(self, ctx: RunContext) -> RunContext:
        ctx.resolution = self.resolver.resolve(ctx.query or "")
        ctx.meta["resolver_mode"] = getattr(self.resolver, "mode", None)
        return ctx
