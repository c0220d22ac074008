from __future__ import annotations

from pipelines.runner import RunContext
from services.domain_utils import normalize_query
from services.errors import QueryValidationError


class ValidateQuery:
    def run(self, ctx: RunContext) -> RunContext:
        query = normalize_query(ctx.query)
        if not query:
            raise QueryValidationError("Please enter a company name")
        ctx.query = query
        return ctx
