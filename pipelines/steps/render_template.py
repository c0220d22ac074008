from __future__ import annotations

from models import Found
from pipelines.runner import RunContext
from services.template_renderer import render


class RenderTemplate:
    def __init__(self, linkedin_base_url: str = "https://www.linkedin.com/company/") -> None:
        self.linkedin_base_url = linkedin_base_url

    def run(self, ctx: RunContext) -> RunContext:
        # NotFound skips rendering; the caller reports it
        if isinstance(ctx.resolution, Found):
            ctx.info = render(ctx.query or "", ctx.resolution, self.linkedin_base_url)
        return ctx
