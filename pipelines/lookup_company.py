from __future__ import annotations

import logging
from typing import Optional

from config.settings import get_settings
from models import LookupOutcome
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import RenderTemplate, ResolveContact, ValidateQuery
from ports.resolver import ResolverPort
from services.errors import DirectoryLookupError, QueryValidationError


logger = logging.getLogger(__name__)

MSG_FOUND = "Company information retrieved successfully"
MSG_INVALID = "Please enter a company name"
MSG_NOT_FOUND = "No HR contact found for this company"
MSG_FAILED = "Failed to retrieve company information"


def lookup_company(
    raw_query: Optional[str],
    resolver: ResolverPort,
    linkedin_base_url: Optional[str] = None,
) -> LookupOutcome:
    """Validate, resolve and render one company-name submission.

    Every call is independent: the outcome belongs to this query only. Directory
    failures are logged with their cause and reported with a generic message.
    """
    if linkedin_base_url is None:
        linkedin_base_url = get_settings().linkedin_company_base_url
    pipeline = Pipeline([
        ValidateQuery(),
        ResolveContact(resolver),
        RenderTemplate(linkedin_base_url),
    ])
    ctx = RunContext(query=raw_query)
    try:
        ctx = pipeline.run(ctx)
    except QueryValidationError:
        return LookupOutcome(status="invalid", message=MSG_INVALID)
    except DirectoryLookupError as e:
        logger.error(
            "Contact lookup failed",
            extra={"step": "resolve", "status": "failed", "mode": getattr(resolver, "mode", "-"), "error": str(e)},
        )
        return LookupOutcome(status="failed", message=MSG_FAILED)

    if ctx.info is None:
        return LookupOutcome(status="not_found", message=MSG_NOT_FOUND)
    return LookupOutcome(status="found", message=MSG_FOUND, info=ctx.info)
