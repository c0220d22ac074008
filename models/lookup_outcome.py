from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from .company_info import CompanyInfo


OutcomeStatus = Literal["found", "invalid", "not_found", "failed"]


class LookupOutcome(BaseModel):
    """What the presentation layer receives for one submission.

    ``info`` is set only when ``status == "found"``; every other status carries
    a user-facing ``message`` and nothing else.
    """

    status: OutcomeStatus
    message: str
    info: Optional[CompanyInfo] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def ok(self) -> bool:
        return self.status == "found"
