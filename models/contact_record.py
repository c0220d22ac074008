from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ContactRecord(BaseModel):
    """Directory entry shape: one HR contact for a company (read-only)."""

    name: str
    company: str
    email: str

    model_config = ConfigDict(extra="ignore", frozen=True)
