from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyInfo(BaseModel):
    """Rendered lookup result; serialized with the camelCase keys the front end reads."""

    hr_email: str = Field(alias="hrEmail")
    linkedin_url: str = Field(alias="linkedinUrl")
    email_template: str = Field(alias="emailTemplate")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
