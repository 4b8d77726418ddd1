from __future__ import annotations

from typing import Literal

from pydantic import Field

from wem.schemas.common import CamelModel

RiskTier = Literal["Low", "Moderate", "High", "Critical"]

PROFILE_FIELDS = ("job_title", "age_range", "industry", "company_size", "region")


class ProfileRequest(CamelModel):
    job_title: str | None = Field(default=None, max_length=200)
    age_range: str | None = Field(default=None, max_length=40)
    industry: str | None = Field(default=None, max_length=200)
    company_size: str | None = Field(default=None, max_length=100)
    region: str | None = Field(default=None, max_length=100)


class RiskAnalysis(CamelModel):
    risk_score: int = Field(ge=0, le=100)
    risk_tier: str
    summary: str
    what_the_data_says: list[str] = Field(default_factory=list)
    key_potential_disruptors: list[str] = Field(default_factory=list)
    research_references: list[str] = Field(default_factory=list)
