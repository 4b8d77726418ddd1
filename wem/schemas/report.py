from __future__ import annotations

from pydantic import Field

from wem.schemas.insights import InsightSection
from wem.schemas.risk import ProfileRequest

REPORT_FIELDS = ("job_title", "age_range", "industry", "company_size", "region", "risk_score", "risk_tier")


class ReportRequest(ProfileRequest):
    risk_score: float | None = None
    risk_tier: str | None = Field(default=None, max_length=40)
    summary: str | None = Field(default=None, max_length=8000)
    sections: list[InsightSection] = Field(default_factory=list, max_length=40)
