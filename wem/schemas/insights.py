from __future__ import annotations

from pydantic import AliasChoices, Field

from wem.schemas.common import CamelModel
from wem.schemas.risk import ProfileRequest

INSIGHT_FIELDS = ("category", "job_title", "industry", "risk_score", "risk_tier")
PATHWAY_FIELDS = ("pathway_type", "user_input", "job_title", "industry", "age_range", "region")
EXPLORE_SCORE_FIELDS = ("job_title", "industry", "company_size", "age_range", "region", "risk_score", "risk_tier")


class InsightRequest(CamelModel):
    category: str | None = Field(default=None, max_length=100)
    job_title: str | None = Field(default=None, max_length=200)
    industry: str | None = Field(default=None, max_length=200)
    risk_score: float | None = None
    risk_tier: str | None = Field(default=None, max_length=40)


class InvestInsightRequest(InsightRequest):
    # older clients sent the category under "skills"
    category: str | None = Field(
        default=None,
        max_length=100,
        validation_alias=AliasChoices("category", "skills"),
    )


class PathwaysInsightRequest(InsightRequest):
    target_career: str | None = Field(default=None, max_length=300)


class PathwayInsightRequest(CamelModel):
    pathway_type: str | None = Field(default=None, max_length=100)
    user_input: str | None = Field(default=None, alias="input", max_length=4000)
    job_title: str | None = Field(default=None, max_length=200)
    industry: str | None = Field(default=None, max_length=200)
    age_range: str | None = Field(default=None, max_length=40)
    region: str | None = Field(default=None, max_length=100)
    risk_score: float | None = None
    risk_tier: str | None = Field(default=None, max_length=40)


class ExploreScoreRequest(ProfileRequest):
    risk_score: float | None = None
    risk_tier: str | None = Field(default=None, max_length=40)


class TextInsight(CamelModel):
    category: str
    content: str


class InsightSection(CamelModel):
    title: str
    content: str


class SectionsInsight(CamelModel):
    category: str
    sections: list[InsightSection] = Field(default_factory=list)


class PathwayInsight(CamelModel):
    analysis: str
    key_factors: str
    next_steps: str
    reflection: str


class ExploreScoreInsights(CamelModel):
    industry_trends: str
    tech_disruptors: str
    role_considerations: str
