"""Profile and score carried between the form and the premium view as query parameters."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlencode

from pydantic import Field, ValidationError as PydanticValidationError

from wem.core.errors import MissingContextError
from wem.schemas.common import CamelModel
from wem.schemas.risk import ProfileRequest, RiskAnalysis

REQUIRED_PARAMS = ("jobTitle", "ageRange", "industry", "companySize", "region", "riskScore", "riskTier")

PREMIUM_PATH = "/premium-insights"


class ClientContext(CamelModel):
    job_title: str
    age_range: str
    industry: str
    company_size: str
    region: str
    risk_score: int = Field(ge=0, le=100)
    risk_tier: str
    summary: str | None = None

    @classmethod
    def from_analysis(cls, profile: Mapping[str, str] | ProfileRequest, analysis: RiskAnalysis) -> "ClientContext":
        if isinstance(profile, ProfileRequest):
            profile = profile.model_dump(by_alias=True)
        return cls(
            job_title=profile["jobTitle"],
            age_range=profile["ageRange"],
            industry=profile["industry"],
            company_size=profile["companySize"],
            region=profile["region"],
            risk_score=analysis.risk_score,
            risk_tier=analysis.risk_tier,
            summary=analysis.summary,
        )

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "ClientContext":
        missing = [name for name in REQUIRED_PARAMS if not (params.get(name) or "").strip()]
        if missing:
            raise MissingContextError(
                f"Missing context parameters: {', '.join(missing)}",
                details={"fields": missing},
            )
        values = {name: params[name].strip() for name in REQUIRED_PARAMS}
        if (params.get("summary") or "").strip():
            values["summary"] = params["summary"].strip()
        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            raise MissingContextError("Invalid context parameters", details={"errors": exc.errors()}) from exc

    def to_query(self) -> dict[str, str]:
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: str(value) for key, value in data.items()}

    def premium_url(self, base: str = "") -> str:
        return f"{base}{PREMIUM_PATH}?{urlencode(self.to_query())}"

    def profile_payload(self) -> dict[str, str]:
        return {
            "jobTitle": self.job_title,
            "ageRange": self.age_range,
            "industry": self.industry,
            "companySize": self.company_size,
            "region": self.region,
        }

    def score_payload(self) -> dict[str, object]:
        return {"riskScore": self.risk_score, "riskTier": self.risk_tier}
