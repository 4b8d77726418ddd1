from __future__ import annotations

import logging
import math
from typing import Any

from wem.ai.types import InferenceGateway
from wem.core.errors import InferenceError, MalformedResponse
from wem.prompts import build_risk_prompt
from wem.schemas.common import require_fields
from wem.schemas.risk import PROFILE_FIELDS, ProfileRequest, RiskAnalysis
from wem.services.shaping import as_string_list, as_text, require_object

logger = logging.getLogger(__name__)

FALLBACK_SCORE = 50
FALLBACK_TIER = "Moderate"

# Tier names older prompt versions produced.
LEGACY_TIERS = {"very high": "Critical"}

MISSING_PROFILE_MESSAGE = (
    "Missing required fields. Please provide jobTitle, ageRange, industry, companySize, and region."
)


def clamp_score(value: Any) -> int:
    if isinstance(value, bool):
        raise MalformedResponse(f"riskScore is not numeric: {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().rstrip("%"))
        except ValueError as exc:
            raise MalformedResponse(f"riskScore is not numeric: {value!r}") from exc
    else:
        raise MalformedResponse("riskScore missing from model response")
    if not math.isfinite(number):
        raise MalformedResponse(f"riskScore is not finite: {value!r}")
    return max(0, min(100, int(round(number))))


def tier_for_score(score: int) -> str:
    if score < 25:
        return "Low"
    if score < 50:
        return "Moderate"
    if score < 75:
        return "High"
    return "Critical"


def normalize_tier(value: Any, score: int) -> str:
    """Map legacy tier names; anything else the model says is kept as-is."""
    tier = as_text(value)
    if not tier:
        return tier_for_score(score)
    return LEGACY_TIERS.get(tier.lower(), tier)


def to_risk_analysis(raw: Any) -> RiskAnalysis:
    data = require_object(raw)
    score = clamp_score(data.get("riskScore"))
    summary = as_text(data.get("summary") or data.get("summaryOfFindings"))
    if not summary:
        raise MalformedResponse("summary missing from model response")
    return RiskAnalysis(
        risk_score=score,
        risk_tier=normalize_tier(data.get("riskTier"), score),
        summary=summary,
        what_the_data_says=as_string_list(data.get("whatTheDataSays")),
        key_potential_disruptors=as_string_list(data.get("keyPotentialDisruptors")),
        research_references=as_string_list(data.get("researchReferences")),
    )


def fallback_analysis(profile: ProfileRequest) -> RiskAnalysis:
    return RiskAnalysis(
        risk_score=FALLBACK_SCORE,
        risk_tier=FALLBACK_TIER,
        summary=(
            f"Based on your input as a {profile.job_title} (age {profile.age_range}) in the "
            f"{profile.industry} industry, working for a {profile.company_size} company in "
            f"{profile.region}, we've assessed your role's displacement risk as moderate. "
            "However, we encountered an issue getting detailed analysis. Please try again later."
        ),
        what_the_data_says=[
            "Current market conditions suggest moderate disruption risk",
            "Your industry is experiencing ongoing technological changes",
            "Company size may influence adaptation requirements",
        ],
        key_potential_disruptors=[
            "Emerging automation technologies",
            "Changing industry dynamics",
            "Economic factors",
        ],
        research_references=[
            "Industry trend reports",
            "Market analysis studies",
            "Economic forecasts",
        ],
    )


async def analyze_risk(payload: ProfileRequest, gateway: InferenceGateway) -> RiskAnalysis:
    require_fields(payload, PROFILE_FIELDS, MISSING_PROFILE_MESSAGE)

    prompt = build_risk_prompt(
        job_title=payload.job_title.strip(),
        age_range=payload.age_range.strip(),
        industry=payload.industry.strip(),
        company_size=payload.company_size.strip(),
        region=payload.region.strip(),
    )
    try:
        raw = await gateway.complete(prompt.messages(), prompt.response_format)
        analysis = to_risk_analysis(raw)
    except InferenceError as exc:
        logger.warning(
            "risk_analysis_fallback job_title=%s industry=%s: %s",
            payload.job_title,
            payload.industry,
            exc,
        )
        return fallback_analysis(payload)
    except Exception:
        logger.exception(
            "risk_analysis_fallback job_title=%s industry=%s: unexpected gateway failure",
            payload.job_title,
            payload.industry,
        )
        return fallback_analysis(payload)

    logger.info(
        "risk_analysis_completed job_title=%s score=%s tier=%s",
        payload.job_title,
        analysis.risk_score,
        analysis.risk_tier,
    )
    return analysis
