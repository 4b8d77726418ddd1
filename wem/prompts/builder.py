from __future__ import annotations

from dataclasses import dataclass

from wem.ai.types import ChatMessage, ResponseFormat
from wem.core.errors import MissingFieldsError
from wem.prompts.categories import Section, resolve_category
from wem.prompts.templates import (
    EXPLORE_PROMPTS,
    EXPLORE_SCORE_SYSTEM_PROMPT,
    EXPLORE_SCORE_USER_PROMPT,
    EXPLORE_SYSTEM_PROMPT,
    INVEST_PROMPTS,
    INVEST_SYSTEM_PROMPT,
    PATHWAY_PROMPTS,
    PATHWAY_SYSTEM_PROMPTS,
    PATHWAYS_PROMPTS,
    PATHWAYS_SYSTEM_PROMPT,
    RISK_SYSTEM_PROMPT,
    RISK_USER_PROMPT,
)


@dataclass(frozen=True)
class BuiltPrompt:
    system: str
    user: str
    response_format: ResponseFormat
    key: str | None = None

    def messages(self) -> list[ChatMessage]:
        return [
            ChatMessage(role="system", content=self.system),
            ChatMessage(role="user", content=self.user),
        ]


def _format_score(risk_score: float | int | None) -> str:
    if risk_score is None:
        return "unknown"
    if isinstance(risk_score, float) and risk_score.is_integer():
        return str(int(risk_score))
    return str(risk_score)


def build_risk_prompt(
    *,
    job_title: str,
    age_range: str,
    industry: str,
    company_size: str,
    region: str,
) -> BuiltPrompt:
    user = RISK_USER_PROMPT.format(
        job_title=job_title,
        age_range=age_range,
        industry=industry,
        company_size=company_size,
        region=region,
    )
    return BuiltPrompt(RISK_SYSTEM_PROMPT, user, ResponseFormat.JSON_OBJECT)


def build_explore_prompt(
    category: str,
    *,
    job_title: str,
    industry: str,
    risk_score: float | int,
    risk_tier: str,
) -> BuiltPrompt:
    key = resolve_category(Section.EXPLORE, category)
    user = EXPLORE_PROMPTS[key].format(
        job_title=job_title,
        industry=industry,
        risk_score=_format_score(risk_score),
        risk_tier=risk_tier,
    )
    return BuiltPrompt(EXPLORE_SYSTEM_PROMPT, user, ResponseFormat.TEXT, key=key)


def build_invest_prompt(
    category: str,
    *,
    job_title: str,
    industry: str,
    risk_score: float | int,
    risk_tier: str,
) -> BuiltPrompt:
    key = resolve_category(Section.INVEST, category)
    user = INVEST_PROMPTS[key].format(
        job_title=job_title,
        industry=industry,
        risk_score=_format_score(risk_score),
        risk_tier=risk_tier,
    )
    return BuiltPrompt(INVEST_SYSTEM_PROMPT, user, ResponseFormat.TEXT, key=key)


def build_pathways_prompt(
    category: str,
    *,
    job_title: str,
    industry: str,
    risk_score: float | int,
    risk_tier: str,
    target_career: str | None = None,
) -> BuiltPrompt:
    key = resolve_category(Section.PATHWAYS, category)
    target = (target_career or "").strip()
    if key == "career" and not target:
        raise MissingFieldsError(
            ["targetCareer"],
            "Target career is required for career switch analysis",
        )
    user = PATHWAYS_PROMPTS[key].format(
        job_title=job_title,
        industry=industry,
        risk_score=_format_score(risk_score),
        risk_tier=risk_tier,
        target_career=target,
    )
    return BuiltPrompt(PATHWAYS_SYSTEM_PROMPT, user, ResponseFormat.JSON_OBJECT, key=key)


def build_pathway_prompt(
    pathway_type: str,
    *,
    user_input: str,
    job_title: str,
    industry: str,
    age_range: str,
    region: str,
    risk_score: float | int | None = None,
    risk_tier: str | None = None,
) -> BuiltPrompt:
    key = resolve_category(Section.PATHWAY, pathway_type)
    risk_line = ""
    if risk_score is not None and risk_tier:
        risk_line = f"\n- Displacement Risk: {_format_score(risk_score)} ({risk_tier})"
    user = PATHWAY_PROMPTS[key].format(
        job_title=job_title,
        industry=industry,
        age_range=age_range,
        region=region,
        risk_line=risk_line,
        user_input=user_input.strip(),
    )
    return BuiltPrompt(PATHWAY_SYSTEM_PROMPTS[key], user, ResponseFormat.JSON_OBJECT, key=key)


def build_explore_score_prompt(
    *,
    job_title: str,
    industry: str,
    company_size: str,
    age_range: str,
    region: str,
    risk_score: float | int,
    risk_tier: str,
) -> BuiltPrompt:
    user = EXPLORE_SCORE_USER_PROMPT.format(
        job_title=job_title,
        industry=industry,
        company_size=company_size,
        age_range=age_range,
        region=region,
        risk_score=_format_score(risk_score),
        risk_tier=risk_tier,
    )
    return BuiltPrompt(EXPLORE_SCORE_SYSTEM_PROMPT, user, ResponseFormat.JSON_OBJECT)
