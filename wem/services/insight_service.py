from __future__ import annotations

import logging
from typing import Any

from wem.ai.types import InferenceGateway
from wem.core.errors import MalformedResponse
from wem.prompts import (
    EXPLORE_SCORE_BLOCKS,
    build_explore_prompt,
    build_explore_score_prompt,
    build_invest_prompt,
    build_pathway_prompt,
    build_pathways_prompt,
)
from wem.schemas.common import require_fields
from wem.schemas.insights import (
    EXPLORE_SCORE_FIELDS,
    INSIGHT_FIELDS,
    PATHWAY_FIELDS,
    ExploreScoreInsights,
    ExploreScoreRequest,
    InsightRequest,
    InsightSection,
    PathwayInsight,
    PathwayInsightRequest,
    PathwaysInsightRequest,
    SectionsInsight,
    TextInsight,
)
from wem.services.shaping import as_text, require_object

logger = logging.getLogger(__name__)


def _sections_from(raw: Any) -> list[InsightSection]:
    data = require_object(raw)
    items = data.get("sections")
    if not isinstance(items, list):
        raise MalformedResponse("sections missing from model response")
    sections = []
    for item in items:
        if not isinstance(item, dict):
            continue
        title = as_text(item.get("title"))
        content = as_text(item.get("content"))
        if title or content:
            sections.append(InsightSection(title=title, content=content))
    if not sections:
        raise MalformedResponse("model response has no usable sections")
    return sections


async def explore_insight(payload: InsightRequest, gateway: InferenceGateway) -> TextInsight:
    require_fields(payload, INSIGHT_FIELDS)
    prompt = build_explore_prompt(
        payload.category,
        job_title=payload.job_title,
        industry=payload.industry,
        risk_score=payload.risk_score,
        risk_tier=payload.risk_tier,
    )
    content = await gateway.complete(prompt.messages(), prompt.response_format)
    logger.info("explore_insight_completed category=%s", prompt.key)
    return TextInsight(category=payload.category, content=as_text(content))


async def invest_insight(payload: InsightRequest, gateway: InferenceGateway) -> TextInsight:
    require_fields(payload, INSIGHT_FIELDS)
    prompt = build_invest_prompt(
        payload.category,
        job_title=payload.job_title,
        industry=payload.industry,
        risk_score=payload.risk_score,
        risk_tier=payload.risk_tier,
    )
    content = await gateway.complete(prompt.messages(), prompt.response_format)
    logger.info("invest_insight_completed category=%s", prompt.key)
    return TextInsight(category=payload.category, content=as_text(content))


async def pathways_insight(payload: PathwaysInsightRequest, gateway: InferenceGateway) -> SectionsInsight:
    require_fields(payload, INSIGHT_FIELDS)
    prompt = build_pathways_prompt(
        payload.category,
        job_title=payload.job_title,
        industry=payload.industry,
        risk_score=payload.risk_score,
        risk_tier=payload.risk_tier,
        target_career=payload.target_career,
    )
    raw = await gateway.complete(prompt.messages(), prompt.response_format)
    sections = _sections_from(raw)
    logger.info("pathways_insight_completed category=%s sections=%s", prompt.key, len(sections))
    return SectionsInsight(category=payload.category, sections=sections)


async def pathway_insight(payload: PathwayInsightRequest, gateway: InferenceGateway) -> PathwayInsight:
    require_fields(payload, PATHWAY_FIELDS)
    prompt = build_pathway_prompt(
        payload.pathway_type,
        user_input=payload.user_input,
        job_title=payload.job_title,
        industry=payload.industry,
        age_range=payload.age_range,
        region=payload.region,
        risk_score=payload.risk_score,
        risk_tier=payload.risk_tier,
    )
    if gateway.threads_enabled:
        raw = await gateway.run_thread(prompt.system, prompt.user)
    else:
        raw = await gateway.complete(prompt.messages(), prompt.response_format)

    data = require_object(raw)
    insight = PathwayInsight(
        analysis=as_text(data.get("analysis")),
        key_factors=as_text(data.get("keyFactors")),
        next_steps=as_text(data.get("nextSteps")),
        reflection=as_text(data.get("reflection")),
    )
    if not insight.analysis:
        raise MalformedResponse("analysis missing from model response")
    logger.info("pathway_insight_completed type=%s threaded=%s", prompt.key, gateway.threads_enabled)
    return insight


async def explore_score(payload: ExploreScoreRequest, gateway: InferenceGateway) -> ExploreScoreInsights:
    require_fields(payload, EXPLORE_SCORE_FIELDS)
    prompt = build_explore_score_prompt(
        job_title=payload.job_title,
        industry=payload.industry,
        company_size=payload.company_size,
        age_range=payload.age_range,
        region=payload.region,
        risk_score=payload.risk_score,
        risk_tier=payload.risk_tier,
    )
    data = require_object(await gateway.complete(prompt.messages(), prompt.response_format))
    blocks = {field: as_text(data.get(field)) for field in EXPLORE_SCORE_BLOCKS.values()}
    missing = [field for field, text in blocks.items() if not text]
    if missing:
        raise MalformedResponse(f"explore-score response is missing {', '.join(missing)}")
    logger.info("explore_score_completed job_title=%s", payload.job_title)
    return ExploreScoreInsights.model_validate(blocks)
