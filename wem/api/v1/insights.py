import logging

from fastapi import APIRouter, Depends, Request

from wem.ai.types import InferenceGateway
from wem.api.deps import get_gateway
from wem.core.errors import InferenceError, InsightGenerationError
from wem.core.rate_limit import rate_limit
from wem.schemas.insights import (
    ExploreScoreInsights,
    ExploreScoreRequest,
    InsightRequest,
    InvestInsightRequest,
    PathwayInsight,
    PathwayInsightRequest,
    PathwaysInsightRequest,
    SectionsInsight,
    TextInsight,
)
from wem.services.insight_service import (
    explore_insight,
    explore_score,
    invest_insight,
    pathway_insight,
    pathways_insight,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _insight_failed(route: str, message: str, exc: InferenceError) -> InsightGenerationError:
    logger.warning("insight_failed route=%s code=%s: %s", route, exc.code, exc)
    return InsightGenerationError(message)


@router.post("/explore-insights", response_model=TextInsight)
@rate_limit()
async def explore_insights_route(
    request: Request,
    payload: InsightRequest,
    gateway: InferenceGateway = Depends(get_gateway),
):
    _ = request
    try:
        return await explore_insight(payload, gateway)
    except InferenceError as exc:
        raise _insight_failed("explore-insights", "Failed to generate exploration insight", exc) from exc


@router.post("/invest-insights", response_model=TextInsight)
@rate_limit()
async def invest_insights_route(
    request: Request,
    payload: InvestInsightRequest,
    gateway: InferenceGateway = Depends(get_gateway),
):
    _ = request
    try:
        return await invest_insight(payload, gateway)
    except InferenceError as exc:
        raise _insight_failed("invest-insights", "Failed to generate investment insight", exc) from exc


@router.post("/pathways-insights", response_model=SectionsInsight)
@rate_limit()
async def pathways_insights_route(
    request: Request,
    payload: PathwaysInsightRequest,
    gateway: InferenceGateway = Depends(get_gateway),
):
    _ = request
    try:
        return await pathways_insight(payload, gateway)
    except InferenceError as exc:
        raise _insight_failed("pathways-insights", "Failed to generate pathways insight", exc) from exc


@router.post("/pathway-insights", response_model=PathwayInsight)
@rate_limit()
async def pathway_insights_route(
    request: Request,
    payload: PathwayInsightRequest,
    gateway: InferenceGateway = Depends(get_gateway),
):
    _ = request
    try:
        return await pathway_insight(payload, gateway)
    except InferenceError as exc:
        raise _insight_failed("pathway-insights", "Failed to generate pathway insight", exc) from exc


@router.post("/explore-score", response_model=ExploreScoreInsights)
@rate_limit()
async def explore_score_route(
    request: Request,
    payload: ExploreScoreRequest,
    gateway: InferenceGateway = Depends(get_gateway),
):
    _ = request
    try:
        return await explore_score(payload, gateway)
    except InferenceError as exc:
        raise _insight_failed("explore-score", "Failed to generate insights", exc) from exc
