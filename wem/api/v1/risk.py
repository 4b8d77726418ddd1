from fastapi import APIRouter, Depends, Request

from wem.ai.types import InferenceGateway
from wem.api.deps import get_gateway
from wem.core.rate_limit import rate_limit
from wem.schemas.risk import ProfileRequest, RiskAnalysis
from wem.services.risk_service import analyze_risk

router = APIRouter()


@router.post(
    "/analyze-risk",
    response_model=RiskAnalysis,
    summary="Analyze displacement risk",
    description="Score a job profile's AI displacement risk. Falls back to a moderate default when the model is unavailable.",
)
@rate_limit()
async def analyze_risk_route(
    request: Request,
    payload: ProfileRequest,
    gateway: InferenceGateway = Depends(get_gateway),
):
    _ = request
    return await analyze_risk(payload, gateway)
