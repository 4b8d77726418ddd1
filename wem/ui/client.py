from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from wem.schemas.insights import (
    ExploreScoreInsights,
    InsightSection,
    PathwayInsight,
    SectionsInsight,
    TextInsight,
)
from wem.schemas.risk import RiskAnalysis
from wem.ui.context import ClientContext

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."


class ApiError(Exception):
    def __init__(self, message: str, *, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class WemClient:
    """Async HTTP client for the WEM API, used by the form and premium views."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_s: float = 120.0,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout_s)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "WemClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _post(self, path: str, payload: Mapping[str, Any]) -> httpx.Response:
        try:
            response = await self._http.post(path, json=dict(payload))
        except httpx.HTTPError as exc:
            logger.warning("wem_client_request_failed path=%s: %s", path, exc)
            raise ApiError(GENERIC_ERROR) from exc
        if response.is_success:
            return response

        message = GENERIC_ERROR
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"].strip():
            message = body["error"]
        raise ApiError(message, status_code=response.status_code)

    async def _post_json(self, path: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        response = await self._post(path, payload)
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(GENERIC_ERROR, status_code=response.status_code) from exc

    async def analyze_risk(self, profile: Mapping[str, str]) -> RiskAnalysis:
        return RiskAnalysis.model_validate(await self._post_json("/api/analyze-risk", profile))

    async def explore_insights(self, context: ClientContext, category: str) -> TextInsight:
        payload = {"category": category, "jobTitle": context.job_title, "industry": context.industry}
        payload.update(context.score_payload())
        return TextInsight.model_validate(await self._post_json("/api/explore-insights", payload))

    async def invest_insights(self, context: ClientContext, category: str) -> TextInsight:
        payload = {"category": category, "jobTitle": context.job_title, "industry": context.industry}
        payload.update(context.score_payload())
        return TextInsight.model_validate(await self._post_json("/api/invest-insights", payload))

    async def pathways_insights(
        self,
        context: ClientContext,
        category: str,
        target_career: str | None = None,
    ) -> SectionsInsight:
        payload: dict[str, Any] = {"category": category, "jobTitle": context.job_title, "industry": context.industry}
        payload.update(context.score_payload())
        if target_career:
            payload["targetCareer"] = target_career
        return SectionsInsight.model_validate(await self._post_json("/api/pathways-insights", payload))

    async def pathway_insight(self, context: ClientContext, pathway_type: str, user_input: str) -> PathwayInsight:
        payload: dict[str, Any] = {"pathwayType": pathway_type, "input": user_input}
        payload.update(context.profile_payload())
        payload.update(context.score_payload())
        return PathwayInsight.model_validate(await self._post_json("/api/pathway-insights", payload))

    async def explore_score(self, context: ClientContext) -> ExploreScoreInsights:
        payload: dict[str, Any] = context.profile_payload()
        payload.update(context.score_payload())
        return ExploreScoreInsights.model_validate(await self._post_json("/api/explore-score", payload))

    async def insights_report(self, context: ClientContext, sections: list[InsightSection]) -> bytes:
        payload: dict[str, Any] = context.profile_payload()
        payload.update(context.score_payload())
        payload["summary"] = context.summary
        payload["sections"] = [section.model_dump(by_alias=True) for section in sections]
        response = await self._post("/api/insights-report", payload)
        return response.content
