"""Headless state for the assessment form and the premium insights view.

The form runs ``idle -> submitting -> success | error``. Each premium panel
runs ``idle -> loading -> content | error`` on its own. Every panel request
carries an id and only the newest one may write the panel, so a slow answer
for an earlier category never replaces the answer for the current one.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable

from wem.prompts import EXPLORE_SCORE_BLOCKS, Section, resolve_category
from wem.core.errors import UnknownCategoryError
from wem.schemas.insights import ExploreScoreInsights, InsightSection
from wem.schemas.risk import RiskAnalysis
from wem.ui.client import GENERIC_ERROR, ApiError, WemClient
from wem.ui.context import ClientContext

logger = logging.getLogger(__name__)

FORM_FIELDS = ("jobTitle", "ageRange", "industry", "companySize", "region")


class FormPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class PanelPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    CONTENT = "content"
    ERROR = "error"


class AssessmentForm:
    def __init__(self, client: WemClient):
        self._client = client
        self.fields: dict[str, str] = {name: "" for name in FORM_FIELDS}
        self.phase = FormPhase.IDLE
        self.result: RiskAnalysis | None = None
        self.error: str | None = None

    def update(self, **values: str) -> None:
        for name, value in values.items():
            if name not in self.fields:
                raise KeyError(name)
            self.fields[name] = value

    def missing(self) -> list[str]:
        return [name for name in FORM_FIELDS if not self.fields[name].strip()]

    async def submit(self) -> RiskAnalysis | None:
        missing = self.missing()
        if missing:
            self.phase = FormPhase.ERROR
            self.error = f"Please complete: {', '.join(missing)}"
            return None

        self.phase = FormPhase.SUBMITTING
        self.error = None
        try:
            result = await self._client.analyze_risk(self.fields)
        except ApiError as exc:
            self.phase = FormPhase.ERROR
            self.error = exc.message
            self.result = None
            return None

        self.phase = FormPhase.SUCCESS
        self.result = result
        return result

    def premium_context(self) -> ClientContext:
        if self.phase != FormPhase.SUCCESS or self.result is None:
            raise RuntimeError("No risk analysis to carry into premium insights")
        return ClientContext.from_analysis(self.fields, self.result)


PanelFetch = Callable[..., Awaitable[list[InsightSection]]]


class InsightPanel:
    def __init__(self, section: Section, fetch: PanelFetch):
        self.section = section
        self._fetch = fetch
        self._request_id = 0
        self.active: str | None = None
        self.phase = PanelPhase.IDLE
        self.content: list[InsightSection] = []
        self.error: str | None = None

    @property
    def request_id(self) -> int:
        return self._request_id

    async def select(self, category: str, **extra: str | None) -> bool:
        """Load `category`; returns False when a newer selection superseded it."""
        self._request_id += 1
        request_id = self._request_id
        self.active = category
        self.content = []
        try:
            resolve_category(self.section, category)
        except UnknownCategoryError as exc:
            self.phase = PanelPhase.ERROR
            self.error = exc.message
            return False

        self.phase = PanelPhase.LOADING
        self.error = None

        try:
            content = await self._fetch(category, **extra)
        except ApiError as exc:
            return self._fail(request_id, exc.message)
        except Exception:
            logger.warning(
                "panel_fetch_failed section=%s category=%s", self.section.value, category, exc_info=True
            )
            return self._fail(request_id, GENERIC_ERROR)

        if request_id != self._request_id:
            logger.debug("stale_panel_response section=%s category=%s", self.section.value, category)
            return False
        self.phase = PanelPhase.CONTENT
        self.content = content
        return True

    def _fail(self, request_id: int, message: str) -> bool:
        if request_id != self._request_id:
            return False
        self.phase = PanelPhase.ERROR
        self.error = message
        return True


PATHWAY_HEADINGS = (
    ("analysis", "Analysis"),
    ("key_factors", "Key Factors"),
    ("next_steps", "Next Steps"),
    ("reflection", "Reflection"),
)


class PremiumInsights:
    """Premium view: one panel per insight section plus the pathway narrative.

    With ``explore_from_score`` the explore panel is answered from a single
    explore-score call; each explore label reads its own block of that response.
    """

    def __init__(self, context: ClientContext, client: WemClient, explore_from_score: bool = False):
        self.context = context
        self._client = client
        self._score_insights: ExploreScoreInsights | None = None
        explore_fetch = self._fetch_explore_block if explore_from_score else self._fetch_explore
        self.explore = InsightPanel(Section.EXPLORE, explore_fetch)
        self.invest = InsightPanel(Section.INVEST, self._fetch_invest)
        self.pathways = InsightPanel(Section.PATHWAYS, self._fetch_pathways)
        self.pathway = InsightPanel(Section.PATHWAY, self._fetch_pathway)

    async def _fetch_explore(self, category: str) -> list[InsightSection]:
        insight = await self._client.explore_insights(self.context, category)
        return [InsightSection(title=category, content=insight.content)]

    async def _fetch_explore_block(self, category: str) -> list[InsightSection]:
        if self._score_insights is None:
            self._score_insights = await self._client.explore_score(self.context)
        blocks = self._score_insights.model_dump(by_alias=True)
        field = EXPLORE_SCORE_BLOCKS[resolve_category(Section.EXPLORE, category)]
        return [InsightSection(title=category, content=blocks[field])]

    async def _fetch_invest(self, category: str) -> list[InsightSection]:
        insight = await self._client.invest_insights(self.context, category)
        return [InsightSection(title=category, content=insight.content)]

    async def _fetch_pathways(self, category: str, target_career: str | None = None) -> list[InsightSection]:
        insight = await self._client.pathways_insights(self.context, category, target_career)
        return insight.sections

    async def _fetch_pathway(self, category: str, user_input: str | None = None) -> list[InsightSection]:
        insight = await self._client.pathway_insight(self.context, category, user_input or "")
        return [
            InsightSection(title=title, content=getattr(insight, name))
            for name, title in PATHWAY_HEADINGS
            if getattr(insight, name)
        ]

    async def explore_pathway(self, pathway_type: str, user_input: str) -> bool:
        return await self.pathway.select(pathway_type, user_input=user_input)

    def collected_sections(self) -> list[InsightSection]:
        sections: list[InsightSection] = []
        for panel in (self.explore, self.invest, self.pathways, self.pathway):
            if panel.phase == PanelPhase.CONTENT:
                sections.extend(panel.content)
        return sections

    async def export_report(self) -> bytes:
        return await self._client.insights_report(self.context, self.collected_sections())
