import io
import logging
import re

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from wem.core.config import settings
from wem.core.rate_limit import rate_limit
from wem.schemas.report import ReportRequest
from wem.services.report_service import render_report_pdf

router = APIRouter()
logger = logging.getLogger(__name__)


def _download_name(job_title: str | None) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (job_title or "").lower()).strip("-")
    return f"{slug or 'wem'}-risk-report.pdf"


@router.post("/insights-report", summary="Export insights as PDF")
@rate_limit(settings.report_rate_limit)
async def insights_report_route(request: Request, payload: ReportRequest):
    _ = request
    pdf_bytes = render_report_pdf(payload)
    logger.info("insights_report_rendered sections=%s bytes=%s", len(payload.sections), len(pdf_bytes))
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{_download_name(payload.job_title)}"'},
    )
