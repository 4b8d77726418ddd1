"""Paginated PDF export of a profile, its risk score and collected insights."""

from __future__ import annotations

import html
import io
import re
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from wem.schemas.common import require_fields
from wem.schemas.report import REPORT_FIELDS, ReportRequest

ACCENT = colors.HexColor("#4285f4")
MUTED = colors.HexColor("#5f6368")
RULE = colors.HexColor("#dadce0")

TIER_COLORS = {
    "Low": colors.HexColor("#34a853"),
    "Moderate": colors.HexColor("#4285f4"),
    "High": colors.HexColor("#f44336"),
    "Critical": colors.HexColor("#d32f2f"),
}

_BULLET_RE = re.compile(r"^(?:[-*•]|\d+[.)])\s+")


def build_report_styles() -> dict[str, ParagraphStyle]:
    sample = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "title",
            parent=sample["Title"],
            fontName="Helvetica-Bold",
            fontSize=22,
            leading=26,
            textColor=ACCENT,
            spaceAfter=4,
        ),
        "subtitle": ParagraphStyle(
            "subtitle",
            parent=sample["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=13,
            textColor=MUTED,
            spaceAfter=6,
        ),
        "section": ParagraphStyle(
            "section",
            parent=sample["Heading2"],
            fontName="Helvetica-Bold",
            fontSize=13,
            leading=16,
            textColor=colors.black,
            spaceBefore=8,
            spaceAfter=4,
        ),
        "body": ParagraphStyle(
            "body",
            parent=sample["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=14,
            spaceAfter=4,
        ),
        "bullet": ParagraphStyle(
            "bullet",
            parent=sample["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=14,
            leftIndent=12,
            bulletIndent=2,
            spaceAfter=2,
        ),
        "score": ParagraphStyle(
            "score",
            parent=sample["Normal"],
            fontName="Helvetica-Bold",
            fontSize=28,
            leading=32,
            textColor=colors.white,
        ),
    }


def _format_score(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def _content_flowables(text: str, styles: dict[str, ParagraphStyle]) -> list[Any]:
    flowables: list[Any] = []
    for line in text.splitlines():
        content = line.strip()
        if not content:
            continue
        if _BULLET_RE.match(content):
            bullet = html.escape(_BULLET_RE.sub("", content, count=1))
            flowables.append(Paragraph(bullet, styles["bullet"], bulletText="•"))
        else:
            flowables.append(Paragraph(html.escape(content), styles["body"]))
    return flowables


def draw_page_footer(pdf: canvas.Canvas, doc: SimpleDocTemplate) -> None:
    pdf.saveState()
    pdf.setFont("Helvetica", 8)
    pdf.setFillColor(MUTED)
    pdf.drawString(doc.leftMargin, 20, "Workforce Evolution Model - displacement risk report")
    pdf.drawRightString(doc.pagesize[0] - doc.rightMargin, 20, f"Page {pdf.getPageNumber()}")
    pdf.restoreState()


def render_report_pdf(payload: ReportRequest) -> bytes:
    require_fields(payload, REPORT_FIELDS)
    styles = build_report_styles()

    output = io.BytesIO()
    doc = SimpleDocTemplate(
        output,
        pagesize=A4,
        leftMargin=44,
        rightMargin=44,
        topMargin=42,
        bottomMargin=40,
        title=f"{payload.job_title} displacement risk report",
        author="Workforce Evolution Model",
    )

    story: list[Any] = [
        Paragraph("Workforce Evolution Model", styles["title"]),
        Paragraph("AI displacement risk report", styles["subtitle"]),
        HRFlowable(width="100%", color=RULE, thickness=0.9, spaceBefore=2, spaceAfter=8),
    ]

    profile_rows = [
        ["Job Title", payload.job_title],
        ["Age Range", payload.age_range],
        ["Industry", payload.industry],
        ["Organization Size", payload.company_size],
        ["Region", payload.region],
    ]
    profile_table = Table(
        [[Paragraph(html.escape(k), styles["body"]), Paragraph(html.escape(v), styles["body"])] for k, v in profile_rows],
        colWidths=[doc.width * 0.3, doc.width * 0.7],
    )
    profile_table.setStyle(
        TableStyle(
            [
                ("LINEBELOW", (0, 0), (-1, -1), 0.4, RULE),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("TEXTCOLOR", (0, 0), (0, -1), MUTED),
            ]
        )
    )
    story.append(profile_table)
    story.append(Spacer(1, 12))

    tier = payload.risk_tier.strip()
    score_table = Table(
        [[
            Paragraph(_format_score(payload.risk_score), styles["score"]),
            Paragraph(f"{html.escape(tier)} risk", styles["score"]),
        ]],
        colWidths=[doc.width * 0.3, doc.width * 0.7],
    )
    score_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), TIER_COLORS.get(tier, ACCENT)),
                ("LEFTPADDING", (0, 0), (-1, -1), 12),
                ("TOPPADDING", (0, 0), (-1, -1), 10),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 12),
            ]
        )
    )
    story.append(score_table)
    story.append(Spacer(1, 8))

    if payload.summary and payload.summary.strip():
        story.append(Paragraph("Summary", styles["section"]))
        story.extend(_content_flowables(payload.summary, styles))

    for section in payload.sections:
        story.append(Paragraph(html.escape(section.title or "Insight"), styles["section"]))
        story.append(HRFlowable(width="100%", color=RULE, thickness=0.5, spaceBefore=1, spaceAfter=4))
        story.extend(_content_flowables(section.content, styles))
        story.append(Spacer(1, 6))

    doc.build(story, onFirstPage=draw_page_footer, onLaterPages=draw_page_footer)
    output.seek(0)
    return output.getvalue()
