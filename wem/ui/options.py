from __future__ import annotations

from wem.prompts import Section, category_labels

AGE_RANGES = ("18-22", "23-29", "30-39", "40+")

# (label shown in the form, value sent to the API)
INDUSTRIES = (
    ("Financial Services", "Finance and Insurance"),
    ("Tech & Digital Services", "Information"),
    ("Professional Services", "Professional, Scientific, and Technical Services"),
    ("Healthcare", "Health Care and Social Assistance"),
    ("Education", "Educational Services"),
    ("Manufacturing", "Manufacturing"),
    ("Energy & Utilities", "Utilities"),
    ("Transportation & Logistics", "Transportation and Warehousing"),
    ("Retail & Consumer Goods", "Retail Trade"),
    ("Government & Public Sector", "Public Administration"),
    ("Real Estate & Construction", "Construction"),
    ("Hospitality & Food Services", "Accommodation and Food Services"),
    ("Other", "Other"),
)

COMPANY_SIZES = (
    ("Small (1–1,000 employees)", "Small"),
    ("Medium (1,001–10,000 employees)", "Medium"),
    ("Large (10,000+ employees)", "Large"),
)

REGIONS = ("United States",)

REGION_NOTE = (
    "Disruption scoring is based on U.S. job and labor market data - Global scoring is in development"
)


def form_options() -> dict:
    return {
        "ageRanges": list(AGE_RANGES),
        "industries": [{"label": label, "value": value} for label, value in INDUSTRIES],
        "companySizes": [{"label": label, "value": value} for label, value in COMPANY_SIZES],
        "regions": list(REGIONS),
        "regionNote": REGION_NOTE,
        "categories": {
            "explore": list(category_labels(Section.EXPLORE)),
            "invest": list(category_labels(Section.INVEST)),
            "pathways": list(category_labels(Section.PATHWAYS)),
        },
    }
