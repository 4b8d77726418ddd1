from __future__ import annotations

from enum import Enum

from wem.core.errors import UnknownCategoryError


class Section(str, Enum):
    EXPLORE = "explore"
    INVEST = "invest"
    PATHWAYS = "pathways"
    PATHWAY = "pathway"


# UI label -> internal template key. Order is the order the UI shows buttons.
EXPLORE_CATEGORIES: dict[str, str] = {
    "Industry & Market Trends": "industry",
    "Technology Disruptors": "technology",
    "Key Role Considerations": "role",
}

INVEST_CATEGORIES: dict[str, str] = {
    "Skills Needed": "skills",
    "Reskilling Options": "reskilling",
    "Adjacent Roles": "adjacent",
}

PATHWAYS_CATEGORIES: dict[str, str] = {
    "Start Your Own Business": "business",
    "Freelancing Opportunities": "freelance",
    "Teaching & Mentoring": "teaching",
    "Switch Careers": "career",
}

PATHWAY_TYPES: dict[str, str] = {
    "Start Your Own Business": "business",
    "Switch Careers": "career",
}

# explore key -> field of the explore-score response that answers it
EXPLORE_SCORE_BLOCKS: dict[str, str] = {
    "industry": "industryTrends",
    "technology": "techDisruptors",
    "role": "roleConsiderations",
}

_TABLES: dict[Section, dict[str, str]] = {
    Section.EXPLORE: EXPLORE_CATEGORIES,
    Section.INVEST: INVEST_CATEGORIES,
    Section.PATHWAYS: PATHWAYS_CATEGORIES,
    Section.PATHWAY: PATHWAY_TYPES,
}


def category_labels(section: Section) -> tuple[str, ...]:
    return tuple(_TABLES[section])


def category_keys(section: Section) -> frozenset[str]:
    return frozenset(_TABLES[section].values())


def resolve_category(section: Section, category: str | None) -> str:
    """Map a UI label (or an internal key) to its template key.

    Raises UnknownCategoryError instead of falling back to a default template.
    """
    value = (category or "").strip()
    table = _TABLES[section]
    if value in table:
        return table[value]
    if value in category_keys(section):
        return value
    raise UnknownCategoryError(value, section.value)
