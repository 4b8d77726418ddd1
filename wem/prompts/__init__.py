from .builder import (
    BuiltPrompt,
    build_explore_prompt,
    build_explore_score_prompt,
    build_invest_prompt,
    build_pathway_prompt,
    build_pathways_prompt,
    build_risk_prompt,
)
from .categories import (
    EXPLORE_CATEGORIES,
    EXPLORE_SCORE_BLOCKS,
    INVEST_CATEGORIES,
    PATHWAY_TYPES,
    PATHWAYS_CATEGORIES,
    Section,
    category_keys,
    category_labels,
    resolve_category,
)

__all__ = [
    "BuiltPrompt",
    "build_explore_prompt",
    "build_explore_score_prompt",
    "build_invest_prompt",
    "build_pathway_prompt",
    "build_pathways_prompt",
    "build_risk_prompt",
    "EXPLORE_CATEGORIES",
    "EXPLORE_SCORE_BLOCKS",
    "INVEST_CATEGORIES",
    "PATHWAY_TYPES",
    "PATHWAYS_CATEGORIES",
    "Section",
    "category_keys",
    "category_labels",
    "resolve_category",
]
