import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wem.ai.types import ResponseFormat
from wem.core.errors import MissingFieldsError, UnknownCategoryError
from wem.prompts import (
    EXPLORE_SCORE_BLOCKS,
    Section,
    build_explore_prompt,
    build_invest_prompt,
    build_pathway_prompt,
    build_pathways_prompt,
    build_risk_prompt,
    category_labels,
    resolve_category,
)
from wem.prompts.templates import EXPLORE_PROMPTS, INVEST_PROMPTS, PATHWAYS_PROMPTS
from wem.ui.options import form_options

SCORE = {"job_title": "Accountant", "industry": "Finance", "risk_score": 72, "risk_tier": "High"}


class CategoryMappingTests(unittest.TestCase):
    def test_every_ui_label_maps_to_its_own_template(self):
        ui = form_options()["categories"]
        cases = [
            (Section.EXPLORE, ui["explore"], EXPLORE_PROMPTS),
            (Section.INVEST, ui["invest"], INVEST_PROMPTS),
            (Section.PATHWAYS, ui["pathways"], PATHWAYS_PROMPTS),
        ]
        for section, labels, templates in cases:
            keys = [resolve_category(section, label) for label in labels]
            self.assertEqual(len(set(keys)), len(labels), section)
            self.assertEqual(set(keys), set(templates), section)

    def test_unknown_label_raises_instead_of_defaulting(self):
        with self.assertRaises(UnknownCategoryError):
            resolve_category(Section.EXPLORE, "Role Evolution")
        with self.assertRaises(UnknownCategoryError):
            resolve_category(Section.INVEST, "")
        with self.assertRaises(UnknownCategoryError):
            resolve_category(Section.PATHWAY, "freelance")

    def test_internal_keys_are_accepted(self):
        self.assertEqual(resolve_category(Section.INVEST, "reskilling"), "reskilling")
        self.assertEqual(resolve_category(Section.PATHWAY, "Switch Careers"), "career")

    def test_explore_score_fields_cover_explore_keys(self):
        keys = {resolve_category(Section.EXPLORE, label) for label in category_labels(Section.EXPLORE)}
        self.assertEqual(set(EXPLORE_SCORE_BLOCKS), keys)


class PromptBuilderTests(unittest.TestCase):
    def test_risk_prompt_is_json_and_mentions_profile(self):
        prompt = build_risk_prompt(
            job_title="Accountant",
            age_range="30-39",
            industry="Finance",
            company_size="51-200 employees",
            region="North America",
        )
        self.assertEqual(prompt.response_format, ResponseFormat.JSON_OBJECT)
        for value in ("Accountant", "30-39", "Finance", "51-200 employees", "North America"):
            self.assertIn(value, prompt.user)
        self.assertIn('"riskScore"', prompt.user)
        self.assertEqual([m.role for m in prompt.messages()], ["system", "user"])

    def test_builders_are_deterministic(self):
        first = build_explore_prompt("Technology Disruptors", **SCORE)
        second = build_explore_prompt("Technology Disruptors", **SCORE)
        self.assertEqual(first, second)
        self.assertEqual(first.key, "technology")
        self.assertEqual(first.response_format, ResponseFormat.TEXT)
        self.assertIn("risk score of 72 and High risk tier", first.user)

    def test_invest_prompt_uses_selected_template(self):
        prompt = build_invest_prompt("Adjacent Roles", **SCORE)
        self.assertEqual(prompt.key, "adjacent")
        self.assertIn("adjacent career roles for a Accountant", prompt.user)

    def test_career_switch_requires_target(self):
        with self.assertRaises(MissingFieldsError) as ctx:
            build_pathways_prompt("Switch Careers", **SCORE)
        self.assertEqual(ctx.exception.fields, ["targetCareer"])

        prompt = build_pathways_prompt("Switch Careers", target_career="Data Analyst", **SCORE)
        self.assertIn("to Data Analyst", prompt.user)
        self.assertEqual(prompt.response_format, ResponseFormat.JSON_OBJECT)

    def test_other_pathways_do_not_need_target(self):
        prompt = build_pathways_prompt("Freelancing Opportunities", **SCORE)
        self.assertEqual(prompt.key, "freelance")

    def test_pathway_prompt_includes_risk_only_when_given(self):
        base = dict(job_title="Accountant", industry="Finance", age_range="30-39", region="United States")
        without = build_pathway_prompt("business", user_input="Bookkeeping SaaS", **base)
        self.assertNotIn("Displacement Risk", without.user)
        self.assertIn("Bookkeeping SaaS", without.user)

        with_risk = build_pathway_prompt(
            "career", user_input="Data Analyst", risk_score=72.0, risk_tier="High", **base
        )
        self.assertIn("Displacement Risk: 72 (High)", with_risk.user)
        self.assertIn("career coach", with_risk.system)


if __name__ == "__main__":
    unittest.main()
