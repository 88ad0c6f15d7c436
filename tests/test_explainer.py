"""
Unit Tests for the Explainer
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from creator_burnout.core.explainer import Explainer
from creator_burnout.core.responses import ResponseStore
from creator_burnout.core.scoring_engine import ScoringEngine
from creator_burnout.utils.helpers import load_config


class TestExplainer(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        engine = ScoringEngine(load_config())
        cls.critical = engine.score(ResponseStore.from_answers({
            "daily_hours": 9, "platform_count": "7+", "manual_tasks": 70,
            "income_stress": 8, "content_pace": "Constantly",
            "boundary_setting": "Never", "repurposing_usage": "Never",
            "revenue_streams": 0,
        }))
        cls.calm = engine.score(ResponseStore.from_answers({
            "daily_hours": 1, "platform_count": "1-2", "manual_tasks": 10,
            "income_stress": 1, "content_pace": "Not at all",
            "boundary_setting": "Yes, strict", "repurposing_usage": "Fully optimized",
            "revenue_streams": 5,
        }))
        cls.explainer = Explainer()

    def test_keys(self):
        explanation = self.explainer.explain(self.critical)
        self.assertEqual(set(explanation), {
            "overall_narrative", "top_factor_narrative", "factor_breakdown",
            "diagnostic_narratives", "action_plan", "next_steps", "disclaimer",
        })

    def test_narratives_mention_result(self):
        explanation = self.explainer.explain(self.critical)
        self.assertIn("100/100", explanation["overall_narrative"])
        self.assertIn("Manual Content Processes", explanation["top_factor_narrative"])
        self.assertEqual(len(explanation["diagnostic_narratives"]), 4)
        self.assertIn("No work/life separation", " ".join(explanation["diagnostic_narratives"]))

    def test_factor_breakdown_sorted(self):
        breakdown = self.explainer.explain(self.critical)["factor_breakdown"]
        self.assertEqual(breakdown[0], ("Manual Content Processes", 75))
        values = [v for _, v in breakdown]
        self.assertEqual(values, sorted(values, reverse=True))

    def test_action_plan_for_critical_result(self):
        plan = self.explainer.explain(self.critical)["action_plan"]
        self.assertTrue(plan[0].startswith("Specific fixes for your #1 time waster"))
        joined = " ".join(plan)
        self.assertIn("repurposing playbook", joined)
        self.assertIn("Boundary-setting script", joined)
        self.assertIn("Revenue diversification checklist", joined)

    def test_action_plan_for_calm_result(self):
        plan = self.explainer.explain(self.calm)["action_plan"]
        self.assertEqual(len(plan), 2)
        self.assertIn("manageable", plan[1])

    def test_next_steps(self):
        steps = self.explainer.explain(self.calm)["next_steps"]
        self.assertEqual([s["title"] for s in steps], [
            "Check your inbox", "Implement quick wins", "Track improvements",
        ])


if __name__ == "__main__":
    unittest.main()
