"""
Unit Tests for the CLI answer-file loader
"""

import importlib.util
import sys
import tempfile
import unittest
from pathlib import Path

import yaml

_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT))

from creator_burnout.capture.lead_sink import InMemoryLeadSink
from creator_burnout.core.errors import IncompleteAssessment
from creator_burnout.core.quiz_flow import QuizSession, Stage
from creator_burnout.utils.helpers import load_config

_spec = importlib.util.spec_from_file_location(
    "run_assessment", _ROOT / "scripts" / "run_assessment.py"
)
run_assessment = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(run_assessment)

ANSWERS = {
    "daily_hours": 9,
    "platform_count": "7+",
    "manual_tasks": 70,
    "income_stress": 8,
    "content_pace": "Constantly",
    "boundary_setting": "Never",
    "repurposing_usage": "Never",
    "revenue_streams": 0,
}


class TestLoadAnswers(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.session = QuizSession(InMemoryLeadSink(), load_config())
        self.session.start()

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, answers):
        path = Path(self.tmp.name) / "answers.yaml"
        path.write_text(yaml.safe_dump(answers), encoding="utf-8")
        return str(path)

    def test_complete_file(self):
        run_assessment._load_answers(self.session, self._write(ANSWERS))
        result = self.session.request_results()
        self.assertEqual(result.score, 100)
        self.assertEqual(self.session.stage, Stage.RESULTS)

    def test_gap_reported_as_missing_answers(self):
        answers = {k: v for k, v in ANSWERS.items() if k != "platform_count"}
        run_assessment._load_answers(self.session, self._write(answers))
        self.assertEqual(self.session.responses.answered_count(), 1)
        with self.assertRaises(IncompleteAssessment) as ctx:
            self.session.request_results()
        self.assertEqual(ctx.exception.missing[0], "platform_count")
        self.assertIn("revenue_streams", ctx.exception.missing)
        self.assertEqual(self.session.stage, Stage.QUIZ)


if __name__ == "__main__":
    unittest.main()
