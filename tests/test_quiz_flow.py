"""
Unit Tests for the Quiz Flow State Machine
===========================================
Tests cover:
  - Stage transitions (welcome -> quiz -> results -> confirmation)
  - Derived current-question index and back navigation
  - Result gating (advance / request_results)
  - Contact submission and sink failure handling
"""

import sys
import unittest
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from creator_burnout.capture.lead_sink import InMemoryLeadSink, LeadCaptureSink
from creator_burnout.core.errors import (
    CaptureFailed,
    IncompleteAssessment,
    InvalidContact,
    NavigationError,
    ValidationError,
)
from creator_burnout.core.questions import CATALOG
from creator_burnout.core.quiz_flow import QuizSession, Stage
from creator_burnout.utils.helpers import load_config

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


class RejectingSink(LeadCaptureSink):
    def deliver(self, contact_id, result, timestamp):
        return False


class BrokenSink(LeadCaptureSink):
    def deliver(self, contact_id, result, timestamp):
        raise ConnectionError("smtp down")


def _answer(session, count=len(CATALOG)):
    for q in CATALOG[:count]:
        session.record_answer(q.id, ANSWERS[q.id])


class TestNavigation(unittest.TestCase):

    def setUp(self):
        self.sink = InMemoryLeadSink()
        self.session = QuizSession(self.sink, load_config())

    def test_initial_stage(self):
        self.assertEqual(self.session.stage, Stage.WELCOME)
        self.assertIsNone(self.session.current_question)
        self.assertIsNone(self.session.result)

    def test_start(self):
        first = self.session.start()
        self.assertEqual(self.session.stage, Stage.QUIZ)
        self.assertEqual(first.id, "daily_hours")
        with self.assertRaises(NavigationError):
            self.session.start()

    def test_answer_before_start_rejected(self):
        with self.assertRaises(NavigationError):
            self.session.record_answer("daily_hours", 5)

    def test_index_follows_answer_count(self):
        self.session.start()
        for i, q in enumerate(CATALOG[:-1]):
            self.assertEqual(self.session.current_question_index(), i)
            self.assertEqual(self.session.current_question.id, q.id)
            self.session.record_answer(q.id, ANSWERS[q.id])
        self.assertEqual(self.session.current_question_index(), len(CATALOG) - 1)

    def test_index_capped_when_all_answered(self):
        self.session.start()
        _answer(self.session)
        self.assertEqual(self.session.current_question_index(), len(CATALOG) - 1)
        self.assertEqual(self.session.stage, Stage.QUIZ)

    def test_cannot_answer_ahead(self):
        self.session.start()
        with self.assertRaises(NavigationError):
            self.session.record_answer("manual_tasks", 50)
        self.assertEqual(len(self.session.responses), 0)

    def test_invalid_answer(self):
        self.session.start()
        with self.assertRaises(ValidationError):
            self.session.record_answer("daily_hours", 0)
        self.assertEqual(self.session.current_question_index(), 0)

    def test_go_back_at_first_question_fails(self):
        self.session.start()
        with self.assertRaises(NavigationError):
            self.session.go_back()

    def test_go_back_keeps_answers(self):
        self.session.start()
        _answer(self.session, 3)
        previous = self.session.go_back()
        self.assertEqual(previous.id, CATALOG[2].id)
        self.assertEqual(len(self.session.responses), 3)
        self.assertEqual(self.session.current_question_index(), 3)

    def test_reanswer_does_not_move_index(self):
        self.session.start()
        _answer(self.session, 3)
        self.session.record_answer("platform_count", "1-2")
        self.assertEqual(self.session.current_question_index(), 3)
        self.assertEqual(self.session.responses.get("platform_count"), "1-2")

    def test_progress(self):
        self.session.start()
        _answer(self.session, 3)
        self.assertEqual(self.session.progress(), (4, 8, 50))


class TestResults(unittest.TestCase):

    def setUp(self):
        self.session = QuizSession(InMemoryLeadSink(), load_config())
        self.session.start()

    def test_advance_without_answer_fails(self):
        with self.assertRaises(NavigationError):
            self.session.advance()

    def test_advance_is_noop_mid_quiz(self):
        _answer(self.session, 2)
        self.assertIsNone(self.session.advance())
        self.assertEqual(self.session.stage, Stage.QUIZ)
        self.assertIsNone(self.session.result)

    def test_advance_finishes_quiz(self):
        _answer(self.session)
        result = self.session.advance()
        self.assertEqual(self.session.stage, Stage.RESULTS)
        self.assertIs(self.session.result, result)
        self.assertEqual(result.score, 100)
        self.assertIsNone(self.session.current_question)

    def test_request_results_incomplete(self):
        _answer(self.session, 5)
        with self.assertRaises(IncompleteAssessment) as ctx:
            self.session.request_results()
        self.assertEqual(
            ctx.exception.missing,
            ("boundary_setting", "repurposing_usage", "revenue_streams"),
        )
        self.assertEqual(self.session.stage, Stage.QUIZ)
        self.assertIsNone(self.session.result)

    def test_request_results_complete(self):
        _answer(self.session)
        result = self.session.request_results()
        self.assertEqual(result.top_factor, "Manual Content Processes")
        self.assertEqual(self.session.stage, Stage.RESULTS)

    def test_no_answers_after_results(self):
        _answer(self.session)
        self.session.request_results()
        with self.assertRaises(NavigationError):
            self.session.record_answer("daily_hours", 2)
        with self.assertRaises(NavigationError):
            self.session.go_back()


class TestContactSubmission(unittest.TestCase):

    def _session_at_results(self, sink):
        session = QuizSession(sink, load_config())
        session.start()
        _answer(session)
        session.request_results()
        return session

    def test_submit_before_results(self):
        session = QuizSession(InMemoryLeadSink(), load_config())
        with self.assertRaises(NavigationError):
            session.submit_contact("me@example.com")

    def test_empty_contact(self):
        sink = InMemoryLeadSink()
        session = self._session_at_results(sink)
        for bad in ("", "   ", None):
            with self.assertRaises(InvalidContact):
                session.submit_contact(bad)
        self.assertEqual(session.stage, Stage.RESULTS)
        self.assertEqual(len(sink), 0)

    def test_malformed_contact(self):
        session = self._session_at_results(InMemoryLeadSink())
        with self.assertRaises(InvalidContact):
            session.submit_contact("not-an-email")
        self.assertEqual(session.stage, Stage.RESULTS)

    def test_non_string_contact(self):
        sink = InMemoryLeadSink()
        session = self._session_at_results(sink)
        for bad in (12345, None):
            with self.assertRaises(InvalidContact):
                session.submit_contact(bad)
        self.assertEqual(session.stage, Stage.RESULTS)
        self.assertEqual(len(sink), 0)

    def test_successful_submission(self):
        sink = InMemoryLeadSink()
        session = self._session_at_results(sink)
        timestamp = session.submit_contact("  me@example.com ")
        self.assertEqual(session.stage, Stage.CONFIRMATION)
        self.assertEqual(session.contact_id, "me@example.com")
        self.assertEqual(len(sink), 1)
        lead = sink.leads[0]
        self.assertEqual(lead.contact_id, "me@example.com")
        self.assertIs(lead.result, session.result)
        self.assertEqual(lead.timestamp, timestamp)
        self.assertIsNotNone(datetime.fromisoformat(timestamp).tzinfo)

    def test_submission_only_once(self):
        sink = InMemoryLeadSink()
        session = self._session_at_results(sink)
        session.submit_contact("me@example.com")
        with self.assertRaises(NavigationError):
            session.submit_contact("me@example.com")
        self.assertEqual(len(sink), 1)

    def test_rejected_delivery(self):
        session = self._session_at_results(RejectingSink())
        with self.assertRaises(CaptureFailed):
            session.submit_contact("me@example.com")
        self.assertEqual(session.stage, Stage.RESULTS)
        self.assertIsNone(session.contact_id)

    def test_broken_sink_then_retry(self):
        session = self._session_at_results(BrokenSink())
        with self.assertRaises(CaptureFailed) as ctx:
            session.submit_contact("me@example.com")
        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)
        self.assertEqual(session.stage, Stage.RESULTS)

        session.sink = InMemoryLeadSink()
        session.submit_contact("me@example.com")
        self.assertEqual(session.stage, Stage.CONFIRMATION)


class TestBundledConfig(unittest.TestCase):

    def test_session_without_config(self):
        sink = InMemoryLeadSink()
        session = QuizSession(sink)
        session.start()
        _answer(session)
        result = session.request_results()
        self.assertEqual(result.score_band, "Critical - Immediate Action Needed")
        session.submit_contact("me@example.com")
        self.assertEqual(len(sink), 1)


if __name__ == "__main__":
    unittest.main()
