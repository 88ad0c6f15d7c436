"""
Unit Tests for the Question Catalog and Response Store
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from creator_burnout.core.errors import ValidationError
from creator_burnout.core.questions import (
    CATALOG,
    Question,
    QuestionKind,
    build_catalog,
    get_question,
)
from creator_burnout.core.responses import ResponseStore


class TestCatalog(unittest.TestCase):

    def test_order_and_ids(self):
        self.assertEqual([q.id for q in CATALOG], [
            "daily_hours", "platform_count", "manual_tasks", "income_stress",
            "content_pace", "boundary_setting", "repurposing_usage", "revenue_streams",
        ])

    def test_range_bounds(self):
        bounds = {q.id: (q.min, q.max) for q in CATALOG if q.kind is QuestionKind.RANGE}
        self.assertEqual(bounds, {
            "daily_hours": (1, 12),
            "manual_tasks": (10, 90),
            "income_stress": (1, 10),
            "revenue_streams": (0, 5),
        })

    def test_choice_options(self):
        q = get_question(CATALOG, "boundary_setting")
        self.assertEqual(q.options, ("Yes, strict", "Somewhat", "Rarely", "Never"))
        self.assertEqual(get_question(CATALOG, "daily_hours").options, ())

    def test_default_value(self):
        self.assertEqual(get_question(CATALOG, "manual_tasks").default_value, 10)
        self.assertIsNone(get_question(CATALOG, "content_pace").default_value)

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(ValueError):
            build_catalog([CATALOG[0], CATALOG[0]])

    def test_bad_range_rejected(self):
        with self.assertRaises(ValueError):
            Question(id="x", prompt="?", kind=QuestionKind.RANGE, labels=(), min=5, max=5)

    def test_empty_choice_rejected(self):
        with self.assertRaises(ValueError):
            Question(id="x", prompt="?", kind=QuestionKind.CHOICE, labels=())

    def test_unknown_question(self):
        with self.assertRaises(ValidationError):
            get_question(CATALOG, "favourite_colour")


class TestAnswerValidation(unittest.TestCase):

    def setUp(self):
        self.hours = get_question(CATALOG, "daily_hours")
        self.pace = get_question(CATALOG, "content_pace")

    def test_range_accepts_bounds(self):
        self.assertEqual(self.hours.validate(1), 1)
        self.assertEqual(self.hours.validate(12), 12)

    def test_range_rejects_out_of_bounds(self):
        for bad in (0, 13, -1):
            with self.assertRaises(ValidationError):
                self.hours.validate(bad)

    def test_range_rejects_non_integers(self):
        for bad in ("5", 5.5, True, None):
            with self.assertRaises(ValidationError):
                self.hours.validate(bad)

    def test_choice_rejects_unknown_label(self):
        with self.assertRaises(ValidationError):
            self.pace.validate("Always")
        with self.assertRaises(ValidationError):
            self.pace.validate(2)

    def test_coerce(self):
        self.assertEqual(self.hours.coerce(" 7 "), 7)
        self.assertEqual(self.hours.coerce(7), 7)
        self.assertEqual(self.pace.coerce(" Often "), "Often")
        with self.assertRaises(ValidationError):
            self.hours.coerce("seven")
        with self.assertRaises(ValidationError):
            self.hours.coerce("99")


class TestResponseStore(unittest.TestCase):

    def test_record_and_count(self):
        store = ResponseStore()
        store.record("daily_hours", 4)
        store.record("platform_count", "3-4")
        self.assertEqual(store.answered_count(), 2)
        self.assertIn("daily_hours", store)
        self.assertEqual(store.get("platform_count"), "3-4")
        self.assertFalse(store.is_complete())

    def test_last_write_wins(self):
        store = ResponseStore()
        store.record("daily_hours", 4)
        store.record("daily_hours", 9)
        self.assertEqual(store.get("daily_hours"), 9)
        self.assertEqual(len(store), 1)

    def test_invalid_answer_not_stored(self):
        store = ResponseStore()
        with self.assertRaises(ValidationError):
            store.record("daily_hours", 40)
        self.assertNotIn("daily_hours", store)

    def test_unknown_id_rejected(self):
        with self.assertRaises(ValidationError):
            ResponseStore().record("nope", 1)

    def test_missing_in_catalog_order(self):
        store = ResponseStore()
        store.record("daily_hours", 4)
        self.assertEqual(store.missing(), [q.id for q in CATALOG[1:]])

    def test_from_answers_coerces(self):
        store = ResponseStore.from_answers({"daily_hours": "3", "content_pace": "Often"})
        self.assertEqual(store.as_dict(), {"daily_hours": 3, "content_pace": "Often"})

    def test_as_dict_is_a_copy(self):
        store = ResponseStore.from_answers({"daily_hours": 3})
        store.as_dict()["daily_hours"] = 99
        self.assertEqual(store.get("daily_hours"), 3)


if __name__ == "__main__":
    unittest.main()
