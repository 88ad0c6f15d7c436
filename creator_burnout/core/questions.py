"""
Question Catalog
=================
The fixed, ordered list of survey questions.

Two kinds of question exist:
  - RANGE  — an integer slider between ``min`` and ``max`` with a few tick
             labels for the UI (tick count is independent of the span).
  - CHOICE — a set of discrete option labels rendered as buttons.

The catalog is built once at import time and never mutated.  Catalog order
*is* the quiz order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from creator_burnout.core.errors import ValidationError

Answer = Union[int, str]


class QuestionKind(str, Enum):
    RANGE = "range"
    CHOICE = "choice"


@dataclass(frozen=True)
class Question:
    """One survey question and the constraints its answer must satisfy."""

    id: str
    prompt: str
    kind: QuestionKind
    labels: tuple[str, ...]                     # tick labels (RANGE) / options (CHOICE)
    min: Optional[int] = None                   # RANGE only
    max: Optional[int] = None                   # RANGE only

    def __post_init__(self):
        if not self.id:
            raise ValueError("Question id must be a non-empty string.")
        if self.kind is QuestionKind.RANGE:
            if self.min is None or self.max is None or self.min >= self.max:
                raise ValueError(
                    f"Range question '{self.id}' needs integer bounds with min < max."
                )
        elif not self.labels:
            raise ValueError(f"Choice question '{self.id}' has no options.")

    # ------------------------------------------------------------------
    # Answer handling
    # ------------------------------------------------------------------

    @property
    def options(self) -> tuple[str, ...]:
        """Selectable labels for a CHOICE question (empty for RANGE)."""
        return self.labels if self.kind is QuestionKind.CHOICE else ()

    @property
    def default_value(self) -> Optional[int]:
        """Value a slider shows before the user moves it (never auto-recorded)."""
        return self.min if self.kind is QuestionKind.RANGE else None

    def validate(self, value: Answer) -> Answer:
        """Return *value* unchanged if it is a legal answer, else raise."""
        if self.kind is QuestionKind.RANGE:
            # bool is an int subclass; True is not a slider position.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"'{self.id}' expects an integer, got {value!r}."
                )
            if not self.min <= value <= self.max:
                raise ValidationError(
                    f"'{self.id}' must be between {self.min} and {self.max}, got {value}."
                )
            return value

        if value not in self.labels:
            raise ValidationError(
                f"'{self.id}' expects one of {list(self.labels)}, got {value!r}."
            )
        return value

    def coerce(self, raw) -> Answer:
        """Convert raw host input (form text, CLI input) into a valid answer.

        Accepts ints as-is, numeric strings for RANGE questions, and option
        labels (surrounding whitespace ignored) for CHOICE questions.
        """
        if self.kind is QuestionKind.RANGE and isinstance(raw, str):
            text = raw.strip()
            try:
                raw = int(text)
            except ValueError:
                raise ValidationError(
                    f"'{self.id}' expects a whole number, got {text!r}."
                ) from None
        elif self.kind is QuestionKind.CHOICE and isinstance(raw, str):
            raw = raw.strip()
        return self.validate(raw)


# ----------------------------------------------------------------------
# Catalog construction
# ----------------------------------------------------------------------

def build_catalog(questions: Iterable[Question]) -> tuple[Question, ...]:
    """Freeze *questions* into a catalog, rejecting duplicate ids."""
    catalog = tuple(questions)
    seen = set()
    for q in catalog:
        if q.id in seen:
            raise ValueError(f"Duplicate question id in catalog: '{q.id}'")
        seen.add(q.id)
    return catalog


def get_question(catalog: tuple[Question, ...], question_id: str) -> Question:
    for q in catalog:
        if q.id == question_id:
            return q
    raise ValidationError(f"No such question: '{question_id}'")


CATALOG: tuple[Question, ...] = build_catalog([
    Question(
        id="daily_hours",
        prompt="How many hours per day do you spend on content creation/management?",
        kind=QuestionKind.RANGE,
        min=1,
        max=12,
        labels=("1h", "3h", "6h", "9h", "12h+"),
    ),
    Question(
        id="platform_count",
        prompt="How many platforms do you actively manage?",
        kind=QuestionKind.CHOICE,
        labels=("1-2", "3-4", "5-6", "7+"),
    ),
    Question(
        id="manual_tasks",
        prompt="What % of your time is spent on repetitive/manual tasks?",
        kind=QuestionKind.RANGE,
        min=10,
        max=90,
        labels=("10%", "30%", "50%", "70%", "90%+"),
    ),
    Question(
        id="income_stress",
        prompt="How would you rate income instability stress? (1=None, 10=Severe)",
        kind=QuestionKind.RANGE,
        min=1,
        max=10,
        labels=("Stable", "3", "5", "7", "Very Bad"),
    ),
    Question(
        id="content_pace",
        prompt="How often do you feel pressured to post?",
        kind=QuestionKind.CHOICE,
        labels=("Not at all", "Sometimes", "Often", "Constantly"),
    ),
    Question(
        id="boundary_setting",
        prompt="Do you have clear boundaries for work hours?",
        kind=QuestionKind.CHOICE,
        labels=("Yes, strict", "Somewhat", "Rarely", "Never"),
    ),
    Question(
        id="repurposing_usage",
        prompt="How much do you repurpose content across platforms?",
        kind=QuestionKind.CHOICE,
        labels=("Fully optimized", "Some repurposing", "Minimal", "Never"),
    ),
    Question(
        id="revenue_streams",
        prompt="How many revenue streams do you have? (Sponsorships, products, services, etc.)",
        kind=QuestionKind.RANGE,
        min=0,
        max=5,
        labels=("None", "1", "2", "3", "4+"),
    ),
])
