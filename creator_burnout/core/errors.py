"""
Assessment Errors
==================
Every failure the engine can signal.  All derive from AssessmentError so a
host can catch the whole family in one place.

Only UnknownQuestion is fatal: it means the catalog and the scoring tables
disagree, which is a configuration defect rather than something the user
did.  Everything else is recoverable (re-prompt or retry).
"""

from __future__ import annotations

from typing import Iterable


class AssessmentError(Exception):
    """Base class for assessment engine errors."""


class ValidationError(AssessmentError):
    """An answer is malformed for its question (out of range, unknown label)."""


class IncompleteAssessment(AssessmentError):
    """Results were requested before every question was answered."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            "Please answer all questions to see your results "
            f"(missing: {', '.join(self.missing)})"
        )


class InvalidContact(AssessmentError):
    """The contact identifier is empty or malformed."""


class UnknownQuestion(AssessmentError):
    """A catalog question has no normalization rule, or vice versa."""


class CaptureFailed(AssessmentError):
    """The lead capture sink rejected the delivery.  Safe to retry."""


class NavigationError(AssessmentError):
    """The operation is not valid for the current stage or question."""
