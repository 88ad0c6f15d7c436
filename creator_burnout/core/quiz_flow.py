"""
Quiz Flow — Navigation State Machine
=====================================
Drives one user through the assessment:

    WELCOME -> QUIZ -> RESULTS -> CONFIRMATION

The stages are strictly linear.  The only way backwards is "go back one
question" inside QUIZ.

Key design principles:

1. **No cursor.**  The current question index is *computed* from the
   ResponseStore: the number of answered catalog questions, capped at the
   last question.  Answering moves the quiz forward by exactly one; going
   back never deletes anything, it only hands the previous question to the
   UI so it can be shown (and optionally re-answered) again.

2. **Answers form a prefix.**  Only the current question or one already
   answered may be answered, so "how many are answered" and "which one is
   next" can never disagree.

3. **Injected sink.**  The lead capture sink is a constructor argument.
   The session moves to CONFIRMATION only after the sink confirms
   delivery; otherwise it stays on RESULTS and the caller may retry.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Optional

from creator_burnout.core.assessment_result import AssessmentResult
from creator_burnout.core.errors import (
    CaptureFailed,
    IncompleteAssessment,
    InvalidContact,
    NavigationError,
)
from creator_burnout.core.questions import CATALOG, Answer, Question, get_question
from creator_burnout.core.responses import ResponseStore
from creator_burnout.core.scoring_engine import ScoringEngine
from creator_burnout.utils.helpers import load_config, setup_logging

if TYPE_CHECKING:
    from creator_burnout.capture.lead_sink import LeadCaptureSink

logger = setup_logging()

_DEFAULT_CONTACT_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class Stage(str, Enum):
    WELCOME = "welcome"
    QUIZ = "quiz"
    RESULTS = "results"
    CONFIRMATION = "confirmation"


class QuizSession:
    """One assessment session, from welcome screen to confirmation."""

    def __init__(
        self,
        sink: LeadCaptureSink,
        config: Optional[dict] = None,
        catalog: tuple[Question, ...] = CATALOG,
        engine: Optional[ScoringEngine] = None,
    ):
        if config is None:
            config = load_config()
        self.config = config
        self.catalog = catalog
        self.sink = sink
        self.engine = engine or ScoringEngine(config, catalog=catalog)

        pattern = (config.get("lead_capture") or {}).get(
            "contact_pattern", _DEFAULT_CONTACT_PATTERN
        )
        self._contact_re = re.compile(pattern)

        self.responses = ResponseStore(catalog)
        self._stage = Stage.WELCOME
        self._result: Optional[AssessmentResult] = None
        self._contact_id: Optional[str] = None

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def result(self) -> Optional[AssessmentResult]:
        return self._result

    @property
    def contact_id(self) -> Optional[str]:
        """Contact id of the successful submission, once confirmed."""
        return self._contact_id

    @property
    def current_question(self) -> Optional[Question]:
        if self._stage is not Stage.QUIZ:
            return None
        return self.catalog[self.current_question_index()]

    def current_question_index(self) -> int:
        """Answered-question count, capped at the last catalog position."""
        return min(self.responses.answered_count(), len(self.catalog) - 1)

    def progress(self) -> tuple[int, int, int]:
        """``(position, total, percent)`` for a "Question N of M" bar."""
        total = len(self.catalog)
        position = self.current_question_index() + 1
        return position, total, round(position / total * 100)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> Question:
        """WELCOME -> QUIZ.  Returns the first question."""
        self._require(Stage.WELCOME, "start")
        self._stage = Stage.QUIZ
        logger.info("Assessment started (%d questions)", len(self.catalog))
        return self.current_question

    def record_answer(self, question_id: str, value: Answer) -> Answer:
        """Validate and store an answer for the current or an earlier question."""
        self._require(Stage.QUIZ, "record an answer")
        question = get_question(self.catalog, question_id)
        position = self.catalog.index(question)
        if position > self.current_question_index():
            raise NavigationError(
                f"Cannot answer '{question_id}' before question "
                f"{self.current_question_index() + 1}."
            )
        stored = self.responses.record(question_id, value)
        logger.debug("Answer recorded: %s = %r", question_id, stored)
        return stored

    def go_back(self) -> Question:
        """Return the previous question for redisplay.  Data is untouched."""
        self._require(Stage.QUIZ, "go back")
        index = self.current_question_index()
        if index == 0:
            raise NavigationError("Already at the first question.")
        return self.catalog[index - 1]

    def advance(self) -> Optional[AssessmentResult]:
        """Move on after answering.

        A no-op (returns None) while questions remain; the next question is
        picked up automatically from the answer count.  Once every question
        is answered, moves to RESULTS and returns the scored result.
        """
        self._require(Stage.QUIZ, "advance")
        if self.responses.answered_count() == 0:
            raise NavigationError("Answer the current question before continuing.")
        if not self.responses.is_complete():
            return None
        return self._finish()

    def request_results(self) -> AssessmentResult:
        """QUIZ -> RESULTS, refusing when any question is unanswered."""
        self._require(Stage.QUIZ, "request results")
        missing = self.responses.missing()
        if missing:
            raise IncompleteAssessment(missing)
        return self._finish()

    def submit_contact(self, contact_id: str) -> str:
        """Hand the result to the lead sink; RESULTS -> CONFIRMATION on success.

        Returns the timestamp sent with the lead.
        """
        self._require(Stage.RESULTS, "submit contact details")
        if not isinstance(contact_id, str):
            raise InvalidContact("Please enter your email.")
        contact_id = contact_id.strip()
        if not contact_id:
            raise InvalidContact("Please enter your email.")
        if not self._contact_re.match(contact_id):
            raise InvalidContact(f"'{contact_id}' is not a valid contact address.")

        timestamp = datetime.now(timezone.utc).isoformat()
        try:
            delivered = self.sink.deliver(contact_id, self._result, timestamp)
        except Exception as exc:
            logger.warning("Lead delivery raised: %s", exc)
            raise CaptureFailed("Error processing. Please try again.") from exc
        if not delivered:
            logger.warning("Lead delivery rejected by %s", type(self.sink).__name__)
            raise CaptureFailed("Error processing. Please try again.")

        self._contact_id = contact_id
        self._stage = Stage.CONFIRMATION
        logger.info("Lead delivered; session confirmed")
        return timestamp

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _finish(self) -> AssessmentResult:
        self._result = self.engine.score(self.responses)
        self._stage = Stage.RESULTS
        logger.info("Quiz complete -> results (score=%d)", self._result.score)
        return self._result

    def _require(self, stage: Stage, action: str) -> None:
        if self._stage is not stage:
            raise NavigationError(
                f"Cannot {action} during the {self._stage.value} stage."
            )
