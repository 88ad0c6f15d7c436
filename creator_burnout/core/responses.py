"""
Response Store
===============
Per-session mapping from question id to the user's answer.

An id is present only once the user has submitted that question; going back
never removes an answer, it can only be overwritten.  The quiz's "current
question" is derived from how many catalog questions have an entry here, so
this object is the single source of truth for quiz progress.
"""

from __future__ import annotations

from typing import Iterator, Optional

from creator_burnout.core.questions import CATALOG, Answer, Question, get_question


class ResponseStore:
    """Validated answers for one assessment session."""

    def __init__(self, catalog: tuple[Question, ...] = CATALOG):
        self.catalog = catalog
        self._answers: dict[str, Answer] = {}

    def record(self, question_id: str, value: Answer) -> Answer:
        """Validate and store *value*; a later write for the same id wins."""
        question = get_question(self.catalog, question_id)
        self._answers[question_id] = question.validate(value)
        return self._answers[question_id]

    def get(self, question_id: str, default: Optional[Answer] = None) -> Optional[Answer]:
        return self._answers.get(question_id, default)

    def answered_count(self) -> int:
        """Number of catalog questions that currently have an answer."""
        return sum(1 for q in self.catalog if q.id in self._answers)

    def missing(self) -> list[str]:
        """Catalog ids without an answer, in catalog order."""
        return [q.id for q in self.catalog if q.id not in self._answers]

    def is_complete(self) -> bool:
        return not self.missing()

    def as_dict(self) -> dict[str, Answer]:
        """Answers in catalog order (a copy; mutating it changes nothing)."""
        return {q.id: self._answers[q.id] for q in self.catalog if q.id in self._answers}

    @classmethod
    def from_answers(cls, answers: dict, catalog: tuple[Question, ...] = CATALOG) -> "ResponseStore":
        """Build a store from a plain mapping, coercing raw values (CLI/tests)."""
        store = cls(catalog)
        for question_id, raw in answers.items():
            question = get_question(catalog, question_id)
            store.record(question_id, question.coerce(raw))
        return store

    def __contains__(self, question_id: str) -> bool:
        return question_id in self._answers

    def __len__(self) -> int:
        return len(self._answers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_dict())

    def __repr__(self) -> str:
        return f"ResponseStore({self.answered_count()}/{len(self.catalog)} answered)"
