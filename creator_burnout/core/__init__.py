"""
Core Module — Assessment Engine
================================
  - CATALOG / Question:  the fixed, ordered survey questions
  - ResponseStore:       per-session answers
  - ScoringEngine:       burnout score, #1 time waster, diagnostics
  - AssessmentResult:    data model holding a finished assessment
  - QuizSession:         welcome -> quiz -> results -> confirmation flow
  - Explainer:           human-readable narratives and action plan
"""

from creator_burnout.core.errors import (
    AssessmentError,
    CaptureFailed,
    IncompleteAssessment,
    InvalidContact,
    NavigationError,
    UnknownQuestion,
    ValidationError,
)
from creator_burnout.core.questions import CATALOG, Question, QuestionKind
from creator_burnout.core.responses import ResponseStore
from creator_burnout.core.assessment_result import AssessmentResult, Severity
from creator_burnout.core.scoring_engine import FACTORS, ScoringEngine
from creator_burnout.core.quiz_flow import QuizSession, Stage
from creator_burnout.core.explainer import Explainer

__all__ = [
    "AssessmentError", "CaptureFailed", "IncompleteAssessment", "InvalidContact",
    "NavigationError", "UnknownQuestion", "ValidationError",
    "CATALOG", "Question", "QuestionKind", "ResponseStore",
    "AssessmentResult", "Severity", "FACTORS", "ScoringEngine",
    "QuizSession", "Stage", "Explainer",
]
