"""
Scoring Engine — Burnout Score & Time-Waster Diagnosis
=======================================================
Turns a completed ResponseStore into an AssessmentResult.  Pure and
deterministic: the same answers always give the same result.

Pipeline:

1. **Normalise.**  Each answer becomes an integer factor through an explicit
   per-question table.  Slider answers pass through as-is; button answers
   are looked up by label.  The tables are checked against the catalog
   when the engine is built, so an unmapped question or label fails
   immediately with UnknownQuestion instead of quietly scoring as zero.

2. **Composite score.**

       raw = 2*hours + 2*platforms + manual + income_stress + pace
             + boundaries + 3*repurposing + 2*(5 - revenue_streams)

   clamped into [0, 100].

3. **Time wasters.**  Five factor contributions; the strict maximum is the
   #1 time waster, ties going to the earliest declared factor.

4. **Diagnostics.**  Four independent dimensions, each graded
   Critical / High / healthy tier with its own thresholds.
"""

from __future__ import annotations

from typing import Optional

from creator_burnout.core.assessment_result import AssessmentResult, Severity
from creator_burnout.core.errors import IncompleteAssessment, UnknownQuestion
from creator_burnout.core.questions import CATALOG, Question, QuestionKind
from creator_burnout.core.responses import ResponseStore
from creator_burnout.utils.helpers import load_config, setup_logging

logger = setup_logging()

# None = slider value used as-is; a dict = label -> weight.
NORMALIZATION: dict[str, Optional[dict[str, int]]] = {
    "daily_hours": None,
    "platform_count": {"1-2": 1, "3-4": 2, "5-6": 3, "7+": 4},
    "manual_tasks": None,
    "income_stress": None,
    "content_pace": {"Not at all": 0, "Sometimes": 2, "Often": 4, "Constantly": 5},
    "boundary_setting": {"Yes, strict": 0, "Somewhat": 2, "Rarely": 4, "Never": 5},
    "repurposing_usage": {
        "Fully optimized": 1, "Some repurposing": 2, "Minimal": 3, "Never": 4,
    },
    "revenue_streams": None,
}

# Every id the composite, factor and diagnostic formulas read.
_SCORING_INPUTS = (
    "daily_hours", "platform_count", "manual_tasks", "income_stress",
    "content_pace", "boundary_setting", "repurposing_usage", "revenue_streams",
)

# Declaration order doubles as the tie-break order for the top factor.
FACTORS = (
    "Platform Management Overhead",
    "Manual Content Processes",
    "Lack of Boundaries",
    "Income Instability Anxiety",
    "Constant Posting Pressure",
)

_DEFAULT_SCORE_BANDS = [
    {"max": 50, "label": "Moderate - Manageable"},
    {"max": 70, "label": "High - Intervention Required"},
    {"max": 100, "label": "Critical - Immediate Action Needed"},
]

# dimension -> {severity: detail message}
_DIAGNOSTIC_MESSAGES = {
    "platforms": {
        Severity.CRITICAL: "Critical: Too many platforms unmanaged",
        Severity.HIGH: "High: Multiple platforms bleeding time",
        Severity.MANAGEABLE: "Manageable",
    },
    "manual": {
        Severity.CRITICAL: "Critical: Over 60% manual work",
        Severity.HIGH: "High: Significant manual overhead",
        Severity.OKAY: "Okay",
    },
    "boundaries": {
        Severity.CRITICAL: "Critical: No work/life separation",
        Severity.HIGH: "High: Weak boundaries",
        Severity.GOOD: "Good",
    },
    "revenue": {
        Severity.CRITICAL: "Critical: Algorithm-dependent income",
        Severity.HIGH: "High: Income too concentrated",
        Severity.DIVERSIFIED: "Diversified",
    },
}


class ScoringEngine:
    """Compute burnout score, top time waster and diagnostics."""

    def __init__(
        self,
        config: Optional[dict] = None,
        catalog: tuple[Question, ...] = CATALOG,
        normalization: Optional[dict] = None,
    ):
        if config is None:
            config = load_config()
        self.config = config
        self.catalog = catalog
        self.normalization = NORMALIZATION if normalization is None else normalization
        self.score_bands = config.get("score_bands") or _DEFAULT_SCORE_BANDS
        self._validate_tables()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def score(self, responses: ResponseStore) -> AssessmentResult:
        """Score a fully answered store.

        Raises
        ------
        IncompleteAssessment
            If any catalog question is unanswered.  No partial result is
            ever produced.
        """
        missing = [q.id for q in self.catalog if q.id not in responses]
        if missing:
            raise IncompleteAssessment(missing)

        f = self.extract_factors(responses)

        raw = (
            2 * f["daily_hours"]
            + 2 * f["platform_count"]
            + f["manual_tasks"]
            + f["income_stress"]
            + f["content_pace"]
            + f["boundary_setting"]
            + 3 * f["repurposing_usage"]
            + 2 * (5 - f["revenue_streams"])
        )
        score = max(0, min(round(raw / 100 * 100), 100))

        factor_scores = self.factor_scores(f)
        top_factor = self._top_factor(factor_scores)
        diagnostics = self.diagnose(f)

        result = AssessmentResult(
            score=score,
            top_factor=top_factor,
            factor_diagnostics=diagnostics,
            stats={
                "daily_hours": f["daily_hours"],
                "platform_count": f["platform_count"],
                "revenue_streams": f["revenue_streams"],
            },
            raw_score=raw,
            score_band=self._score_to_label(score, self.score_bands),
            factor_scores=factor_scores,
            diagnostic_details={
                dim: _DIAGNOSTIC_MESSAGES[dim][sev] for dim, sev in diagnostics.items()
            },
        )
        logger.info(
            "Assessment scored: %d/100 (raw=%d), top factor: %s",
            score, raw, top_factor,
        )
        return result

    def extract_factors(self, responses: ResponseStore) -> dict[str, int]:
        """Map every raw answer to its normalised integer factor."""
        factors = {}
        for question in self.catalog:
            value = responses.get(question.id)
            table = self.normalization[question.id]
            factors[question.id] = int(value) if table is None else table[value]
        return factors

    @staticmethod
    def factor_scores(f: dict[str, int]) -> dict[str, int]:
        """Contribution of each time-waster factor, in declaration order."""
        return {
            "Platform Management Overhead": 3 * f["platform_count"] + 2 * f["repurposing_usage"],
            "Manual Content Processes": f["manual_tasks"] + (5 if f["daily_hours"] > 6 else 0),
            "Lack of Boundaries": 3 * f["boundary_setting"],
            "Income Instability Anxiety": (
                2 * f["income_stress"] + (10 if f["revenue_streams"] < 2 else 0)
            ),
            "Constant Posting Pressure": 2 * f["content_pace"],
        }

    @staticmethod
    def diagnose(f: dict[str, int]) -> dict[str, Severity]:
        """Grade each diagnostic dimension independently of the factors."""
        platforms = f["platform_count"]
        manual = f["manual_tasks"]
        boundaries = f["boundary_setting"]
        revenue = f["revenue_streams"]
        return {
            "platforms": (
                Severity.CRITICAL if platforms > 4
                else Severity.HIGH if platforms > 2
                else Severity.MANAGEABLE
            ),
            "manual": (
                Severity.CRITICAL if manual > 60
                else Severity.HIGH if manual > 40
                else Severity.OKAY
            ),
            "boundaries": (
                Severity.CRITICAL if boundaries > 3
                else Severity.HIGH if boundaries > 1
                else Severity.GOOD
            ),
            "revenue": (
                Severity.CRITICAL if revenue < 1
                else Severity.HIGH if revenue < 2
                else Severity.DIVERSIFIED
            ),
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate_tables(self) -> None:
        """Fail closed on any catalog / normalization mismatch."""
        catalog_ids = {q.id for q in self.catalog}
        for question in self.catalog:
            if question.id not in self.normalization:
                raise UnknownQuestion(
                    f"Question '{question.id}' has no normalization rule."
                )
            table = self.normalization[question.id]
            if question.kind is QuestionKind.RANGE:
                if table is not None:
                    raise UnknownQuestion(
                        f"Range question '{question.id}' must be scored as-is."
                    )
                continue
            if table is None:
                raise UnknownQuestion(
                    f"Choice question '{question.id}' has no label weights."
                )
            unmapped = [label for label in question.options if label not in table]
            if unmapped:
                raise UnknownQuestion(
                    f"Question '{question.id}' has unweighted options: {unmapped}"
                )

        absent = [qid for qid in _SCORING_INPUTS if qid not in catalog_ids]
        if absent:
            raise UnknownQuestion(f"Scoring inputs missing from catalog: {absent}")

    @staticmethod
    def _top_factor(factor_scores: dict[str, int]) -> str:
        top = FACTORS[0]
        for name in FACTORS[1:]:
            if factor_scores[name] > factor_scores[top]:
                top = name
        return top

    @staticmethod
    def _score_to_label(score: int, label_table: list[dict]) -> str:
        """Look up the band label for a 0-100 score."""
        for entry in label_table:
            if score <= entry["max"]:
                return entry["label"]
        return label_table[-1]["label"]
