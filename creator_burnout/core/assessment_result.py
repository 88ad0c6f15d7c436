"""
Assessment Result Data Model
=============================
Holds the **complete** outcome of one finished burnout assessment:

  - score / raw_score / score_band  (composite burnout score)
  - top_factor + factor_scores      (the #1 time waster and the ranking behind it)
  - factor_diagnostics              (per-dimension Severity)
  - diagnostic_details              (the human message for each dimension)
  - stats                           (quick stats shown on the results page)

Keeping the data model separate from logic makes it easy to serialise to
JSON, hand to a lead capture sink, or log.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum
import json


class Severity(str, Enum):
    """Tri-level ordinal per diagnostic dimension.

    The healthy tier has a dimension-specific wording (Manageable, Okay,
    Good, Diversified); all four rank the same.
    """

    CRITICAL = "Critical"
    HIGH = "High"
    MANAGEABLE = "Manageable"
    OKAY = "Okay"
    GOOD = "Good"
    DIVERSIFIED = "Diversified"

    @property
    def level(self) -> int:
        """2 = Critical, 1 = High, 0 = healthy tier."""
        if self is Severity.CRITICAL:
            return 2
        if self is Severity.HIGH:
            return 1
        return 0


@dataclass(frozen=True)
class AssessmentResult:
    """Structured, read-only result of a completed assessment."""

    score: int                                  # 0-100, clamped
    top_factor: str                             # e.g. "Manual Content Processes"
    factor_diagnostics: dict[str, Severity]     # {"platforms": Severity.HIGH, ...}
    stats: dict[str, int]                       # daily_hours / platform_count / revenue_streams

    raw_score: int = 0                          # unclamped composite
    score_band: str = ""                        # "High - Intervention Required"
    factor_scores: dict[str, int] = field(default_factory=dict)
    # {"Platform Management Overhead": 20, ...} in declaration order
    diagnostic_details: dict[str, str] = field(default_factory=dict)
    # {"platforms": "Critical: Too many platforms unmanaged", ...}

    @property
    def critical_dimensions(self) -> list[str]:
        return [k for k, v in self.factor_diagnostics.items() if v is Severity.CRITICAL]

    def to_dict(self) -> dict:
        """Serialise to a plain dict (for JSON export, sinks, API responses)."""
        d = asdict(self)
        d["factor_diagnostics"] = {k: v.value for k, v in self.factor_diagnostics.items()}
        return d

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict) -> "AssessmentResult":
        """Rebuild a result from :meth:`to_dict` output (e.g. a stored lead)."""
        return cls(
            score=int(data["score"]),
            top_factor=data["top_factor"],
            factor_diagnostics={
                k: Severity(v) for k, v in data.get("factor_diagnostics", {}).items()
            },
            stats=dict(data.get("stats", {})),
            raw_score=int(data.get("raw_score", data["score"])),
            score_band=data.get("score_band", ""),
            factor_scores=dict(data.get("factor_scores", {})),
            diagnostic_details=dict(data.get("diagnostic_details", {})),
        )
