"""
Explainer — Human-Readable Reasoning for Burnout Results
=========================================================
Transforms an AssessmentResult into plain-English text for the results
page, the CLI report and the follow-up action plan.

The Explainer does NOT score anything.  It reads what the ScoringEngine
already produced and narrates it:
  1. What the score means (band)
  2. Where the time goes (#1 time waster and the ranking behind it)
  3. Which leaks are critical (diagnostics)
  4. What to do next (action plan, next steps)
"""

from __future__ import annotations

from creator_burnout.core.assessment_result import AssessmentResult, Severity

_DIMENSION_TITLES = {
    "platforms": "Platforms",
    "manual": "Manual Work",
    "boundaries": "Boundaries",
    "revenue": "Revenue",
}

_FACTOR_FIXES = {
    "Platform Management Overhead": (
        "Cut back to the two or three platforms that actually drive results "
        "and batch-schedule the rest."
    ),
    "Manual Content Processes": (
        "Automate or template the repetitive steps (captions, resizing, "
        "uploads) before creating anything new."
    ),
    "Lack of Boundaries": (
        "Set fixed working hours and an end-of-day shutdown ritual, and "
        "protect them like client meetings."
    ),
    "Income Instability Anxiety": (
        "Add one revenue stream that does not depend on the algorithm, "
        "such as a product, service or membership."
    ),
    "Constant Posting Pressure": (
        "Commit to a sustainable posting cadence and build a two-week "
        "content buffer."
    ),
}


class Explainer:
    """Generate clear explanations and an action plan for a result."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def explain(self, result: AssessmentResult) -> dict:
        """Build a full explanation package.

        Returns
        -------
        dict with keys:
            overall_narrative     - score and band summary
            top_factor_narrative  - the #1 time waster and why
            factor_breakdown      - all five factors, highest first
            diagnostic_narratives - one line per time-leak dimension
            action_plan           - recommendations tailored to the result
            next_steps            - what happens after submitting an email
            disclaimer            - not-professional-advice note
        """
        return {
            "overall_narrative": self._overall_narrative(result),
            "top_factor_narrative": self._top_factor_narrative(result),
            "factor_breakdown": self._factor_breakdown(result),
            "diagnostic_narratives": self._diagnostic_narratives(result),
            "action_plan": self._action_plan(result),
            "next_steps": self._next_steps(),
            "disclaimer": self._disclaimer(),
        }

    # ------------------------------------------------------------------
    # Narratives
    # ------------------------------------------------------------------

    @staticmethod
    def _overall_narrative(result: AssessmentResult) -> str:
        stats = result.stats
        return (
            f"Your burnout score is **{result.score}/100** "
            f"({result.score_band}).  You spend about "
            f"{stats.get('daily_hours', 0)}h a day on content and rely on "
            f"{stats.get('revenue_streams', 0)} revenue stream(s)."
        )

    @staticmethod
    def _top_factor_narrative(result: AssessmentResult) -> str:
        fix = _FACTOR_FIXES.get(result.top_factor, "")
        return (
            f"Your #1 time waster is **{result.top_factor}**.  This is where "
            "your creativity is bleeding away. Fixing this alone saves "
            f"8-12 hours/week.  {fix}"
        ).strip()

    @staticmethod
    def _factor_breakdown(result: AssessmentResult) -> list[tuple[str, int]]:
        """Factors sorted by contribution; ties keep declaration order."""
        return sorted(result.factor_scores.items(), key=lambda x: x[1], reverse=True)

    @staticmethod
    def _diagnostic_narratives(result: AssessmentResult) -> list[str]:
        narratives = []
        for dim, severity in result.factor_diagnostics.items():
            title = _DIMENSION_TITLES.get(dim, dim.replace("_", " ").title())
            detail = result.diagnostic_details.get(dim, severity.value)
            narratives.append(f"**{title}**: {detail}")
        return narratives

    @staticmethod
    def _action_plan(result: AssessmentResult) -> list[str]:
        """Personalised action plan items, most urgent first."""
        plan = [
            f"Specific fixes for your #1 time waster ({result.top_factor}): "
            + _FACTOR_FIXES.get(result.top_factor, "")
        ]
        diag = result.factor_diagnostics

        if diag.get("platforms", Severity.MANAGEABLE).level > 0 or \
                diag.get("manual", Severity.OKAY).level > 0:
            plan.append(
                "Content repurposing playbook: create once, publish everywhere "
                "(typically saves around 10 hours/week)."
            )
        if diag.get("boundaries", Severity.GOOD).level > 0:
            plan.append(
                "Boundary-setting script templates for clients, collaborators "
                "and your own calendar."
            )
        if diag.get("revenue", Severity.DIVERSIFIED).level > 0:
            plan.append(
                "Revenue diversification checklist: sponsorships, products, "
                "services and memberships."
            )
        if result.score <= 50 and len(plan) == 1:
            plan.append(
                "Your workload looks manageable. Keep tracking your hours so "
                "small leaks do not grow."
            )
        return plan

    @staticmethod
    def _next_steps() -> list[dict]:
        return [
            {
                "title": "Check your inbox",
                "detail": "Look for your burnout assessment report (check spam if needed)",
            },
            {
                "title": "Implement quick wins",
                "detail": "Start with the #1 time waster fix (results in 3-7 days)",
            },
            {
                "title": "Track improvements",
                "detail": "Measure hours saved + income impact over 30 days",
            },
        ]

    @staticmethod
    def _disclaimer() -> str:
        return (
            "**Disclaimer:** This assessment is a self-reflection tool for "
            "content creators.  It is **not** a medical or clinical diagnosis.  "
            "If you are struggling, please reach out to a qualified "
            "mental-health professional."
        )
