"""
Lead Analytics — Aggregated Assessment Statistics & Reports
============================================================
Computes dashboard data from the LeadStore.

Provides:
  - Score summary (mean / median / 90th percentile)
  - Band and top-time-waster distributions
  - Alerts on concerning patterns
  - CSV / JSON report generation
"""

from __future__ import annotations

import csv
import io
import json
from datetime import datetime, timezone
from typing import Optional

import numpy as np

from creator_burnout.capture.lead_store import LeadStore
from creator_burnout.utils.helpers import setup_logging

logger = setup_logging()


class LeadAnalytics:
    """Compute analytics and generate reports from captured leads."""

    def __init__(self, store: LeadStore, config: Optional[dict] = None):
        self.store = store
        analytics_cfg = (config or {}).get("analytics") or {}
        self.default_days = analytics_cfg.get("default_days", 30)
        self.high_score_alert = analytics_cfg.get("high_score_alert", 70)

    # ------------------------------------------------------------------
    # Summary Statistics
    # ------------------------------------------------------------------

    def get_overview(self, days: Optional[int] = None) -> dict:
        """Get a dashboard overview.

        Returns
        -------
        dict with:
            stats                    - counts and distributions
            score_summary            - mean / median / p90 / min / max
            top_factor_distribution  - for bar charts
            alerts                   - warnings about concerning patterns
        """
        days = self.default_days if days is None else days
        stats = self.store.get_statistics(days=days)
        summary = self._score_summary(stats["scores"])
        alerts = self._check_alerts(stats, summary, self.high_score_alert)

        return {
            "stats": stats,
            "score_summary": summary,
            "top_factor_distribution": stats.get("top_factor_distribution", {}),
            "alerts": alerts,
        }

    @staticmethod
    def _score_summary(scores: list[int]) -> dict:
        if not scores:
            return {"mean": 0.0, "median": 0.0, "p90": 0.0, "min": 0, "max": 0}
        arr = np.asarray(scores, dtype=float)
        return {
            "mean": round(float(arr.mean()), 1),
            "median": round(float(np.median(arr)), 1),
            "p90": round(float(np.percentile(arr, 90)), 1),
            "min": int(arr.min()),
            "max": int(arr.max()),
        }

    # ------------------------------------------------------------------
    # Alert System
    # ------------------------------------------------------------------

    @staticmethod
    def _check_alerts(stats: dict, summary: dict, high_score: float) -> list[dict]:
        """Return alert dicts with severity, message and suggestion."""
        alerts = []
        total = stats.get("total_leads", 0)

        if total and summary["mean"] > high_score:
            alerts.append({
                "severity": "high",
                "message": f"Average burnout score is {summary['mean']:.0f}/100.",
                "suggestion": (
                    "Most respondents are in the critical band. Lead with the "
                    "action plan rather than the score in follow-up emails."
                ),
            })

        factors = stats.get("top_factor_distribution", {})
        if total and factors:
            factor, n = max(factors.items(), key=lambda x: x[1])
            if n / total > 0.5:
                alerts.append({
                    "severity": "medium",
                    "message": f"{n / total:.0%} of respondents share the same "
                               f"#1 time waster: {factor}.",
                    "suggestion": "Consider a dedicated resource for this factor.",
                })

        critical = stats.get("critical_counts", {})
        if total and critical.get("revenue", 0) / total > 0.5:
            alerts.append({
                "severity": "medium",
                "message": "Most respondents depend on algorithm-driven income.",
                "suggestion": "Prioritise the revenue diversification checklist.",
            })

        if not alerts:
            alerts.append({
                "severity": "info",
                "message": "No concerning patterns detected.",
                "suggestion": "Keep collecting assessments.",
            })

        return alerts

    # ------------------------------------------------------------------
    # Export: CSV
    # ------------------------------------------------------------------

    def export_csv(self, days: Optional[int] = None) -> str:
        """Export captured leads as a CSV string."""
        days = self.default_days if days is None else days
        records = self.store.get_leads(limit=1_000_000, days=days)

        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow([
            "Timestamp", "Contact", "Score", "Band", "Top Time Waster",
            "Platforms", "Manual", "Boundaries", "Revenue",
        ])
        for r in records:
            diag = r.get("diagnostics") or {}
            writer.writerow([
                r.get("timestamp", ""),
                r.get("contact_id", ""),
                r.get("score", ""),
                r.get("score_band", ""),
                r.get("top_factor", ""),
                diag.get("platforms", ""),
                diag.get("manual", ""),
                diag.get("boundaries", ""),
                diag.get("revenue", ""),
            ])

        return output.getvalue()

    # ------------------------------------------------------------------
    # Export: JSON Report
    # ------------------------------------------------------------------

    def export_report(self, days: Optional[int] = None) -> str:
        """Generate a JSON report: summary, alerts and lead history."""
        days = self.default_days if days is None else days
        overview = self.get_overview(days=days)
        leads = self.store.get_leads(limit=1_000_000, days=days)

        stats = dict(overview["stats"])
        stats.pop("scores", None)
        report = {
            "report_generated": datetime.now(timezone.utc).isoformat(),
            "period_days": days,
            "summary": stats,
            "score_summary": overview["score_summary"],
            "alerts": overview["alerts"],
            "leads": [
                {
                    "timestamp": r.get("timestamp"),
                    "contact_id": r.get("contact_id"),
                    "score": r.get("score"),
                    "score_band": r.get("score_band"),
                    "top_factor": r.get("top_factor"),
                }
                for r in leads
            ],
        }
        logger.info("Lead report generated (%d leads, %d days)", len(leads), days)
        return json.dumps(report, indent=2, ensure_ascii=False)
