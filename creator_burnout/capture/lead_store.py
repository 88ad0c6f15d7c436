"""
Lead Store — SQLite Lead Capture Sink
======================================
Persists captured leads in a local SQLite database so that:

1. Leads survive app restarts
2. The lead dashboard can aggregate scores and top time wasters
3. Leads can be exported (CSV / JSON) for an email or CRM tool

Each ``deliver`` call opens its own short-lived connection, so one store can
be shared by every session of a Streamlit server.  A database error is
logged and reported as a failed delivery; the session turns that into a
retryable CaptureFailed.
"""

from __future__ import annotations

import json
import sqlite3
from collections import Counter
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from creator_burnout.capture.lead_sink import LeadCaptureSink
from creator_burnout.core.assessment_result import AssessmentResult
from creator_burnout.utils.helpers import ensure_dir, setup_logging

logger = setup_logging()

_DEFAULT_DB_PATH = "data/leads.db"


class LeadStore(LeadCaptureSink):
    """SQLite-backed lead capture sink with a small read API."""

    def __init__(self, db_path: str = _DEFAULT_DB_PATH):
        self.db_path = str(db_path)
        ensure_dir(Path(self.db_path).parent)
        self._init_db()
        logger.info("Lead store ready: %s", self.db_path)

    @classmethod
    def from_config(cls, config: dict) -> "LeadStore":
        lead_cfg = config.get("lead_capture") or {}
        return cls(lead_cfg.get("db_path", _DEFAULT_DB_PATH))

    # ------------------------------------------------------------------
    # Database setup
    # ------------------------------------------------------------------

    def _init_db(self):
        """Create the leads table if it doesn't exist."""
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS leads (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    contact_id TEXT NOT NULL,
                    score INTEGER,
                    score_band TEXT,
                    top_factor TEXT,
                    diagnostics TEXT,
                    stats TEXT,
                    full_result TEXT
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_leads_timestamp
                ON leads(timestamp)
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_leads_contact
                ON leads(contact_id)
            """)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def deliver(self, contact_id: str, result: AssessmentResult, timestamp: str) -> bool:
        """Insert one lead.  Returns False if the database refuses it."""
        try:
            self.save_lead(contact_id, result, timestamp)
        except sqlite3.Error:
            logger.exception("Could not store lead for %s", contact_id)
            return False
        return True

    def save_lead(self, contact_id: str, result: AssessmentResult, timestamp: str) -> int:
        """Store a lead and return its row ID."""
        result_dict = result.to_dict()
        with self._connect() as conn:
            cursor = conn.execute("""
                INSERT INTO leads (
                    timestamp, contact_id, score, score_band, top_factor,
                    diagnostics, stats, full_result
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """, (
                timestamp,
                contact_id,
                result.score,
                result.score_band,
                result.top_factor,
                json.dumps(result_dict["factor_diagnostics"]),
                json.dumps(result.stats),
                json.dumps(result_dict),
            ))
            row_id = cursor.lastrowid
        logger.info("Lead saved (id=%d, score=%d, top=%s)",
                    row_id, result.score, result.top_factor)
        return row_id

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_leads(self, limit: int = 100, days: Optional[int] = None) -> list[dict]:
        """Retrieve captured leads, newest first.

        Parameters
        ----------
        limit : int
            Maximum records to return.
        days : int, optional
            Only return leads captured in the last N days.
        """
        query = "SELECT * FROM leads"
        params: list = []

        if days is not None:
            cutoff = (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()
            query += " WHERE timestamp >= ?"
            params.append(cutoff)

        query += " ORDER BY timestamp DESC, id DESC LIMIT ?"
        params.append(limit)

        with self._connect() as conn:
            conn.row_factory = sqlite3.Row
            rows = conn.execute(query, params).fetchall()

        return [self._row_to_dict(row) for row in rows]

    def get_result(self, lead_id: int) -> Optional[AssessmentResult]:
        """Rebuild the stored AssessmentResult for one lead."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT full_result FROM leads WHERE id = ?", (lead_id,)
            ).fetchone()
        if row is None:
            return None
        return AssessmentResult.from_dict(json.loads(row[0]))

    def get_statistics(self, days: Optional[int] = None) -> dict:
        """Aggregate counts for the lead dashboard.

        Returns
        -------
        dict with:
            total_leads, band_distribution, top_factor_distribution,
            critical_counts, scores (list, newest first)
        """
        records = self.get_leads(limit=1_000_000, days=days)

        band_counts = Counter(r.get("score_band", "") for r in records)
        factor_counts = Counter(r.get("top_factor", "") for r in records)
        critical_counts: Counter = Counter()
        for r in records:
            for dim, severity in (r.get("diagnostics") or {}).items():
                if severity == "Critical":
                    critical_counts[dim] += 1

        return {
            "total_leads": len(records),
            "band_distribution": dict(band_counts),
            "top_factor_distribution": dict(factor_counts),
            "critical_counts": dict(critical_counts),
            "scores": [r["score"] for r in records],
        }

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    def clear(self):
        """Delete every stored lead."""
        with self._connect() as conn:
            conn.execute("DELETE FROM leads")
        logger.info("Lead store cleared: %s", self.db_path)

    def count(self) -> int:
        with self._connect() as conn:
            row = conn.execute("SELECT COUNT(*) FROM leads").fetchone()
            return row[0] if row else 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _row_to_dict(row: sqlite3.Row) -> dict:
        """Convert a sqlite3.Row to a plain dict with parsed JSON fields."""
        d = dict(row)
        for key in ("diagnostics", "stats", "full_result"):
            if key in d and isinstance(d[key], str):
                d[key] = json.loads(d[key])
        return d
