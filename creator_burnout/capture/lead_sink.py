"""
Lead Capture Boundary
======================
The one external collaborator the engine talks to.  When a user leaves
their contact id on the results page, the session hands

    (contact_id, AssessmentResult, ISO-8601 timestamp)

to a sink and only moves on to the confirmation stage once the sink reports
success.  How the lead travels (email service, CRM, database, webhook) is
the sink's business.

Sinks are passed into each QuizSession explicitly; there is no module-level
default sink.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from creator_burnout.core.assessment_result import AssessmentResult
from creator_burnout.utils.helpers import setup_logging

logger = setup_logging()


@dataclass(frozen=True)
class LeadRecord:
    """One captured lead."""

    contact_id: str
    result: AssessmentResult
    timestamp: str                              # ISO-8601, UTC

    def to_dict(self) -> dict:
        return {
            "contact_id": self.contact_id,
            "timestamp": self.timestamp,
            "result": self.result.to_dict(),
        }


class LeadCaptureSink(ABC):
    """Interface every lead capture adapter implements."""

    @abstractmethod
    def deliver(self, contact_id: str, result: AssessmentResult, timestamp: str) -> bool:
        """Deliver one lead.  Return True on success, False on rejection.

        Raising is also treated as a failed delivery by the session.
        """


class InMemoryLeadSink(LeadCaptureSink):
    """Keeps leads in a list.  Used by the CLI default and the tests."""

    def __init__(self):
        self.leads: list[LeadRecord] = []

    def deliver(self, contact_id: str, result: AssessmentResult, timestamp: str) -> bool:
        self.leads.append(LeadRecord(contact_id, result, timestamp))
        logger.info("Lead captured in memory (%d total)", len(self.leads))
        return True

    def __len__(self) -> int:
        return len(self.leads)
