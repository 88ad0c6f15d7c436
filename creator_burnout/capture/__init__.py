"""
Capture Module — Lead Capture Sinks
====================================
Adapters that receive a finished assessment together with the user's
contact id.
"""

from creator_burnout.capture.lead_sink import InMemoryLeadSink, LeadCaptureSink, LeadRecord
from creator_burnout.capture.lead_store import LeadStore

__all__ = ["LeadCaptureSink", "LeadRecord", "InMemoryLeadSink", "LeadStore"]
