"""
Dashboard Module — Lead Analytics & Reporting
==============================================
Aggregated statistics, alerts and export for captured leads.
"""

from creator_burnout.dashboard.analytics import LeadAnalytics

__all__ = ["LeadAnalytics"]
