"""
Creator Burnout Assessment
===========================
Eight-question burnout quiz for content creators: collects answers,
scores burnout, names the #1 time waster and hands the result to a lead
capture sink.
"""

__version__ = "1.0.0"
