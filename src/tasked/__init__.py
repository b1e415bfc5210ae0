"""Tasked - task board aggregation and metrics engine."""

__version__ = "0.1.0"
