"""Typed domain objects."""

from .types import ActivityFile, AggregateResult, DateRange, FileDistance, ReportingWindow

__all__ = [
    "ActivityFile",
    "AggregateResult",
    "DateRange",
    "FileDistance",
    "ReportingWindow",
]
