"""Summing per-file distances over reporting windows."""

from .totals import aggregate, aggregate_windows, directory_lookup, distances_frame, totals_frame

__all__ = [
    "aggregate",
    "aggregate_windows",
    "directory_lookup",
    "distances_frame",
    "totals_frame",
]
