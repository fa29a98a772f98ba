"""Cycling distance totals from a fitness-data export.

Modules:
- config: Export location, activity pattern and reporting windows
- io: Archive extraction, file selection, TCX/FIT decoding
- models: Typed domain objects
- metrics: Per-file distance extraction
- aggregation: Per-window sums
- storage: CSV export helpers
- pipeline: End-to-end run with a scoped temporary directory
- cli: Command line interface
"""

__version__ = "1.0.0"

__all__ = [
    "config",
    "io",
    "models",
    "metrics",
    "aggregation",
    "storage",
    "pipeline",
    "cli",
]
