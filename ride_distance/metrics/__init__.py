"""Per-file distance extraction."""

from .distance import extract_distance, file_distance

__all__ = ["extract_distance", "file_distance"]
