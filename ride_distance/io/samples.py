from __future__ import annotations

from pathlib import Path
from typing import List

from ..errors import ActivityParseError
from .fit_loader import parse_fit_distance_samples
from .tcx_loader import parse_distance_samples


def load_distance_samples(file_path: str) -> List[float]:
    """Read one workout file and return its distance samples, choosing the decoder by extension."""
    suffix = Path(file_path).suffix.lower()
    if suffix == ".tcx":
        with open(file_path, "rb") as f:
            return parse_distance_samples(f.read())
    if suffix == ".fit":
        return parse_fit_distance_samples(file_path)
    raise ActivityParseError(f"Unsupported workout file type {suffix!r}: {file_path}")
