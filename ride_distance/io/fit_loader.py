from __future__ import annotations

from typing import List

from fitparse import FitFile, FitParseError

from ..errors import ActivityParseError


def parse_fit_distance_samples(file_path: str) -> List[float]:
    """Cumulative distance (m) of every FIT 'record' message that carries one."""
    samples: List[float] = []
    try:
        fit = FitFile(file_path)
        for message in fit.get_messages("record"):
            for field in message:
                if field.name == "distance" and field.value is not None:
                    samples.append(float(field.value))
    except FitParseError as e:
        raise ActivityParseError(f"Malformed FIT file {file_path}: {e}") from e
    return samples
