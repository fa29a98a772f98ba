from __future__ import annotations

import logging
import os
from typing import Sequence

import numpy as np

from ..errors import EmptyActivityError, InvalidSampleError, RideDistanceError, WorkoutReadError
from ..io.samples import load_distance_samples
from ..models.types import FileDistance

logger = logging.getLogger(__name__)


def extract_distance(samples: Sequence[float]) -> float:
    """Total distance of one file: the largest cumulative distance sample.

    Raises EmptyActivityError for an empty sequence and InvalidSampleError
    when a sample is NaN, infinite or negative.
    """
    if len(samples) == 0:
        raise EmptyActivityError("No distance samples to take a maximum from")
    best = float(samples[0])
    for value in samples:
        value = float(value)
        if not np.isfinite(value) or value < 0:
            raise InvalidSampleError(f"Invalid distance sample: {value}")
        if value > best:
            best = value
    return best


def file_distance(file_path: str) -> FileDistance:
    """Parse one workout file and reduce it to a FileDistance.

    Failures are captured in the result rather than raised; the caller
    decides whether they abort the run.
    """
    filename = os.path.basename(file_path)
    try:
        try:
            samples = load_distance_samples(file_path)
        except OSError as e:
            raise WorkoutReadError(f"Cannot read {filename}: {e}") from e
        if not samples:
            raise EmptyActivityError(f"{filename} has no trackpoint with a distance")
        distance = extract_distance(samples)
    except RideDistanceError as e:
        logger.debug(f"Failed to read distance from {filename}: {e}")
        return FileDistance(filename=filename, error=e)
    logger.debug(f"{filename}: {distance:.2f}m from {len(samples)} samples")
    return FileDistance(filename=filename, distance_m=distance, sample_count=len(samples))
