from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Iterable, List, Optional

import pandas as pd

from ..io.selector import select_files
from ..metrics.distance import file_distance
from ..models.types import AggregateResult, FileDistance, ReportingWindow

logger = logging.getLogger(__name__)

DistanceLookup = Callable[[str], FileDistance]
Observer = Callable[[FileDistance], None]


def directory_lookup(directory: str) -> DistanceLookup:
    """Resolve file names inside ``directory`` to distances, parsing each file at most once."""
    cache: Dict[str, FileDistance] = {}

    def lookup(filename: str) -> FileDistance:
        if filename not in cache:
            cache[filename] = file_distance(os.path.join(directory, filename))
        return cache[filename]

    return lookup


def collect_distances(
    filenames: Iterable[str],
    distance_lookup: DistanceLookup,
    on_error: str = "abort",
    observer: Optional[Observer] = None,
) -> List[FileDistance]:
    """Look up each distinct file name; the first failure raises unless ``on_error == "skip"``."""
    collected: List[FileDistance] = []
    seen = set()
    for filename in filenames:
        if filename in seen:
            continue
        seen.add(filename)
        result = distance_lookup(filename)
        if observer is not None:
            observer(result)
        if not result.ok:
            if on_error != "skip":
                raise result.error
            logger.warning(f"Skipping {filename}: {result.error}")
            continue
        collected.append(result)
    return collected


def aggregate(
    filenames: Iterable[str],
    distance_lookup: DistanceLookup,
    on_error: str = "abort",
    observer: Optional[Observer] = None,
) -> float:
    """Sum of per-file distances (m) over ``filenames``."""
    return sum((r.distance_m for r in collect_distances(filenames, distance_lookup, on_error, observer)), 0.0)


def aggregate_windows(
    directory: str,
    name_pattern: str,
    windows: List[ReportingWindow],
    distance_lookup: Optional[DistanceLookup] = None,
    on_error: str = "abort",
    observer: Optional[Observer] = None,
) -> List[AggregateResult]:
    """Select and sum files for every reporting window over one extracted directory."""
    lookup = distance_lookup or directory_lookup(directory)
    results: List[AggregateResult] = []
    for window in windows:
        selected = select_files(directory, name_pattern, window.date_range)
        distances = collect_distances((f.filename for f in selected), lookup, on_error, observer)
        total = sum((r.distance_m for r in distances), 0.0)
        logger.info(f"{window.label}: {len(distances)} file(s), {total:.2f}m")
        results.append(AggregateResult(window=window, total_m=total, file_count=len(distances), files=distances))
    return results


def distances_frame(results: List[AggregateResult]) -> pd.DataFrame:
    """One row per (window, file) with the distance that went into the window total."""
    rows = []
    for res in results:
        for fd in res.files:
            rows.append(
                {
                    "window": res.window.label,
                    "filename": fd.filename,
                    "distance_m": fd.distance_m,
                    "sample_count": fd.sample_count,
                }
            )
    return pd.DataFrame(rows, columns=["window", "filename", "distance_m", "sample_count"])


def totals_frame(results: List[AggregateResult]) -> pd.DataFrame:
    rows = [
        {
            "window": res.window.label,
            "start": res.window.date_range.start,
            "end": res.window.date_range.end,
            "file_count": res.file_count,
            "total_m": round(res.total_m, 2),
        }
        for res in results
    ]
    return pd.DataFrame(rows, columns=["window", "start", "end", "file_count", "total_m"])
