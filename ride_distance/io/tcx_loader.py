"""TCX (Training Center XML) decoding.

Walks Activities/Activity/Lap/Track/Trackpoint and yields the cumulative
DistanceMeters of each trackpoint. Tags are matched by local name so files
with or without the Garmin default namespace decode the same way.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator, List, Tuple

import pandas as pd

from ..errors import ActivityParseError


def _local_name(tag) -> str:
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _children(elem: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in elem if _local_name(child.tag) == name]


def _sample_value(elem: ET.Element) -> float:
    text = (elem.text or "").strip()
    try:
        return float(text)
    except ValueError as e:
        raise ActivityParseError(f"DistanceMeters is not a number: {text!r}") from e


def _iter_samples(root: ET.Element) -> Iterator[Tuple[int, int, float]]:
    """Yield (activity_index, lap_index, distance_m) in document order."""
    activity_index = 0
    for activities in _children(root, "Activities"):
        for activity in _children(activities, "Activity"):
            for lap_index, lap in enumerate(_children(activity, "Lap")):
                for track in _children(lap, "Track"):
                    for trackpoint in _children(track, "Trackpoint"):
                        # Trackpoints without a distance carry no sample
                        for dist in _children(trackpoint, "DistanceMeters")[:1]:
                            yield activity_index, lap_index, _sample_value(dist)
            activity_index += 1


def _parse_root(contents: bytes) -> ET.Element:
    try:
        return ET.fromstring(contents)
    except ET.ParseError as e:
        raise ActivityParseError(f"Malformed workout XML: {e}") from e


def parse_distance_samples(contents: bytes) -> List[float]:
    """Decode one TCX document into its trackpoint distance samples (meters)."""
    return [dist for _, _, dist in _iter_samples(_parse_root(contents))]


def load_tcx_to_dataframe(file_path: str) -> pd.DataFrame:
    """Load a TCX file into a DataFrame of trackpoint distances.

    Columns: activity_index, lap_index, distance_m (cumulative meters)
    """
    with open(file_path, "rb") as f:
        root = _parse_root(f.read())
    rows = list(_iter_samples(root))
    return pd.DataFrame(rows, columns=["activity_index", "lap_index", "distance_m"]).astype(
        {"activity_index": "int64", "lap_index": "int64", "distance_m": "float64"}
    )
