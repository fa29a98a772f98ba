from __future__ import annotations

from typing import List

import pandas as pd

from ..aggregation.totals import distances_frame, totals_frame
from ..errors import ReportWriteError
from ..models.types import AggregateResult


def _write_csv(df: pd.DataFrame, path: str, **kwargs) -> None:
    try:
        df.to_csv(path, index=False, **kwargs)
    except OSError as e:
        raise ReportWriteError(f"Cannot write {path}: {e}") from e


def export_file_distances_csv(results: List[AggregateResult], path: str) -> None:
    _write_csv(distances_frame(results), path, float_format="%.2f")


def export_window_totals_csv(results: List[AggregateResult], path: str) -> None:
    _write_csv(totals_frame(results), path)
