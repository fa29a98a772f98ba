"""Loading export archives and workout files."""

from .archive import extract_archive
from .samples import load_distance_samples
from .selector import filename_date, list_activity_files, select_files
from .tcx_loader import load_tcx_to_dataframe, parse_distance_samples

__all__ = [
    "extract_archive",
    "filename_date",
    "list_activity_files",
    "load_distance_samples",
    "load_tcx_to_dataframe",
    "parse_distance_samples",
    "select_files",
]
