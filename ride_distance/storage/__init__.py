"""CSV export helpers."""

from .export import export_file_distances_csv, export_window_totals_csv

__all__ = ["export_file_distances_csv", "export_window_totals_csv"]
