"""
Configuration for the distance pipeline.
Replaces fixed export names and date constants with a value passed into ``run``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .errors import ConfigurationError
from .models.types import DateRange, ReportingWindow

ARCHIVE_NAME = "GoogleFitExport.zip"
TEMP_DIR_NAME = "google-fit-tmp"
ACTIVITY_PATTERN = "Radfahren"
WORKOUT_EXTENSION = ".tcx"

ON_ERROR_POLICIES = ("abort", "skip")


def default_windows() -> List[ReportingWindow]:
    """Intermediate checkpoint and season total of the 2023 challenge."""
    start = datetime(2023, 4, 1, tzinfo=timezone.utc)
    return [
        ReportingWindow(
            "Zwischenstand zum 02.06.2023",
            DateRange(start, datetime(2023, 6, 2, 23, 59, tzinfo=timezone.utc)),
        ),
        ReportingWindow(
            "Gesamtergebnis",
            DateRange(start, datetime(2023, 10, 31, tzinfo=timezone.utc)),
        ),
    ]


def default_base_dir() -> Path:
    """The user's download folder, where the export archive is expected."""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigurationError(f"Cannot resolve home directory: {e}") from e
    return home / "Downloads"


def _parse_moment(text: str) -> datetime:
    try:
        moment = datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise ConfigurationError(f"Invalid date {text!r}, expected YYYY-MM-DD[THH:MM]") from e
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def parse_window(spec: str) -> ReportingWindow:
    """Parse ``label=START..END`` into a reporting window.

    START and END are ISO dates (optionally with a time) taken as UTC.
    """
    label, sep, span = spec.rpartition("=")
    if not sep or not label.strip():
        raise ConfigurationError(f"Window must look like 'label=START..END': {spec!r}")
    start_text, sep, end_text = span.partition("..")
    if not sep:
        raise ConfigurationError(f"Window range must look like 'START..END': {span!r}")
    start = _parse_moment(start_text)
    end = _parse_moment(end_text)
    if end <= start:
        raise ConfigurationError(f"Window {label.strip()!r} ends before it starts")
    return ReportingWindow(label.strip(), DateRange(start, end))


@dataclass
class ExportConfig:
    """Everything one run needs: where the export lives, what to select, which windows to sum."""
    base_dir: Optional[Path] = None
    archive_name: str = ARCHIVE_NAME
    temp_dir_name: str = TEMP_DIR_NAME
    activity_pattern: str = ACTIVITY_PATTERN
    extension: str = WORKOUT_EXTENSION
    windows: List[ReportingWindow] = field(default_factory=default_windows)
    keep_temp: bool = False  # leave extracted files behind for inspection
    on_error: str = "abort"

    def resolved_base_dir(self) -> Path:
        if self.base_dir is None:
            return default_base_dir()
        return Path(self.base_dir)

    @property
    def archive_path(self) -> Path:
        return self.resolved_base_dir() / self.archive_name

    @property
    def temp_dir(self) -> Path:
        return self.resolved_base_dir() / self.temp_dir_name

    def add_window(self, label: str, start: datetime, end: datetime) -> ReportingWindow:
        window = ReportingWindow(label, DateRange(start, end))
        self.windows.append(window)
        return window

    def validate_configuration(self) -> bool:
        """Validate that the run can start; raises ConfigurationError listing every problem."""
        errors = []

        if not self.activity_pattern:
            errors.append("activity pattern must not be empty")

        name = self.temp_dir_name
        if name in ("", ".", "..") or "/" in name or "\\" in name:
            errors.append(f"temp dir name must be a plain folder name: {name!r}")

        if not self.extension.startswith("."):
            errors.append(f"extension must start with '.': {self.extension!r}")

        if not self.windows:
            errors.append("at least one reporting window is required")

        for window in self.windows:
            if window.date_range.end <= window.date_range.start:
                errors.append(f"window {window.label!r} ends before it starts")

        if self.on_error not in ON_ERROR_POLICIES:
            errors.append(f"on_error must be one of {ON_ERROR_POLICIES}, got {self.on_error!r}")

        if errors:
            raise ConfigurationError(f"Configuration errors: {'; '.join(errors)}")

        return True

