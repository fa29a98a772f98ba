from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC and normalize aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_utc(self.start))
        object.__setattr__(self, "end", as_utc(self.end))

    def contains(self, moment: datetime) -> bool:
        # Both bounds exclusive
        return self.start < as_utc(moment) < self.end


@dataclass(frozen=True)
class ReportingWindow:
    label: str
    date_range: DateRange


@dataclass(frozen=True)
class ActivityFile:
    filename: str
    activity_date: datetime
    path: str


@dataclass
class FileDistance:
    """Outcome of reducing one workout file to its distance."""
    filename: str
    distance_m: Optional[float] = None
    error: Optional[Exception] = None
    sample_count: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AggregateResult:
    window: ReportingWindow
    total_m: float
    file_count: int
    files: List[FileDistance] = field(default_factory=list)  # entries that were summed

    def formatted(self) -> str:
        return f"{self.total_m:.2f}"
