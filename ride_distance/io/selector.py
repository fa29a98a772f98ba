from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import List

from ..errors import ConfigurationError, ExportNotFoundError, FilenameDateError
from ..models.types import ActivityFile, DateRange

DATE_PREFIX_FORMAT = "%Y-%m-%d"
DATE_PREFIX_LENGTH = 10


def filename_date(filename: str) -> datetime:
    """Parse the leading YYYY-MM-DD of a workout file name as midnight UTC."""
    try:
        parsed = datetime.strptime(filename[:DATE_PREFIX_LENGTH], DATE_PREFIX_FORMAT)
    except ValueError as e:
        raise FilenameDateError(filename) from e
    return parsed.replace(tzinfo=timezone.utc)


def list_activity_files(directory: str) -> List[ActivityFile]:
    """All regular files directly inside ``directory``, in enumeration order.

    Every file name must start with a date; one that does not means the
    export is corrupt and raises FilenameDateError.
    """
    try:
        with os.scandir(directory) as entries:
            files = [(entry.name, entry.path) for entry in entries if entry.is_file()]
    except OSError as e:
        raise ExportNotFoundError(f"Cannot read workout directory {directory}: {e}") from e
    return [ActivityFile(filename=name, activity_date=filename_date(name), path=path) for name, path in files]


def select_files(directory: str, name_pattern: str, date_range: DateRange) -> List[ActivityFile]:
    """Files whose name contains ``name_pattern`` and whose date lies strictly inside ``date_range``."""
    if not name_pattern:
        raise ConfigurationError("Activity name pattern must not be empty")
    return [
        f for f in list_activity_files(directory)
        if name_pattern in f.filename and date_range.contains(f.activity_date)
    ]
