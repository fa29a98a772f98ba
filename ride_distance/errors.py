"""Exception types raised across the distance pipeline.

Every failure the pipeline can hit derives from ``RideDistanceError`` so the
CLI can report it and exit non-zero in one place.
"""


class RideDistanceError(Exception):
    """Base class for all pipeline failures."""


class ConfigurationError(RideDistanceError):
    """Invalid windows, empty activity pattern, unresolvable base directory."""


class ExportNotFoundError(RideDistanceError):
    """The export archive or the extraction directory cannot be read."""


class ArchiveError(RideDistanceError):
    """The archive is corrupt or an entry cannot be written out."""


class DataError(RideDistanceError):
    """A workout file or its name does not have the expected shape."""


class FilenameDateError(DataError):
    def __init__(self, filename: str):
        super().__init__(f"Cannot parse leading YYYY-MM-DD date of file name: {filename!r}")
        self.filename = filename


class ActivityParseError(DataError):
    """Structured workout content could not be decoded."""


class EmptyActivityError(DataError):
    """A workout file carries no distance samples at all."""


class InvalidSampleError(DataError):
    """A distance sample is NaN, infinite or negative."""


class WorkoutReadError(DataError):
    """A selected workout file cannot be opened or read."""


class ReportWriteError(RideDistanceError):
    """A CSV report cannot be written."""
