"""
Pipeline entry point: extract the export, then sum distances per reporting window.
"""
from __future__ import annotations

import logging
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from .aggregation.totals import Observer, aggregate_windows
from .config import ExportConfig
from .errors import ArchiveError, ConfigurationError, ExportNotFoundError
from .io.archive import extract_archive
from .models.types import AggregateResult

logger = logging.getLogger(__name__)


def _remove_dir(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise ArchiveError(f"Cannot remove temporary directory {path}: {e}") from e


@contextmanager
def scoped_temp_dir(path: Path, parent: Path, keep: bool = False) -> Iterator[Path]:
    """Yield an empty ``path`` and remove it afterwards, whether or not the body raised.

    ``path`` must sit directly inside ``parent``; anything else is refused
    before a single file is removed.
    """
    if path.resolve().parent != parent.resolve() or path.name in ("", ".", ".."):
        raise ConfigurationError(f"Temporary directory {path} is not a folder directly inside {parent}")
    if path.exists():
        logger.info(f"Removing stale temporary directory {path}")
        _remove_dir(path)
    try:
        yield path
    finally:
        if keep:
            logger.info(f"Keeping extracted files in {path}")
        elif path.exists():
            _remove_dir(path)


def run(config: ExportConfig, observer: Optional[Observer] = None) -> List[AggregateResult]:
    """Extract ``config.archive_path`` and return one AggregateResult per configured window."""
    config.validate_configuration()
    archive_path = config.archive_path
    if not archive_path.is_file():
        raise ExportNotFoundError(f"Export archive not found: {archive_path}")

    base_dir = config.resolved_base_dir()
    with scoped_temp_dir(base_dir / config.temp_dir_name, base_dir, keep=config.keep_temp) as temp_dir:
        extract_archive(archive_path, temp_dir, extension=config.extension)
        return aggregate_windows(
            str(temp_dir),
            config.activity_pattern,
            config.windows,
            on_error=config.on_error,
            observer=observer,
        )
