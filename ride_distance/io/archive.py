from __future__ import annotations

import logging
import os
import shutil
import zipfile
from pathlib import Path
from typing import List, Union

from ..errors import ArchiveError, ExportNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def extract_archive(archive_path: PathLike, target_dir: PathLike, extension: str = ".tcx") -> List[Path]:
    """Extract every workout entry of an export archive into one flat directory.

    Entries whose name ends with ``extension`` (case-insensitive) are written
    under their base name; the folder structure inside the archive is dropped.
    Returns the written paths in archive order.
    """
    archive_path = Path(archive_path)
    target = Path(target_dir)
    if not archive_path.is_file():
        raise ExportNotFoundError(f"Export archive not found: {archive_path}")

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveError(f"Cannot create extraction directory {target}: {e}") from e

    suffix = extension.lower()
    written: List[Path] = []
    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                basename = os.path.basename(info.filename)
                if not basename.lower().endswith(suffix):
                    continue
                out_file = target / basename
                try:
                    with zf.open(info) as f_in, open(out_file, "wb") as f_out:
                        shutil.copyfileobj(f_in, f_out)
                except OSError as e:
                    raise ArchiveError(f"Cannot write {out_file}: {e}") from e
                written.append(out_file)
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"Corrupt export archive {archive_path}: {e}") from e

    logger.info(f"Extracted {len(written)} {extension} file(s) from {archive_path.name} to {target}")
    return written
