from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import ACTIVITY_PATTERN, ARCHIVE_NAME, TEMP_DIR_NAME, WORKOUT_EXTENSION, ExportConfig, parse_window
from .errors import RideDistanceError
from .models.types import AggregateResult, FileDistance
from .pipeline import run
from .storage.export import export_file_distances_csv, export_window_totals_csv

logger = logging.getLogger(__name__)


def format_report(results: List[AggregateResult]) -> List[str]:
    return [f"{res.window.label}: {res.formatted()}m" for res in results]


def _print_file_distance(result: FileDistance) -> None:
    if result.ok:
        print(f"  {result.filename}: {result.distance_m:.2f}m")
    else:
        print(f"  {result.filename}: ERROR {result.error}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sum cycling distances from a fitness-data export archive")
    parser.add_argument("--base-dir", help="Folder holding the export archive (default: ~/Downloads)")
    parser.add_argument("--archive", default=ARCHIVE_NAME, help=f"Export archive file name (default: {ARCHIVE_NAME})")
    parser.add_argument("--temp-dir-name", default=TEMP_DIR_NAME, help=f"Extraction folder created inside the base dir (default: {TEMP_DIR_NAME})")
    parser.add_argument("--pattern", default=ACTIVITY_PATTERN, help=f"Substring identifying the activity type in file names (default: {ACTIVITY_PATTERN})")
    parser.add_argument("--extension", default=WORKOUT_EXTENSION, help=f"Workout file extension to extract (default: {WORKOUT_EXTENSION})")
    parser.add_argument("--window", action="append", help="Reporting window 'label=START..END' (repeatable; replaces the defaults)")
    parser.add_argument("--keep-temp", action="store_true", help="Do not delete the extracted files afterwards")
    parser.add_argument("--skip-bad-files", action="store_true", help="Leave unreadable workout files out instead of aborting")
    parser.add_argument("--list-files", action="store_true", help="Print the distance of every file that is summed")
    parser.add_argument("--csv", help="Write per-file distances to this CSV path")
    parser.add_argument("--totals-csv", help="Write per-window totals to this CSV path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--wait", action="store_true", help="Wait for Enter before exiting")
    return parser


def config_from_args(args: argparse.Namespace) -> ExportConfig:
    config = ExportConfig(
        base_dir=Path(args.base_dir) if args.base_dir else None,
        archive_name=args.archive,
        temp_dir_name=args.temp_dir_name,
        activity_pattern=args.pattern,
        extension=args.extension,
        keep_temp=args.keep_temp,
        on_error="skip" if args.skip_bad_files else "abort",
    )
    if args.window:
        config.windows = [parse_window(w) for w in args.window]
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        results = run(config, observer=_print_file_distance if args.list_files else None)
        for line in format_report(results):
            print(line)
        if args.csv:
            export_file_distances_csv(results, args.csv)
            logger.info(f"Wrote per-file distances: {args.csv}")
        if args.totals_csv:
            export_window_totals_csv(results, args.totals_csv)
            logger.info(f"Wrote window totals: {args.totals_csv}")
        code = 0
    except RideDistanceError as e:
        logger.error(str(e))
        code = 1

    if args.wait:
        input("\nPress Enter to exit...")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
