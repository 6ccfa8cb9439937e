"""Command line entry point.

Usage::

    python -m track_coords GPX_DIR OUTPUT_DIR [--split-by-type] [--report run.xlsx]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import LOAD_MAX_WORKERS, SPLIT_BY_ACTIVITY_TYPE
from .errors import TrackCoordsError
from .js_writer import write_tracks
from .report_writer import write_report
from .services import TrackPipeline, TrackPipelineConfig

LOGGER = logging.getLogger("track_coords")


def _setup_logging(level: str) -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=getattr(logging, level),
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().setLevel(getattr(logging, level))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="track-coords",
        description=(
            "Reduce a directory of GPX tracks to simplified coordinate arrays, "
            "dropping tracks that cover no new ground"
        ),
    )
    parser.add_argument("input_dir", type=Path, help="Directory containing .gpx files")
    parser.add_argument(
        "output_dir", type=Path, help="Directory receiving the generated .js files"
    )
    parser.add_argument(
        "--split-by-type",
        action=argparse.BooleanOptionalAction,
        default=SPLIT_BY_ACTIVITY_TYPE,
        help=(
            "Filter each activity type separately and write coords_<type> "
            "subdirectories; tracks without a known type are dropped"
        ),
    )
    parser.add_argument(
        "--load-workers",
        type=int,
        default=LOAD_MAX_WORKERS,
        help=f"Threads used to parse GPX files (default: {LOAD_MAX_WORKERS})",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help="Optional .xlsx path for a per-file run report",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Python logging level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the exporter; return the process exit status."""

    args = _build_parser().parse_args(argv)
    _setup_logging(args.log_level)

    pipeline = TrackPipeline(
        TrackPipelineConfig(
            split_by_type=args.split_by_type,
            load_workers=args.load_workers,
        )
    )
    try:
        result = pipeline.run(args.input_dir)
        written = write_tracks(
            result.tracks, args.output_dir, split_by_type=args.split_by_type
        )
        if args.report is not None:
            write_report(args.report, result.all_tracks, result.stats)
    except TrackCoordsError as exc:
        LOGGER.error("%s", exc)
        return 1
    LOGGER.info("Wrote %d coordinate files to %s", len(written), args.output_dir)
    return 0
