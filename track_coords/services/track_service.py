"""Track processing service.

Loads every GPX file of a directory into memory, then runs the stages
Round -> Dedup -> Novelty -> Simplify over the complete collection. Loading is
the only step that may run in parallel; results are re-assembled in
discovery order before any stage runs, so the sequential novelty pass sees a
reproducible order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Callable, Collection, List, Sequence

from ..config import (
    KNOWN_ACTIVITY_TYPES,
    LOAD_MAX_WORKERS,
    NOVELTY_DIGITS,
    ROUND_DIGITS,
    SPLIT_BY_ACTIVITY_TYPE,
)
from ..errors import TrackFileError
from ..gpx_reader import discover_gpx_files, load_track
from ..models import STATUS_SKIPPED, Track
from ..stages import (
    NoveltyRegistry,
    collapse_duplicates,
    filter_novel_tracks,
    round_tracks,
    simplify_tracks,
)


@dataclass(slots=True)
class TrackPipelineConfig:
    loader: Callable[[Path], Track] = load_track
    split_by_type: bool = SPLIT_BY_ACTIVITY_TYPE
    known_types: Collection[str] = KNOWN_ACTIVITY_TYPES
    round_digits: int = ROUND_DIGITS
    novelty_digits: int = NOVELTY_DIGITS
    load_workers: int = LOAD_MAX_WORKERS
    logger: logging.Logger | None = None


@dataclass(slots=True)
class PipelineStats:
    files_parsed: int = 0
    files_skipped: int = 0
    points_parsed: int = 0
    points_after_dedup: int = 0
    tracks_redundant: int = 0
    tracks_untyped: int = 0
    points_removed_collinear: int = 0
    final_tracks: int = 0
    final_points: int = 0

    def as_rows(self) -> List[tuple[str, int]]:
        return [
            ("Files parsed", self.files_parsed),
            ("Files skipped", self.files_skipped),
            ("Points parsed", self.points_parsed),
            ("Points after dedup", self.points_after_dedup),
            ("Tracks without new points", self.tracks_redundant),
            ("Tracks without known type", self.tracks_untyped),
            ("Collinear points removed", self.points_removed_collinear),
            ("Final tracks", self.final_tracks),
            ("Final points", self.final_points),
        ]


@dataclass(slots=True)
class PipelineResult:
    """Surviving tracks plus every discovered track with its final status."""

    tracks: List[Track] = field(default_factory=list)
    all_tracks: List[Track] = field(default_factory=list)
    stats: PipelineStats = field(default_factory=PipelineStats)


def _count_points(tracks: Sequence[Track]) -> int:
    return sum(len(track.points) for track in tracks)


class TrackPipeline:
    def __init__(self, config: TrackPipelineConfig | None = None):
        self.config = config or TrackPipelineConfig()
        self._log = self.config.logger or logging.getLogger(self.__class__.__name__)

    def _load_one(self, path: Path) -> Track:
        try:
            return self.config.loader(path)
        except TrackFileError as exc:
            self._log.warning("Skipping %s: %s", path, exc.reason)
            return Track(identity=path, status=STATUS_SKIPPED, reason=exc.reason)

    def load(self, paths: Sequence[Path]) -> List[Track]:
        """Load ``paths`` into tracks, preserving the order of ``paths``."""
        if not paths:
            return []
        workers = max(1, min(self.config.load_workers, len(paths)))
        if workers == 1:
            return [self._load_one(path) for path in paths]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self._load_one, paths))

    def process(self, loaded: Sequence[Track]) -> PipelineResult:
        """Run every stage over ``loaded``; skipped tracks pass through untouched."""
        cfg = self.config
        result = PipelineResult(all_tracks=list(loaded))
        stats = result.stats
        tracks = [t for t in loaded if t.status != STATUS_SKIPPED]
        stats.files_parsed = len(tracks)
        stats.files_skipped = len(loaded) - len(tracks)
        stats.points_parsed = _count_points(tracks)
        self._log.info("Parsed files: %d", stats.files_parsed)
        self._log.info("Parsed points: %d", stats.points_parsed)

        self._log.info("Rounding values")
        round_tracks(tracks, cfg.round_digits)

        self._log.info("Removing duplicates in file")
        collapse_duplicates(tracks)
        stats.points_after_dedup = _count_points(tracks)
        self._log.info("Points after dedup: %d", stats.points_after_dedup)

        self._log.info("Removing tracks without new points")
        outcome = filter_novel_tracks(
            tracks,
            split_by_type=cfg.split_by_type,
            known_types=cfg.known_types,
            registry_factory=lambda: NoveltyRegistry(cfg.novelty_digits),
        )
        stats.tracks_redundant = len(outcome.redundant)
        stats.tracks_untyped = len(outcome.untyped)
        self._log.info(
            "Removed %d tracks (%d without new points, %d without known type); "
            "remaining %d",
            outcome.removed,
            stats.tracks_redundant,
            stats.tracks_untyped,
            len(tracks),
        )
        for group, cells in sorted(
            outcome.claimed_cells.items(), key=lambda item: item[0] or ""
        ):
            self._log.debug("Registry %s holds %d cells", group or "all", cells)

        self._log.info("Removing points on a straight line")
        stats.points_removed_collinear = simplify_tracks(tracks)

        stats.final_tracks = len(tracks)
        stats.final_points = _count_points(tracks)
        self._log.info("Final files: %d", stats.final_tracks)
        self._log.info("Final points: %d", stats.final_points)
        result.tracks = tracks
        return result

    def run(self, input_dir: str | Path) -> PipelineResult:
        paths, _ignored = discover_gpx_files(input_dir)
        return self.process(self.load(paths))


__all__ = ["PipelineResult", "PipelineStats", "TrackPipeline", "TrackPipelineConfig"]
