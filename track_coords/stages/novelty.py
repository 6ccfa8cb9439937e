"""Novelty filter stage: drop tracks that add no new coverage.

Coverage is tracked on a coarse grid (``NOVELTY_DIGITS`` decimals). Tracks
are visited in discovery order and every point a track visits is claimed in
a :class:`NoveltyRegistry`, including the points of tracks that end up being
dropped. A later track whose points were all claimed before it is therefore
dropped even if it is longer than the tracks that claimed them. The outcome
depends on processing order, so this stage always runs as one sequential
pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Collection, Dict, List, Optional, Set, Tuple

from ..activity_types import is_known_activity_type
from ..config import KNOWN_ACTIVITY_TYPES, NOVELTY_DIGITS
from ..geometry import round_value
from ..models import STATUS_REDUNDANT, STATUS_UNTYPED, Coordinate, Track

LOGGER = logging.getLogger(__name__)

CoarseKey = Tuple[float, float]


class NoveltyRegistry:
    """Set of coarse coordinates already claimed by earlier tracks.

    Stored as latitude -> set of longitudes. The registry only grows.
    """

    def __init__(self, digits: int = NOVELTY_DIGITS) -> None:
        self.digits = digits
        self._claimed: Dict[float, Set[float]] = {}
        self._size = 0

    def coarse_key(self, coord: Coordinate) -> CoarseKey:
        return round_value(coord.lat, self.digits), round_value(coord.lng, self.digits)

    def claim(self, coord: Coordinate) -> bool:
        """Record ``coord``; return ``True`` if its coarse cell was new."""
        lat, lng = self.coarse_key(coord)
        lngs = self._claimed.setdefault(lat, set())
        if lng in lngs:
            return False
        lngs.add(lng)
        self._size += 1
        return True

    def claim_track(self, track: Track) -> int:
        """Claim every point of ``track``; return how many cells were new."""
        return sum(1 for coord in track.points if self.claim(coord))

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, Coordinate):
            return False
        lat, lng = self.coarse_key(coord)
        return lng in self._claimed.get(lat, ())

    def __len__(self) -> int:
        return self._size


@dataclass(slots=True)
class NoveltyOutcome:
    """Tracks removed by :func:`filter_novel_tracks` and final registry sizes."""

    redundant: List[Track] = field(default_factory=list)
    untyped: List[Track] = field(default_factory=list)
    claimed_cells: Dict[Optional[str], int] = field(default_factory=dict)

    @property
    def removed(self) -> int:
        return len(self.redundant) + len(self.untyped)


def filter_novel_tracks(
    tracks: List[Track],
    *,
    split_by_type: bool = False,
    known_types: Collection[str] = KNOWN_ACTIVITY_TYPES,
    registry_factory: Callable[[], NoveltyRegistry] = NoveltyRegistry,
) -> NoveltyOutcome:
    """Remove tracks without novel points from ``tracks`` in place.

    With ``split_by_type`` each known activity type gets its own registry, so
    a cycling track never suppresses a running track over the same ground.
    Tracks with a missing or unknown type are then removed as untyped and
    claim nothing. Without splitting, every track shares one registry.

    Registries are created fresh for each call and discarded on return.
    """

    registries: Dict[Optional[str], NoveltyRegistry] = {}
    outcome = NoveltyOutcome()
    removed_ids: Set[int] = set()

    for track in tracks:
        group: Optional[str] = None
        if split_by_type:
            if not is_known_activity_type(track.activity_type, known_types):
                track.status = STATUS_UNTYPED
                track.reason = (
                    "missing activity type"
                    if track.activity_type is None
                    else f"unknown activity type '{track.activity_type}'"
                )
                outcome.untyped.append(track)
                removed_ids.add(id(track))
                continue
            group = track.activity_type
        registry = registries.get(group)
        if registry is None:
            registry = registries[group] = registry_factory()
        if registry.claim_track(track) == 0:
            track.status = STATUS_REDUNDANT
            track.reason = "no new points"
            outcome.redundant.append(track)
            removed_ids.add(id(track))
            LOGGER.debug("Dropping %s: no new points", track.identity)

    tracks[:] = [track for track in tracks if id(track) not in removed_ids]
    outcome.claimed_cells = {group: len(reg) for group, reg in registries.items()}
    return outcome
