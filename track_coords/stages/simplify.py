"""Simplification stage: drop interior points lying exactly on a straight line."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..geometry import collinear
from ..models import Coordinate, Track


def simplify_points(points: Sequence[Coordinate]) -> List[Coordinate]:
    """Return ``points`` without interior points collinear with their neighbours.

    ``kept[-2]``/``kept[-1]``/``coord`` form the triple being tested. When the
    middle point is removed the same anchor is tested again against the next
    point, and again against the anchor before it, so no three consecutive
    survivors are collinear and a second pass changes nothing. Endpoints are
    always kept.
    """

    if len(points) < 3:
        return list(points)
    kept: List[Coordinate] = []
    for coord in points:
        while len(kept) >= 2 and collinear(kept[-2], coord, kept[-1]):
            kept.pop()
        kept.append(coord)
    return kept


def simplify_tracks(tracks: Iterable[Track]) -> int:
    """Simplify every track in place; return the number of points removed."""

    removed = 0
    for track in tracks:
        before = len(track.points)
        track.points[:] = simplify_points(track.points)
        removed += before - len(track.points)
    return removed
