"""Duplicate collapse stage: drop points equal to their predecessor."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable

from ..models import Track


def collapse_track_duplicates(track: Track) -> int:
    """Collapse runs of identical adjacent points to one; return points removed.

    Only neighbours are compared, so a track that revisits an earlier
    coordinate keeps both visits.
    """

    before = len(track.points)
    track.points[:] = [coord for coord, _ in groupby(track.points)]
    return before - len(track.points)


def collapse_duplicates(tracks: Iterable[Track]) -> int:
    return sum(collapse_track_duplicates(track) for track in tracks)
