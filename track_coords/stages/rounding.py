"""Rounding stage: quantise every coordinate to a fixed precision."""

from __future__ import annotations

from typing import Iterable

from ..config import ROUND_DIGITS
from ..geometry import round_coordinate
from ..models import Track


def round_tracks(tracks: Iterable[Track], digits: int = ROUND_DIGITS) -> None:
    """Replace every point of every track with its rounded value, in place."""

    for track in tracks:
        points = track.points
        for idx, coord in enumerate(points):
            points[idx] = round_coordinate(coord, digits)
