"""Exact numeric helpers for coordinate rounding and collinearity."""

from __future__ import annotations

import math

from .models import Coordinate

__all__ = ["round_value", "round_coordinate", "collinear"]


def round_value(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals, ties away from zero.

    The value is scaled by ``10**digits``, rounded to an integer with halves
    moving away from zero, then scaled back. Python's built-in ``round`` uses
    banker's rounding, which would map ``0.5`` to ``0`` instead of ``1``.
    """

    if not math.isfinite(value):
        return value
    factor = float(10**digits)
    scaled = value * factor
    if not math.isfinite(scaled):
        # Magnitudes this large are already integral at any scale.
        return value
    whole = math.trunc(scaled)
    # scaled - whole is exact for binary floats.
    if abs(scaled - whole) >= 0.5:
        whole += 1 if scaled > 0 else -1
    return whole / factor


def round_coordinate(coord: Coordinate, digits: int) -> Coordinate:
    return Coordinate(round_value(coord.lat, digits), round_value(coord.lng, digits))


def collinear(a: Coordinate, b: Coordinate, c: Coordinate) -> bool:
    """Return ``True`` when ``c`` lies exactly on the line through ``a`` and ``b``.

    Uses the cross-product identity without any tolerance, so it only fires on
    coordinates whose slopes are numerically identical.
    """

    return (a.lat - c.lat) * (c.lng - b.lng) == (c.lat - b.lat) * (a.lng - c.lng)
