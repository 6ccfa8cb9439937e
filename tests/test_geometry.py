"""Tests for coordinate rounding and the exact collinearity predicate."""

from __future__ import annotations

import pytest

from track_coords.geometry import collinear, round_coordinate, round_value
from track_coords.models import Coordinate


@pytest.mark.parametrize(
    ("value", "digits", "expected"),
    [
        (0.5, 0, 1.0),
        (-0.5, 0, -1.0),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (1.49, 0, 1.0),
        (51.3297934, 6, 51.329793),
        (-3.1800006, 6, -3.180001),
        (1.0000001, 6, 1.0),
        (1.00006, 4, 1.0001),
        (123.0, 6, 123.0),
    ],
)
def test_round_value_half_away_from_zero(value, digits, expected) -> None:
    assert round_value(value, digits) == expected


@pytest.mark.parametrize(
    "value", [0.0, 1.2345675, -1.2345675, 51.32979349, 179.9999995, -89.123456789]
)
def test_round_value_is_idempotent(value) -> None:
    once = round_value(value, 6)
    assert round_value(once, 6) == once


def test_round_coordinate_rounds_both_axes() -> None:
    coord = round_coordinate(Coordinate(51.4800004, -3.1800006), 6)
    assert coord == Coordinate(51.48, -3.180001)


def test_collinear_detects_exact_line() -> None:
    a, b, c = Coordinate(0.0, 1.0), Coordinate(2.0, 3.0), Coordinate(1.0, 2.0)
    assert collinear(a, b, c) is True


def test_collinear_has_no_tolerance() -> None:
    a, b = Coordinate(0.0, 0.0), Coordinate(2.0, 2.0)
    assert collinear(a, b, Coordinate(1.0, 1.000001)) is False


def test_collinear_with_coincident_points() -> None:
    a = Coordinate(5.0, 5.0)
    # A middle point equal to either neighbour always lies on the line.
    assert collinear(a, Coordinate(6.0, 9.0), a) is True


@pytest.mark.parametrize("value", [1e305, -1e305, 1.7976931348623157e308])
def test_round_value_passes_huge_values_through(value) -> None:
    assert round_value(value, 6) == value
    assert round_value(value, 4) == value
