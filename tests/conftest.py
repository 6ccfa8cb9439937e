"""Global pytest fixtures & helpers.

Adds project root to path and provides small GPX document builders shared by
the reader, pipeline and CLI tests.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from track_coords.models import Coordinate, Track


GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
)


# --- Factory helpers -------------------------------------------------
def gpx_document(
    points: Iterable[Tuple[object, object]],
    activity_type: Optional[str] = None,
) -> str:
    lines = [GPX_HEADER, "  <trk>\n", "    <name>Test</name>\n"]
    if activity_type is not None:
        lines.append(f"    <type>{activity_type}</type>\n")
    lines.append("    <trkseg>\n")
    for lat, lon in points:
        lines.append(f'      <trkpt lat="{lat}" lon="{lon}"><ele>10</ele></trkpt>\n')
    lines.append("    </trkseg>\n  </trk>\n</gpx>\n")
    return "".join(lines)


def write_gpx(
    path: Path,
    points: Iterable[Tuple[object, object]],
    activity_type: Optional[str] = None,
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(gpx_document(points, activity_type), encoding="utf-8")
    return path


def make_track(name: str, points, activity_type: Optional[str] = None) -> Track:
    return Track(
        identity=Path(f"{name}.gpx"),
        activity_type=activity_type,
        points=[Coordinate(float(lat), float(lng)) for lat, lng in points],
    )


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def gpx_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "gpx"
    directory.mkdir()
    return directory


@pytest.fixture
def gpx_writer():
    return write_gpx


@pytest.fixture
def track_factory():
    return make_track
