"""Read GPX track files into in-memory :class:`Track` objects.

Only three things are needed from each document: the ``trkpt`` elements (in
document order) under every ``trk``/``trkseg``, their ``lat``/``lon``
attributes, and the text of the first ``trk/type`` element. Namespaces are
matched with ``{*}`` so GPX 1.0 and 1.1 files both load.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple
from xml.etree.ElementTree import Element

import defusedxml
from defusedxml import ElementTree as ET

from .activity_types import normalize_activity_type
from .config import INPUT_EXTENSION
from .errors import TrackCoordsError, TrackParseError, TrackStructureError
from .models import Coordinate, Track

LOGGER = logging.getLogger(__name__)

__all__ = ["discover_gpx_files", "load_track", "parse_trackpoint"]


def discover_gpx_files(
    directory: str | Path, extension: str = INPUT_EXTENSION
) -> Tuple[List[Path], List[Path]]:
    """Return ``(gpx_files, ignored)`` for ``directory`` sorted by file name.

    Sorting gives a reproducible processing order, which the novelty filter
    depends on.
    """

    base = Path(directory)
    if not base.is_dir():
        raise TrackCoordsError(f"Input directory not found: {base}")
    gpx_files: List[Path] = []
    ignored: List[Path] = []
    for path in sorted(base.iterdir(), key=lambda p: p.name):
        LOGGER.info("Reading: %s", path)
        if path.is_file() and path.suffix.lower() == extension.lower():
            gpx_files.append(path)
        else:
            LOGGER.info("Skipping: %s", path)
            ignored.append(path)
    return gpx_files, ignored


def _parse_axis(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_trackpoint(element: Element) -> Optional[Coordinate]:
    """Return the coordinate of a ``trkpt`` element or ``None`` if unusable.

    Both axes must be present and finite. ``(0, 0)`` is the usual placeholder
    for a missing GPS fix and is rejected as well.
    """

    lat = _parse_axis(element.get("lat"))
    raw_lng = element.get("lon")
    if raw_lng is None:
        raw_lng = element.get("lng")
    lng = _parse_axis(raw_lng)
    if lat is None or lng is None:
        LOGGER.debug(
            "Skipping malformed trkpt lat=%r lon=%r", element.get("lat"), raw_lng
        )
        return None
    if lat == 0.0 and lng == 0.0:
        LOGGER.debug("Skipping invalid trkpt at 0,0")
        return None
    return Coordinate(lat, lng)


def _read_activity_type(track_el: Element) -> Optional[str]:
    type_el = track_el.find("{*}type")
    if type_el is None:
        return None
    return normalize_activity_type(type_el.text)


def load_track(path: str | Path) -> Track:
    """Parse one GPX file into a :class:`Track` holding raw coordinates.

    Raises:
        TrackParseError: the file cannot be read or is not well-formed XML.
        TrackStructureError: the document has no ``trk`` with a ``trkseg``.
    """

    source = Path(path)
    try:
        tree = ET.parse(source)
    except OSError as exc:
        raise TrackParseError(source, f"unreadable file ({exc})") from exc
    except ET.ParseError as exc:
        raise TrackParseError(source, f"malformed XML ({exc})") from exc
    except defusedxml.DefusedXmlException as exc:
        raise TrackParseError(source, f"forbidden XML construct ({exc})") from exc

    root = tree.getroot()
    tracks = root.findall(".//{*}trk")
    if not tracks:
        raise TrackStructureError(source, "missing <trk> element")
    segments = [seg for trk in tracks for seg in trk.findall("{*}trkseg")]
    if not segments:
        raise TrackStructureError(source, "missing <trkseg> element")

    track = Track(identity=source, activity_type=_read_activity_type(tracks[0]))
    skipped = 0
    for segment in segments:
        for element in segment.findall("{*}trkpt"):
            coord = parse_trackpoint(element)
            if coord is None:
                skipped += 1
                continue
            track.points.append(coord)
    track.points_loaded = len(track.points)
    if skipped:
        LOGGER.info("Skipped %d invalid trkpt elements in %s", skipped, source.name)
    LOGGER.debug(
        "Loaded %s type=%s points=%d",
        source.name,
        track.activity_type,
        track.points_loaded,
    )
    return track
