"""Write surviving tracks as small JavaScript coordinate files.

Each file holds a single array literal that map rendering scripts can load
with a ``<script>`` tag::

    var morning_run = [[51.329793,6.123456],[51.3298,6.1235]];
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import OUTPUT_EXTENSION, TYPE_DIR_PREFIX
from .errors import OutputDirectoryError
from .models import Coordinate, Track

LOGGER = logging.getLogger(__name__)

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")

__all__ = [
    "format_number",
    "format_track",
    "js_identifier",
    "output_path_for",
    "write_tracks",
]


def js_identifier(name: str) -> str:
    """Turn a file stem into a valid JavaScript variable name."""

    ident = _NON_IDENTIFIER.sub("_", name) or "_"
    if ident[0].isdigit():
        ident = "_" + ident
    return ident


def format_number(value: float) -> str:
    """Format a coordinate in plain decimal notation, e.g. ``51.5`` or ``7``."""

    if value == 0:
        return "0"
    if not math.isfinite(value):
        raise ValueError(f"Cannot write non-finite coordinate {value!r}")
    # repr() is the shortest round-tripping form; Decimal drops the exponent.
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_track(name: str, points: Sequence[Coordinate]) -> str:
    pairs = ",".join(
        f"[{format_number(c.lat)},{format_number(c.lng)}]" for c in points
    )
    return f"var {js_identifier(name)} = [{pairs}];"


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Cannot create output directory {path}: {exc}"
        ) from exc


def output_path_for(
    track: Track, output_dir: Path, *, split_by_type: bool = False
) -> Path:
    target_dir = output_dir
    if split_by_type and track.activity_type:
        target_dir = output_dir / f"{TYPE_DIR_PREFIX}{track.activity_type}"
    return target_dir / f"{track.name}{OUTPUT_EXTENSION}"


def _unique_path(path: Path, used: set[str]) -> Path:
    """Return ``path`` or a ``_<n>`` suffixed sibling not yet in ``used``.

    Names are compared case-insensitively, so ``a.gpx`` and ``a.GPX`` never
    overwrite each other, even on case-insensitive file systems.
    """

    candidate = path
    counter = 2
    while str(candidate).lower() in used:
        candidate = path.with_name(f"{path.stem}_{counter}{path.suffix}")
        counter += 1
    if candidate != path:
        LOGGER.warning(
            "Output %s already written in this run; using %s", path, candidate.name
        )
    used.add(str(candidate).lower())
    return candidate


def write_tracks(
    tracks: Iterable[Track],
    output_dir: str | Path,
    *,
    split_by_type: bool = False,
) -> List[Path]:
    """Write one file per track and return the written paths.

    Raises:
        OutputDirectoryError: the output directory (or a per-type
            subdirectory) cannot be created.
    """

    base = Path(output_dir)
    _ensure_dir(base)
    created: set[Path] = {base}
    used: set[str] = set()
    written: List[Path] = []
    for track in tracks:
        path = _unique_path(
            output_path_for(track, base, split_by_type=split_by_type), used
        )
        if path.parent not in created:
            _ensure_dir(path.parent)
            created.add(path.parent)
        LOGGER.info("Creating new file: %s", path)
        path.write_text(format_track(path.stem, track.points), encoding="utf-8")
        written.append(path)
    return written
