"""Central configuration for the track coordinate exporter.

All values are constants imported by the rest of the package. Adjust as
needed for your environment, or override them through environment variables
(optionally via a local `.env`).
"""

from __future__ import annotations

import importlib
import os


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _env_str_set(key: str, default: str) -> frozenset[str]:
    raw = os.getenv(key, default)
    return frozenset(
        item.strip().lower() for item in raw.split(",") if item.strip()
    )


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except Exception:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Input/Output
# ---------------------------------------------------------------------------
# Only files with this suffix (case-insensitive) are read as tracks.
INPUT_EXTENSION = ".gpx"

# Suffix used for the generated coordinate scripts.
OUTPUT_EXTENSION = ".js"

# Per-activity subdirectories are named <prefix><type>, e.g. coords_running.
TYPE_DIR_PREFIX = "coords_"


# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------
# Decimal digits kept for every coordinate (6 digits is roughly 0.1 m).
ROUND_DIGITS = _env_int("TRACK_COORDS_ROUND_DIGITS", 6)

# Decimal digits of the coarse grid used to decide whether a track adds
# coverage (4 digits is roughly 11 m).
NOVELTY_DIGITS = _env_int("TRACK_COORDS_NOVELTY_DIGITS", 4)


# ---------------------------------------------------------------------------
# Activity types
# ---------------------------------------------------------------------------
# Keep one coverage registry per activity type and write per-type folders.
SPLIT_BY_ACTIVITY_TYPE = _env_bool("TRACK_COORDS_SPLIT_BY_TYPE", False)

# Labels that count as classified when splitting by type.
KNOWN_ACTIVITY_TYPES = _env_str_set(
    "TRACK_COORDS_ACTIVITY_TYPES", "walking,running,cycling"
)

# Labels folded into their canonical form before any filtering.
ACTIVITY_TYPE_SYNONYMS = {"hiking": "walking"}


# ---------------------------------------------------------------------------
# Performance tuning
# ---------------------------------------------------------------------------
# Threads used to parse GPX files. Output order never depends on this.
LOAD_MAX_WORKERS = _env_int("TRACK_COORDS_LOAD_WORKERS", 4)


# ---------------------------------------------------------------------------
# Excel run report
# ---------------------------------------------------------------------------
# Automatically size columns after writing each sheet (openpyxl only).
EXCEL_AUTOSIZE_COLUMNS = True
EXCEL_AUTOSIZE_MAX_WIDTH = 60  # characters
EXCEL_AUTOSIZE_MIN_WIDTH = 6  # characters
EXCEL_AUTOSIZE_PADDING = 2  # extra characters added to the detected max
EXCEL_AUTOSIZE_MAX_ROWS = (
    5000  # skip autosize for very large sheets (performance guard)
)
