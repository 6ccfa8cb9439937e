"""GPX track coordinate exporter package."""

from .main import main
from .models import Coordinate, Track
from .errors import (
    OutputDirectoryError,
    TrackCoordsError,
    TrackFileError,
    TrackParseError,
    TrackStructureError,
)

__all__ = [
    "main",
    "Coordinate",
    "Track",
    "OutputDirectoryError",
    "TrackCoordsError",
    "TrackFileError",
    "TrackParseError",
    "TrackStructureError",
]
