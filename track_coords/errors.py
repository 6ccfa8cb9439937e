"""Central error types used across the application."""

from __future__ import annotations


class TrackCoordsError(RuntimeError):
    """Base error for failures that abort a run."""


class TrackFileError(TrackCoordsError):
    """Raised when a single GPX source cannot be turned into a track.

    The pipeline treats these as recoverable: the file is skipped and the
    batch continues.
    """

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class TrackParseError(TrackFileError):
    """Raised when a source file is unreadable or not well-formed XML."""


class TrackStructureError(TrackFileError):
    """Raised when a GPX document lacks the ``trk``/``trkseg`` wrapper."""


class OutputDirectoryError(TrackCoordsError):
    """Raised when an output directory cannot be created."""


__all__ = [
    "TrackCoordsError",
    "TrackFileError",
    "TrackParseError",
    "TrackStructureError",
    "OutputDirectoryError",
]
