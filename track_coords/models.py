from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# Track outcomes recorded by the pipeline.
STATUS_KEPT = "kept"
STATUS_REDUNDANT = "redundant"
STATUS_UNTYPED = "untyped"
STATUS_SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair compared by exact value."""

    lat: float
    lng: float


@dataclass(slots=True)
class Track:
    """Ordered GPS points read from one source file.

    ``points`` is only ever shrunk or rounded in place by the pipeline stages;
    it is never reordered or extended after loading.
    """

    identity: Path
    activity_type: Optional[str] = None
    points: List[Coordinate] = field(default_factory=list)
    points_loaded: int = 0
    status: str = STATUS_KEPT
    reason: Optional[str] = None

    @property
    def name(self) -> str:
        return self.identity.stem
