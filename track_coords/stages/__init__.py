"""Pipeline stages applied, in order, to the whole in-memory track collection.

Each stage mutates the tracks it is given in place and never reorders or
grows a track's points.
"""

from .rounding import round_tracks
from .dedup import collapse_duplicates, collapse_track_duplicates
from .novelty import NoveltyRegistry, NoveltyOutcome, filter_novel_tracks
from .simplify import simplify_points, simplify_tracks

__all__ = [
    "round_tracks",
    "collapse_duplicates",
    "collapse_track_duplicates",
    "NoveltyRegistry",
    "NoveltyOutcome",
    "filter_novel_tracks",
    "simplify_points",
    "simplify_tracks",
]
