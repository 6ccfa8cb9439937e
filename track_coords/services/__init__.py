"""Service layer package.

Exports high-level services consumed by the CLI / orchestration layer.
"""

from .track_service import (
    PipelineResult,
    PipelineStats,
    TrackPipeline,
    TrackPipelineConfig,
)

__all__ = ["PipelineResult", "PipelineStats", "TrackPipeline", "TrackPipelineConfig"]
