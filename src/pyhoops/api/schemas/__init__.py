"""Pydantic models for API I/O."""

from .analytics import (
    ClusterGroupResponse,
    ClusterResponse,
    ComparisonResponse,
    FeatureWeightResponse,
    NeighborsResponse,
    PresetResponse,
    ProjectionResponse,
    SimilarPlayerResponse,
    StatComparisonResponse,
)
from .player import (
    PlayerDetailResponse,
    PlayerListResponse,
    PlayerResponse,
    PoolSummaryResponse,
)

__all__ = [
    "ClusterGroupResponse",
    "ClusterResponse",
    "ComparisonResponse",
    "FeatureWeightResponse",
    "NeighborsResponse",
    "PlayerDetailResponse",
    "PlayerListResponse",
    "PlayerResponse",
    "PoolSummaryResponse",
    "PresetResponse",
    "ProjectionResponse",
    "SimilarPlayerResponse",
    "StatComparisonResponse",
]
