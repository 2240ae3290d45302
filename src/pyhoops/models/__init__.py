"""Data models shared across the package."""

from .player import (
    COUNTING_STATS,
    NUMERIC_FIELDS,
    RATE_STATS,
    UNDRAFTED,
    PlayerRecord,
)
from .results import PROJECTED_STATS, ClusterAssignment, ProjectionResult, SimilarityResult

__all__ = [
    "COUNTING_STATS",
    "NUMERIC_FIELDS",
    "PROJECTED_STATS",
    "RATE_STATS",
    "UNDRAFTED",
    "ClusterAssignment",
    "PlayerRecord",
    "ProjectionResult",
    "SimilarityResult",
]
