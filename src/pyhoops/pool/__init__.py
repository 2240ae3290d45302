"""Player pool utilities (filtering, comparison, export)."""

from .compare import PlayerComparison, StatComparison, compare_players
from .export import (
    ExportError,
    export_clusters_to_csv,
    export_neighbors_to_csv,
    export_projections_to_csv,
)
from .filtering import (
    FilterCriteria,
    FilterResult,
    PoolSummary,
    filter_players,
    summarize_pool,
    top_players,
)

__all__ = [
    "ExportError",
    "FilterCriteria",
    "FilterResult",
    "PlayerComparison",
    "PoolSummary",
    "StatComparison",
    "compare_players",
    "export_clusters_to_csv",
    "export_neighbors_to_csv",
    "export_projections_to_csv",
    "filter_players",
    "summarize_pool",
    "top_players",
]
