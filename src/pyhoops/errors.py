"""Error taxonomy shared by the analytics engine."""

from __future__ import annotations


class AnalyticsError(ValueError):
    """Base class for analytics failures surfaced to callers."""


class MissingFeature(AnalyticsError):
    def __init__(self, field: str, player_id: int | None = None):
        self.field = field
        self.player_id = player_id
        who = f"player {player_id}" if player_id is not None else "record"
        super().__init__(f"{who} is missing required feature {field!r}")


class InvalidClusterCount(AnalyticsError):
    def __init__(self, k: int, pool_size: int):
        self.k = k
        self.pool_size = pool_size
        super().__init__(f"cluster count must be between 1 and {pool_size}, got {k}")


class DegenerateFit(AnalyticsError):
    """Raised inside the trend projector when a series cannot be fit.

    Always recovered by the fallback projection; never reaches callers of
    :func:`pyhoops.analytics.project`.
    """


__all__ = [
    "AnalyticsError",
    "DegenerateFit",
    "InvalidClusterCount",
    "MissingFeature",
]
