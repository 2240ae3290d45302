"""Helpers for slicing the player pool by common stats."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, median, pstdev
from typing import Iterable, Literal, Sequence

from pyhoops.models import NUMERIC_FIELDS, PlayerRecord


SORTABLE_TEXT_FIELDS = ("name", "team")


@dataclass(frozen=True)
class FilterCriteria:
    """Filtering configuration for the player table."""

    min_points: float | None = None
    max_points: float | None = None
    min_rebounds: float | None = None
    max_rebounds: float | None = None
    min_assists: float | None = None
    max_assists: float | None = None
    query: str | None = None
    teams: tuple[str, ...] = ()
    sort_by: str = "points"
    sort_direction: Literal["asc", "desc"] = "desc"
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.sort_by not in NUMERIC_FIELDS and self.sort_by not in SORTABLE_TEXT_FIELDS:
            raise ValueError(f"Cannot sort by {self.sort_by!r}")


@dataclass(frozen=True)
class PoolSummary:
    """Aggregate stats for a selection of players."""

    players: int
    teams: int
    points_mean: float | None
    points_median: float | None
    points_std: float | None
    top_scorer: PlayerRecord | None


@dataclass(frozen=True)
class FilterResult:
    """Container for filtered players and summary statistics."""

    players: list[PlayerRecord]
    summary: PoolSummary
    pool_summary: PoolSummary


def _within(value: float | None, low: float | None, high: float | None) -> bool:
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _passes_criteria(record: PlayerRecord, criteria: FilterCriteria) -> bool:
    if not _within(record.points, criteria.min_points, criteria.max_points):
        return False
    if not _within(record.rebounds, criteria.min_rebounds, criteria.max_rebounds):
        return False
    if not _within(record.assists, criteria.min_assists, criteria.max_assists):
        return False

    if criteria.query:
        needle = criteria.query.strip().lower()
        if needle and needle not in record.name.lower() and needle not in record.team.lower():
            return False

    if criteria.teams and record.team.upper() not in {team.upper() for team in criteria.teams}:
        return False

    return True


def _sort_records(records: list[PlayerRecord], criteria: FilterCriteria) -> list[PlayerRecord]:
    reverse = criteria.sort_direction != "asc"
    if criteria.sort_by in SORTABLE_TEXT_FIELDS:
        return sorted(records, key=lambda r: getattr(r, criteria.sort_by).lower(), reverse=reverse)

    present = [r for r in records if getattr(r, criteria.sort_by) is not None]
    missing = [r for r in records if getattr(r, criteria.sort_by) is None]
    present.sort(key=lambda r: float(getattr(r, criteria.sort_by)), reverse=reverse)
    # Records without the sort value always go last.
    return present + missing


def summarize_pool(records: Sequence[PlayerRecord]) -> PoolSummary:
    def _safe_stats(values: Iterable[float]) -> tuple[float | None, float | None, float | None]:
        values = list(values)
        if not values:
            return None, None, None
        mean = fmean(values)
        med = median(values)
        std = pstdev(values) if len(values) > 1 else 0.0
        return mean, med, std

    scoring = [r for r in records if r.points is not None]
    mean, med, std = _safe_stats(r.points for r in scoring)
    top = max(scoring, key=lambda r: r.points, default=None)
    return PoolSummary(
        players=len(records),
        teams=len({r.team for r in records if r.team}),
        points_mean=mean,
        points_median=med,
        points_std=std,
        top_scorer=top,
    )


def top_players(records: Sequence[PlayerRecord], stat: str = "points", n: int = 5) -> list[PlayerRecord]:
    """Best ``n`` players by ``stat``, skipping players without a value."""

    criteria = FilterCriteria(sort_by=stat, sort_direction="desc")
    ranked = [r for r in _sort_records(list(records), criteria) if getattr(r, stat) is not None]
    return ranked[: max(0, n)]


def filter_players(records: Sequence[PlayerRecord], criteria: FilterCriteria) -> FilterResult:
    """Filter players and return ordered selections with summary statistics."""

    pool = list(records)
    selected = _sort_records([r for r in pool if _passes_criteria(r, criteria)], criteria)
    if criteria.limit is not None and criteria.limit > 0:
        selected = selected[: criteria.limit]

    return FilterResult(
        players=selected,
        summary=summarize_pool(selected),
        pool_summary=summarize_pool(pool),
    )


__all__ = [
    "FilterCriteria",
    "FilterResult",
    "PoolSummary",
    "filter_players",
    "summarize_pool",
    "top_players",
]
