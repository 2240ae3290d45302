"""Side-by-side comparison of two players."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pyhoops.analytics.similarity import similarity
from pyhoops.config.similarity import SimilarityConfig
from pyhoops.errors import MissingFeature
from pyhoops.models import COUNTING_STATS, RATE_STATS, PlayerRecord


COMPARED_STATS: tuple[str, ...] = COUNTING_STATS + RATE_STATS


@dataclass(frozen=True)
class StatComparison:
    stat: str
    first: float | None
    second: float | None
    delta: float | None
    leader: Literal["first", "second", "tie"] | None


@dataclass(frozen=True)
class PlayerComparison:
    first: PlayerRecord
    second: PlayerRecord
    stats: list[StatComparison]
    similarity: float | None


def _compare_stat(stat: str, first: PlayerRecord, second: PlayerRecord) -> StatComparison:
    a = first.stat(stat)
    b = second.stat(stat)
    if a is None or b is None:
        return StatComparison(stat=stat, first=a, second=b, delta=None, leader=None)
    if a == b:
        leader = "tie"
    else:
        leader = "first" if a > b else "second"
    return StatComparison(stat=stat, first=a, second=b, delta=a - b, leader=leader)


def compare_players(
    first: PlayerRecord,
    second: PlayerRecord,
    config: SimilarityConfig | None = None,
) -> PlayerComparison:
    """Compare two players stat by stat; similarity is None when a feature is missing."""

    try:
        score: float | None = similarity(first, second, config)
    except MissingFeature:
        score = None
    return PlayerComparison(
        first=first,
        second=second,
        stats=[_compare_stat(stat, first, second) for stat in COMPARED_STATS],
        similarity=score,
    )
