"""Plain result containers returned by the analytics engine."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from .player import PlayerRecord


PROJECTED_STATS: tuple[str, ...] = ("points", "rebounds", "assists")


@dataclass(frozen=True)
class SimilarityResult:
    """Candidate paired with its similarity to a target, in (0, 1]."""

    record: PlayerRecord
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_id": self.record.player_id,
            "name": self.record.name,
            "team": self.record.team,
            "score": self.score,
        }


@dataclass(frozen=True)
class ProjectionResult:
    """Next-season projection for points, rebounds and assists."""

    player_id: int
    points: float
    rebounds: float
    assists: float
    method: Literal["trend", "fallback"]
    current: Mapping[str, float] = field(default_factory=dict)

    def projected(self) -> dict[str, float]:
        return {stat: getattr(self, stat) for stat in PROJECTED_STATS}

    def deltas(self) -> dict[str, float]:
        """Projected minus current value for each stat."""

        return {
            stat: getattr(self, stat) - self.current.get(stat, 0.0)
            for stat in PROJECTED_STATS
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_id": self.player_id,
            "method": self.method,
            "projected": self.projected(),
            "current": dict(self.current),
            "deltas": self.deltas(),
        }


@dataclass(frozen=True)
class ClusterAssignment:
    """Result of a k-means run over a record pool."""

    assignment: dict[int, int]
    centroids: tuple[tuple[float, ...], ...]
    features: tuple[str, ...]
    iterations: int = 0
    converged: bool = True

    @property
    def k(self) -> int:
        return len(self.centroids)

    def members(self, index: int) -> list[int]:
        return [player_id for player_id, cluster in self.assignment.items() if cluster == index]

    def sizes(self) -> list[int]:
        counts = Counter(self.assignment.values())
        return [counts.get(index, 0) for index in range(self.k)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "features": list(self.features),
            "assignment": {str(player_id): cluster for player_id, cluster in self.assignment.items()},
            "centroids": [list(centroid) for centroid in self.centroids],
            "sizes": self.sizes(),
            "iterations": self.iterations,
            "converged": self.converged,
        }
