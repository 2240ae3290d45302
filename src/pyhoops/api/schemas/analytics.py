from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel

from .player import PlayerResponse


class SimilarPlayerResponse(BaseModel):
    rank: int
    score: float
    player: PlayerResponse


class NeighborsResponse(BaseModel):
    player_id: int
    preset: str
    neighbors: List[SimilarPlayerResponse]


class ProjectionResponse(BaseModel):
    player_id: int
    method: Literal["trend", "fallback"]
    projected: Dict[str, float]
    current: Dict[str, float]
    deltas: Dict[str, float]


class StatComparisonResponse(BaseModel):
    stat: str
    first: float | None
    second: float | None
    delta: float | None
    leader: Literal["first", "second", "tie"] | None


class ComparisonResponse(BaseModel):
    first: PlayerResponse
    second: PlayerResponse
    preset: str
    similarity: float | None
    stats: List[StatComparisonResponse]


class ClusterGroupResponse(BaseModel):
    index: int
    centroid: List[float]
    player_ids: List[int]


class ClusterResponse(BaseModel):
    k: int
    seed: int
    features: List[str]
    iterations: int
    converged: bool
    assignment: Dict[int, int]
    clusters: List[ClusterGroupResponse]


class FeatureWeightResponse(BaseModel):
    field: str
    scale: float
    weight: float


class PresetResponse(BaseModel):
    key: str
    label: str
    metric: str
    features: List[FeatureWeightResponse]
