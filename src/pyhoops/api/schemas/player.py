from __future__ import annotations

from typing import List

from pydantic import BaseModel

from pyhoops.models import PlayerRecord


class PlayerResponse(BaseModel):
    player_id: int
    name: str
    team: str
    age: float | None
    games_played: float | None
    points: float | None
    rebounds: float | None
    assists: float | None
    usage_pct: float | None
    ts_pct: float | None
    image_url: str | None

    @classmethod
    def from_record(cls, record: PlayerRecord) -> "PlayerResponse":
        return cls(**record.model_dump(include=set(cls.model_fields)))


class PlayerDetailResponse(BaseModel):
    player: PlayerRecord
    draft_status: str
    height_display: str | None


class PoolSummaryResponse(BaseModel):
    players: int
    teams: int
    points_mean: float | None
    points_median: float | None
    points_std: float | None
    top_scorer: PlayerResponse | None


class PlayerListResponse(BaseModel):
    summary: PoolSummaryResponse
    pool_summary: PoolSummaryResponse
    players: List[PlayerResponse]
