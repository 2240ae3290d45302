"""Canonical player model shared across ingestion, analytics and API layers."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


UNDRAFTED = "Undrafted"

DraftSlot = Union[int, Literal["Undrafted"], None]

COUNTING_STATS: tuple[str, ...] = ("games_played", "points", "rebounds", "assists")
RATE_STATS: tuple[str, ...] = (
    "net_rating",
    "oreb_pct",
    "dreb_pct",
    "usage_pct",
    "ts_pct",
    "ast_pct",
)
NUMERIC_FIELDS: tuple[str, ...] = ("age", "height", "weight", "draft_year") + COUNTING_STATS + RATE_STATS


class PlayerRecord(BaseModel):
    """Single player's season profile. Missing measurements are ``None``."""

    player_id: int = Field(..., ge=0)
    name: str
    team: str
    age: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)
    height: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)
    weight: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)
    college: Optional[str] = None
    country: Optional[str] = None
    draft_year: Optional[int] = None
    draft_round: DraftSlot = None
    draft_number: DraftSlot = None

    games_played: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)
    points: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)
    rebounds: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)
    assists: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)

    net_rating: Optional[float] = Field(default=None, allow_inf_nan=False)
    oreb_pct: Optional[float] = Field(default=None, allow_inf_nan=False)
    dreb_pct: Optional[float] = Field(default=None, allow_inf_nan=False)
    usage_pct: Optional[float] = Field(default=None, allow_inf_nan=False)
    ts_pct: Optional[float] = Field(default=None, allow_inf_nan=False)
    ast_pct: Optional[float] = Field(default=None, allow_inf_nan=False)

    image_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_undrafted(self) -> bool:
        return self.draft_round == UNDRAFTED or self.draft_number == UNDRAFTED

    def draft_status(self) -> str:
        if self.is_undrafted:
            return UNDRAFTED
        return f"{self.draft_year} Draft, Rd {self.draft_round} Pick {self.draft_number}"

    def height_display(self) -> str | None:
        if self.height is None:
            return None
        inches = int(round(self.height))
        return f"{inches // 12}'{inches % 12}\""

    def stat(self, name: str) -> float | None:
        """Return a numeric field by name, raising KeyError for unknown names."""

        if name not in NUMERIC_FIELDS:
            raise KeyError(f"Unknown stat {name!r}")
        value = getattr(self, name)
        return None if value is None else float(value)
