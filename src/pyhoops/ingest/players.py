"""Helpers to load player stat CSVs and emit canonical records."""

from __future__ import annotations

import csv
import logging
import math
from io import StringIO
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from pyhoops.models import UNDRAFTED, PlayerRecord


logger = logging.getLogger(__name__)

ImageResolver = Callable[[str], str]

DEFAULT_COLUMN_MAPPING: Dict[str, str] = {
    "name": "PLAYER",
    "team": "TEAM",
    "age": "AGE",
    "height": "HEIGHT",
    "weight": "WEIGHT",
    "college": "COLLEGE",
    "country": "COUNTRY",
    "draft_year": "DRAFT YEAR",
    "draft_round": "DRAFT ROUND",
    "draft_number": "DRAFT NUMBER",
    "games_played": "GP",
    "points": "PTS",
    "rebounds": "REB",
    "assists": "AST",
    "net_rating": "NETRTG",
    "oreb_pct": "OREB%",
    "dreb_pct": "DREB%",
    "usage_pct": "USG%",
    "ts_pct": "TS%",
    "ast_pct": "AST%",
}

_FLOAT_FIELDS = (
    "age",
    "height",
    "weight",
    "games_played",
    "points",
    "rebounds",
    "assists",
)
_PERCENT_FIELDS = ("net_rating", "oreb_pct", "dreb_pct", "usage_pct", "ts_pct", "ast_pct")
_DRAFT_SLOT_FIELDS = ("draft_round", "draft_number")
_TEXT_FIELDS = ("college", "country")
_EMPTY_TEXT = {"", "none", "n/a", "-"}


class PlayerRow(BaseModel):
    """Raw CSV values keyed by canonical field name, plus the source line."""

    line: int = Field(..., ge=1)
    values: Dict[str, Optional[str]] = Field(default_factory=dict)

    @classmethod
    def from_mapping(
        cls,
        row: Mapping[str, Optional[str]],
        mapping: Mapping[str, str],
        *,
        line: int,
    ) -> "PlayerRow":
        def extract(source: str) -> Optional[str]:
            if "|" in source:
                parts = [(row.get(col.strip()) or "").strip() for col in source.split("|")]
                joined = " ".join(part for part in parts if part)
                return joined or None
            value = row.get(source)
            return value.strip() if value is not None else None

        return cls(line=line, values={key: extract(source) for key, source in mapping.items()})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)


def _resolve_mapping(mapping: Mapping[str, str] | None) -> Dict[str, str]:
    resolved = dict(DEFAULT_COLUMN_MAPPING)
    if mapping:
        resolved.update(mapping)
    return resolved


def _read_rows(lines: Iterable[str], mapping: Mapping[str, str]) -> List[PlayerRow]:
    reader = csv.DictReader(lines)
    # Header is line 1.
    return [
        PlayerRow.from_mapping(row, mapping, line=index)
        for index, row in enumerate(reader, start=2)
    ]


def load_player_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRow]:
    resolved = _resolve_mapping(mapping)
    with path.open(newline="", encoding="utf-8-sig") as f:
        return _read_rows(f, resolved)


def parse_player_csv(text: str, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRow]:
    return _read_rows(StringIO(text.lstrip("\ufeff")), _resolve_mapping(mapping))


def _parse_number(raw: Optional[str], *, column: str, line: int) -> Optional[float]:
    if raw is None:
        return None
    text = raw.strip().replace("%", "")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"line {line}: column {column!r} value {raw!r} is not numeric") from None
    if not math.isfinite(value):
        raise ValueError(f"line {line}: column {column!r} value {raw!r} is not finite")
    return value


def _parse_draft_slot(raw: Optional[str], *, column: str, line: int) -> int | str | None:
    if raw is None or not raw.strip():
        return None
    if raw.strip().lower() == UNDRAFTED.lower():
        return UNDRAFTED
    value = _parse_number(raw, column=column, line=line)
    return None if value is None else int(value)


def _parse_text(raw: Optional[str]) -> Optional[str]:
    if raw is None or raw.strip().lower() in _EMPTY_TEXT:
        return None
    return raw.strip()


def rows_to_records(
    rows: Sequence[PlayerRow],
    *,
    mapping: Mapping[str, str] | None = None,
    image_resolver: ImageResolver | None = None,
) -> List[PlayerRecord]:
    """Convert raw rows to records with ids 0..N-1 in row order."""

    resolved = _resolve_mapping(mapping)
    records: List[PlayerRecord] = []
    for player_id, row in enumerate(rows):
        name = row.get("name") or ""
        if not name:
            raise ValueError(f"line {row.line}: column {resolved.get('name', 'name')!r} is empty")

        data: dict[str, object] = {
            "player_id": player_id,
            "name": name,
            "team": (row.get("team") or "").upper(),
        }
        for key in _FLOAT_FIELDS + _PERCENT_FIELDS:
            data[key] = _parse_number(row.get(key), column=resolved.get(key, key), line=row.line)
        draft_year = _parse_number(
            row.get("draft_year"), column=resolved.get("draft_year", "draft_year"), line=row.line
        )
        data["draft_year"] = None if draft_year is None else int(draft_year)
        for key in _DRAFT_SLOT_FIELDS:
            data[key] = _parse_draft_slot(row.get(key), column=resolved.get(key, key), line=row.line)
        for key in _TEXT_FIELDS:
            data[key] = _parse_text(row.get(key))
        if image_resolver is not None:
            data["image_url"] = image_resolver(name)

        records.append(PlayerRecord(**data))
    return records


def load_records_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
    image_resolver: ImageResolver | None = None,
) -> List[PlayerRecord]:
    records = rows_to_records(
        load_player_csv(path, mapping=mapping),
        mapping=mapping,
        image_resolver=image_resolver,
    )
    logger.info("Loaded %d players from %s", len(records), path)
    return records
