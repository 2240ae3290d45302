"""Input adapters that normalize raw player stat data."""

from .images import HeadshotResolver, default_headshot_resolver
from .players import (
    DEFAULT_COLUMN_MAPPING,
    PlayerRow,
    load_player_csv,
    load_records_from_csv,
    parse_player_csv,
    rows_to_records,
)

__all__ = [
    "DEFAULT_COLUMN_MAPPING",
    "HeadshotResolver",
    "PlayerRow",
    "default_headshot_resolver",
    "load_player_csv",
    "load_records_from_csv",
    "parse_player_csv",
    "rows_to_records",
]
