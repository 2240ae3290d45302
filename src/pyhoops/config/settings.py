"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

_DATA_PATH_ENV = "PYHOOPS_DATA_PATH"
_PRESET_ENV = "PYHOOPS_SIMILARITY_PRESET"
_NEIGHBORS_ENV = "PYHOOPS_NEIGHBORS"
_CLUSTERS_ENV = "PYHOOPS_CLUSTERS"
_SEED_ENV = "PYHOOPS_CLUSTER_SEED"
_MAX_ITER_ENV = "PYHOOPS_CLUSTER_MAX_ITERATIONS"

_NEIGHBORS_DEFAULT = 5
_CLUSTERS_DEFAULT = 5
_SEED_DEFAULT = 42
_MAX_ITER_DEFAULT = 100


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    data_path: Optional[Path] = None
    similarity_preset: str = "profile"
    neighbors: int = _NEIGHBORS_DEFAULT
    clusters: int = _CLUSTERS_DEFAULT
    cluster_seed: int = _SEED_DEFAULT
    cluster_max_iterations: int = _MAX_ITER_DEFAULT


def load_settings() -> Settings:
    """Build settings from ``PYHOOPS_*`` environment variables."""

    raw_path = os.getenv(_DATA_PATH_ENV)
    data_path = Path(raw_path).expanduser() if raw_path else None
    return Settings(
        data_path=data_path,
        similarity_preset=os.getenv(_PRESET_ENV, "profile").strip().lower() or "profile",
        neighbors=_env_int(_NEIGHBORS_ENV, _NEIGHBORS_DEFAULT, min_value=0),
        clusters=_env_int(_CLUSTERS_ENV, _CLUSTERS_DEFAULT, min_value=1),
        cluster_seed=_env_int(_SEED_ENV, _SEED_DEFAULT),
        cluster_max_iterations=_env_int(_MAX_ITER_ENV, _MAX_ITER_DEFAULT, min_value=1),
    )
