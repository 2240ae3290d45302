"""Similarity weighting presets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Tuple


@dataclass(frozen=True)
class FeatureWeight:
    field: str
    scale: float
    weight: float


@dataclass(frozen=True)
class SimilarityConfig:
    key: str
    label: str
    metric: Literal["euclidean", "manhattan"]
    features: Tuple[FeatureWeight, ...]

    def __post_init__(self) -> None:
        if self.metric not in ("euclidean", "manhattan"):
            raise ValueError(f"Unsupported metric {self.metric!r}")
        if not self.features:
            raise ValueError("SimilarityConfig needs at least one feature")
        for feature in self.features:
            if feature.scale <= 0:
                raise ValueError(f"scale for {feature.field!r} must be positive")
            if feature.weight < 0:
                raise ValueError(f"weight for {feature.field!r} must be non-negative")
        total = math.fsum(feature.weight for feature in self.features)
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1, got {total:.6f}")

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(feature.field for feature in self.features)


_PRESETS: Dict[str, SimilarityConfig] = {
    # Euclidean over squared, range-normalised differences.
    "profile": SimilarityConfig(
        key="profile",
        label="Statistical profile",
        metric="euclidean",
        features=(
            FeatureWeight("points", 30.0, 0.30),
            FeatureWeight("rebounds", 15.0, 0.20),
            FeatureWeight("assists", 15.0, 0.20),
            FeatureWeight("usage_pct", 40.0, 0.15),
            FeatureWeight("ts_pct", 70.0, 0.15),
        ),
    ),
    # Weighted absolute differences; usage and shooting stay in percentage points.
    "detail": SimilarityConfig(
        key="detail",
        label="Usage and efficiency",
        metric="manhattan",
        features=(
            FeatureWeight("points", 30.0, 0.20),
            FeatureWeight("rebounds", 15.0, 0.10),
            FeatureWeight("assists", 10.0, 0.10),
            FeatureWeight("usage_pct", 1.0, 0.30),
            FeatureWeight("ts_pct", 1.0, 0.30),
        ),
    ),
}

DEFAULT_PRESET = "profile"


def iter_presets() -> Iterable[SimilarityConfig]:
    """Return an iterator of all configured presets."""

    return _PRESETS.values()


def get_preset(key: str | None = None) -> SimilarityConfig:
    """Fetch a preset by key, raising KeyError if missing."""

    lookup = (key or DEFAULT_PRESET).strip().lower()
    if lookup not in _PRESETS:
        raise KeyError(f"No similarity preset configured for key={key!r}")
    return _PRESETS[lookup]
