"""Weighted, range-normalised distance between player records."""

from __future__ import annotations

import math
import sys
from typing import Sequence

from pyhoops.config.similarity import SimilarityConfig, get_preset
from pyhoops.errors import MissingFeature
from pyhoops.models import PlayerRecord


def feature_vector(record: PlayerRecord, fields: Sequence[str]) -> list[float]:
    """Read ``fields`` from ``record``; a missing value raises MissingFeature."""

    values: list[float] = []
    for name in fields:
        value = getattr(record, name, None)
        if value is None:
            raise MissingFeature(name, record.player_id)
        values.append(float(value))
    return values


def distance(a: PlayerRecord, b: PlayerRecord, config: SimilarityConfig | None = None) -> float:
    config = config or get_preset()
    left = feature_vector(a, config.fields)
    right = feature_vector(b, config.fields)

    terms: list[float] = []
    for feature, x, y in zip(config.features, left, right):
        if not feature.weight:
            continue
        diff = abs(x - y) / feature.scale
        if config.metric == "euclidean":
            terms.append(math.sqrt(feature.weight) * diff)
        else:
            terms.append(feature.weight * diff)

    if config.metric == "euclidean":
        total = math.hypot(*terms)
    else:
        try:
            total = math.fsum(terms)
        except OverflowError:
            total = math.inf
    # Capped so that similarity stays strictly positive.
    return min(total, sys.float_info.max)


def similarity(a: PlayerRecord, b: PlayerRecord, config: SimilarityConfig | None = None) -> float:
    """Return ``1 / (1 + distance)``: 1.0 for identical profiles, towards 0 as they diverge."""

    return 1.0 / (1.0 + distance(a, b, config))
