"""Top-K most similar players for a target record."""

from __future__ import annotations

import logging
from typing import Sequence

from pyhoops.config.similarity import SimilarityConfig, get_preset
from pyhoops.models import PlayerRecord, SimilarityResult

from .similarity import similarity


logger = logging.getLogger(__name__)


def nearest_neighbors(
    target: PlayerRecord,
    pool: Sequence[PlayerRecord],
    k: int,
    config: SimilarityConfig | None = None,
) -> list[SimilarityResult]:
    """Rank ``pool`` by similarity to ``target`` and keep the best ``k``.

    The target is excluded by ``player_id``. Ties keep pool order.
    """

    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k == 0:
        return []

    config = config or get_preset()
    candidates = [record for record in pool if record.player_id != target.player_id]
    if not candidates:
        logger.debug("No neighbour candidates for player %s", target.player_id)
        return []

    scored = [
        SimilarityResult(record=candidate, score=similarity(target, candidate, config))
        for candidate in candidates
    ]
    scored.sort(key=lambda result: result.score, reverse=True)
    return scored[:k]
