"""K-means grouping of players by statistical profile."""

from __future__ import annotations

import logging
import warnings
from typing import Sequence

import numpy as np
from sklearn.cluster import KMeans

from pyhoops.errors import InvalidClusterCount
from pyhoops.models import ClusterAssignment, PlayerRecord

from .similarity import feature_vector


logger = logging.getLogger(__name__)

CLUSTER_FEATURES: tuple[str, ...] = ("points", "rebounds", "assists", "usage_pct", "ts_pct")


def _feature_matrix(pool: Sequence[PlayerRecord], features: Sequence[str]) -> np.ndarray:
    return np.array([feature_vector(record, features) for record in pool], dtype=float)


def _is_fixed_point(data: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> bool:
    for index, centroid in enumerate(centroids):
        members = data[labels == index]
        if len(members) and not np.allclose(members.mean(axis=0), centroid):
            return False
    return True


def cluster(
    pool: Sequence[PlayerRecord],
    k: int,
    seed: int = 42,
    max_iterations: int = 100,
    features: Sequence[str] = CLUSTER_FEATURES,
    init: np.ndarray | None = None,
) -> ClusterAssignment:
    """Partition ``pool`` into ``k`` groups with Lloyd's algorithm.

    Same pool, seed and k always give the same assignment and centroids.
    Stops when assignments no longer change or after ``max_iterations``.
    Starting centroids are ``k`` distinct records drawn with ``seed`` unless
    ``init`` supplies a ``(k, len(features))`` array. A cluster left without
    members is moved onto the record farthest from its centroid.
    """

    feature_names = tuple(features)
    if not pool:
        logger.debug("Clustering requested for an empty pool")
        return ClusterAssignment(assignment={}, centroids=(), features=feature_names, iterations=0)
    if k < 1 or k > len(pool):
        raise InvalidClusterCount(k, len(pool))
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

    data = _feature_matrix(pool, feature_names)
    model = KMeans(
        n_clusters=k,
        init="random" if init is None else np.asarray(init, dtype=float),
        n_init=1,
        max_iter=max_iterations,
        tol=0.0,
        algorithm="lloyd",
        random_state=seed,
    )
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        model.fit(data)
    for warning in caught:
        logger.debug("KMeans: %s", warning.message)

    labels = model.labels_
    centroids = model.cluster_centers_
    iterations = int(model.n_iter_)
    converged = _is_fixed_point(data, labels, centroids)
    logger.info(
        "Clustered %d players into %d groups in %d iterations (converged=%s)",
        len(pool),
        k,
        iterations,
        converged,
    )
    return ClusterAssignment(
        assignment={record.player_id: int(label) for record, label in zip(pool, labels)},
        centroids=tuple(tuple(float(value) for value in row) for row in centroids),
        features=feature_names,
        iterations=iterations,
        converged=converged,
    )


__all__ = ["CLUSTER_FEATURES", "cluster"]
