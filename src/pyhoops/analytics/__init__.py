"""Stateless analytics over an in-memory player pool."""

from .clustering import CLUSTER_FEATURES, cluster
from .neighbors import nearest_neighbors
from .projection import project, project_fallback, project_trend
from .similarity import distance, feature_vector, similarity

__all__ = [
    "CLUSTER_FEATURES",
    "cluster",
    "distance",
    "feature_vector",
    "nearest_neighbors",
    "project",
    "project_fallback",
    "project_trend",
    "similarity",
]
