"""Configuration helpers for similarity presets and runtime settings."""

from .settings import Settings, load_settings
from .similarity import (
    DEFAULT_PRESET,
    FeatureWeight,
    SimilarityConfig,
    get_preset,
    iter_presets,
)

__all__ = [
    "DEFAULT_PRESET",
    "FeatureWeight",
    "Settings",
    "SimilarityConfig",
    "get_preset",
    "iter_presets",
    "load_settings",
]
