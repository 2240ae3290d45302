"""Naive next-season projection for points, rebounds and assists.

The projector runs in two stages. ``project_trend`` builds a three-season
ramp ending at the current value, fits a least-squares line against age and
evaluates it one year ahead. ``project_fallback`` scales the current value by
a fixed ratio depending on whether the player is still before the age-27
peak. ``project`` runs the first stage and drops to the second whenever the
fit is degenerate, so it always returns a usable result.

The ramp factors are fixed constants, not fitted from history.
"""

from __future__ import annotations

import logging
import math
import sys
import warnings
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

import numpy as np

from pyhoops.errors import DegenerateFit, MissingFeature
from pyhoops.models import PROJECTED_STATS, PlayerRecord, ProjectionResult


logger = logging.getLogger(__name__)

PEAK_AGE = 27

TREND_RAMPS: Mapping[str, tuple[float, float, float]] = {
    "points": (0.85, 0.95, 1.0),
    "rebounds": (0.90, 0.95, 1.0),
    "assists": (0.85, 0.95, 1.0),
}

# (before peak, at or after peak)
FALLBACK_RATIOS: Mapping[str, tuple[float, float]] = {
    "points": (1.05, 0.95),
    "rebounds": (1.03, 0.97),
    "assists": (1.04, 0.96),
}


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def fit_line(xs: Sequence[float], ys: Sequence[float]) -> LinearFit:
    """Ordinary least squares through ``(xs, ys)``; raises DegenerateFit."""

    if len(xs) != len(ys) or len(xs) < 2:
        raise DegenerateFit("need at least two paired points")
    if not all(math.isfinite(value) for value in (*xs, *ys)):
        raise DegenerateFit("series contains non-finite values")
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", np.exceptions.RankWarning)
            slope, intercept = (float(c) for c in np.polyfit(xs, ys, 1))
    except (np.linalg.LinAlgError, np.exceptions.RankWarning) as exc:
        raise DegenerateFit(str(exc)) from exc
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise DegenerateFit("fit produced non-finite coefficients")
    return LinearFit(slope=slope, intercept=intercept)


def _required(record: PlayerRecord, name: str) -> float:
    value = getattr(record, name)
    if value is None:
        raise MissingFeature(name, record.player_id)
    return float(value)


def _current_values(record: PlayerRecord) -> dict[str, float]:
    return {stat: _required(record, stat) for stat in PROJECTED_STATS}


def project_trend(record: PlayerRecord) -> ProjectionResult:
    """Fit the synthetic ramp for each stat and evaluate at ``age + 1``."""

    age = _required(record, "age")
    current = _current_values(record)
    ages = [age - 2, age - 1, age]

    projected: dict[str, float] = {}
    for stat in PROJECTED_STATS:
        value = current[stat]
        series = [value * factor for factor in TREND_RAMPS[stat]]
        fit = fit_line(ages, series)
        estimate = fit.predict(age + 1)
        if not math.isfinite(estimate):
            raise DegenerateFit(f"{stat} estimate is not finite")
        projected[stat] = max(0.0, estimate)

    return ProjectionResult(
        player_id=record.player_id,
        method="trend",
        current=current,
        **projected,
    )


def project_fallback(record: PlayerRecord) -> ProjectionResult:
    """Fixed-ratio projection. Never fails for a record with age and stats present."""

    age = _required(record, "age")
    current = _current_values(record)
    before_peak = age < PEAK_AGE

    projected: dict[str, float] = {}
    for stat in PROJECTED_STATS:
        value = current[stat]
        if not math.isfinite(value):
            projected[stat] = 0.0
            continue
        improving, declining = FALLBACK_RATIOS[stat]
        estimate = value * (improving if before_peak else declining)
        if not math.isfinite(estimate):
            estimate = math.copysign(sys.float_info.max, estimate)
        projected[stat] = max(0.0, estimate)

    return ProjectionResult(
        player_id=record.player_id,
        method="fallback",
        current=current,
        **projected,
    )


def project(
    record: PlayerRecord,
    *,
    primary: Callable[[PlayerRecord], ProjectionResult] = project_trend,
) -> ProjectionResult:
    """Project next-season points, rebounds and assists for ``record``."""

    try:
        return primary(record)
    except DegenerateFit as exc:
        logger.debug("Trend fit failed for player %s (%s); using fallback", record.player_id, exc)
        return project_fallback(record)


__all__ = [
    "FALLBACK_RATIOS",
    "LinearFit",
    "PEAK_AGE",
    "TREND_RAMPS",
    "fit_line",
    "project",
    "project_fallback",
    "project_trend",
]
