"""
Statistics over field readings.

  - Simple average of a set of readings.
  - Power-law fit Q = C × ΔP^n, as used for envelope and duct leakage tests,
    by linear least squares in natural-log space:
        ln(Q) = ln(C) + n × ln(ΔP)
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from tabcalc.models.stats import PowerLawFit, PressureFlowPoint

logger = logging.getLogger(__name__)


def calc_average(values: Sequence[float]) -> Optional[float]:
    """Mean of values, or None for an empty sequence."""
    if not values:
        return None
    return sum(values) / len(values)


def power_law_regression(points: Sequence[PressureFlowPoint]) -> Optional[PowerLawFit]:
    """
    Fit Q = C × ΔP^n through the usable points.

    Points with non-finite or non-positive pressure/flow are dropped. Returns
    None when fewer than two usable points remain or all pressures coincide.
    """
    usable = [
        p for p in points
        if math.isfinite(p.pressure) and math.isfinite(p.flow) and p.pressure > 0 and p.flow > 0
    ]
    if len(usable) < len(points):
        logger.debug("Dropped %d unusable pressure/flow points", len(points) - len(usable))
    if len(usable) < 2:
        return None

    xs = np.log([p.pressure for p in usable])
    ys = np.log([p.flow for p in usable])

    dx = xs - xs.mean()
    dy = ys - ys.mean()
    ss_xx = float(np.dot(dx, dx))
    ss_xy = float(np.dot(dx, dy))
    ss_yy = float(np.dot(dy, dy))

    if ss_xx == 0.0:
        return None

    slope = ss_xy / ss_xx                           # exponent n
    intercept = float(ys.mean()) - slope * float(xs.mean())  # ln(C)

    residuals = ys - (intercept + slope * xs)
    ss_res = float(np.dot(residuals, residuals))
    r2 = 1.0 if ss_yy == 0.0 else 1.0 - ss_res / ss_yy

    return PowerLawFit(C=math.exp(intercept), n=slope, r2=r2, count=len(usable))
