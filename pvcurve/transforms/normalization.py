"""
Normalization.

Rescales both axes of a curve to the unit interval:
x by the last minute, pv by the peak value.
"""

import logging
from typing import Sequence

import numpy as np

from pvcurve.core.exceptions import InsufficientDataError
from pvcurve.core.types import PlotPoint


logger = logging.getLogger(__name__)


def peak_value(values: Sequence[float]) -> float:
    """
    Peak of a series, floored at zero.

    Formula: max(0, max(values))
    """
    if len(values) == 0:
        return 0.0
    return float(max(0.0, np.max(values)))


def scale_to_peak(value: float, peak: float) -> float:
    """
    Divide by the peak.

    Args:
        value: Value to scale
        peak: Scaling divisor

    Returns:
        value / peak, or 0.0 when the peak is zero or NaN
    """
    if peak == 0 or np.isnan(peak):
        return 0.0
    return float(value / peak)


def normalize(points: Sequence[PlotPoint]) -> list[PlotPoint]:
    """
    Normalize a curve to the unit square.

    Formula:
        x = minute / last_minute
        pv = pv / max(0, max(pv))

    A zero peak (all-zero or all-negative curve) sets every pv to 0.0.
    A last minute of 0 sets every x to 0.0.

    Args:
        points: Dense curve (or raw samples for the one-pass variant)

    Returns:
        New curve of the same length

    Raises:
        InsufficientDataError: If the curve is empty
    """
    if not points:
        raise InsufficientDataError(
            "Nothing to normalize",
            required=1,
            available=0,
            stage="normalize",
        )

    peak = peak_value([p.pv for p in points])
    last_minute = float(points[-1].minute_of_day)

    if peak == 0:
        logger.warning("Curve has no positive peak, normalized pv left at 0")
    if last_minute <= 0:
        logger.warning("Curve ends at minute 0, normalized x left at 0")

    result = []
    for p in points:
        x = p.minute_of_day / last_minute if last_minute > 0 else 0.0
        result.append(
            PlotPoint(minute_of_day=p.minute_of_day, x=x, pv=scale_to_peak(p.pv, peak))
        )

    return result
