"""
Smoothing.

3-point moving-average (box filter) over the pv values of a curve.
"""

import logging
from typing import Sequence

import numpy as np

from pvcurve.core.constants import SMOOTHING_WINDOW
from pvcurve.core.exceptions import InsufficientDataError
from pvcurve.core.types import PlotPoint


logger = logging.getLogger(__name__)


def smooth(points: Sequence[PlotPoint]) -> list[PlotPoint]:
    """
    Apply one pass of the 3-point box filter.

    Formula: pv[i] = (pv[i-1] + pv[i] + pv[i+1]) / 3 for interior points,
    computed from the pre-smoothing values. The first and last points are
    passed through unchanged.

    Args:
        points: Ordered curve with at least 3 points

    Returns:
        New curve of the same length

    Raises:
        InsufficientDataError: If fewer than 3 points are given
    """
    if len(points) < SMOOTHING_WINDOW:
        raise InsufficientDataError(
            "Too few points to smooth",
            required=SMOOTHING_WINDOW,
            available=len(points),
            stage="smooth",
        )

    pv = np.array([p.pv for p in points], dtype=np.float64)
    averaged = (pv[:-2] + pv[1:-1] + pv[2:]) / 3.0

    result = [points[0]]
    for point, value in zip(points[1:-1], averaged):
        result.append(
            PlotPoint(minute_of_day=point.minute_of_day, x=point.x, pv=float(value))
        )
    result.append(points[-1])

    return result


def smooth_passes(points: Sequence[PlotPoint], passes: int) -> list[PlotPoint]:
    """
    Apply the box filter repeatedly.

    Args:
        points: Ordered curve
        passes: Number of passes (0 returns a copy)

    Returns:
        Smoothed curve
    """
    result = list(points)
    for i in range(passes):
        result = smooth(result)
        logger.debug(f"Smoothing pass {i + 1}/{passes} over {len(result)} points")
    return result
