"""
Stretching.

Drops the dark (non-positive) part of the day and rescales the sunlit
window so that its first sample lands on minute 0 and its last on the
day-end minute.
"""

import logging
import math
from typing import Sequence

from pvcurve.core.constants import DAY_END_MINUTE, MINUTES_PER_HOUR
from pvcurve.core.exceptions import InsufficientDataError, NoPositiveSamplesError
from pvcurve.core.types import PlotPoint


logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (non-negative input)."""
    return int(math.floor(value + 0.5))


def stretch(
    points: Sequence[PlotPoint],
    day_end: int = DAY_END_MINUTE,
) -> list[PlotPoint]:
    """
    Stretch the sunlit window of a curve over a full day.

    For every kept point:
        scaled = (minute - start) * day_end / (end - start)
        x = scaled / 60                       (unrounded)
        minute = clamp(round(scaled), 0, day_end)

    Rounding can make neighbouring minutes collide; the output is
    non-decreasing, not strictly increasing.

    Args:
        points: Ordered curve
        day_end: Minute the last sunlit point is mapped to

    Returns:
        New curve with integer minutes in [0, day_end]

    Raises:
        NoPositiveSamplesError: If no point has pv > 0
        InsufficientDataError: If only one point has pv > 0 (zero-width window)
    """
    sunlit = [p for p in points if p.pv > 0]

    if not sunlit:
        raise NoPositiveSamplesError(available=0)

    if len(sunlit) < 2:
        raise InsufficientDataError(
            "Insufficient data: a single positive sample has no window to stretch",
            required=2,
            available=len(sunlit),
            stage="stretch",
        )

    start = float(sunlit[0].minute_of_day)
    end = float(sunlit[-1].minute_of_day)
    if end <= start:
        raise InsufficientDataError(
            "Insufficient data: sunlit window has zero width",
            required=2,
            available=len(sunlit),
            stage="stretch",
        )

    factor = day_end / (end - start)
    logger.debug(
        f"Stretching {len(sunlit)}/{len(points)} sunlit points "
        f"from [{start:g}, {end:g}] by factor {factor:.4f}"
    )

    result = []
    for p in sunlit:
        scaled = max(p.minute_of_day - start, 0.0) * factor
        minute = min(max(round_half_up(scaled), 0), day_end)
        result.append(PlotPoint(minute_of_day=minute, x=scaled / MINUTES_PER_HOUR, pv=p.pv))

    return result
