"""
Gap interpolation.

Fills every missing integer minute between known points with a value on
the straight line through its two neighbours.

DUPLICATE MINUTES:
    Stretching rounds scaled minutes, so two neighbours can land on the
    same minute. A zero-width interval has no slope; such runs are merged
    into one point (mean pv, mean x) before any line is drawn.
"""

import logging
from typing import Sequence

from pvcurve.core.constants import MINUTES_PER_HOUR
from pvcurve.core.exceptions import InsufficientDataError
from pvcurve.core.types import PlotPoint


logger = logging.getLogger(__name__)


def merge_duplicate_minutes(points: Sequence[PlotPoint]) -> list[PlotPoint]:
    """
    Collapse runs of points that share a minute into one point.

    Args:
        points: Curve ordered by minute (non-decreasing)

    Returns:
        Curve with strictly increasing minutes
    """
    result: list[PlotPoint] = []
    run: list[PlotPoint] = []
    merged = 0

    def flush() -> None:
        nonlocal merged
        if len(run) == 1:
            result.append(run[0])
        elif run:
            merged += len(run) - 1
            result.append(
                PlotPoint(
                    minute_of_day=run[0].minute_of_day,
                    x=sum(p.x for p in run) / len(run),
                    pv=sum(p.pv for p in run) / len(run),
                )
            )

    for point in points:
        if run and point.minute_of_day != run[-1].minute_of_day:
            flush()
            run = []
        run.append(point)
    flush()

    if merged:
        logger.warning(f"Merged {merged} point(s) sharing a minute with a neighbour")

    return result


def line_through(
    p1: PlotPoint,
    p2: PlotPoint,
) -> tuple[float, float]:
    """
    Slope and intercept of the line through two points.

    Formula:
        k = (pv1 - pv2) / (minute1 - minute2)
        m = pv1 - minute1 * k

    Raises:
        ValueError: If both points share a minute
    """
    dx = p1.minute_of_day - p2.minute_of_day
    if dx == 0:
        raise ValueError(f"Zero-width interval at minute {p1.minute_of_day}")

    k = (p1.pv - p2.pv) / dx
    m = p1.pv - p1.minute_of_day * k
    return k, m


def interpolate(points: Sequence[PlotPoint]) -> list[PlotPoint]:
    """
    Fill every integer-minute gap with a linearly interpolated point.

    Known points are emitted unchanged; synthesized points get
    pv = k * minute + m and x = minute / 60.

    Args:
        points: Stretched curve with integer minutes, possibly with duplicates

    Returns:
        Dense curve, one point per minute from first to last minute

    Raises:
        InsufficientDataError: If the curve is empty
    """
    if not points:
        raise InsufficientDataError(
            "Nothing to interpolate",
            required=1,
            available=0,
            stage="interpolate",
        )

    known = merge_duplicate_minutes(points)

    result: list[PlotPoint] = []
    for prev, curr in zip(known, known[1:]):
        result.append(prev)

        first = int(prev.minute_of_day) + 1
        last = int(curr.minute_of_day)
        if first >= last:
            continue

        k, m = line_through(prev, curr)
        for minute in range(first, last):
            result.append(
                PlotPoint(
                    minute_of_day=minute,
                    x=minute / MINUTES_PER_HOUR,
                    pv=k * minute + m,
                )
            )

    result.append(known[-1])

    logger.debug(f"Interpolated {len(known)} known points into {len(result)}")
    return result
