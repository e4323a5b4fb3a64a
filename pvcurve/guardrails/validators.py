"""
Guardrail validators.

Checks for the ordering and density invariants that hold between stages.
"""

import logging
from typing import Sequence

from pvcurve.core.exceptions import ValidationError
from pvcurve.core.types import PlotPoint

logger = logging.getLogger(__name__)


def validate_ordering(points: Sequence[PlotPoint], strict: bool = True) -> None:
    """
    Check that minutes are ascending.

    Args:
        points: Curve to check
        strict: Also reject duplicate minutes

    Raises:
        ValidationError: On the first out-of-order (or duplicate) minute
    """
    for i in range(1, len(points)):
        prev = points[i - 1].minute_of_day
        curr = points[i].minute_of_day

        if curr < prev:
            raise ValidationError(
                f"Minutes out of order at index {i}: {prev} -> {curr}",
                field="minute_of_day",
                value=curr,
            )
        if strict and curr == prev:
            raise ValidationError(
                f"Duplicate minute at index {i}",
                field="minute_of_day",
                value=curr,
            )


def validate_dense(points: Sequence[PlotPoint]) -> None:
    """
    Check that the curve has exactly one point per integer minute.

    Raises:
        ValidationError: On the first gap or repeat
    """
    for i in range(1, len(points)):
        step = points[i].minute_of_day - points[i - 1].minute_of_day
        if step != 1:
            raise ValidationError(
                f"Curve not dense at index {i}: step of {step} minute(s)",
                field="minute_of_day",
                value=points[i].minute_of_day,
            )

    logger.debug(f"Curve of {len(points)} points is dense")
