"""
Core type definitions for PVCURVE.

Defines enums, dataclasses, and type aliases used throughout the system.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Sequence, TypeAlias

import pandas as pd

from pvcurve.core.constants import (
    HOURS_VIEW_RANGE,
    MINUTES_PER_HOUR,
    NORMALIZED_VIEW_RANGE,
)


class ChartView(str, Enum):
    """
    Chart views, one per stage the curve can end at.

    HOURS is the stretched/interpolated curve with x in hours.
    NORMALIZED is the unit-interval curve.
    """

    HOURS = "hours"
    NORMALIZED = "normalized"

    @property
    def axis_range(self) -> tuple[float, float, float, float]:
        """Return (x_min, x_max, y_min, y_max) for this view."""
        ranges = {
            ChartView.HOURS: HOURS_VIEW_RANGE,
            ChartView.NORMALIZED: NORMALIZED_VIEW_RANGE,
        }
        return ranges[self]


class PipelineStages(str, Enum):
    """Which stages a pipeline run applies."""

    FULL = "full"  # smooth -> stretch -> interpolate -> normalize
    NORMALIZE_ONLY = "normalize_only"  # raw samples straight to the normalizer


@dataclass(frozen=True)
class PowerRecord:
    """One row of the telemetry CSV."""

    timestamp: datetime
    pv_power: float
    ld_power: float

    @property
    def minute_of_day(self) -> int:
        """Minute offset within the day."""
        return self.timestamp.hour * MINUTES_PER_HOUR + self.timestamp.minute


@dataclass(frozen=True)
class Sample:
    """One observed reading: minute of day and scaled power."""

    minute_of_day: int
    power: float


@dataclass(frozen=True)
class PlotPoint:
    """
    The record threaded through every shaping stage.

    minute_of_day is an integer after stretching; x is the chart
    x-coordinate, whose unit depends on the stage reached.
    """

    minute_of_day: int | float
    x: float
    pv: float

    @classmethod
    def from_sample(cls, sample: Sample) -> "PlotPoint":
        """Create an unshaped point from an observed sample."""
        return cls(minute_of_day=sample.minute_of_day, x=0.0, pv=sample.power)

    def to_xy(self) -> dict[str, float]:
        """Convert to the {x, y} pair consumed by renderers and writers."""
        return {"x": self.x, "y": self.pv}


def points_to_frame(points: Sequence[PlotPoint]) -> pd.DataFrame:
    """Convert a point sequence to a DataFrame with minute_of_day, x and pv columns."""
    return pd.DataFrame(
        {
            "minute_of_day": [p.minute_of_day for p in points],
            "x": [p.x for p in points],
            "pv": [p.pv for p in points],
        }
    )


# Type aliases for clarity
Curve: TypeAlias = list[PlotPoint]
MinuteOfDay: TypeAlias = int
