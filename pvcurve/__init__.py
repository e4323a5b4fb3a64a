"""
PVCURVE - Daily PV Output Curve Shaper

Turns one day of irregularly-sampled photovoltaic telemetry into a
clean, dense, unit-normalized curve for charting and for other tools.

Stages: smooth (3-point box filter) → stretch (sunlit window to a full
day) → interpolate (one point per minute) → normalize (unit square).

NOT a physical irradiance model. Purely geometric reshaping of the observed curve.
"""

__version__ = "0.1.0"
__author__ = "PVCURVE Team"

from pvcurve.core.types import PlotPoint, Sample
from pvcurve.pipeline.daily import shape_curve

__all__ = [
    "PlotPoint",
    "Sample",
    "shape_curve",
]
