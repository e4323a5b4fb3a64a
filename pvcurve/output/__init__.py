"""
Output collaborators for PVCURVE.

Chart rendering (PNG) and curve persistence (JSON).
"""

from pvcurve.output.chart import ChartRenderer
from pvcurve.output.storage import CurveStorage

__all__ = [
    "ChartRenderer",
    "CurveStorage",
]
