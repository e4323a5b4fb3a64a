"""
Curve shaping transforms for PVCURVE.

Four pure stages, applied in order:
smooth -> stretch -> interpolate -> normalize
Each returns a new curve and never mutates its input.
"""

from pvcurve.transforms.smoothing import smooth, smooth_passes
from pvcurve.transforms.stretching import stretch
from pvcurve.transforms.interpolation import interpolate, merge_duplicate_minutes
from pvcurve.transforms.normalization import normalize

__all__ = [
    "smooth",
    "smooth_passes",
    "stretch",
    "interpolate",
    "merge_duplicate_minutes",
    "normalize",
]
