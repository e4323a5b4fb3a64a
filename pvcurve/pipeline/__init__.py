"""
Pipeline module for PVCURVE.

Orchestrates the daily shaping pipeline.
"""

from pvcurve.pipeline.daily import CurveResult, DailyPipeline, DailyResult, shape_curve

__all__ = ["CurveResult", "DailyPipeline", "DailyResult", "shape_curve"]
