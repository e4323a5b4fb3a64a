"""Core module containing types, configuration, and shared utilities."""

from pvcurve.core.types import (
    ChartView,
    PipelineStages,
    PlotPoint,
    PowerRecord,
    Sample,
)
from pvcurve.core.config import PipelineConfig, Settings, get_settings, load_config
from pvcurve.core.exceptions import (
    PVCurveError,
    ConfigurationError,
    IngestError,
    InsufficientDataError,
    NoPositiveSamplesError,
    OutputError,
    ValidationError,
)

__all__ = [
    # Types
    "ChartView",
    "PipelineStages",
    "PlotPoint",
    "PowerRecord",
    "Sample",
    # Config
    "PipelineConfig",
    "Settings",
    "get_settings",
    "load_config",
    # Exceptions
    "PVCurveError",
    "ConfigurationError",
    "IngestError",
    "InsufficientDataError",
    "NoPositiveSamplesError",
    "OutputError",
    "ValidationError",
]
