"""
Constants for PVCURVE.

Central location for magic numbers and default values.
Every value here can be overridden through config/pipeline.yaml.
"""

# ============================================================
# DAY GEOMETRY
# ============================================================

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# Last minute of a day (23:59); the stretcher maps the sunlit window onto [0, DAY_END_MINUTE]
DAY_END_MINUTE = HOURS_PER_DAY * MINUTES_PER_HOUR - 1

# ============================================================
# SHAPING
# ============================================================

# Width of the box filter used by the smoother
SMOOTHING_WINDOW = 3

# Number of smoothing passes in the reference pipeline
DEFAULT_SMOOTHING_PASSES = 2

# Raw telemetry is multiplied by this before shaping (kW readings -> chart units)
DEFAULT_POWER_SCALE = 10.0

# ============================================================
# TELEMETRY CSV
# ============================================================

TIMESTAMP_COLUMN = "date_time"
PV_POWER_COLUMN = "pv_power"
LOAD_POWER_COLUMN = "ld_power"
POWER_COLUMNS = (PV_POWER_COLUMN, LOAD_POWER_COLUMN)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# Source files are named after the day they cover
SOURCE_FILE_DATE_FORMAT = "%Y%m%d"

# ============================================================
# CHART
# ============================================================

# Axis ranges (x_min, x_max, y_min, y_max) per chart view
HOURS_VIEW_RANGE = (0.0, 24.0, 0.0, 50.0)
NORMALIZED_VIEW_RANGE = (0.0, 1.1, 0.0, 1.5)

CHART_WIDTH_PX = 1280
CHART_HEIGHT_PX = 480
CHART_DPI = 100
CHART_CAPTION = "Sun and PVPower"
CHART_SERIES_LABEL = "pvPower"
CHART_SERIES_COLOR = "red"
