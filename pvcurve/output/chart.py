"""
Chart rendering.

Draws a shaped curve as a single line on a raster (PNG) chart.
Axis ranges follow the ChartView of the stage the curve reached.
"""

import logging
from pathlib import Path
from typing import Any, Sequence

from matplotlib.figure import Figure

from pvcurve.core.constants import (
    CHART_CAPTION,
    CHART_DPI,
    CHART_HEIGHT_PX,
    CHART_SERIES_COLOR,
    CHART_SERIES_LABEL,
    CHART_WIDTH_PX,
)
from pvcurve.core.exceptions import OutputError
from pvcurve.core.types import ChartView, PlotPoint, points_to_frame


logger = logging.getLogger(__name__)


class ChartRenderer:
    """Renders curves to PNG files."""

    def __init__(
        self,
        width: int = CHART_WIDTH_PX,
        height: int = CHART_HEIGHT_PX,
        dpi: int = CHART_DPI,
        caption: str = CHART_CAPTION,
        label: str = CHART_SERIES_LABEL,
        color: str = CHART_SERIES_COLOR,
    ) -> None:
        """
        Initialize renderer.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            dpi: Resolution used to convert pixels to figure inches
            caption: Chart title
            label: Legend label of the curve
            color: Line color
        """
        self.width = width
        self.height = height
        self.dpi = dpi
        self.caption = caption
        self.label = label
        self.color = color

    @classmethod
    def from_config(cls, chart: dict[str, Any]) -> "ChartRenderer":
        """Create a renderer from the chart section of PipelineConfig."""
        return cls(
            width=int(chart["width"]),
            height=int(chart["height"]),
            dpi=int(chart["dpi"]),
            caption=chart["caption"],
            label=chart["label"],
            color=chart["color"],
        )

    def render(
        self,
        points: Sequence[PlotPoint],
        path: Path | str,
        view: ChartView = ChartView.NORMALIZED,
    ) -> Path:
        """
        Draw the curve and save it.

        Args:
            points: Curve to draw (x, pv pairs)
            path: PNG file to write
            view: Chart view selecting the axis ranges

        Returns:
            Path to the written image

        Raises:
            OutputError: If the image cannot be written
        """
        path = Path(path)
        df = points_to_frame(points)
        x_min, x_max, y_min, y_max = view.axis_range

        fig = Figure(
            figsize=(self.width / self.dpi, self.height / self.dpi),
            dpi=self.dpi,
        )
        ax = fig.subplots()
        ax.plot(df["x"], df["pv"], color=self.color, label=self.label)
        ax.set_xlim(x_min, x_max)
        ax.set_ylim(y_min, y_max)
        ax.set_title(self.caption)
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right", facecolor="white", edgecolor="black")
        fig.tight_layout()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(path, dpi=self.dpi)
        except OSError as e:
            raise OutputError(f"Failed to write chart: {e}", path=str(path)) from e

        logger.info(f"Saved {view.value} chart with {len(df)} points to {path}")
        return path
