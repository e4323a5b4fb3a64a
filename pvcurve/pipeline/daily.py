"""
Daily pipeline orchestrator.

Coordinates the full shaping flow for one day of telemetry:
Ingest → Smooth → Stretch → Interpolate → Normalize → Render/Save

All I/O happens before the first stage and after the last one; the
shaping itself (shape_curve) is a pure function of the samples.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Sequence

from pvcurve.core.config import PipelineConfig, Settings, get_settings, load_config
from pvcurve.core.types import ChartView, PipelineStages, PlotPoint, Sample
from pvcurve.guardrails.validators import validate_dense, validate_ordering
from pvcurve.ingest.csv_reader import TelemetryReader
from pvcurve.output.chart import ChartRenderer
from pvcurve.output.storage import CurveStorage
from pvcurve.transforms import interpolate, normalize, smooth_passes, stretch


logger = logging.getLogger(__name__)


@dataclass
class CurveResult:
    """Shaped curve plus a trace of how many points each stage produced."""

    points: list[PlotPoint]
    view: ChartView
    stage_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "view": self.view.value,
            "stage_counts": dict(self.stage_counts),
            "points": [p.to_xy() for p in self.points],
        }


@dataclass
class DailyResult:
    """Result of the daily pipeline for one day."""

    day: date
    source: str
    curve: CurveResult

    @property
    def points(self) -> list[PlotPoint]:
        return self.curve.points

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "date": self.day.isoformat(),
            "source": self.source,
            **self.curve.to_dict(),
        }


def shape_curve(
    samples: Sequence[Sample],
    config: PipelineConfig,
) -> CurveResult:
    """
    Run the shaping stages over one day of samples.

    Args:
        samples: Chronological samples for one day
        config: Pipeline configuration (passes, day end, stages, normalize)

    Returns:
        CurveResult with the final curve

    Raises:
        InsufficientDataError: If a stage's precondition is not met
        NoPositiveSamplesError: If the day has no pv > 0 at all
        ValidationError: If samples are out of order or the curve is not dense
    """
    points = [PlotPoint.from_sample(s) for s in samples]
    validate_ordering(points)
    counts = {"input": len(points)}

    if config.stages == PipelineStages.NORMALIZE_ONLY:
        points = normalize(points)
        counts["normalize"] = len(points)
        return CurveResult(points=points, view=ChartView.NORMALIZED, stage_counts=counts)

    points = smooth_passes(points, config.smoothing_passes)
    counts["smooth"] = len(points)

    points = stretch(points, day_end=config.day_end_minute)
    counts["stretch"] = len(points)

    points = interpolate(points)
    validate_dense(points)
    counts["interpolate"] = len(points)

    view = ChartView.HOURS
    if config.normalize:
        points = normalize(points)
        counts["normalize"] = len(points)
        view = ChartView.NORMALIZED

    logger.debug(f"Stage counts: {counts}")
    return CurveResult(points=points, view=view, stage_counts=counts)


class DailyPipeline:
    """
    Orchestrates one day of curve shaping.

    Flow:
    1. Read the day's telemetry CSV
    2. Convert readings to scaled samples
    3. Shape the curve (shape_curve)
    4. Render the chart and write the curve document (save_result)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        """
        Initialize daily pipeline.

        Args:
            settings: Application settings
            config: Pipeline configuration (loaded from YAML if not provided)
        """
        self.settings = settings or get_settings()
        self.config = config or load_config("pipeline")

        self.reader = TelemetryReader(timestamp_format=self.config.timestamp_format)
        self.renderer = ChartRenderer.from_config(self.config.chart)
        self.storage = CurveStorage(base_dir=self.settings.output_dir)

    def run(
        self,
        day: date | None = None,
        source: Path | str | None = None,
    ) -> DailyResult:
        """
        Run the pipeline for a single day.

        Args:
            day: Day to process (defaults to today); selects the source file
            source: Explicit CSV path, overriding the dated file

        Returns:
            DailyResult with the shaped curve

        Raises:
            IngestError: If the day's telemetry yields no usable data
            InsufficientDataError: If the telemetry is too sparse to shape
        """
        if source is not None:
            path = Path(source)
        else:
            path = self.settings.source_path(day or date.today())
        logger.info(f"Running daily pipeline on {path}")

        telemetry = self.reader.read(path)
        if day is not None and telemetry.day != day:
            logger.warning(f"{path.name} holds readings for {telemetry.day}, not {day}")

        samples = telemetry.to_samples(
            column=self.config.power_column,
            scale=self.config.power_scale,
        )
        curve = shape_curve(samples, self.config)

        logger.info(
            f"Shaped {len(samples)} readings into {len(curve.points)} points "
            f"({curve.view.value} view)"
        )
        return DailyResult(day=telemetry.day, source=str(path), curve=curve)

    def save_result(
        self,
        result: DailyResult,
        output_dir: Path | None = None,
    ) -> tuple[Path, Path]:
        """
        Render the chart and write the curve document.

        Args:
            result: DailyResult to save
            output_dir: Output directory (defaults to settings.output_dir)

        Returns:
            (chart path, curve document path)
        """
        storage = CurveStorage(base_dir=output_dir) if output_dir else self.storage
        chart_path = storage.path(result.day).with_suffix(".png")

        self.renderer.render(result.points, chart_path, view=result.curve.view)
        curve_path = storage.save(result.day, result.points)

        return chart_path, curve_path
