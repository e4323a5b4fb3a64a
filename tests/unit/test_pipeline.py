"""
Tests for curve shaping and the daily pipeline.
"""

from datetime import date
from pathlib import Path

import pytest

from pvcurve.core.config import PipelineConfig, Settings
from pvcurve.core.exceptions import (
    IngestError,
    InsufficientDataError,
    NoPositiveSamplesError,
    ValidationError,
)
from pvcurve.core.types import ChartView, Sample
from pvcurve.pipeline.daily import DailyPipeline, shape_curve


class TestShapeCurve:
    """Tests for shape_curve()."""

    def test_full_day_becomes_dense_unit_curve(
        self,
        sunny_day_samples: list[Sample],
        pipeline_config: PipelineConfig,
    ):
        """A sunny day should come out as 1440 normalized points."""
        result = shape_curve(sunny_day_samples, pipeline_config)
        points = result.points

        assert result.view == ChartView.NORMALIZED
        assert len(points) == 1440
        assert [p.minute_of_day for p in points] == list(range(1440))
        assert points[-1].x == 1.0
        assert max(p.pv for p in points) == 1.0
        assert all(0.0 <= p.pv <= 1.0 for p in points)
        assert all(0.0 <= p.x <= 1.0 for p in points)

    def test_stage_counts_trace_the_run(
        self,
        sunny_day_samples: list[Sample],
        pipeline_config: PipelineConfig,
    ):
        """Each stage should record how many points it produced."""
        result = shape_curve(sunny_day_samples, pipeline_config)
        counts = result.stage_counts

        assert counts["input"] == len(sunny_day_samples)
        assert counts["smooth"] == len(sunny_day_samples)
        assert counts["stretch"] < counts["smooth"]
        assert counts["interpolate"] == 1440
        assert counts["normalize"] == 1440

    def test_without_normalization_curve_is_in_hours(self, sunny_day_samples: list[Sample]):
        """Skipping normalization should leave x in hours."""
        config = PipelineConfig.from_dict({"shaping": {"normalize": False}})

        result = shape_curve(sunny_day_samples, config)

        assert result.view == ChartView.HOURS
        assert "normalize" not in result.stage_counts
        assert result.points[0].x == 0.0
        assert result.points[-1].x == pytest.approx(1439 / 60)

    def test_normalize_only_skips_shaping(self):
        """The one-pass variant should normalize raw samples directly."""
        config = PipelineConfig.from_dict({"shaping": {"stages": "normalize_only"}})
        samples = [Sample(minute_of_day=m, power=p) for m, p in [(0, 0.0), (400, 5.0), (800, 20.0), (1200, 0.0)]]

        result = shape_curve(samples, config)

        assert len(result.points) == 4
        assert [p.pv for p in result.points] == pytest.approx([0.0, 0.25, 1.0, 0.0])
        assert result.points[-1].x == 1.0

    def test_custom_day_end(self, sunny_day_samples: list[Sample]):
        """A partial day should stretch to its configured end."""
        config = PipelineConfig.from_dict({"shaping": {"day_end_minute": 719, "normalize": False}})

        result = shape_curve(sunny_day_samples, config)

        assert len(result.points) == 720
        assert result.points[-1].minute_of_day == 719

    def test_single_spike_without_smoothing_raises(self):
        """Only one positive sample left for the stretcher is an error."""
        config = PipelineConfig.from_dict({"shaping": {"smoothing_passes": 0}})
        samples = [
            Sample(minute_of_day=m, power=p)
            for m, p in zip([0, 360, 720, 1080, 1439], [0.0, 0.0, 10.0, 0.0, 0.0])
        ]

        with pytest.raises(InsufficientDataError) as exc_info:
            shape_curve(samples, config)

        assert exc_info.value.stage == "stretch"

    def test_dark_day_raises(self, pipeline_config: PipelineConfig):
        """A day without any production has no positive samples."""
        samples = [Sample(minute_of_day=m, power=0.0) for m in range(0, 1440, 10)]

        with pytest.raises(NoPositiveSamplesError):
            shape_curve(samples, pipeline_config)

    def test_too_few_samples_raises(self, pipeline_config: PipelineConfig):
        """Two samples cannot be smoothed."""
        samples = [Sample(minute_of_day=600, power=1.0), Sample(minute_of_day=601, power=2.0)]

        with pytest.raises(InsufficientDataError) as exc_info:
            shape_curve(samples, pipeline_config)

        assert exc_info.value.stage == "smooth"

    def test_unordered_samples_raise(self, pipeline_config: PipelineConfig):
        """Samples out of chronological order violate the ordering invariant."""
        samples = [Sample(minute_of_day=m, power=1.0) for m in [10, 5, 20]]

        with pytest.raises(ValidationError):
            shape_curve(samples, pipeline_config)

    def test_input_is_not_modified(
        self,
        sunny_day_samples: list[Sample],
        pipeline_config: PipelineConfig,
    ):
        """Shaping should leave the samples untouched."""
        before = list(sunny_day_samples)

        shape_curve(sunny_day_samples, pipeline_config)

        assert sunny_day_samples == before

    def test_to_dict_has_xy_points(
        self,
        sunny_day_samples: list[Sample],
        pipeline_config: PipelineConfig,
    ):
        """Serialized result should expose {x, y} pairs."""
        data = shape_curve(sunny_day_samples, pipeline_config).to_dict()

        assert data["view"] == "normalized"
        assert set(data["points"][0]) == {"x", "y"}


class TestDailyPipeline:
    """Tests for the file-to-file pipeline."""

    @pytest.fixture
    def settings(self, tmp_path: Path) -> Settings:
        """Settings pointing at temporary directories."""
        return Settings(
            data_dir=tmp_path,
            output_dir=tmp_path / "out",
            config_dir=tmp_path / "config",
        )

    @pytest.fixture
    def pipeline(self, settings: Settings, pipeline_config: PipelineConfig) -> DailyPipeline:
        """Create a daily pipeline."""
        return DailyPipeline(settings=settings, config=pipeline_config)

    def test_run_reads_dated_file(
        self,
        pipeline: DailyPipeline,
        write_telemetry,
        sunny_day_rows: list[str],
        sample_day: date,
    ):
        """run(day) should read YYYYMMDD.csv from the data directory."""
        write_telemetry(sunny_day_rows)

        result = pipeline.run(sample_day)

        assert result.day == sample_day
        assert result.source.endswith("20250403.csv")
        assert len(result.points) == 1440
        assert result.to_dict()["date"] == "2025-04-03"

    def test_run_with_explicit_source(
        self,
        pipeline: DailyPipeline,
        write_telemetry,
        sunny_day_rows: list[str],
        sample_day: date,
    ):
        """An explicit CSV should be used and its day reported."""
        path = write_telemetry(sunny_day_rows, name="export.csv")

        result = pipeline.run(source=path)

        assert result.day == sample_day

    def test_save_result_writes_chart_and_curve(
        self,
        pipeline: DailyPipeline,
        write_telemetry,
        sunny_day_rows: list[str],
        sample_day: date,
        settings: Settings,
    ):
        """save_result should write a PNG and a JSON document."""
        write_telemetry(sunny_day_rows)
        result = pipeline.run(sample_day)

        chart_path, curve_path = pipeline.save_result(result)

        assert chart_path == settings.output_dir / "20250403.png"
        assert curve_path == settings.output_dir / "20250403.json"
        assert chart_path.exists()
        assert pipeline.storage.load(sample_day)[-1]["x"] == 1.0

    def test_load_column_normalize_only(
        self,
        settings: Settings,
        write_telemetry,
        sample_day: date,
    ):
        """Shaping the load column should give a curve within [0, 1]."""
        config = PipelineConfig.from_dict({
            "source": {"power_column": "ld_power"},
            "shaping": {"stages": "normalize_only"},
        })
        pipeline = DailyPipeline(settings=settings, config=config)
        write_telemetry([
            "2025-04-03 06:15,0.1,0.4",
            "2025-04-03 06:20,0.2,0.8",
            "2025-04-03 06:25,0.3,0.2",
        ])

        result = pipeline.run(sample_day)

        assert [p.pv for p in result.points] == pytest.approx([0.5, 1.0, 0.25])
        assert all(0.0 <= p.pv <= 1.0 for p in result.points)

    def test_negative_load_is_ingest_error(
        self,
        settings: Settings,
        write_telemetry,
        sample_day: date,
    ):
        """A negative load reading should stop the run before shaping."""
        config = PipelineConfig.from_dict({
            "source": {"power_column": "ld_power"},
            "shaping": {"stages": "normalize_only"},
        })
        pipeline = DailyPipeline(settings=settings, config=config)
        write_telemetry([
            "2025-04-03 06:15,0.1,-0.4",
            "2025-04-03 06:20,0.2,0.8",
            "2025-04-03 06:25,0.3,0.2",
        ])

        with pytest.raises(IngestError):
            pipeline.run(sample_day)

    def test_missing_file_is_ingest_error(self, pipeline: DailyPipeline):
        """No telemetry for the day should raise IngestError."""
        with pytest.raises(IngestError):
            pipeline.run(date(2025, 1, 1))
