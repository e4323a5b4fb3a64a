"""
Pytest configuration and fixtures.
"""

import math
from datetime import date
from pathlib import Path
from typing import Callable

import pytest

from pvcurve.core.config import PipelineConfig
from pvcurve.core.types import PlotPoint, Sample


@pytest.fixture
def make_points() -> Callable[..., list[PlotPoint]]:
    """Factory building a curve from parallel minute/pv (and optional x) lists."""

    def _make(minutes, pvs, xs=None) -> list[PlotPoint]:
        xs = xs if xs is not None else [0.0] * len(minutes)
        return [
            PlotPoint(minute_of_day=m, x=x, pv=pv)
            for m, x, pv in zip(minutes, xs, pvs)
        ]

    return _make


@pytest.fixture
def pipeline_config() -> PipelineConfig:
    """Default pipeline configuration, built without touching disk."""
    return PipelineConfig.from_dict({})


def sunny_day_power(minute: int) -> float:
    """Half-sine production between 06:00 and 18:00, zero outside."""
    if minute <= 360 or minute >= 1080:
        return 0.0
    return 4.2 * math.sin(math.pi * (minute - 360) / 720)


@pytest.fixture
def sunny_day_samples() -> list[Sample]:
    """One reading every 5 minutes across a full day."""
    return [
        Sample(minute_of_day=m, power=sunny_day_power(m) * 10.0)
        for m in range(0, 1440, 5)
    ]


@pytest.fixture
def sample_day() -> date:
    """Sample day for testing."""
    return date(2025, 4, 3)


@pytest.fixture
def write_telemetry(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a telemetry CSV under tmp_path and returning its path."""

    def _write(rows: list[str], name: str = "20250403.csv", header: bool = True) -> Path:
        path = tmp_path / name
        lines = (["date_time,pv_power,ld_power"] if header else []) + rows
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sunny_day_rows(sample_day: date) -> list[str]:
    """CSV rows for a full sunny day, one every 5 minutes."""
    rows = []
    for m in range(0, 1440, 5):
        stamp = f"{sample_day.isoformat()} {m // 60:02d}:{m % 60:02d}"
        rows.append(f"{stamp},{sunny_day_power(m):.4f},0.35")
    return rows
