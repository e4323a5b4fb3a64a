"""
Configuration management for PVCURVE.

Loads settings from environment variables and YAML config files.
Uses pydantic for validation.

Priority order:
1. Environment variables (PVCURVE_ prefix)
2. .env file
3. Field defaults
"""

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pvcurve.core.constants import (
    CHART_CAPTION,
    CHART_DPI,
    CHART_HEIGHT_PX,
    CHART_SERIES_COLOR,
    CHART_SERIES_LABEL,
    CHART_WIDTH_PX,
    DAY_END_MINUTE,
    DEFAULT_POWER_SCALE,
    DEFAULT_SMOOTHING_PASSES,
    POWER_COLUMNS,
    PV_POWER_COLUMN,
    SOURCE_FILE_DATE_FORMAT,
    TIMESTAMP_FORMAT,
)
from pvcurve.core.exceptions import ConfigurationError
from pvcurve.core.types import PipelineStages


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Paths are loaded from .env file or environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="PVCURVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory containing one telemetry CSV per day",
    )
    output_dir: Path = Field(
        default=Path("output"),
        description="Directory for rendered charts and curve documents",
    )
    config_dir: Path = Field(
        default=Path("config"),
        description="Directory containing YAML config files",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("data_dir", "output_dir", "config_dir", mode="before")
    @classmethod
    def resolve_path(cls, v: str | Path) -> Path:
        """Convert string to Path and resolve."""
        return Path(v).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()

    def source_path(self, day: date) -> Path:
        """Telemetry CSV for a given day."""
        return self.data_dir / f"{day.strftime(SOURCE_FILE_DATE_FORMAT)}.csv"


class PipelineConfig:
    """Configuration for curve shaping loaded from pipeline.yaml."""

    def __init__(self, config_path: Path):
        self._config = self._load_yaml(config_path)
        self._validate()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PipelineConfig":
        """Build a config from an in-memory mapping (same layout as the YAML file)."""
        config = cls.__new__(cls)
        config._config = data
        config._validate()
        return config

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """Load and parse YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path) as f:
            return yaml.safe_load(f) or {}

    def _validate(self) -> None:
        if not isinstance(self._config, dict):
            raise ConfigurationError(
                f"Pipeline config must be a mapping, got {type(self._config).__name__}"
            )
        for section in ("source", "shaping", "chart"):
            value = self._config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigurationError(
                    f"Section '{section}' must be a mapping, got {type(value).__name__}"
                )
        if self.smoothing_passes < 0:
            raise ConfigurationError(
                f"smoothing_passes must be >= 0, got {self.smoothing_passes}"
            )
        if self.day_end_minute <= 0:
            raise ConfigurationError(
                f"day_end_minute must be positive, got {self.day_end_minute}"
            )
        if self.power_column not in POWER_COLUMNS:
            raise ConfigurationError(
                f"Unknown power column: {self.power_column}. "
                f"Valid columns: {list(POWER_COLUMNS)}"
            )
        stages = self._shaping.get("stages", PipelineStages.FULL.value)
        if stages not in {s.value for s in PipelineStages}:
            raise ConfigurationError(
                f"Unknown stages: {stages}. "
                f"Valid stages: {[s.value for s in PipelineStages]}"
            )

    @property
    def _shaping(self) -> dict[str, Any]:
        return self._config.get("shaping") or {}

    @property
    def _source(self) -> dict[str, Any]:
        return self._config.get("source") or {}

    @property
    def smoothing_passes(self) -> int:
        """Number of 3-point smoothing passes."""
        return int(self._shaping.get("smoothing_passes", DEFAULT_SMOOTHING_PASSES))

    @property
    def day_end_minute(self) -> int:
        """Minute the last sunlit sample is stretched to."""
        return int(self._shaping.get("day_end_minute", DAY_END_MINUTE))

    @property
    def normalize(self) -> bool:
        """Whether the curve is rescaled to the unit interval."""
        return bool(self._shaping.get("normalize", True))

    @property
    def stages(self) -> PipelineStages:
        """Which stages a run applies."""
        return PipelineStages(self._shaping.get("stages", PipelineStages.FULL.value))

    @property
    def power_scale(self) -> float:
        """Multiplier applied to raw power readings."""
        return float(self._source.get("power_scale", DEFAULT_POWER_SCALE))

    @property
    def power_column(self) -> str:
        """CSV column holding the series to shape."""
        return self._source.get("power_column", PV_POWER_COLUMN)

    @property
    def timestamp_format(self) -> str:
        """strftime format of the CSV timestamp column."""
        return self._source.get("timestamp_format", TIMESTAMP_FORMAT)

    @property
    def chart(self) -> dict[str, Any]:
        """Chart settings with defaults filled in."""
        defaults = {
            "width": CHART_WIDTH_PX,
            "height": CHART_HEIGHT_PX,
            "dpi": CHART_DPI,
            "caption": CHART_CAPTION,
            "label": CHART_SERIES_LABEL,
            "color": CHART_SERIES_COLOR,
        }
        return {**defaults, **(self._config.get("chart") or {})}

    def with_overrides(self, **shaping: Any) -> "PipelineConfig":
        """Return a copy with shaping keys replaced (None values are ignored)."""
        data = dict(self._config)
        data["shaping"] = {
            **self._shaping,
            **{k: v for k, v in shaping.items() if v is not None},
        }
        return PipelineConfig.from_dict(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def load_config(config_type: str) -> PipelineConfig:
    """
    Load a specific configuration file.

    Args:
        config_type: Currently only "pipeline"

    Returns:
        Appropriate config object
    """
    settings = get_settings()
    config_map = {
        "pipeline": (settings.config_dir / "pipeline.yaml", PipelineConfig),
    }

    if config_type not in config_map:
        raise ConfigurationError(
            f"Unknown config type: {config_type}. "
            f"Valid types: {list(config_map.keys())}"
        )

    path, config_class = config_map[config_type]
    return config_class(path)
