"""
Curve storage for PVCURVE.

Persists shaped curves as JSON documents for other tools.

Document layout:
    {"points": [{"x": 0.0, "y": 0.01}, ...]}

Storage structure:
    output/
    ├── 20250403.json
    ├── 20250404.json
    └── ...
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Sequence

from pvcurve.core.constants import SOURCE_FILE_DATE_FORMAT
from pvcurve.core.exceptions import OutputError
from pvcurve.core.types import PlotPoint


logger = logging.getLogger(__name__)


class CurveStorage:
    """
    Persistent storage for shaped curves.

    One JSON file per day, named YYYYMMDD.json.
    """

    def __init__(self, base_dir: Path | str = "output"):
        """
        Initialize curve storage.

        Args:
            base_dir: Directory to store curve files
        """
        self.base_dir = Path(base_dir)

    def path(self, day: date) -> Path:
        """Get path for a day's curve file."""
        return self.base_dir / f"{day.strftime(SOURCE_FILE_DATE_FORMAT)}.json"

    def exists(self, day: date) -> bool:
        """Check if a curve exists for the day."""
        return self.path(day).exists()

    def save(self, day: date, points: Sequence[PlotPoint]) -> Path:
        """
        Save curve to disk.

        Args:
            day: Day the curve covers
            points: Shaped curve

        Returns:
            Path to the written file

        Raises:
            OutputError: If the file cannot be written
        """
        path = self.path(day)
        data = {"points": [p.to_xy() for p in points]}

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise OutputError(f"Failed to save curve: {e}", path=str(path)) from e

        logger.info(f"Saved curve with {len(points)} points to {path}")
        return path

    def load(self, day: date) -> list[dict[str, float]] | None:
        """
        Load a curve from disk.

        Args:
            day: Day the curve covers

        Returns:
            List of {x, y} dicts or None if not found
        """
        path = self.path(day)

        if not path.exists():
            logger.debug(f"No curve found for {day}")
            return None

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data["points"]

    def delete(self, day: date) -> bool:
        """Delete the curve for a day."""
        path = self.path(day)
        if path.exists():
            path.unlink()
            logger.info(f"Deleted curve for {day}")
            return True
        return False
