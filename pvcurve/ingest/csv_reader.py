"""
Telemetry CSV reader.

Reads one day of inverter telemetry into PowerRecords.

File layout (header row, then one row per reading):
    date_time,pv_power,ld_power
    2025-04-03 05:12,0.0,0.31
    2025-04-03 05:17,0.02,0.29
    ...

Columns are read by position; header names are informational.
Any malformed row aborts the whole file.
"""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import pandas as pd

from pvcurve.core.constants import (
    LOAD_POWER_COLUMN,
    PV_POWER_COLUMN,
    TIMESTAMP_COLUMN,
    TIMESTAMP_FORMAT,
)
from pvcurve.core.exceptions import IngestError
from pvcurve.core.types import PowerRecord, Sample


logger = logging.getLogger(__name__)

COLUMNS = (TIMESTAMP_COLUMN, PV_POWER_COLUMN, LOAD_POWER_COLUMN)


@dataclass(frozen=True)
class DailyTelemetry:
    """One day of readings in chronological order."""

    source: str
    day: date
    records: tuple[PowerRecord, ...]

    def to_samples(
        self,
        column: str = PV_POWER_COLUMN,
        scale: float = 1.0,
    ) -> list[Sample]:
        """
        Convert records to samples.

        Args:
            column: Which power column to use (pv_power or ld_power)
            scale: Multiplier applied to each reading

        Returns:
            One Sample per record
        """
        if column not in (PV_POWER_COLUMN, LOAD_POWER_COLUMN):
            raise ValueError(f"Unknown power column: {column}")

        return [
            Sample(
                minute_of_day=r.minute_of_day,
                power=getattr(r, column) * scale,
            )
            for r in self.records
        ]

    def __len__(self) -> int:
        return len(self.records)


class TelemetryReader:
    """
    Reader for the daily telemetry CSV.

    Rejects the file as a whole on the first problem: missing file,
    empty file, unparseable or empty field, negative power, readings
    out of chronological order or spanning more than one day.
    """

    def __init__(self, timestamp_format: str = TIMESTAMP_FORMAT) -> None:
        """
        Initialize reader.

        Args:
            timestamp_format: strptime format of the date_time column
        """
        self.timestamp_format = timestamp_format

    def read(self, path: Path | str) -> DailyTelemetry:
        """
        Read and validate a telemetry file.

        Args:
            path: CSV file to read

        Returns:
            DailyTelemetry with all rows

        Raises:
            IngestError: If the file yields no usable data
        """
        path = Path(path)
        source = str(path)

        if not path.exists():
            raise IngestError("Telemetry file not found", source=source)

        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
        except pd.errors.EmptyDataError as e:
            raise IngestError("Empty CSV file", source=source) from e
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
            raise IngestError(f"Unreadable CSV file: {e}", source=source) from e

        if df.empty:
            raise IngestError("Empty CSV file", source=source)

        if len(df.columns) < len(COLUMNS):
            raise IngestError(
                f"Expected {len(COLUMNS)} columns {list(COLUMNS)}, found {len(df.columns)}",
                source=source,
            )

        df = df.iloc[:, : len(COLUMNS)].fillna("")
        df.columns = list(COLUMNS)

        timestamps = pd.to_datetime(
            df[TIMESTAMP_COLUMN], format=self.timestamp_format, errors="coerce"
        )
        pv = pd.to_numeric(df[PV_POWER_COLUMN], errors="coerce")
        ld = pd.to_numeric(df[LOAD_POWER_COLUMN], errors="coerce")

        self._check_parsed(df, TIMESTAMP_COLUMN, timestamps, source)
        self._check_parsed(df, PV_POWER_COLUMN, pv, source)
        self._check_parsed(df, LOAD_POWER_COLUMN, ld, source)

        self._check_non_negative(PV_POWER_COLUMN, pv, source)
        self._check_non_negative(LOAD_POWER_COLUMN, ld, source)
        self._check_chronological(timestamps, source)

        records = tuple(
            PowerRecord(
                timestamp=ts.to_pydatetime(),
                pv_power=float(p),
                ld_power=float(load),
            )
            for ts, p, load in zip(timestamps, pv, ld)
        )

        day = records[0].timestamp.date()
        logger.info(f"Read {len(records)} readings for {day} from {path.name}")

        return DailyTelemetry(source=source, day=day, records=records)

    @staticmethod
    def _line_number(index: int) -> int:
        """File line of a data row (line 1 is the header)."""
        return index + 2

    def _check_parsed(
        self,
        df: pd.DataFrame,
        column: str,
        parsed: pd.Series,
        source: str,
    ) -> None:
        """Raise on the first value that failed to parse."""
        bad = parsed.isna()
        if not bad.any():
            return

        idx = int(bad.to_numpy().argmax())
        raw = df[column].iloc[idx]
        if raw.strip() == "":
            message = f"Empty {column}"
        else:
            message = f"Malformed {column} value {raw!r}"
        raise IngestError(message, source=source, row=self._line_number(idx))

    def _check_non_negative(self, column: str, values: pd.Series, source: str) -> None:
        """Raise on the first negative reading of a power column."""
        negative = values < 0
        if negative.any():
            idx = int(negative.to_numpy().argmax())
            raise IngestError(
                f"Negative {column} value {values.iloc[idx]}",
                source=source,
                row=self._line_number(idx),
            )

    def _check_chronological(self, timestamps: pd.Series, source: str) -> None:
        """Readings must be strictly increasing and within one day."""
        steps = timestamps.diff().iloc[1:]
        not_increasing = steps <= pd.Timedelta(0)
        if not_increasing.any():
            idx = int(not_increasing.to_numpy().argmax()) + 1
            raise IngestError(
                f"Timestamp {timestamps.iloc[idx]} is not after the previous reading",
                source=source,
                row=self._line_number(idx),
            )

        days = timestamps.dt.date
        if days.nunique() > 1:
            idx = int((days != days.iloc[0]).to_numpy().argmax())
            raise IngestError(
                f"Readings span more than one day ({days.iloc[0]} and {days.iloc[idx]})",
                source=source,
                row=self._line_number(idx),
            )
