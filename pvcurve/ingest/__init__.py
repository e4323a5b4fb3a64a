"""Telemetry ingestion for PVCURVE."""

from pvcurve.ingest.csv_reader import DailyTelemetry, TelemetryReader

__all__ = [
    "DailyTelemetry",
    "TelemetryReader",
]
