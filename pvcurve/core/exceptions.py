"""
Custom exceptions for PVCURVE.

All exceptions inherit from PVCurveError for easy catching.
"""


class PVCurveError(Exception):
    """Base exception for all PVCURVE errors."""

    pass


class ConfigurationError(PVCurveError):
    """Raised when configuration is invalid or missing."""

    pass


class IngestError(PVCurveError):
    """
    Raised when a day's telemetry yields no usable data.

    Covers unreadable files, malformed rows and empty files.
    The whole day is aborted; no partial recovery is attempted.
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        row: int | None = None,
    ):
        super().__init__(message)
        self.source = source
        self.row = row

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.source:
            parts.append(f"source={self.source}")
        if self.row is not None:
            parts.append(f"row={self.row}")
        return " | ".join(parts)


class InsufficientDataError(PVCurveError):
    """Raised when a stage receives too few points to be defined."""

    def __init__(
        self,
        message: str,
        required: int,
        available: int,
        stage: str | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.available = available
        self.stage = stage

    def __str__(self) -> str:
        return (
            f"{self.args[0]} | "
            f"required={self.required}, available={self.available}"
            + (f", stage={self.stage}" if self.stage else "")
        )


class NoPositiveSamplesError(InsufficientDataError):
    """Raised when the stretch window is empty (no pv > 0 at all)."""

    def __init__(self, available: int = 0):
        super().__init__(
            "No positive samples",
            required=1,
            available=available,
            stage="stretch",
        )


class ValidationError(PVCurveError):
    """Raised when a sequence breaks an ordering or density invariant."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.field:
            parts.append(f"field={self.field}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)


class OutputError(PVCurveError):
    """Raised when a chart or curve document cannot be written."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.args[0]} | path={self.path}"
        return self.args[0]
