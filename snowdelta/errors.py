"""
Exceptions raised by the pixel aggregation engine.

All of them are recoverable input problems: callers are expected to catch
SnowDeltaError and show the message to the user.
"""


class SnowDeltaError(Exception):
    """
    Base exception for engine failures.

    Attributes:
        message: Human-readable error description
        details: Additional context about the failure
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidRangeError(SnowDeltaError):
    """
    Requested month or year range is not usable.

    Raised when start >= end month, start > end year, a month falls
    outside 1..12, or a year range is longer than the allowed span.
    """

    def __init__(self, message: str, start=None, end=None):
        super().__init__(message, {"start": start, "end": end})
        self.start = start
        self.end = end


class NoDataError(SnowDeltaError):
    """
    No records exist for one or more requested months (or years).

    Attributes:
        missing: The months/years that had no records
    """

    def __init__(self, missing: list, unit: str = "month"):
        missing = list(missing)
        plural = "s" if len(missing) > 1 else ""
        listed = " and ".join(str(m) for m in missing)
        if missing:
            super().__init__(f"No data found for {unit}{plural} {listed}")
        else:
            super().__init__("No data found")
        self.missing = missing
        self.unit = unit


class AlignmentError(SnowDeltaError):
    """
    Two month slices cannot be paired pixel by pixel.

    Raised when a pixel appears in one month slice but not the other, or
    appears more than once within a slice.

    Attributes:
        keys: Offending (x, y) pixel keys
    """

    def __init__(self, message: str, keys: list, month=None):
        keys = list(keys)
        details = {"keys": keys[:5] if len(keys) > 5 else keys, "n_keys": len(keys)}
        if month is not None:
            details["month"] = month
        super().__init__(message, details)
        self.keys = keys
        self.month = month


class MissingColumnError(SnowDeltaError, KeyError):
    """Input table lacks a required column."""

    def __init__(self, column: str, found: list = None):
        super().__init__(
            f"Required column '{column}' is missing",
            {"found": list(found or [])},
        )
        self.column = column

    def __str__(self) -> str:
        return SnowDeltaError.__str__(self)
