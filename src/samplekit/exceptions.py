from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class SampleKitError(Exception):
    """Base exception for the samplekit package."""


class InvalidRangeError(SampleKitError, ValueError):
    """Raised when a bounded generator is built with an unusable range."""

    def __init__(self, low, high, reason: str = "lower bound exceeds upper bound"):
        self.low = low
        self.high = high
        super().__init__(f"Invalid range [{low!r}, {high!r}]: {reason}")


class CapacityExceededError(SampleKitError, RuntimeError):
    """Raised when a uniqueness-based fill stops making progress.

    ``requested`` is the target size, ``reached`` the number of distinct
    values collected before giving up and ``limit`` the number of consecutive
    stalled draws that triggered the error.
    """

    def __init__(self, requested: int, reached: int, limit: int):
        self.requested = requested
        self.reached = reached
        self.limit = limit
        super().__init__(
            f"Collected {reached} of {requested} distinct values; no new value in "
            f"{limit} consecutive draws. The producer's value space is probably "
            f"smaller than {requested}."
        )


class FileAccessError(SampleKitError, OSError):
    """Raised when a file cannot be opened, created or read; the cause is chained."""

    def __init__(self, path: Union[str, Path], mode: str, reason: Optional[str] = None):
        self.path = Path(path)
        self.mode = mode
        action = "created" if mode.startswith(("w", "x", "a")) else "opened"
        detail = f" ({reason})" if reason else ""
        super().__init__(f"{self.path}: cannot be {action}{detail}")


class ConfigError(SampleKitError):
    """Raised for missing, unparsable or invalid configuration."""


__all__ = [
    "CapacityExceededError",
    "ConfigError",
    "FileAccessError",
    "InvalidRangeError",
    "SampleKitError",
]
