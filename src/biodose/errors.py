"""Exception hierarchy for biodose.

Each fault derives from :class:`BiodoseError` and from the builtin exception
it most resembles, so callers may catch either.
"""

from __future__ import annotations

import pathlib
from typing import Mapping, Optional, Union


class BiodoseError(Exception):
    """Base class for all biodose errors."""


class EmptySeriesError(BiodoseError, ValueError):
    """Raised when a baseline is requested for a series with no samples."""

    def __init__(self, series: str = "series"):
        self.series = series
        super().__init__(f"cannot compute the mean of empty {series}")


class MisalignedWindowError(BiodoseError, IndexError):
    """Raised when the windowed series do not cover the same instants."""

    def __init__(self, lengths: Mapping[str, int]):
        self.lengths = dict(lengths)
        self.index = min(self.lengths.values())
        short = sorted(name for name, n in self.lengths.items() if n == self.index)
        detail = ", ".join(f"{name}={n}" for name, n in self.lengths.items())
        super().__init__(
            f"window index {self.index} out of range for {', '.join(short)} ({detail})"
        )


class TimestampParseError(BiodoseError, ValueError):
    """Raised when a timestamp string cannot be parsed."""

    def __init__(self, token: str, reason: Optional[str] = None):
        self.token = token
        message = f"Unrecognised timestamp: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SeriesFormatError(BiodoseError, ValueError):
    """Raised when a series file cannot be parsed."""

    def __init__(self, message: str, *, path: Union[str, pathlib.Path], line: int):
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}:{self.line}: {message}")


class UnknownDoseModelError(BiodoseError, KeyError):
    """Raised when a dose model name is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = list(available)
        super().__init__(f"unknown dose model {name!r}; available: {', '.join(self.available)}")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "BiodoseError",
    "EmptySeriesError",
    "MisalignedWindowError",
    "TimestampParseError",
    "SeriesFormatError",
    "UnknownDoseModelError",
]
