"""Common type helpers for biodose.

This module defines the lightweight containers exchanged between the
baseline estimator, the window processor and dose models.  Every structure
is immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Mapping, Sequence

import numpy as np


@dataclass(frozen=True)
class Sample:
    """Single biometric reading."""

    value: float
    timestamp: str
    quality: str = "unknown"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Sample":
        """Build a sample from a ``{"value", "timestamp", "quality"}`` mapping."""

        return cls(
            value=float(data["value"]),
            timestamp=str(data["timestamp"]),
            quality=str(data.get("quality") or "unknown"),
        )


Series = Sequence[Sample]


@dataclass(frozen=True)
class AlignedSample:
    """One sampling instant across the three windowed series."""

    hrv: float
    rhr: float
    resp_rate: float
    timestamp: str


@dataclass(frozen=True)
class BaselineMeans:
    """Arithmetic means of the three full historical series."""

    hrv: float
    rhr: float
    resp_rate: float


@dataclass(frozen=True)
class HistoricalValues:
    """Full value arrays handed to a dose model as baseline context."""

    hrv: np.ndarray
    rhr: np.ndarray
    resp_rate: np.ndarray


@dataclass(frozen=True)
class CurrentValues:
    """Values of the sample currently being dosed."""

    hrv: float
    rhr: float
    resp_rate: float


@dataclass(frozen=True)
class SeriesBundle:
    """The three input series loaded together."""

    hrv: Sequence[Sample]
    rhr: Sequence[Sample]
    resp_rate: Sequence[Sample]


_WIRE_NAMES = {
    "hour": "hour",
    "timestamp": "timestamp",
    "hrv_diff": "hrvDiff",
    "rhr_diff": "rhrDiff",
    "resp_rate_diff": "respRateDiff",
    "current_hrv": "currentHRV",
    "current_rhr": "currentRHR",
    "current_resp_rate": "currentRespRate",
    "calculated_dose": "calculatedDose",
}


@dataclass(frozen=True)
class ProcessedRecord:
    """Per-sample deviation and dose row."""

    hour: int
    timestamp: str
    hrv_diff: float
    rhr_diff: float
    resp_rate_diff: float
    current_hrv: float
    current_rhr: float
    current_resp_rate: float
    calculated_dose: float

    def to_dict(self) -> dict[str, Any]:
        """Return the record keyed by its camelCase wire names."""

        return {_WIRE_NAMES[key]: value for key, value in asdict(self).items()}
