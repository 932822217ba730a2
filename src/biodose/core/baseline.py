"""Baseline estimation over full historical series."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import EmptySeriesError
from ..types import BaselineMeans, HistoricalValues, Sample


def mean(series: Sequence[float], *, name: str = "series") -> float:
    """Return the arithmetic mean of *series*.

    ``EmptySeriesError`` is raised for empty input so that a missing signal is
    never mistaken for a zero baseline.
    """

    arr = np.asarray(series, dtype=float)
    if arr.size == 0:
        raise EmptySeriesError(name)
    return float(arr.sum() / arr.size)


def series_values(series: Sequence[Sample]) -> np.ndarray:
    """Return the values of *series* as a read-only float array."""

    arr = np.fromiter((s.value for s in series), dtype=float, count=len(series))
    arr.setflags(write=False)
    return arr


def historical_values(
    hrv: Sequence[Sample],
    rhr: Sequence[Sample],
    resp_rate: Sequence[Sample],
) -> HistoricalValues:
    """Collect the full value arrays of the three series."""

    return HistoricalValues(
        hrv=series_values(hrv),
        rhr=series_values(rhr),
        resp_rate=series_values(resp_rate),
    )


def baseline_means(history: HistoricalValues) -> BaselineMeans:
    """Compute the baseline mean of each signal in *history*."""

    return BaselineMeans(
        hrv=mean(history.hrv, name="hrv series"),
        rhr=mean(history.rhr, name="rhr series"),
        resp_rate=mean(history.resp_rate, name="resp_rate series"),
    )
