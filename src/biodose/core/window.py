"""Windowing of the three biometric series into aligned samples."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from ..errors import MisalignedWindowError
from ..types import AlignedSample, Sample

T = TypeVar("T")

DEFAULT_WINDOW = 24


def recent_window(data: Sequence[T], size: int = DEFAULT_WINDOW) -> Sequence[T]:
    """Return the last *size* elements of *data*.

    Shorter input is returned whole; nothing is padded.
    """

    if size <= 0:
        raise ValueError("size must be positive")
    return data[-size:]


def align_windows(
    hrv: Sequence[Sample],
    rhr: Sequence[Sample],
    resp_rate: Sequence[Sample],
) -> List[AlignedSample]:
    """Zip three equally long windows into :class:`AlignedSample` rows.

    The HRV window drives iteration and supplies the timestamp.
    ``MisalignedWindowError`` is raised before any row is built if the
    lengths differ.
    """

    lengths = {"hrv": len(hrv), "rhr": len(rhr), "resp_rate": len(resp_rate)}
    if len(set(lengths.values())) > 1:
        raise MisalignedWindowError(lengths)
    return [
        AlignedSample(hrv=h.value, rhr=r.value, resp_rate=q.value, timestamp=h.timestamp)
        for h, r, q in zip(hrv, rhr, resp_rate)
    ]
