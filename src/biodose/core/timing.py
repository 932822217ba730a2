"""Clock arithmetic between sample timestamps and the target time.

The remaining-time figure is deliberately left unnormalised: the hour part
wraps to the next day when negative, but the minute fraction is added
afterwards without wrapping.  For example a sample at ``22:50`` with a
target of ``22:10`` yields ``-0.666...`` hours, and a sample at ``22:10``
with a target of ``21:50`` yields ``23.666...`` hours.  Dose models receive
these values as is.
"""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple, Optional
from zoneinfo import ZoneInfo

from ..ingest.timestamps import parse_timestamp


class ClockTime(NamedTuple):
    """Local hour and minute of a timestamp."""

    hour: int
    minute: int


def local_clock(moment: datetime, timezone: Optional[str] = None) -> ClockTime:
    """Return the local ``(hour, minute)`` of *moment*.

    Aware datetimes are converted into *timezone* (the host's local zone
    when ``None``).  Naive datetimes are already wall-clock time.
    """

    if moment.tzinfo is not None:
        moment = moment.astimezone(ZoneInfo(timezone) if timezone else None)
    return ClockTime(moment.hour, moment.minute)


def clock_of(token: str, timezone: Optional[str] = None) -> ClockTime:
    """Parse *token* and return its local clock reading."""

    return local_clock(parse_timestamp(token), timezone)


def remaining_hours(target: ClockTime, current: ClockTime) -> float:
    """Fractional hours from *current* until *target*.

    ``R = target.hour - current.hour``, plus 24 when negative, plus
    ``(target.minute - current.minute) / 60``.
    """

    hours = target.hour - current.hour
    if hours < 0:
        hours += 24
    return hours + (target.minute - current.minute) / 60


def target_hour(target: ClockTime) -> float:
    """Target time of day as a fractional hour."""

    return target.hour + target.minute / 60
