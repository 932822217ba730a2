# src/biodose/ingest/timestamps.py
"""Timestamp parsing for biometric samples.

Accepted grammar:

* ISO-8601 ``YYYY-MM-DDTHH:MM[:SS[.ffffff]]`` with an optional ``Z`` or
  ``+HH:MM`` offset (a space may replace the ``T``)
* floating-point seconds since the Unix epoch

Naive values are returned naive and are read as local wall-clock time by
:mod:`biodose.core.timing`.
"""

from __future__ import annotations

from datetime import datetime, timezone
import re

from ..errors import TimestampParseError

TIMESTAMP_RE = re.compile(
    r"""^\s*(?:
            (?P<iso>\d{4}-\d{2}-\d{2}[T\s]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)
          | (?P<float>\d+(?:\.\d+)?)
        )\s*$""",
    re.VERBOSE,
)


def parse_timestamp(token: str) -> datetime:
    """Parse ``token`` into a :class:`datetime`.

    ``TimestampParseError`` is raised for anything outside the accepted
    grammar or for calendar-invalid values such as ``2024-02-30``.
    """

    if not isinstance(token, str):
        raise TimestampParseError(repr(token), "expected a string")
    m = TIMESTAMP_RE.match(token)
    if not m:
        raise TimestampParseError(token)

    try:
        if m.group("iso"):
            text = m.group("iso")
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text)
        return datetime.fromtimestamp(float(m.group("float")), tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as exc:
        raise TimestampParseError(token, str(exc)) from exc
