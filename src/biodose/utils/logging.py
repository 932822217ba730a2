"""Logging helpers for diagnostic events.

Modules log through ``logging.getLogger(__name__)`` and tag structured
diagnostics with ``extra={"event": <name>}``.  :func:`get_logger` configures a
stream handler whose format can show that event name; records logged without
one render it as ``-``.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(event)s:%(message)s"
NO_EVENT = "-"


class EventFilter(logging.Filter):
    """Give every record an ``event`` attribute so formats may reference it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "event"):
            record.event = NO_EVENT
        return True


def event_name(record: logging.LogRecord) -> str:
    """Return the diagnostic event carried by *record*, or ``-``."""

    return getattr(record, "event", NO_EVENT)


def get_logger(name: str = "biodose", level: int | str = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Return a configured :class:`logging.Logger` instance.

    A new ``StreamHandler`` is added only once per-logger to avoid
    duplicate log lines when calling this function multiple times.  Later
    calls update the level and format of that handler.  ``level`` may be a
    number or a level name such as ``"DEBUG"``.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        if not any(isinstance(f, EventFilter) for f in handler.filters):
            handler.addFilter(EventFilter())
        handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(level)
    return logger
