import io
import logging

import pytest

from biodose.types import ProcessedRecord, Sample
from biodose.utils.logging import DEFAULT_FORMAT, EventFilter, event_name, get_logger


def test_sample_from_mapping():
    s = Sample.from_mapping({"value": "50", "timestamp": "2024-05-01T08:00:00"})
    assert s == Sample(50.0, "2024-05-01T08:00:00", "unknown")
    with pytest.raises(KeyError):
        Sample.from_mapping({"value": 1.0})


def test_records_are_frozen():
    record = ProcessedRecord(0, "t", 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        record.hour = 5  # type: ignore[misc]


def test_logging():
    logger = get_logger("test")
    logger2 = get_logger("test")
    assert logger is logger2
    assert len(logger.handlers) == 1
    logger.debug("debug message")


def test_logging_level_name():
    logger = get_logger("test.level", level="DEBUG")
    assert logger.level == logging.DEBUG


def test_logging_renders_event_field():
    logger = get_logger("test.events", level="DEBUG")
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    logger.debug("window ready", extra={"event": "window_lengths"})
    logger.debug("plain message")
    assert stream.getvalue().splitlines() == [
        "DEBUG:test.events:window_lengths:window ready",
        "DEBUG:test.events:-:plain message",
    ]


def test_logging_reconfigures_format():
    logger = get_logger("test.format", fmt=DEFAULT_FORMAT)
    logger = get_logger("test.format", fmt="%(event)s|%(message)s")
    assert len(logger.handlers) == 1
    assert sum(isinstance(f, EventFilter) for f in logger.handlers[0].filters) == 1
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    logger.info("hello", extra={"event": "processed"})
    assert stream.getvalue() == "processed|hello\n"


def test_event_name_default():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert event_name(record) == "-"
    record.event = "record"
    assert event_name(record) == "record"
