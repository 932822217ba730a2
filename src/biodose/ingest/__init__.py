"""Utility modules for ingesting biometric series."""

from .timestamps import parse_timestamp, TIMESTAMP_RE
from .series import read_series, load_bundle

__all__ = [
    "parse_timestamp",
    "TIMESTAMP_RE",
    "read_series",
    "load_bundle",
]
