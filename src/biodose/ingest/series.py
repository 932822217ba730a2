# src/biodose/ingest/series.py
"""Loaders for biometric series files.

Supports:
A) CSV with header, one file per signal:
   timestamp,value[,quality]

B) JSON bundle holding all three signals:
   {"hrv": [...], "rhr": [...], "respRate": [...]}
   where each entry is {"value": .., "timestamp": .., "quality": ..}
"""

from __future__ import annotations

from typing import Any, Iterator, List, Union
import csv
import json
import pathlib

from ..errors import SeriesFormatError
from ..types import Sample, SeriesBundle
from .timestamps import parse_timestamp

_BUNDLE_KEYS = {
    "hrv": ("hrv",),
    "rhr": ("rhr",),
    "resp_rate": ("respRate", "resp_rate", "respiratory_rate"),
}


def _clean_fieldnames(fieldnames: List[str]) -> List[str]:
    return [fn.strip().lstrip("\ufeff").lower() for fn in fieldnames]


def _sample_from_entry(entry: Any) -> Sample:
    if not isinstance(entry, dict):
        raise ValueError(f"expected an object, got {type(entry).__name__}")
    if "value" not in entry or "timestamp" not in entry:
        raise ValueError("sample must define 'value' and 'timestamp'")
    value = entry["value"]
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"sample value must be a number, got {type(value).__name__}")
    if not isinstance(entry["timestamp"], str):
        raise ValueError(f"sample timestamp must be a string, got {type(entry['timestamp']).__name__}")
    sample = Sample.from_mapping(entry)
    parse_timestamp(sample.timestamp)
    return sample


def read_series(path: Union[str, pathlib.Path]) -> Iterator[Sample]:
    """Yield :class:`Sample` rows from a headered CSV file."""

    p = pathlib.Path(path)
    with open(p, "r", encoding="utf8", newline="") as fh:
        reader = csv.reader(fh)
        header: List[str] | None = None
        for lineno, row in enumerate(reader, start=1):
            if not row or not any(cell.strip() for cell in row):
                continue
            if row[0].lstrip().startswith("#"):
                continue
            if header is None:
                header = _clean_fieldnames(row)
                if "timestamp" not in header or "value" not in header:
                    raise SeriesFormatError(
                        "CSV header must include 'timestamp' and 'value' columns",
                        path=p,
                        line=lineno,
                    )
                continue
            fields = dict(zip(header, (cell.strip() for cell in row)))
            try:
                yield _sample_from_entry(fields)
            except ValueError as exc:
                raise SeriesFormatError(str(exc), path=p, line=lineno) from exc
        if header is None:
            raise SeriesFormatError("empty CSV file", path=p, line=0)


def load_bundle(path: Union[str, pathlib.Path]) -> SeriesBundle:
    """Load the three series from a JSON bundle file."""

    p = pathlib.Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf8"))
    except json.JSONDecodeError as exc:
        raise SeriesFormatError(exc.msg, path=p, line=exc.lineno) from exc
    if not isinstance(data, dict):
        raise SeriesFormatError("bundle must be a JSON object", path=p, line=1)

    series: dict[str, list[Sample]] = {}
    for field, aliases in _BUNDLE_KEYS.items():
        key = next((alias for alias in aliases if alias in data), None)
        if key is None:
            raise SeriesFormatError(f"bundle is missing the {aliases[0]!r} series", path=p, line=1)
        entries = data[key]
        if not isinstance(entries, list):
            raise SeriesFormatError(f"{key!r} must be a list of samples", path=p, line=1)
        samples = []
        for idx, entry in enumerate(entries):
            try:
                samples.append(_sample_from_entry(entry))
            except ValueError as exc:
                raise SeriesFormatError(f"{key}[{idx}]: {exc}", path=p, line=1) from exc
        series[field] = samples
    return SeriesBundle(hrv=series["hrv"], rhr=series["rhr"], resp_rate=series["resp_rate"])
