from __future__ import annotations

"""Utilities for converting processed records into tables and files."""

from pathlib import Path
from typing import Sequence
import csv
import json

import numpy as np

from ..types import ProcessedRecord

RECORD_COLUMNS = (
    "hour",
    "hrvDiff",
    "rhrDiff",
    "respRateDiff",
    "currentHRV",
    "currentRHR",
    "currentRespRate",
    "calculatedDose",
)


def records_to_numpy(records: Sequence[ProcessedRecord]) -> np.ndarray:
    """Return an ``(n_records, len(RECORD_COLUMNS))`` float array.

    Timestamps are not numeric and are left out; see :func:`export_records`
    for a lossless form.
    """

    rows = [[row[col] for col in RECORD_COLUMNS] for row in (r.to_dict() for r in records)]
    return np.asarray(rows, dtype=float).reshape(len(rows), len(RECORD_COLUMNS))


def export_records(records: Sequence[ProcessedRecord], path: str | Path) -> Path:
    """Write *records* to ``path``.

    The format follows the suffix: ``.json`` writes a list of objects keyed
    by the camelCase record names, ``.csv`` a headered table and ``.npz`` an
    archive with ``table``, ``columns`` and ``timestamps`` entries.
    """

    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".json":
        with open(p, "w", encoding="utf8") as fh:
            json.dump([r.to_dict() for r in records], fh, indent=2)
    elif suffix == ".csv":
        fields = ["hour", "timestamp", *RECORD_COLUMNS[1:]]
        with open(p, "w", encoding="utf8", newline="") as fh:
            writer = csv.DictWriter(fh, fieldnames=fields)
            writer.writeheader()
            for r in records:
                writer.writerow(r.to_dict())
    elif suffix == ".npz":
        np.savez(
            p,
            table=records_to_numpy(records),
            columns=np.asarray(RECORD_COLUMNS),
            timestamps=np.asarray([r.timestamp for r in records], dtype=str),
        )
    else:
        raise ValueError(f"unsupported export format: {p.suffix or p.name}")
    return p
