import csv
import json

import numpy as np
import pytest

from biodose.export import RECORD_COLUMNS, export_records, records_to_numpy
from biodose.types import ProcessedRecord


def _records():
    return [
        ProcessedRecord(1, "2024-05-01T08:00:00", 5.0, 2.0, 1.0, 50.0, 60.0, 14.0, 3.0),
        ProcessedRecord(0, "2024-05-01T09:00:00", -5.0, -2.0, -1.0, 60.0, 64.0, 16.0, 2.5),
    ]


def test_records_to_numpy():
    table = records_to_numpy(_records())
    assert table.shape == (2, len(RECORD_COLUMNS))
    np.testing.assert_allclose(table[0], [1, 5.0, 2.0, 1.0, 50.0, 60.0, 14.0, 3.0])


def test_records_to_numpy_empty():
    assert records_to_numpy([]).shape == (0, len(RECORD_COLUMNS))


def test_export_json(tmp_path):
    path = export_records(_records(), tmp_path / "out.json")
    data = json.loads(path.read_text())
    assert data[1]["calculatedDose"] == 2.5
    assert data[0]["timestamp"] == "2024-05-01T08:00:00"


def test_export_csv(tmp_path):
    path = export_records(_records(), tmp_path / "out.csv")
    with open(path, newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert rows[0]["hour"] == "1"
    assert float(rows[1]["respRateDiff"]) == -1.0


def test_export_npz(tmp_path):
    path = export_records(_records(), tmp_path / "out.npz")
    with np.load(path) as data:
        assert data["table"].shape == (2, 8)
        assert list(data["columns"]) == list(RECORD_COLUMNS)
        assert data["timestamps"][1] == "2024-05-01T09:00:00"


def test_export_unknown_format(tmp_path):
    with pytest.raises(ValueError):
        export_records(_records(), tmp_path / "out.xlsx")
