import pytest

from biodose.core import recent_window, align_windows, DEFAULT_WINDOW
from biodose.errors import MisalignedWindowError
from biodose.types import AlignedSample, Sample


def _series(n, start=0.0):
    return [Sample(start + i, f"2024-05-01T{i % 24:02d}:00:00") for i in range(n)]


def test_recent_window_takes_last_elements():
    data = list(range(30))
    assert list(recent_window(data)) == list(range(6, 30))
    assert len(recent_window(data)) == DEFAULT_WINDOW


def test_recent_window_short_input_not_padded():
    data = [1, 2, 3]
    assert list(recent_window(data, 24)) == [1, 2, 3]


def test_recent_window_rejects_bad_size():
    with pytest.raises(ValueError):
        recent_window([1, 2], 0)


def test_align_windows_zips_values():
    rows = align_windows(_series(2), _series(2, 60.0), _series(2, 14.0))
    assert rows == [
        AlignedSample(0.0, 60.0, 14.0, "2024-05-01T00:00:00"),
        AlignedSample(1.0, 61.0, 15.0, "2024-05-01T01:00:00"),
    ]


def test_align_windows_length_mismatch():
    with pytest.raises(MisalignedWindowError) as excinfo:
        align_windows(_series(24), _series(20), _series(24))
    err = excinfo.value
    assert isinstance(err, IndexError)
    assert err.index == 20
    assert err.lengths == {"hrv": 24, "rhr": 20, "resp_rate": 24}
    assert "rhr" in str(err)
