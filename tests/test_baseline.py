import numpy as np
import pytest

from biodose.core import mean, series_values, historical_values, baseline_means
from biodose.errors import EmptySeriesError, BiodoseError
from biodose.types import Sample


def _series(values):
    return [Sample(v, f"2024-05-01T{i:02d}:00:00", "good") for i, v in enumerate(values)]


@pytest.mark.parametrize(
    "values",
    [[1.0, 2.0, 3.0, 4.0], [50.0, 55.0, 60.0], [-2.5, 7.25], [0.1] * 10],
)
def test_mean_is_sum_over_count(values):
    assert mean(values) == pytest.approx(sum(values) / len(values))


def test_mean_single_element():
    assert mean([42.5]) == 42.5


def test_mean_empty_raises():
    with pytest.raises(EmptySeriesError) as excinfo:
        mean([], name="hrv series")
    assert excinfo.value.series == "hrv series"
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, BiodoseError)


def test_series_values_read_only():
    arr = series_values(_series([1.0, 2.0]))
    np.testing.assert_array_equal(arr, [1.0, 2.0])
    with pytest.raises(ValueError):
        arr[0] = 3.0


def test_baseline_means_use_full_history():
    history = historical_values(
        _series([50.0, 55.0, 60.0]),
        _series([60.0, 62.0, 64.0]),
        _series([14.0, 15.0, 16.0]),
    )
    means = baseline_means(history)
    assert means.hrv == 55.0
    assert means.rhr == 62.0
    assert means.resp_rate == 15.0


def test_baseline_means_empty_rhr():
    history = historical_values(_series([1.0]), [], _series([1.0]))
    with pytest.raises(EmptySeriesError, match="rhr"):
        baseline_means(history)
