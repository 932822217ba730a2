"""Core algorithms for biodose."""

from .baseline import mean, series_values, historical_values, baseline_means
from .window import DEFAULT_WINDOW, recent_window, align_windows
from .timing import ClockTime, local_clock, clock_of, remaining_hours, target_hour
from .processor import process_biometric_data

__all__ = [
    "mean",
    "series_values",
    "historical_values",
    "baseline_means",
    "DEFAULT_WINDOW",
    "recent_window",
    "align_windows",
    "ClockTime",
    "local_clock",
    "clock_of",
    "remaining_hours",
    "target_hour",
    "process_biometric_data",
]
