"""biodose: hourly biometric deviations and dose recommendations."""

from .core import mean, process_biometric_data
from .dose import DoseModel, FunctionDoseModel, get_dose_model, register_dose_model
from .errors import (
    BiodoseError,
    EmptySeriesError,
    MisalignedWindowError,
    TimestampParseError,
)
from .types import ProcessedRecord, Sample

__all__ = [
    "mean",
    "process_biometric_data",
    "DoseModel",
    "FunctionDoseModel",
    "get_dose_model",
    "register_dose_model",
    "BiodoseError",
    "EmptySeriesError",
    "MisalignedWindowError",
    "TimestampParseError",
    "ProcessedRecord",
    "Sample",
]
