from __future__ import annotations

"""Per-hour deviation and dose table for the most recent samples."""

import logging
from typing import List, Sequence

from ..config import Settings
from ..dose import DoseModel, get_dose_model
from ..types import CurrentValues, ProcessedRecord, Sample
from .baseline import baseline_means, historical_values
from .timing import clock_of, remaining_hours, target_hour
from .window import align_windows, recent_window

logger = logging.getLogger(__name__)


def process_biometric_data(
    hrv: Sequence[Sample],
    rhr: Sequence[Sample],
    resp_rate: Sequence[Sample],
    base_dose: float,
    target_time: str,
    *,
    dose_model: DoseModel | None = None,
    settings: Settings | None = None,
) -> List[ProcessedRecord]:
    """Build one :class:`ProcessedRecord` per sample of the recent window.

    Baselines are the means of the full ``hrv``, ``rhr`` and ``resp_rate``
    series; deviations are ``baseline - current`` for the last
    ``settings.window.size`` samples.  Each sample's dose is delegated to
    ``dose_model`` together with the remaining hours until ``target_time``.

    Parameters
    ----------
    hrv, rhr, resp_rate:
        Chronological series, most recent last.  After windowing the three
        must have equal length.
    base_dose:
        Baseline dose forwarded to the dose model.
    target_time:
        Target administration time; only its local hour and minute are used.
    dose_model:
        Strategy computing the dose.  Defaults to the model named by
        ``settings.dose.model``.
    settings:
        Optional :class:`~biodose.config.Settings` instance.

    Returns
    -------
    list of ProcessedRecord
        Oldest-in-window first.  ``hour`` counts down to 0 on the most recent
        sample, so a full window runs from 23 to 0.

    Raises
    ------
    EmptySeriesError
        If any full series is empty.
    MisalignedWindowError
        If the windowed series differ in length.
    TimestampParseError
        If ``target_time`` or a sample timestamp cannot be parsed.
    """

    if settings is None:
        settings = Settings()
    if dose_model is None:
        dose_model = get_dose_model(settings.dose.model)
    tz = settings.timestamp.timezone

    logger.debug(
        "input lengths hrv=%d rhr=%d resp_rate=%d",
        len(hrv),
        len(rhr),
        len(resp_rate),
        extra={"event": "input_lengths"},
    )

    history = historical_values(hrv, rhr, resp_rate)
    means = baseline_means(history)

    size = settings.window.size
    recent_hrv = recent_window(hrv, size)
    recent_rhr = recent_window(rhr, size)
    recent_resp = recent_window(resp_rate, size)
    logger.debug(
        "window lengths hrv=%d rhr=%d resp_rate=%d",
        len(recent_hrv),
        len(recent_rhr),
        len(recent_resp),
        extra={"event": "window_lengths"},
    )
    window = align_windows(recent_hrv, recent_rhr, recent_resp)

    target = clock_of(target_time, tz)
    T = target_hour(target)
    last = len(window) - 1

    records: List[ProcessedRecord] = []
    for i, point in enumerate(window):
        R = remaining_hours(target, clock_of(point.timestamp, tz))
        current = CurrentValues(hrv=point.hrv, rhr=point.rhr, resp_rate=point.resp_rate)
        dose = dose_model.calculate(base_dose, R, T, history, current)
        record = ProcessedRecord(
            hour=last - i,
            timestamp=point.timestamp,
            hrv_diff=means.hrv - point.hrv,
            rhr_diff=means.rhr - point.rhr,
            resp_rate_diff=means.resp_rate - point.resp_rate,
            current_hrv=point.hrv,
            current_rhr=point.rhr,
            current_resp_rate=point.resp_rate,
            calculated_dose=float(dose),
        )
        logger.debug(
            "record hour=%d R=%.3f T=%.3f dose=%.4f",
            record.hour,
            R,
            T,
            record.calculated_dose,
            extra={"event": "record"},
        )
        records.append(record)

    logger.debug("processed %d records", len(records), extra={"event": "processed"})
    return records
