"""
Progress and upcoming-event composition for gauge and countdown UI.

Turns an interpolated value into a :class:`~.events.Progress`:

Water level
    ``progress_fraction`` is the level's position between the bracketing
    extrema (0 = low, 1 = high); the upcoming event is the next high or
    low water.

Current velocity
    ``progress_fraction`` is a flood/ebb gauge (0 = max ebb,
    1 = max flood) computed as the *time* fraction between the previous
    and next peak, inverted when the next peak is an ebb so the bar
    drains toward ebb and fills toward flood.  Between two peaks of the
    same kind the gauge stays at that kind's end of the scale.  Slack is
    skipped when looking for peaks but not when picking the upcoming
    event, so a user approaching slack sees the slack, not the far-away
    peak.

Both return ``None`` when the curve is undefined at the query time or,
for currents, when no peak remains after it.  Callers should treat that
as "unknown", never as zero.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .current_velocity import interpolate_current_velocity
from .events import CurrentKind, CurrentPrediction, Progress, TidePrediction
from .segments import next_event_index, previous_event_index
from .strategies import CurveMethod
from .water_level import evaluate_water_level

logger = logging.getLogger(__name__)


def _clamp_fraction(value: float) -> float:
    return min(1.0, max(0.0, value))


def _is_peak(prediction: CurrentPrediction) -> bool:
    return prediction.is_peak


def water_level_progress(
    predictions: Sequence[TidePrediction],
    now_epoch_seconds: int,
    logger: logging.Logger | None = None,
) -> Progress | None:
    """
    Interpolate the water level and its position between high and low.

    Parameters
    ----------
    predictions : sequence of TidePrediction
        High/low predictions sorted by ``epoch_seconds`` ascending.
    now_epoch_seconds : int
        Query time as UTC epoch seconds.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    Progress or None
        Level in metres, fraction between the bracketing extrema (0.5
        when both have the same height) and the next high or low water;
        ``None`` outside ``[first, last)`` or with fewer than two
        predictions.
    """
    _log = logger or logging.getLogger(__name__)

    result = evaluate_water_level(predictions, now_epoch_seconds)
    if result is None:
        _log.debug('No tide progress at t=%d.', now_epoch_seconds)
        return None

    i, level = result
    prev, nxt = predictions[i], predictions[i + 1]

    low = min(prev.value, nxt.value)
    high = max(prev.value, nxt.value)
    if high > low:
        fraction = _clamp_fraction((level - low) / (high - low))
    else:
        fraction = 0.5

    return Progress(
        value=level,
        progress_fraction=fraction,
        upcoming_kind=nxt.kind,
        upcoming_value=nxt.value,
        upcoming_epoch_seconds=nxt.epoch_seconds,
    )


def _previous_peak(
    predictions: Sequence[CurrentPrediction],
    now_epoch_seconds: int,
    next_peak: CurrentPrediction,
) -> tuple[int, CurrentKind | None]:
    """
    Time and kind of the last peak at or before the query.

    Before the first peak of the window, a virtual peak is placed one
    half-cycle (next peak to the one after it) ahead of the next peak;
    with no such pair the first event's time stands in.  Virtual peaks
    have no kind.
    """
    i = previous_event_index(predictions, now_epoch_seconds, _is_peak)
    if i is not None:
        return predictions[i].epoch_seconds, predictions[i].kind

    j = next_event_index(predictions, next_peak.epoch_seconds, _is_peak)
    if j is not None:
        half_cycle = predictions[j].epoch_seconds - next_peak.epoch_seconds
        return next_peak.epoch_seconds - half_cycle, None
    return predictions[0].epoch_seconds, None


def current_velocity_progress(
    predictions: Sequence[CurrentPrediction],
    now_epoch_seconds: int,
    method: CurveMethod | str = CurveMethod.HERMITE,
    logger: logging.Logger | None = None,
) -> Progress | None:
    """
    Interpolate the current velocity and its flood/ebb gauge position.

    Parameters
    ----------
    predictions : sequence of CurrentPrediction
        Flood/ebb/slack predictions sorted by ``epoch_seconds`` ascending.
    now_epoch_seconds : int
        Query time as UTC epoch seconds.
    method : CurveMethod or str, optional
        Curve design used for the velocity (default ``"hermite"``).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    Progress or None
        Velocity in cm/s, gauge fraction (0 = max ebb, 1 = max flood),
        and the first event of any kind after the query time; ``None``
        if the velocity is undefined or no flood/ebb peak follows.

    Raises
    ------
    ValueError
        If *method* is not a known curve design.
    """
    _log = logger or logging.getLogger(__name__)

    velocity = interpolate_current_velocity(
        predictions, now_epoch_seconds, method=method, logger=_log,
    )
    if velocity is None:
        return None

    next_peak_idx = next_event_index(predictions, now_epoch_seconds, _is_peak)
    if next_peak_idx is None:
        _log.debug(
            'No flood/ebb peak after t=%d; current progress unknown.',
            now_epoch_seconds,
        )
        return None
    next_peak = predictions[next_peak_idx]
    upcoming = predictions[next_event_index(predictions, now_epoch_seconds)]

    prev_peak_time, prev_kind = _previous_peak(
        predictions, now_epoch_seconds, next_peak,
    )
    if prev_kind is next_peak.kind:
        # Same-kind peaks with no reversal between them hold the gauge.
        fraction = 1.0 if next_peak.kind is CurrentKind.FLOOD else 0.0
    else:
        span = next_peak.epoch_seconds - prev_peak_time
        if span > 0:
            fraction = _clamp_fraction(
                (now_epoch_seconds - prev_peak_time) / span,
            )
        else:
            fraction = 0.5
        if next_peak.kind is CurrentKind.EBB:
            fraction = 1.0 - fraction

    return Progress(
        value=velocity,
        progress_fraction=fraction,
        upcoming_kind=upcoming.kind,
        upcoming_value=upcoming.value,
        upcoming_epoch_seconds=upcoming.epoch_seconds,
    )
