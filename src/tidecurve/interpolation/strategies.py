"""
Alternative curve designs for current velocity.

Three designs produce a smooth curve through flood/ebb/slack anchors:

``hermite``
    Cubic Hermite with Catmull-Rom style slack tangents (see
    :mod:`.current_velocity`).  The only design that is C1 continuous
    over the whole sequence, and the default.
``sine_anchors``
    Slack events are dropped and a raised cosine joins consecutive
    flood/ebb peaks.  The curve crosses zero wherever it likes between
    alternating peaks, ignoring the published slack times.
``quarter_wave``
    Slack to peak rises along a quarter sine, peak to slack falls along a
    quarter cosine, anything else uses the raised cosine.  Honours slack
    times exactly but kinks at slack when the neighbouring peaks differ.

Each evaluator returns ``(value, rate)`` with *rate* in value per second,
or ``None`` where the curve is undefined.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

from .events import CurrentPrediction
from .segments import locate_segment, segment_phase
from .water_level import raised_cosine, raised_cosine_derivative


class CurveMethod(str, Enum):
    """Selectable current velocity curve design."""

    HERMITE = 'hermite'
    SINE_ANCHORS = 'sine_anchors'
    QUARTER_WAVE = 'quarter_wave'

    @classmethod
    def coerce(cls, value: CurveMethod | str) -> CurveMethod:
        """
        Return the member for *value* (a member or its string value).

        Raises
        ------
        ValueError
            If *value* does not name a curve method.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"method must be one of {[m.value for m in cls]}, "
                f"got '{value}'."
            ) from None


def evaluate_sine_anchors(
    predictions: Sequence[CurrentPrediction], t: int,
) -> tuple[float, float] | None:
    """Raised cosine between consecutive flood/ebb peaks, slack ignored."""
    anchors = [p for p in predictions if p.is_peak]
    i = locate_segment(anchors, t)
    if i is None:
        return None

    a, b = anchors[i], anchors[i + 1]
    dt = b.epoch_seconds - a.epoch_seconds
    phase = segment_phase(a.epoch_seconds, b.epoch_seconds, t)
    return (
        raised_cosine(a.value, b.value, phase),
        raised_cosine_derivative(a.value, b.value, dt, phase),
    )


def evaluate_quarter_wave(
    predictions: Sequence[CurrentPrediction], t: int,
) -> tuple[float, float] | None:
    """Quarter sine/cosine between slack and peak, raised cosine otherwise."""
    i = locate_segment(predictions, t)
    if i is None:
        return None

    a, b = predictions[i], predictions[i + 1]
    dt = b.epoch_seconds - a.epoch_seconds
    phase = segment_phase(a.epoch_seconds, b.epoch_seconds, t)
    angle = 0.5 * math.pi * phase

    if a.is_slack and b.is_peak:
        delta = b.value - a.value
        return (
            a.value + delta * math.sin(angle),
            delta * 0.5 * math.pi * math.cos(angle) / dt,
        )
    if a.is_peak and b.is_slack:
        delta = a.value - b.value
        return (
            b.value + delta * math.cos(angle),
            -delta * 0.5 * math.pi * math.sin(angle) / dt,
        )
    return (
        raised_cosine(a.value, b.value, phase),
        raised_cosine_derivative(a.value, b.value, dt, phase),
    )
