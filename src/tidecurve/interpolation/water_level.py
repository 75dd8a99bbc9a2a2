"""
Water level interpolation between high and low water predictions.

Consecutive high/low events are joined by a raised cosine (half a sine
wave)::

    level = h1 + (h2 - h1) * (1 - cos(pi * phase)) / 2

which passes exactly through both anchors with zero slope at each, a
reasonable stand-in for harmonic tidal motion between extrema.  The same
formula is applied whatever the kinds of the two events are.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from .events import TidePrediction
from .segments import locate_segment, segment_phase

logger = logging.getLogger(__name__)


def raised_cosine(v1: float, v2: float, phase: float) -> float:
    """Half-cosine ease from *v1* (phase 0) to *v2* (phase 1)."""
    return v1 + (v2 - v1) * (1.0 - math.cos(math.pi * phase)) / 2.0


def raised_cosine_derivative(
    v1: float, v2: float, dt: float, phase: float,
) -> float:
    """Time derivative (value per second) of :func:`raised_cosine`."""
    return (v2 - v1) * math.pi * math.sin(math.pi * phase) / (2.0 * dt)


def evaluate_water_level(
    predictions: Sequence[TidePrediction], now_epoch_seconds: int,
) -> tuple[int, float] | None:
    """
    Segment index and raised-cosine level at *now_epoch_seconds*.

    Returns ``None`` where :func:`~.segments.locate_segment` finds no
    bracketing pair.
    """
    i = locate_segment(predictions, now_epoch_seconds)
    if i is None:
        return None

    prev, nxt = predictions[i], predictions[i + 1]
    phase = segment_phase(
        prev.epoch_seconds, nxt.epoch_seconds, now_epoch_seconds,
    )
    return i, raised_cosine(prev.value, nxt.value, phase)


def interpolate_water_level(
    predictions: Sequence[TidePrediction],
    now_epoch_seconds: int,
    logger: logging.Logger | None = None,
) -> float | None:
    """
    Interpolate the water level at *now_epoch_seconds*.

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
    float or None
        Water level in metres, or ``None`` if there are fewer than two
        predictions or the query lies outside ``[first, last)``.
    """
    _log = logger or logging.getLogger(__name__)

    result = evaluate_water_level(predictions, now_epoch_seconds)
    if result is None:
        _log.debug(
            'No tide segment brackets t=%d (%d predictions).',
            now_epoch_seconds, len(predictions) if predictions else 0,
        )
        return None
    return result[1]
