"""
Per-node tangent estimation for the current velocity Hermite curve.

Slopes are in cm/s per second.  Flood and ebb peaks are flat, matching the
turn of the current at maximum strength.  Slack nodes take a Catmull-Rom
style central difference computed over the neighbouring *peaks* rather
than the immediate neighbours, so a short slack-to-slack gap cannot
dominate the tangent.

Fallback order for a node:

1. flood/ebb peak: 0
2. first or last node (not a peak): one-sided difference to the
   adjacent node
3. slack with peaks on both sides: chord between those peaks
4. slack with a peak on one side only: one-sided difference to it
5. slack with no peak on either side: central difference of the
   adjacent nodes

Any difference over zero elapsed time yields 0 rather than raising.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .events import CurrentPrediction

logger = logging.getLogger(__name__)


def _difference(a: CurrentPrediction, b: CurrentPrediction) -> float:
    """Finite difference from *a* to *b*; 0 when no time elapses."""
    dt = b.epoch_seconds - a.epoch_seconds
    if dt == 0:
        return 0.0
    return (b.value - a.value) / dt


def _nearest_peak(
    predictions: Sequence[CurrentPrediction], start: int, step: int,
) -> CurrentPrediction | None:
    i = start + step
    while 0 <= i < len(predictions):
        if predictions[i].is_peak:
            return predictions[i]
        i += step
    return None


def node_slope(predictions: Sequence[CurrentPrediction], i: int) -> float:
    """Tangent at node *i* of *predictions* (cm/s per second)."""
    node = predictions[i]
    if node.is_peak:
        return 0.0

    last = len(predictions) - 1
    if i == 0:
        return _difference(node, predictions[1]) if last > 0 else 0.0
    if i == last:
        return _difference(predictions[i - 1], node)

    prev_peak = _nearest_peak(predictions, i, -1)
    next_peak = _nearest_peak(predictions, i, 1)

    if prev_peak is not None and next_peak is not None:
        return _difference(prev_peak, next_peak)
    if next_peak is not None:
        return _difference(node, next_peak)
    if prev_peak is not None:
        return _difference(prev_peak, node)
    return _difference(predictions[i - 1], predictions[i + 1])


def estimate_slopes(
    predictions: Sequence[CurrentPrediction],
    logger: logging.Logger | None = None,
) -> list[float]:
    """
    Assign a tangent to every node of a current prediction sequence.

    Parameters
    ----------
    predictions : sequence of CurrentPrediction
        Flood/ebb/slack predictions sorted by ``epoch_seconds`` ascending.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of float
        One slope per prediction, in cm/s per second.
    """
    _log = logger or logging.getLogger(__name__)

    slopes = [node_slope(predictions, i) for i in range(len(predictions))]
    _log.debug('Estimated %d node slopes.', len(slopes))
    return slopes
