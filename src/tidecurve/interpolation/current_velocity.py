"""
Current velocity interpolation between flood, ebb, and slack predictions.

The canonical curve is a cubic Hermite spline through every event, slack
included, using the tangents from :mod:`.slopes`::

    h00 = 2t^3 - 3t^2 + 1      h10 = t^3 - 2t^2 + t
    h01 = -2t^3 + 3t^2         h11 = t^3 - t^2

    v(t) = h00*v1 + h10*dt*m1 + h01*v2 + h11*dt*m2

where ``dt`` is the segment duration in seconds and ``m1``/``m2`` are the
endpoint slopes in cm/s per second.  Segments are evaluated with
:class:`scipy.interpolate.CubicHermiteSpline`.  Shared nodes carry one
slope, so the curve is C1 continuous; peaks are flat and slack crossings
keep a non-zero slope so the reversal looks natural rather than notched.

The alternative designs in :mod:`.strategies` are reachable through the
same entry points via ``method``.
"""
from __future__ import annotations

import logging
from typing import Sequence

from scipy.interpolate import CubicHermiteSpline

from .events import CurrentPrediction
from .segments import locate_segment
from .slopes import node_slope
from .strategies import (
    CurveMethod,
    evaluate_quarter_wave,
    evaluate_sine_anchors,
)

logger = logging.getLogger(__name__)


def _unit_spline(
    v1: float, v2: float, m1: float, m2: float, dt: float,
) -> CubicHermiteSpline:
    return CubicHermiteSpline([0.0, dt], [v1, v2], [m1, m2])


def hermite(
    v1: float, v2: float, m1: float, m2: float, dt: float, phase: float,
) -> float:
    """Evaluate the cubic Hermite segment at *phase* in ``[0, 1]``."""
    return float(_unit_spline(v1, v2, m1, m2, dt)(phase * dt))


def hermite_derivative(
    v1: float, v2: float, m1: float, m2: float, dt: float, phase: float,
) -> float:
    """Time derivative (value per second) of :func:`hermite`."""
    return float(_unit_spline(v1, v2, m1, m2, dt)(phase * dt, 1))


def evaluate_hermite(
    predictions: Sequence[CurrentPrediction], t: int,
) -> tuple[float, float] | None:
    """Hermite value and rate at *t*, or ``None`` outside the data."""
    i = locate_segment(predictions, t)
    if i is None:
        return None

    a, b = predictions[i], predictions[i + 1]
    spline = CubicHermiteSpline(
        [a.epoch_seconds, b.epoch_seconds],
        [a.value, b.value],
        [node_slope(predictions, i), node_slope(predictions, i + 1)],
    )
    return float(spline(t)), float(spline(t, 1))


_EVALUATORS = {
    CurveMethod.HERMITE: evaluate_hermite,
    CurveMethod.SINE_ANCHORS: evaluate_sine_anchors,
    CurveMethod.QUARTER_WAVE: evaluate_quarter_wave,
}


def _evaluate(
    predictions: Sequence[CurrentPrediction],
    now_epoch_seconds: int,
    method: CurveMethod | str,
    _log: logging.Logger,
) -> tuple[float, float] | None:
    method = CurveMethod.coerce(method)
    if predictions is None or len(predictions) < 2:
        _log.debug('Fewer than two current predictions; no curve.')
        return None

    result = _EVALUATORS[method](predictions, now_epoch_seconds)
    if result is None:
        _log.debug(
            "No current segment brackets t=%d (method '%s', %d predictions).",
            now_epoch_seconds, method.value, len(predictions),
        )
    return result


def interpolate_current_velocity(
    predictions: Sequence[CurrentPrediction],
    now_epoch_seconds: int,
    method: CurveMethod | str = CurveMethod.HERMITE,
    logger: logging.Logger | None = None,
) -> float | None:
    """
    Interpolate the current velocity at *now_epoch_seconds*.

    Parameters
    ----------
    predictions : sequence of CurrentPrediction
        Flood/ebb/slack predictions sorted by ``epoch_seconds`` ascending.
    now_epoch_seconds : int
        Query time as UTC epoch seconds.
    method : CurveMethod or str, optional
        Curve design (default ``"hermite"``).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    float or None
        Velocity in cm/s (flood positive), or ``None`` if the curve is
        undefined at the query time.

    Raises
    ------
    ValueError
        If *method* is not a known curve design.
    """
    _log = logger or logging.getLogger(__name__)
    result = _evaluate(predictions, now_epoch_seconds, method, _log)
    return None if result is None else result[0]


def current_velocity_rate(
    predictions: Sequence[CurrentPrediction],
    now_epoch_seconds: int,
    method: CurveMethod | str = CurveMethod.HERMITE,
    logger: logging.Logger | None = None,
) -> float | None:
    """
    Rate of change of the current velocity, in cm/s per second.

    Same domain and arguments as :func:`interpolate_current_velocity`.
    """
    _log = logger or logging.getLogger(__name__)
    result = _evaluate(predictions, now_epoch_seconds, method, _log)
    return None if result is None else result[1]
