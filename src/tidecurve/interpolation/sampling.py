"""
Regular-grid sampling of an interpolated curve.

Chart layers draw the continuous curve from samples taken every
``interval_seconds`` (20 minutes by default) between the first and last
prediction.  Instants where the curve is undefined are left out rather
than filled.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_INTERVAL_SECONDS = 1200
"""Default spacing of curve samples (20 minutes)."""


def sample_curve(
    predictions: Sequence,
    interpolate: Callable[[Sequence, int], float | None],
    start: int | None = None,
    end: int | None = None,
    interval_seconds: int = DEFAULT_SAMPLE_INTERVAL_SECONDS,
    logger: logging.Logger | None = None,
) -> pd.DataFrame:
    """
    Evaluate *interpolate* on a regular epoch-seconds grid.

    Parameters
    ----------
    predictions : sequence
        Sorted predictions handed unchanged to *interpolate*.
    interpolate : callable
        ``interpolate(predictions, epoch_seconds) -> float | None``, e.g.
        :func:`~.water_level.interpolate_water_level`.
    start : int, optional
        First grid instant (UTC epoch seconds).  Defaults to the first
        prediction time.
    end : int, optional
        Last grid instant, inclusive.  Defaults to the last prediction
        time.
    interval_seconds : int, optional
        Grid spacing in seconds (default 1200).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    pd.DataFrame
        Columns ``epoch_seconds`` (int64), ``time`` (UTC timestamps) and
        ``value`` (float), one row per grid instant where the curve is
        defined.  Empty when nothing is defined.

    Raises
    ------
    ValueError
        If *interval_seconds* is not positive or *end* precedes *start*.
    """
    _log = logger or logging.getLogger(__name__)

    if interval_seconds <= 0:
        raise ValueError(
            f"interval_seconds must be positive, got {interval_seconds}."
        )

    if predictions is None or len(predictions) == 0:
        _log.info('No predictions to sample.')
        return _frame(np.array([], dtype=np.int64), np.array([], dtype=float))

    if start is None:
        start = predictions[0].epoch_seconds
    if end is None:
        end = predictions[-1].epoch_seconds
    if end < start:
        raise ValueError(f"end ({end}) must not precede start ({start}).")

    grid = np.arange(start, end + 1, interval_seconds, dtype=np.int64)
    times = []
    values = []
    for t in grid:
        value = interpolate(predictions, int(t))
        if value is not None:
            times.append(t)
            values.append(value)

    _log.info(
        'Sampled curve: %d of %d grid points defined (interval=%d s).',
        len(values), len(grid), interval_seconds,
    )
    return _frame(
        np.asarray(times, dtype=np.int64), np.asarray(values, dtype=float),
    )


def _frame(epoch_seconds: np.ndarray, values: np.ndarray) -> pd.DataFrame:
    return pd.DataFrame({
        'epoch_seconds': epoch_seconds,
        'time': pd.to_datetime(epoch_seconds, unit='s', utc=True),
        'value': values,
    })
