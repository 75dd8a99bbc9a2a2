"""
Caller-side checks for prediction sequences.

The interpolators trust their input and degrade quietly on feed
irregularities.  These checks let the storage or sync layer spot them
before handing a sequence over; nothing is raised or corrected here.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .events import CurrentPrediction

logger = logging.getLogger(__name__)


def find_sequence_issues(
    predictions: Sequence,
    logger: logging.Logger | None = None,
) -> list[str]:
    """
    List ordering and alternation irregularities in *predictions*.

    Parameters
    ----------
    predictions : sequence
        Tide or current predictions in the order they will be handed to
        the interpolators.
    logger : logging.Logger, optional
        Logger instance; each issue is logged at WARNING.

    Returns
    -------
    list of str
        Human-readable issue descriptions, empty for a clean sequence.
        Reports timestamps that go backwards, duplicate timestamps, and,
        for current predictions, consecutive flood/ebb peaks of the same
        kind with no slack between them.
    """
    _log = logger or logging.getLogger(__name__)
    issues: list[str] = []

    for i in range(1, len(predictions)):
        prev, cur = predictions[i - 1], predictions[i]
        if cur.epoch_seconds < prev.epoch_seconds:
            issues.append(
                f"prediction {i} at {cur.epoch_seconds} precedes "
                f"prediction {i - 1} at {prev.epoch_seconds}"
            )
        elif cur.epoch_seconds == prev.epoch_seconds:
            issues.append(
                f"predictions {i - 1} and {i} share timestamp "
                f"{cur.epoch_seconds}"
            )

    last_peak = None
    for i, p in enumerate(predictions):
        if not isinstance(p, CurrentPrediction):
            continue
        if p.is_slack:
            last_peak = None
            continue
        if last_peak is not None and last_peak.kind is p.kind:
            issues.append(
                f"consecutive {p.kind.value} peaks without slack at "
                f"{last_peak.epoch_seconds} and {p.epoch_seconds}"
            )
        last_peak = p

    for issue in issues:
        _log.warning('Prediction sequence issue: %s.', issue)
    return issues
