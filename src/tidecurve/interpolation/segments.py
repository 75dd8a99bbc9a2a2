"""
Segment location within a sorted prediction sequence.

The curves are defined only strictly inside the observed range
``[first.epoch_seconds, last.epoch_seconds)``; nothing here extrapolates.
All functions are pure forward scans, which is plenty for prediction
windows of a few days (tens of events).
"""
from __future__ import annotations

from typing import Callable, Sequence


def locate_segment(events: Sequence, t: int) -> int | None:
    """
    Find the segment bracketing *t*.

    Parameters
    ----------
    events : sequence
        Events with an ``epoch_seconds`` attribute, sorted ascending.
    t : int
        Query time as UTC epoch seconds.

    Returns
    -------
    int or None
        Index ``i`` such that
        ``events[i].epoch_seconds <= t < events[i + 1].epoch_seconds``.
        ``None`` if there are fewer than two events, or *t* lies before
        the first event or at/after the last one.  Zero-duration pairs
        (duplicate timestamps) never match, so the scan moves past them.
    """
    if events is None or len(events) < 2:
        return None
    if t < events[0].epoch_seconds or t >= events[-1].epoch_seconds:
        return None

    for i in range(len(events) - 1):
        t1 = events[i].epoch_seconds
        t2 = events[i + 1].epoch_seconds
        if t2 == t1:
            continue
        if t1 <= t < t2:
            return i
    return None


def segment_phase(t1: int, t2: int, t: int) -> float:
    """Normalized position of *t* within ``[t1, t2)``."""
    return (t - t1) / (t2 - t1)


def next_event_index(
    events: Sequence,
    t: int,
    predicate: Callable | None = None,
) -> int | None:
    """Index of the first event strictly after *t* matching *predicate*."""
    for i, event in enumerate(events):
        if event.epoch_seconds > t and (predicate is None or predicate(event)):
            return i
    return None


def previous_event_index(
    events: Sequence,
    t: int,
    predicate: Callable | None = None,
) -> int | None:
    """Index of the last event at or before *t* matching *predicate*."""
    found = None
    for i, event in enumerate(events):
        if event.epoch_seconds > t:
            break
        if predicate is None or predicate(event):
            found = i
    return found
