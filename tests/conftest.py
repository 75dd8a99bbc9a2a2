"""
Pytest fixtures shared across the interpolation tests.

Provides the synthetic six-hour tide/current windows used throughout,
plus prediction windows taken from real CO-OPS responses.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tidecurve.interpolation.events import (
    CurrentKind,
    CurrentPrediction,
    TideKind,
    TidePrediction,
)

HOUR = 3600
T0 = 1767571200  # 2026-01-05 00:00 UTC


def epoch(timestamp: str) -> int:
    """Convert a CO-OPS ``YYYY-MM-DD HH:mm`` GMT timestamp to epoch seconds."""
    dt = datetime.strptime(timestamp, '%Y-%m-%d %H:%M')
    return int(dt.replace(tzinfo=timezone.utc).timestamp())


@pytest.fixture
def tide_pair() -> list[TidePrediction]:
    """Low water then high water six hours later."""
    return [
        TidePrediction(T0, 0.8, TideKind.LOW),
        TidePrediction(T0 + 6 * HOUR, 2.3, TideKind.HIGH),
    ]


@pytest.fixture
def current_cycle() -> list[CurrentPrediction]:
    """Slack, max flood, slack, max ebb at three-hour spacing."""
    return [
        CurrentPrediction(T0, 0.0, CurrentKind.SLACK),
        CurrentPrediction(T0 + 3 * HOUR, 160.7, CurrentKind.FLOOD),
        CurrentPrediction(T0 + 6 * HOUR, 0.0, CurrentKind.SLACK),
        CurrentPrediction(T0 + 9 * HOUR, -169.3, CurrentKind.EBB),
    ]


@pytest.fixture
def noaa_tides() -> list[TidePrediction]:
    """
    Semidiurnal high/low window for The Battery, NY (8518750), 2026-01-02.

    Heights are metres above MLLW (``units=metric``, ``interval=hilo``).
    """
    rows = [
        ('2026-01-02 00:41', 1.512, 'H'),
        ('2026-01-02 06:58', 0.071, 'L'),
        ('2026-01-02 13:09', 1.386, 'H'),
        ('2026-01-02 19:17', -0.102, 'L'),
    ]
    return [
        TidePrediction(epoch(t), v, TideKind.from_code(k)) for t, v, k in rows
    ]


@pytest.fixture
def noaa_currents() -> list[CurrentPrediction]:
    """Current predictions for station ACT0091 on 2026-01-05."""
    rows = [
        ('2026-01-05 02:47', 160.7, 'flood'),
        ('2026-01-05 05:23', 0.0, 'slack'),
        ('2026-01-05 08:55', -169.3, 'ebb'),
        ('2026-01-05 11:33', 0.0, 'slack'),
        ('2026-01-05 15:07', 160.8, 'flood'),
    ]
    return [
        CurrentPrediction(
            epoch(t), v, CurrentKind.from_code(k),
            mean_flood_direction=210.0, mean_ebb_direction=40.0, bin='1',
        )
        for t, v, k in rows
    ]
