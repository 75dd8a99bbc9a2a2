"""
Curve facades for the water level and current velocity engines.

Thin, immutable wrappers over the module-level functions so a UI layer
can hold one configured object per station type.  They keep no reference
to any prediction sequence, so one instance can serve concurrent queries.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from .current_velocity import (
    current_velocity_rate,
    interpolate_current_velocity,
)
from .events import CurrentPrediction, Progress, TidePrediction
from .progress import current_velocity_progress, water_level_progress
from .sampling import DEFAULT_SAMPLE_INTERVAL_SECONDS, sample_curve
from .strategies import CurveMethod
from .water_level import interpolate_water_level


@dataclass(frozen=True)
class WaterLevelCurve:
    """Raised-cosine tide curve through high/low water predictions."""

    logger: logging.Logger | None = None

    def interpolate(
        self, predictions: Sequence[TidePrediction], now_epoch_seconds: int,
    ) -> float | None:
        return interpolate_water_level(
            predictions, now_epoch_seconds, logger=self.logger,
        )

    def progress(
        self, predictions: Sequence[TidePrediction], now_epoch_seconds: int,
    ) -> Progress | None:
        return water_level_progress(
            predictions, now_epoch_seconds, logger=self.logger,
        )

    def sample(
        self,
        predictions: Sequence[TidePrediction],
        start: int | None = None,
        end: int | None = None,
        interval_seconds: int = DEFAULT_SAMPLE_INTERVAL_SECONDS,
    ) -> pd.DataFrame:
        return sample_curve(
            predictions, self.interpolate, start=start, end=end,
            interval_seconds=interval_seconds, logger=self.logger,
        )


@dataclass(frozen=True)
class CurrentVelocityCurve:
    """
    Current velocity curve through flood/ebb/slack predictions.

    Parameters
    ----------
    method : CurveMethod or str, optional
        Curve design (default ``"hermite"``).  Validated on construction.
    logger : logging.Logger, optional
        Logger passed through to every call.
    """

    method: CurveMethod = CurveMethod.HERMITE
    logger: logging.Logger | None = None

    def __post_init__(self):
        object.__setattr__(self, 'method', CurveMethod.coerce(self.method))

    def interpolate(
        self, predictions: Sequence[CurrentPrediction], now_epoch_seconds: int,
    ) -> float | None:
        return interpolate_current_velocity(
            predictions, now_epoch_seconds,
            method=self.method, logger=self.logger,
        )

    def rate(
        self, predictions: Sequence[CurrentPrediction], now_epoch_seconds: int,
    ) -> float | None:
        """Velocity rate of change in cm/s per second."""
        return current_velocity_rate(
            predictions, now_epoch_seconds,
            method=self.method, logger=self.logger,
        )

    def progress(
        self, predictions: Sequence[CurrentPrediction], now_epoch_seconds: int,
    ) -> Progress | None:
        return current_velocity_progress(
            predictions, now_epoch_seconds,
            method=self.method, logger=self.logger,
        )

    def sample(
        self,
        predictions: Sequence[CurrentPrediction],
        start: int | None = None,
        end: int | None = None,
        interval_seconds: int = DEFAULT_SAMPLE_INTERVAL_SECONDS,
    ) -> pd.DataFrame:
        return sample_curve(
            predictions, self.interpolate, start=start, end=end,
            interval_seconds=interval_seconds, logger=self.logger,
        )
