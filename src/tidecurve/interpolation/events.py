"""
Prediction event records for tide and current interpolation.

Mirrors the high/low and flood/ebb/slack events published by the CO-OPS
Data API (``interval=hilo`` tide predictions, ``currents_predictions``)
requested with ``units=metric`` and ``time_zone=gmt``:

* tide heights in metres,
* current velocities along the major axis in cm/s (flood positive,
  ebb negative),
* times as UTC epoch seconds.

Event kinds are closed enums so that slope selection and progress logic
can branch on members instead of comparing free-form strings.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TideKind(str, Enum):
    """High or low water, using the CO-OPS ``type`` codes."""

    HIGH = 'H'
    LOW = 'L'

    @classmethod
    def from_code(cls, code: str) -> TideKind:
        """
        Map a CO-OPS tide ``type`` code (``"H"`` / ``"L"``) to a member.

        Raises
        ------
        ValueError
            If *code* is not a known tide type.
        """
        normalized = str(code).strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unknown tide type '{code}'; expected one of "
            f"{[m.value for m in cls]}."
        )


class CurrentKind(str, Enum):
    """Flood, ebb, or slack, using the CO-OPS ``Type`` values."""

    FLOOD = 'flood'
    EBB = 'ebb'
    SLACK = 'slack'

    @property
    def is_peak(self) -> bool:
        """True for max-flood and max-ebb events."""
        return self is not CurrentKind.SLACK

    @classmethod
    def from_code(cls, code: str) -> CurrentKind:
        """
        Map a CO-OPS current ``Type`` value to a member.

        Raises
        ------
        ValueError
            If *code* is not a known current type.
        """
        normalized = str(code).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unknown current type '{code}'; expected one of "
            f"{[m.value for m in cls]}."
        )


@dataclass(frozen=True)
class TidePrediction:
    """
    A single high or low water prediction.

    Attributes
    ----------
    epoch_seconds : int
        Prediction time as UTC epoch seconds.
    value : float
        Water level in metres relative to the requested datum.
    kind : TideKind
        High or low water.
    """

    epoch_seconds: int
    value: float
    kind: TideKind

    @property
    def is_high(self) -> bool:
        return self.kind is TideKind.HIGH

    @property
    def is_low(self) -> bool:
        return self.kind is TideKind.LOW


@dataclass(frozen=True)
class CurrentPrediction:
    """
    A single max-flood, max-ebb, or slack current prediction.

    Attributes
    ----------
    epoch_seconds : int
        Prediction time as UTC epoch seconds.
    value : float
        Velocity along the major axis in cm/s.  Positive is flood,
        negative is ebb, zero (or near zero) is slack.
    kind : CurrentKind
        Current phase of the event.
    mean_flood_direction : float, optional
        Mean flood direction in degrees True (direction flowed toward).
        Subordinate stations often leave this unset.
    mean_ebb_direction : float, optional
        Mean ebb direction in degrees True.
    bin : str, optional
        Depth bin identifier of the prediction.
    depth : float, optional
        Bin depth in metres.
    """

    epoch_seconds: int
    value: float
    kind: CurrentKind
    mean_flood_direction: float | None = None
    mean_ebb_direction: float | None = None
    bin: str | None = None
    depth: float | None = None

    @property
    def velocity_major(self) -> float:
        return self.value

    @property
    def speed(self) -> float:
        """Absolute velocity in cm/s, regardless of direction."""
        return abs(self.value)

    @property
    def direction(self) -> float | None:
        """
        Direction of flow in degrees True.

        Ebb events report the mean ebb direction; flood and slack events
        report the mean flood direction (direction carries little meaning
        at slack).
        """
        if self.kind is CurrentKind.EBB:
            return self.mean_ebb_direction
        return self.mean_flood_direction

    @property
    def is_flood(self) -> bool:
        return self.kind is CurrentKind.FLOOD

    @property
    def is_ebb(self) -> bool:
        return self.kind is CurrentKind.EBB

    @property
    def is_slack(self) -> bool:
        return self.kind is CurrentKind.SLACK

    @property
    def is_peak(self) -> bool:
        return self.kind.is_peak


@dataclass(frozen=True)
class Progress:
    """
    Gauge-ready view of a curve at one instant.

    Built fresh for every query and never persisted.

    Attributes
    ----------
    value : float
        Interpolated level (m) or velocity (cm/s) at the query time.
    progress_fraction : float
        Position in ``[0, 1]``.  Water level: 0 = low, 1 = high.
        Current: 0 = max ebb, 1 = max flood.
    upcoming_kind : TideKind or CurrentKind
        Kind of the first event strictly after the query time.
    upcoming_value : float
        Value of that event.
    upcoming_epoch_seconds : int
        Time of that event as UTC epoch seconds.
    """

    value: float
    progress_fraction: float
    upcoming_kind: TideKind | CurrentKind
    upcoming_value: float
    upcoming_epoch_seconds: int
