"""
Interpolation Subpackage

Provides functionality for:
- Typed tide (high/low) and current (flood/ebb/slack) prediction events
- Segment location within sorted prediction sequences
- Raised-cosine water level interpolation
- Cubic Hermite current velocity interpolation with peak-aware tangents
- Alternative current curve designs (sine anchors, quarter wave)
- Progress and upcoming-event composition for gauges and countdowns
- Regular-grid curve sampling for charts
- Caller-side sequence diagnostics
"""

from tidecurve.interpolation.current_velocity import (
    current_velocity_rate,
    hermite,
    hermite_derivative,
    interpolate_current_velocity,
)
from tidecurve.interpolation.curves import (
    CurrentVelocityCurve,
    WaterLevelCurve,
)
from tidecurve.interpolation.diagnostics import find_sequence_issues
from tidecurve.interpolation.events import (
    CurrentKind,
    CurrentPrediction,
    Progress,
    TideKind,
    TidePrediction,
)
from tidecurve.interpolation.progress import (
    current_velocity_progress,
    water_level_progress,
)
from tidecurve.interpolation.sampling import (
    DEFAULT_SAMPLE_INTERVAL_SECONDS,
    sample_curve,
)
from tidecurve.interpolation.segments import (
    locate_segment,
    next_event_index,
    previous_event_index,
)
from tidecurve.interpolation.slopes import estimate_slopes
from tidecurve.interpolation.strategies import CurveMethod
from tidecurve.interpolation.water_level import interpolate_water_level

__all__ = [
    # Event model
    'TideKind',
    'CurrentKind',
    'TidePrediction',
    'CurrentPrediction',
    'Progress',
    # Segment location
    'locate_segment',
    'next_event_index',
    'previous_event_index',
    # Water level
    'interpolate_water_level',
    # Current velocity
    'CurveMethod',
    'estimate_slopes',
    'hermite',
    'hermite_derivative',
    'interpolate_current_velocity',
    'current_velocity_rate',
    # Progress
    'water_level_progress',
    'current_velocity_progress',
    # Curve facades
    'WaterLevelCurve',
    'CurrentVelocityCurve',
    # Sampling
    'DEFAULT_SAMPLE_INTERVAL_SECONDS',
    'sample_curve',
    # Diagnostics
    'find_sequence_issues',
]
