from .analysis import ReversalEvent, RunSummary, analyze
from .config import IntervalSpec, PlaybackConfig, SimulationParameters, parameters_from_values
from .errors import InvalidParameters, MruvError
from .kinematics import IntervalBoundary, interval_boundaries, position_at, state_at, velocity_at
from .playback import PlaybackClock, PlaybackPhase, PlaybackState, Sample, TickResult
from .scaling import AxisBounds, AxisRange, estimate_bounds

__all__ = [
    "AxisBounds",
    "AxisRange",
    "IntervalBoundary",
    "IntervalSpec",
    "InvalidParameters",
    "MruvError",
    "PlaybackClock",
    "PlaybackConfig",
    "PlaybackPhase",
    "PlaybackState",
    "ReversalEvent",
    "RunSummary",
    "Sample",
    "SimulationParameters",
    "TickResult",
    "analyze",
    "estimate_bounds",
    "interval_boundaries",
    "parameters_from_values",
    "position_at",
    "state_at",
    "velocity_at",
]
