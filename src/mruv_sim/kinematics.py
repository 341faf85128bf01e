"""Closed-form kinematics for piecewise-constant acceleration.

Every function here is pure: it takes a `SimulationParameters` value and
returns numbers or immutable dataclasses. Nothing validates its inputs; the
playback clock validates parameters before any of this runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import SimulationParameters


@dataclass(frozen=True, slots=True)
class IntervalBoundary:
    """Start state and extent of one interval in global time."""

    start_time: float
    end_time: float
    start_position: float
    start_velocity: float
    acceleration: float
    duration: float

    @property
    def end_position(self) -> float:
        return advance(self.start_position, self.start_velocity, self.acceleration, self.duration)[0]

    @property
    def end_velocity(self) -> float:
        return self.start_velocity + self.acceleration * self.duration

    def state_at_local(self, t_local: float) -> tuple[float, float]:
        """Return `(position, velocity)` at `t_local` seconds into the interval."""
        return advance(self.start_position, self.start_velocity, self.acceleration, t_local)


def advance(position: float, velocity: float, acceleration: float, dt: float) -> tuple[float, float]:
    """Apply `s = s0 + v0*t + a*t^2/2` and `v = v0 + a*t` over `dt` seconds."""
    return (
        position + velocity * dt + 0.5 * acceleration * dt * dt,
        velocity + acceleration * dt,
    )


def interval_boundaries(params: SimulationParameters) -> tuple[IntervalBoundary, ...]:
    """Return the chained boundary state of every interval.

    Interval `i + 1` starts exactly at the end state of interval `i`.
    """
    boundaries = []
    t, s, v = 0.0, params.s0, params.v0
    for interval in params.intervals:
        boundaries.append(
            IntervalBoundary(
                start_time=t,
                end_time=t + interval.duration,
                start_position=s,
                start_velocity=v,
                acceleration=interval.acceleration,
                duration=interval.duration,
            )
        )
        s, v = advance(s, v, interval.acceleration, interval.duration)
        t += interval.duration
    return tuple(boundaries)


def locate_interval(params: SimulationParameters, t: float) -> int:
    """Return the index of the interval containing global time `t`.

    Intervals are half-open `[start, start + duration)`, except the last one,
    which also owns its end point. Times outside `[0, total]` map to the first
    or last interval.
    """
    last = len(params.intervals) - 1
    for i, start in enumerate(params.start_times):
        if i == last:
            return i
        if t < start + params.intervals[i].duration:
            return i
    return last


def state_at(params: SimulationParameters, t: float) -> tuple[float, float]:
    """Return `(position, velocity)` at global time `t`.

    `t <= 0` gives exactly `(s0, v0)`. Times past the total duration are
    clamped to it; there is no extrapolation.
    """
    if t <= 0:
        return params.s0, params.v0
    t = min(t, params.total_duration)
    boundary = interval_boundaries(params)[locate_interval(params, t)]
    return boundary.state_at_local(t - boundary.start_time)


def position_at(params: SimulationParameters, t: float) -> float:
    return state_at(params, t)[0]


def velocity_at(params: SimulationParameters, t: float) -> float:
    return state_at(params, t)[1]
