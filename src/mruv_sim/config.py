"""Parameter and configuration dataclasses for MRUV simulation runs.

`SimulationParameters` is the immutable input of one run: initial position,
initial velocity and three `(acceleration, duration)` intervals. The
dataclasses are plain values so they can be created in scripts and tests
without touching the playback machinery.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import InvalidParameters

INTERVAL_COUNT = 3

MAX_TICK_STEP = 0.05
SCALE_STEP = 0.05
REVERSAL_EPSILON = 1e-6
MARGIN_FRACTION = 0.1
DEGENERATE_EPSILON = 1e-6


@dataclass(frozen=True, slots=True)
class IntervalSpec:
    """One constant-acceleration interval (m/s^2, s)."""

    acceleration: float
    duration: float


@dataclass(frozen=True, slots=True)
class SimulationParameters:
    """Inputs of a single run.

    Attributes:
        s0: Initial position in meters.
        v0: Initial velocity in m/s.
        intervals: Exactly three consecutive intervals, in playback order.
    """

    s0: float
    v0: float
    intervals: tuple[IntervalSpec, ...]

    def __post_init__(self) -> None:
        # Lists and other iterables are frozen into a tuple; anything else is
        # left for `validate` to report.
        if isinstance(self.intervals, Iterable) and not isinstance(self.intervals, (str, bytes)):
            object.__setattr__(self, "intervals", tuple(self.intervals))

    @property
    def total_duration(self) -> float:
        """Return the summed duration of all intervals in seconds."""
        return sum(interval.duration for interval in self.intervals)

    @property
    def start_times(self) -> tuple[float, ...]:
        """Return the global start time of each interval."""
        starts = []
        t = 0.0
        for interval in self.intervals:
            starts.append(t)
            t += interval.duration
        return tuple(starts)

    def validate(self) -> None:
        """Raise `InvalidParameters` unless the run can be simulated."""
        bad = [name for name, value in (("s0", self.s0), ("v0", self.v0)) if not _is_finite_number(value)]

        intervals = self.intervals
        if not isinstance(intervals, tuple) or not all(isinstance(i, IntervalSpec) for i in intervals):
            raise InvalidParameters(
                "intervals must be a sequence of IntervalSpec",
                fields=("intervals",),
            )
        if len(intervals) != INTERVAL_COUNT:
            raise InvalidParameters(
                f"Expected {INTERVAL_COUNT} intervals, got {len(intervals)}",
                fields=("intervals",),
            )

        non_positive = []
        for i, interval in enumerate(intervals, start=1):
            if not _is_finite_number(interval.acceleration):
                bad.append(f"a{i}")
            if not _is_finite_number(interval.duration):
                bad.append(f"dt{i}")
            elif interval.duration <= 0:
                non_positive.append(f"dt{i}")

        if bad:
            raise InvalidParameters(
                f"Non-numeric or non-finite values for: {', '.join(bad)}",
                fields=tuple(bad),
            )
        if non_positive:
            raise InvalidParameters(
                f"Interval durations must be > 0: {', '.join(non_positive)}",
                fields=tuple(non_positive),
            )


@dataclass(slots=True)
class PlaybackConfig:
    """Numeric tuning shared by the analyzer, scale estimator and clock.

    Attributes:
        max_step: Upper bound on simulated seconds advanced per tick.
        scale_step: Sampling step used when estimating axis bounds.
        reversal_epsilon: Local times at or below this are not reversals.
        margin_fraction: Fraction of the observed range added on each side.
        degenerate_epsilon: Ranges narrower than this get a +/-1 fallback.
    """

    max_step: float = MAX_TICK_STEP
    scale_step: float = SCALE_STEP
    reversal_epsilon: float = REVERSAL_EPSILON
    margin_fraction: float = MARGIN_FRACTION
    degenerate_epsilon: float = DEGENERATE_EPSILON


def parameters_from_values(s0, v0, a1, dt1, a2, dt2, a3, dt3) -> SimulationParameters:
    """Build validated parameters from raw user values.

    Values may be numbers or numeric strings, as read from text fields.

    Raises:
        InvalidParameters: If any value is non-numeric or non-finite, or a
            duration is not strictly positive.
    """
    raw = {"s0": s0, "v0": v0, "a1": a1, "dt1": dt1, "a2": a2, "dt2": dt2, "a3": a3, "dt3": dt3}
    values = {}
    bad = []
    for name, value in raw.items():
        parsed = _parse_float(value)
        if parsed is None:
            bad.append(name)
        else:
            values[name] = parsed
    if bad:
        raise InvalidParameters(
            f"Non-numeric or non-finite values for: {', '.join(bad)}",
            fields=tuple(bad),
        )

    params = SimulationParameters(
        s0=values["s0"],
        v0=values["v0"],
        intervals=tuple(
            IntervalSpec(acceleration=values[f"a{i}"], duration=values[f"dt{i}"])
            for i in range(1, INTERVAL_COUNT + 1)
        ),
    )
    params.validate()
    return params


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def _parse_float(value) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return parsed if math.isfinite(parsed) else None
