"""One-shot run analysis: reversals, distance traveled and displacement.

`analyze` walks the three intervals once and returns a `RunSummary`. The
reversal list it produces is the only one used for the rest of the run; charts,
annotations and summary text all read the same tuple of `ReversalEvent`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import REVERSAL_EPSILON, SimulationParameters
from .kinematics import IntervalBoundary, interval_boundaries

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReversalEvent:
    """Instant where velocity changes sign strictly inside an interval.

    Attributes:
        global_time: Seconds since the start of the run.
        interval_index: Zero-based index of the interval containing it.
        local_time: Seconds since the start of that interval.
        position: Particle position at the reversal, in meters.
    """

    global_time: float
    interval_index: int
    local_time: float
    position: float


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Aggregate results of one run."""

    displacement: float
    total_distance: float
    reversals: tuple[ReversalEvent, ...]
    total_duration: float
    final_position: float
    final_velocity: float
    boundaries: tuple[IntervalBoundary, ...]

    @property
    def reversal_times(self) -> tuple[float, ...]:
        return tuple(event.global_time for event in self.reversals)


def find_reversal(
    boundary: IntervalBoundary,
    index: int,
    epsilon: float = REVERSAL_EPSILON,
) -> ReversalEvent | None:
    """Return the reversal inside `boundary`, if any.

    The zero-velocity time `t_inv = -v_start / a` only counts when
    `epsilon < t_inv < duration`. Zeros at either edge of the interval are not
    reversals.
    """
    if boundary.acceleration == 0:
        return None
    t_inv = -boundary.start_velocity / boundary.acceleration
    if not (epsilon < t_inv < boundary.duration):
        return None
    position, _ = boundary.state_at_local(t_inv)
    return ReversalEvent(
        global_time=boundary.start_time + t_inv,
        interval_index=index,
        local_time=t_inv,
        position=position,
    )


def interval_distance(boundary: IntervalBoundary, reversal: ReversalEvent | None) -> float:
    """Return the path length covered during one interval."""
    if boundary.acceleration == 0:
        return abs(boundary.start_velocity * boundary.duration)
    s_start = boundary.start_position
    s_end = boundary.end_position
    if reversal is None:
        return abs(s_end - s_start)
    return abs(reversal.position - s_start) + abs(s_end - reversal.position)


def analyze(params: SimulationParameters, epsilon: float = REVERSAL_EPSILON) -> RunSummary:
    """Compute the `RunSummary` for a validated parameter set."""
    boundaries = interval_boundaries(params)
    reversals = []
    total_distance = 0.0

    for i, boundary in enumerate(boundaries):
        reversal = find_reversal(boundary, i, epsilon)
        if reversal is not None:
            logger.debug(
                "Reversal in interval %d at t'=%.2fs (t=%.2fs, s=%.2fm)",
                i + 1,
                reversal.local_time,
                reversal.global_time,
                reversal.position,
            )
            reversals.append(reversal)
        total_distance += interval_distance(boundary, reversal)

    last = boundaries[-1]
    final_position = last.end_position
    summary = RunSummary(
        displacement=final_position - params.s0,
        total_distance=total_distance,
        reversals=tuple(reversals),
        total_duration=params.total_duration,
        final_position=final_position,
        final_velocity=last.end_velocity,
        boundaries=boundaries,
    )
    logger.debug(
        "Analysis: displacement=%.2fm distance=%.2fm reversals=%d total=%.2fs",
        summary.displacement,
        summary.total_distance,
        len(summary.reversals),
        summary.total_duration,
    )
    return summary
