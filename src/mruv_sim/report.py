"""Text and CSV output for a finished or running simulation.

Equation strings follow the classroom notation `v1(t') = v + (a) * t'`, with
`t'` the time since the start of the interval.
"""

from __future__ import annotations

import csv
import os
from collections.abc import Sequence

from .analysis import RunSummary
from .kinematics import IntervalBoundary
from .playback import Sample


def _interval_span(boundary: IntervalBoundary, index: int) -> str:
    return (
        f"Interval {index + 1} (t' from 0 to {boundary.duration:g}s, "
        f"t from {boundary.start_time:.2f}s to {boundary.end_time:.2f}s)"
    )


def velocity_equation(boundary: IntervalBoundary, index: int) -> str:
    """Return the velocity law of one interval as display text."""
    return (
        f"{_interval_span(boundary, index)}:    "
        f"v{index + 1}(t') = {boundary.start_velocity:.2f} + ({boundary.acceleration:.2f}) * t'"
    )


def position_equation(boundary: IntervalBoundary, index: int) -> str:
    """Return the position law of one interval as display text."""
    return (
        f"{_interval_span(boundary, index)}:    "
        f"s{index + 1}(t') = {boundary.start_position:.2f} + ({boundary.start_velocity:.2f}) * t'"
        f" + 0.5 * ({boundary.acceleration:.2f}) * t'^2"
    )


def summary_lines(summary: RunSummary) -> list[str]:
    """Return the run results as human-readable lines."""
    if summary.reversals:
        instants = ", ".join(f"{t:.2f}" for t in summary.reversal_times) + " s"
    else:
        instants = "none detected within the intervals"
    return [
        f"Displacement: {summary.displacement:.2f} m",
        f"Distance traveled: {summary.total_distance:.2f} m",
        f"Direction reversal instant(s): {instants}",
        f"Total simulation time: {summary.total_duration:.2f} s",
    ]


def equation_lines(summary: RunSummary) -> list[str]:
    lines = ["Velocity equations:"]
    lines += [velocity_equation(b, i) for i, b in enumerate(summary.boundaries)]
    lines.append("Position equations:")
    lines += [position_equation(b, i) for i, b in enumerate(summary.boundaries)]
    return lines


def write_samples_csv(
    path: str,
    position_samples: Sequence[Sample],
    velocity_samples: Sequence[Sample],
) -> int:
    """Write `t,position,velocity` rows and return the number of data rows.

    Raises:
        ValueError: If the two sequences are not aligned sample for sample.
    """
    if len(position_samples) != len(velocity_samples):
        raise ValueError("position and velocity samples differ in length")

    rows = []
    for pos, vel in zip(position_samples, velocity_samples):
        if pos.time != vel.time:
            raise ValueError(f"sample times differ: {pos.time} != {vel.time}")
        rows.append([pos.time, pos.value, vel.value])

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["t", "position", "velocity"])
        w.writerows(rows)
    return len(rows)
