"""Axis bounds for position and velocity charts.

The trajectory is sampled once per run at a fixed step, with both endpoints of
every interval added explicitly so a peak that falls between two samples at an
interval edge is not missed. The resulting ranges are padded so the plotted
curve never touches the frame.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from .config import DEGENERATE_EPSILON, MARGIN_FRACTION, SCALE_STEP, SimulationParameters
from .kinematics import interval_boundaries

logger = logging.getLogger(__name__)

SAMPLE_CHUNK = 65536


@dataclass(frozen=True, slots=True)
class AxisRange:
    """Closed value range used for one chart axis."""

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def normalize(self, value: float) -> float:
        """Map `value` to `[0, 1]` within the range (unclamped)."""
        return (value - self.min) / self.span

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True, slots=True)
class AxisBounds:
    """Position and velocity ranges for one run."""

    position: AxisRange
    velocity: AxisRange


def expand_range(
    lo: float,
    hi: float,
    margin: float = MARGIN_FRACTION,
    epsilon: float = DEGENERATE_EPSILON,
) -> AxisRange:
    """Pad an observed `[lo, hi]` range.

    A range narrower than `epsilon` becomes `[lo - 1, hi + 1]`; otherwise each
    end moves outward by `margin` times the observed width.
    """
    if hi - lo < epsilon:
        return AxisRange(min=lo - 1.0, max=hi + 1.0)
    pad = (hi - lo) * margin
    return AxisRange(min=lo - pad, max=hi + pad)


def iter_samples(
    params: SimulationParameters,
    step: float = SCALE_STEP,
    chunk_size: int = SAMPLE_CHUNK,
) -> Iterator[tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """Yield `(times, positions, velocities)` arrays of at most `chunk_size + 1` samples.

    Each interval contributes local times `0, step, 2*step, ...` below its
    duration plus the duration itself, so junction times appear twice with
    identical states. Memory use is bounded by `chunk_size` whatever the
    durations; the running time still grows with `total_duration / step`.
    """
    if step <= 0:
        raise ValueError("step must be > 0")
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    for boundary in interval_boundaries(params):
        n = math.ceil(boundary.duration / step)
        for k0 in range(0, n, chunk_size):
            k1 = min(k0 + chunk_size, n)
            t_local = np.arange(k0, k1, dtype=float) * step
            if k1 == n:
                t_local = np.append(t_local, boundary.duration)
            yield (
                boundary.start_time + t_local,
                boundary.start_position
                + boundary.start_velocity * t_local
                + 0.5 * boundary.acceleration * t_local**2,
                boundary.start_velocity + boundary.acceleration * t_local,
            )


def sample_trajectory(params: SimulationParameters, step: float = SCALE_STEP) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return every sample of `iter_samples` as three concatenated arrays."""
    times, positions, velocities = zip(*iter_samples(params, step))
    return np.concatenate(times), np.concatenate(positions), np.concatenate(velocities)


def estimate_bounds(
    params: SimulationParameters,
    step: float = SCALE_STEP,
    margin: float = MARGIN_FRACTION,
    epsilon: float = DEGENERATE_EPSILON,
) -> AxisBounds:
    """Return padded position and velocity ranges for the whole run.

    Samples are reduced chunk by chunk to running extrema, so long runs never
    hold the full sampling grid in memory.
    """
    s_min = s_max = params.s0
    v_min = v_max = params.v0
    for _, positions, velocities in iter_samples(params, step):
        s_min = min(s_min, float(positions.min()))
        s_max = max(s_max, float(positions.max()))
        v_min = min(v_min, float(velocities.min()))
        v_max = max(v_max, float(velocities.max()))

    bounds = AxisBounds(
        position=expand_range(s_min, s_max, margin, epsilon),
        velocity=expand_range(v_min, v_max, margin, epsilon),
    )
    logger.debug(
        "Axis bounds: position=[%.2f, %.2f] velocity=[%.2f, %.2f]",
        bounds.position.min,
        bounds.position.max,
        bounds.velocity.min,
        bounds.velocity.max,
    )
    return bounds
