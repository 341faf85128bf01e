"""Playback clock driving a run forward one animation tick at a time.

`PlaybackClock` owns everything that changes during a run: the elapsed-time
cursor, the current particle state and the recorded position / velocity
samples. Analysis results and axis bounds are computed once in `start` and
kept read-only until the next `start`.

The clock never schedules anything itself. An external driver (an animation
loop, a timer, or `run_to_completion`) calls `tick` once per frame.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace

from .analysis import ReversalEvent, RunSummary, analyze
from .config import PlaybackConfig, SimulationParameters
from .errors import InvalidParameters
from .kinematics import IntervalBoundary, state_at
from .scaling import AxisBounds, estimate_bounds

logger = logging.getLogger(__name__)


class PlaybackPhase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass(slots=True)
class PlaybackState:
    """Mutable playback cursor and particle state."""

    elapsed_time: float = 0.0
    current_position: float = 0.0
    current_velocity: float = 0.0
    running: bool = False
    paused: bool = False


@dataclass(frozen=True, slots=True)
class Sample:
    """One `(time, value)` point of a recorded trend line."""

    time: float
    value: float


@dataclass(frozen=True, slots=True)
class TickResult:
    """Phase after a tick plus the position and velocity at the cursor."""

    phase: PlaybackPhase
    position: Sample
    velocity: Sample


@dataclass(slots=True)
class PlaybackClock:
    """State machine `IDLE -> RUNNING <-> PAUSED -> FINISHED` for one particle."""

    config: PlaybackConfig = field(default_factory=PlaybackConfig)
    _phase: PlaybackPhase = field(default=PlaybackPhase.IDLE, init=False)
    _state: PlaybackState = field(default_factory=PlaybackState, init=False)
    _params: SimulationParameters | None = field(default=None, init=False)
    _summary: RunSummary | None = field(default=None, init=False)
    _bounds: AxisBounds | None = field(default=None, init=False)
    _position_samples: list[Sample] = field(default_factory=list, init=False)
    _velocity_samples: list[Sample] = field(default_factory=list, init=False)

    # ---------- transitions ----------

    def start(self, params: SimulationParameters) -> RunSummary:
        """Validate `params`, analyze the run and begin playback.

        Raises:
            InvalidParameters: If `params` cannot be simulated. The previous
                run, if any, is left exactly as it was.
        """
        if not isinstance(params, SimulationParameters):
            raise InvalidParameters(
                f"Expected SimulationParameters, got {type(params).__name__}",
                fields=("params",),
            )
        params.validate()

        summary = analyze(params, epsilon=self.config.reversal_epsilon)
        bounds = estimate_bounds(
            params,
            step=self.config.scale_step,
            margin=self.config.margin_fraction,
            epsilon=self.config.degenerate_epsilon,
        )

        self._phase = PlaybackPhase.IDLE
        self._params = params
        self._summary = summary
        self._bounds = bounds
        self._state = PlaybackState(
            elapsed_time=0.0,
            current_position=params.s0,
            current_velocity=params.v0,
        )
        self._position_samples = [Sample(0.0, params.s0)]
        self._velocity_samples = [Sample(0.0, params.v0)]

        self._state.running = True
        self._state.paused = False
        self._phase = PlaybackPhase.RUNNING
        logger.info(
            "Run started: s0=%g v0=%g total=%.2fs reversals=%d",
            params.s0,
            params.v0,
            summary.total_duration,
            len(summary.reversals),
        )
        return summary

    def pause(self) -> None:
        if self._phase is not PlaybackPhase.RUNNING:
            return
        self._state.paused = True
        self._phase = PlaybackPhase.PAUSED
        logger.info("Playback paused at t=%.2fs", self._state.elapsed_time)

    def resume(self) -> None:
        if self._phase is not PlaybackPhase.PAUSED:
            return
        self._state.paused = False
        self._phase = PlaybackPhase.RUNNING
        logger.info("Playback resumed at t=%.2fs", self._state.elapsed_time)

    def tick(self, dt: float) -> TickResult:
        """Advance the cursor by `min(dt, config.max_step)` seconds.

        Calls outside `RUNNING` change nothing. Negative or NaN `dt` advances
        by zero.
        """
        if self._phase is not PlaybackPhase.RUNNING:
            return self._result()

        step = min(dt, self.config.max_step) if dt > 0 else 0.0
        total = self._params.total_duration
        t = self._state.elapsed_time + step
        finished = t >= total
        if finished:
            t = total

        position, velocity = state_at(self._params, t)
        self._state.elapsed_time = t
        self._state.current_position = position
        self._state.current_velocity = velocity

        if t > self._position_samples[-1].time:
            self._position_samples.append(Sample(t, position))
            self._velocity_samples.append(Sample(t, velocity))

        if finished:
            self._state.running = False
            self._state.paused = False
            self._phase = PlaybackPhase.FINISHED
            logger.info("Run finished at t=%.2fs: s=%.2fm v=%.2fm/s", t, position, velocity)
        return self._result()

    def run_to_completion(self, frame_dt: float) -> int:
        """Tick at a fixed `frame_dt` until the run leaves `RUNNING`.

        Returns:
            Number of ticks performed.
        """
        if not frame_dt > 0:
            raise ValueError("frame_dt must be > 0")
        ticks = 0
        while self._phase is PlaybackPhase.RUNNING:
            self.tick(frame_dt)
            ticks += 1
        return ticks

    # ---------- read-only views ----------

    @property
    def phase(self) -> PlaybackPhase:
        return self._phase

    @property
    def state(self) -> PlaybackState:
        """Return a copy of the playback state."""
        return replace(self._state)

    @property
    def parameters(self) -> SimulationParameters | None:
        return self._params

    @property
    def summary(self) -> RunSummary | None:
        return self._summary

    @property
    def bounds(self) -> AxisBounds | None:
        return self._bounds

    @property
    def reversals(self) -> tuple[ReversalEvent, ...]:
        return self._summary.reversals if self._summary is not None else ()

    @property
    def boundaries(self) -> tuple[IntervalBoundary, ...]:
        return self._summary.boundaries if self._summary is not None else ()

    @property
    def position_samples(self) -> tuple[Sample, ...]:
        return tuple(self._position_samples)

    @property
    def velocity_samples(self) -> tuple[Sample, ...]:
        return tuple(self._velocity_samples)

    def _result(self) -> TickResult:
        t = self._state.elapsed_time
        return TickResult(
            phase=self._phase,
            position=Sample(t, self._state.current_position),
            velocity=Sample(t, self._state.current_velocity),
        )
