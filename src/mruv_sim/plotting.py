"""Matplotlib rendering of position-vs-time and velocity-vs-time charts.

The charts use the run's `AxisBounds` for the y limits and the total duration
for the x limit, so a partially played run keeps the same frame as the final
one. Reversal instants are marked on both charts: at the particle position on
the position chart and at zero on the velocity chart.
"""

from __future__ import annotations

import matplotlib.pyplot as plt

from .playback import PlaybackClock

POSITION_COLOR = (0.0, 150 / 255, 0.0)
VELOCITY_COLOR = (0.0, 0.0, 150 / 255)
REVERSAL_COLOR = (0.0, 0.0, 1.0)


def plot_run(clock: PlaybackClock, path: str | None = None, show: bool = False):
    """Draw the recorded samples of `clock` and return the matplotlib figure.

    Args:
        clock: A clock that has been started at least once.
        path: If given, save the figure there as an image.
        show: Open an interactive window instead of closing the figure.

    Raises:
        ValueError: If the clock has no run to draw.
    """
    summary = clock.summary
    bounds = clock.bounds
    if summary is None or bounds is None:
        raise ValueError("clock has no started run to plot")

    fig, (ax_s, ax_v) = plt.subplots(2, 1, sharex=True, figsize=(8, 6))

    t_s = [p.time for p in clock.position_samples]
    ax_s.plot(t_s, [p.value for p in clock.position_samples], color=POSITION_COLOR, linewidth=2)
    ax_s.set_ylim(bounds.position.min, bounds.position.max)
    ax_s.set_ylabel("position [m]")

    t_v = [p.time for p in clock.velocity_samples]
    ax_v.plot(t_v, [p.value for p in clock.velocity_samples], color=VELOCITY_COLOR, linewidth=2)
    ax_v.set_ylim(bounds.velocity.min, bounds.velocity.max)
    ax_v.set_ylabel("velocity [m/s]")
    ax_v.set_xlabel("time [s]")
    ax_v.set_xlim(0.0, summary.total_duration)

    if summary.reversals:
        times = [r.global_time for r in summary.reversals]
        ax_s.scatter(times, [r.position for r in summary.reversals], color=REVERSAL_COLOR, s=24, zorder=3)
        ax_v.scatter(times, [0.0] * len(times), color=REVERSAL_COLOR, s=24, zorder=3)

    for ax in (ax_s, ax_v):
        for boundary in summary.boundaries[1:]:
            ax.axvline(boundary.start_time, color="0.7", linewidth=1, linestyle="--")
        ax.grid(True, alpha=0.3)

    state = clock.state
    fig.suptitle(
        f"s = {state.current_position:.2f}m, v = {state.current_velocity:.2f}m/s, "
        f"t = {state.elapsed_time:.2f}s"
    )

    if path:
        fig.savefig(path, dpi=160, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
