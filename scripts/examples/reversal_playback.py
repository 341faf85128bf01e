"""Frame-by-frame playback of a braking run with a direction reversal.

The particle starts at 5 m/s, brakes at -10 m/s^2 for one second (reversing at
t = 0.5 s), then coasts backwards. The clock is ticked at a fixed frame rate,
pausing for a few frames halfway through, and the state is printed at a fixed
interval the way an animation overlay would show it.

Usage
-----
    python -u scripts/examples/reversal_playback.py --fps 60 --print-dt 0.25
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from mruv_sim import PlaybackClock, PlaybackPhase, parameters_from_values  # noqa: E402
from mruv_sim.report import summary_lines  # noqa: E402

PAUSED_FRAMES = 10


def main() -> None:
    ap = argparse.ArgumentParser(description="Braking run with a direction reversal")
    ap.add_argument("--fps", type=float, default=60.0, help="frames per second driving the clock")
    ap.add_argument("--print-dt", type=float, default=0.25, help="print interval [s]")
    args = ap.parse_args()

    params = parameters_from_values(0, 5, -10, 1, 0, 1, 0, 1)
    clock = PlaybackClock()
    summary = clock.start(params)
    for line in summary_lines(summary):
        print(line)

    bounds = clock.bounds
    print(f"position axis=[{bounds.position.min:.2f}, {bounds.position.max:.2f}] m  "
          f"velocity axis=[{bounds.velocity.min:.2f}, {bounds.velocity.max:.2f}] m/s")
    print("t(s)\ts(m)\tv(m/s)\tmarker")

    frame_dt = 1.0 / args.fps
    next_print_t = 0.0
    reversal_times = list(summary.reversal_times)
    paused_once = False
    paused_frames = 0

    while clock.phase is not PlaybackPhase.FINISHED:
        if not paused_once and clock.state.elapsed_time >= 0.5 * summary.total_duration:
            clock.pause()
            paused_once = True
        if clock.phase is PlaybackPhase.PAUSED:
            paused_frames += 1
            if paused_frames >= PAUSED_FRAMES:
                clock.resume()

        result = clock.tick(frame_dt)
        t = result.position.time
        marker = ""
        if reversal_times and t >= reversal_times[0]:
            marker = f"reversal at {reversal_times.pop(0):.2f}s"
        if t >= next_print_t or marker or result.phase is PlaybackPhase.FINISHED:
            print(f"{t:4.2f}\t{result.position.value:+.3f}\t{result.velocity.value:+.3f}\t{marker}")
            next_print_t += args.print_dt

    print(f"Done: {len(clock.position_samples)} samples, paused for {paused_frames} frames.")


if __name__ == "__main__":
    main()
