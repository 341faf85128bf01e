"""Command-line driver: run one three-interval simulation headless.

Usage
-----
    mruv-sim --s0 0 --v0 5 --a1 -10 --dt1 1 --a2 0 --dt2 1 --a3 0 --dt3 1 \\
        --csv outputs/run.csv --plot outputs/run.png

The clock is ticked at a fixed frame rate, the way an animation loop would,
then the summary, interval equations and optional CSV / PNG are produced.
"""

from __future__ import annotations

import argparse
import logging

from .config import parameters_from_values
from .errors import InvalidParameters
from .playback import PlaybackClock
from .report import equation_lines, summary_lines, write_samples_csv


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Three-interval MRUV kinematics simulator")
    ap.add_argument("--s0", default="0", help="initial position [m]")
    ap.add_argument("--v0", default="0", help="initial velocity [m/s]")
    for i in (1, 2, 3):
        ap.add_argument(f"--a{i}", default="0", help=f"acceleration of interval {i} [m/s^2]")
        ap.add_argument(f"--dt{i}", default="1", help=f"duration of interval {i} [s] (> 0)")
    ap.add_argument("--fps", type=float, default=60.0, help="animation frame rate driving the clock")
    ap.add_argument("--csv", default=None, help="write t,position,velocity samples to this path")
    ap.add_argument("--plot", default=None, help="save position/velocity charts to this image path")
    ap.add_argument("--show", action="store_true", help="open the charts in a window")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.fps <= 0:
        ap.error("--fps must be > 0")

    try:
        params = parameters_from_values(
            args.s0, args.v0, args.a1, args.dt1, args.a2, args.dt2, args.a3, args.dt3
        )
    except InvalidParameters as e:
        ap.error(str(e))

    clock = PlaybackClock()
    summary = clock.start(params)
    ticks = clock.run_to_completion(1.0 / args.fps)

    for line in summary_lines(summary):
        print(line)
    print()
    for line in equation_lines(summary):
        print(line)

    state = clock.state
    print()
    print(f"OK: {ticks} ticks, t={state.elapsed_time:.3f}s, s={state.current_position:.3f} m, "
          f"v={state.current_velocity:.3f} m/s")

    if args.csv:
        n = write_samples_csv(args.csv, clock.position_samples, clock.velocity_samples)
        print(f"[csv] wrote {args.csv}  ({n} rows)")

    if args.plot or args.show:
        from .plotting import plot_run

        plot_run(clock, path=args.plot, show=args.show)
        if args.plot:
            print(f"[plot] saved:\n  {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
