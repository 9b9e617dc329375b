"""Run the classic weight-tracking demo and print the results."""

from __future__ import annotations

import argparse
import logging

from .gh_filter import gh_filter
from .report import format_table, plot_run
from .signal import generate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ghfilter", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible noise")
    parser.add_argument("--plot", action="store_true", help="plot the run with matplotlib")
    parser.add_argument("--verbose", "-v", action="store_true", help="log every filter step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    observations, trajectory = generate(
        x0=160.0, dx=1.0, dt=1.0, steps=10, noise_std=1.0, seed=args.seed
    )
    estimates, predictions = gh_filter(
        observations, x0=160.0, dx0=0.0, dt=1.0, g=0.3, h=0.1
    )
    print(format_table(trajectory, observations, estimates, predictions))
    if args.plot:
        import matplotlib.pyplot as plt

        plot_run(trajectory, observations, estimates, predictions)
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
