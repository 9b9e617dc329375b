"""Text and matplotlib rendering of a filtering run."""

from __future__ import annotations

from typing import Sequence

import numpy as np

HEADER = ("step", "truth", "measured", "predicted", "estimate")


def _cell(values: Sequence[float], index: int) -> str:
    if 0 <= index < len(values):
        return f"{values[index]:.3f}"
    return "-"


def format_table(
    trajectory: Sequence[float],
    observations: Sequence[float],
    estimates: Sequence[float],
    predictions: Sequence[float],
) -> str:
    """Render the four sequences as a fixed-width table indexed by time step.

    Step 0 carries the starting point and the prior; observations and
    predictions begin at step 1.
    """
    rows = [HEADER]
    for step in range(len(trajectory)):
        rows.append(
            (
                str(step),
                _cell(trajectory, step),
                _cell(observations, step - 1),
                _cell(predictions, step - 1),
                _cell(estimates, step),
            )
        )
    widths = [max(len(row[col]) for row in rows) for col in range(len(HEADER))]
    lines = ["  ".join(cell.rjust(width) for cell, width in zip(row, widths)) for row in rows]
    return "\n".join(lines)


def plot_run(
    trajectory: Sequence[float],
    observations: Sequence[float],
    estimates: Sequence[float],
    predictions: Sequence[float],
    ax=None,
):
    """Plot a filtering run against a shared time-step axis.

    The truth and the estimates start at step 0; measurements and
    predictions start at step 1. Draws on ``ax`` if given, otherwise on a
    new figure, and returns the axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 5))

    steps = np.arange(len(trajectory))
    ax.plot(steps, trajectory, "k-", linewidth=2, alpha=0.8, label="Truth")
    ax.scatter(steps[1:], observations, color="tab:red", marker="o", label="Measurements")
    ax.plot(steps[1:], predictions, "r--", linewidth=1, label="Predictions")
    ax.plot(steps[: len(estimates)], estimates, "b-", linewidth=1.5, label="Estimates")

    ax.set_xlabel("Time step")
    ax.set_ylabel("Position")
    ax.set_title("G-H filter")
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax
