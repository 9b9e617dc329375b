"""Numeric primitives for G-H filtering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GHState:
    """Position estimate and its rate of change."""

    x: float
    dx: float


def predict(state: GHState, dt: float) -> float:
    """Extrapolate the position one step ahead at constant rate."""
    return state.x + state.dx * dt


def update(
    state: GHState,
    prediction: float,
    measurement: float,
    dt: float,
    g: float,
    h: float,
) -> tuple[GHState, float]:
    """Correct the prediction with a measurement.

    Returns the new state and the residual that drove the correction.
    """
    residual = measurement - prediction
    # Same as prediction + g * residual, but exact at g == 0 and g == 1.
    x = (1.0 - g) * prediction + g * measurement
    dx = state.dx + h * (residual / dt)
    return GHState(x=x, dx=dx), residual
