"""Synthetic trajectories and noisy observations for exercising the filter."""

from __future__ import annotations

import logging

import numpy as np

from .errors import InvalidArgument
from .params import SignalParameters

logger = logging.getLogger(__name__)


def _resolve_rng(
    seed: int | None, rng: np.random.Generator | None
) -> np.random.Generator:
    if seed is not None and rng is not None:
        raise InvalidArgument("Pass either seed or rng, not both")
    if rng is not None:
        return rng
    # seed=None draws fresh entropy from the OS
    return np.random.default_rng(seed)


def trajectory(params: SignalParameters) -> np.ndarray:
    """Return the noiseless positions ``x0 + dx*dt*t`` for ``t = 0..steps``."""
    t = np.arange(params.steps + 1, dtype=float)
    positions = params.x0 + params.dx * params.dt * t
    positions[0] = params.x0
    return positions


def observe(
    positions: np.ndarray, noise_std: float, rng: np.random.Generator
) -> np.ndarray:
    """Add independent zero-mean Gaussian noise to every point after the seed."""
    truth = positions[1:]
    if noise_std == 0.0:
        return truth.copy()
    return truth + rng.normal(0.0, noise_std, size=truth.shape)


def generate(
    x0: float,
    dx: float,
    dt: float,
    steps: int,
    noise_std: float,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Generate a linear trajectory and noisy observations of it.

    Args:
        x0: Starting position.
        dx: Rate of change per unit time.
        dt: Time between samples.
        steps: Number of samples after the starting point, must be positive.
        noise_std: Standard deviation of the measurement noise, 0 for none.
        seed: Seed for a local random generator, for reproducible tests.
        rng: Caller-owned random generator to draw noise from.

    Returns:
        ``(observations, trajectory)``. The trajectory has ``steps + 1``
        entries including ``x0``; observations have ``steps`` entries and
        skip the starting point. Both arrays are read-only.

    Raises:
        InvalidArgument: If a parameter is out of range, or both ``seed``
            and ``rng`` are given.
    """
    params = SignalParameters(x0=x0, dx=dx, dt=dt, steps=steps, noise_std=noise_std)
    generator = _resolve_rng(seed, rng)

    positions = trajectory(params)
    observations = observe(positions, params.noise_std, generator)
    logger.debug(
        "Generated %d observations from x0=%s dx=%s dt=%s noise_std=%s",
        params.steps,
        params.x0,
        params.dx,
        params.dt,
        params.noise_std,
    )

    positions.setflags(write=False)
    observations.setflags(write=False)
    return observations, positions
