"""Tests for synthetic signal generation."""

import numpy as np
import pytest

from ghfilter import InvalidArgument, SignalParameters, generate


def test_noiseless_scenario():
    """Noiseless observations equal the trajectory after the seed point."""
    observations, trajectory = generate(x0=160, dx=1, dt=1, steps=10, noise_std=0)
    assert trajectory.tolist() == [float(v) for v in range(160, 171)]
    assert observations.tolist() == [float(v) for v in range(161, 171)]
    assert np.array_equal(observations, trajectory[1:])


def test_lengths():
    """Trajectory includes the seed, observations do not."""
    observations, trajectory = generate(x0=0.0, dx=2.5, dt=0.1, steps=37, noise_std=1.0)
    assert len(trajectory) == 38
    assert len(observations) == 37


def test_single_step():
    """steps=1 gives a two-point trajectory and one observation."""
    observations, trajectory = generate(x0=5.0, dx=1.0, dt=2.0, steps=1, noise_std=0.5)
    assert trajectory.tolist() == [5.0, 7.0]
    assert observations.shape == (1,)


def test_trajectory_follows_linear_model():
    """Each trajectory point is x0 + dx*dt*t."""
    _, trajectory = generate(x0=-3.0, dx=0.7, dt=0.25, steps=20, noise_std=0.0)
    for t, value in enumerate(trajectory):
        assert value == pytest.approx(-3.0 + 0.7 * 0.25 * t)


def test_seed_is_reproducible():
    """The same seed reproduces the same noise."""
    first, _ = generate(x0=0.0, dx=1.0, dt=1.0, steps=50, noise_std=2.0, seed=42)
    second, _ = generate(x0=0.0, dx=1.0, dt=1.0, steps=50, noise_std=2.0, seed=42)
    assert np.array_equal(first, second)


def test_injected_rng_matches_seed():
    """An injected generator is used for the noise draws."""
    from_seed, _ = generate(x0=0.0, dx=1.0, dt=1.0, steps=20, noise_std=1.0, seed=7)
    from_rng, _ = generate(
        x0=0.0, dx=1.0, dt=1.0, steps=20, noise_std=1.0, rng=np.random.default_rng(7)
    )
    assert np.array_equal(from_seed, from_rng)


def test_unseeded_calls_differ():
    """Without a seed each call draws fresh noise."""
    first, _ = generate(x0=0.0, dx=1.0, dt=1.0, steps=100, noise_std=1.0)
    second, _ = generate(x0=0.0, dx=1.0, dt=1.0, steps=100, noise_std=1.0)
    assert not np.array_equal(first, second)


def test_noise_statistics():
    """Residuals against the trajectory have roughly the requested spread."""
    observations, trajectory = generate(
        x0=10.0, dx=0.0, dt=1.0, steps=20_000, noise_std=3.0, seed=1
    )
    noise = observations - trajectory[1:]
    assert noise.mean() == pytest.approx(0.0, abs=0.1)
    assert noise.std() == pytest.approx(3.0, rel=0.05)


def test_outputs_are_read_only():
    """Returned sequences cannot be modified in place."""
    observations, trajectory = generate(x0=0.0, dx=1.0, dt=1.0, steps=3, noise_std=1.0)
    with pytest.raises(ValueError):
        observations[0] = 1.0
    with pytest.raises(ValueError):
        trajectory[0] = 1.0


@pytest.mark.parametrize("steps", [0, -1])
def test_non_positive_steps_rejected(steps):
    """steps must be positive."""
    with pytest.raises(InvalidArgument, match="steps must be positive"):
        generate(x0=0.0, dx=1.0, dt=1.0, steps=steps, noise_std=1.0)


@pytest.mark.parametrize("steps", [2.5, True, "3"])
def test_non_integer_steps_rejected(steps):
    """steps must be an integer."""
    with pytest.raises(InvalidArgument, match="steps must be an integer"):
        generate(x0=0.0, dx=1.0, dt=1.0, steps=steps, noise_std=1.0)


def test_negative_noise_rejected():
    """noise_std must not be negative."""
    with pytest.raises(InvalidArgument, match="noise_std"):
        generate(x0=0.0, dx=1.0, dt=1.0, steps=5, noise_std=-0.1)


def test_non_finite_parameters_rejected():
    """NaN and infinite inputs are rejected."""
    with pytest.raises(InvalidArgument, match="x0 must be finite"):
        generate(x0=float("nan"), dx=1.0, dt=1.0, steps=5, noise_std=0.0)
    with pytest.raises(InvalidArgument, match="noise_std must be finite"):
        generate(x0=0.0, dx=1.0, dt=1.0, steps=5, noise_std=float("inf"))


def test_seed_and_rng_are_exclusive():
    """Passing both a seed and a generator is an error."""
    with pytest.raises(InvalidArgument, match="either seed or rng"):
        generate(
            x0=0.0, dx=1.0, dt=1.0, steps=5, noise_std=1.0,
            seed=1, rng=np.random.default_rng(1),
        )


def test_invalid_argument_is_value_error():
    """InvalidArgument can be caught as ValueError."""
    with pytest.raises(ValueError):
        SignalParameters(x0=0.0, dx=1.0, dt=1.0, steps=0, noise_std=0.0)


def test_signal_parameters_coerce_numpy_scalars():
    """numpy scalars are accepted and stored as plain Python numbers."""
    params = SignalParameters(
        x0=np.float32(1.5), dx=np.int64(2), dt=1, steps=np.int64(4), noise_std=0
    )
    assert type(params.x0) is float
    assert type(params.steps) is int
    assert params.dx == 2.0
