"""G-H (alpha-beta) filter over a one-dimensional signal."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Iterable

import numpy as np

from .errors import InvalidArgument, NumericDegenerate
from .numeric import GHState, predict, update
from .params import GainSettings, require_finite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepRecord:
    """Values produced by one predict/update step."""

    step: int
    measurement: float
    prediction: float
    residual: float
    estimate: float
    rate: float


StepObserver = Callable[[StepRecord], None]


def _as_observations(observations: Iterable[float]) -> np.ndarray:
    try:
        if not isinstance(observations, (Sequence, np.ndarray)):
            observations = list(observations)
        values = np.asarray(observations, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument("observations must be a sequence of real numbers") from e
    if values.ndim != 1:
        raise InvalidArgument(
            f"observations must be one-dimensional, got shape {values.shape}"
        )
    if not np.all(np.isfinite(values)):
        raise InvalidArgument("observations must be finite")
    return values


class GHFilter:
    """A G-H filter with fixed gains and time step.

    The filter holds configuration only. Each call to :meth:`run` starts from
    the supplied priors and keeps its state local, so one instance can be
    shared between threads.
    """

    def __init__(self, g: float, h: float, dt: float) -> None:
        self.settings = GainSettings(g=g, h=h, dt=dt)

    @property
    def g(self) -> float:
        return self.settings.g

    @property
    def h(self) -> float:
        return self.settings.h

    @property
    def dt(self) -> float:
        return self.settings.dt

    def run(
        self,
        observations: Iterable[float],
        x0: float,
        dx0: float,
        on_step: StepObserver | None = None,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Filter ``observations`` starting from the prior ``(x0, dx0)``.

        Returns ``(estimates, predictions)``. ``estimates[0]`` is the prior
        ``x0`` and ``estimates[k]`` the corrected position after observation
        ``k``; ``predictions[k - 1]`` is the forecast made before it.

        ``on_step`` is called once per step, in order, after the whole pass
        has succeeded. It is never called if the pass fails.
        """
        values = _as_observations(observations)
        state = GHState(x=require_finite("x0", x0), dx=require_finite("dx0", dx0))
        g, h, dt = self.settings.g, self.settings.h, self.settings.dt

        estimates = np.empty(values.shape[0] + 1, dtype=float)
        predictions = np.empty(values.shape[0], dtype=float)
        estimates[0] = state.x
        records: list[StepRecord] = []

        for k, z in enumerate(values.tolist(), start=1):
            prediction = predict(state, dt)
            state, residual = update(state, prediction, z, dt, g, h)
            if not all(map(math.isfinite, (prediction, state.x, state.dx))):
                raise NumericDegenerate(
                    f"Non-finite value at step {k}: prediction={prediction} "
                    f"estimate={state.x} rate={state.dx}"
                )
            predictions[k - 1] = prediction
            estimates[k] = state.x
            logger.debug(
                "step=%d z=%s prediction=%s residual=%s estimate=%s rate=%s",
                k,
                z,
                prediction,
                residual,
                state.x,
                state.dx,
            )
            if on_step is not None:
                records.append(
                    StepRecord(
                        step=k,
                        measurement=z,
                        prediction=prediction,
                        residual=residual,
                        estimate=state.x,
                        rate=state.dx,
                    )
                )

        estimates.setflags(write=False)
        predictions.setflags(write=False)
        for record in records:
            on_step(record)
        return estimates, predictions


def gh_filter(
    observations: Iterable[float],
    x0: float,
    dx0: float,
    dt: float,
    g: float,
    h: float,
    *,
    on_step: StepObserver | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Run a G-H filter over ``observations``.

    Args:
        observations: Measurements in arrival order.
        x0: Prior position.
        dx0: Prior rate of change.
        dt: Time between measurements, must be positive.
        g: Position-correction gain in ``[0, 1]``.
        h: Rate-correction gain in ``[0, 2]``.
        on_step: Optional callback receiving a :class:`StepRecord` per step.

    Returns:
        ``(estimates, predictions)`` with ``len(observations) + 1`` and
        ``len(observations)`` entries respectively.

    Raises:
        InvalidArgument: If a parameter or observation is invalid. Raised
            before any output is produced.
        NumericDegenerate: If the recursion overflows.
    """
    return GHFilter(g=g, h=h, dt=dt).run(observations, x0, dx0, on_step=on_step)
