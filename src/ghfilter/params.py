"""Validated parameter sets for the generator and the filter."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

G_RANGE = (0.0, 1.0)
H_RANGE = (0.0, 2.0)


def require_finite(name: str, value: float) -> float:
    """Return ``value`` as a float, rejecting NaN, infinities and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value}")
    return value


def _require_in_range(name: str, value: float, bounds: tuple[float, float]) -> float:
    value = require_finite(name, value)
    low, high = bounds
    if not low <= value <= high:
        raise InvalidArgument(f"{name} must be in [{low}, {high}], got {value}")
    return value


@dataclass(frozen=True)
class SignalParameters:
    """Linear motion model and measurement noise for synthetic data."""

    x0: float
    dx: float
    dt: float
    steps: int
    noise_std: float

    def __post_init__(self) -> None:
        for name in ("x0", "dx", "dt"):
            object.__setattr__(self, name, require_finite(name, getattr(self, name)))
        if isinstance(self.steps, bool) or not isinstance(self.steps, numbers.Integral):
            raise InvalidArgument(f"steps must be an integer, got {self.steps!r}")
        if self.steps <= 0:
            raise InvalidArgument(f"steps must be positive, got {self.steps}")
        object.__setattr__(self, "steps", int(self.steps))
        noise_std = require_finite("noise_std", self.noise_std)
        if noise_std < 0:
            raise InvalidArgument(f"noise_std must be >= 0, got {noise_std}")
        object.__setattr__(self, "noise_std", noise_std)


@dataclass(frozen=True)
class GainSettings:
    """Gains and time step of a G-H filter.

    ``g`` is the position-correction gain: 0 ignores measurements, 1 trusts
    them fully. ``h`` is the rate-correction gain and is limited to ``[0, 2]``.
    ``dt`` must be strictly positive since the rate update divides by it.

    Gains outside the stability region ``4 - 2g - h > 0`` are accepted but
    logged as a warning, as the filter then oscillates or diverges.
    """

    g: float
    h: float
    dt: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "g", _require_in_range("g", self.g, G_RANGE))
        object.__setattr__(self, "h", _require_in_range("h", self.h, H_RANGE))
        dt = require_finite("dt", self.dt)
        if dt <= 0:
            raise InvalidArgument(f"dt must be positive, got {dt}")
        object.__setattr__(self, "dt", dt)
        if not self.is_stable():
            logger.warning(
                "Gains g=%s h=%s are outside the stability region (4 - 2g - h <= 0)",
                self.g,
                self.h,
            )

    def is_stable(self) -> bool:
        """Return True if the gains give a non-divergent filter."""
        return 4.0 - 2.0 * self.g - self.h > 0.0
