"""Clamp the sampled output of another motion model."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_motion.base import MotionModel
from tick_motion.types import ConfigurationError, Tolerance


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class ClampedMotion(MotionModel):
    """Wraps ``inner``, clamping position into [x_min, x_max] and velocity
    into [dx_min, dx_max].

    Timing is untouched: ``is_done``, ``duration`` and the start state all
    come from the inner model.
    """

    inner: MotionModel
    x_min: float = -math.inf
    x_max: float = math.inf
    dx_min: float = -math.inf
    dx_max: float = math.inf

    def __post_init__(self) -> None:
        if not self.x_max >= self.x_min:
            raise ConfigurationError(f"x_max ({self.x_max}) must be >= x_min ({self.x_min})")
        if not self.dx_max >= self.dx_min:
            raise ConfigurationError(f"dx_max ({self.dx_max}) must be >= dx_min ({self.dx_min})")

    @property
    def start(self) -> float:
        return self.inner.start

    @property
    def end(self) -> float:
        return self.inner.end

    @property
    def initial_velocity(self) -> float:
        return self.inner.initial_velocity

    @property
    def tolerance(self) -> Tolerance:
        return self.inner.tolerance

    @property
    def duration(self) -> float:
        return self.inner.duration

    def position(self, t: float) -> float:
        return _clamp(self.inner.position(t), self.x_min, self.x_max)

    def velocity(self, t: float) -> float:
        return _clamp(self.inner.velocity(t), self.dx_min, self.dx_max)

    def is_done(self, t: float) -> bool:
        return self.inner.is_done(t)

    def copy_with(
        self,
        *,
        tolerance: Tolerance | None = None,
        start: float | None = None,
        end: float | None = None,
        initial_velocity: float | None = None,
        duration: float | None = None,
        duration_scale: float | None = None,
    ) -> ClampedMotion:
        return ClampedMotion(
            self.inner.copy_with(
                tolerance=tolerance,
                start=start,
                end=end,
                initial_velocity=initial_velocity,
                duration=duration,
                duration_scale=duration_scale,
            ),
            x_min=self.x_min,
            x_max=self.x_max,
            dx_min=self.dx_min,
            dx_max=self.dx_max,
        )

    def solve_initial_velocity(self, start: float, end: float, duration: float) -> float:
        return self.inner.solve_initial_velocity(start, end, duration)
