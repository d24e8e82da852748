"""Drive a plain easing curve as a timed motion."""
from __future__ import annotations

from dataclasses import dataclass

from tick_motion.easing import EASINGS, EasingCurve
from tick_motion.types import DEFAULT_TOLERANCE, ConfigurationError, Tolerance, require_finite


@dataclass(frozen=True)
class CurveMotion:
    """Moves from ``start`` to ``end`` over ``duration`` seconds along ``curve``.

    Easing curves carry no physics, so velocity is a finite difference
    with step ``tolerance.time``, taken inside [0, duration]. Outside that
    window the leg is still. A zero duration is a jump straight to ``end``.
    """

    start: float
    end: float
    duration: float
    curve: EasingCurve = EASINGS["linear"]
    tolerance: Tolerance = DEFAULT_TOLERANCE

    def __post_init__(self) -> None:
        require_finite(start=self.start, end=self.end, duration=self.duration)
        if self.duration < 0.0:
            raise ConfigurationError(f"duration must be non-negative, got {self.duration}")

    def position(self, t: float) -> float:
        u = 1.0 if self.duration == 0.0 else max(0.0, min(1.0, t / self.duration))
        if u == 0.0:
            return self.start
        if u == 1.0:
            return self.end
        return self.start + (self.end - self.start) * self.curve.transform(u)

    def velocity(self, t: float) -> float:
        if self.duration == 0.0 or not 0.0 <= t <= self.duration:
            return 0.0
        # one-sided within a step of either end
        low = max(t - self.tolerance.time, 0.0)
        high = min(t + self.tolerance.time, self.duration)
        return (self.position(high) - self.position(low)) / (high - low)

    def is_done(self, t: float) -> bool:
        return t >= self.duration

    def as_progress_curve(self, t01: float) -> float:
        return self.curve.transform(t01)
