"""Constant-acceleration (projectile) motion."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tick_motion.base import MotionModel
from tick_motion.types import DEFAULT_TOLERANCE, Tolerance, require_finite


def arrival_time(start: float, end: float, acceleration: float, velocity: float) -> float:
    """Earliest t >= 0 with start + v*t + a*t^2/2 == end, or inf if never."""
    displacement = end - start
    if displacement == 0.0:
        return 0.0
    if acceleration == 0.0:
        if velocity == 0.0 or displacement / velocity < 0.0:
            return math.inf
        return displacement / velocity
    discriminant = velocity * velocity + 2.0 * acceleration * displacement
    if discriminant < 0.0:
        return math.inf
    root = math.sqrt(discriminant)
    candidates = [
        t
        for t in ((-velocity + root) / acceleration, (-velocity - root) / acceleration)
        if t >= 0.0
    ]
    return min(candidates) if candidates else math.inf


@dataclass(frozen=True)
class Gravity(MotionModel):
    """Motion under a constant signed acceleration ``gravity``.

    The body never comes to rest, so it counts as done once it has reached
    ``end`` (within tolerance.distance) or passed it. ``duration`` is the
    arrival time, inf when the target is never reached.
    """

    gravity: float
    start: float
    end: float
    initial_velocity: float = 0.0
    tolerance: Tolerance = DEFAULT_TOLERANCE
    duration: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        require_finite(
            gravity=self.gravity,
            start=self.start,
            end=self.end,
            initial_velocity=self.initial_velocity,
        )
        object.__setattr__(
            self,
            "duration",
            arrival_time(self.start, self.end, self.gravity, self.initial_velocity),
        )
        self._report_duration()

    def position(self, t: float) -> float:
        return self.start + self.initial_velocity * t + 0.5 * self.gravity * t * t

    def velocity(self, t: float) -> float:
        return self.initial_velocity + self.gravity * t

    def is_done(self, t: float) -> bool:
        overshoot = self.position(t) - self.end
        if abs(overshoot) <= self.tolerance.distance:
            return True
        return overshoot * (self.end - self.start) > 0.0

    def copy_with(
        self,
        *,
        tolerance: Tolerance | None = None,
        start: float | None = None,
        end: float | None = None,
        initial_velocity: float | None = None,
        duration: float | None = None,
        duration_scale: float | None = None,
    ) -> Gravity:
        seconds = self._requested_duration(initial_velocity, duration, duration_scale)
        if seconds == 0.0:
            return self._resting_on(end, tolerance)
        return Gravity(
            gravity=self.gravity,
            start=self.start if start is None else start,
            end=self.end if end is None else end,
            initial_velocity=self._velocity_for(start, end, initial_velocity, seconds),
            tolerance=self.tolerance if tolerance is None else tolerance,
        )

    def solve_initial_velocity(self, start: float, end: float, duration: float) -> float:
        displacement = end - start
        if duration == 0.0:
            return 0.0 if displacement == 0.0 else math.copysign(math.inf, displacement)
        if self.gravity == 0.0:
            return displacement / duration
        return (displacement - 0.5 * self.gravity * duration * duration) / duration
