"""Per-axis composition of motion into N-dimensional vectors."""
from __future__ import annotations

import math

from tick_motion import vec
from tick_motion.base import MotionModel
from tick_motion.easing import EasingCurve
from tick_motion.physics import Physics, progress
from tick_motion.types import ConfigurationError, ContractError
from tick_motion.vec import Vec


class SimulationND:
    """N axes of physics sampled at the same instant.

    The axes must all be motion models or all be easing curves. Vector
    position, velocity and done-ness exist only for motion models; the
    normalized ``transform`` works for both.
    """

    def __init__(self, *axes: Physics) -> None:
        if not axes:
            raise ConfigurationError("at least one axis is required")
        for axis in axes:
            if not isinstance(axis, (MotionModel, EasingCurve)):
                raise ConfigurationError(
                    f"axes must be MotionModel or EasingCurve, got {type(axis).__name__}"
                )
        kinds = {isinstance(axis, MotionModel) for axis in axes}
        if len(kinds) > 1:
            raise ConfigurationError(
                "axes must be all motion models or all easing curves, not a mix"
            )
        self._axes = tuple(axes)
        self._physics_based = kinds == {True}

    @property
    def axes(self) -> tuple[Physics, ...]:
        return self._axes

    @property
    def dimensions(self) -> int:
        return len(self._axes)

    @property
    def is_physics_based(self) -> bool:
        return self._physics_based

    def _models(self, operation: str) -> tuple[MotionModel, ...]:
        if not self._physics_based:
            raise ContractError(f"{operation} is only available when every axis is a motion model")
        return self._axes  # type: ignore[return-value]

    def position(self, t: float) -> Vec:
        return tuple(axis.position(t) for axis in self._models("position"))

    def velocity(self, t: float) -> Vec:
        return tuple(axis.velocity(t) for axis in self._models("velocity"))

    def is_done(self, t: float) -> bool:
        return all(axis.is_done(t) for axis in self._models("is_done"))

    @property
    def duration(self) -> float:
        """Time until the slowest axis settles; NaN if any axis never settles."""
        durations = [axis.duration for axis in self._models("duration")]
        if any(math.isnan(d) for d in durations):
            return math.nan
        return max(durations)

    @property
    def end(self) -> Vec:
        return tuple(axis.end for axis in self._models("end"))

    def speed(self, t: float) -> float:
        return vec.norm(self.velocity(t))

    def distance_to_end(self, t: float) -> float:
        return vec.distance(self.position(t), self.end)

    def transform(self, t01: float) -> Vec:
        return tuple(progress(axis, t01) for axis in self._axes)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SimulationND) and self._axes == other._axes

    def __hash__(self) -> int:
        return hash(self._axes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(axis) for axis in self._axes)})"


class Simulation2D(SimulationND):
    """Two-axis composition: ``x`` and ``y`` physics of the same kind."""

    def __init__(self, x: Physics, y: Physics) -> None:
        super().__init__(x, y)

    @property
    def x_physics(self) -> Physics:
        return self._axes[0]

    @property
    def y_physics(self) -> Physics:
        return self._axes[1]
