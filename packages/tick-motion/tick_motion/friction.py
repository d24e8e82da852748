"""Drag-decelerated motion.

Velocity decays geometrically, v(t) = v0 * drag^t, optionally minus a
constant deceleration that acts against the direction of travel:

    x(t) = start + v0 * (drag^t - 1) / ln(drag) - decel * t^2 / 2
    v(t) = v0 * drag^t - decel * t

``drag`` is the fraction of velocity kept after one second, in (0, 1).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from tick_motion.base import MotionModel
from tick_motion.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from tick_motion.solvers import newtons_method
from tick_motion.types import (
    DEFAULT_TOLERANCE,
    ConfigurationError,
    Tolerance,
    require_finite,
)

logger = logging.getLogger(__name__)


class FrictionMode(Enum):
    """How a friction model was specified, which also decides when it is done."""

    THROUGH = "through"  # passes end at end_velocity; done on arrival
    DRAG = "drag"  # coasts to rest; done when settled


@dataclass(frozen=True)
class Friction(MotionModel):
    """Friction motion leaving ``start`` at ``initial_velocity``.

    With a ``target`` the body passes through it (THROUGH mode); the end
    velocity and arrival time follow from the drag. Without one it coasts
    until it comes to rest (DRAG mode): ``end`` is where it stops, and from
    ``duration`` on it sits there with zero velocity.

    ``mode``, ``end``, ``end_velocity`` and ``duration`` are derived while
    the instance is built, so ``dataclasses.replace`` always yields a
    consistent model. ``Friction.through`` and ``Friction.with_drag`` are
    the usual constructors.
    """

    drag: float
    start: float
    initial_velocity: float
    target: float | None = None
    constant_deceleration: float = 0.0
    tolerance: Tolerance = DEFAULT_TOLERANCE
    solver: SolverConfig = field(default=DEFAULT_SOLVER_CONFIG, repr=False, compare=False)
    mode: FrictionMode = field(init=False, compare=False)
    end: float = field(init=False, compare=False)
    end_velocity: float = field(init=False, compare=False)
    duration: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        require_finite(
            drag=self.drag,
            start=self.start,
            initial_velocity=self.initial_velocity,
            constant_deceleration=self.constant_deceleration,
        )
        if self.constant_deceleration < 0.0:
            raise ConfigurationError("constant_deceleration must be non-negative")
        if self.target is None:
            mode = FrictionMode.DRAG
            end, end_velocity, duration = self._coast()
        else:
            require_finite(target=self.target)
            mode = FrictionMode.THROUGH
            end, end_velocity, duration = self._pass_through(self.target)
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "end_velocity", end_velocity)
        object.__setattr__(self, "duration", duration)
        logger.debug(
            f"Friction ({mode.value}): drag={self.drag:.6g} end={end:.6g} "
            f"end_velocity={end_velocity:.6g}"
        )
        self._report_duration()

    def _coast(self) -> tuple[float, float, float]:
        if not 0.0 < self.drag < 1.0:
            raise ConfigurationError(f"drag must be in (0, 1), got {self.drag}")
        v0 = self.initial_velocity
        drag_log = math.log(self.drag)
        decel = self._signed_deceleration
        if v0 == 0.0:
            duration = 0.0
        elif self.constant_deceleration > 0.0:
            duration = newtons_method(
                f=lambda t: v0 * self.drag**t - decel * t,
                df=lambda t: v0 * self.drag**t * drag_log - decel,
                initial_guess=0.0,
                iterations=self.solver.newton_iterations,
            )
            duration = max(duration, 0.0)
            logger.debug(
                f"Friction rest time {duration:.6g}s, "
                f"residual speed {abs(v0 * self.drag**duration - decel * duration):.3g}"
            )
        elif abs(v0) <= self.tolerance.velocity:
            duration = 0.0
        else:
            duration = math.log(self.tolerance.velocity / abs(v0)) / drag_log
        return _coast_position(self.start, v0, drag_log, decel, duration), 0.0, duration

    def _pass_through(self, target: float) -> tuple[float, float, float]:
        if self.constant_deceleration != 0.0:
            raise ConfigurationError(
                "constant_deceleration only applies to a coasting model without a target"
            )
        if not 0.0 < self.drag <= 1.0:
            raise ConfigurationError(f"drag must be in (0, 1], got {self.drag}")
        v0 = self.initial_velocity
        displacement = target - self.start
        if displacement == 0.0:
            if v0 != 0.0:
                raise ConfigurationError("a body already on its target must have zero velocity")
            return target, 0.0, 0.0
        if self.drag == 1.0:
            raise ConfigurationError("drag of 1.0 never slows down; only a body at rest may use it")
        if v0 * displacement <= 0.0:
            raise ConfigurationError(
                f"initial_velocity {v0} does not carry the body from {self.start} to {target}"
            )
        drag_log = math.log(self.drag)
        end_velocity = v0 + drag_log * displacement
        # exp/log round-off around an exact zero crossing
        if abs(end_velocity) <= self.solver.epsilon * abs(v0):
            end_velocity = 0.0
        if end_velocity * v0 < 0.0:
            raise ConfigurationError(
                f"drag {self.drag} stops the body before it reaches {target}"
            )
        if end_velocity == 0.0:
            return target, 0.0, math.inf
        return target, end_velocity, math.log(end_velocity / v0) / drag_log

    @classmethod
    def through(
        cls,
        start: float,
        end: float,
        initial_velocity: float,
        end_velocity: float = 0.0,
        tolerance: Tolerance = DEFAULT_TOLERANCE,
        solver: SolverConfig = DEFAULT_SOLVER_CONFIG,
    ) -> Friction:
        """Friction that leaves ``start`` at ``initial_velocity`` and crosses
        ``end`` at ``end_velocity``.

        ``end_velocity == 0`` only approaches ``end`` asymptotically, so the
        duration is inf. ``start == end`` gives a body already at rest.
        """
        require_finite(
            start=start, end=end, initial_velocity=initial_velocity, end_velocity=end_velocity
        )
        if start == end:
            return cls(
                drag=1.0,
                start=start,
                initial_velocity=0.0,
                target=end,
                tolerance=tolerance,
                solver=solver,
            )
        if initial_velocity == 0.0:
            raise ConfigurationError("a friction model needs a non-zero initial velocity to move")
        if initial_velocity * end_velocity < 0.0:
            raise ConfigurationError(
                "initial_velocity and end_velocity must not point in opposite directions"
            )
        drag_log = (initial_velocity - end_velocity) / (start - end)
        if not drag_log < 0.0:
            raise ConfigurationError(
                f"cannot decelerate from {initial_velocity} to {end_velocity} "
                f"while travelling {start} -> {end}"
            )
        drag = math.exp(drag_log)
        if drag == 0.0:
            raise ConfigurationError("required drag underflows; the span is too short")
        return cls(
            drag=drag,
            start=start,
            initial_velocity=initial_velocity,
            target=end,
            tolerance=tolerance,
            solver=solver,
        )

    @classmethod
    def with_drag(
        cls,
        drag: float,
        start: float,
        initial_velocity: float,
        constant_deceleration: float = 0.0,
        tolerance: Tolerance = DEFAULT_TOLERANCE,
        solver: SolverConfig = DEFAULT_SOLVER_CONFIG,
    ) -> Friction:
        """Friction that coasts from ``start`` until it comes to rest.

        With a constant deceleration the rest time is the root of v(t) = 0,
        found with ``solver.newton_iterations`` steps of Newton's method.
        Without one the velocity never reaches zero, so the body rests once
        its speed drops to ``tolerance.velocity``.
        """
        return cls(
            drag=drag,
            start=start,
            initial_velocity=initial_velocity,
            constant_deceleration=constant_deceleration,
            tolerance=tolerance,
            solver=solver,
        )

    @property
    def _rest_time(self) -> float:
        if self.mode is FrictionMode.DRAG or self.start == self.end:
            return self.duration
        return math.inf

    @property
    def _signed_deceleration(self) -> float:
        return math.copysign(self.constant_deceleration, self.initial_velocity)

    def position(self, t: float) -> float:
        if t >= self._rest_time:
            return self.end
        return _coast_position(
            self.start,
            self.initial_velocity,
            math.log(self.drag),
            self._signed_deceleration,
            t,
        )

    def velocity(self, t: float) -> float:
        if t >= self._rest_time:
            return 0.0
        return self.initial_velocity * self.drag**t - self._signed_deceleration * t

    def is_done(self, t: float) -> bool:
        if self.mode is FrictionMode.DRAG:
            return super().is_done(t)
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
    ) -> Friction:
        """New friction model with the same drag; see MotionModel.copy_with.

        A requested duration yields a THROUGH model that crosses ``end`` at
        exactly that time. Without one, a DRAG model with no new ``end``
        coasts again from the new start; anything else passes through
        ``end`` at whatever speed the drag leaves it.
        """
        seconds = self._requested_duration(initial_velocity, duration, duration_scale)
        if seconds == 0.0:
            return self._resting_on(end, tolerance)
        tolerance = self.tolerance if tolerance is None else tolerance
        velocity = self._velocity_for(start, end, initial_velocity, seconds)
        new_start = self.start if start is None else start
        if self.mode is FrictionMode.DRAG and end is None and seconds is None:
            return Friction(
                self.drag,
                new_start,
                velocity,
                constant_deceleration=self.constant_deceleration,
                tolerance=tolerance,
                solver=self.solver,
            )
        return Friction(
            self.drag,
            new_start,
            velocity,
            target=self.end if end is None else end,
            tolerance=tolerance,
            solver=self.solver,
        )

    def solve_initial_velocity(self, start: float, end: float, duration: float) -> float:
        """Invert x(T) = start + v0 * (1 - e^(-k*T)) / k with decay rate k = -ln(drag)."""
        k = -math.log(self.drag)
        denominator = 1.0 - math.exp(-k * duration)
        if abs(denominator) < 1e-10:
            return 0.0
        return (end - start) * k / denominator


def _coast_position(
    start: float, velocity: float, drag_log: float, decel: float, t: float
) -> float:
    return start + velocity * (math.exp(drag_log * t) - 1.0) / drag_log - 0.5 * decel * t * t
