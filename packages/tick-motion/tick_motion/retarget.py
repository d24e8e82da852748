"""Start and interrupt motion legs without a jump in position or velocity."""
from __future__ import annotations

import logging
from typing import NamedTuple

from tick_motion.base import MotionModel
from tick_motion.interpolation import CurveMotion
from tick_motion.physics import Physics, is_simulation
from tick_motion.types import DEFAULT_TOLERANCE, ConfigurationError, ContractError, Tolerance

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    position: float
    velocity: float


def sample(model: MotionModel | CurveMotion, t: float) -> Sample:
    return Sample(model.position(t), model.velocity(t))


def retarget(
    model: MotionModel,
    elapsed: float,
    end: float,
    *,
    tolerance: Tolerance | None = None,
) -> MotionModel:
    """New model that continues ``model`` from where it is at ``elapsed``
    and heads for ``end`` instead.

    Position and velocity carry over, so the handoff is seamless.
    """
    state = sample(model, elapsed)
    logger.debug(
        f"retarget {type(model).__name__} at t={elapsed:.4f}: "
        f"x={state.position:.6g} v={state.velocity:.6g} -> {end}"
    )
    return model.copy_with(
        tolerance=tolerance,
        start=state.position,
        end=end,
        initial_velocity=state.velocity,
    )


def plan_leg(
    physics: Physics,
    start: float,
    end: float,
    *,
    duration: float | None = None,
    duration_scale: float | None = None,
    initial_velocity: float | None = None,
    tolerance: Tolerance | None = None,
) -> MotionModel | CurveMotion:
    """Build the motion for one leg from ``start`` to ``end``.

    Motion models are re-parameterized with ``copy_with``; when a duration
    (or scale) is given the initial velocity is solved for it. Easing
    curves need an explicit ``duration`` and become a CurveMotion. A zero
    duration yields a leg already at rest on ``end``.
    """
    if not is_simulation(physics):
        if duration is None:
            raise ContractError(f"easing curve {physics.name!r} needs an explicit duration")
        if initial_velocity is not None:
            raise ContractError("easing curves do not accept an initial velocity")
        seconds = duration if duration_scale is None else duration * duration_scale
        if seconds < 0.0:
            raise ConfigurationError(f"duration must be non-negative, got {seconds}")
        return CurveMotion(
            start,
            end,
            seconds,
            curve=physics,
            tolerance=DEFAULT_TOLERANCE if tolerance is None else tolerance,
        )

    if initial_velocity is not None and (duration is not None or duration_scale is not None):
        raise ContractError("plan_leg takes either initial_velocity or a duration, not both")
    return physics.copy_with(
        tolerance=tolerance,
        start=start,
        end=end,
        initial_velocity=initial_velocity,
        duration=duration,
        duration_scale=duration_scale,
    )

