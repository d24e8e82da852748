"""The ``Physics`` union: a plain easing curve or a full motion model.

Anything that accepts physics takes either variant. Consumers that only
need progress go through ``progress``; consumers that need velocity check
``is_simulation`` first.
"""
from __future__ import annotations

from tick_motion.base import MotionModel
from tick_motion.easing import EasingCurve
from tick_motion.types import ContractError

Physics = EasingCurve | MotionModel


def is_simulation(physics: Physics) -> bool:
    """True for motion models, False for plain easing curves."""
    if isinstance(physics, MotionModel):
        return True
    if isinstance(physics, EasingCurve):
        return False
    raise ContractError(f"expected an EasingCurve or MotionModel, got {type(physics).__name__}")


def progress(physics: Physics, t01: float) -> float:
    """Normalized progress of either variant at normalized time ``t01``."""
    if is_simulation(physics):
        return physics.as_progress_curve(t01)
    return physics.transform(t01)
