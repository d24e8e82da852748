"""tick-motion - Closed-form physics motion for animation."""
from __future__ import annotations

from tick_motion.base import MotionModel
from tick_motion.clamped import ClampedMotion
from tick_motion.composite import Simulation2D, SimulationND
from tick_motion.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from tick_motion.easing import EASINGS, Curve, EasingCurve, flip
from tick_motion.friction import Friction, FrictionMode
from tick_motion.gravity import Gravity
from tick_motion.interpolation import CurveMotion
from tick_motion.physics import Physics, is_simulation, progress
from tick_motion.retarget import Sample, plan_leg, retarget, sample
from tick_motion.spring import (
    PRESET_INITIAL_VELOCITIES,
    SPRING_PRESETS,
    Spring,
    SpringDescription,
)
from tick_motion.types import (
    DEFAULT_TOLERANCE,
    ConfigurationError,
    ContractError,
    MotionError,
    Regime,
    Tolerance,
    UnsettledMotionError,
)

__all__ = [
    "MotionModel",
    "Spring",
    "SpringDescription",
    "PRESET_INITIAL_VELOCITIES",
    "SPRING_PRESETS",
    "Gravity",
    "Friction",
    "FrictionMode",
    "ClampedMotion",
    "SimulationND",
    "Simulation2D",
    "CurveMotion",
    "Curve",
    "EasingCurve",
    "EASINGS",
    "flip",
    "Physics",
    "is_simulation",
    "progress",
    "Sample",
    "sample",
    "retarget",
    "plan_leg",
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "Regime",
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
    "MotionError",
    "ConfigurationError",
    "ContractError",
    "UnsettledMotionError",
]
