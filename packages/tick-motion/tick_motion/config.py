"""Numeric solver configuration."""
from __future__ import annotations

from dataclasses import dataclass

from tick_motion.types import ConfigurationError


@dataclass(frozen=True)
class SolverConfig:
    """Immutable knobs for the root finders used at model construction.

    Attributes:
        max_time: Cap, in simulated seconds, for the spring settle search.
        initial_step: First upper bound tried when bracketing the settle time.
        bisection_iterations: Refinement steps once a bracket is found.
        newton_iterations: Steps of Newton's method for friction rest time.
        epsilon: Magnitude below which solver denominators count as zero.
    """

    max_time: float = 60.0
    initial_step: float = 1e-4
    bisection_iterations: int = 30
    newton_iterations: int = 10
    epsilon: float = 1e-12

    def __post_init__(self) -> None:
        if not self.max_time > 0.0:
            raise ConfigurationError("max_time must be positive")
        if not 0.0 < self.initial_step < self.max_time:
            raise ConfigurationError("initial_step must be in (0, max_time)")
        if self.bisection_iterations < 1 or self.newton_iterations < 1:
            raise ConfigurationError("iteration counts must be at least 1")
        if not self.epsilon > 0.0:
            raise ConfigurationError("epsilon must be positive")


DEFAULT_SOLVER_CONFIG = SolverConfig()
