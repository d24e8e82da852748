"""The contract shared by every closed-form motion model."""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from tick_motion.easing import EasingCurve, flip
from tick_motion.types import (
    ConfigurationError,
    ContractError,
    Tolerance,
    UnsettledMotionError,
)

logger = logging.getLogger(__name__)


class MotionModel(ABC):
    """A single-axis motion with a closed-form trajectory.

    Concrete models are frozen dataclasses: every derived quantity,
    ``duration`` included, is computed once while the instance is built.
    Retargeting never mutates a model; ``copy_with`` returns a new one.
    """

    start: float
    end: float
    initial_velocity: float
    tolerance: Tolerance
    duration: float

    @abstractmethod
    def position(self, t: float) -> float:
        """Position at ``t`` seconds after the start."""

    @abstractmethod
    def velocity(self, t: float) -> float:
        """Velocity at ``t`` seconds after the start, in units per second."""

    def is_done(self, t: float) -> bool:
        """True once both position and velocity are within tolerance of rest at ``end``."""
        return (
            abs(self.position(t) - self.end) <= self.tolerance.distance
            and abs(self.velocity(t)) <= self.tolerance.velocity
        )

    @abstractmethod
    def copy_with(
        self,
        *,
        tolerance: Tolerance | None = None,
        start: float | None = None,
        end: float | None = None,
        initial_velocity: float | None = None,
        duration: float | None = None,
        duration_scale: float | None = None,
    ) -> MotionModel:
        """Return a new model of the same family with the given overrides.

        When ``duration`` or ``duration_scale`` is given, the new initial
        velocity comes from ``solve_initial_velocity`` so the motion reaches
        its end in that many seconds. ``duration_scale`` alone scales the
        current duration. A request for zero seconds returns a model already
        at rest on ``end``. Passing ``initial_velocity`` together with either
        raises ContractError.
        """

    @abstractmethod
    def solve_initial_velocity(self, start: float, end: float, duration: float) -> float:
        """Velocity that carries this family from ``start`` to ``end`` in ``duration`` seconds."""

    def as_progress_curve(self, t01: float) -> float:
        """Sample the trajectory at normalized time ``t01`` in [0, 1].

        Returns ``t01`` itself at 0 and 1. Raises UnsettledMotionError for
        interior points when ``duration`` is NaN or infinite.
        """
        if t01 == 0.0 or t01 == 1.0:
            return t01
        if not math.isfinite(self.duration):
            raise UnsettledMotionError(
                self.duration,
                f"{type(self).__name__} never settles (duration={self.duration}); "
                "it cannot be normalized to a progress curve",
            )
        return self.position(t01 * self.duration)

    def transform(self, t01: float) -> float:
        return self.as_progress_curve(t01)

    @property
    def flipped(self) -> EasingCurve:
        return flip(self)

    def _requested_duration(
        self,
        initial_velocity: float | None,
        duration: float | None,
        duration_scale: float | None,
    ) -> float | None:
        if initial_velocity is not None and (duration is not None or duration_scale is not None):
            raise ContractError(
                "copy_with takes either initial_velocity or duration/duration_scale, not both"
            )
        if duration is None and duration_scale is None:
            return None
        seconds = self.duration if duration is None else duration
        if duration_scale == 0.0:
            seconds = 0.0
        elif duration_scale is not None:
            seconds *= duration_scale
        if math.isnan(seconds) or seconds < 0.0:
            raise ConfigurationError(f"requested duration must be non-negative, got {seconds}")
        return seconds

    def _velocity_for(
        self,
        start: float | None,
        end: float | None,
        initial_velocity: float | None,
        seconds: float | None,
    ) -> float:
        if seconds is None:
            return self.initial_velocity if initial_velocity is None else initial_velocity
        return self.solve_initial_velocity(
            self.start if start is None else start,
            self.end if end is None else end,
            seconds,
        )

    def _resting_on(self, end: float | None, tolerance: Tolerance | None) -> MotionModel:
        """Copy already at rest on ``end``; the answer to a zero-second request."""
        target = self.end if end is None else end
        return self.copy_with(tolerance=tolerance, start=target, end=target, initial_velocity=0.0)

    def _report_duration(self) -> None:
        if math.isfinite(self.duration):
            logger.debug(f"{type(self).__name__} settles after {self.duration:.6f}s")
        else:
            logger.warning(
                f"{type(self).__name__} from {self.start} to {self.end} "
                f"(v0={self.initial_velocity}) never settles: duration={self.duration}"
            )
