"""Shared value types and exceptions for motion models."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class MotionError(Exception):
    """Base class for errors raised by tick-motion."""


class ConfigurationError(MotionError, ValueError):
    """Raised at construction time for out-of-range or inconsistent parameters."""


class ContractError(MotionError, TypeError):
    """Raised when the API is used in an ambiguous or unsupported way."""


class UnsettledMotionError(MotionError, ArithmeticError):
    """Raised when a model that never settles is normalized to a progress curve."""

    def __init__(self, duration: float, message: str) -> None:
        self.duration = duration
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Tolerance:
    """Thresholds that define when a motion counts as settled.

    ``time`` is the step used when velocity has to be estimated by finite
    differences (plain easing curves have no analytic derivative).
    """

    distance: float = 1e-3
    velocity: float = 1e-3
    time: float = 1e-3

    def __post_init__(self) -> None:
        for name in ("distance", "velocity", "time"):
            value = getattr(self, name)
            if math.isnan(value) or value <= 0.0:
                raise ConfigurationError(f"tolerance {name} must be positive, got {value}")


DEFAULT_TOLERANCE = Tolerance()


class Regime(Enum):
    """Damping regime of a spring."""

    UNDERDAMPED = "underdamped"
    CRITICAL = "critical"
    OVERDAMPED = "overdamped"


def require_finite(**values: float) -> None:
    """Raise ConfigurationError naming the first non-finite keyword value."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise ConfigurationError(f"{name} must be finite, got {value}")
