"""Damped harmonic oscillator in closed form.

The offset from the rest position, y(t) = x(t) - end, obeys
m*y'' + c*y' + k*y = 0 with y(0) = start - end and y'(0) = initial_velocity.
With w0 = sqrt(k/m) and zeta = c / (2*sqrt(k*m)) the solution takes one of
three shapes:

    underdamped (zeta < 1):  e^(-zeta*w0*t) * (c1*cos(wd*t) + c2*sin(wd*t))
    critical    (zeta = 1):  e^(-w0*t) * (c1 + c2*t)
    overdamped  (zeta > 1):  c1*e^(r1*t) + c2*e^(r2*t)

The shape is picked once per spring; sampling never re-checks zeta.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tick_motion.base import MotionModel
from tick_motion.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from tick_motion.solvers import earliest_true
from tick_motion.types import (
    DEFAULT_TOLERANCE,
    ConfigurationError,
    Regime,
    Tolerance,
    require_finite,
)

_CRITICAL_BAND = 1e-12


@dataclass(frozen=True)
class SpringDescription:
    """Mass, stiffness and damping of a spring."""

    mass: float
    stiffness: float
    damping: float
    regime: Regime = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        require_finite(mass=self.mass, stiffness=self.stiffness, damping=self.damping)
        if self.mass <= 0.0:
            raise ConfigurationError(f"mass must be positive, got {self.mass}")
        if self.stiffness <= 0.0:
            raise ConfigurationError(f"stiffness must be positive, got {self.stiffness}")
        if self.damping < 0.0:
            raise ConfigurationError(f"damping must be non-negative, got {self.damping}")
        zeta = self.damping_ratio
        if abs(zeta - 1.0) < _CRITICAL_BAND:
            regime = Regime.CRITICAL
        elif zeta < 1.0:
            regime = Regime.UNDERDAMPED
        else:
            regime = Regime.OVERDAMPED
        object.__setattr__(self, "regime", regime)

    @classmethod
    def from_response(
        cls,
        duration: float,
        damping_fraction: float,
        mass: float = 1.0,
    ) -> SpringDescription:
        """Spring whose natural period is ``duration`` seconds.

        stiffness = (2*pi / duration)^2, damping = 4*pi*damping_fraction / duration.
        """
        if not duration > 0.0 or not math.isfinite(duration):
            raise ConfigurationError(f"duration must be positive and finite, got {duration}")
        return cls(
            mass=mass,
            stiffness=(2.0 * math.pi / duration) ** 2,
            damping=4.0 * math.pi * damping_fraction / duration,
        )

    @property
    def angular_frequency(self) -> float:
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self) -> float:
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))


SPRING_PRESETS: dict[str, SpringDescription] = {
    # swift, snappy, minimal oscillation
    "swift": SpringDescription(mass=0.3, stiffness=280.0, damping=18.0),
    # smooth with a slight bounce
    "elegant": SpringDescription.from_response(0.35, 0.86, mass=0.6),
    "snap": SpringDescription(mass=0.4, stiffness=320.0, damping=20.0),
    "stern": SpringDescription(mass=1.2, stiffness=550.0, damping=30.0),
    "float": SpringDescription(mass=2.0, stiffness=290.0, damping=15.0),
    "buoyant": SpringDescription(mass=10.0, stiffness=900.0, damping=80.0),
    "fling": SpringDescription(mass=4.0, stiffness=800.0, damping=80.0),
    "slow": SpringDescription(mass=0.2, stiffness=26.7, damping=4.1),
    "bob": SpringDescription(mass=0.1, stiffness=131.1, damping=2.3),
    # cartoonish, rings for a long time
    "boingoingoing": SpringDescription(mass=0.1, stiffness=1000.0, damping=1.5),
}

# Presets that launch with a small push unless the caller passes its own.
PRESET_INITIAL_VELOCITIES: dict[str, float] = {
    "elegant": -1.0,
}


@dataclass(frozen=True, slots=True)
class _Underdamped:
    decay: float
    omega: float
    c1: float
    c2: float
    v0: float
    k: float

    def offset(self, t: float) -> float:
        wt = self.omega * t
        return math.exp(-self.decay * t) * (self.c1 * math.cos(wt) + self.c2 * math.sin(wt))

    def rate(self, t: float) -> float:
        wt = self.omega * t
        return math.exp(-self.decay * t) * (self.v0 * math.cos(wt) - self.k * math.sin(wt))


@dataclass(frozen=True, slots=True)
class _Critical:
    w0: float
    c1: float
    c2: float
    v0: float

    def offset(self, t: float) -> float:
        return math.exp(-self.w0 * t) * (self.c1 + self.c2 * t)

    def rate(self, t: float) -> float:
        return math.exp(-self.w0 * t) * (self.v0 - self.w0 * self.c2 * t)


@dataclass(frozen=True, slots=True)
class _Overdamped:
    r1: float
    r2: float
    c1: float
    c2: float
    v0: float

    def offset(self, t: float) -> float:
        return self.c1 * math.exp(self.r1 * t) + self.c2 * math.exp(self.r2 * t)

    def rate(self, t: float) -> float:
        e1 = math.exp(self.r1 * t)
        e2 = math.exp(self.r2 * t)
        return self.v0 * e2 + self.r1 * self.c1 * (e1 - e2)


_Solution = _Underdamped | _Critical | _Overdamped


def _solve(description: SpringDescription, offset: float, v0: float) -> _Solution:
    w0 = description.angular_frequency
    zeta = description.damping_ratio
    if description.regime is Regime.CRITICAL:
        return _Critical(w0=w0, c1=offset, c2=v0 + w0 * offset, v0=v0)
    if description.regime is Regime.UNDERDAMPED:
        decay = zeta * w0
        wd = w0 * math.sqrt(1.0 - zeta * zeta)
        c2 = (v0 + decay * offset) / wd
        return _Underdamped(
            decay=decay, omega=wd, c1=offset, c2=c2, v0=v0, k=decay * c2 + wd * offset
        )
    root = w0 * math.sqrt(zeta * zeta - 1.0)
    r1 = -zeta * w0 + root
    r2 = -zeta * w0 - root
    c2 = (offset * r1 - v0) / (r1 - r2)
    return _Overdamped(r1=r1, r2=r2, c1=offset - c2, c2=c2, v0=v0)


def solve_spring_velocity(
    description: SpringDescription,
    start: float,
    end: float,
    duration: float,
    epsilon: float = 1e-12,
) -> float:
    """Initial velocity that puts the spring exactly on ``end`` at ``duration``.

    Returns 0.0 when no push is needed or when the regime's formula has a
    vanishing denominator (sin(wd*T) == 0, T == 0, or 1 - e^((r2-r1)T) == 0).
    """
    offset = start - end
    if abs(offset) < epsilon:
        return 0.0

    w0 = description.angular_frequency
    zeta = description.damping_ratio

    if description.regime is Regime.UNDERDAMPED:
        wd = w0 * math.sqrt(1.0 - zeta * zeta)
        sin_wt = math.sin(wd * duration)
        if abs(sin_wt) < epsilon:
            return 0.0
        return -offset * (zeta * w0 + wd * math.cos(wd * duration) / sin_wt)

    if description.regime is Regime.CRITICAL:
        if abs(duration) < epsilon:
            return 0.0
        return -offset * (1.0 / duration + w0)

    root = w0 * math.sqrt(zeta * zeta - 1.0)
    r1 = -zeta * w0 + root
    r2 = -zeta * w0 - root
    # e^((r2 - r1)T) stays in (0, 1] for T >= 0, unlike its reciprocal.
    decay = math.exp((r2 - r1) * duration)
    denominator = 1.0 - decay
    if abs(denominator) < epsilon:
        return 0.0
    return offset * (r2 - r1 * decay) / denominator


@dataclass(frozen=True)
class Spring(MotionModel):
    """Spring-driven motion from ``start`` toward rest at ``end``.

    ``duration`` is the earliest time the spring is within tolerance of rest,
    found by bracketing and bisection up to ``solver.max_time``; it is NaN
    when the spring does not settle within that cap.
    """

    description: SpringDescription
    start: float = 0.0
    end: float = 1.0
    initial_velocity: float = 0.0
    tolerance: Tolerance = DEFAULT_TOLERANCE
    solver: SolverConfig = field(default=DEFAULT_SOLVER_CONFIG, repr=False, compare=False)
    duration: float = field(init=False, compare=False)
    _solution: _Solution = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        require_finite(
            start=self.start, end=self.end, initial_velocity=self.initial_velocity
        )
        object.__setattr__(
            self,
            "_solution",
            _solve(self.description, self.start - self.end, self.initial_velocity),
        )
        object.__setattr__(self, "duration", earliest_true(self.is_done, self.solver))
        self._report_duration()

    @classmethod
    def with_bounce(
        cls,
        duration: float = 0.5,
        bounce: float = 0.0,
        mass: float = 1.0,
        **kwargs,
    ) -> Spring:
        """Spring tuned by perceived duration and bounce in [-1, 1].

        bounce 0 is critically damped (for unit mass), positive values
        overshoot, negative values approach more slowly.
        """
        if not -1.0 <= bounce <= 1.0:
            raise ConfigurationError(f"bounce must be in [-1, 1], got {bounce}")
        return cls(SpringDescription.from_response(duration, 1.0 - bounce, mass), **kwargs)

    @classmethod
    def with_damping(
        cls,
        damping_fraction: float = 0.9,
        duration: float = 0.4,
        mass: float = 1.0,
        **kwargs,
    ) -> Spring:
        """Spring tuned by perceived duration and damping fraction in [0, 2]."""
        if not 0.0 <= damping_fraction <= 2.0:
            raise ConfigurationError(
                f"damping_fraction must be in [0, 2], got {damping_fraction}"
            )
        return cls(SpringDescription.from_response(duration, damping_fraction, mass), **kwargs)

    @classmethod
    def preset(cls, name: str, **kwargs) -> Spring:
        """Spring built from a named entry of SPRING_PRESETS.

        The preset's entry in PRESET_INITIAL_VELOCITIES, if any, is the
        default ``initial_velocity``.
        """
        description = SPRING_PRESETS[name]
        kwargs.setdefault("initial_velocity", PRESET_INITIAL_VELOCITIES.get(name, 0.0))
        return cls(description, **kwargs)

    @property
    def regime(self) -> Regime:
        return self.description.regime

    def position(self, t: float) -> float:
        return self.end + self._solution.offset(t)

    def velocity(self, t: float) -> float:
        return self._solution.rate(t)

    def copy_with(
        self,
        *,
        tolerance: Tolerance | None = None,
        start: float | None = None,
        end: float | None = None,
        initial_velocity: float | None = None,
        duration: float | None = None,
        duration_scale: float | None = None,
    ) -> Spring:
        seconds = self._requested_duration(initial_velocity, duration, duration_scale)
        if seconds == 0.0:
            return self._resting_on(end, tolerance)
        return Spring(
            self.description,
            start=self.start if start is None else start,
            end=self.end if end is None else end,
            initial_velocity=self._velocity_for(start, end, initial_velocity, seconds),
            tolerance=self.tolerance if tolerance is None else tolerance,
            solver=self.solver,
        )

    def solve_initial_velocity(self, start: float, end: float, duration: float) -> float:
        return solve_spring_velocity(
            self.description, start, end, duration, epsilon=self.solver.epsilon
        )
