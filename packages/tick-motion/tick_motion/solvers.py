"""Root finders used to derive durations from closed-form motion."""
from __future__ import annotations

import math
from typing import Callable

from tick_motion.config import DEFAULT_SOLVER_CONFIG, SolverConfig


def earliest_true(
    predicate: Callable[[float], bool],
    config: SolverConfig = DEFAULT_SOLVER_CONFIG,
) -> float:
    """Earliest t >= 0 at which predicate(t) holds, or NaN within the cap.

    Doubles an upper bound from ``config.initial_step`` until the predicate
    holds (probing ``config.max_time`` last), then bisects the bracket
    ``config.bisection_iterations`` times. The returned time always
    satisfies the predicate.
    """
    if predicate(0.0):
        return 0.0

    low = 0.0
    high = config.initial_step
    while not predicate(high):
        if high >= config.max_time:
            return math.nan
        low = high
        high = min(high * 2.0, config.max_time)

    for _ in range(config.bisection_iterations):
        mid = 0.5 * (low + high)
        if predicate(mid):
            high = mid
        else:
            low = mid
    return high


def newtons_method(
    f: Callable[[float], float],
    df: Callable[[float], float],
    initial_guess: float,
    iterations: int,
    target: float = 0.0,
) -> float:
    """Fixed-iteration Newton search for f(x) == target.

    Stops early if the derivative vanishes.
    """
    guess = initial_guess
    for _ in range(iterations):
        slope = df(guess)
        if slope == 0.0:
            break
        guess = guess - (f(guess) - target) / slope
    return guess
