"""Easing curves: plain time remappings from [0, 1] to progress."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Curve(Protocol):
    """Anything that maps normalized time to normalized progress."""

    def transform(self, t: float) -> float:
        ...


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def elastic_out(t: float, period: float = 0.4) -> float:
    """Overshoots and rings before settling at 1."""
    s = period / 4.0
    return 2.0 ** (-10.0 * t) * math.sin((t - s) * (2.0 * math.pi) / period) + 1.0


@dataclass(frozen=True)
class EasingCurve:
    """A named easing function, exact at both ends."""

    name: str
    fn: Callable[[float], float] = field(repr=False)

    def transform(self, t: float) -> float:
        if t == 0.0 or t == 1.0:
            return t
        return self.fn(t)

    @property
    def flipped(self) -> EasingCurve:
        return flip(self)


def flip(curve: Curve, name: str | None = None) -> EasingCurve:
    """Mirror a curve about the center: t -> 1 - curve(1 - t)."""
    label = name or f"{getattr(curve, 'name', type(curve).__name__)}.flipped"
    return EasingCurve(label, lambda t: 1.0 - curve.transform(1.0 - t))


EASINGS: dict[str, EasingCurve] = {
    curve.name: curve
    for curve in (
        EasingCurve("linear", linear),
        EasingCurve("ease_in", ease_in),
        EasingCurve("ease_out", ease_out),
        EasingCurve("ease_in_out", ease_in_out),
        EasingCurve("ease_out_cubic", ease_out_cubic),
        EasingCurve("ease_in_out_cubic", ease_in_out_cubic),
        EasingCurve("elastic_out", elastic_out),
    )
}
