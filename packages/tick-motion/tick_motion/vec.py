"""Vector helpers for composed motion, on plain tuples of floats."""
from __future__ import annotations

import math

Vec = tuple[float, ...]


def norm(v: Vec) -> float:
    """Euclidean length, e.g. the speed of a velocity vector."""
    return math.hypot(*v)


def distance(a: Vec, b: Vec) -> float:
    if len(a) != len(b):
        raise ValueError(f"dimension mismatch: {len(a)} vs {len(b)}")
    return math.dist(a, b)
