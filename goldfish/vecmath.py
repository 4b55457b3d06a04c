"""Scalar and three-component vector math."""

from __future__ import annotations

import math
from typing import Sequence

PI = 3.14159265

Vector = tuple[float, float, float]


def _xyz(v: Sequence[float]) -> Vector:
    if len(v) < 3:
        raise ValueError("vector needs at least three components")
    return (float(v[0]), float(v[1]), float(v[2]))


def log2(x: float) -> float:
    """Return the base-2 logarithm of ``x``."""
    return math.log2(x)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def cot(x: float) -> float:
    """Return the cotangent of ``x``."""
    return 1.0 / math.tan(x)


def subtract(v0: Sequence[float], v1: Sequence[float]) -> Vector:
    """Return ``v0 - v1`` component-wise."""
    a, b = _xyz(v0), _xyz(v1)
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def multiply(v0: Sequence[float], v1: Sequence[float]) -> Vector:
    """Return the cross product ``v0 x v1``."""
    a, b = _xyz(v0), _xyz(v1)
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def normalize(v: Sequence[float]) -> Vector:
    """Return ``v`` scaled to unit length."""
    x, y, z = _xyz(v)
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return (x / length, y / length, z / length)


def normal(v0: Sequence[float], v1: Sequence[float], v2: Sequence[float]) -> Vector:
    """Return the unit normal of triangle ``v0, v1, v2`` (counter-clockwise front)."""
    return normalize(multiply(subtract(v1, v0), subtract(v2, v0)))