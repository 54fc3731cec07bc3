"""Point value type and the vector primitives the sectioner is built on."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import COORDINATE_DECIMALS
from .validation import validate_point


@dataclass(frozen=True)
class Point:
    """A point (or vector) in grid coordinates.

    Equality is exact numeric equality on both coordinates.
    """

    x: float
    y: float

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> Point:
        x, y = validate_point(data)
        return cls(x, y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance rounded to ``COORDINATE_DECIMALS`` places.

    The rounding absorbs floating-point noise left by repeated
    intersection math, so that equal lengths compare equal.
    """
    return round(math.hypot(a.x - b.x, a.y - b.y), COORDINATE_DECIMALS)


def dot(v1: Point, v2: Point) -> float:
    return v1.x * v2.x + v1.y * v2.y


def magnitude(v: Point) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def angle_between(v1: Point, v2: Point) -> float:
    """Angle between two vectors in radians, in [0, pi].

    The cosine is clamped to [-1, 1]; a zero-length vector yields NaN.
    """
    norm = magnitude(v1) * magnitude(v2)
    if norm == 0:
        return math.nan
    cosine = dot(v1, v2) / norm
    return math.acos(max(-1.0, min(1.0, cosine)))


def round_half_up(value: float, decimals: int) -> float:
    """Round with ties going towards +inf (unlike the builtin ``round``)."""
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale
