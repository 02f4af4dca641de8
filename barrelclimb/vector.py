"""Two-dimensional vector maths and cubic Bézier curves."""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = 3.1415926535
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def magnitude_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction, or zero for a zero vector."""
        mag = self.magnitude()
        if mag == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


ZERO = Vector2(0.0, 0.0)
ONE = Vector2(1.0, 1.0)
UP = Vector2(0.0, 1.0)
RIGHT = Vector2(1.0, 0.0)


def lerp(start: Vector2, end: Vector2, time: float) -> Vector2:
    """Interpolate linearly from start to end, clamping time to [0, 1]."""
    if time <= 0.0:
        return start
    if time >= 1.0:
        return end
    delta = end - start
    return start + delta.normalized() * delta.magnitude() * time


def rotate_vector(vec: Vector2, angle: float) -> Vector2:
    """Rotate a vector by an angle given in degrees."""
    rad = angle * DEG_TO_RAD
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return Vector2(vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class BezierCurve:
    """A cubic Bézier curve defined by four control points."""

    p0: Vector2
    p1: Vector2
    p2: Vector2
    p3: Vector2

    def point_at(self, t: float) -> Vector2:
        """Return the point at parameter t, with both coordinates rounded."""
        tt = t * t
        ttt = tt * t
        u = 1.0 - t
        uu = u * u
        uuu = uu * u
        point = (
            uuu * self.p0
            + (3 * uu * t) * self.p1
            + (3 * u * tt) * self.p2
            + ttt * self.p3
        )
        return Vector2(_round_half_away(point.x), _round_half_away(point.y))