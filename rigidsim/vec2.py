"""Two-dimensional vectors and the unit directions of screen space."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand, like IEEE minNum."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand, like IEEE maxNum."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fclamp(value: float, low: float, high: float) -> float:
    if not low <= high:
        raise ValueError(f"invalid clamp range: {low!r} > {high!r}")
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True, slots=True)
class Vec2D:
    """An immutable 2D vector with float components."""

    x: float
    y: float

    def dot_product(self, other: Vec2D) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def min(self, other: Vec2D) -> Vec2D:
        """Component-wise minimum."""
        return Vec2D(_fmin(self.x, other.x), _fmin(self.y, other.y))

    def max(self, other: Vec2D) -> Vec2D:
        """Component-wise maximum."""
        return Vec2D(_fmax(self.x, other.x), _fmax(self.y, other.y))

    def clamp(self, low: Vec2D, high: Vec2D) -> Vec2D:
        """Clamp each component into [low, high]; raises ValueError if low > high."""
        return Vec2D(_fclamp(self.x, low.x, high.x), _fclamp(self.y, low.y, high.y))

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2D:
        if isinstance(scalar, Vec2D):
            return NotImplemented
        return Vec2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2D:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec2D:
        if isinstance(scalar, Vec2D):
            return NotImplemented
        return Vec2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __abs__(self) -> Vec2D:
        """Component-wise absolute value."""
        return Vec2D(abs(self.x), abs(self.y))


ZERO = Vec2D(0.0, 0.0)
UNIT_UP = Vec2D(0.0, -1.0)
UNIT_RIGHT = Vec2D(1.0, 0.0)
UNIT_DOWN = Vec2D(0.0, 1.0)
UNIT_LEFT = Vec2D(-1.0, 0.0)