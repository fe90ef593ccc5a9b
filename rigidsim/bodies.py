"""Dynamic and static rigid bodies."""

from __future__ import annotations

from dataclasses import dataclass

from .bounding_volume import BoundingVolume
from .vec2 import Vec2D


@dataclass
class BaseDynamicBody:
    """State shared by every moving body."""

    position: Vec2D
    velocity: Vec2D
    coefficient_of_restitution: float
    inverse_mass: float

    def integrate(self, elapsed: float) -> None:
        """Advance the position by the current velocity over ``elapsed`` seconds."""
        self.position = self.position + self.velocity * elapsed


def _box_around(center: Vec2D, extents: Vec2D) -> BoundingVolume:
    return BoundingVolume(center - extents, center + extents)


@dataclass
class Circle:
    """A moving circle."""

    body: BaseDynamicBody
    radius: float

    def to_bounding_volume(self) -> BoundingVolume:
        return _box_around(self.body.position, Vec2D(self.radius, self.radius))


@dataclass
class Rectangle:
    """A moving axis-aligned rectangle centred on its body's position."""

    body: BaseDynamicBody
    half_width: float
    half_height: float

    def to_bounding_volume(self) -> BoundingVolume:
        return _box_around(self.body.position, Vec2D(self.half_width, self.half_height))


@dataclass(frozen=True)
class Line:
    """An infinite static line: points p with normal . p + origin_distance == 0."""

    normal: Vec2D
    origin_distance: float


DynamicBody = Circle | Rectangle
StaticBody = Line