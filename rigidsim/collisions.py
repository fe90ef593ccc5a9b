"""Contact generation between pairs of bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .bodies import Circle, Line, Rectangle
from .vec2 import UNIT_DOWN, UNIT_LEFT, UNIT_RIGHT, UNIT_UP, Vec2D


@dataclass(frozen=True)
class Contact:
    """A contact normal and a signed separation; negative distance means overlap."""

    normal: Vec2D
    distance: float

    def flip(self) -> Contact:
        """The same contact seen from the other body."""
        return replace(self, normal=-self.normal)


def _unit(vector: Vec2D, length: float) -> Vec2D:
    # A zero-length direction has no defined normal; it becomes NaN as in IEEE division.
    if length == 0:
        return Vec2D(math.nan, math.nan)
    return vector / length


def _signum(value: float) -> float:
    if math.isnan(value):
        return math.nan
    return math.copysign(1.0, value)


def circle_circle(this: Circle, that: Circle) -> Contact:
    """Contact between two circles, normal pointing from ``this`` to ``that``."""
    this_to_that = that.body.position - this.body.position
    length = this_to_that.length()
    distance = length - (this.radius + that.radius)
    return Contact(_unit(this_to_that, length), distance)


def rectangle_rectangle(this: Rectangle, that: Rectangle) -> Contact | None:
    """Contact between two rectangles, or None if they do not overlap."""
    displacement = that.body.position - this.body.position

    x_overlap = this.half_width + that.half_width - abs(displacement.x)
    y_overlap = this.half_height + that.half_height - abs(displacement.y)

    if x_overlap <= 0.0 or y_overlap <= 0.0:
        return None

    if x_overlap < y_overlap:
        normal = UNIT_LEFT if displacement.x < 0.0 else UNIT_RIGHT
        return Contact(normal, -x_overlap)

    normal = UNIT_UP if displacement.y < 0.0 else UNIT_DOWN
    return Contact(normal, -y_overlap)


def circle_rectangle(this: Circle, that: Rectangle) -> Contact:
    """Contact between a circle and a rectangle, normal pointing towards the rectangle."""
    displacement = that.body.position - this.body.position

    clamped = displacement.clamp(
        Vec2D(-that.half_width, -that.half_height),
        Vec2D(that.half_width, that.half_height),
    )

    is_inside = clamped == displacement

    if is_inside:
        if abs(displacement.x) > abs(displacement.y):
            closest_point = Vec2D(_signum(clamped.x) * that.half_width, clamped.y)
        else:
            closest_point = Vec2D(clamped.x, _signum(clamped.y) * that.half_height)
    else:
        closest_point = clamped

    normal = displacement - closest_point
    length = normal.length()
    distance = length - this.radius

    direction = _unit(normal, length)
    return Contact(-direction if is_inside else direction, distance)


def line_circle(this: Line, that: Circle) -> Contact:
    """Contact between a static line and a circle."""
    distance = this.normal.dot_product(that.body.position) + this.origin_distance - that.radius
    return Contact(this.normal, distance)


def line_rectangle(this: Line, that: Rectangle) -> Contact:
    """Contact between a static line and the deepest corner of a rectangle."""
    hw, hh = that.half_width, that.half_height
    offsets = (Vec2D(hw, hh), Vec2D(hw, -hh), Vec2D(-hw, -hh), Vec2D(-hw, hh))
    distance = min(
        this.normal.dot_product(that.body.position + offset) + this.origin_distance
        for offset in offsets
    )
    return Contact(this.normal, distance)


def generate_contact_static(this: Line, that: Circle | Rectangle) -> Contact:
    """Contact between a static body and a dynamic body."""
    match this, that:
        case Line(), Circle():
            return line_circle(this, that)
        case Line(), Rectangle():
            return line_rectangle(this, that)
    raise TypeError(f"no contact between {type(this).__name__} and {type(that).__name__}")


def generate_contact_dynamic(
    this: Circle | Rectangle, that: Circle | Rectangle
) -> Contact | None:
    """Contact between two dynamic bodies, or None if none can be computed."""
    match this, that:
        case Circle(), Circle():
            return circle_circle(this, that)
        case Rectangle(), Rectangle():
            return rectangle_rectangle(this, that)
        case Circle(), Rectangle():
            return circle_rectangle(this, that)
        case Rectangle(), Circle():
            return circle_rectangle(that, this).flip()
    raise TypeError(f"no contact between {type(this).__name__} and {type(that).__name__}")