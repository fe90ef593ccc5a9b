"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from .vec2 import Vec2D


@dataclass(frozen=True, slots=True)
class BoundingVolume:
    """An axis-aligned box given by its top-left and bottom-right corners."""

    top_left: Vec2D
    bottom_right: Vec2D

    def is_intersecting(self, other: BoundingVolume) -> bool:
        """True if the boxes overlap; touching edges do not count."""
        if self.bottom_right.x <= other.top_left.x or self.top_left.x >= other.bottom_right.x:
            return False
        if self.bottom_right.y <= other.top_left.y or self.top_left.y >= other.bottom_right.y:
            return False
        return True

    def union(self, other: BoundingVolume) -> BoundingVolume:
        """The smallest box that contains both boxes."""
        return BoundingVolume(
            self.top_left.min(other.top_left),
            self.bottom_right.max(other.bottom_right),
        )