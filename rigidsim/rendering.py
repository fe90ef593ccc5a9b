"""Drawing the world onto a pygame surface."""

from __future__ import annotations

import math

import pygame

from .bodies import Circle, Line, Rectangle
from .world import World

BLACK = (0, 0, 0)
CIRCLE_SIDES = 40
LINE_THICKNESS = 1


def render_circle(surface: pygame.Surface, circle: Circle) -> None:
    """Outline a circle as a regular 40-sided polygon."""
    cx, cy = circle.body.position.x, circle.body.position.y
    r = circle.radius
    points = [
        (
            cx + r * math.cos(2.0 * math.pi * i / CIRCLE_SIDES),
            cy + r * math.sin(2.0 * math.pi * i / CIRCLE_SIDES),
        )
        for i in range(CIRCLE_SIDES)
    ]
    pygame.draw.polygon(surface, BLACK, points, LINE_THICKNESS)


def render_line(surface: pygame.Surface, line: Line) -> None:
    """Draw an infinite line across the whole surface.

    Raises ZeroDivisionError if the line's normal is the zero vector.
    """
    a = line.normal.x
    b = line.normal.y
    c = line.origin_distance

    if b != 0.0:
        slope = -a / b
        intercept = -c / b
        x1 = 0.0
        x2 = float(surface.get_width())
        start = (x1, slope * x1 + intercept)
        end = (x2, slope * x2 + intercept)
    else:
        x = -c / a
        start = (x, 0.0)
        end = (x, float(surface.get_height()))

    pygame.draw.line(surface, BLACK, start, end, LINE_THICKNESS)


def render_rectangle(surface: pygame.Surface, rectangle: Rectangle) -> None:
    """Outline an axis-aligned rectangle."""
    x = rectangle.body.position.x - rectangle.half_width
    y = rectangle.body.position.y - rectangle.half_height
    width = rectangle.half_width * 2.0
    height = rectangle.half_height * 2.0
    rect = pygame.Rect(round(x), round(y), round(width), round(height))
    pygame.draw.rect(surface, BLACK, rect, LINE_THICKNESS)


def render_world(surface: pygame.Surface, world: World) -> None:
    """Draw every static body, then every dynamic body."""
    for static in world.static_bodies:
        match static:
            case Line():
                render_line(surface, static)

    for body in world.dynamic_bodies:
        match body:
            case Circle():
                render_circle(surface, body)
            case Rectangle():
                render_rectangle(surface, body)