"""Interactive window running the simulation at a fixed time step."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

import pygame

from .rendering import render_world
from .vec2 import Vec2D
from .world import World

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
WINDOW_TITLE = "Physics Engine"

TIME_BETWEEN_TICKS = 10.0 / 1_000.0
MAX_TICKS_PER_FRAME = 5

WORLD_OFFSET = 10.0
NUM_BODIES = 500
DEFAULT_GRAVITY = Vec2D(0.0, 100.0)

WHITE = (255, 255, 255)
RED = (230, 41, 55)
FONT_SIZE = 16

_GRAVITY_KEYS = {
    pygame.K_1: Vec2D(0.0, -100.0),
    pygame.K_2: Vec2D(100.0, -100.0),
    pygame.K_3: Vec2D(100.0, 0.0),
    pygame.K_4: Vec2D(100.0, 100.0),
    pygame.K_5: Vec2D(0.0, 100.0),
    pygame.K_6: Vec2D(-100.0, 100.0),
    pygame.K_7: Vec2D(-100.0, 0.0),
    pygame.K_8: Vec2D(-100.0, -100.0),
    pygame.K_0: Vec2D(0.0, 0.0),
}


@dataclass
class IncrementalStatistics:
    """Running average of a stream of measurements."""

    n_samples: int = 0
    average: float = 0.0

    def add_measurement(self, measurement: float) -> None:
        self.average += (measurement - self.average) / (self.n_samples + 1)
        self.n_samples += 1


def gravity_for_key(key: int) -> Vec2D | None:
    """The gravity selected by a number key, or None for any other key."""
    return _GRAVITY_KEYS.get(key)


def _generate_world(width: int, height: int) -> World:
    return World.generate(float(width), float(height), WORLD_OFFSET, NUM_BODIES, DEFAULT_GRAVITY)


def run(width: int, height: int) -> None:
    """Open a window and run the simulation until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()

        world = _generate_world(width, height)
        accumulator = 0.0
        tick_stats = IncrementalStatistics()
        render_stats = IncrementalStatistics()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYUP:
                    if event.key == pygame.K_r:
                        world = _generate_world(width, height)
                        accumulator = 0.0
                        tick_stats = IncrementalStatistics()
                        render_stats = IncrementalStatistics()
                    elif (gravity := gravity_for_key(event.key)) is not None:
                        world.gravity = gravity
            if not running:
                break

            accumulator += clock.tick() / 1000.0
            accumulator = min(accumulator, TIME_BETWEEN_TICKS * MAX_TICKS_PER_FRAME)

            ticks_per_frame = 0
            while accumulator >= TIME_BETWEEN_TICKS and ticks_per_frame < MAX_TICKS_PER_FRAME:
                accumulator -= TIME_BETWEEN_TICKS
                before = time.perf_counter()
                world.tick(TIME_BETWEEN_TICKS)
                tick_stats.add_measurement(time.perf_counter() - before)
                ticks_per_frame += 1

            screen.fill(WHITE)

            before = time.perf_counter()
            render_world(screen, world)
            render_stats.add_measurement(time.perf_counter() - before)

            lines = (
                f"{int(clock.get_fps())} FPS",
                f"{ticks_per_frame} ticks per frame",
                f"{tick_stats.average * 1_000.0:.3f} ms tick",
                f"{render_stats.average * 1_000.0:.3f} ms render",
                f"{len(world.dynamic_bodies)} bodies",
            )
            for row, text in enumerate(lines):
                screen.blit(font.render(text, True, RED), (10, 10 + 20 * row))

            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the rigid body simulation.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    run(args.width, args.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())