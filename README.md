# rigidsim

A small two-dimensional rigid-body physics engine. It simulates circles and
axis-aligned rectangles that move under gravity, bounce off each other and off
static line borders. A pygame window is included for watching the result.

## Features

- `rigidsim.vec2.Vec2D`: an immutable vector with `+`, `-`, `*` and `/` by a
  scalar, unary `-`, component-wise `abs`, and `dot_product`, `length`,
  `length_squared`, `min`, `max` and `clamp`. The unit directions `UNIT_UP`,
  `UNIT_RIGHT`, `UNIT_DOWN`, `UNIT_LEFT` and `ZERO` follow screen coordinates,
  with y growing downwards.
- `rigidsim.bounding_volume.BoundingVolume`: axis-aligned boxes with
  `is_intersecting` (touching edges do not count) and `union`.
- `rigidsim.bodies`: the dynamic bodies `Circle` and `Rectangle`, each holding
  a `BaseDynamicBody` (position, velocity, coefficient of restitution, inverse
  mass), and the static `Line`, given by a normal and a distance from the origin.
- `rigidsim.collisions`: a `Contact` (normal and signed distance, negative when
  the bodies overlap) for every pair of shapes, through
  `generate_contact_static` and `generate_contact_dynamic` or the pairwise
  functions `circle_circle`, `rectangle_rectangle`, `circle_rectangle`,
  `line_circle` and `line_rectangle`.
- `rigidsim.world.World`: steps the simulation with `tick`. Each tick applies
  gravity, resolves contacts with the static borders, finds contacts between
  dynamic bodies through a bounding volume hierarchy (`build_bvh`), resolves
  them with ten rounds of impulses (`get_impulse`), applies positional correction
  (`get_correction`) and then moves every body.
  `World.generate` builds a box bordered by four lines holding a given number
  of random circles and as many random rectangles.
- `rigidsim.rendering`: draws a world onto a pygame surface (`render_world`).

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install ".[test]"
```

## Running the viewer

```
rigidsim
```

This opens a 1920×1080 window holding a random world of 500 circles and 500
rectangles under downward gravity. The window size can be changed:

```
rigidsim --width 1280 --height 720
```

The simulation advances in fixed steps of 10 ms, at most five steps per frame.

Keys (acting when released):

| Key | Action |
|-----|--------|
| `R` | generate a new world |
| `1` | gravity up |
| `2` | gravity up and right |
| `3` | gravity right |
| `4` | gravity down and right |
| `5` | gravity down |
| `6` | gravity down and left |
| `7` | gravity left |
| `8` | gravity up and left |
| `0` | no gravity |

The top left corner shows frames per second, ticks in the last frame, the
average tick and render times in milliseconds, and the number of bodies.

## Using the library

```python
import random

from rigidsim.vec2 import Vec2D
from rigidsim.world import World

world = World.generate(
    1920.0, 1080.0, 10.0, 100, Vec2D(0.0, 100.0), random.Random(1)
)

for _ in range(100):
    world.tick(0.01)
```

Without a `random.Random` argument, `World.generate` uses a fresh unseeded one.

Contacts between two bodies can be computed directly:

```python
from rigidsim.bodies import BaseDynamicBody, Circle
from rigidsim.collisions import generate_contact_dynamic
from rigidsim.vec2 import Vec2D

a = Circle(BaseDynamicBody(Vec2D(0.0, 0.0), Vec2D(0.0, 0.0), 0.0, 1.0), 5.0)
b = Circle(BaseDynamicBody(Vec2D(1.0, 0.0), Vec2D(0.0, 0.0), 0.0, 1.0), 5.0)

contact = generate_contact_dynamic(a, b)
print(contact.normal, contact.distance)  # Vec2D(x=1.0, y=0.0) -9.0
```

## Limitations

Bodies do not rotate: rectangles stay axis-aligned and there is no angular
velocity or friction. Static bodies are only infinite lines.

## Running the tests

```
pytest
```