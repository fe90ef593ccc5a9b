"""The simulated world: bodies, collision handling and random generation."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field

from .bodies import BaseDynamicBody, Circle, DynamicBody, Line, Rectangle, StaticBody
from .bounding_volume import BoundingVolume
from .collisions import Contact, generate_contact_dynamic, generate_contact_static
from .vec2 import UNIT_DOWN, UNIT_LEFT, UNIT_RIGHT, UNIT_UP, ZERO, Vec2D

CORRECTION_THRESHOLD = 0.05
CORRECTION_PERCENTAGE = 0.4
IMPULSE_ITERATIONS = 10

MAX_INITIAL_VELOCITY = 5.0
SIZE_TO_MASS_RATIO = 10.0


@dataclass(frozen=True)
class BvhLeaf:
    """A leaf of the bounding volume hierarchy holding one body index."""

    volume: BoundingVolume
    index: int

    def _collect(self, query: BoundingVolume) -> Iterator[int]:
        if self.volume.is_intersecting(query):
            yield self.index

    def overlapping(self, query: BoundingVolume) -> list[int]:
        """Indices of bodies whose boxes intersect ``query``."""
        return list(self._collect(query))


@dataclass(frozen=True)
class BvhNode:
    """An inner node of the bounding volume hierarchy."""

    volume: BoundingVolume
    left: BvhLeaf | BvhNode
    right: BvhLeaf | BvhNode

    def _collect(self, query: BoundingVolume) -> Iterator[int]:
        if self.volume.is_intersecting(query):
            yield from self.left._collect(query)
            yield from self.right._collect(query)

    def overlapping(self, query: BoundingVolume) -> list[int]:
        """Indices of bodies whose boxes intersect ``query``, left subtree first."""
        return list(self._collect(query))


def _midpoint(volume: BoundingVolume, along_x: bool) -> float:
    if along_x:
        return (volume.top_left.x + volume.bottom_right.x) / 2.0
    return (volume.top_left.y + volume.bottom_right.y) / 2.0


def _build(entries: list[tuple[int, BoundingVolume]], start: int, end: int) -> BvhLeaf | BvhNode:
    count = end - start
    if count == 1:
        index, volume = entries[start]
        return BvhLeaf(volume, index)

    overall = entries[start][1]
    for _, volume in entries[start + 1 : end]:
        overall = overall.union(volume)

    along_x = (overall.bottom_right.x - overall.top_left.x) > (
        overall.bottom_right.y - overall.top_left.y
    )
    overall_mid = _midpoint(overall, along_x)

    # In-place partition; the resulting order is observable through the tree layout.
    split = start
    for i in range(start, end):
        if _midpoint(entries[i][1], along_x) < overall_mid:
            entries[i], entries[split] = entries[split], entries[i]
            split += 1

    threshold = max(1, count // 16)
    split = min(max(split - start, threshold), count - threshold) + start

    return BvhNode(overall, _build(entries, start, split), _build(entries, split, end))


def build_bvh(entries: list[tuple[int, BoundingVolume]]) -> BvhLeaf | BvhNode | None:
    """Build a hierarchy over ``(index, volume)`` pairs, reordering ``entries`` in place.

    Returns None when there are no entries.
    """
    if not entries:
        return None
    return _build(entries, 0, len(entries))


def get_impulse(
    contact: Contact, this_body: BaseDynamicBody, that_body: BaseDynamicBody
) -> Vec2D | None:
    """Impulse resolving the contact, or None if the bodies are separating."""
    relative_velocity = that_body.velocity - this_body.velocity
    along_normal = relative_velocity.dot_product(contact.normal)

    if along_normal > 0.0:
        return None

    restitution = min(this_body.coefficient_of_restitution, that_body.coefficient_of_restitution)
    amount = (
        (1.0 + restitution) * along_normal / (this_body.inverse_mass + that_body.inverse_mass)
    )
    return contact.normal * amount


def get_correction(
    contact: Contact, this_body: BaseDynamicBody, that_body: BaseDynamicBody
) -> Vec2D:
    """Positional correction pushing overlapping bodies apart."""
    amount = (
        min(contact.distance + CORRECTION_THRESHOLD, 0.0)
        * CORRECTION_PERCENTAGE
        / (this_body.inverse_mass + that_body.inverse_mass)
    )
    return contact.normal * amount


_STATIC_PARTNER = BaseDynamicBody(
    position=ZERO, velocity=ZERO, coefficient_of_restitution=1.0, inverse_mass=0.0
)


def _handle_collision_static(this: StaticBody, that: DynamicBody) -> None:
    contact = generate_contact_static(this, that)
    if contact.distance >= 0.0:
        return

    body = that.body
    impulse = get_impulse(contact, _STATIC_PARTNER, body)
    if impulse is not None:
        body.velocity = body.velocity - impulse * body.inverse_mass

    correction = get_correction(contact, _STATIC_PARTNER, body)
    body.position = body.position - correction * body.inverse_mass


def _random_base_body(
    rng: random.Random, width: float, height: float, offset: float
) -> BaseDynamicBody:
    position = Vec2D(rng.uniform(offset, width - offset), rng.uniform(offset, height - offset))
    velocity = Vec2D(
        rng.uniform(-MAX_INITIAL_VELOCITY, MAX_INITIAL_VELOCITY),
        rng.uniform(-MAX_INITIAL_VELOCITY, MAX_INITIAL_VELOCITY),
    )
    restitution = rng.uniform(0.0, 1.0)
    mass = rng.uniform(0.0, 1.0) + 0.000001
    return BaseDynamicBody(position, velocity, restitution, 1.0 / mass)


def _random_circle(rng: random.Random, width: float, height: float, offset: float) -> Circle:
    body = _random_base_body(rng, width, height, offset)
    return Circle(body, SIZE_TO_MASS_RATIO / body.inverse_mass)


def _random_rectangle(
    rng: random.Random, width: float, height: float, offset: float
) -> Rectangle:
    body = _random_base_body(rng, width, height, offset)
    aspect_ratio = rng.uniform(0.25, 0.75)
    size = SIZE_TO_MASS_RATIO / body.inverse_mass
    return Rectangle(body, aspect_ratio * size, (1.0 - aspect_ratio) * size)


@dataclass
class World:
    """Static and dynamic bodies under a uniform gravity."""

    static_bodies: list[StaticBody] = field(default_factory=list)
    dynamic_bodies: list[DynamicBody] = field(default_factory=list)
    gravity: Vec2D = ZERO

    @classmethod
    def generate(
        cls,
        width: float,
        height: float,
        offset: float,
        num_bodies: int,
        gravity: Vec2D,
        rng: random.Random | None = None,
    ) -> World:
        """A box bordered by four lines holding ``num_bodies`` circles and as many rectangles."""
        rng = rng if rng is not None else random.Random()

        static_bodies: list[StaticBody] = [
            Line(UNIT_DOWN, -offset),
            Line(UNIT_LEFT, width - 1.0 - offset),
            Line(UNIT_UP, height - 1.0 - offset),
            Line(UNIT_RIGHT, -offset),
        ]

        dynamic_bodies: list[DynamicBody] = [
            _random_circle(rng, width, height, offset) for _ in range(num_bodies)
        ]
        dynamic_bodies.extend(
            _random_rectangle(rng, width, height, offset) for _ in range(num_bodies)
        )

        return cls(static_bodies, dynamic_bodies, gravity)

    def _apply_gravity(self, elapsed: float) -> None:
        delta = self.gravity * elapsed
        for body in self.dynamic_bodies:
            body.body.velocity = body.body.velocity + delta

    def _detect_dynamic_collisions(self) -> list[tuple[Contact, int, int]]:
        entries = [(index, body.to_bounding_volume()) for index, body in enumerate(self.dynamic_bodies)]
        tree = build_bvh(entries)
        if tree is None:
            return []

        contacts: list[tuple[Contact, int, int]] = []
        for i, volume in entries:
            this = self.dynamic_bodies[i]
            for j in tree.overlapping(volume):
                if j <= i:
                    continue
                contact = generate_contact_dynamic(this, self.dynamic_bodies[j])
                if contact is None or contact.distance >= 0.0:
                    continue
                contacts.append((contact, i, j))
        return contacts

    def _handle_collisions(self) -> None:
        for line in self.static_bodies:
            for body in self.dynamic_bodies:
                _handle_collision_static(line, body)

        contacts = self._detect_dynamic_collisions()

        for _ in range(IMPULSE_ITERATIONS):
            for contact, i, j in contacts:
                this_body = self.dynamic_bodies[i].body
                that_body = self.dynamic_bodies[j].body
                impulse = get_impulse(contact, this_body, that_body)
                if impulse is not None:
                    this_body.velocity = this_body.velocity + impulse * this_body.inverse_mass
                    that_body.velocity = that_body.velocity - impulse * that_body.inverse_mass

        for contact, i, j in contacts:
            this_body = self.dynamic_bodies[i].body
            that_body = self.dynamic_bodies[j].body
            correction = get_correction(contact, this_body, that_body)
            this_body.position = this_body.position + correction * this_body.inverse_mass
            that_body.position = that_body.position - correction * that_body.inverse_mass

    def _integrate_bodies(self, elapsed: float) -> None:
        for body in self.dynamic_bodies:
            body.body.integrate(elapsed)

    def tick(self, elapsed: float) -> None:
        """Advance the simulation by ``elapsed`` seconds."""
        self._apply_gravity(elapsed)
        self._handle_collisions()
        self._integrate_bodies(elapsed)