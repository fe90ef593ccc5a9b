import copy
import math
import random

import pytest

from rigidsim.bodies import BaseDynamicBody, Circle, Line, Rectangle
from rigidsim.bounding_volume import BoundingVolume
from rigidsim.collisions import Contact
from rigidsim.vec2 import UNIT_DOWN, UNIT_LEFT, UNIT_RIGHT, UNIT_UP, ZERO, Vec2D
from rigidsim.world import (
    BvhLeaf,
    BvhNode,
    World,
    build_bvh,
    get_correction,
    get_impulse,
)


def create_square(top_left, width):
    return BoundingVolume(top_left, Vec2D(top_left.x + width, top_left.y + width))


def make_body(position=ZERO, velocity=ZERO, restitution=1.0, inverse_mass=1.0):
    return BaseDynamicBody(position, velocity, restitution, inverse_mass)


def test_bvh_new():
    bv1 = create_square(ZERO, 10.0)
    bv2 = create_square(Vec2D(20.0, 0.0), 10.0)
    bv3 = create_square(Vec2D(20.0, 20.0), 10.0)
    bv4 = create_square(Vec2D(0.0, 20.0), 10.0)

    entries = list(enumerate([bv1, bv2, bv3, bv4]))
    bvh = build_bvh(entries)

    assert bvh == BvhNode(
        bv1.union(bv2).union(bv3).union(bv4),
        BvhNode(bv1.union(bv2), BvhLeaf(bv1, 0), BvhLeaf(bv2, 1)),
        BvhNode(bv3.union(bv4), BvhLeaf(bv4, 3), BvhLeaf(bv3, 2)),
    )
    assert [index for index, _ in entries] == [0, 1, 3, 2]


def test_build_bvh_empty_is_none():
    assert build_bvh([]) is None


def test_build_bvh_single_is_leaf():
    volume = create_square(ZERO, 1.0)
    assert build_bvh([(7, volume)]) == BvhLeaf(volume, 7)


def test_bvh_overlapping_query():
    volumes = [create_square(Vec2D(20.0 * k, 0.0), 10.0) for k in range(8)]
    tree = build_bvh(list(enumerate(volumes)))
    query = BoundingVolume(Vec2D(25.0, 2.0), Vec2D(45.0, 4.0))
    assert sorted(tree.overlapping(query)) == [1, 2]


def test_bvh_overlapping_finds_every_intersecting_volume():
    rng = random.Random(3)
    volumes = [
        create_square(Vec2D(rng.uniform(0, 100), rng.uniform(0, 100)), rng.uniform(1, 10))
        for _ in range(60)
    ]
    tree = build_bvh(list(enumerate(volumes)))
    query = create_square(Vec2D(40.0, 40.0), 20.0)
    expected = sorted(i for i, v in enumerate(volumes) if v.is_intersecting(query))
    assert sorted(tree.overlapping(query)) == expected


def test_leaf_overlapping_miss():
    leaf = BvhLeaf(create_square(ZERO, 1.0), 0)
    assert leaf.overlapping(create_square(Vec2D(5.0, 5.0), 1.0)) == []


def test_get_impulse_approaching():
    contact = Contact(UNIT_RIGHT, -1.0)
    this_body = make_body(restitution=1.0)
    that_body = make_body(velocity=Vec2D(-2.0, 0.0), restitution=0.5)
    impulse = get_impulse(contact, this_body, that_body)
    assert impulse == Vec2D(-1.5, 0.0)


def test_get_impulse_separating_is_none():
    contact = Contact(UNIT_RIGHT, -1.0)
    that_body = make_body(velocity=Vec2D(2.0, 0.0))
    assert get_impulse(contact, make_body(), that_body) is None


def test_get_correction_deep():
    correction = get_correction(Contact(UNIT_RIGHT, -1.05), make_body(), make_body())
    assert correction.x == pytest.approx(-0.2)
    assert correction.y == 0.0


def test_get_correction_within_threshold_is_zero():
    assert get_correction(Contact(UNIT_RIGHT, -0.01), make_body(), make_body()) == ZERO


def test_tick_applies_gravity_and_integrates():
    circle = Circle(make_body(position=Vec2D(0.0, 0.0)), 1.0)
    world = World([], [circle], Vec2D(0.0, 100.0))
    world.tick(0.1)
    assert circle.body.velocity.y == pytest.approx(10.0)
    assert circle.body.position.y == pytest.approx(1.0)
    assert circle.body.position.x == 0.0


def test_tick_bounces_off_static_line():
    circle = Circle(make_body(position=Vec2D(0.0, 99.5), velocity=Vec2D(0.0, 10.0)), 1.0)
    world = World([Line(UNIT_UP, 100.0)], [circle], ZERO)
    world.tick(0.0)
    assert circle.body.velocity == Vec2D(0.0, -10.0)
    assert circle.body.position.y == pytest.approx(99.32)


def test_tick_resolves_head_on_circles():
    a = Circle(make_body(position=ZERO, velocity=Vec2D(1.0, 0.0)), 1.0)
    b = Circle(make_body(position=Vec2D(1.5, 0.0), velocity=Vec2D(-1.0, 0.0)), 1.0)
    world = World([], [a, b], ZERO)
    world.tick(0.0)
    assert a.body.velocity == Vec2D(-1.0, 0.0)
    assert b.body.velocity == Vec2D(1.0, 0.0)
    assert a.body.position.x == pytest.approx(-0.09)
    assert b.body.position.x == pytest.approx(1.59)


def test_generate_borders_and_counts():
    world = World.generate(1920.0, 1080.0, 10.0, 5, ZERO, random.Random(1))
    assert world.static_bodies == [
        Line(UNIT_DOWN, -10.0),
        Line(UNIT_LEFT, 1909.0),
        Line(UNIT_UP, 1069.0),
        Line(UNIT_RIGHT, -10.0),
    ]
    assert len(world.dynamic_bodies) == 10
    assert all(isinstance(b, Circle) for b in world.dynamic_bodies[:5])
    assert all(isinstance(b, Rectangle) for b in world.dynamic_bodies[5:])


def test_generate_body_invariants():
    world = World.generate(800.0, 600.0, 10.0, 20, ZERO, random.Random(2))
    for body in world.dynamic_bodies:
        base = body.body
        assert 10.0 <= base.position.x <= 790.0
        assert 10.0 <= base.position.y <= 590.0
        assert abs(base.velocity.x) <= 5.0 and abs(base.velocity.y) <= 5.0
        assert 0.0 <= base.coefficient_of_restitution <= 1.0
        size = 10.0 / base.inverse_mass
        if isinstance(body, Circle):
            assert body.radius == pytest.approx(size)
        else:
            assert body.half_width + body.half_height == pytest.approx(size)
            assert 0.25 * size <= body.half_width <= 0.75 * size


def test_generate_is_deterministic_for_a_seed():
    first = World.generate(500.0, 500.0, 10.0, 4, ZERO, random.Random(9))
    second = World.generate(500.0, 500.0, 10.0, 4, ZERO, random.Random(9))
    assert first == second


@pytest.mark.parametrize("num_bodies", [1, 10, 100])
def test_world_tick_benchmark_cases(num_bodies):
    world = World.generate(1920.0, 1080.0, 10.0, num_bodies, ZERO, random.Random(num_bodies))
    clone = copy.deepcopy(world)
    clone.tick(1.0)
    assert len(clone.dynamic_bodies) == 2 * num_bodies
    assert len(clone.static_bodies) == 4
    for body in clone.dynamic_bodies:
        assert math.isfinite(body.body.position.x)
        assert math.isfinite(body.body.position.y)
    assert world.dynamic_bodies[0].body.position != clone.dynamic_bodies[0].body.position