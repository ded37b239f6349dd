# -*- coding: utf-8 -*-
import numpy as np
import pytest

from octree3d.spatial import Point, SpatialNode, SubdivisionError
from octree3d.spatial.bounds import contains_point, intersects_sphere, octant_bounds


def make_root(capacity=4, max_depth=None):
    return SpatialNode.from_centre((0, 0, 0), 200.0, capacity=capacity, max_depth=max_depth)


def test_contains_point_closed_interval():
    node = make_root()
    assert node.contains_point(Point(100, -100, 0))
    assert node.contains_point(Point(0, 0, 0))
    assert not node.contains_point(Point(100.001, 0, 0))
    assert not node.contains_point(Point(float("nan"), 0, 0))


def test_intersects_sphere_closest_point():
    lo, hi = np.array([0.0, 0.0, 0.0]), np.array([1.0, 1.0, 1.0])
    assert intersects_sphere(lo, hi, np.array([0.5, 0.5, 0.5]), 0.0)
    assert intersects_sphere(lo, hi, np.array([2.0, 0.5, 0.5]), 1.0)
    assert not intersects_sphere(lo, hi, np.array([2.0, 0.5, 0.5]), 0.99)
    # угол: расстояние до (1,1,1) = sqrt(3)
    assert not intersects_sphere(lo, hi, np.array([2.0, 2.0, 2.0]), 1.7)
    assert intersects_sphere(lo, hi, np.array([2.0, 2.0, 2.0]), 1.733)


def test_octant_bounds_bit_order():
    lo, hi = np.array([-1.0, -1.0, -1.0]), np.array([1.0, 1.0, 1.0])
    c_lo, c_hi = octant_bounds(lo, hi, 0b101)
    assert c_lo.tolist() == [0.0, -1.0, 0.0]
    assert c_hi.tolist() == [1.0, 0.0, 1.0]
    assert contains_point(c_lo, c_hi, np.array([0.5, -0.5, 0.5]))


def test_subdivide_children_geometry():
    node = make_root()
    node.subdivide()
    assert not node.is_leaf()
    assert len(node.children) == 8
    for i, child in enumerate(node.children):
        assert child.size == pytest.approx(100.0)
        assert child.depth == 1
        c = child.centre
        assert c.x == (50.0 if i & 1 else -50.0)
        assert c.y == (50.0 if i & 2 else -50.0)
        assert c.z == (50.0 if i & 4 else -50.0)


def test_subdivide_twice_raises():
    node = make_root()
    node.subdivide()
    with pytest.raises(SubdivisionError):
        node.subdivide()


def test_insert_outside_is_dropped():
    node = make_root()
    assert node.insert(Point(150, 0, 0)) is False
    assert node.points == []
    assert node.is_leaf()


def test_subdivision_moves_points_to_children():
    node = make_root(capacity=2)
    pts = [Point(-10, -10, -10), Point(10, 10, 10), Point(10, -10, 10)]
    for p in pts:
        assert node.insert(p)
    assert not node.is_leaf()
    assert node.points == []
    assert node.children[0].points == [pts[0]]
    assert node.children[7].points == [pts[1]]
    assert node.children[5].points == [pts[2]]


def test_boundary_point_goes_to_first_octant_only():
    node = make_root(capacity=1)
    far = Point(10, 10, 10)
    origin = Point(0, 0, 0)
    node.insert(far)
    node.insert(origin)
    holders = [i for i, c in enumerate(node.children) if origin in c.points]
    assert holders == [0]
    assert node.children[7].points == [far]


def test_capacity_bound_holds():
    node = make_root(capacity=3)
    rng = np.random.default_rng(7)
    for row in rng.uniform(-100, 100, size=(200, 3)):
        assert node.insert(Point(*row))

    stack = [node]
    total = 0
    while stack:
        n = stack.pop()
        if n.is_leaf():
            assert len(n.points) <= 3
            total += len(n.points)
        else:
            assert n.points == []
            stack.extend(n.children)
    assert total == 200


def test_max_depth_stops_subdivision():
    node = make_root(capacity=4, max_depth=3)
    pts = [Point(1, 1, 1 + i * 1e-6) for i in range(10)]
    for p in pts:
        assert node.insert(p)

    stack, holders = [node], []
    while stack:
        n = stack.pop()
        if n.points:
            holders.append(n)
        stack.extend(n.children or [])
    assert len(holders) == 1
    assert holders[0].depth == 3
    assert len(holders[0].points) == 10


def test_coincident_points_overflow_without_subdividing():
    node = make_root(capacity=4)
    pts = [Point(1, 1, 1) for _ in range(5)]
    for p in pts:
        assert node.insert(p)
    assert node.is_leaf()
    assert node.points == pts


def test_distinct_point_splits_coincident_leaf():
    node = make_root(capacity=4)
    for _ in range(4):
        node.insert(Point(1, 1, 1))
    assert node.insert(Point(-1, -1, -1))
    assert not node.is_leaf()
    assert len(node.children[7].points) == 4
    assert len(node.children[0].points) == 1


def test_unsplittable_cube_keeps_points():
    edge = np.nextafter(1.0, 2.0)
    node = SpatialNode([1.0, 1.0, 1.0], [edge, edge, edge], capacity=1)
    assert node.insert(Point(1.0, 1.0, 1.0))
    assert node.insert(Point(edge, edge, edge))
    assert node.is_leaf()
    assert len(node.points) == 2
