"""
Узел Octree – осевой куб, который либо хранит до `capacity` точек (лист),
либо разделён на 8 дочерних октантов и точек не хранит.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from octree3d.math.vec3 import Vec3, as_array
from octree3d.spatial.bounds import contains_point, intersects_sphere, octant_bounds
from octree3d.spatial.point import Point


class SubdivisionError(RuntimeError):
    """Повторное деление уже внутреннего узла – нарушение инварианта."""


class SpatialNode:
    """Узел Octree – хранит точки или (после переполнения) 8 дочерних узлов."""

    def __init__(self,
                 lo: Sequence[float],
                 hi: Sequence[float],
                 capacity: int = 4,
                 depth: int = 0,
                 max_depth: Optional[int] = None):
        self.lo = np.array(lo, dtype=np.float64)
        self.hi = np.array(hi, dtype=np.float64)
        self.capacity = capacity
        self.depth = depth
        self.max_depth = max_depth
        self.points: List[Point] = []
        self.children: Optional[List[SpatialNode]] = None

    @classmethod
    def from_centre(cls, centre, size: float, capacity: int = 4,
                    depth: int = 0, max_depth: Optional[int] = None) -> "SpatialNode":
        c = Vec3.of(centre).as_np()
        half = size / 2.0
        return cls(c - half, c + half, capacity=capacity,
                   depth=depth, max_depth=max_depth)

    # -----------------------------------------------------------------
    # геометрия
    # -----------------------------------------------------------------
    @property
    def centre(self) -> Vec3:
        return Vec3(*((self.lo + self.hi) * 0.5))

    @property
    def size(self) -> float:
        return float(self.hi[0] - self.lo[0])

    def contains_point(self, point: Point) -> bool:
        return contains_point(self.lo, self.hi, as_array(point.position))

    def intersects_sphere(self, centre, radius: float) -> bool:
        return intersects_sphere(self.lo, self.hi, as_array(centre), radius)

    def is_leaf(self) -> bool:
        return self.children is None

    # -----------------------------------------------------------------
    # вставка / деление
    # -----------------------------------------------------------------
    def insert(self, point: Point) -> bool:
        """
        Вставить точку в поддерево. Возвращает False, если куб узла её не
        содержит (точка молча отбрасывается).
        """
        if not self.contains_point(point):
            return False

        if self.children is None:
            if len(self.points) < self.capacity or not self._can_split(point):
                self.points.append(point)
                return True
            self.subdivide()

        # Первый принявший октант забирает точку – точка на общей грани
        # не дублируется.
        for child in self.children:
            if child.insert(point):
                return True
        return False

    def subdivide(self) -> None:
        """Разделить лист на 8 октантов и раздать им свои точки."""
        if self.children is not None:
            raise SubdivisionError(f"{self!r} is already subdivided")

        self.children = []
        for i in range(8):
            c_lo, c_hi = octant_bounds(self.lo, self.hi, i)
            self.children.append(SpatialNode(c_lo, c_hi,
                                             capacity=self.capacity,
                                             depth=self.depth + 1,
                                             max_depth=self.max_depth))

        for p in self.points:
            for child in self.children:
                if child.insert(p):
                    break
        self.points.clear()

    def _can_split(self, point: Point) -> bool:
        """
        Переполненный лист делится, только если деление разведёт точки:
        не на max_depth, куб ещё делится пополам и точки не совпадают.
        """
        if self.max_depth is not None and self.depth >= self.max_depth:
            return False
        mid = (self.lo + self.hi) * 0.5
        if not (np.all(mid > self.lo) and np.all(mid < self.hi)):
            return False
        p = as_array(point.position)
        return any(not np.array_equal(as_array(q.position), p) for q in self.points)

    def __repr__(self) -> str:
        c = self.centre
        if self.is_leaf():
            return (f"SpatialNode(Leaf, centre=({c.x:.3f}, {c.y:.3f}, {c.z:.3f}), "
                    f"size={self.size:.3f}, points={len(self.points)})")
        return (f"SpatialNode(Node, centre=({c.x:.3f}, {c.y:.3f}, {c.z:.3f}), "
                f"size={self.size:.3f}, depth={self.depth})")
