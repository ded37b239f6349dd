"""
Публичный API – строим один SpatialIndex и отвечаем на запросы «какие точки
внутри сферы».

Коллаборатор (рендер, симуляция) один раз вызывает `build`, затем на каждый
кадр – `query_sphere(centre, radius)` и читает флаг `inside_query` у точек.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Set

import numpy as np

from octree3d.math.vec3 import as_array
from octree3d.spatial.node import SpatialNode
from octree3d.spatial.point import Point
from octree3d.utils.logger import logger
from octree3d.utils.profiler import Profiler


@dataclass
class QueryStats:
    """Счётчики последнего обхода query_sphere."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    points_tested: int = 0
    points_matched: int = 0


def _iter_points(points) -> Iterator:
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError(f"Expected an (N, 3) array, got shape {arr.shape}")
        yield from arr
        return
    yield from points


class SpatialIndex:
    """Octree над статичным набором точек с запросами по сфере."""

    def __init__(self,
                 centre=(0.0, 0.0, 0.0),
                 size: float = 200.0,
                 capacity: int = 4,
                 max_depth: Optional[int] = None):
        if not (np.isfinite(size) and size > 0):
            raise ValueError(f"Root cube size must be positive and finite, got {size}")
        if not np.all(np.isfinite(as_array(centre))):
            raise ValueError(f"Root cube centre must be finite, got {centre}")
        if capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.max_depth = max_depth
        self.root = SpatialNode.from_centre(centre, size,
                                            capacity=capacity,
                                            max_depth=max_depth)
        self._count = 0
        self.last_query_stats = QueryStats()

    # -----------------------------------------------------------------
    # построение
    # -----------------------------------------------------------------
    @classmethod
    def build(cls, points, centre=(0.0, 0.0, 0.0), size: float = 200.0,
              capacity: int = 4, max_depth: Optional[int] = None) -> "SpatialIndex":
        """Создать индекс над кубом (centre, size) и вставить точки по порядку."""
        index = cls(centre, size, capacity=capacity, max_depth=max_depth)
        dropped = 0
        with Profiler("SpatialIndex.build"):
            for p in _iter_points(points):
                if index.insert(p) is None:
                    dropped += 1
        logger.info(f"[Octree] Built index: {len(index)} points stored, "
                    f"{dropped} dropped, depth {index.depth()}.")
        return index

    @classmethod
    def from_config(cls, points, config) -> "SpatialIndex":
        """Параметры корневого куба берутся из секции `index` конфига."""
        cfg = config.section("index")
        return cls.build(points,
                         centre=cfg["centre"],
                         size=float(cfg["size"]),
                         capacity=int(cfg["capacity"]),
                         max_depth=cfg["max_depth"])

    @classmethod
    def bounding(cls, points, capacity: int = 4, padding: float = 1.0,
                 max_depth: Optional[int] = None) -> "SpatialIndex":
        """Построить индекс, корневой куб которого охватывает все точки."""
        pts = list(_iter_points(points))
        if not pts:
            return cls((0.0, 0.0, 0.0), 1.0, capacity=capacity, max_depth=max_depth)

        coords = np.array([Point.of(p).as_np() for p in pts])
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        size = float((hi - lo).max()) + 2.0 * padding
        if size <= 0:
            size = 1.0
        return cls.build(pts, centre=(lo + hi) * 0.5, size=size,
                         capacity=capacity, max_depth=max_depth)

    def insert(self, point) -> Optional[Point]:
        """
        Вставить точку. Возвращает сохранённую копию точки или None, если точка
        лежит вне корневого куба и была отброшена.
        """
        p = Point.of(point)
        if not self.root.insert(p):
            logger.debug(f"[Octree] Dropped {p!r}: outside root cube.")
            return None
        self._count += 1
        return p

    # -----------------------------------------------------------------
    # запрос по сфере
    # -----------------------------------------------------------------
    def query_sphere(self, centre, radius: float) -> Set[Point]:
        """
        Вернуть множество точек, для которых |p - centre| <= radius.

        Каждой достигнутой точке переписывается `inside_query`; точки в
        отсечённых поддеревьях сохраняют прежнее значение флага.
        """
        if radius < 0:
            logger.debug(f"[Octree] Negative query radius {radius}; using r² = {radius * radius}.")
        c = as_array(centre)
        stats = QueryStats()
        result: Set[Point] = set()
        with Profiler("SpatialIndex.query_sphere"):
            self._query_node(self.root, c, radius, result, stats)
        self.last_query_stats = stats
        return result

    query = query_sphere

    def _query_node(self, node: Optional[SpatialNode], centre: np.ndarray, radius: float,
                    result: Set[Point], stats: QueryStats) -> None:
        if node is None:
            return
        if not node.intersects_sphere(centre, radius):
            stats.nodes_pruned += 1
            return
        stats.nodes_visited += 1

        r2 = radius * radius
        for p in node.points:
            stats.points_tested += 1
            p.inside_query = p.distance_squared_to(centre) <= r2
            if p.inside_query:
                stats.points_matched += 1
                result.add(p)

        for child in node.children or ():
            self._query_node(child, centre, radius, result, stats)

    # -----------------------------------------------------------------
    # обход (для отрисовки кубов и точек)
    # -----------------------------------------------------------------
    def nodes(self) -> Iterator[SpatialNode]:
        """Все узлы в прямом порядке (родитель раньше детей)."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def leaves(self) -> Iterator[SpatialNode]:
        return (n for n in self.nodes() if n.is_leaf())

    def points(self) -> Iterable[Point]:
        for leaf in self.leaves():
            yield from leaf.points

    def depth(self) -> int:
        return max(leaf.depth for leaf in self.leaves())

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        c = self.root.centre
        return (f"SpatialIndex(centre=({c.x:.3f}, {c.y:.3f}, {c.z:.3f}), "
                f"size={self.root.size:.3f}, capacity={self.capacity}, points={len(self)})")
