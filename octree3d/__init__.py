"""
octree3d – Octree‑индекс трёхмерных точек с запросами «точки внутри сферы».
"""

from octree3d.utils import logger, Config
from octree3d.math import Vec3
from octree3d.spatial import (
    Point,
    SpatialNode,
    SpatialIndex,
    QueryStats,
    SubdivisionError,
)

__version__ = "1.0.0"

__all__ = [
    "Config",
    "Vec3",
    "Point",
    "SpatialNode",
    "SpatialIndex",
    "QueryStats",
    "SubdivisionError",
]
