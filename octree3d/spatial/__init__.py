"""
Пакет spatial – Octree над точками и запросы по сфере.
"""

from octree3d.spatial.point import Point
from octree3d.spatial.node import SpatialNode, SubdivisionError
from octree3d.spatial.index import SpatialIndex, QueryStats

__all__ = ["Point", "SpatialNode", "SubdivisionError", "SpatialIndex", "QueryStats"]
