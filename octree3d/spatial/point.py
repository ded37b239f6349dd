"""
Точка индекса – неизменяемая координата + флаг попадания в последнюю сферу.
"""

import numpy as np
from octree3d.math.vec3 import Vec3, as_array


class Point:
    """
    Хранимая точка.

    Координата задаётся один раз при создании. Единственное изменяемое поле –
    `inside_query`, его переписывает `SpatialIndex.query_sphere` для каждой
    достигнутой точки. Хэш – по идентичности: две точки с одинаковыми
    координатами остаются разными объектами в результате запроса.
    """

    __slots__ = ("_pos", "inside_query")

    def __init__(self, x: float, y: float, z: float):
        self._pos = Vec3(x, y, z)
        self.inside_query = False

    @classmethod
    def of(cls, value) -> "Point":
        """Новая точка по координатам; Point копируется (флаг не переносится)."""
        if isinstance(value, Point):
            return cls(value.x, value.y, value.z)
        return cls(*Vec3.of(value).to_tuple())

    @property
    def x(self) -> float:
        return self._pos.x

    @property
    def y(self) -> float:
        return self._pos.y

    @property
    def z(self) -> float:
        return self._pos.z

    @property
    def position(self) -> Vec3:
        return self._pos

    def as_np(self) -> np.ndarray:
        return self._pos.as_np()

    def distance_squared_to(self, centre) -> float:
        """Квадрат евклидова расстояния до `centre`."""
        d = self._pos._v - as_array(centre)
        return float(np.dot(d, d))

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, inside={self.inside_query})"
