# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float64 – координаты точек и центров узлов).
"""
import numpy as np
from typing import Tuple


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def of(cls, value) -> "Vec3":
        """Привести кортеж / список / ndarray / Vec3 к Vec3."""
        if isinstance(value, Vec3):
            return value
        arr = np.asarray(value, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 coordinates, got shape {arr.shape}")
        return cls(*arr)

    # -------------------------------------------------
    # свойства (только чтение – координаты неизменяемы)
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar):
        return Vec3(*(self._v * scalar))

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other):
        return float(np.dot(self._v, other._v))

    def length_squared(self) -> float:
        return self.dot(self)

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float64."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


def as_array(value) -> np.ndarray:
    """
    Координаты (кортеж / ndarray / Vec3) → ndarray float64 из 3 элементов.
    Готовый массив нужной формы возвращается без копии – не изменять.
    """
    if isinstance(value, np.ndarray) and value.shape == (3,) and value.dtype == np.float64:
        return value
    return Vec3.of(value)._v
