"""
Геометрические предикаты для осевых кубов (AABB), заданных парой (min, max).
"""

from typing import Tuple

import numpy as np


def contains_point(lo: np.ndarray, hi: np.ndarray, p: np.ndarray) -> bool:
    """Замкнутый интервал [min, max] по всем трём осям – граница внутри."""
    return bool(np.all(p >= lo) and np.all(p <= hi))


def intersects_sphere(lo: np.ndarray, hi: np.ndarray,
                      centre: np.ndarray, radius: float) -> bool:
    """
    Тест «куб – сфера»: ближайшая к центру сферы точка куба (центр,
    зажатый в [min, max] по каждой оси) должна лежать не дальше радиуса.
    """
    d = np.maximum(lo, np.minimum(centre, hi)) - centre
    return float(np.dot(d, d)) <= radius * radius


def octant_bounds(lo: np.ndarray, hi: np.ndarray,
                  index: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Границы октанта `index` (bit0 → x, bit1 → y, bit2 → z; бит = «плюс»).
    Строятся из плоскостей родителя, поэтому 8 октантов покрывают его без щелей.
    """
    mid = (lo + hi) * 0.5
    c_lo = lo.copy()
    c_hi = hi.copy()
    for axis in range(3):
        if index & (1 << axis):
            c_lo[axis] = mid[axis]
        else:
            c_hi[axis] = mid[axis]
    return c_lo, c_hi
