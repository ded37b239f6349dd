# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: маленький «сценарный» индекс и случайное облако.
"""

import numpy as np
import pytest

from octree3d import SpatialIndex


SCENARIO_POINTS = [(0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3), (0, 0, 4)]


@pytest.fixture
def scenario_index() -> SpatialIndex:
    """Корень (0,0,0) / 200, ёмкость 4, пять точек на оси Z."""
    return SpatialIndex.build(SCENARIO_POINTS, centre=(0, 0, 0), size=200, capacity=4)


@pytest.fixture
def cloud() -> np.ndarray:
    """500 точек в [-100, 100)³ плюс несколько точек на плоскостях деления."""
    rng = np.random.default_rng(1234)
    pts = rng.uniform(-100.0, 100.0, size=(500, 3))
    grid = np.array([[x, y, z]
                     for x in (-50.0, 0.0, 50.0)
                     for y in (-50.0, 0.0, 50.0)
                     for z in (0.0, 25.0)])
    return np.vstack([pts, grid])


@pytest.fixture
def cloud_index(cloud) -> SpatialIndex:
    return SpatialIndex.build(cloud, centre=(0, 0, 0), size=200, capacity=4)
