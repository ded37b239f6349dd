# -*- coding: utf-8 -*-
"""
Headless‑демо: 100 случайных точек в кубе [-100, 100), сфера радиуса 50
проходит вдоль оси X; на каждом «кадре» логируем число точек внутри.
"""

import numpy as np

from octree3d import SpatialIndex, Config
from octree3d.utils import logger, set_debug


def random_points(count: int = 100, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(-100, 100, size=(count, 3)).astype(np.float64)


def sweep(index: SpatialIndex, radius: float, frames: int = 9, step: float = 25.0):
    """Сдвигать сферу по X, как клавиши A/D в оригинальной сцене."""
    counts = []
    for frame in range(frames):
        x = -100.0 + frame * step
        inside = index.query_sphere((x, 0.0, 0.0), radius)
        stats = index.last_query_stats
        logger.info(f"frame {frame}: centre x={x:+.1f} → {len(inside)} points "
                    f"({stats.nodes_visited} nodes visited, {stats.nodes_pruned} pruned)")
        counts.append(len(inside))
    return counts


if __name__ == "__main__":
    set_debug(False)
    cfg = Config()
    index = SpatialIndex.from_config(random_points(), cfg)
    sweep(index, float(cfg.section("query")["radius"]))
