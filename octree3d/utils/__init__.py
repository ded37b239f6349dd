# octree3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger   – готовый объект logging.Logger (с level INFO)
    * Config   – JSON‑конфигурация индекса
    * Profiler – контекст‑менеджер замера времени
"""

from .logger import logger, set_debug
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler

__all__ = ["logger", "set_debug", "Config", "DEFAULT_CONFIG", "Profiler"]
