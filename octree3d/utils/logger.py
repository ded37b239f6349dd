# octree3d/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("octree3d")


logger = init_logger()


def set_debug(enabled: bool) -> None:
    """Переключить уровень логгера между DEBUG и INFO."""
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
