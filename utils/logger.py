"""
Shared logger utility for the inventory planning project.
Provides a consistent logger configuration for all modules.
"""

import logging
import os

LOG_LEVEL_ENV = "INVENTORY_LOG_LEVEL"


def get_logger(name: str | None = None, level: str | int | None = None) -> logging.Logger:
    """
    Returns a logger with the specified name, configured with a standard format.
    The level comes from ``level``, then the INVENTORY_LOG_LEVEL environment
    variable, and falls back to INFO.
    If no name is provided, returns the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger
