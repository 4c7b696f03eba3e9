"""
Configuration values for the Cann table service
Runtime tunables read from the environment, with defaults from constants
"""

import logging
import os

from .constants import (
    API_TIMEOUT_FOOTBALL_DATA,
    DEV_SERVER_HOST,
    DEV_SERVER_PORT,
)


API_TIMEOUT = float(os.getenv("API_TIMEOUT", API_TIMEOUT_FOOTBALL_DATA))
"""Timeout (seconds) for outbound football-data.org calls."""

SERVER_HOST = os.getenv("HOST", DEV_SERVER_HOST)
SERVER_PORT = int(os.getenv("PORT", DEV_SERVER_PORT))


def setup_logger(name: str) -> logging.Logger:
    """
    Create or retrieve a module logger.

    Handlers live on the root logger (configured in the package ``__init__``),
    so module loggers only carry a level and propagate.
    """

    logger = logging.getLogger(name)

    log_level_str = os.getenv("LOG_LEVEL", "DEBUG").upper()
    logger.setLevel(getattr(logging, log_level_str, logging.DEBUG))
    logger.propagate = True

    return logger
