"""
Logging setup for vocab-games.

The engine logs through loguru; applications call configure_logging()
once at startup to pick the level and an optional file sink.
"""

from __future__ import annotations

import sys

from loguru import logger

from vocab_games.config import get_settings

LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Replace loguru's default sink with the engine's format.

    Args:
        level: Minimum level; defaults to settings.log_level
        log_file: Extra rotating file sink; defaults to settings.log_file
    """
    settings = get_settings()
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level=level, rotation="5 MB", retention=3)
