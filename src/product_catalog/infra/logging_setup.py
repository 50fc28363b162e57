"""
Logging configuration.

Installs one stream handler on the package logger; modules log through
logging.getLogger(__name__) and pass structured context via `extra`.
"""

from __future__ import annotations

import logging
import sys

from product_catalog.infra.config import log_level

LOGGER_NAME = "product_catalog"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger. Safe to call more than once.

    Args:
        level: Log level name; defaults to LOG_LEVEL from the environment

    Returns:
        The configured package logger
    """
    level = (level or log_level()).upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger
