"""Logging setup for the seamcarve command line."""

import logging
import sys

from .config import Config


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """Configure the ``seamcarve`` logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).

    Returns:
        The package logger.
    """
    formatter = logging.Formatter(fmt=Config.LOG_FORMAT,
                                  datefmt=Config.LOG_DATE_FORMAT)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger('seamcarve')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Repeated calls must not stack handlers
    if not logger.handlers:
        logger.addHandler(handler)

    return logger
