"""Logging configuration for the catalog scanner, exporter and API."""

import logging
import sys

__all__ = ["setup_logging"]

LOGGER_NAME = "catalog"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the ``catalog`` logger.

    Args:
        level: Logging level (default: INFO)

    Returns:
        The configured ``catalog`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(console_handler)
    return logger

