"""Console logging setup for the service entry point."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach one console handler to the package logger.

    Level comes from ``level``, else ``LOG_LEVEL``, else INFO.  Safe to call
    more than once.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger("freight_estimator")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    return logger
