# Path: vectordb/logging_utils.py
# Purpose: Configure the package logger for scripts and embedding applications.
# Layer: vectordb.
# Details: Library modules only call logging.getLogger(__name__); handlers are installed here on demand.

from __future__ import annotations

import logging

LOGGER_NAME = "vectordb"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``vectordb`` logger and set its level."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if isinstance(level, int) else level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "LOGGER_NAME", "LOG_FORMAT"]
