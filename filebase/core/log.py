"""Logger setup for the filebase namespace."""

from __future__ import annotations

import logging

LOGGER_NAME = "filebase"

_configured = False


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        _configured = True
    return logger
