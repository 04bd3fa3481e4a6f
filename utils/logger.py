"""Logging utilities."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from config.defaults import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure process-wide logging once.

    The level resolves from the argument, then the ALLOCATION_LOG_LEVEL
    environment variable, then DEFAULT_LOG_LEVEL. An explicit level passed
    after the first call still replaces the root logger level.
    """

    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        if level:
            logging.getLogger().setLevel(level.upper())
        return

    resolved_level = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the requested module."""
    configure_logging()
    return logging.getLogger(name)
