"""Logging setup for the astcalc command line."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "ASTCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGER_INITIALISED = False


def resolve_level(level: Optional[str] = None) -> int:
    """Turn a level name (or the environment default) into a logging level."""
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: Optional[str] = None) -> None:
    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(resolve_level(level))
        return
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "astcalc")
