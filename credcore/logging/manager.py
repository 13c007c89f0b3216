"""
Logger configuration for the credential service.

Every module logs through ``ensure_logger``. Records go to stdout, as plain
text or as one JSON object per line, at the level the settings ask for.
Passwords, digests and tokens are never passed to a logger.
"""

import logging
import sys
from typing import Optional

from credcore.config.base import BaseAppSettings
from credcore.logging.formatters import JsonFormatter

Logger = logging.Logger

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _resolve_level(level: str, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    # Unknown level names fall back to INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str,
    level: str = "INFO",
    debug: bool = False,
    json_format: bool = False,
) -> Logger:
    """
    Configure the named logger with a single stdout handler.

    Handlers from a previous call are replaced, so configuring a logger
    twice never duplicates output.

    Args:
        name: Logger name (usually __name__)
        level: Level name; DEBUG mode overrides it
        debug: Force the DEBUG level
        json_format: Emit JSON lines instead of plain text
    """
    log_level = _resolve_level(level, debug)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str, settings: Optional[BaseAppSettings] = None) -> Logger:
    """Configure a logger from ``DEBUG``, ``LOG_LEVEL`` and ``LOG_JSON_FORMAT``."""
    if settings is None:
        return setup_logger(name)
    return setup_logger(
        name,
        level=str(settings.LOG_LEVEL),
        debug=bool(settings.DEBUG),
        json_format=bool(settings.LOG_JSON_FORMAT),
    )


def ensure_logger(
    logger: Optional[Logger] = None,
    name: Optional[str] = None,
    settings: Optional[BaseAppSettings] = None,
) -> Logger:
    """
    Return ``logger`` if given, otherwise a logger configured for ``name``.

    Raises:
        ValueError: If neither a logger nor a name is supplied
    """
    if logger:
        return logger
    if not name:
        raise ValueError("Module name must be provided when logger is not specified")
    return get_logger(name, settings)
