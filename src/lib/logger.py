"""Logging utilities for vscode-env-sync.

TIER 1: May import from core only.

Provides consistent logging across the I/O modules using Python's
standard logging module. The core package never logs.
"""

import logging
import os
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOGGER_PREFIX = "vscode_sync"
LEVEL_ENV = "VSCODE_SYNC_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: str | None) -> int:
    """Map a level name to a logging constant, defaulting to INFO."""
    name = (level or os.environ.get(LEVEL_ENV, "INFO")).upper()
    resolved = getattr(logging, name, None)
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Logger name (will be prefixed with 'vscode_sync.')
        level: Log level override (default: from VSCODE_SYNC_LOG_LEVEL or INFO)

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger("vscode")
        >>> logger.info("Synced 2 environment variables")
        20:55:39 | INFO     | vscode_sync.vscode | Synced 2 environment variables
    """
    full_name = f"{LOGGER_PREFIX}.{name}"

    if full_name in _loggers:
        return _loggers[full_name]

    logger = logging.getLogger(full_name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
        logger.propagate = False

    _loggers[full_name] = logger
    return logger


def set_log_level(level: LogLevel) -> None:
    """Set log level for all vscode_sync loggers."""
    log_level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(log_level)
