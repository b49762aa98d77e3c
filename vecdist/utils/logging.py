"""
Logging utilities for vecdist.

The package logger carries a NullHandler, so importing vecdist prints
nothing until an application calls setup_logger or configure_logging.
Module loggers ("vecdist.distance.batch", ...) propagate to it.
"""

import logging
import sys
from typing import Any, Optional, Union

from ..core.exceptions import ValidationError


PACKAGE_LOGGER = "vecdist"

# Default format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: Union[str, int]) -> int:
    """
    Convert a level name or number to a logging level.

    Raises:
        ValidationError: If the name is not a standard level
    """
    if isinstance(level, bool):
        raise ValidationError(f"Invalid log level: {level!r}")
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.upper() in LEVELS:
        return getattr(logging, level.upper())
    raise ValidationError(
        f"Invalid log level: {level!r}. Expected one of {list(LEVELS)}"
    )


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: Union[str, int] = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach stderr (and optionally file) output to a logger.

    Handlers installed by an earlier call are replaced, not stacked.

    Args:
        name: Logger name
        level: Log level name or number
        format_string: Custom format string
        log_file: Optional file path for logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        if getattr(handler, "_vecdist_owned", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )

    handlers: list = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._vecdist_owned = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def configure_logging(settings: Any) -> logging.Logger:
    """
    Apply ``settings.log_level`` to the package logger.

    Only the level changes; output handlers are left to the application.

    Args:
        settings: Object with a ``log_level`` attribute (config.Settings)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(settings.log_level))
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Get a logger by name."""
    return logging.getLogger(name)
