"""
Logging for ground shading.

Wraps the standard logging module with a small registry so that the level
of every package logger can be changed in one call.

Usage:
    from groundshade.groundshade_logging import get_logger

    logger = get_logger(__name__)
    logger.info("Array type: Unlimited Rows, 100 ground segments")
    logger.debug(f"Front profile angle: {front_pa:.4f} rad")
"""

from __future__ import annotations

import logging
import sys
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels matching Python logging."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


class GroundShadingLogger:
    """
    Named logger with its own minimum level.

    Messages below the level are dropped before reaching the standard
    logging machinery.
    """

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        """
        Initialize logger.

        Args:
            name: Logger name (usually module name)
            level: Minimum log level to display
        """
        self.name = name
        self.level = level

    def _log(self, level: LogLevel, message: str) -> None:
        """Internal logging method."""
        if level < self.level:
            return  # Below minimum level
        logging.getLogger(self.name).log(level, message)

    def debug(self, message: str) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message)

    def set_level(self, level: LogLevel | int) -> None:
        """Set minimum log level."""
        self.level = LogLevel(level) if isinstance(level, int) else level


# Global logger registry
_loggers: dict[str, GroundShadingLogger] = {}


def get_logger(name: str, level: LogLevel | int = LogLevel.INFO) -> GroundShadingLogger:
    """
    Get or create a logger for the given name.

    Args:
        name: Logger name (usually module name or __name__)
        level: Minimum log level (default: INFO)

    Returns:
        GroundShadingLogger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Sky view factors computed")
    """
    if name not in _loggers:
        _loggers[name] = GroundShadingLogger(name, LogLevel(level) if isinstance(level, int) else level)
    return _loggers[name]


def set_global_level(level: LogLevel | int) -> None:
    """
    Set log level for all existing loggers.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)

    Example:
        >>> import groundshade.groundshade_logging as glog
        >>> glog.set_global_level(glog.LogLevel.DEBUG)  # Show shadow intervals
    """
    level = LogLevel(level) if isinstance(level, int) else level
    for logger in _loggers.values():
        logger.set_level(level)


# Configure Python logging to be less verbose by default
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
    stream=sys.stdout,
)
