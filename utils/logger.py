"""
Logging utilities for the Discord bot.
Uses Rich for colored console output.
"""

import logging
from typing import Optional, Set

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for logging
CUSTOM_THEME = Theme({
    "logging.level.debug": "dim cyan",
})

console = Console(theme=CUSTOM_THEME)

# Level applied to loggers created without an explicit level
_default_level = logging.INFO

# Names of loggers configured through setup_logging
_managed: Set[str] = set()


def setup_logging(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with RichHandler.

    Args:
        name: Logger name
        level: Logging level (default: the current default level, INFO
            unless changed with set_log_level)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level is None:
        level = _default_level

    logger.setLevel(level)
    logger.propagate = False

    # Remove existing handlers
    logger.handlers = []

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="[%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    ))

    logger.addHandler(handler)
    _managed.add(name)

    return logger


def set_log_level(level: int) -> None:
    """
    Change the level of every logger created by setup_logging.

    Loggers created afterwards without an explicit level use it too.
    """
    global _default_level
    _default_level = level

    for name in _managed:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


class LoggerMixin:
    """Mixin class that provides logger functionality."""

    def __init__(self, name: str):
        self._logger = get_logger(name)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def success(self, message: str) -> None:
        """Log success message (INFO level with a [SUCCESS] prefix)."""
        self._logger.info(f"[SUCCESS] {message}")


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger, reusing it if it was already set up."""
    if name in _managed:
        return logging.getLogger(name)
    return setup_logging(name)
