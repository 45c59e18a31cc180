"""
Utility modules for the Discord bot.
"""

from .logger import LoggerMixin, get_logger, set_log_level, setup_logging
from .error_handler import ErrorHandler, get_error_handler, setup_error_handler

__all__ = [
    "LoggerMixin",
    "get_logger",
    "set_log_level",
    "setup_logging",
    "ErrorHandler",
    "get_error_handler",
    "setup_error_handler",
]
