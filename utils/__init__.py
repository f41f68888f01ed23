"""
Utility modules for the command dispatcher.
"""

from .logger import LoggerMixin, get_logger, setup_logging
from .messages import MessageUtils
from .monitoring import CommandStats

__all__ = [
    "LoggerMixin",
    "get_logger",
    "setup_logging",
    "MessageUtils",
    "CommandStats",
]
