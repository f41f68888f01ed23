"""
Logging utilities for the command dispatcher.

Every component logs through a child of one project logger that owns a
single Rich handler, so changing the level affects loggers created earlier.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

ROOT_LOGGER_NAME = "prefix_commands"

CUSTOM_THEME = Theme({
    "logging.level.debug": "dim cyan",
    "logging.level.warning": "yellow",
    "repr.str": "cyan",
})

console = Console(theme=CUSTOM_THEME)

_handler: Optional[RichHandler] = None


def _root_logger() -> logging.Logger:
    """Return the project logger, attaching the Rich handler on first use."""
    global _handler
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter(fmt="[%(component)s] %(message)s"))
        _handler.addFilter(_ComponentFilter())
        root.addHandler(_handler)
        root.setLevel(logging.INFO)
        root.propagate = False
    return root


class _ComponentFilter(logging.Filter):
    """Expose the short component name ("Dispatcher") to the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = record.name.rpartition(".")[2]
        return True


def set_level(level: int) -> None:
    """
    Set the level of every project logger, including existing ones.

    Args:
        level: Logging level, e.g. logging.DEBUG
    """
    _root_logger().setLevel(level)


def setup_logging(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a component logger under the project logger.

    Args:
        name: Component name, e.g. "Dispatcher"
        level: Level for this component only; inherits the project level when None

    Returns:
        Logger instance
    """
    _root_logger()
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    if level is not None:
        logger.setLevel(level)
    return logger


class LoggerMixin:
    """Mixin class that provides logger functionality."""

    def __init__(self, name: str):
        self._logger = setup_logging(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


def get_logger(name: str) -> logging.Logger:
    """Get a component logger."""
    return setup_logging(name)
