"""
Console chat session.
Feeds lines typed in a terminal to the command dispatcher.
"""

import asyncio
import sys
from typing import IO, List, Optional

from rich.console import Console

from bot.config import Config
from commands.builtin_commands import register_builtin_commands
from commands.command_registry import CommandRegistry
from commands.dispatcher import CommandDispatcher
from utils.logger import console as log_console
from utils.logger import get_logger
from utils.monitoring import CommandStats

logger = get_logger("Console")


class ConsoleAuthor:
    """The local user."""

    def __init__(self, id: str = "console", name: str = "you"):
        self.id = id
        self.name = name

    def __str__(self) -> str:
        return self.name


class ConsoleChannel:
    """Channel that prints replies to the terminal and keeps a history."""

    def __init__(self, name: str = "console", console: Optional[Console] = None):
        self.name = name
        self.console = console or log_console
        self.history: List[str] = []

    async def send(self, content: str) -> str:
        self.history.append(content)
        self.console.print(content, markup=False)
        return content


class ConsoleMessage:
    """A line of input, shaped like a chat message."""

    def __init__(self, content: str, author: ConsoleAuthor, channel: ConsoleChannel):
        self.content = content
        self.author = author
        self.channel = channel
        self.deleted = False

    async def delete(self) -> None:
        self.deleted = True


def build_dispatcher(
    cfg: Config,
    registry: Optional[CommandRegistry] = None,
    stats: Optional[CommandStats] = None,
) -> CommandDispatcher:
    """
    Create a dispatcher with the built-in commands registered.

    Args:
        cfg: Configuration to take prefix and removal flag from
        registry: Registry with extra commands (a new one if None)
        stats: Counters to record into (new ones if None)

    Returns:
        Configured dispatcher
    """
    stats = stats or CommandStats()
    registry = registry if registry is not None else CommandRegistry()
    register_builtin_commands(registry, cfg.COMMAND_PREFIX, stats)
    return CommandDispatcher(registry, cfg.to_options(), stats)


async def run_console(
    cfg: Config,
    registry: Optional[CommandRegistry] = None,
    stream: Optional[IO[str]] = None,
    channel: Optional[ConsoleChannel] = None,
) -> CommandStats:
    """
    Read lines until end of input and dispatch each one.

    Args:
        cfg: Configuration
        registry: Registry with extra commands
        stream: Input stream (default: stdin)
        channel: Channel replies are sent to

    Returns:
        Counters collected during the session
    """
    cfg.validate()
    stream = stream or sys.stdin
    channel = channel or ConsoleChannel()
    author = ConsoleAuthor()
    dispatcher = build_dispatcher(cfg, registry)

    logger.info(f"Type {cfg.COMMAND_PREFIX}help to see available commands")

    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, stream.readline)
        if not line:
            break

        message = ConsoleMessage(line.rstrip("\r\n"), author, channel)
        await dispatcher.handle(message)

    logger.info("End of input")
    return dispatcher.stats
