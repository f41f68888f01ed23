"""
Command Dispatcher
Routes parsed commands to their handlers with hooks for unknown and failing commands
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from commands.hooks import remove_message, report_error, report_unrecognized
from commands.parser import NotACommand, make_command_parser
from utils.logger import LoggerMixin
from utils.messages import MessageUtils
from utils.monitoring import CommandStats

# Handlers receive the message followed by the parsed arguments
CommandFunction = Callable[..., Any]
CommandMap = Mapping[str, CommandFunction]

ErrorHook = Callable[[Any, BaseException], Union[Any, Awaitable[Any]]]
MessageHook = Callable[[Any], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class DispatcherOptions:
    """
    Behaviour of a CommandDispatcher.

    Attributes:
        command_prefix: Prefix used to recognize commands
        remove_command_messages: Call `on_remove_message` before running a command
        on_error: Called with (message, error) when a command fails
        on_remove_message: Called with the message that triggered a command
        on_unrecognized: Called with the message when no handler matches
    """

    command_prefix: str = "!"
    remove_command_messages: bool = True
    on_error: ErrorHook = report_error
    on_remove_message: MessageHook = remove_message
    on_unrecognized: MessageHook = report_unrecognized

    def replace(self, **changes: Any) -> "DispatcherOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


class CommandDispatcher(LoggerMixin):
    """
    Parses messages for commands and runs the matching handler.

    Example:
        dispatcher = CommandDispatcher({"ping": ping}, DispatcherOptions(command_prefix="#"))
        await dispatcher(message)
    """

    def __init__(
        self,
        commands: CommandMap,
        options: Optional[DispatcherOptions] = None,
        stats: Optional[CommandStats] = None,
    ):
        super().__init__("Dispatcher")
        self.commands = commands
        self.options = options or DispatcherOptions()
        self.stats = stats or CommandStats()
        self.parse = make_command_parser(self.options.command_prefix)

    async def __call__(self, message: Any) -> Any:
        return await self.handle(message)

    async def handle(self, message: Any) -> Any:
        """
        Handle an incoming message.

        Args:
            message: Object with a `content` attribute

        Returns:
            None for plain text, otherwise the result of the handler or hook
        """
        self.stats.record_message()
        parsed = self.parse(message.content)

        if isinstance(parsed, NotACommand):
            self.debug("Ignoring non-command message")
            return None

        if parsed.command not in self.commands:
            self.warning(f"Unrecognized command: {parsed.command}")
            self.stats.record_unrecognized()
            return await MessageUtils.resolve(self.options.on_unrecognized(message))

        handler = self.commands[parsed.command]

        try:
            if self.options.remove_command_messages:
                await MessageUtils.resolve(self.options.on_remove_message(message))

            self.debug(f"Executing: {parsed.command} {list(parsed.args)}")
            self.stats.record_command()
            return await MessageUtils.resolve(handler(message, *parsed.args))
        except Exception as error:
            self.error(f"Command error ({parsed.command}): {error}")
            self.stats.record_error()
            return await MessageUtils.resolve(self.options.on_error(message, error))


def make_parser(
    commands: CommandMap,
    options: Optional[DispatcherOptions] = None,
    **overrides: Any,
) -> CommandDispatcher:
    """
    Create a message handler that responds to `commands`.

    Commands are recognized by a prefix, "!" unless configured otherwise.
    By default the message that triggered a command is removed before the
    command runs; pass remove_command_messages=False to keep it.

    Args:
        commands: Mapping of command name to handler function
        options: Base options (defaults to DispatcherOptions())
        **overrides: Individual option fields to change

    Returns:
        Awaitable message handler

    Example:
        handler = make_parser(commands, command_prefix="#")
        await handler(message)
    """
    options = options or DispatcherOptions()
    if overrides:
        options = options.replace(**overrides)
    return CommandDispatcher(commands, options)
