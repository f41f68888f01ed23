"""
Command parsing and dispatch.
"""

from .parser import NotACommand, ParsedCommand, ParseResult, make_command_parser, parse_command
from .dispatcher import CommandDispatcher, DispatcherOptions, make_parser
from .command_registry import CommandRegistry, Command, CommandDefinition

__all__ = [
    "NotACommand",
    "ParsedCommand",
    "ParseResult",
    "make_command_parser",
    "parse_command",
    "CommandDispatcher",
    "DispatcherOptions",
    "make_parser",
    "CommandRegistry",
    "Command",
    "CommandDefinition",
]
