"""
Built-in Commands
Help, echo and diagnostic commands available in every registry
"""

from typing import Any, Optional

from commands.command_registry import CommandRegistry
from utils.messages import MessageUtils
from utils.monitoring import CommandStats


def make_help_command(registry: CommandRegistry, prefix: str):
    """Build the `help` handler for a registry."""

    async def help_command(message: Any, name: Optional[str] = None, *_: str) -> Any:
        """
        Show all commands, or details for one.

        Args:
            message: Message that triggered the command
            name: Optional command name, with or without prefix
        """
        if name:
            if name.startswith(prefix):
                name = name[len(prefix):]
            help_text = registry.generate_command_help(name, prefix)
            reply = help_text or f"❌ Unknown command: `{prefix}{name}`"
        else:
            reply = registry.generate_help(prefix)
        return await MessageUtils.send(message.channel, reply)

    return help_command


async def echo_command(message: Any, *args: str) -> Any:
    """
    Repeat the arguments back to the channel.

    Args:
        message: Message that triggered the command
        args: Words to repeat
    """
    if not args:
        return await MessageUtils.send(message.channel, "❌ **Usage:** `echo <text...>`")
    return await MessageUtils.send(message.channel, " ".join(args))


async def args_command(message: Any, *args: str) -> Any:
    """Show how the message was split into arguments."""
    if not args:
        return await MessageUtils.send(message.channel, "No arguments")
    lines = [f"{i}. `{arg}`" for i, arg in enumerate(args, start=1)]
    return await MessageUtils.send(message.channel, "\n".join(lines))


def make_stats_command(stats: CommandStats):
    """Build the `stats` handler for a dispatcher's counters."""

    async def stats_command(message: Any, *_: str) -> Any:
        return await MessageUtils.send(message.channel, stats.format_status())

    return stats_command


def register_builtin_commands(
    registry: CommandRegistry,
    prefix: str = "!",
    stats: Optional[CommandStats] = None,
) -> CommandRegistry:
    """
    Register the built-in commands.

    Args:
        registry: Registry to add commands to
        prefix: Prefix shown in help output
        stats: Counters reported by `stats`; the command is skipped when None

    Returns:
        The registry, for chaining
    """
    registry.register(
        {
            "name": "help",
            "description": "List commands or show details for one",
            "aliases": ["h"],
            "usage": "[command]",
            "examples": ["help", "help echo"],
        },
        make_help_command(registry, prefix),
    )

    registry.register(
        {
            "name": "echo",
            "description": "Repeat the given text",
            "usage": "<text...>",
            "examples": ['echo hello world', 'echo "one argument"'],
        },
        echo_command,
    )

    registry.register(
        {
            "name": "args",
            "description": "Show how arguments are split",
            "category": "Debug",
            "usage": "[arguments...]",
            "examples": ['args one "two words" three'],
        },
        args_command,
    )

    if stats is not None:
        registry.register(
            {
                "name": "stats",
                "description": "Show command counters",
                "category": "Debug",
                "aliases": ["status"],
            },
            make_stats_command(stats),
        )

    return registry
