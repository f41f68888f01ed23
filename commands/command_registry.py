"""
Command Registry
Centralized command registration and lookup for the dispatcher
"""

import re
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from utils.logger import get_logger

# Command handler type alias: handler(message, *args)
CommandHandler = Callable[..., Any]

# Only word characters can follow the prefix in a parsed command
COMMAND_NAME_REGEX = re.compile(r"^[A-Za-z0-9_]+$")


class CommandDefinition:
    """Definition of a command."""

    def __init__(
        self,
        name: str,
        description: str = "",
        category: str = "General",
        aliases: Optional[List[str]] = None,
        usage: str = "",
        examples: Optional[List[str]] = None,
    ):
        self.name = name
        self.description = description
        self.category = category
        self.aliases = aliases or []
        self.usage = usage
        self.examples = examples or []


class Command:
    """Registered command with definition and handler."""

    def __init__(self, definition: CommandDefinition, handler: CommandHandler):
        self.definition = definition
        self.handler = handler

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def category(self) -> str:
        return self.definition.category

    @property
    def aliases(self) -> List[str]:
        return self.definition.aliases

    @property
    def usage(self) -> str:
        return self.definition.usage

    @property
    def examples(self) -> List[str]:
        return self.definition.examples


class CommandRegistry(Mapping[str, CommandHandler]):
    """
    Command registration and management.

    Behaves as a read-only mapping from command name (or alias) to handler,
    so it can be passed straight to a CommandDispatcher.
    """

    def __init__(self):
        self.logger = get_logger("CommandRegistry")
        self.commands: Dict[str, Command] = {}
        self.aliases: Dict[str, str] = {}
        self.categories: Dict[str, List[Command]] = {}

    def register(
        self,
        config: Dict[str, Any],
        handler: CommandHandler,
    ) -> "CommandRegistry":
        """
        Register a command.

        Args:
            config: Command configuration dict with keys:
                - name: Command name (required)
                - description: Command description
                - category: Command category
                - aliases: List of aliases
                - usage: Argument synopsis, e.g. "<text...>"
                - examples: List of example usages (without prefix)
            handler: Function called as handler(message, *args)

        Returns:
            Self for chaining

        Raises:
            ValueError: If a name is not a valid command name or is already taken
        """
        definition = CommandDefinition(
            name=config["name"],
            description=config.get("description", ""),
            category=config.get("category", "General"),
            aliases=config.get("aliases", []),
            usage=config.get("usage", ""),
            examples=config.get("examples", []),
        )

        seen = set()
        for name in [definition.name, *definition.aliases]:
            if name in seen:
                raise ValueError(f"Name repeated in registration: {name}")
            self._check_name(name)
            seen.add(name)

        command = Command(definition, handler)

        # Register main command
        self.commands[definition.name] = command

        # Register aliases
        for alias in definition.aliases:
            self.aliases[alias] = definition.name

        # Add to category
        if definition.category not in self.categories:
            self.categories[definition.category] = []
        self.categories[definition.category].append(command)

        self.logger.debug(f"Registered command: {definition.name}")
        return self

    def command(self, name: str, **config: Any) -> Callable[[CommandHandler], CommandHandler]:
        """
        Decorator form of `register`.

        Example:
            @registry.command("roll", description="Roll a die")
            async def roll(message, sides="6"):
                ...
        """

        def decorator(handler: CommandHandler) -> CommandHandler:
            self.register({"name": name, **config}, handler)
            return handler

        return decorator

    def _check_name(self, name: str) -> None:
        if not COMMAND_NAME_REGEX.match(name):
            raise ValueError(f"Invalid command name: {name!r}")
        if name in self.commands or name in self.aliases:
            raise ValueError(f"Command already registered: {name}")

    def find(self, name: str) -> Optional[Command]:
        """
        Get a command by name or alias.

        Args:
            name: Command name or alias

        Returns:
            Command or None if not found
        """
        if name in self.commands:
            return self.commands[name]

        alias_target = self.aliases.get(name)
        if alias_target:
            return self.commands.get(alias_target)

        return None

    def __getitem__(self, name: str) -> CommandHandler:
        command = self.find(name)
        if command is None:
            raise KeyError(name)
        return command.handler

    def __contains__(self, name: object) -> bool:
        return name in self.commands or name in self.aliases

    def __iter__(self) -> Iterator[str]:
        yield from self.commands
        yield from self.aliases

    def __len__(self) -> int:
        return len(self.commands) + len(self.aliases)

    def get_by_category(self, category: str) -> List[Command]:
        """
        Get all commands in a category.

        Args:
            category: Category name

        Returns:
            List of commands in the category
        """
        return self.categories.get(category, [])

    def generate_help(self, prefix: str = "!") -> str:
        """
        Generate help text for all commands.

        Args:
            prefix: Command prefix shown in front of each name

        Returns:
            Formatted help string
        """
        lines = [
            "📖 **Commands**",
            "",
        ]

        for category, commands in self.categories.items():
            icon = self._get_category_icon(category)
            lines.append(f"**{icon} {category}:**")

            for cmd in commands:
                aliases_str = f" ({', '.join(prefix + a for a in cmd.aliases)})" if cmd.aliases else ""
                lines.append(f"• `{prefix}{cmd.name}`{aliases_str} - {cmd.description}")

            lines.append("")

        return "\n".join(lines).rstrip()

    def generate_command_help(self, name: str, prefix: str = "!") -> Optional[str]:
        """
        Generate detailed help for a specific command.

        Args:
            name: Command name or alias
            prefix: Command prefix shown in front of the name

        Returns:
            Formatted help string or None if command not found
        """
        cmd = self.find(name)
        if not cmd:
            return None

        synopsis = f"{prefix}{cmd.name} {cmd.usage}".rstrip()
        lines = [
            f"📖 **Command:** `{synopsis}`",
            "",
            f"**Description:** {cmd.description}",
        ]

        if cmd.aliases:
            aliases_formatted = ", ".join(f"`{prefix}{a}`" for a in cmd.aliases)
            lines.append(f"**Aliases:** {aliases_formatted}")

        if cmd.examples:
            lines.append("**Examples:**")
            for example in cmd.examples:
                lines.append(f"  • `{prefix}{example}`")

        return "\n".join(lines)

    def _get_category_icon(self, category: str) -> str:
        icons = {
            "General": "📋",
            "Debug": "🔍",
        }
        return icons.get(category, "•")
