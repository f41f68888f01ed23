"""
Configuration management for the command dispatcher.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from commands.dispatcher import DispatcherOptions

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class Config:
    """Dispatcher configuration settings."""

    # Commands
    COMMAND_PREFIX: str = "!"
    REMOVE_COMMAND_MESSAGES: bool = True

    # Debug
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            COMMAND_PREFIX=os.getenv("COMMAND_PREFIX", "!"),
            REMOVE_COMMAND_MESSAGES=_env_flag("REMOVE_COMMAND_MESSAGES", "true"),
            DEBUG=_env_flag("DEBUG", "false"),
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.COMMAND_PREFIX:
            raise ValueError("COMMAND_PREFIX must not be empty")

    def to_options(self) -> DispatcherOptions:
        """Build dispatcher options with the stock hooks."""
        return DispatcherOptions(
            command_prefix=self.COMMAND_PREFIX,
            remove_command_messages=self.REMOVE_COMMAND_MESSAGES,
        )


# Global config instance
config = Config.from_env()
