"""
Message Utilities
Helper functions for replying to chat messages
"""

import inspect
from typing import Any


class MessageUtils:
    """Utility class for message-related helper functions."""

    @staticmethod
    async def resolve(value: Any) -> Any:
        """
        Await a value if it is awaitable.

        Hooks and command handlers may be plain functions or coroutines;
        this lets callers treat both the same way.

        Args:
            value: Return value of a hook or handler

        Returns:
            The value, awaited when needed
        """
        if inspect.isawaitable(value):
            return await value
        return value

    @staticmethod
    async def send(channel: Any, content: str) -> Any:
        """
        Send a message to a channel.

        Args:
            channel: Object with a `send` method
            content: Message content

        Returns:
            Whatever the channel returns for the sent message
        """
        return await MessageUtils.resolve(channel.send(content))

    @staticmethod
    def mention(author: Any) -> str:
        """Format a user mention, e.g. `<@1234>`."""
        return f"<@{author.id}>"

    @staticmethod
    def inline_code(text: str) -> str:
        return f"`{text}`"

    @staticmethod
    def error_text(error: BaseException) -> str:
        """
        Describe an exception for a chat reply.

        Args:
            error: The exception

        Returns:
            The exception message, or its class name when it has none
        """
        text = str(error)
        return text if text else type(error).__name__
