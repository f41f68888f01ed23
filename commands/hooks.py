"""
Dispatcher Hooks
Stock behaviour for unrecognized commands, failed commands and message removal
"""

from typing import Any

from utils.messages import MessageUtils


async def report_error(message: Any, error: BaseException) -> Any:
    """
    Tell the invoking user that their command failed.

    Args:
        message: Message that triggered the command
        error: Exception raised while running it

    Returns:
        Result of sending the reply
    """
    reply = (
        f"{MessageUtils.mention(message.author)}, "
        f"{MessageUtils.inline_code(message.content)} resulted in "
        f"{MessageUtils.inline_code(MessageUtils.error_text(error))}."
    )
    return await MessageUtils.send(message.channel, reply)


async def report_unrecognized(message: Any) -> Any:
    """
    Tell the invoking user that no command matches their message.

    Args:
        message: Message that triggered the command

    Returns:
        Result of sending the reply
    """
    reply = (
        f"{MessageUtils.mention(message.author)}, I don't recognize the command "
        f"{MessageUtils.inline_code(message.content)}."
    )
    return await MessageUtils.send(message.channel, reply)


async def remove_message(message: Any) -> Any:
    """Delete the message that triggered a command."""
    return await MessageUtils.resolve(message.delete())
