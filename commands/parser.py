"""
Command Parser
Splits prefixed message text into a command name and positional arguments
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

QUOTE = '"'


@dataclass(frozen=True)
class NotACommand:
    """Input that does not start with the prefix, carried through untouched."""

    text: str


@dataclass(frozen=True)
class ParsedCommand:
    """A command name and its positional arguments."""

    command: str
    args: Tuple[str, ...] = ()


ParseResult = Union[NotACommand, ParsedCommand]
ParseFunction = Callable[[str], ParseResult]


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _read_command(text: str, start: int) -> int:
    """Return the index just past the run of word characters at `start`."""
    end = start
    while end < len(text) and _is_word_char(text[end]):
        end += 1
    return end


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_quoted(text: str, pos: int) -> Tuple[str, int]:
    """
    Match a quoted span starting at `pos`.

    Returns:
        Tuple of (content, end). `end` is -1 when the quote is unpaired.
    """
    close = text.find(QUOTE, pos + 1)
    if close == -1:
        return "", -1
    return text[pos + 1:close], close + 1


def _read_unquoted(text: str, pos: int) -> Tuple[str, int]:
    end = pos
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[pos:end], end


def tokenize_args(text: str) -> List[str]:
    """
    Split an argument string into tokens.

    A double-quoted span is a single argument whose content is trimmed.
    Everything else splits on whitespace; an unpaired quote is kept as part
    of its word and then stripped along with any other quote characters.

    Args:
        text: Argument section of a command

    Returns:
        Arguments in order of appearance

    Example:
        tokenize_args('are "double quotes" neat') -> ["are", "double quotes", "neat"]
    """
    args: List[str] = []
    pos = _skip_whitespace(text, 0)

    while pos < len(text):
        if text[pos] == QUOTE:
            content, end = _read_quoted(text, pos)
            if end != -1:
                args.append(content.strip())
                pos = _skip_whitespace(text, end)
                continue

        token, pos = _read_unquoted(text, pos)
        args.append(token.replace(QUOTE, "").strip())
        pos = _skip_whitespace(text, pos)

    return args


def make_command_parser(prefix: str) -> ParseFunction:
    """
    Build a parser for commands that begin with `prefix`.

    The prefix is matched literally, so punctuation and multi-character
    prefixes such as "!!" or "$" are safe. Arguments are positional only.

    Args:
        prefix: Text that marks a message as a command (the "!" in "!roll")

    Returns:
        Function mapping message text to a ParseResult

    Example:
        parse = make_command_parser("!")
        parse("!do the thing")      -> ParsedCommand("do", ("the", "thing"))
        parse("!empty")             -> ParsedCommand("empty", ())
        parse("Hello, world!")      -> NotACommand("Hello, world!")
    """

    def parse(text: str) -> ParseResult:
        if not text.startswith(prefix):
            return NotACommand(text)

        start = len(prefix)
        end = _read_command(text, start)

        # Prefix alone, or prefix followed by a non-word character
        if end == start:
            return NotACommand(text)

        rest = text[end:]
        return ParsedCommand(command=text[start:end], args=tuple(tokenize_args(rest)))

    return parse


def parse_command(text: str, prefix: str = "!") -> ParseResult:
    """Parse a single message without keeping the parser around."""
    return make_command_parser(prefix)(text)
