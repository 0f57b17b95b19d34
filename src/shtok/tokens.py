"""Token types, data structures, and the default character sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    UNKNOWN = auto()
    WORD = auto()  # resolved argument text
    SPACE = auto()  # reserved, never produced by the tokenizer
    COMMENT = auto()  # text after # up to (not including) the newline


class CharClass(Enum):
    UNKNOWN = auto()  # not in the classifier table
    CHAR = auto()  # ordinary word character
    SPACE = auto()
    ESCAPING_QUOTE = auto()  # "
    NONESCAPING_QUOTE = auto()  # '
    ESCAPE = auto()  # \
    COMMENT = auto()  # #
    EOF = auto()  # virtual, end of input


# Default named character sets
WORD_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-,|"
SPACE_CHARS = " \t\r\n"
ESCAPING_QUOTE_CHARS = '"'
NONESCAPING_QUOTE_CHARS = "'"
ESCAPE_CHARS = "\\"
COMMENT_CHARS = "#"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A (type, value) pair. The start position is not part of equality."""

    type: TokenType
    value: str
    start: Position | None = field(default=None, compare=False)

    def equal(self, other: Token | None) -> bool:
        """Return True if *other* has the same type and value."""
        if other is None:
            return False
        return self == other
