"""Error types with formatted source context."""

from __future__ import annotations

from shtok.tokens import Position, TokenType


class ShlexError(Exception):
    """Base class for tokenizing errors.

    ``words`` holds the words split() collected before the error.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.words: list[str] = []
        super().__init__(message)


class ScanError(ShlexError):
    """Raised on the first malformed input, with position and source line."""

    def __init__(self, message: str, position: Position, line: str = "") -> None:
        super().__init__(message)
        self.position = position
        self.line = line

    def __str__(self) -> str:
        return f"{self.message} at {self.position.line}:{self.position.column}"

    def format(self, filename: str = "<input>") -> str:
        col = self.position.column
        source_line = self.line

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class UnterminatedEscapeError(ScanError):
    """An escape character was the last character of the input."""


class UnterminatedQuoteError(ScanError):
    """End of input was reached inside a quoted section."""


class UnknownCharacterError(ScanError):
    """A character outside the classifier's table was encountered."""

    def __init__(self, char: str, position: Position, line: str = "") -> None:
        super().__init__(f"unknown character {char!r}", position, line)
        self.char = char


class UnexpectedTokenError(ShlexError):
    """The lexer received a token type it does not know how to handle."""

    def __init__(self, token_type: TokenType) -> None:
        super().__init__(f"unexpected token type: {token_type.name}")
        self.token_type = token_type
