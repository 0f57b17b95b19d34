"""Sequential character source with a single slot of pushback."""

from __future__ import annotations

from typing import TextIO

from shtok.tokens import Position


class CharReader:
    """Read one character at a time from a string or a text stream.

    Tracks the position of the next character and supports pushing back
    the character just read. Errors raised by the underlying stream are
    not caught.
    """

    def __init__(self, source: str | TextIO) -> None:
        if isinstance(source, str):
            self._text: str | None = source
            self._stream: TextIO | None = None
        else:
            self._text = None
            self._stream = source
        self._index = 0
        self._offset = 0
        self._line = 1
        self._col = 1
        self._last = ""
        self._last_pos: Position | None = None
        self._pending = ""
        # Only needed for streams, where the source text is not kept.
        self._line_chars: list[str] = []
        self._prev_line_chars: list[str] = []

    @property
    def position(self) -> Position:
        """Position of the next character to be read."""
        return Position(self._line, self._col, self._offset)

    def read(self) -> str:
        """Return the next character, or "" at end of input."""
        if self._pending:
            ch = self._pending
            self._pending = ""
        else:
            ch = self._next_char()
            if not ch:
                self._last = ""
                return ""
        self._last = ch
        self._last_pos = self.position
        self._advance(ch)
        return ch

    def unread(self) -> None:
        """Push back the character returned by the last read()."""
        if self._pending or not self._last or self._last_pos is None:
            raise RuntimeError("unread() must directly follow a successful read()")
        self._pending = self._last
        pos = self._last_pos
        self._line, self._col, self._offset = pos.line, pos.column, pos.offset
        if self._pending == "\n":
            self._line_chars = self._prev_line_chars
            self._prev_line_chars = []
        elif self._line_chars:
            self._line_chars.pop()
        self._last = ""
        self._last_pos = None

    def line_text(self, position: Position) -> str:
        """Return the source line containing *position*, without its newline.

        For streams only the part of the line read so far is available.
        """
        if self._text is not None:
            start = position.offset - (position.column - 1)
            end = self._text.find("\n", start)
            if end == -1:
                end = len(self._text)
            return self._text[start:end].rstrip("\r")
        if position.line == self._line:
            return "".join(self._line_chars).rstrip("\r")
        if position.line == self._line - 1:
            return "".join(self._prev_line_chars).rstrip("\r")
        return ""

    def _next_char(self) -> str:
        if self._text is not None:
            if self._index >= len(self._text):
                return ""
            ch = self._text[self._index]
            self._index += 1
            return ch
        assert self._stream is not None
        return self._stream.read(1)

    def _advance(self, ch: str) -> None:
        self._offset += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
            self._prev_line_chars = self._line_chars
            self._line_chars = []
        else:
            self._col += 1
            self._line_chars.append(ch)
