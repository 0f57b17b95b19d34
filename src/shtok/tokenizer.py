"""Shell-style tokenizer: a single-pass state machine over classified characters."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum, auto
from typing import TextIO

from shtok.classifier import DEFAULT_CLASSIFIER, Classifier
from shtok.errors import (
    ScanError,
    UnknownCharacterError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from shtok.reader import CharReader
from shtok.tokens import CharClass, Position, Token, TokenType

logger = logging.getLogger(__name__)


class _State(Enum):
    START = auto()  # nothing consumed yet
    IN_WORD = auto()
    ESCAPING = auto()  # after \ outside quotes
    ESCAPING_QUOTED = auto()  # after \ inside "..."
    QUOTING_ESCAPING = auto()  # inside "..."
    QUOTING = auto()  # inside '...'
    COMMENT = auto()


class _Action(Enum):
    NONE = auto()  # consume, change state only
    APPEND = auto()
    EMIT = auto()
    UNREAD_EMIT = auto()  # push the character back, then emit
    LINE_END = auto()  # emit on newline, append anything else
    END = auto()  # end of stream, no token
    ESCAPE_EOF = auto()
    QUOTE_EOF = auto()


_KNOWN = (
    CharClass.CHAR,
    CharClass.SPACE,
    CharClass.ESCAPING_QUOTE,
    CharClass.NONESCAPING_QUOTE,
    CharClass.ESCAPE,
    CharClass.COMMENT,
)

_TRANSITIONS: dict[tuple[_State, CharClass], tuple[_Action, _State]] = {
    (_State.START, CharClass.EOF): (_Action.END, _State.START),
    (_State.START, CharClass.CHAR): (_Action.APPEND, _State.IN_WORD),
    (_State.START, CharClass.SPACE): (_Action.NONE, _State.START),
    (_State.START, CharClass.ESCAPING_QUOTE): (_Action.NONE, _State.QUOTING_ESCAPING),
    (_State.START, CharClass.NONESCAPING_QUOTE): (_Action.NONE, _State.QUOTING),
    (_State.START, CharClass.ESCAPE): (_Action.NONE, _State.ESCAPING),
    (_State.START, CharClass.COMMENT): (_Action.NONE, _State.COMMENT),
    # A # inside a word is literal; comments only start at a word boundary.
    (_State.IN_WORD, CharClass.EOF): (_Action.EMIT, _State.IN_WORD),
    (_State.IN_WORD, CharClass.CHAR): (_Action.APPEND, _State.IN_WORD),
    (_State.IN_WORD, CharClass.COMMENT): (_Action.APPEND, _State.IN_WORD),
    (_State.IN_WORD, CharClass.SPACE): (_Action.UNREAD_EMIT, _State.IN_WORD),
    (_State.IN_WORD, CharClass.ESCAPING_QUOTE): (_Action.NONE, _State.QUOTING_ESCAPING),
    (_State.IN_WORD, CharClass.NONESCAPING_QUOTE): (_Action.NONE, _State.QUOTING),
    (_State.IN_WORD, CharClass.ESCAPE): (_Action.NONE, _State.ESCAPING),
    (_State.ESCAPING, CharClass.EOF): (_Action.ESCAPE_EOF, _State.ESCAPING),
    (_State.ESCAPING_QUOTED, CharClass.EOF): (_Action.ESCAPE_EOF, _State.ESCAPING_QUOTED),
    (_State.QUOTING_ESCAPING, CharClass.EOF): (_Action.QUOTE_EOF, _State.QUOTING_ESCAPING),
    (_State.QUOTING_ESCAPING, CharClass.CHAR): (_Action.APPEND, _State.QUOTING_ESCAPING),
    (_State.QUOTING_ESCAPING, CharClass.SPACE): (_Action.APPEND, _State.QUOTING_ESCAPING),
    (_State.QUOTING_ESCAPING, CharClass.NONESCAPING_QUOTE): (
        _Action.APPEND,
        _State.QUOTING_ESCAPING,
    ),
    (_State.QUOTING_ESCAPING, CharClass.COMMENT): (_Action.APPEND, _State.QUOTING_ESCAPING),
    (_State.QUOTING_ESCAPING, CharClass.ESCAPING_QUOTE): (_Action.NONE, _State.IN_WORD),
    (_State.QUOTING_ESCAPING, CharClass.ESCAPE): (_Action.NONE, _State.ESCAPING_QUOTED),
    (_State.QUOTING, CharClass.EOF): (_Action.QUOTE_EOF, _State.QUOTING),
    (_State.QUOTING, CharClass.CHAR): (_Action.APPEND, _State.QUOTING),
    (_State.QUOTING, CharClass.SPACE): (_Action.APPEND, _State.QUOTING),
    (_State.QUOTING, CharClass.ESCAPING_QUOTE): (_Action.APPEND, _State.QUOTING),
    (_State.QUOTING, CharClass.ESCAPE): (_Action.APPEND, _State.QUOTING),
    (_State.QUOTING, CharClass.COMMENT): (_Action.APPEND, _State.QUOTING),
    (_State.QUOTING, CharClass.NONESCAPING_QUOTE): (_Action.NONE, _State.IN_WORD),
    # Only \n ends a comment; other whitespace is comment text.
    (_State.COMMENT, CharClass.EOF): (_Action.EMIT, _State.COMMENT),
    (_State.COMMENT, CharClass.SPACE): (_Action.LINE_END, _State.COMMENT),
}
for _cls in _KNOWN:
    _TRANSITIONS[_State.ESCAPING, _cls] = (_Action.APPEND, _State.IN_WORD)
    _TRANSITIONS[_State.ESCAPING_QUOTED, _cls] = (_Action.APPEND, _State.QUOTING_ESCAPING)
    if _cls is not CharClass.SPACE:
        _TRANSITIONS[_State.COMMENT, _cls] = (_Action.APPEND, _State.COMMENT)
del _cls


class Tokenizer:
    """Turn a character source into a sequence of typed tokens.

    Not safe for concurrent use: the reader position is mutated in place.
    The classifier may be shared freely.
    """

    def __init__(
        self,
        source: CharReader | str | TextIO,
        classifier: Classifier = DEFAULT_CLASSIFIER,
    ) -> None:
        self._reader = source if isinstance(source, CharReader) else CharReader(source)
        self._classifier = classifier

    @property
    def reader(self) -> CharReader:
        return self._reader

    @property
    def classifier(self) -> Classifier:
        return self._classifier

    def next_token(self) -> Token | None:
        """Scan and return the next token, or None at end of input.

        Raises a ScanError subclass on malformed input. Errors from the
        underlying source propagate unchanged.
        """
        state = _State.START
        kind = TokenType.UNKNOWN
        chars: list[str] = []
        start: Position | None = None

        while True:
            pos = self._reader.position
            ch = self._reader.read()
            cls = self._classifier.classify(ch) if ch else CharClass.EOF
            if cls is CharClass.UNKNOWN:
                raise self._error(UnknownCharacterError(ch, pos, self._reader.line_text(pos)))

            action, next_state = _TRANSITIONS[state, cls]

            if state is _State.START and next_state is not _State.START:
                kind = TokenType.COMMENT if next_state is _State.COMMENT else TokenType.WORD
                start = pos

            if action is _Action.APPEND:
                chars.append(ch)
            elif action is _Action.EMIT:
                break
            elif action is _Action.UNREAD_EMIT:
                self._reader.unread()
                break
            elif action is _Action.LINE_END:
                if ch == "\n":
                    break
                chars.append(ch)
            elif action is _Action.END:
                return None
            elif action is _Action.ESCAPE_EOF:
                raise self._error(
                    UnterminatedEscapeError(
                        "end of input after escape character", pos, self._reader.line_text(pos)
                    )
                )
            elif action is _Action.QUOTE_EOF:
                raise self._error(
                    UnterminatedQuoteError(
                        "end of input inside quotes", pos, self._reader.line_text(pos)
                    )
                )

            state = next_state

        return Token(kind, "".join(chars), start)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def _error(self, exc: ScanError) -> ScanError:
        logger.debug("scan error at %d:%d: %s", exc.position.line, exc.position.column, exc.message)
        return exc


def tokenize(source: str | TextIO, classifier: Classifier = DEFAULT_CLASSIFIER) -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return list(Tokenizer(source, classifier))
