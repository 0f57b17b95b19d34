"""Word lexer over the tokenizer, plus split/join convenience functions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from shtok.classifier import DEFAULT_CLASSIFIER, Classifier
from shtok.errors import ShlexError, UnexpectedTokenError
from shtok.reader import CharReader
from shtok.tokenizer import Tokenizer
from shtok.tokens import CharClass, TokenType

logger = logging.getLogger(__name__)


class Lexer:
    """Yield the words of a character source. Comments are skipped."""

    def __init__(
        self,
        source: CharReader | str | TextIO,
        classifier: Classifier = DEFAULT_CLASSIFIER,
    ) -> None:
        self._tokenizer = Tokenizer(source, classifier)

    @classmethod
    def from_tokenizer(cls, tokenizer: Tokenizer) -> Lexer:
        lexer = cls.__new__(cls)
        lexer._tokenizer = tokenizer
        return lexer

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    def next_word(self) -> str | None:
        """Return the next word, or None when the input is exhausted."""
        while True:
            token = self._tokenizer.next_token()
            if token is None:
                return None
            if token.type is TokenType.WORD:
                return token.value
            if token.type is not TokenType.COMMENT:
                raise UnexpectedTokenError(token.type)

    def __iter__(self) -> Iterator[str]:
        while True:
            word = self.next_word()
            if word is None:
                return
            yield word


def split(text: str, classifier: Classifier = DEFAULT_CLASSIFIER) -> list[str]:
    """Split *text* into words using shell-style quoting rules.

    On error the words collected so far are attached to the raised
    exception as ``exc.words``.
    """
    words: list[str] = []
    try:
        for word in Lexer(text, classifier):
            words.append(word)
    except ShlexError as exc:
        exc.words = words
        logger.debug("split aborted after %d word(s): %s", len(words), exc.message)
        raise
    logger.debug("split produced %d word(s)", len(words))
    return words


def quote(word: str, classifier: Classifier = DEFAULT_CLASSIFIER) -> str:
    """Return *word* quoted so that split() reads it back as one word."""
    if word and all(classifier.classify(ch) is CharClass.CHAR for ch in word):
        return word
    return "'" + word.replace("'", "'\"'\"'") + "'"


def join(words: Iterable[str], classifier: Classifier = DEFAULT_CLASSIFIER) -> str:
    """Join words into a single string that split() turns back into *words*."""
    return " ".join(quote(word, classifier) for word in words)
