"""Character classification for the tokenizer."""

from __future__ import annotations

from types import MappingProxyType

from shtok.tokens import (
    COMMENT_CHARS,
    ESCAPE_CHARS,
    ESCAPING_QUOTE_CHARS,
    NONESCAPING_QUOTE_CHARS,
    SPACE_CHARS,
    WORD_CHARS,
    CharClass,
)

# Order matters: later sets overwrite earlier ones for a shared character.
SET_NAMES = ("chars", "spaces", "escaping_quotes", "nonescaping_quotes", "escapes", "comments")

_SET_CLASSES = {
    "chars": CharClass.CHAR,
    "spaces": CharClass.SPACE,
    "escaping_quotes": CharClass.ESCAPING_QUOTE,
    "nonescaping_quotes": CharClass.NONESCAPING_QUOTE,
    "escapes": CharClass.ESCAPE,
    "comments": CharClass.COMMENT,
}


class Classifier:
    """Map single characters to a CharClass.

    The table is built once from named sets and is read-only afterwards,
    so one classifier can be shared between any number of tokenizers.
    """

    __slots__ = ("_sets", "_table")

    def __init__(
        self,
        *,
        chars: str = WORD_CHARS,
        spaces: str = SPACE_CHARS,
        escaping_quotes: str = ESCAPING_QUOTE_CHARS,
        nonescaping_quotes: str = NONESCAPING_QUOTE_CHARS,
        escapes: str = ESCAPE_CHARS,
        comments: str = COMMENT_CHARS,
    ) -> None:
        self._sets = {
            "chars": chars,
            "spaces": spaces,
            "escaping_quotes": escaping_quotes,
            "nonescaping_quotes": nonescaping_quotes,
            "escapes": escapes,
            "comments": comments,
        }
        table: dict[str, CharClass] = {}
        for name in SET_NAMES:
            cls = _SET_CLASSES[name]
            for ch in self._sets[name]:
                table[ch] = cls
        self._table = MappingProxyType(table)

    def classify(self, ch: str) -> CharClass:
        """Return the class of *ch*; unlisted characters are UNKNOWN."""
        return self._table.get(ch, CharClass.UNKNOWN)

    @property
    def table(self) -> MappingProxyType[str, CharClass]:
        return self._table

    def sets(self) -> dict[str, str]:
        """Return a copy of the named sets this classifier was built from."""
        return dict(self._sets)

    def with_extra(self, **extra: str) -> Classifier:
        """Return a new classifier with characters appended to the named sets."""
        unknown = set(extra) - set(SET_NAMES)
        if unknown:
            raise TypeError(f"unknown character set(s): {', '.join(sorted(unknown))}")
        sets = self.sets()
        for name, chars in extra.items():
            sets[name] += chars
        return Classifier(**sets)

    def __repr__(self) -> str:
        return f"Classifier({len(self._table)} characters)"


DEFAULT_CLASSIFIER = Classifier()
