"""--tokens dump of the raw token stream."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from shtok.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> int:
    """Print one line per token to *file* and return the number printed."""
    count = 0
    for token in tokens:
        file.write(f"{_location(token)}{token.type.name} {token.value!r}\n")
        count += 1
    return count


def _location(token: Token) -> str:
    if token.start is None:
        return ""
    return f"{token.start.line}:{token.start.column} "
