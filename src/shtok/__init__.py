"""Shell-style tokenizer: quoting, escaping, and comments without shell expansion."""

from __future__ import annotations

from shtok.classifier import DEFAULT_CLASSIFIER, Classifier
from shtok.errors import (
    ScanError,
    ShlexError,
    UnexpectedTokenError,
    UnknownCharacterError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from shtok.lexer import Lexer, join, quote, split
from shtok.reader import CharReader
from shtok.tokenizer import Tokenizer, tokenize
from shtok.tokens import CharClass, Position, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CLASSIFIER",
    "CharClass",
    "CharReader",
    "Classifier",
    "Lexer",
    "Position",
    "ScanError",
    "ShlexError",
    "Token",
    "TokenType",
    "Tokenizer",
    "UnexpectedTokenError",
    "UnknownCharacterError",
    "UnterminatedEscapeError",
    "UnterminatedQuoteError",
    "join",
    "quote",
    "split",
    "tokenize",
]
