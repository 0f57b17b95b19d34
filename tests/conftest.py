"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from shtok.tokenizer import tokenize
from shtok.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns all tokens."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def word(value: str) -> Token:
    return Token(TokenType.WORD, value)


def comment(value: str) -> Token:
    return Token(TokenType.COMMENT, value)
