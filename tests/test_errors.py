"""Test error messages, position accuracy, and context snippets."""

import io

import pytest

from shtok.errors import (
    ScanError,
    ShlexError,
    UnexpectedTokenError,
    UnknownCharacterError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from shtok.tokenizer import tokenize
from shtok.tokens import TokenType


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls", [UnterminatedEscapeError, UnterminatedQuoteError, UnknownCharacterError]
    )
    def test_scan_errors(self, cls):
        assert issubclass(cls, ScanError)
        assert issubclass(cls, ShlexError)

    def test_unexpected_token_names_type(self):
        err = UnexpectedTokenError(TokenType.UNKNOWN)
        assert "UNKNOWN" in err.message
        assert err.token_type is TokenType.UNKNOWN
        assert err.words == []


class TestErrorPositions:
    def test_unknown_char_position(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            tokenize("abc $ rest")
        err = exc_info.value
        assert err.position.line == 1
        assert err.position.column == 5

    def test_error_on_second_line(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            tokenize("line one\n*")
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 1

    def test_unterminated_quote_at_end(self):
        with pytest.raises(UnterminatedQuoteError, match="inside quotes") as exc_info:
            tokenize("x 'abc")
        assert exc_info.value.position.column == 7

    def test_unterminated_escape_message(self):
        with pytest.raises(UnterminatedEscapeError, match="after escape character"):
            tokenize("abc\\")

    def test_streamed_input_position(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            tokenize(io.StringIO("ok\nbad*"))
        assert exc_info.value.position.line == 2
        assert exc_info.value.position.column == 4
        assert exc_info.value.line == "bad*"


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("some text $ more text")
        formatted = exc_info.value.format()
        assert "some text $ more text" in formatted

    def test_format_contains_caret_under_char(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("ab$")
        last = exc_info.value.format().splitlines()[-1]
        assert last.endswith("  ^")
        assert last.index("^") - last.index("|") == 4

    def test_format_contains_error_prefix(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("$")
        assert exc_info.value.format().startswith("error: unknown character '$'")

    def test_format_with_custom_filename(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("line1\n\"open")
        formatted = exc_info.value.format("args.txt")
        assert "args.txt:2:6" in formatted

    def test_str_includes_position(self):
        with pytest.raises(ScanError) as exc_info:
            tokenize("  $")
        assert str(exc_info.value) == "unknown character '$' at 1:3"
