"""Test split() and join(), including partial results on error."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from shtok.classifier import Classifier
from shtok.errors import ShlexError, UnknownCharacterError, UnterminatedEscapeError
from shtok.lexer import join, quote, split
from shtok.tokens import WORD_CHARS

plain_words = st.lists(st.text(alphabet=WORD_CHARS, min_size=1, max_size=12), max_size=10)
any_words = st.lists(
    st.text(alphabet=WORD_CHARS + " \t\n'\"\\#", max_size=12),
    max_size=8,
)


class TestSplit:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ('one "two three" four', ["one", "two three", "four"]),
            ("a'b'c", ["abc"]),
            ("# a comment\nword", ["word"]),
            ("a\\ b", ["a b"]),
            ("'a\\b'", ["a\\b"]),
            ("", []),
            ("   \t  \n  ", []),
            ("hello    world", ["hello", "world"]),
            ('escaped\\ space "quoted\\"quote"', ["escaped space", 'quoted"quote']),
            ("repadd \"Mckee's Rocks\" x", ["repadd", "Mckee's Rocks", "x"]),
            ("a#b #c", ["a#b"]),
            ("x|y,z", ["x|y,z"]),
        ],
    )
    def test_examples(self, source, expected):
        assert split(source) == expected

    def test_unterminated_quote_keeps_prior_words(self):
        with pytest.raises(ShlexError) as exc_info:
            split('ok fine "unterminated')
        assert exc_info.value.words == ["ok", "fine"]

    def test_unterminated_quote_alone(self):
        with pytest.raises(ShlexError) as exc_info:
            split('"unterminated')
        assert exc_info.value.words == []

    def test_trailing_escape(self):
        with pytest.raises(UnterminatedEscapeError) as exc_info:
            split("trailing\\")
        assert exc_info.value.words == []

    def test_unknown_character(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            split("a b $c")
        assert exc_info.value.words == ["a", "b"]

    def test_custom_classifier(self):
        classifier = Classifier().with_extra(chars="/:")
        assert split("http://x /tmp", classifier) == ["http://x", "/tmp"]


class TestRoundTrip:
    @given(plain_words)
    @settings(max_examples=200)
    def test_rejoin_with_spaces_is_idempotent(self, words):
        first = split(" ".join(words))
        assert first == words
        assert split(" ".join(first)) == first

    @given(any_words)
    @settings(max_examples=200)
    def test_join_then_split(self, words):
        assert split(join(words)) == words


class TestQuote:
    def test_plain_word_unchanged(self):
        assert quote("abc-1.2") == "abc-1.2"

    def test_empty_word(self):
        assert quote("") == "''"

    def test_single_quote_inside(self):
        assert quote("it's") == "'it'\"'\"'s'"

    def test_join(self):
        assert join(["a", "b c", ""]) == "a 'b c' ''"
