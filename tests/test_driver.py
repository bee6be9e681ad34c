# =============================================================================
# test_driver.py - Driver Tests
# =============================================================================
# Tests for draining token streams and for the strict and collecting
# error policies.
# =============================================================================

import pytest

from unitlex.errors import LexicalError, TokenStreamError, UnitlexError
from unitlex.lexer import (
    Token,
    TokenIterator,
    TokenType,
    collect_errors,
    first_error,
    tokenize,
    tokens,
)


class TestTokens:
    """Test the tokens() driver."""

    def test_excludes_eof(self):
        result = tokens(TokenIterator("a\nb"))
        assert result == [
            Token.ident("a"),
            Token.of(TokenType.NEWLINE),
            Token.ident("b"),
        ]
        assert all(not t.is_eof for t in result)

    def test_empty_stream(self):
        assert tokens(TokenIterator("")) == []

    def test_stops_at_first_eof(self):
        """Tokens after an EOF in a foreign stream are ignored."""
        stream = iter([Token.ident("a"), Token.of(TokenType.EOF), Token.ident("b")])
        assert tokens(stream) == [Token.ident("a")]

    def test_missing_eof_is_reported(self):
        """A stream without EOF raises TokenStreamError, not a crash."""
        stream = iter([Token.ident("a"), Token.number("1")])
        with pytest.raises(TokenStreamError) as exc_info:
            tokens(stream)
        assert exc_info.value.collected == 2
        assert "without EOF" in str(exc_info.value)

    def test_missing_eof_is_catchable_as_package_error(self):
        with pytest.raises(UnitlexError):
            tokens(iter([]))

    def test_drained_iterator_is_reported(self):
        """Draining the same iterator twice violates the contract."""
        iterator = TokenIterator("kg")
        tokens(iterator)
        with pytest.raises(TokenStreamError):
            tokens(iterator)

    def test_partial_consumption(self):
        """The driver drains whatever remains after manual pulls."""
        iterator = TokenIterator("a b c")
        iterator.next_token()
        assert tokens(iterator) == [Token.ident("b"), Token.ident("c")]

    def test_tokenize_matches_driver(self):
        source = "foot 12 inch\nyard 3 foot"
        assert tokenize(source) == tokens(TokenIterator(source))


class TestErrorPolicies:
    """Test the strict and collecting error policies."""

    def test_first_error_passes_clean_stream(self):
        source = "kg*m"
        assert first_error(tokenize(source), source) is None

    def test_first_error_raises(self):
        source = "foot 12 @ inch"
        with pytest.raises(LexicalError) as exc_info:
            first_error(tokenize(source), source, "units.txt")
        error = exc_info.value
        assert error.message == "unexpected character '@'"
        assert str(error.location) == "units.txt:1:9"
        assert error.source_line == source

    def test_error_message_has_caret(self):
        source = "a\nb @"
        with pytest.raises(LexicalError) as exc_info:
            first_error(tokenize(source), source)
        lines = str(exc_info.value).split("\n")
        assert lines[0] == "<input>:2:3: error: unexpected character '@'"
        assert lines[1] == "    b @"
        assert lines[2] == "      ^"

    def test_collect_all_errors(self):
        source = "@ a\n& b\n~"
        collector = collect_errors(tokenize(source), source)
        assert collector.error_count() == 3
        assert [e.location.line for e in collector.errors] == [1, 2, 3]
        assert not collector.truncated

    def test_collect_no_errors(self):
        source = "m 100 cm"
        collector = collect_errors(tokenize(source), source)
        assert not collector.has_errors()

    def test_collect_stops_at_limit(self):
        source = "@" * 10
        collector = collect_errors(tokenize(source), source, max_errors=3)
        assert collector.error_count() == 3
        assert collector.truncated
        assert "stopped after limit" in collector.report()

    def test_collect_exactly_at_limit(self):
        """As many errors as the limit allows is not a truncated report."""
        source = "@@@"
        collector = collect_errors(tokenize(source), source, max_errors=3)
        assert collector.error_count() == 3
        assert not collector.truncated
        assert "stopped after limit" not in collector.report()

    def test_collect_one_over_limit(self):
        source = "@@@@"
        collector = collect_errors(tokenize(source), source, max_errors=3)
        assert collector.error_count() == 3
        assert collector.truncated
