"""
Token Stream Driver
===================

Helpers for consumers that want the whole token stream at once instead of
pulling tokens one by one, plus the strict and collecting error policies
built on top of the ERROR tokens the scanner produces.
"""

import logging
from typing import Iterable, Iterator, Optional

from unitlex.errors import ErrorCollector, LexicalError, TokenStreamError, TooManyErrors
from unitlex.lexer.policy import LexerPolicy
from unitlex.lexer.scanner import TokenIterator
from unitlex.lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)


def tokens(iterator: Iterator[Token]) -> list[Token]:
    """
    Drain a token iterator into a list.

    Pulls until the EOF token; EOF itself is not included.

    Args:
        iterator: Any iterator of tokens, usually a TokenIterator

    Returns:
        The substantive tokens in source order

    Raises:
        TokenStreamError: If the iterator stops before producing EOF
    """
    collected: list[Token] = []
    while True:
        try:
            token = next(iterator)
        except StopIteration:
            logger.error("token stream ended without EOF after %d tokens", len(collected))
            raise TokenStreamError(collected=len(collected)) from None

        if token.type is TokenType.EOF:
            break
        collected.append(token)

    logger.debug(
        "collected %d tokens (%d errors)",
        len(collected),
        sum(1 for t in collected if t.is_error),
    )
    return collected


def tokenize(text: str, policy: Optional[LexerPolicy] = None) -> list[Token]:
    """Tokenize a whole text buffer, EOF excluded."""
    return tokens(TokenIterator(text, policy))


# =============================================================================
# Error Policies
# =============================================================================

def _to_error(token: Token, lines: list[str], filename: str) -> LexicalError:
    """Build a LexicalError for an ERROR token with its source line."""
    source_line = None
    if 0 < token.line <= len(lines):
        source_line = lines[token.line - 1]
    return LexicalError(str(token.value), token.location(filename), source_line=source_line)


def collect_errors(
    token_list: Iterable[Token],
    source: str,
    filename: str = "<input>",
    max_errors: int = 100,
) -> ErrorCollector:
    """
    Gather every ERROR token as a LexicalError.

    Collection stops quietly at max_errors; collector.truncated tells
    whether more errors were left out.

    Args:
        token_list: Tokens produced from source
        source: The text the tokens were scanned from (for context lines)
        filename: Name used in error locations
        max_errors: Maximum number of errors to keep

    Returns:
        ErrorCollector holding the errors
    """
    collector = ErrorCollector(max_errors=max_errors)
    lines = source.split("\n")

    try:
        for token in token_list:
            if token.is_error:
                collector.add(_to_error(token, lines, filename))
    except TooManyErrors:
        logger.debug("error limit of %d reached", max_errors)

    return collector


def first_error(
    token_list: Iterable[Token],
    source: str,
    filename: str = "<input>",
) -> None:
    """
    Strict policy: reject the stream on its first ERROR token.

    Raises:
        LexicalError: For the first ERROR token found
    """
    lines = source.split("\n")
    for token in token_list:
        if token.is_error:
            raise _to_error(token, lines, filename)
