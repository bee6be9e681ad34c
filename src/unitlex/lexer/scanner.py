"""
Unit Definition Scanner
=======================

This module implements the scanner (tokenizer) for unit definition text.
It walks the source one character at a time and produces one token per
request.

Classification
--------------
Each request skips insignificant whitespace, comments and line
continuations, then looks at the next character:

| Character            | Result                                  |
|----------------------|-----------------------------------------|
| newline              | NEWLINE                                 |
| identifier start     | IDENT (maximal run of identifier chars) |
| decimal digit        | NUMBER (integer[.fraction][e exponent]) |
| ( ) ! / | ^ + - *    | matching operator token                 |
| anything else        | ERROR, character consumed               |

Number Literals
---------------
Numbers keep their digit text. The fraction needs at least one digit
after the point and the exponent needs at least one digit after the
optional sign; otherwise the part is absent and its characters are left
for the next token:

    12.5e-3  ->  NumberLiteral("12", "5", "-3")
    5em      ->  NumberLiteral("5"), IDENT "em"
    3.       ->  NumberLiteral("3"), ERROR "unexpected character '.'"

Error Handling
--------------
The scanner is total. No input makes it raise; a stray character becomes
an ERROR token and scanning resumes after it. What to do with ERROR
tokens is decided by the consumer (see unitlex.lexer.driver).

Example
-------
>>> from unitlex.lexer.scanner import TokenIterator
>>> for token in TokenIterator("foot  12 inch"):
...     print(token)
Token(IDENT, 'foot', 1:1)
Token(NUMBER, 12, 1:7)
Token(IDENT, 'inch', 1:10)
Token(EOF, 1:14)
"""

import logging
import string
from typing import Iterator, Optional

from unitlex.lexer.cursor import Cursor
from unitlex.lexer.policy import DEFAULT_POLICY, LexerPolicy
from unitlex.lexer.tokens import OPERATOR_CHARS, Token, TokenType

logger = logging.getLogger(__name__)


def _is_digit(char: Optional[str]) -> bool:
    # Note: '' in string.digits is True, and None is not a str
    return char is not None and len(char) == 1 and char in string.digits


class TokenIterator:
    """
    Pull-based token producer over a borrowed text buffer.

    Call next_token() for one token at a time, or iterate. Iteration
    yields the EOF token once and then stops; next_token() keeps
    answering EOF after the end.

    Usage:
        iterator = TokenIterator(source_text)
        while not (token := iterator.next_token()).is_eof:
            handle(token)

    Attributes:
        policy: Character classes in effect
    """

    def __init__(self, text: str, policy: Optional[LexerPolicy] = None):
        """
        Initialize the iterator with source text.

        Args:
            text: Unit definition text (already decoded by the caller)
            policy: Identifier/comment grammar (default: DEFAULT_POLICY)
        """
        self.policy = policy or DEFAULT_POLICY
        self._cursor = Cursor(text)
        self._lookahead: Optional[Token] = None
        self._finished = False

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    # =========================================================================
    # Iterator Protocol
    # =========================================================================

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        token = self.next_token()
        if token.is_eof:
            self._finished = True
        return token

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._lookahead is None:
            self._lookahead = self._scan_token()
        return self._lookahead

    def next_token(self) -> Token:
        """
        Produce exactly one token.

        Returns:
            The next Token; EOF at (and after) the end of input
        """
        if self._lookahead is not None:
            token, self._lookahead = self._lookahead, None
            return token
        return self._scan_token()

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_insignificant(self) -> None:
        """
        Skip whitespace, comments and line continuations.

        Each pass consumes at least one character, so the loop ends.
        """
        cursor = self._cursor
        policy = self.policy

        while True:
            char = cursor.peek()

            if policy.is_whitespace(char):
                cursor.advance()
                continue

            # Comment runs up to, not including, the newline
            if policy.comment_char is not None and char == policy.comment_char:
                while cursor.peek() is not None and cursor.peek() != "\n":
                    cursor.advance()
                continue

            if policy.line_continuation and char == "\\" and cursor.peek(1) == "\n":
                cursor.advance()  # consume backslash
                cursor.advance()  # consume newline
                continue

            return

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        """Classify the upcoming character(s) and scan one token."""
        self._skip_insignificant()

        cursor = self._cursor
        line, column = cursor.line, cursor.column
        char = cursor.peek()

        if char is None:
            return Token.of(TokenType.EOF, line, column)

        # Newline - significant for definition boundaries
        if char == "\n":
            cursor.advance()
            return Token.of(TokenType.NEWLINE, line, column)

        if self.policy.is_ident_start(char):
            return self._scan_identifier(line, column)

        if _is_digit(char):
            return self._scan_number(line, column)

        if char in OPERATOR_CHARS:
            cursor.advance()
            return Token.of(OPERATOR_CHARS[char], line, column)

        # Unknown character: consume it so the next request makes progress
        cursor.advance()
        message = f"unexpected character '{char}'"
        logger.debug("%d:%d: %s", line, column, message)
        return Token.error(message, line, column)

    def _scan_identifier(self, line: int, column: int) -> Token:
        """
        Scan the maximal run of identifier characters.

        The first character has already been checked by the caller.
        """
        cursor = self._cursor
        chars = [cursor.advance()]
        while self.policy.is_ident_char(cursor.peek()):
            chars.append(cursor.advance())

        return Token.ident("".join(chars), line, column)

    def _scan_digits(self) -> str:
        """Consume a run of decimal digits, possibly empty."""
        cursor = self._cursor
        chars = []
        while _is_digit(cursor.peek()):
            chars.append(cursor.advance())
        return "".join(chars)

    def _scan_number(self, line: int, column: int) -> Token:
        """
        Scan a numeric literal as integer, fraction and exponent text.

        Optional parts are only consumed when complete, so a trailing
        '.' or 'e' is never swallowed.
        """
        cursor = self._cursor

        integer = self._scan_digits()

        fraction = None
        if cursor.peek() == "." and _is_digit(cursor.peek(1)):
            cursor.advance()  # consume .
            fraction = self._scan_digits()

        exponent = None
        if cursor.peek() in ("e", "E"):
            sign = cursor.peek(1)
            if sign in ("+", "-") and _is_digit(cursor.peek(2)):
                cursor.advance()  # consume e
                cursor.advance()  # consume sign
                exponent = sign + self._scan_digits()
            elif _is_digit(sign):
                cursor.advance()  # consume e
                exponent = self._scan_digits()

        return Token.number(integer, fraction, exponent, line, column)
