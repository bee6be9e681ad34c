"""
Unit Definition Lexer
=====================

Converts unit definition text into a stream of tokens.

Main Components
---------------
- **Cursor**: Forward-only character reader with peek/advance
- **TokenIterator**: Produces one classified token per request
- **LexerPolicy**: Identifier characters, comment marker, whitespace
- **tokens / tokenize**: Drain a stream into a list (EOF excluded)

Example Usage
-------------
>>> from unitlex.lexer import tokenize
>>> tokenize("kg*m")
[Token(IDENT, 'kg', 1:1), Token(ASTERISK, 1:3), Token(IDENT, 'm', 1:4)]
"""

from unitlex.lexer.cursor import Cursor
from unitlex.lexer.driver import collect_errors, first_error, tokenize, tokens
from unitlex.lexer.policy import DEFAULT_POLICY, LexerPolicy
from unitlex.lexer.scanner import TokenIterator
from unitlex.lexer.tokens import (
    OPERATOR_CHARS,
    OPERATOR_TEXT,
    NumberLiteral,
    Token,
    TokenType,
)

__all__ = [
    "Cursor",
    "TokenIterator",
    "LexerPolicy",
    "DEFAULT_POLICY",
    "Token",
    "TokenType",
    "NumberLiteral",
    "OPERATOR_CHARS",
    "OPERATOR_TEXT",
    "tokens",
    "tokenize",
    "collect_errors",
    "first_error",
]
