"""
unitlex - Lexical Front End for Unit Definition Files
=====================================================

This package scans GNU-units style unit definition text (unit names,
numeric literals, arithmetic operators, significant line breaks) into a
stream of classified tokens for a downstream parser and evaluator.

Main Components
---------------
- **lexer**: Cursor, TokenIterator, LexerPolicy and the token model
- **render**: Debug rendering of token streams
- **config**: File reading and scanner settings
- **cli**: The unitlex-tokens command

Quick Start
-----------
    >>> from unitlex import tokenize
    >>> tokenize("12.5e-3")
    [Token(NUMBER, 12.5e-3, 1:1)]

The scanner never raises on bad input; stray characters come back as
ERROR tokens:

    >>> tokenize("@")
    [Token(ERROR, "unexpected character '@'", 1:1)]

Or use the command-line tool:
    $ unitlex-tokens definitions.units
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from unitlex.errors import (
    UnitlexError,
    SourceLocation,
    LexicalError,
    TooManyErrors,
    TokenStreamError,
    ConfigError,
    PolicyError,
    ErrorCollector,
)
from unitlex.lexer import (
    Cursor,
    TokenIterator,
    LexerPolicy,
    DEFAULT_POLICY,
    Token,
    TokenType,
    NumberLiteral,
    tokens,
    tokenize,
    collect_errors,
    first_error,
)
from unitlex.render import render_token, render_tokens, describe_tokens
from unitlex.config import LexerConfig

__all__ = [
    "__version__",
    # Lexer
    "Cursor",
    "TokenIterator",
    "LexerPolicy",
    "DEFAULT_POLICY",
    "Token",
    "TokenType",
    "NumberLiteral",
    "tokens",
    "tokenize",
    "collect_errors",
    "first_error",
    # Rendering
    "render_token",
    "render_tokens",
    "describe_tokens",
    # Configuration
    "LexerConfig",
    # Exception hierarchy
    "UnitlexError",
    "SourceLocation",
    "LexicalError",
    "TooManyErrors",
    "TokenStreamError",
    "ConfigError",
    "PolicyError",
    "ErrorCollector",
]
