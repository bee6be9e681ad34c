"""
Unit Definition Tokens
======================

Token model shared by the scanner, the driver and the debug renderer.

Token Types
-----------
- IDENT: Unit, prefix and function names ("kg", "US$", "'")
- NUMBER: Numeric literals, kept as raw digit text (see NumberLiteral)
- Operators: ( ) ! / | ^ + - *
- NEWLINE: End of line (significant, separates definitions)
- ERROR: Non-fatal lexical diagnostic
- EOF: End of input

Location fields (line, column) are informational only and are excluded
from equality, so tests and consumers can compare tokens by content:

>>> Token.ident("kg") == Token(TokenType.IDENT, "kg", 3, 7)
True
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from unitlex.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Categories of lexical elements in unit definition text."""

    # Structural tokens
    EOF = auto()         # End of input
    NEWLINE = auto()     # End of line (significant for definition boundaries)

    # Values
    IDENT = auto()       # Identifier name
    NUMBER = auto()      # Numeric literal (raw text parts)

    # Operators
    LPAR = auto()        # (
    RPAR = auto()        # )
    BANG = auto()        # ! (primitive unit marker)
    SLASH = auto()       # /
    PIPE = auto()        # | (division of plain numbers)
    CARET = auto()       # ^
    PLUS = auto()        # +
    DASH = auto()        # -
    ASTERISK = auto()    # *

    # Diagnostics
    ERROR = auto()       # Non-fatal lexical error


# Single-character operators, one character per token type
OPERATOR_CHARS: dict[str, TokenType] = {
    "(": TokenType.LPAR,
    ")": TokenType.RPAR,
    "!": TokenType.BANG,
    "/": TokenType.SLASH,
    "|": TokenType.PIPE,
    "^": TokenType.CARET,
    "+": TokenType.PLUS,
    "-": TokenType.DASH,
    "*": TokenType.ASTERISK,
}

OPERATOR_TEXT: dict[TokenType, str] = {
    token_type: char for char, token_type in OPERATOR_CHARS.items()
}


# =============================================================================
# Number Literal
# =============================================================================

@dataclass(frozen=True)
class NumberLiteral:
    """
    Raw text of a numeric literal, split into its parts.

    Values are never converted here; the evaluator decides precision.

    Attributes:
        integer: Integer digits (always present, non-empty)
        fraction: Digits after the decimal point, if a point was consumed
        exponent: Exponent digits with optional sign, if 'e'/'E' was consumed
    """
    integer: str
    fraction: Optional[str] = None
    exponent: Optional[str] = None

    def __str__(self) -> str:
        text = self.integer
        if self.fraction is not None:
            text += f".{self.fraction}"
        if self.exponent is not None:
            text += f"e{self.exponent}"
        return text


TokenValue = Union[str, NumberLiteral, None]


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        value: Identifier name, NumberLiteral, error message, or None
        line: Line number of the lexeme start (1-indexed, not compared)
        column: Column number of the lexeme start (1-indexed, not compared)
    """
    type: TokenType
    value: TokenValue = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.value is not None:
            if isinstance(self.value, NumberLiteral):
                return f"Token({self.type.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @classmethod
    def of(cls, token_type: TokenType, line: int = 0, column: int = 0) -> "Token":
        """Create a payload-free token (EOF, NEWLINE, operators)."""
        return cls(token_type, None, line, column)

    @classmethod
    def ident(cls, name: str, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.IDENT, name, line, column)

    @classmethod
    def number(
        cls,
        integer: str,
        fraction: Optional[str] = None,
        exponent: Optional[str] = None,
        line: int = 0,
        column: int = 0,
    ) -> "Token":
        return cls(TokenType.NUMBER, NumberLiteral(integer, fraction, exponent), line, column)

    @classmethod
    def error(cls, message: str, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.ERROR, message, line, column)

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)
