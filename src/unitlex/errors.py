"""
unitlex Error Hierarchy
=======================

This module defines the exception hierarchy for the unitlex package.
All exceptions inherit from UnitlexError, allowing callers to catch all
package errors with a single except clause if desired.

Exception Hierarchy
-------------------
UnitlexError (base)
├── LexicalError - an ERROR token promoted to an exception (strict mode)
│   └── TooManyErrors - error collection limit reached
├── TokenStreamError - token stream ended without an EOF token
└── ConfigError - invalid configuration
    └── PolicyError - inconsistent lexer policy

The scanner itself never raises any of these. Malformed input degrades to
ERROR tokens, and the layers consuming the stream decide whether an ERROR
token becomes a LexicalError.

Error messages follow this format:
    filename:line:column: error: description
    source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class UnitlexError(Exception):
    """
    Base exception for all unitlex errors.

        try:
            token_list = tokens(iterator)
        except UnitlexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(UnitlexError):
    """
    An unrecognized character or malformed literal.

    Built from an ERROR token by the strict-mode helpers in
    unitlex.lexer.driver. Carries optional location, hint and source
    context for display.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            definitions.units:15:9: error: unexpected character '@'
                foot  12 @ inch
                         ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class TooManyErrors(LexicalError):
    """
    Raised when the error collection limit has been reached.

    Keeps reports for badly damaged input (binary files, wrong encoding)
    at a readable size.
    """

    def __init__(self, message: str = "Too many errors"):
        super().__init__(message)


# =============================================================================
# Protocol Errors
# =============================================================================

class TokenStreamError(UnitlexError):
    """
    A token stream ended without producing its terminal EOF token.

    This is a contract violation of the token producer, not of the
    consumer. The driver reports it with this exception instead of
    failing on the missing terminator.
    """

    def __init__(self, message: str = "", collected: int = 0):
        self.collected = collected
        if not message:
            message = (
                f"token stream exhausted without EOF "
                f"after {collected} token(s)"
            )
        super().__init__(message)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(UnitlexError):
    """Base exception for invalid configuration values."""
    pass


class PolicyError(ConfigError):
    """
    Inconsistent lexer policy.

    Raised when a LexerPolicy would make the grammar ambiguous, for
    example when an identifier character doubles as an operator.
    """
    pass


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects multiple errors for batch reporting.

    Used by the non-strict consumers to keep scanning after ERROR tokens
    and report all of them together at the end.

    Example:
        collector = ErrorCollector(max_errors=100)

        try:
            for error in errors:
                collector.add(error)
        except TooManyErrors:
            pass  # Already holding max_errors

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to keep; one more raises TooManyErrors
        """
        self.errors: list[LexicalError] = []
        self.max_errors = max_errors
        self.truncated = False

    def add(self, error: LexicalError) -> None:
        """
        Add an error to the collection.

        Args:
            error: The error to add

        Raises:
            TooManyErrors: If the collection is already full; the error
                is dropped and the collector marked truncated
        """
        if len(self.errors) >= self.max_errors:
            self.truncated = True
            raise TooManyErrors(f"Too many errors ({self.max_errors}), stopping")
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """
        Format all errors for display, followed by a summary line.

        Returns:
            Formatted string with all errors
        """
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        summary = f"{len(self.errors)} {error_word}"
        if self.truncated:
            summary += " (stopped after limit)"
        lines.append(summary)

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()
        self.truncated = False
