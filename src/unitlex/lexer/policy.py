"""
Lexer Policy
============

The parts of the unit-definition grammar that vary between definition
files: which symbols count as identifier characters, the comment marker,
line continuations, and insignificant whitespace.

The defaults follow GNU units definition files, where names such as
"US$", "%", "'" (foot) and '"' (inch) are ordinary units.
"""

from dataclasses import dataclass
from typing import Optional

from unitlex.errors import PolicyError
from unitlex.lexer.tokens import OPERATOR_CHARS


@dataclass(frozen=True)
class LexerPolicy:
    """
    Configurable character classes for the scanner.

    Letters (str.isalpha) always start and continue identifiers, and
    decimal digits always continue them. The *_extra fields add
    non-alphanumeric symbols on top.

    Attributes:
        ident_start_extra: Extra characters that may start an identifier
        ident_extra: Extra characters that may continue an identifier
        comment_char: Comment marker running to end of line (None disables)
        line_continuation: Treat backslash-newline as whitespace
        whitespace: Insignificant whitespace characters (never newline)
    """
    ident_start_extra: str = "_%'\"$"
    ident_extra: str = "_%'\"$."
    comment_char: Optional[str] = "#"
    line_continuation: bool = True
    whitespace: str = " \t\r"

    def __post_init__(self) -> None:
        if "\n" in self.whitespace:
            raise PolicyError("newline is significant and cannot be whitespace")

        if self.comment_char is not None and len(self.comment_char) != 1:
            raise PolicyError(
                f"comment marker must be a single character, got {self.comment_char!r}"
            )

        special = set(self.ident_start_extra) | set(self.ident_extra)
        if self.comment_char is not None:
            special.add(self.comment_char)

        clashes = sorted(special & set(OPERATOR_CHARS))
        if clashes:
            raise PolicyError(
                f"characters {''.join(clashes)!r} are operators and cannot be "
                f"identifier or comment characters"
            )

        clashes = sorted(special & set(self.whitespace + "\n"))
        if clashes:
            raise PolicyError(f"whitespace characters {''.join(clashes)!r} cannot be reused")

        if any(char.isdigit() for char in self.ident_start_extra):
            raise PolicyError("digits start numbers and cannot start identifiers")

        if self.comment_char is not None and (
            self.comment_char.isalnum() or self.comment_char in self.ident_extra
        ):
            raise PolicyError(
                f"comment marker {self.comment_char!r} is also an identifier character"
            )

    def is_ident_start(self, char: Optional[str]) -> bool:
        """True if char may begin an identifier."""
        return char is not None and (char.isalpha() or char in self.ident_start_extra)

    def is_ident_char(self, char: Optional[str]) -> bool:
        """True if char may continue an identifier."""
        return char is not None and (
            char.isalpha() or char.isdigit() or char in self.ident_extra
        )

    def is_whitespace(self, char: Optional[str]) -> bool:
        return char is not None and char in self.whitespace


DEFAULT_POLICY = LexerPolicy()
