"""
Character Cursor
================

Forward-only reader over a borrowed text buffer. End of input is
reported as None, never as a character value, so no real input
character can be mistaken for it.
"""

from typing import Optional


class Cursor:
    """
    Character-level reader with peek and advance.

    The cursor keeps a reference to the caller's string and never copies
    or modifies it. Line and column tracking follow every consumed
    character so tokens can carry their start location.

    Attributes:
        text: The borrowed source text
    """

    def __init__(self, text: str, line: int = 1):
        self.text = text
        self._pos = 0
        self._line = line
        self._column = 1

    @property
    def position(self) -> int:
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self._pos >= len(self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        """
        Look at the character at current position + offset without advancing.

        Returns None past the end of the text.
        """
        pos = self._pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> Optional[str]:
        """
        Consume and return the current character.

        Returns None (and stays put) at the end of the text.
        """
        if self.at_end:
            return None

        char = self.text[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char
