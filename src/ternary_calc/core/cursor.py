"""
Module: core.cursor

Purpose:
    Scan position over a single line of input. One Cursor is created per
    evaluation and never shared, so the evaluator holds no global state.

Key Classes:
    - Cursor: Text plus bounds-checked position

Used By:
    - evaluator.parser
"""

from __future__ import annotations

from typing import Optional


class Cursor:
    """
    Read position within an input string.

    Invariant: 0 <= position <= len(text). peek() returns None at the
    end and advance() refuses to move past it.

    Example:
        >>> cur = Cursor(" 12")
        >>> cur.skip_whitespace()
        >>> cur.advance()
        '1'
        >>> cur.position
        2
    """

    __slots__ = ("_text", "_position")

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= len(self._text)

    def peek(self) -> Optional[str]:
        """Return the current character, or None at end of input."""
        if self.at_end():
            return None
        return self._text[self._position]

    def advance(self) -> str:
        """
        Consume and return the current character.

        Raises:
            IndexError: If the cursor is already at end of input.
        """
        if self.at_end():
            raise IndexError(f"cursor at end of input (position {self._position})")
        ch = self._text[self._position]
        self._position += 1
        return ch

    def skip_whitespace(self) -> None:
        while not self.at_end() and self._text[self._position].isspace():
            self._position += 1

    def remaining(self) -> str:
        return self._text[self._position:]

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={len(self._text)})"
