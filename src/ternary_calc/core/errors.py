"""
Module: core.errors

Purpose:
    Error taxonomy for ternary expression evaluation. Every failure the
    evaluator can detect is reported as a single ParseError carrying an
    ErrorKind, plus the offending character and position where known.

Key Classes:
    - ErrorKind: Enum of detectable failure categories
    - ParseError: Exception raised at the point of detection

Dependencies:
    - enum (std)

Used By:
    - core.cursor: Bounds reporting
    - evaluator.parser: Raised during recursive descent
    - cli: Mapped to process exit status
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """
    Category of an evaluation failure.

    Attributes:
        EMPTY_INPUT: Input is empty or entirely whitespace.
        UNEXPECTED_CHARACTER: Character where an operand or parenthesis was expected.
        UNEXPECTED_END_OF_INPUT: Input ended where a factor was expected.
        INVALID_DIGIT: Decimal digit outside {0, 1, 2} in numeral position.
        MISSING_CLOSING_PARENTHESIS: '(' was never matched by ')'.
        DIVISION_BY_ZERO: Right operand of '/' evaluated to 0.
        TRAILING_CONTENT: Non-whitespace left after a complete expression.
        OVERFLOW: Value exceeded the configured integer width.
        NESTING_TOO_DEEP: Parentheses nested beyond the configured depth.
    """
    EMPTY_INPUT = "empty input"
    UNEXPECTED_CHARACTER = "unexpected character"
    UNEXPECTED_END_OF_INPUT = "unexpected end of input"
    INVALID_DIGIT = "invalid digit"
    MISSING_CLOSING_PARENTHESIS = "missing closing parenthesis"
    DIVISION_BY_ZERO = "division by zero"
    TRAILING_CONTENT = "trailing content"
    OVERFLOW = "integer overflow"
    NESTING_TOO_DEEP = "nesting too deep"

    @property
    def exit_code(self) -> int:
        """Process exit status for this kind (never 0, never 2)."""
        return _EXIT_CODES.get(self, 1)


_EXIT_CODES = {
    ErrorKind.DIVISION_BY_ZERO: 3,
    ErrorKind.OVERFLOW: 4,
}


class ParseError(Exception):
    """
    Error evaluating a ternary expression.

    Attributes:
        kind: Failure category
        position: 0-based offset into the input, or None
        character: Offending character, or None

    Example:
        >>> err = ParseError(ErrorKind.INVALID_DIGIT, position=3, character="3")
        >>> str(err)
        "invalid digit '3' at position 3"
    """

    def __init__(
        self,
        kind: ErrorKind,
        *,
        position: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.position = position
        self.character = character
        super().__init__(self.message)

    @property
    def message(self) -> str:
        text = self.kind.value
        if self.character is not None:
            text += f" {self.character!r}"
        if self.position is not None:
            text += f" at position {self.position}"
        return text

    def __repr__(self) -> str:
        return (
            f"ParseError({self.kind.name}, position={self.position!r}, "
            f"character={self.character!r})"
        )
