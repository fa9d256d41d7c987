"""
Module: evaluator.parser

Purpose:
    Recursive-descent evaluator for single-line ternary expressions.
    The grammar is evaluated on the fly; no expression tree is built.

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := '(' expression ')' | number
    number     := digit+          digit in {'0', '1', '2'}

Key Functions:
    - evaluate(): Parse and evaluate an expression to an int
    - evaluate_to_ternary(): evaluate() followed by render()

Dependencies:
    - core.cursor: Per-call scan position
    - core.errors: ParseError raised on first failure
    - config: Overflow policy and nesting limit

Used By:
    - cli: Boundary layer
"""

from __future__ import annotations

import logging
from typing import Optional

from ternary_calc.config import DEFAULT_CONFIG, EvaluatorConfig
from ternary_calc.core.cursor import Cursor
from ternary_calc.core.errors import ErrorKind, ParseError
from ternary_calc.render.ternary import render

logger = logging.getLogger(__name__)

TERNARY_DIGITS = "012"
NON_TERNARY_DIGITS = "3456789"
ADDITIVE_OPS = "+-"
MULTIPLICATIVE_OPS = "*/"


class _Evaluator:
    """Grammar rules bound to one cursor. Created per evaluate() call."""

    def __init__(self, cursor: Cursor, config: EvaluatorConfig) -> None:
        self.cursor = cursor
        self.config = config
        self.depth = 0

    def _fail(self, kind: ErrorKind, *, position: Optional[int] = None,
              character: Optional[str] = None) -> ParseError:
        error = ParseError(kind, position=position, character=character)
        logger.debug("Evaluation failed: %s", error)
        return error

    def _checked(self, value: int, position: int) -> int:
        if not self.config.in_range(value):
            raise self._fail(ErrorKind.OVERFLOW, position=position)
        return value

    def expression(self) -> int:
        value = self.term()
        while True:
            self.cursor.skip_whitespace()
            op = self.cursor.peek()
            if op is None or op not in ADDITIVE_OPS:
                return value
            op_position = self.cursor.position
            self.cursor.advance()
            right = self.term()
            value = value + right if op == "+" else value - right
            value = self._checked(value, op_position)

    def term(self) -> int:
        value = self.factor()
        while True:
            self.cursor.skip_whitespace()
            op = self.cursor.peek()
            if op is None or op not in MULTIPLICATIVE_OPS:
                return value
            op_position = self.cursor.position
            self.cursor.advance()
            right = self.factor()
            if op == "*":
                value = value * right
            else:
                if right == 0:
                    raise self._fail(ErrorKind.DIVISION_BY_ZERO, position=op_position)
                value = _truncating_div(value, right)
            value = self._checked(value, op_position)

    def factor(self) -> int:
        self.cursor.skip_whitespace()
        ch = self.cursor.peek()
        position = self.cursor.position

        if ch is None:
            raise self._fail(ErrorKind.UNEXPECTED_END_OF_INPUT, position=position)

        if ch == "(":
            if self.depth >= self.config.max_nesting:
                raise self._fail(ErrorKind.NESTING_TOO_DEEP, position=position, character=ch)
            self.depth += 1
            self.cursor.advance()
            value = self.expression()
            self.cursor.skip_whitespace()
            closing = self.cursor.peek()
            if closing != ")":
                raise self._fail(
                    ErrorKind.MISSING_CLOSING_PARENTHESIS,
                    position=self.cursor.position,
                    character=closing,
                )
            self.cursor.advance()
            self.depth -= 1
            return value

        if ch in TERNARY_DIGITS:
            return self.number()
        if ch in NON_TERNARY_DIGITS:
            raise self._fail(ErrorKind.INVALID_DIGIT, position=position, character=ch)
        raise self._fail(ErrorKind.UNEXPECTED_CHARACTER, position=position, character=ch)

    def number(self) -> int:
        start = self.cursor.position
        value = 0
        while True:
            ch = self.cursor.peek()
            if ch is None or ch not in TERNARY_DIGITS:
                break
            self.cursor.advance()
            value = self._checked(value * 3 + TERNARY_DIGITS.index(ch), start)

        # "13" is a bad numeral, not "1" followed by trailing "3"
        if ch is not None and ch in NON_TERNARY_DIGITS:
            raise self._fail(ErrorKind.INVALID_DIGIT, position=self.cursor.position, character=ch)
        return value


def _truncating_div(left: int, right: int) -> int:
    """Integer quotient rounded toward zero (-5 / 2 == -2)."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def evaluate(text: str, config: Optional[EvaluatorConfig] = None) -> int:
    """
    Evaluate a single-line ternary expression.

    Leading and trailing whitespace is ignored, and whitespace may appear
    between any two tokens. The whole line must be consumed.

    Args:
        text: Expression such as "12+21" or "(1+1)*2".
        config: Evaluator settings. Defaults to unbounded integers.

    Returns:
        The integer value of the expression.

    Raises:
        ParseError: On the first grammar or arithmetic error found, or when
            parentheses nest deeper than config.max_nesting.

    Example:
        >>> evaluate("12+21")
        12
        >>> evaluate("2-1-1")
        0
    """
    config = config or DEFAULT_CONFIG
    if not text or text.isspace():
        logger.debug("Evaluation failed: empty input")
        raise ParseError(ErrorKind.EMPTY_INPUT)

    cursor = Cursor(text)
    value = _Evaluator(cursor, config).expression()

    cursor.skip_whitespace()
    if not cursor.at_end():
        error = ParseError(
            ErrorKind.TRAILING_CONTENT,
            position=cursor.position,
            character=cursor.peek(),
        )
        logger.debug("Evaluation failed: %s (unparsed %r)", error, cursor.remaining())
        raise error

    logger.debug("Evaluated %r -> %d", text, value)
    return value


def evaluate_to_ternary(text: str, config: Optional[EvaluatorConfig] = None) -> str:
    """
    Evaluate an expression and render the result in base 3.

    Example:
        >>> evaluate_to_ternary("12+21")
        '110'
    """
    return render(evaluate(text, config))
