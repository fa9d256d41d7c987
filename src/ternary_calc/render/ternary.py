"""
Module: render.ternary

Purpose:
    Convert signed integers to their minimal base-3 text form.

Key Functions:
    - render(): Integer to ternary string ("-" prefix for negatives)
    - to_ternary_digits(): Digits of abs(value), most significant first

Used By:
    - evaluator.parser: evaluate_to_ternary()
    - cli: Success output
"""

from __future__ import annotations

from typing import List

BASE = 3
DIGITS = "012"


def _check_int(value: object) -> None:
    # bool is an int subclass but never a meaningful result
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")


def to_ternary_digits(value: int) -> List[int]:
    """
    Return the base-3 digits of abs(value), most significant first.

    Zero yields [0]. No leading zeros otherwise.

    Example:
        >>> to_ternary_digits(12)
        [1, 1, 0]
        >>> to_ternary_digits(-5)
        [1, 2]
    """
    _check_int(value)
    remaining = abs(value)
    if remaining == 0:
        return [0]

    digits: List[int] = []
    while remaining:
        remaining, digit = divmod(remaining, BASE)
        digits.append(digit)
    digits.reverse()
    return digits


def render(value: int) -> str:
    """
    Render an integer as a ternary numeral.

    Args:
        value: Any int.

    Returns:
        "0" for zero, otherwise digits 0-2 with no leading zero,
        prefixed by "-" if value is negative.

    Raises:
        TypeError: If value is not an int.

    Example:
        >>> render(12)
        '110'
        >>> render(-4)
        '-11'
    """
    text = "".join(DIGITS[d] for d in to_ternary_digits(value))
    return f"-{text}" if value < 0 else text
