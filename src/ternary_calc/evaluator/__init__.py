"""
Module: evaluator

Purpose:
    Recursive-descent evaluation of ternary arithmetic expressions.

Key Functions:
    - evaluate(): Expression text to int
    - evaluate_to_ternary(): Expression text to base-3 result text
"""

from .parser import evaluate, evaluate_to_ternary

__all__ = [
    "evaluate",
    "evaluate_to_ternary",
]
