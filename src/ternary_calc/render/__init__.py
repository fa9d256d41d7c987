"""Integer to base-3 text rendering."""

from .ternary import render, to_ternary_digits

__all__ = ["render", "to_ternary_digits"]
