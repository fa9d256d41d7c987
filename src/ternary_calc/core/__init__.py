"""
Core types shared by the evaluator, renderer and CLI.

- Cursor: per-call scan position over the input line
- ErrorKind / ParseError: the single error type raised on failure
"""

from .cursor import Cursor
from .errors import ErrorKind, ParseError

__all__ = [
    "Cursor",
    "ErrorKind",
    "ParseError",
]
