"""Top-level package for the ternary expression calculator.

Provides subpackages:
- ternary_calc.core – Cursor and the ParseError taxonomy
- ternary_calc.evaluator – recursive-descent evaluate()
- ternary_calc.render – integer to base-3 text
- ternary_calc.cli – one-line stdin/stdout boundary
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("ternary-calc")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The ternary-calc authors. Licensed under the MIT License"

from .config import EvaluatorConfig, OverflowPolicy
from .core import Cursor, ErrorKind, ParseError
from .evaluator import evaluate, evaluate_to_ternary
from .render import render, to_ternary_digits

__all__: list[str] = [
    "__version__",
    "__copyright__",
    "EvaluatorConfig",
    "OverflowPolicy",
    "Cursor",
    "ErrorKind",
    "ParseError",
    "evaluate",
    "evaluate_to_ternary",
    "render",
    "to_ternary_digits",
]
