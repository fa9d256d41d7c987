"""
Module: cli

Purpose:
    Command-line boundary for the ternary calculator. Reads one line
    (positional argument or stdin), evaluates it, writes the base-3
    result to stdout, and maps ParseError kinds to exit statuses.

Key Functions:
    - main(): Testable entry point returning an exit status
    - run(): Console-script entry point (calls sys.exit)

Exit Statuses:
    0: Success
    1: Grammar error (empty input, bad character, bad digit, ...)
    2: Usage error (argparse)
    3: Division by zero
    4: Integer overflow (--max-bits only)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from ternary_calc import __version__
from ternary_calc.config import MIN_INT_BITS, EvaluatorConfig
from ternary_calc.core.errors import ParseError
from ternary_calc.evaluator.parser import evaluate
from ternary_calc.render.ternary import render

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ternary-calc",
        description="Evaluate a base-3 arithmetic expression (digits 0-2, + - * /, parentheses).",
    )
    parser.add_argument(
        "expression", nargs="?",
        help="Expression to evaluate. Read one line from stdin if omitted.",
    )
    parser.add_argument(
        "--max-bits", type=int, metavar="N",
        help=f"Report overflow outside a signed N-bit range (N >= {MIN_INT_BITS})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    return line.rstrip("\r\n")


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run the calculator once.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        stdin: Input stream used when no expression argument is given.
        stdout: Stream for the rendered result.
        stderr: Stream for "error: ..." messages.

    Returns:
        Process exit status (0 on success).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", stream=stderr)
        # basicConfig is a no-op when the root logger already has handlers
        logging.getLogger("ternary_calc").setLevel(logging.DEBUG)

    config = None
    if args.max_bits is not None:
        try:
            config = EvaluatorConfig.bounded(args.max_bits)
        except ValueError as e:
            parser.error(str(e))

    text = args.expression if args.expression is not None else _read_line(stdin)

    try:
        value = evaluate(text, config)
    except ParseError as e:
        logger.debug("Exit status %d for %s", e.kind.exit_code, e.kind.name)
        print(f"error: {e}", file=stderr)
        return e.kind.exit_code

    print(render(value), file=stdout)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
