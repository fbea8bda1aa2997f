"""Command-line front end.

Usage::

    iota '*ii'
    iota program.iota --max-steps 50
    iota 'chicken egg egg' --apply chicken --base egg
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from iota.common.syntax import DEFAULT_SYNTAX, Syntax
from iota.core.ast import depth, size
from iota.interpret import Failure, interpret

logger = logging.getLogger(__name__)


def read_program(code_or_filename: str) -> str:
    """Return the contents of ``code_or_filename`` if it names a file, else the argument itself."""

    path = Path(code_or_filename)
    try:
        if path.is_file():
            return path.read_text(encoding="utf-8")
    except OSError:
        logger.debug("could not read %s; treating it as source", code_or_filename)
    return code_or_filename


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iota", description="Reduce an Iota program step by step."
    )
    parser.add_argument("program", help="source text, or a path to a file holding it")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="stop after this many reductions (default: run to normal form)",
    )
    parser.add_argument("--apply", default=DEFAULT_SYNTAX.apply, help="application symbol")
    parser.add_argument("--base", default=DEFAULT_SYNTAX.base, help="iota symbol")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each step and a summary of the last term")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.max_steps is not None and args.max_steps < 0:
        parser.error("--max-steps must be non-negative")
    try:
        syntax = Syntax(args.apply, args.base)
    except ValueError as e:
        parser.error(str(e))

    code = read_program(args.program)
    print(code)
    print()

    result = interpret(code, max_steps=args.max_steps, syntax=syntax)
    if isinstance(result, Failure):
        print(result.render(), file=sys.stderr)
        return 1

    for line in result.lines:
        print(line)
    if result.last is not None:
        logger.info(
            "%d terms; last has %d nodes, depth %d",
            len(result.lines),
            size(result.last),
            depth(result.last),
        )
    if not result.complete:
        noun = "step" if args.max_steps == 1 else "steps"
        print(f"... stopped after {args.max_steps} {noun} without reaching a normal form")
    return 0


__all__ = ["build_parser", "main", "read_program"]
