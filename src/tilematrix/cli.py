"""
Command-line interface for tilematrix.

Usage:
    python -m tilematrix [options] <command> LITERAL

Commands:
    show        Render the matrix
    transpose   Render the transpose
    row N       Render row N as a 1 x n matrix
    col N       Render column N as an n x 1 matrix
    diag        Render the diagonal matrix of a square matrix
    sum         Print the sum of all elements
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ._display import write_matrix
from ._matrix import Matrix
from .error import MatrixError

logger = logging.getLogger("tilematrix.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilematrix",
        description="Dense matrix viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ragged rows are padded with defaults
  python -m tilematrix show "1, 2, 3; 4, 5"

  # Second row as a row vector
  python -m tilematrix row 1 "1, 2, 0; 4, -100, 0; 7, 8, 9"

  # Diagonal matrix
  python -m tilematrix diag "1, 2; 3, 4"
""",
    )

    parser.add_argument(
        "--dtype", "-d",
        help="Element type (e.g. int64, float64, str)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("show", "Render the matrix"),
        ("transpose", "Render the transpose"),
        ("diag", "Render the diagonal matrix"),
        ("sum", "Print the sum of all elements"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("literal", help="Rows separated by ';', elements by ','")

    row_parser = subparsers.add_parser("row", help="Render one row")
    row_parser.add_argument("index", type=int, help="Row index")
    row_parser.add_argument("literal", help="Rows separated by ';', elements by ','")

    col_parser = subparsers.add_parser("col", help="Render one column")
    col_parser.add_argument("index", type=int, help="Column index")
    col_parser.add_argument("literal", help="Rows separated by ';', elements by ','")

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command."""
    m = Matrix.parse(args.literal, dtype=args.dtype)
    logger.debug("parsed %r", m)

    if args.command == "show":
        result = m
    elif args.command == "transpose":
        result = m.transpose()
    elif args.command == "row":
        result = m.row(args.index).to_matrix()
    elif args.command == "col":
        result = m.col(args.index).to_matrix()
    elif args.command == "diag":
        result = m.diag().to_matrix()
    elif args.command == "sum":
        print(sum(m.iter()))
        return 0
    else:
        return 1

    write_matrix(result)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        return run(args)
    except (MatrixError, ValueError, TypeError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
