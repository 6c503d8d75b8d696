"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from .config import load_settings
from .errors import InvalidGridError
from .formats import board_to_csv, format_braces, parse_puzzle, pretty_board
from .grid import ConstraintGrid
from .solver import Solver

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2

DEMO_PUZZLE = """
# x: 0 1 2  3 4 5  6 7 8
.9. ... 853
... 8.. ..4
..8 2.3 .69

574 ..2 ...
... ... ...
... 9.. 637

94. 1.8 5..
7.. ..6 ...
682 ... .9.
"""

FORMATTERS = {
    "pretty": lambda rows: pretty_board(rows) + "\n",
    "braces": format_braces,
    "csv": lambda rows: board_to_csv(rows).decode("utf-8"),
}


def _solution_limit(raw: str) -> Optional[int]:
    """--limit value: a count, or 0 for every solution."""
    try:
        limit = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{raw}' is not an integer") from None
    if limit < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {limit}")
    return limit or None


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_INVALID

    ap = argparse.ArgumentParser(
        prog="mrvsudoku",
        description="Enumerate every solution of an N x N sudoku puzzle.",
    )
    ap.add_argument("puzzle", nargs="?", help="Path to a puzzle file (default: built-in demo)")
    ap.add_argument(
        "--limit",
        type=_solution_limit,
        default=settings.max_solutions,
        help="Stop after this many solutions (0 or unset: all)",
    )
    ap.add_argument("--format", choices=sorted(FORMATTERS), default="braces", help="Output layout")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        level=logging.DEBUG if args.verbose else settings.log_level,
    )

    try:
        if args.puzzle:
            log.info("Reading %s", args.puzzle)
            text = Path(args.puzzle).read_text(encoding="utf-8")
        else:
            text = DEMO_PUZZLE
        grid = ConstraintGrid(parse_puzzle(text))
    except (InvalidGridError, UnicodeDecodeError) as e:
        print(f"Invalid puzzle: {e}", file=sys.stderr)
        return EXIT_INVALID
    except OSError as e:
        print(f"Cannot read puzzle: {e}", file=sys.stderr)
        return EXIT_INVALID

    fmt = FORMATTERS[args.format]
    count = 0

    def emit(solution: ConstraintGrid) -> None:
        nonlocal count
        count += 1
        print(f"Solution {count}:\n{fmt(solution.rows())}")

    solver = Solver(limit=args.limit, on_solution=emit)
    solver.solve(grid)

    if count == 0:
        print("No solution")
    print(f"Iterations: {solver.iterations}")
    return EXIT_SUCCESS if count else EXIT_NO_SOLUTION


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
