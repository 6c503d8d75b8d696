"""Reading and writing boards as text."""

from __future__ import annotations

import math
import re
from typing import List, Sequence

from .errors import InvalidGridError
from .models import Board

EMPTY_MARKS = {".", "_", "-", "0"}
BOX_EDGE = "|"


def _strip_comments(text: str) -> List[str]:
    # '#' comments, plus the '-+-' rules pretty_board draws between regions
    return [
        ln for ln in text.splitlines()
        if not ln.lstrip().startswith("#") and "+" not in ln
    ]


def _is_cell_token(token: str) -> bool:
    return token in EMPTY_MARKS or token.isdigit()


def _is_row_layout(lines: List[str]) -> bool:
    """One whitespace separated row per line, as many values as lines."""
    rows = [[t for t in ln.split() if t != BOX_EDGE] for ln in lines if ln.strip()]
    if len(rows) < 2 or any(len(row) != len(rows) for row in rows):
        return False
    return all(_is_cell_token(t) for row in rows for t in row)


def _parse_rows(lines: List[str]) -> Board:
    board: Board = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        row = []
        for token in re.split(r"[,\s]+", line.strip()):
            if token in ("", BOX_EDGE):
                continue
            if token in EMPTY_MARKS:
                row.append(0)
            elif token.isdigit():
                row.append(int(token))
            else:
                raise InvalidGridError(f"Line {line_no}: '{token}' is not a number")
        board.append(row)
    return board


def _parse_flat(lines: List[str]) -> Board:
    digits = []
    for ch in "".join(lines):
        if ch.isdigit():
            digits.append(int(ch))
        elif ch in EMPTY_MARKS:
            digits.append(0)
    n = math.isqrt(len(digits))
    if n == 0 or n * n != len(digits):
        raise InvalidGridError(f"Puzzle yields {len(digits)} cells, which is not a square number")
    return [digits[i : i + n] for i in range(0, n * n, n)]


def parse_puzzle(text: str) -> Board:
    """
    Build a board from text.

    Row layouts hold one row per line: values separated by commas (what
    ``board_to_csv`` writes), or by whitespace when every line carries as
    many values as there are lines. Both allow N > 9. Otherwise every
    digit or empty mark (``.``, ``_``, ``-``, ``0``) is one cell in
    row-major order and anything else is ignored, so 81-character strings
    read back. ``#`` comment lines and the ``-+-`` rules of
    ``pretty_board`` are skipped, and ``|`` box edges are ignored.

    Only the layout is checked here; see ``validation.check_board``.
    """
    lines = _strip_comments(text)
    if any("," in ln for ln in lines) or _is_row_layout(lines):
        board = _parse_rows(lines)
    else:
        board = _parse_flat(lines)
    if not board:
        raise InvalidGridError("Puzzle text is empty")
    return board


def serialize_board(board: Sequence[Sequence[int]]) -> str:
    """Return board as a single string for easy comparison."""
    return "".join(str(cell) for row in board for cell in row)


def board_to_csv(board: Sequence[Sequence[int]]) -> bytes:
    lines = [",".join(str(v) for v in row) for row in board]
    return ("\n".join(lines) + "\n").encode("utf-8")


def format_braces(board: Sequence[Sequence[int]]) -> str:
    """One ``{a, b, ...},`` line per row."""
    return "".join("{" + ", ".join(str(v) for v in row) + "},\n" for row in board)


def pretty_board(board: Sequence[Sequence[int]]) -> str:
    n = len(board)
    base = math.isqrt(n)
    width = len(str(n))
    lines = []
    for r, row in enumerate(board):
        if r % base == 0 and r:
            segment = "-" * ((width + 1) * base - 1)
            lines.append("-+-".join([segment] * base))
        chunks = []
        for c, value in enumerate(row):
            if c % base == 0 and c:
                chunks.append("|")
            chunks.append(str(value).rjust(width) if value else ".".rjust(width))
        lines.append(" ".join(chunks))
    return "\n".join(lines)
