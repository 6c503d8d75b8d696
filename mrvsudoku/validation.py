from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .bitset import value_bit
from .errors import ConflictingCluesError, InvalidGridError
from .models import GridSpec


def _find_problem(board: Sequence[Sequence[int]]) -> Optional[Tuple[str, Optional[Tuple[int, int, int]]]]:
    """Return (message, conflict) for the first problem found, or None."""
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        return "Board must be square (N x N).", None

    try:
        spec = GridSpec.for_size(n)
    except ValueError as e:
        return str(e), None

    row_used = [0] * n
    col_used = [0] * n
    region_used = [0] * n

    for y in range(n):
        for x in range(n):
            v = board[y][x]
            if not isinstance(v, int) or isinstance(v, bool):
                return f"Invalid value at ({y+1},{x+1}): {v!r} (not an integer).", None
            if v < 0 or v > n:
                return f"Invalid value at ({y+1},{x+1}): {v} (allowed: 0..{n}).", None
            if v == 0:
                continue

            bit = value_bit(v)
            r = spec.region_of(x, y)

            if (row_used[y] & bit) or (col_used[x] & bit) or (region_used[r] & bit):
                return (
                    f"Conflict: value {v} appears twice in a row/column/box (cell {y+1},{x+1}).",
                    (x, y, v),
                )

            row_used[y] |= bit
            col_used[x] |= bit
            region_used[r] |= bit

    return None


def validate_board(board: Sequence[Sequence[int]]) -> Tuple[bool, str]:
    """
    Checks:
      - board is N x N, N a perfect square
      - values are integers in 0..N
      - no duplicate values in any row/col/box (ignoring 0)
    """
    problem = _find_problem(board)
    if problem is None:
        return True, "OK"
    return False, problem[0]


def check_board(board: Sequence[Sequence[int]]) -> GridSpec:
    """Like validate_board, but raises and returns the size constants."""
    problem = _find_problem(board)
    if problem is not None:
        message, conflict = problem
        if conflict is not None:
            raise ConflictingCluesError(message, *conflict)
        raise InvalidGridError(message)
    return GridSpec.for_size(len(board))
