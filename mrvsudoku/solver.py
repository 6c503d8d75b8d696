"""Backtracking search with the minimum-remaining-values heuristic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Callable, List, Optional, Sequence

from .errors import InvariantError
from .grid import ConstraintGrid
from .models import Board
from .validation import validate_board

log = logging.getLogger(__name__)


class SearchState(str, Enum):
    SEARCHING = "searching"
    FOUND = "found"          # a solution is being recorded
    EXHAUSTED = "exhausted"  # no branches left (or the limit was reached)


class Solver:
    """
    Enumerates every completion of a grid.

    The search works on the caller's grid in place, assigning and then
    clearing cells, and leaves it exactly as it was handed in. Each
    solution is an independent clone taken when the frontier runs empty.
    """

    def __init__(
        self,
        limit: Optional[int] = None,
        on_solution: Optional[Callable[[ConstraintGrid], None]] = None,
    ):
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be a positive integer or None, got {limit}")
        self.limit = limit
        self.on_solution = on_solution
        self.iterations = 0
        self.solutions: List[ConstraintGrid] = []
        self.state = SearchState.EXHAUSTED

    def solve(self, grid: ConstraintGrid) -> List[ConstraintGrid]:
        self.iterations = 0
        self.solutions = []
        self.state = SearchState.SEARCHING
        log.debug("Searching %r", grid)

        self._search(grid)

        self.state = SearchState.EXHAUSTED
        log.debug("Search finished: %d solution(s) in %d iterations", len(self.solutions), self.iterations)
        return self.solutions

    def _limit_reached(self) -> bool:
        return self.limit is not None and len(self.solutions) >= self.limit

    def _search(self, grid: ConstraintGrid) -> None:
        self.iterations += 1

        nxt = grid.next_cell()
        if nxt is None:
            self.state = SearchState.FOUND
            solution = grid.clone()
            self.solutions.append(solution)
            if self.on_solution is not None:
                self.on_solution(solution)
            self.state = SearchState.SEARCHING
            return

        x, y = nxt
        if grid.get(x, y) != 0:
            raise InvariantError(f"frontier returned filled cell ({x},{y})")

        candidates = grid.candidates(x, y)
        if not candidates:
            return  # dead end

        # set() takes the cell out of the frontier; set(x, y, 0) puts it back
        for value in candidates:
            grid.set(x, y, value)
            self._search(grid)
            if self._limit_reached():
                break
        grid.set(x, y, 0)


@dataclass
class SolveResult:
    solutions: List[Board] = field(default_factory=list)
    iterations: int = 0

    @property
    def unique(self) -> bool:
        return len(self.solutions) == 1


def solve_all(board: Sequence[Sequence[int]], limit: Optional[int] = None) -> SolveResult:
    """
    Solve ``board`` and return every solution (at most ``limit``) as new
    boards. Raises InvalidGridError for malformed or conflicting input.
    """
    grid = ConstraintGrid(board)
    solver = Solver(limit=limit)
    found = solver.solve(grid)
    return SolveResult(solutions=[g.rows() for g in found], iterations=solver.iterations)


def solve_sudoku(board: Board) -> Optional[Board]:
    """
    Solve Sudoku with backtracking + MRV (minimum remaining values) using bitmasks.
    Returns a NEW solved board or None if unsolvable / invalid.
    """
    ok, _ = validate_board(board)
    if not ok:
        return None
    result = solve_all(board, limit=1)
    return result.solutions[0] if result.solutions else None
