"""The constraint grid: cell values plus per row/column/region used masks."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .bitset import BitSet, popcount, value_bit
from .candidates import CandidateIndex
from .errors import ConflictError
from .formats import format_braces
from .frontier import FrontierQueue
from .models import Board, Cell, GridSpec
from .validation import check_board

log = logging.getLogger(__name__)


class ConstraintGrid:
    """
    An N x N grid that keeps, for every row, column and region, a mask of
    the values already placed there. The bit for v is set in a row's mask
    iff some cell of that row holds v (likewise for columns and regions)
    before and after every call to ``set``.

    Each grid owns its candidate cache and its frontier of empty cells;
    ``clone()`` gives a fully independent copy.
    """

    def __init__(self, board: Sequence[Sequence[int]]):
        self.spec: GridSpec = check_board(board)
        n = self.spec.n
        self._row_used = [0] * n
        self._col_used = [0] * n
        self._region_used = [0] * n

        values = [board[y][x] for y in range(n) for x in range(n)]
        # clues go into the masks before any candidate is computed
        for i, v in enumerate(values):
            if v:
                self._mark(i % n, i // n, value_bit(v))

        self._build(values)
        log.debug("Built %dx%d grid with %d clues", n, n, n * n - len(self._frontier))

    def _build(self, values: List[int]) -> None:
        n = self.spec.n
        self._cells = [Cell(x=i % n, y=i // n, value=v) for i, v in enumerate(values)]
        self._index = CandidateIndex(self, self._cells)
        self._frontier = FrontierQueue(
            key=lambda cell: popcount(self._index.mask(cell)),
            cells=[c for c in self._cells if c.empty],
        )

    @property
    def size(self) -> int:
        return self.spec.n

    @property
    def base(self) -> int:
        return self.spec.base

    def _mark(self, x: int, y: int, bit: int) -> None:
        self._row_used[y] |= bit
        self._col_used[x] |= bit
        self._region_used[self.spec.region_of(x, y)] |= bit

    def _unmark(self, x: int, y: int, bit: int) -> None:
        self._row_used[y] &= ~bit
        self._col_used[x] &= ~bit
        self._region_used[self.spec.region_of(x, y)] &= ~bit

    def _used_mask(self, x: int, y: int) -> int:
        return self._row_used[y] | self._col_used[x] | self._region_used[self.spec.region_of(x, y)]

    def _free_mask(self, x: int, y: int) -> int:
        return ~self._used_mask(x, y) & self.spec.full_mask

    def _cell(self, x: int, y: int) -> Cell:
        n = self.spec.n
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"cell ({x},{y}) is outside a {n}x{n} grid")
        return self._cells[y * n + x]

    def get(self, x: int, y: int) -> int:
        return self._cell(x, y).value

    def set(self, x: int, y: int, value: int) -> None:
        """
        Place ``value`` at (x, y), or clear the cell with 0.

        Keeps the used masks in step, marks the candidates of every peer
        stale, moves the cell out of (value != 0) or back into (value == 0)
        the frontier, and re-heapifies the frontier.
        """
        cell = self._cell(x, y)
        n = self.spec.n
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= n:
            raise ConflictError(f"value {value!r} at ({x},{y}) is outside 0..{n}")

        old = cell.value
        if value != old:
            if old:
                self._unmark(x, y, value_bit(old))
            if value:
                bit = value_bit(value)
                if self._used_mask(x, y) & bit:
                    if old:
                        self._mark(x, y, value_bit(old))
                    raise ConflictError(f"value {value} is already used by a peer of ({x},{y})")
                self._mark(x, y, bit)
            cell.value = value

        self._index.invalidate_neighbors(x, y)
        if value:
            if cell in self._frontier:
                self._frontier.remove(cell)
        elif cell not in self._frontier:
            self._frontier.insert(cell)
        self._frontier.reorder()

    def candidates(self, x: int, y: int) -> BitSet:
        """Values still legal at (x, y); empty for a filled cell."""
        return self._index.candidates(x, y)

    def next_cell(self) -> Optional[Tuple[int, int]]:
        """The empty cell with fewest candidates, or None when the grid is full."""
        cell = self._frontier.peek_min()
        if cell is None:
            return None
        return cell.x, cell.y

    def unresolved(self) -> int:
        return len(self._frontier)

    def is_complete(self) -> bool:
        return all(c.value for c in self._cells)

    def clone(self) -> "ConstraintGrid":
        other = ConstraintGrid.__new__(ConstraintGrid)
        other.spec = self.spec
        other._row_used = list(self._row_used)
        other._col_used = list(self._col_used)
        other._region_used = list(self._region_used)
        other._build([c.value for c in self._cells])
        return other

    def rows(self) -> Board:
        n = self.spec.n
        return [[self._cells[y * n + x].value for x in range(n)] for y in range(n)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintGrid):
            return NotImplemented
        return self.rows() == other.rows()

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return format_braces(self.rows())

    def __repr__(self) -> str:
        n = self.spec.n
        return f"<ConstraintGrid {n}x{n}, {len(self._frontier)} empty>"
