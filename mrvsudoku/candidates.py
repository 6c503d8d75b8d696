"""Lazily recomputed cache of each empty cell's candidate mask."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .bitset import BitSet
from .models import Cell, peer_table

if TYPE_CHECKING:  # pragma: no cover
    from .grid import ConstraintGrid


class CandidateIndex:
    """
    Entries live on the grid's ``Cell`` records (``mask`` and ``valid``).
    A change at (x, y) only marks its peers stale; the mask is rebuilt from
    the grid's used-value masks the next time it is read.
    """

    def __init__(self, grid: "ConstraintGrid", cells: List[Cell]):
        self._grid = grid
        self._cells = cells
        self._n = grid.spec.n
        self._peers = peer_table(self._n)

    def mask(self, cell: Cell) -> int:
        if cell.value:
            return 0
        if not cell.valid:
            cell.mask = self._grid._free_mask(cell.x, cell.y)
            cell.valid = True
        return cell.mask

    def candidates(self, x: int, y: int) -> BitSet:
        return BitSet(self.mask(self._cells[y * self._n + x]))

    def invalidate(self, x: int, y: int) -> None:
        self._cells[y * self._n + x].valid = False

    def invalidate_neighbors(self, x: int, y: int) -> None:
        """Mark stale every cell in row y, column x and the region of (x, y)."""
        cells = self._cells
        for i in self._peers[y * self._n + x]:
            cells[i].valid = False

    def invalidate_all(self) -> None:
        for cell in self._cells:
            cell.valid = False
