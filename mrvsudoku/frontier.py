"""Min-heap of unresolved cells ordered by remaining candidates."""

from __future__ import annotations

import heapq
from typing import Callable, Iterable, List, Optional, Set, Tuple

from .errors import InvariantError
from .models import Cell

# (candidate count, y, x, cell): ties fall back to row-major order
_Entry = Tuple[int, int, int, Cell]


class FrontierQueue:
    """
    Holds exactly one entry per empty cell. ``key`` returns the current
    candidate count of a cell; counts change behind the queue's back, so
    callers run ``reorder()`` after every grid mutation.
    """

    def __init__(self, key: Callable[[Cell], int], cells: Iterable[Cell] = ()):
        self._key = key
        self._heap: List[_Entry] = []
        self._members: Set[Cell] = set()
        for cell in cells:
            if cell in self._members:
                raise InvariantError(f"cell ({cell.x},{cell.y}) queued twice")
            self._members.add(cell)
            self._heap.append(self._entry(cell))
        heapq.heapify(self._heap)

    def _entry(self, cell: Cell) -> _Entry:
        return (self._key(cell), cell.y, cell.x, cell)

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._members

    def peek_min(self) -> Optional[Cell]:
        """The cell with fewest candidates, or None when nothing is unresolved."""
        if not self._heap:
            return None
        return self._heap[0][3]

    def pop_min(self) -> Cell:
        if not self._heap:
            raise InvariantError("pop from an empty frontier")
        cell = heapq.heappop(self._heap)[3]
        self._members.remove(cell)
        return cell

    def remove(self, cell: Cell) -> None:
        if cell not in self._members:
            raise InvariantError(f"cell ({cell.x},{cell.y}) is not in the frontier")
        self._heap = [e for e in self._heap if e[3] is not cell]
        heapq.heapify(self._heap)
        self._members.remove(cell)

    def insert(self, cell: Cell) -> None:
        if cell in self._members:
            raise InvariantError(f"cell ({cell.x},{cell.y}) is already in the frontier")
        self._members.add(cell)
        heapq.heappush(self._heap, self._entry(cell))

    def reorder(self) -> None:
        """Re-key every entry and restore heap order."""
        self._heap = [self._entry(e[3]) for e in self._heap]
        heapq.heapify(self._heap)

    def cells(self) -> List[Cell]:
        return [e[3] for e in self._heap]
