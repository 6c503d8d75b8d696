from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import math
from typing import List, Tuple

from .bitset import full_mask

Board = List[List[int]]  # board[y][x], 0 = empty, values 1..N


@dataclass(frozen=True)
class GridSpec:
    n: int          # board size: N x N (e.g., 9)
    base: int       # region size: base x base (e.g., 3)
    full_mask: int  # bits for 1..N set

    @staticmethod
    def for_size(n: int) -> "GridSpec":
        """Validate N and build the basic constants."""
        base = math.isqrt(n) if n > 0 else 0
        if n <= 0 or base * base != n:
            raise ValueError(f"Invalid size: {n}. Only perfect squares are supported (4, 9, 16, ...).")
        return GridSpec(n=n, base=base, full_mask=full_mask(n))

    def region_of(self, x: int, y: int) -> int:
        return (y // self.base) * self.base + (x // self.base)

    def index(self, x: int, y: int) -> int:
        return y * self.n + x


@dataclass(eq=False)
class Cell:
    """
    The one record kept per cell. The grid's storage and the frontier
    queue both hold a reference to the same instance.
    """
    x: int
    y: int
    value: int = 0
    mask: int = 0       # cached candidates, meaningful only while valid
    valid: bool = False

    @property
    def empty(self) -> bool:
        return self.value == 0


@lru_cache(maxsize=None)
def peer_table(n: int) -> Tuple[Tuple[int, ...], ...]:
    """
    For every flat cell index, the sorted indices of the cells sharing its
    row, column or region, the cell itself included.
    """
    spec = GridSpec.for_size(n)
    table = []
    for y in range(n):
        for x in range(n):
            peers = {spec.index(xx, y) for xx in range(n)}
            peers.update(spec.index(x, yy) for yy in range(n))
            x0 = (x // spec.base) * spec.base
            y0 = (y // spec.base) * spec.base
            peers.update(
                spec.index(xx, yy)
                for yy in range(y0, y0 + spec.base)
                for xx in range(x0, x0 + spec.base)
            )
            table.append(tuple(sorted(peers)))
    return tuple(table)
