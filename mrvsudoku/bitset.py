"""Candidate sets over the values 1..N packed into an int mask."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


def value_bit(value: int) -> int:
    # value v lives in bit v-1
    return 1 << (value - 1)


def full_mask(n: int) -> int:
    """Mask with the bits for 1..n set."""
    return (1 << n) - 1


def popcount(mask: int) -> int:
    return mask.bit_count()


def iter_values(mask: int) -> Iterator[int]:
    """Yield the values held in ``mask`` in ascending order."""
    while mask:
        lsb = mask & -mask
        yield lsb.bit_length()
        mask ^= lsb


def mask_of(values: Iterable[int]) -> int:
    mask = 0
    for v in values:
        mask |= value_bit(v)
    return mask


@dataclass(frozen=True)
class BitSet:
    """Immutable view over a candidate mask."""
    mask: int = 0

    @classmethod
    def of(cls, values: Iterable[int]) -> "BitSet":
        return cls(mask_of(values))

    def __or__(self, other: "BitSet") -> "BitSet":
        return BitSet(self.mask | other.mask)

    def __sub__(self, other: "BitSet") -> "BitSet":
        return BitSet(self.mask & ~other.mask)

    def __contains__(self, value: int) -> bool:
        return value >= 1 and bool(self.mask & value_bit(value))

    def __len__(self) -> int:
        return popcount(self.mask)

    def __iter__(self) -> Iterator[int]:
        return iter_values(self.mask)

    def __bool__(self) -> bool:
        return self.mask != 0

    def __repr__(self) -> str:
        return f"BitSet({{{', '.join(str(v) for v in self)}}})"
