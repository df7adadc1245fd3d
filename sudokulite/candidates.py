"""
Candidate sets as bitmasks: bit d is set when digit d (1..9) is still possible.

Masks are plain ints, so every operation here is a pure value operation.
"""
from __future__ import annotations

from typing import Iterator

from .models import SIZE

FULL = (1 << (SIZE + 1)) - 2  # bits 1..9 set
EMPTY = 0


def full() -> int:
    return FULL


def empty() -> int:
    return EMPTY


def singleton(d: int) -> int:
    assert 1 <= d <= SIZE, f"digit out of range: {d}"
    return 1 << d


def union(a: int, b: int) -> int:
    return a | b


def remove(mask: int, d: int) -> int:
    return mask & ~singleton(d)


def contains(mask: int, d: int) -> bool:
    return bool(mask & singleton(d))


def count(mask: int) -> int:
    return mask.bit_count()


def first(mask: int) -> int:
    """Smallest digit in a non-empty mask."""
    assert mask, "empty candidate set has no members"
    return (mask & -mask).bit_length() - 1


class Members:
    """Digits of a mask in ascending order. Each iteration starts over."""

    __slots__ = ("mask",)

    def __init__(self, mask: int) -> None:
        self.mask = mask

    def __iter__(self) -> Iterator[int]:
        m = self.mask
        while m:
            lsb = m & -m
            m ^= lsb
            yield lsb.bit_length() - 1

    def __len__(self) -> int:
        return count(self.mask)

    def __repr__(self) -> str:
        return f"Members({list(self)})"


def members(mask: int) -> Members:
    return Members(mask)


def describe(mask: int) -> str:
    """Render one cell as e.g. '[1, _, 3, _, _, _, 7, _, _]'."""
    return "[" + ", ".join(str(d) if contains(mask, d) else "_" for d in range(1, SIZE + 1)) + "]"
