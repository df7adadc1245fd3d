from __future__ import annotations

from typing import List, Optional, Tuple

from . import candidates as cs
from .models import BOX, CELLS, SIZE, Grid, index_of

Coord = Tuple[int, int]  # (x, y), 0-based


def row_peers(x: int, y: int) -> List[Coord]:
    return [(i, y) for i in range(SIZE) if i != x]


def column_peers(x: int, y: int) -> List[Coord]:
    return [(x, j) for j in range(SIZE) if j != y]


def box_peers(x: int, y: int) -> List[Coord]:
    x0 = (x // BOX) * BOX
    y0 = (y // BOX) * BOX
    return [
        (x0 + i, y0 + j)
        for j in range(BOX)
        for i in range(BOX)
        if (x0 + i, y0 + j) != (x, y)
    ]


def peers(x: int, y: int) -> List[Coord]:
    """The 20 cells sharing a row, column or box with (x, y); each listed once."""
    out: List[Coord] = []
    for p in row_peers(x, y) + column_peers(x, y) + box_peers(x, y):
        if p not in out:
            out.append(p)
    return out


# flat index -> flat indices of its peers
PEERS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(index_of(px, py) for px, py in peers(i % SIZE, i // SIZE))
    for i in range(CELLS)
)


class CandidateBoard:
    """
    The solver's working state: one candidate mask per cell.

    Every mutation leaves the board fully propagated: a cell that becomes a
    singleton has its digit removed from all peers before the call returns.
    An empty mask anywhere marks the board as unsatisfiable.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[List[int]] = None) -> None:
        if cells is None:
            cells = [cs.FULL] * CELLS
        assert len(cells) == CELLS
        self._cells = cells

    @classmethod
    def empty(cls) -> "CandidateBoard":
        return cls()

    def copy(self) -> "CandidateBoard":
        return CandidateBoard(self._cells[:])

    def get(self, x: int, y: int) -> int:
        return self._cells[index_of(x, y)]

    def assign(self, x: int, y: int, d: int) -> None:
        i = index_of(x, y)
        assert cs.contains(self._cells[i], d), f"{d} is not a candidate at ({x}, {y})"
        self._cells[i] = cs.singleton(d)
        self._propagate(i)

    def propagate(self, x: int, y: int) -> None:
        self._propagate(index_of(x, y))

    def eliminate(self, x: int, y: int, d: int) -> None:
        self._eliminate(index_of(x, y), d)

    def _propagate(self, i: int) -> None:
        mask = self._cells[i]
        assert cs.count(mask) == 1, "can only propagate from a decided cell"
        d = cs.first(mask)
        for p in PEERS[i]:
            self._eliminate(p, d)

    def _eliminate(self, i: int, d: int) -> None:
        before = self._cells[i]
        after = cs.remove(before, d)
        if after == before:
            return
        self._cells[i] = after
        if cs.count(after) == 1:
            self._propagate(i)

    def is_valid(self) -> bool:
        return all(self._cells)

    def is_solved(self) -> bool:
        return all(cs.count(m) == 1 for m in self._cells)

    def lowest_entropy_cell(self) -> Optional[Coord]:
        """First undecided cell (row-major) with the fewest candidates, or None."""
        best = -1
        best_count = SIZE + 1
        for i, mask in enumerate(self._cells):
            n = cs.count(mask)
            if 1 < n < best_count:
                best, best_count = i, n
                if n == 2:
                    break
        if best < 0:
            return None
        return best % SIZE, best // SIZE

    def undecided_count(self) -> int:
        return sum(1 for m in self._cells if cs.count(m) > 1)

    @classmethod
    def from_grid(cls, grid: Grid) -> "CandidateBoard":
        """
        Apply every clue as an assignment. Conflicting clues never raise: the
        clue's cell is emptied instead, which is_valid() reports later.
        """
        board = cls.empty()
        for y in range(SIZE):
            for x in range(SIZE):
                d = grid.get(x, y)
                if d is None:
                    continue
                if cs.contains(board.get(x, y), d):
                    board.assign(x, y, d)
                else:
                    board._cells[index_of(x, y)] = cs.EMPTY
        return board

    def to_grid(self) -> Grid:
        """Decided cells become digits; everything else stays unset."""
        return Grid(tuple(cs.first(m) if cs.count(m) == 1 else None for m in self._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateBoard):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"CandidateBoard(undecided={self.undecided_count()}, valid={self.is_valid()})"
