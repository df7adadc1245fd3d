from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

SIZE = 9        # cells per row / column
BOX = 3         # box side
CELLS = SIZE * SIZE
DIGITS = range(1, SIZE + 1)

Cell = Optional[int]  # None = unset, 1..9 otherwise


def index_of(x: int, y: int) -> int:
    assert 0 <= x < SIZE and 0 <= y < SIZE, f"cell out of range: ({x}, {y})"
    return y * SIZE + x


def box_index(x: int, y: int) -> int:
    return (y // BOX) * BOX + (x // BOX)


@dataclass(frozen=True)
class Grid:
    """
    The plain 9x9 puzzle value used at the boundary (parsing, printing, UI).
    Cells are stored row-major; x is the column, y the row.
    """
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != CELLS:
            raise ValueError(f"A grid needs {CELLS} cells, got {len(cells)}.")
        for i, v in enumerate(cells):
            if v is None:
                continue
            if not isinstance(v, int) or isinstance(v, bool) or v not in DIGITS:
                raise ValueError(f"Invalid value at ({i // SIZE + 1},{i % SIZE + 1}): {v!r} (allowed: 1..{SIZE} or empty).")
        object.__setattr__(self, "cells", cells)

    @staticmethod
    def empty() -> "Grid":
        return Grid((None,) * CELLS)

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Optional[int]]]) -> "Grid":
        """Build from 9 rows of 9 values; 0 and None both mean empty."""
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Board must be 9 x 9.")
        return Grid(tuple(v or None for row in rows for v in row))

    def get(self, x: int, y: int) -> Cell:
        return self.cells[index_of(x, y)]

    def with_value(self, x: int, y: int, value: Cell) -> "Grid":
        cells = list(self.cells)
        cells[index_of(x, y)] = value
        return Grid(tuple(cells))

    def rows(self) -> List[Tuple[Cell, ...]]:
        return [self.cells[y * SIZE:(y + 1) * SIZE] for y in range(SIZE)]

    def to_int_rows(self) -> List[List[int]]:
        return [[v or 0 for v in row] for row in self.rows()]

    def filled_count(self) -> int:
        return sum(1 for v in self.cells if v is not None)

    def is_complete(self) -> bool:
        return self.filled_count() == CELLS


def units() -> Iterable[Tuple[str, List[Tuple[int, int]]]]:
    """Every row, column and box as (label, [(x, y), ...])."""
    for y in range(SIZE):
        yield f"row {y + 1}", [(x, y) for x in range(SIZE)]
    for x in range(SIZE):
        yield f"column {x + 1}", [(x, y) for y in range(SIZE)]
    for b in range(SIZE):
        x0, y0 = (b % BOX) * BOX, (b // BOX) * BOX
        yield f"box {b + 1}", [(x0 + i, y0 + j) for j in range(BOX) for i in range(BOX)]


def validate_grid(grid: Grid) -> Tuple[bool, str]:
    """
    Checks that no digit appears twice in any row/col/box (ignoring empties).
    Cells in messages are 1-based (row, col).
    """
    row_used = [0] * SIZE
    col_used = [0] * SIZE
    box_used = [0] * SIZE

    for y in range(SIZE):
        for x in range(SIZE):
            v = grid.get(x, y)
            if v is None:
                continue

            bit = 1 << v
            b = box_index(x, y)

            if (row_used[y] & bit) or (col_used[x] & bit) or (box_used[b] & bit):
                return False, f"Conflict: value {v} appears twice in a row/column/box (cell {y+1},{x+1})."

            row_used[y] |= bit
            col_used[x] |= bit
            box_used[b] |= bit

    return True, "OK"


def is_solution(grid: Grid) -> bool:
    """True iff every row, column and box holds each digit exactly once."""
    full = set(DIGITS)
    return all({grid.get(x, y) for x, y in cells} == full for _, cells in units())


def grid_to_csv(grid: Grid) -> bytes:
    lines = [",".join(str(v) for v in row) for row in grid.to_int_rows()]
    return ("\n".join(lines) + "\n").encode("utf-8")
