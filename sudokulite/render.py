from __future__ import annotations

from typing import Callable, List

from . import candidates as cs
from .board import CandidateBoard
from .models import BOX, Grid


def _layout(cell: Callable[[int, int], str], cell_sep: str, band_sep: str) -> str:
    lines: List[str] = []
    for by in range(BOX):
        for iy in range(BOX):
            y = by * BOX + iy
            boxes = [
                cell_sep.join(cell(bx * BOX + ix, y) for ix in range(BOX))
                for bx in range(BOX)
            ]
            lines.append(" | ".join(boxes))
        if by < BOX - 1:
            lines.append(band_sep)
    return "\n".join(lines) + "\n"


def format_grid(grid: Grid) -> str:
    """
    Text grid with box separators, unset cells shown as a space:

        5 3   |   7   |
        ...
        ------+-------+------
    """
    def cell(x: int, y: int) -> str:
        v = grid.get(x, y)
        return " " if v is None else str(v)

    sep = "-+-".join("-" * (2 * BOX - 1) for _ in range(BOX))
    return _layout(cell, " ", sep)


def format_candidates(board: CandidateBoard) -> str:
    """Every cell's candidate set, e.g. '[1, _, 3, _, _, _, _, _, 9]'."""
    return _layout(lambda x, y: cs.describe(board.get(x, y)), " ", "")
