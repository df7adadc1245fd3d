from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from . import candidates as cs
from .board import CandidateBoard
from .models import Grid

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    nodes: int = 0       # boards examined
    dead_ends: int = 0   # boards pruned as invalid
    max_depth: int = 0


def solve(board: CandidateBoard, stats: Optional[SearchStats] = None) -> Optional[CandidateBoard]:
    """
    Depth-first search with propagation: pick the undecided cell with the
    fewest candidates, try its digits in ascending order on a copy of the
    board, recurse. Returns the first fully decided board, or None.
    The input board is never mutated.
    """
    return _search(board, 0, stats)


def _search(board: CandidateBoard, depth: int, stats: Optional[SearchStats]) -> Optional[CandidateBoard]:
    if stats is not None:
        stats.nodes += 1
        stats.max_depth = max(stats.max_depth, depth)

    if not board.is_valid():
        if stats is not None:
            stats.dead_ends += 1
        log.debug("Dead end at depth %d", depth)
        return None

    cell = board.lowest_entropy_cell()
    if cell is None:
        return board

    x, y = cell
    for d in cs.members(board.get(x, y)):
        branch = board.copy()
        log.debug("Trying %d at (%d, %d), depth %d", d, x, y, depth)
        branch.assign(x, y, d)
        found = _search(branch, depth + 1, stats)
        if found is not None:
            return found
    return None


def propagate_only(grid: Grid) -> CandidateBoard:
    """Lower a grid into a board without searching (clues applied, nothing guessed)."""
    return CandidateBoard.from_grid(grid)


def solve_grid(grid: Grid, stats: Optional[SearchStats] = None) -> Optional[Grid]:
    """Solve a puzzle grid. Returns the completed grid, or None if it has no solution."""
    board = CandidateBoard.from_grid(grid)
    solution = solve(board, stats)
    if solution is None:
        log.info("No solution (%d clues)", grid.filled_count())
        return None
    log.info("Solved (%d clues)", grid.filled_count())
    return solution.to_grid()
