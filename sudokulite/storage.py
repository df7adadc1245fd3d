from __future__ import annotations

import logging
import os
from typing import List, Optional

from .models import CELLS, Cell, Grid

log = logging.getLogger(__name__)

FORMATS = ("lines", "stream")
EMPTY_TOKEN = "_"


class PuzzleFormatError(ValueError):
    """Puzzle text could not be turned into a grid."""

    def __init__(self, reason: str, count: Optional[int] = None) -> None:
        self.reason = reason
        self.count = count
        msg = reason if count is None else f"{reason} ({count} of {CELLS})"
        super().__init__(msg)


def default_puzzle_path() -> str:
    return os.path.join(".", "data", "puzzle.txt")


def resolve_puzzle_path() -> str:
    return os.environ.get("SUDOKULITE_PUZZLE", default_puzzle_path())


def _token_value(tok: str) -> Cell:
    return None if tok == EMPTY_TOKEN else int(tok)


def _is_value_token(tok: str) -> bool:
    return tok == EMPTY_TOKEN or (len(tok) == 1 and "1" <= tok <= "9")


def _check_count(values: List[Cell]) -> Grid:
    if len(values) < CELLS:
        raise PuzzleFormatError("too few values", len(values))
    if len(values) > CELLS:
        raise PuzzleFormatError("too many values", len(values))
    return Grid(tuple(values))


def parse_lines(text: str) -> Grid:
    """
    Nine lines of nine space-separated tokens, each '1'..'9' or '_'.
    Blank lines are skipped; any other token is an error.
    """
    values: List[Cell] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        for tok in line.split():
            if not _is_value_token(tok):
                raise PuzzleFormatError(f"invalid token {tok!r} on line {lineno}")
            values.append(_token_value(tok))
    return _check_count(values)


def parse_stream(text: str) -> Grid:
    """Free-form characters: '1'..'9' are values, '_' is empty, the rest is ignored."""
    values: List[Cell] = [_token_value(ch) for ch in text if _is_value_token(ch)]
    return _check_count(values)


def parse_puzzle(text: str, fmt: str = "lines") -> Grid:
    if fmt == "lines":
        return parse_lines(text)
    if fmt == "stream":
        return parse_stream(text)
    raise ValueError(f"format must be one of {FORMATS}, got {fmt!r}")


def format_puzzle(grid: Grid) -> str:
    lines = [
        " ".join(EMPTY_TOKEN if v is None else str(v) for v in row)
        for row in grid.rows()
    ]
    return "\n".join(lines) + "\n"


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def load_puzzle(path: Optional[str] = None, fmt: str = "lines") -> Grid:
    p = path or resolve_puzzle_path()
    log.info("Reading puzzle from %s (%s format)", p, fmt)
    with open(p, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_puzzle(text, fmt)


def save_puzzle(grid: Grid, path: Optional[str] = None) -> None:
    p = path or resolve_puzzle_path()
    ensure_parent_dir(p)
    with open(p, "w", encoding="utf-8") as f:
        f.write(format_puzzle(grid))
    log.info("Wrote puzzle to %s", p)
