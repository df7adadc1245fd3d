"""Pure helpers behind the Streamlit editor; nothing here touches streamlit itself."""
from __future__ import annotations

from typing import List, Mapping, Optional, Tuple

import pandas as pd

from . import candidates as cs
from .board import CandidateBoard
from .models import BOX, SIZE, Cell, Grid


def cell_key(r: int, c: int) -> str:
    return f"cell_{r}_{c}"


def grid_from_cells(values: Mapping[str, object]) -> Tuple[Grid, List[str]]:
    """
    Read cell widget values and build a grid.
    Returns (grid, errors). Missing keys, empty string or '0' => empty.
    """
    errors: List[str] = []
    cells: List[Cell] = [None] * (SIZE * SIZE)

    for r in range(SIZE):
        for c in range(SIZE):
            raw = str(values.get(cell_key(r, c), "") or "").strip()
            if raw == "" or raw == "_":
                continue

            if not raw.isdigit():
                errors.append(f"Cell ({r+1},{c+1}) is not a number: '{raw}'")
                continue

            v = int(raw)
            if v == 0:
                continue
            if 1 <= v <= SIZE:
                cells[r * SIZE + c] = v
            else:
                errors.append(f"Cell ({r+1},{c+1}) out of range: {v} (allowed 1..{SIZE}, or blank/0).")

    return Grid(tuple(cells)), errors


def cells_from_grid(grid: Grid) -> dict:
    """Widget values for a grid, the inverse of grid_from_cells."""
    return {
        cell_key(r, c): "" if grid.get(c, r) is None else str(grid.get(c, r))
        for r in range(SIZE)
        for c in range(SIZE)
    }


def render_board_html(board: Grid, title: str, givens: Optional[Grid] = None) -> str:
    """
    HTML table with thick box borders. When `givens` is passed, cells the
    user entered get class 'given' and everything else the solver filled
    gets class 'solved'.
    """
    html = [f"<div class='sudoku-wrap'><div class='sudoku-title'>{title}</div>"]
    html.append("<table class='sudoku'>")
    for r in range(SIZE):
        html.append("<tr>")
        for c in range(SIZE):
            v = board.get(c, r)
            cls = []
            if r % BOX == 0:
                cls.append("top")
            if c % BOX == 0:
                cls.append("left")
            if (r + 1) % BOX == 0:
                cls.append("bottom")
            if (c + 1) % BOX == 0:
                cls.append("right")
            if givens is not None and v is not None:
                cls.append("given" if givens.get(c, r) is not None else "solved")
            cls_attr = f" class='{' '.join(cls)}'" if cls else ""
            disp = "" if v is None else str(v)
            html.append(f"<td{cls_attr}>{disp}</td>")
        html.append("</tr>")
    html.append("</table></div>")
    return "".join(html)


def candidates_frame(board: CandidateBoard) -> pd.DataFrame:
    rows = []
    for r in range(SIZE):
        rows.append(
            {f"c{c+1}": " ".join(str(d) for d in cs.members(board.get(c, r))) for c in range(SIZE)}
        )
    return pd.DataFrame(rows, index=[f"r{r+1}" for r in range(SIZE)])
