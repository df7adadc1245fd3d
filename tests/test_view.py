# tests/test_view.py
from sudokulite.board import CandidateBoard
from sudokulite.models import Grid
from sudokulite.view import (
    candidates_frame,
    cell_key,
    cells_from_grid,
    grid_from_cells,
    render_board_html,
)


def test_grid_from_cells_round_trip(puzzle):
    grid, errors = grid_from_cells(cells_from_grid(puzzle))
    assert errors == []
    assert grid == puzzle


def test_grid_from_cells_reports_bad_input():
    values = {cell_key(0, 0): "a", cell_key(0, 1): "0", cell_key(2, 3): " 7 "}
    grid, errors = grid_from_cells(values)
    assert len(errors) == 1
    assert "(1,1)" in errors[0]
    assert grid.get(1, 0) is None
    assert grid.get(3, 2) == 7


def test_render_marks_given_and_solved_cells(puzzle, solution):
    html = render_board_html(solution, "Solution", givens=puzzle)
    assert html.count("given") == puzzle.filled_count()
    assert html.count("solved") == 81 - puzzle.filled_count()
    assert "<td class='top left given'>5</td>" in html


def test_render_without_givens_has_no_marks(puzzle):
    html = render_board_html(puzzle, "Current board")
    assert "given" not in html and "solved" not in html
    assert html.count("<td") == 81


def test_candidates_frame():
    b = CandidateBoard.empty()
    b.assign(0, 0, 9)
    df = candidates_frame(b)
    assert df.shape == (9, 9)
    assert df.loc["r1", "c1"] == "9"
    assert df.loc["r1", "c2"] == "1 2 3 4 5 6 7 8"
    assert df.loc["r9", "c9"] == "1 2 3 4 5 6 7 8 9"


def test_cells_from_grid_blank_is_empty_string():
    values = cells_from_grid(Grid.empty())
    assert set(values.values()) == {""}
    assert len(values) == 81
