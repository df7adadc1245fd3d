from __future__ import annotations

import streamlit as st

from sudokulite.engine import propagate_only, solve
from sudokulite.models import BOX, SIZE, Grid, grid_to_csv, validate_grid
from sudokulite.storage import FORMATS, PuzzleFormatError, format_puzzle, parse_puzzle
from sudokulite.view import (
    candidates_frame,
    cell_key,
    cells_from_grid,
    grid_from_cells,
    render_board_html,
)

MODES = ["Full solve", "Propagation only"]


def reset_board() -> None:
    for r in range(SIZE):
        for c in range(SIZE):
            st.session_state[cell_key(r, c)] = ""


def load_upload() -> None:
    # runs as a callback, before any cell widget exists in this rerun
    upload = st.session_state.get("upload")
    if upload is None:
        return
    try:
        grid = parse_puzzle(upload.getvalue().decode("utf-8", errors="replace"), st.session_state.upload_format)
    except PuzzleFormatError as e:
        st.session_state.upload_error = f"{upload.name}: {e}"
        return
    st.session_state.upload_error = None
    st.session_state.update(cells_from_grid(grid))


st.set_page_config(page_title="Sudoku Solver", layout="wide")

st.markdown(
    """
<style>
/* Make inputs larger and centered */
div[data-testid="stTextInput"] input {
    text-align: center;
    font-size: 22px !important;
    height: 2.8rem;
    padding: 0.25rem 0.25rem;
}
div[data-testid="stTextInput"] { margin-bottom: 0rem; }

/* Sudoku HTML output */
.sudoku-wrap { margin-top: 0.5rem; }
.sudoku-title { font-size: 1.05rem; font-weight: 600; margin: 0.5rem 0 0.35rem 0; }
table.sudoku { border-collapse: collapse; }
table.sudoku td {
    width: 2.8rem;
    height: 2.8rem;
    text-align: center;
    vertical-align: middle;
    font-size: 22px;
    border: 1px solid rgba(49, 51, 63, 0.25);
}
table.sudoku td.top { border-top: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.left { border-left: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.bottom { border-bottom: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.right { border-right: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.given { font-weight: 700; }
table.sudoku td.solved { color: #1f77b4; }

.sudoku-spacer { height: 0.25rem; }
</style>
""",
    unsafe_allow_html=True,
)

st.title("Sudoku Solver")
st.caption("Enter digits 1..9, leave cells blank (or 0) for unknowns. The board is re-solved on every edit.")

# ---- Sidebar controls ----
with st.sidebar:
    st.header("Settings")
    mode = st.radio("Search", MODES, index=0)
    show_candidates = st.checkbox("Show candidates", value=False)

    st.divider()
    st.selectbox("Upload format", FORMATS, key="upload_format")
    st.file_uploader("Load puzzle", type=["txt"], key="upload", on_change=load_upload)
    if st.session_state.get("upload_error"):
        st.error(st.session_state.upload_error)

    st.divider()
    if st.button("Reset board", use_container_width=True):
        reset_board()

# ---- Input grid ----
st.subheader("Input")

spacer_w = 0.18
widths = []
for g in range(BOX):
    widths.extend([1.0] * BOX)
    if g != BOX - 1:
        widths.append(spacer_w)

for r in range(SIZE):
    cols = st.columns(widths, gap="small")
    col_idx = 0
    for c in range(SIZE):
        # skip the spacer column between boxes
        if c > 0 and c % BOX == 0:
            col_idx += 1
        with cols[col_idx]:
            key = cell_key(r, c)
            if key not in st.session_state:
                st.session_state[key] = ""
            st.text_input(
                label=f"r{r+1}c{c+1}",
                key=key,
                label_visibility="collapsed",
                max_chars=1,
            )
        col_idx += 1

    if (r + 1) % BOX == 0 and (r + 1) != SIZE:
        st.markdown("<div class='sudoku-spacer'></div>", unsafe_allow_html=True)

# ---- Solve on every rerun ----
grid, parse_errors = grid_from_cells(st.session_state)

if parse_errors:
    st.error("Please fix these input issues:")
    st.write("\n".join([f"- {e}" for e in parse_errors]))
else:
    ok, msg = validate_grid(grid)
    if not ok:
        st.error(msg)

    board = propagate_only(grid)
    if mode == MODES[0]:
        solution = solve(board)
        if solution is None:
            st.error("No solution found (the puzzle may be unsolvable).")
            st.markdown(render_board_html(grid, "Current board"), unsafe_allow_html=True)
        else:
            solved: Grid = solution.to_grid()
            st.success(f"Solution found ({grid.filled_count()} clues).")
            st.markdown(render_board_html(solved, "Solution", givens=grid), unsafe_allow_html=True)

            d1, d2, _ = st.columns([1, 1, 2])
            d1.download_button(
                "Download solution as CSV",
                data=grid_to_csv(solved),
                file_name="sudoku_solution.csv",
                mime="text/csv",
            )
            d2.download_button(
                "Download solution as text",
                data=format_puzzle(solved).encode("utf-8"),
                file_name="sudoku_solution.txt",
                mime="text/plain",
            )
    else:
        if not board.is_valid():
            st.error("Propagation emptied a cell: the clues contradict each other.")
        st.markdown(render_board_html(board.to_grid(), "After propagation", givens=grid), unsafe_allow_html=True)
        st.caption(f"{board.undecided_count()} cell(s) still undecided.")

    if show_candidates:
        st.subheader("Candidates after propagation")
        st.dataframe(candidates_frame(board), use_container_width=True)
