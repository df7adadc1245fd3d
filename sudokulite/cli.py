from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .board import CandidateBoard
from .engine import SearchStats, solve
from .models import validate_grid
from .render import format_candidates, format_grid
from .storage import FORMATS, PuzzleFormatError, load_puzzle, resolve_puzzle_path, save_puzzle

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "path", nargs="?", default=None,
        help="Puzzle file (default: $SUDOKULITE_PUZZLE or ./data/puzzle.txt)",
    )
    p.add_argument("--format", choices=FORMATS, default="lines", dest="fmt",
                   help="'lines': 9 lines of 9 tokens; 'stream': free-form characters")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokulite",
        description="Solve 9x9 Sudoku puzzles by constraint propagation and backtracking.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Solve a puzzle and print the result")
    _add_input_args(p_solve)
    p_solve.add_argument("--candidates", action="store_true",
                         help="Also print the candidate board after applying the clues")
    p_solve.add_argument("--stats", action="store_true", help="Print search statistics")
    p_solve.add_argument("--output", default=None, help="Write the solution to this file")

    p_check = sub.add_parser("check", help="Parse a puzzle and report conflicting clues")
    _add_input_args(p_check)
    return parser


def _load(args: argparse.Namespace):
    path = args.path or resolve_puzzle_path()
    try:
        return load_puzzle(path, args.fmt)
    except PuzzleFormatError as e:
        print(f"{path}: {e}", file=sys.stderr)
    except OSError as e:
        print(f"{path}: {e.strerror or e}", file=sys.stderr)
    return None


def cmd_solve(args: argparse.Namespace) -> int:
    grid = _load(args)
    if grid is None:
        return EXIT_BAD_INPUT
    print(format_grid(grid))

    board = CandidateBoard.from_grid(grid)
    if args.candidates:
        print(format_candidates(board))

    stats = SearchStats()
    solution = solve(board, stats)
    if args.stats:
        print(f"nodes: {stats.nodes}, dead ends: {stats.dead_ends}, max depth: {stats.max_depth}")

    if solution is None:
        print("No solution.")
        return EXIT_UNSOLVED

    result = solution.to_grid()
    print(format_grid(result))
    if args.output:
        save_puzzle(result, args.output)
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    grid = _load(args)
    if grid is None:
        return EXIT_BAD_INPUT
    ok, msg = validate_grid(grid)
    print(f"{grid.filled_count()} clues. {msg}")
    return EXIT_OK if ok else EXIT_UNSOLVED


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "solve":
        return cmd_solve(args)
    return cmd_check(args)


if __name__ == "__main__":
    sys.exit(main())
