# tests/test_cli.py
from sudokulite.cli import EXIT_BAD_INPUT, EXIT_OK, EXIT_UNSOLVED, main
from sudokulite.models import Grid
from sudokulite.storage import load_puzzle, save_puzzle


def test_solve_prints_solution(tmp_path, puzzle, solution, capsys):
    src = tmp_path / "p.txt"
    out = tmp_path / "out.txt"
    save_puzzle(puzzle, str(src))
    assert main(["solve", str(src), "--stats", "--output", str(out)]) == EXIT_OK
    text = capsys.readouterr().out
    assert "5 3 4 | 6 7 8 | 9 1 2" in text
    assert "nodes:" in text
    assert load_puzzle(str(out)) == solution


def test_solve_unsatisfiable(tmp_path, capsys):
    src = tmp_path / "bad.txt"
    save_puzzle(Grid.empty().with_value(0, 0, 1).with_value(0, 5, 1), str(src))
    assert main(["solve", str(src)]) == EXIT_UNSOLVED
    assert "No solution." in capsys.readouterr().out


def test_solve_format_error(tmp_path, capsys):
    src = tmp_path / "short.txt"
    src.write_text("_ " * 80, encoding="utf-8")
    assert main(["solve", str(src)]) == EXIT_BAD_INPUT
    assert "too few values" in capsys.readouterr().err


def test_missing_file(tmp_path):
    assert main(["check", str(tmp_path / "nope.txt")]) == EXIT_BAD_INPUT


def test_check_uses_env_default(tmp_path, monkeypatch, puzzle, capsys):
    src = tmp_path / "p.txt"
    save_puzzle(puzzle, str(src))
    monkeypatch.setenv("SUDOKULITE_PUZZLE", str(src))
    assert main(["check"]) == EXIT_OK
    assert "30 clues. OK" in capsys.readouterr().out


def test_check_stream_format_conflict(tmp_path):
    src = tmp_path / "s.txt"
    src.write_text("11" + "_" * 79, encoding="utf-8")
    assert main(["check", str(src), "--format", "stream"]) == EXIT_UNSOLVED
