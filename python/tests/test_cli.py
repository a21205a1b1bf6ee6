"""Command-line tests."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from main import app

runner = CliRunner()

ALMOST_TEXT = "1 2 3 4\n5 6 7 8\n9 10 11 12\n13 14 0 15\n"
IDENTITY_TEXT = "0 1 2 3\n4 5 6 7\n8 9 10 11\n12 13 14 15\n"


def test_solve_from_stdin() -> None:
    result = runner.invoke(app, [], input=ALMOST_TEXT)
    assert result.exit_code == 0, result.output
    assert "[13 14 0 15]" in result.output
    assert "Number of moves needed: 1" in result.output
    assert "[Right]" in result.output


def test_solve_from_file(tmp_path: Path) -> None:
    board_file = tmp_path / "board.txt"
    board_file.write_text(ALMOST_TEXT)
    result = runner.invoke(app, [str(board_file), "--dedupe"])
    assert result.exit_code == 0, result.output
    assert "Number of moves needed: 1" in result.output


def test_replay_prints_each_step() -> None:
    result = runner.invoke(app, ["--replay"], input=ALMOST_TEXT)
    assert result.exit_code == 0, result.output
    assert "Right\n[1 2 3 4]" in result.output
    assert result.output.rstrip().endswith("[13 14 15 0]")


def test_unsolvable_board() -> None:
    result = runner.invoke(app, [], input=IDENTITY_TEXT)
    assert result.exit_code == 0, result.output
    assert "Board cannot be solved" in result.output
    assert "Number of moves" not in result.output


def test_invalid_board_exits_nonzero() -> None:
    result = runner.invoke(app, [], input="1 1 1 1\n" * 4)
    assert result.exit_code == 1
    assert "Invalid board: missing or repeated tiles" in result.output


def test_unparseable_board_exits_nonzero() -> None:
    result = runner.invoke(app, [], input="1 2 three 4\n")
    assert result.exit_code == 1
    assert "Invalid board" in result.output


def test_scramble_is_solved() -> None:
    result = runner.invoke(app, ["--scramble", "6", "--seed", "3", "--replay"])
    assert result.exit_code == 0, result.output
    assert "Number of moves needed:" in result.output
    assert result.output.rstrip().endswith("[13 14 15 0]")


def test_random_and_scramble_are_exclusive() -> None:
    result = runner.invoke(app, ["--random", "--scramble", "3"])
    assert result.exit_code != 0


def test_rich_frontend() -> None:
    result = runner.invoke(app, ["-f", "rich"], input=ALMOST_TEXT)
    assert result.exit_code == 0, result.output
    assert "Number of moves needed: 1" in result.output
    assert "Right" in result.output


def test_rich_frontend_replay() -> None:
    result = runner.invoke(app, ["-f", "rich", "--replay"], input=ALMOST_TEXT)
    assert result.exit_code == 0, result.output
    assert "Move 1/1" in result.output


def test_log_level_is_case_insensitive() -> None:
    result = runner.invoke(app, ["--log-level", "debug"], input=ALMOST_TEXT)
    assert result.exit_code == 0, result.output
    assert "Number of moves needed: 1" in result.output


def test_unknown_log_level_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--log-level", "verbose"], input=ALMOST_TEXT)
    assert result.exit_code == 2
    assert "Number of moves" not in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
