"""
Tests for the command-line interface.
"""

import pytest

from four_in_a_row.constants import ROWS, COLUMNS, GameStatus, PlayerColor
from four_in_a_row.debug import debug, DebugLevel
from four_in_a_row.interfaces.cli import SimpleCLI, main


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_no_command(capsys):
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_replay_win(capsys):
    assert main(["replay", "--moves", "0,6,1,6,2,6,3"]) == 0

    out = capsys.readouterr().out
    assert "yellow -> column 3: win" in out
    assert "Game status: win" in out
    assert "Yellow wins!" in out


def test_replay_reports_invalid_moves(capsys):
    assert main(["replay", "--moves", "9,0"]) == 0

    out = capsys.readouterr().out
    assert "yellow -> column 9: invalid" in out
    assert "yellow -> column 0: success" in out
    assert "Game status: in-progress" in out


def test_replay_bad_moves(capsys):
    assert main(["replay", "--moves", "0,x"]) == 1
    assert "Error parsing moves" in capsys.readouterr().out


def test_analyze_empty_position(capsys):
    position = ",".join(["0"] * (ROWS * COLUMNS))

    assert main(["analyze", "--position", position]) == 0

    out = capsys.readouterr().out
    assert "No win detected" in out
    assert "Open columns: [0, 1, 2, 3, 4, 5, 6]" in out


def test_analyze_win(capsys):
    cells = ["0"] * (ROWS * COLUMNS)
    for column in range(4):
        cells[(ROWS - 1) * COLUMNS + column] = "2"

    assert main(["analyze", "--position", ",".join(cells)]) == 0

    assert "Win for red: [(5, 3), (5, 2), (5, 1), (5, 0)]" in capsys.readouterr().out


def test_analyze_bad_position(capsys):
    assert main(["analyze", "--position", "1,2,3"]) == 1
    assert "Error parsing position" in capsys.readouterr().out


def test_benchmark(capsys):
    assert main(["benchmark", "--iterations", "3", "--seed", "7"]) == 0

    out = capsys.readouterr().out
    assert "Played 3 games" in out


def test_play_until_win(monkeypatch, capsys):
    feed_input(monkeypatch, ["hello", "12", "0", "6", "1", "6", "2", "6", "3"])
    cli = SimpleCLI()

    assert cli.run(["play"]) == 0

    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Column must be between 0 and 6." in out
    assert "Yellow wins!" in out
    assert cli.engine.status == GameStatus.WIN


def test_play_full_column_then_quit(monkeypatch, capsys):
    feed_input(monkeypatch, ["0"] * (ROWS + 1) + ["q"])
    cli = SimpleCLI()

    assert cli.run(["play"]) == 0

    out = capsys.readouterr().out
    assert "Column 0 is full" in out
    assert "Quitting game." in out


def test_play_restart(monkeypatch, capsys):
    feed_input(monkeypatch, ["3", "r", "q"])
    cli = SimpleCLI()

    assert cli.run(["play"]) == 0

    assert "Game restarted." in capsys.readouterr().out
    assert cli.engine.status == GameStatus.START
    assert cli.engine.current_turn == PlayerColor.YELLOW


@pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
def test_play_end_of_input_quits(monkeypatch, capsys, error):
    def closed_input(prompt=""):
        raise error

    monkeypatch.setattr("builtins.input", closed_input)
    cli = SimpleCLI()

    assert cli.run(["play"]) == 0
    assert "Quitting game." in capsys.readouterr().out


@pytest.mark.parametrize("flags, expected", [
    (["--debug"], DebugLevel.DEBUG),
    (["--debug-level", "error"], DebugLevel.ERROR),
])
def test_debug_flags(flags, expected):
    cli = SimpleCLI()
    cli.parse_args(flags + ["replay", "--moves", "0"])
    assert debug.level == expected
