"""
Shared pytest fixtures for the four-in-a-row tests.

Game engines and boards are function-scoped so every test starts from a
clean session.
"""

from typing import Callable, Dict, List, Tuple

import numpy as np
import pytest

from four_in_a_row.constants import ROWS, COLUMNS, BoardToken
from four_in_a_row.debug import debug, DebugLevel
from four_in_a_row.game.board import create_board
from four_in_a_row.game.engine import GameEngine, MoveResult


# Yellow takes the bottom row from column 0 to 3 while red stacks column 6
HORIZONTAL_WIN_MOVES = [0, 6, 1, 6, 2, 6, 3]

# 42 moves that fill the board without four in a row anywhere.
# Odd columns end up (bottom to top) Y R R Y Y R, even columns R Y Y R R Y.
DRAW_MOVES = (
    [1, 0, 0, 1, 0, 1, 1, 0, 1, 0, 0, 1]
    + [3, 2, 2, 3, 2, 3, 3, 2, 3, 2, 2, 3]
    + [5, 6, 6, 4, 6, 6, 4, 6, 6, 5, 4, 5, 5, 4, 5, 4, 4, 5]
)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep engine logging out of test output."""
    previous = debug.level
    debug.configure(level=DebugLevel.WARNING)
    yield
    debug.configure(level=previous)


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def play_columns() -> Callable[[GameEngine, List[int]], List[MoveResult]]:
    """Play a list of columns on an engine and return every result."""
    def _play(game: GameEngine, columns: List[int]) -> List[MoveResult]:
        return [game.play_move(column) for column in columns]
    return _play


@pytest.fixture
def board_with() -> Callable[[Dict[Tuple[int, int], BoardToken]], np.ndarray]:
    """Build a writable board holding the given {(row, column): token} cells."""
    def _build(cells: Dict[Tuple[int, int], BoardToken]) -> np.ndarray:
        board = create_board()
        for (row, column), token in cells.items():
            board[row, column] = token
        return board
    return _build


@pytest.fixture
def draw_board() -> np.ndarray:
    """The full, win-free board DRAW_MOVES produces."""
    row_shift = [0, 1, 1, 0, 0, 1]
    board = create_board()
    for row in range(ROWS):
        for column in range(COLUMNS):
            yellow = (column + row_shift[row]) % 2 == 0
            board[row, column] = BoardToken.YELLOW if yellow else BoardToken.RED
    return board


@pytest.fixture
def horizontal_win_moves() -> List[int]:
    return list(HORIZONTAL_WIN_MOVES)


@pytest.fixture
def draw_moves() -> List[int]:
    return list(DRAW_MOVES)
