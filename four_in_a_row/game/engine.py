"""
engine.py - Game state machine for four-in-a-row

GameEngine owns the board, the turn and the game status of one session.
A session goes START -> IN_PROGRESS -> WIN | DRAW, and reset() returns it
to START from any state. Bad moves are reported through MoveStatus.INVALID,
never raised.
"""

from typing import List, NamedTuple

import numpy as np

from four_in_a_row.debug import debug
from four_in_a_row.constants import (STARTING_COLOR, GameStatus, MoveStatus,
                                     PlayerColor, WinLine)
from four_in_a_row.game.board import (copy_board, count_tokens, create_board, drop_token,
                                      freeze_board, open_columns, render_board_ascii)
from four_in_a_row.game.evaluation import evaluate_board


class MoveResult(NamedTuple):
    """Outcome of GameEngine.play_move."""
    board: np.ndarray
    winner: PlayerColor
    status: MoveStatus
    win_line: WinLine


class GameEngine:
    """
    Rules engine for a single four-in-a-row session.

    Committed boards are read-only numpy arrays; each move is tried on a
    fresh copy that replaces the current board only when the move is valid.
    """

    def __init__(self):
        debug.debug("Initializing GameEngine", "engine")
        self.reset()

    @property
    def starting_color(self) -> PlayerColor:
        return self._starting_color

    @property
    def current_turn(self) -> PlayerColor:
        return self._current_turn

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_board(self) -> np.ndarray:
        return self._current_board

    @property
    def move_count(self) -> int:
        """Number of tokens on the current board."""
        return count_tokens(self._current_board)

    def reset(self) -> None:
        """Start a new session with an empty board and yellow to move."""
        debug.debug("Resetting game", "engine")
        self._starting_color = STARTING_COLOR
        self._current_turn = self._starting_color
        self._status = GameStatus.START
        self._current_board = freeze_board(create_board())

    def play_move(self, column_index) -> MoveResult:
        """
        Drop the current player's token into a column.

        Args:
            column_index: Column to play (0-indexed)

        Returns:
            MoveResult with the board, winner, move status and win line.
            Once the game is over, the final result is returned again and
            nothing changes.
        """
        if self._status == GameStatus.START:
            self._status = GameStatus.IN_PROGRESS
        elif self._status.is_game_over():
            debug.debug(f"Move {column_index!r} ignored: game is over ({self._status.value})",
                        "engine")
            return self._evaluate(self._current_board)

        result = self._perform_move(column_index)

        # Turn only passes on while the game goes on
        if result.status == MoveStatus.SUCCESS:
            self._current_turn = self._current_turn.other()
            debug.trace(f"Turn passes to {self._current_turn}", "engine")

        return result

    def valid_columns(self) -> List[int]:
        """Columns that accept a token, empty once the game is over."""
        if self._status.is_game_over():
            return []
        return open_columns(self._current_board)

    def render(self) -> str:
        return render_board_ascii(self._current_board)

    def __str__(self) -> str:
        return self.render()

    def _perform_move(self, column_index) -> MoveResult:
        next_board = copy_board(self._current_board)

        row = drop_token(next_board, column_index, self._current_turn)
        if row is None:
            debug.debug(f"Invalid move by {self._current_turn} in column {column_index!r}",
                        "engine")
            return MoveResult(freeze_board(next_board), PlayerColor.NONE,
                              MoveStatus.INVALID, [])

        self._current_board = freeze_board(next_board)
        debug.debug(f"{self._current_turn} played column {column_index} (row {row})", "engine")
        return self._evaluate(self._current_board)

    def _evaluate(self, board: np.ndarray) -> MoveResult:
        status, winner, win_line = evaluate_board(board)

        if status == MoveStatus.WIN:
            if self._status != GameStatus.WIN:
                debug.info(f"{winner} wins with line {win_line}", "engine")
            self._status = GameStatus.WIN
        elif status == MoveStatus.DRAW:
            if self._status != GameStatus.DRAW:
                debug.info("Game ends in a draw", "engine")
            self._status = GameStatus.DRAW

        return MoveResult(board, winner, status, win_line)


if __name__ == "__main__":
    from four_in_a_row.debug import DebugLevel

    debug.configure(level=DebugLevel.DEBUG)

    engine = GameEngine()
    for column in [0, 6, 1, 6, 2, 6, 3]:
        result = engine.play_move(column)
        print(f"\nColumn {column}: {result.status.value}")
        print(engine)

    print(f"\nWinner: {result.winner}, line: {result.win_line}")
