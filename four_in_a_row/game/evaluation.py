"""
evaluation.py - Win and draw evaluation for four-in-a-row boards

Pure functions of a board: nothing here reads or changes engine state.
"""

from typing import Tuple

import numpy as np

from four_in_a_row.debug import debug
from four_in_a_row.constants import (ROWS, COLUMNS, WIN_LINE_LENGTH, SEARCH_DIRECTIONS,
                                     BoardToken, MoveStatus, PlayerColor, WinLine)
from four_in_a_row.game.board import is_board_full, is_out_of_bounds, token_to_player_color


def find_win_line(board: np.ndarray, start_row: int, start_column: int,
                  row_step: int = 0, column_step: int = 0) -> Tuple[PlayerColor, WinLine]:
    """
    Walk WIN_LINE_LENGTH cells from a start cell looking for a win.

    Args:
        board: Board to search
        start_row: Row of the first cell
        start_column: Column of the first cell
        row_step: Row increment per step
        column_step: Column increment per step

    Returns:
        (winner, win_line); (PlayerColor.NONE, []) if the cells do not all
        hold the same token
    """
    token_to_check = BoardToken.NONE
    win_line = []

    for i in range(WIN_LINE_LENGTH):
        row = start_row + row_step * i
        column = start_column + column_step * i

        if is_out_of_bounds(row, column):
            return PlayerColor.NONE, []

        current_token = board[row, column]
        if current_token == BoardToken.NONE:
            return PlayerColor.NONE, []

        if token_to_check == BoardToken.NONE:
            token_to_check = BoardToken(int(current_token))
        elif current_token != token_to_check:
            return PlayerColor.NONE, []

        win_line.append((row, column))

    return token_to_player_color(token_to_check), win_line


def check_for_win(board: np.ndarray) -> Tuple[PlayerColor, WinLine]:
    """
    Scan the board for a winning line.

    Columns are visited left to right and rows bottom to top; at each cell
    the vertical, horizontal and both diagonal lines are tried in that
    order. The first line found is reported.

    Returns:
        (winner, win_line), or (PlayerColor.NONE, []) if nobody has won
    """
    for column in range(COLUMNS):
        for row in range(ROWS - 1, -1, -1):
            if board[row, column] == BoardToken.NONE:
                # A line never starts on an empty cell
                continue

            for row_step, column_step in SEARCH_DIRECTIONS:
                winner, win_line = find_win_line(board, row, column, row_step, column_step)
                if winner != PlayerColor.NONE:
                    debug.trace(f"{winner} line found from ({row}, {column}) "
                                f"step ({row_step}, {column_step})", "evaluation")
                    return winner, win_line

    return PlayerColor.NONE, []


def evaluate_board(board: np.ndarray) -> Tuple[MoveStatus, PlayerColor, WinLine]:
    """
    Classify a board after a move.

    Draw detection only runs when no win is found.

    Returns:
        (status, winner, win_line) where status is WIN, DRAW or SUCCESS
    """
    debug.start_timer("win_check")
    winner, win_line = check_for_win(board)
    debug.end_timer("win_check", "evaluation")

    if winner != PlayerColor.NONE:
        return MoveStatus.WIN, winner, win_line

    if is_board_full(board):
        return MoveStatus.DRAW, PlayerColor.NONE, []

    return MoveStatus.SUCCESS, PlayerColor.NONE, []
