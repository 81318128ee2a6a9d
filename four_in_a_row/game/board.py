"""
board.py - Stateless board helpers for the four-in-a-row engine

Boards are (ROWS, COLUMNS) uint8 numpy arrays of BoardToken values, row 0
at the top. Nothing here keeps state: every helper takes the board it
works on.
"""

import numbers
from typing import List, Optional

import numpy as np

from four_in_a_row.debug import debug
from four_in_a_row.constants import ROWS, COLUMNS, BoardToken, PlayerColor

_COLOR_TO_TOKEN = {
    PlayerColor.YELLOW: BoardToken.YELLOW,
    PlayerColor.RED: BoardToken.RED,
}

_TOKEN_TO_COLOR = {token: color for color, token in _COLOR_TO_TOKEN.items()}

_TOKEN_SYMBOLS = {
    BoardToken.NONE: ".",
    BoardToken.YELLOW: "Y",
    BoardToken.RED: "R",
}


def create_board() -> np.ndarray:
    """Create an all-empty board."""
    return np.full((ROWS, COLUMNS), BoardToken.NONE, dtype=np.uint8)


def copy_board(board: np.ndarray) -> np.ndarray:
    """
    Create a writable deep copy of a board.

    Args:
        board: The board to copy (may be read-only)

    Returns:
        An independent board with the same tokens
    """
    return np.array(board, dtype=np.uint8, copy=True)


def freeze_board(board: np.ndarray) -> np.ndarray:
    """Mark a board read-only and return it."""
    board.flags.writeable = False
    return board


def player_color_to_token(color: PlayerColor) -> BoardToken:
    return _COLOR_TO_TOKEN.get(color, BoardToken.NONE)


def token_to_player_color(token: int) -> PlayerColor:
    try:
        return _TOKEN_TO_COLOR.get(BoardToken(int(token)), PlayerColor.NONE)
    except ValueError:
        return PlayerColor.NONE


def is_out_of_bounds(row: int, column: int) -> bool:
    """Check whether (row, column) falls outside the board."""
    return row < 0 or row >= ROWS or column < 0 or column >= COLUMNS


def as_column_index(column) -> Optional[int]:
    """
    Normalize a requested column to a board column index.

    Args:
        column: Value supplied by the caller

    Returns:
        The column as an int, or None if it is not an integer in [0, COLUMNS)
    """
    if isinstance(column, bool) or not isinstance(column, numbers.Integral):
        return None

    column = int(column)
    if not 0 <= column < COLUMNS:
        return None
    return column


def drop_token(board: np.ndarray, column, color: PlayerColor) -> Optional[int]:
    """
    Drop a token of the given color into a column, in place.

    The token settles in the lowest empty cell of the column.

    Args:
        board: Writable board to modify
        column: Requested column index
        color: Color of the token to place

    Returns:
        The row the token landed in, or None if the column is invalid or full
    """
    column_index = as_column_index(column)
    if column_index is None:
        debug.debug(f"Column {column!r} is not on the board", "board")
        return None

    for row in range(ROWS - 1, -1, -1):
        if board[row, column_index] == BoardToken.NONE:
            board[row, column_index] = player_color_to_token(color)
            debug.trace(f"Placed {color} token at ({row}, {column_index})", "board")
            return row

    debug.debug(f"Column {column_index} is full", "board")
    return None


def is_board_full(board: np.ndarray) -> bool:
    return not np.any(board == BoardToken.NONE)


def open_columns(board: np.ndarray) -> List[int]:
    """Columns whose top cell is still empty."""
    return [int(column) for column in np.flatnonzero(board[0] == BoardToken.NONE)]


def count_tokens(board: np.ndarray) -> int:
    return int(np.count_nonzero(board != BoardToken.NONE))


def board_from_sequence(values) -> np.ndarray:
    """
    Build a board from ROWS * COLUMNS token values in row-major order.

    Raises:
        ValueError: If the value count or a token value is wrong
    """
    values = [int(value) for value in values]
    if len(values) != ROWS * COLUMNS:
        raise ValueError(f"Expected {ROWS * COLUMNS} values, got {len(values)}")

    valid_tokens = {int(token) for token in BoardToken}
    bad = sorted(set(values) - valid_tokens)
    if bad:
        raise ValueError(f"Unknown board token(s): {bad}")

    return np.array(values, dtype=np.uint8).reshape(ROWS, COLUMNS)


def render_board_ascii(board: np.ndarray) -> str:
    """
    Render a board as ASCII art with column numbers underneath.

    Args:
        board: The board to render

    Returns:
        Multi-line string representation of the board
    """
    border = "+" + "-" * (COLUMNS * 2 + 1) + "+"
    lines = [border]
    for row in range(ROWS):
        cells = " ".join(_TOKEN_SYMBOLS[BoardToken(int(board[row, column]))]
                         for column in range(COLUMNS))
        lines.append(f"| {cells} |")
    lines.append(border)
    lines.append("  " + " ".join(str(column) for column in range(COLUMNS)))
    return "\n".join(lines)
