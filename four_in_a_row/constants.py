"""
constants.py - Board dimensions and enumerations for the four-in-a-row engine

This module holds the fixed game constants and the enums shared by the
board helpers, the evaluator, the engine and its callers.
"""

from enum import Enum, IntEnum
from typing import List, Tuple

# Board dimensions
ROWS = 6
COLUMNS = 7
WIN_LINE_LENGTH = 4  # Tokens in a line needed to win

Position = Tuple[int, int]  # (row, column)
WinLine = List[Position]


class PlayerColor(Enum):
    """Color of a player's tokens; NONE stands for "no player"."""
    NONE = "none"
    YELLOW = "yellow"
    RED = "red"

    def other(self) -> 'PlayerColor':
        """Get the opposing color."""
        if self == PlayerColor.YELLOW:
            return PlayerColor.RED
        elif self == PlayerColor.RED:
            return PlayerColor.YELLOW
        return PlayerColor.NONE

    def __str__(self):
        return self.value


class GameStatus(Enum):
    """Lifecycle of a single game session."""
    START = "start"
    IN_PROGRESS = "in-progress"
    WIN = "win"
    DRAW = "draw"

    def is_game_over(self) -> bool:
        return self in (GameStatus.WIN, GameStatus.DRAW)


class MoveStatus(Enum):
    """Outcome of a single move attempt."""
    INVALID = "invalid"
    SUCCESS = "success"
    WIN = "win"
    DRAW = "draw"


class BoardToken(IntEnum):
    """Cell values stored in the board array."""
    NONE = 0
    YELLOW = 1
    RED = 2


STARTING_COLOR = PlayerColor.YELLOW

# Line search steps (row, column), in the order they are tried at each cell
VERTICAL = (-1, 0)
HORIZONTAL = (0, -1)
LEFT_DIAGONAL = (-1, -1)
RIGHT_DIAGONAL = (-1, 1)
SEARCH_DIRECTIONS = (VERTICAL, HORIZONTAL, LEFT_DIAGONAL, RIGHT_DIAGONAL)
