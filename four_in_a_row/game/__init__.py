"""
four_in_a_row.game - Core game mechanics for four-in-a-row

This package contains the board helpers, the win/draw evaluator, the
game engine and the Gymnasium environment built on top of it.
"""

from four_in_a_row.game.engine import GameEngine, MoveResult
from four_in_a_row.game.env import FourInARowEnv

__all__ = ['GameEngine', 'MoveResult', 'FourInARowEnv']
