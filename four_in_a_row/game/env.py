"""
env.py - Gymnasium environment around the four-in-a-row engine

Lets a step/reset harness drive a GameEngine. Both colors are played
through the same environment; rewards are given from yellow's point of
view.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from four_in_a_row.debug import debug
from four_in_a_row.constants import ROWS, COLUMNS, BoardToken, MoveStatus, PlayerColor
from four_in_a_row.game.engine import GameEngine, MoveResult


class FourInARowEnv(gym.Env):
    """
    Four-in-a-row environment following the Gymnasium interface.

    Observations are (ROWS, COLUMNS) int8 arrays of BoardToken values and
    actions are column indices.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 reward_win: float = 1.0,
                 reward_lose: float = -1.0,
                 reward_draw: float = 0.1,
                 reward_invalid_move: float = -0.5,
                 reward_step: float = -0.01):
        """
        Initialize the environment.

        Args:
            render_mode: "ascii", "human" or None
            reward_win: Reward when yellow wins
            reward_lose: Reward when red wins
            reward_draw: Reward for a drawn game
            reward_invalid_move: Reward for a rejected move
            reward_step: Reward for any other accepted move
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing FourInARowEnv", "env")

        self.action_space = spaces.Discrete(COLUMNS)
        self.observation_space = spaces.Box(
            low=int(BoardToken.NONE), high=int(BoardToken.RED),
            shape=(ROWS, COLUMNS), dtype=np.int8
        )

        self.engine = GameEngine()
        self.render_mode = render_mode
        self.last_result: Optional[MoveResult] = None

        self.reward_win = reward_win
        self.reward_lose = reward_lose
        self.reward_draw = reward_draw
        self.reward_invalid_move = reward_invalid_move
        self.reward_step = reward_step

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.engine.reset()
        self.last_result = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play one move for the player whose turn it is.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        # Moves after the game has ended are rejected like any other invalid move
        if self.engine.status.is_game_over():
            debug.warning(f"Step {action} called after the game ended", "env")
            return self._invalid_step()

        result = self.engine.play_move(action)
        self.last_result = result

        if result.status == MoveStatus.INVALID:
            debug.debug(f"Invalid action: {action}", "env")
            return self._invalid_step()

        reward = self.reward_step
        terminated = False

        if result.status == MoveStatus.WIN:
            reward = self.reward_win if result.winner == PlayerColor.YELLOW else self.reward_lose
            terminated = True
        elif result.status == MoveStatus.DRAW:
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())

        return None

    def _invalid_step(self) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        info = self._get_info()
        info['invalid_move'] = True
        return self._get_observation(), self.reward_invalid_move, False, True, info

    def _get_observation(self) -> np.ndarray:
        return self.engine.current_board.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.engine.valid_columns()
        win_line = self.last_result.win_line if self.last_result is not None else []

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_turn.value,
            'game_status': self.engine.status.value,
            'moves_made': self.engine.move_count,
            'winning_line': list(win_line),
        }
