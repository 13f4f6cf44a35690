"""
Gymnasium environment wrapper for Minesweeper.

Drives the same board, reveal engine and win check as the console game,
for scripted or automated play.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, CLASSIC, Position, generate_board
from .render import render_board
from .reveal import is_won, reveal


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = mine, once the game is over

    Actions:
        Discrete action space of size size * size.
        Action i reveals the cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or CLASSIC
        self.render_mode = render_mode
        self.board: Optional[Board] = None
        self._lost = False

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    @property
    def is_over(self) -> bool:
        return self._lost or is_won(self.board)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**32))
        self.board = generate_board(self.config, random.Random(board_seed))
        self._lost = False
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.board is None:
            raise RuntimeError("Call reset() before step()")
        if self.is_over:
            raise RuntimeError("Game is over; call reset()")

        row, col = self._action_to_position(action)
        self._steps += 1
        reward = self._calculate_reward(row, col)

        return (
            self._get_observation(),
            reward,
            self.is_over,
            False,
            self._get_info(),
        )

    def _action_to_position(self, action: int) -> Position:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.size, int(action) % self.config.size

    def _calculate_reward(self, row: int, col: int) -> float:
        cell = self.board.get_cell(row, col)
        if not cell.is_hidden:
            return -0.1

        outcome = reveal(self.board, row, col)
        if outcome.hit_mine:
            self._lost = True
            return -10.0
        if is_won(self.board):
            return 10.0
        return 1.0

    def _get_observation(self) -> np.ndarray:
        return self.board.get_observation(show_mines=self.is_over)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        if self._lost:
            state = "LOST"
        elif is_won(self.board):
            state = "WON"
        else:
            state = "PLAYING"
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": state,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.board, show_mines=self.is_over)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        return (self.board.get_observation() == -1).flatten()
