"""
Gymnasium environment wrapper for Minesweeper.

Drives a MineLayout and its RevealState the way a game controller
does, behind a standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import LayoutConfig
from .mine_layout import MineLayout
from .reveal_state import GameState, RevealState


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of CellStatus.to_observation() values:
        - -1 = covered, -2 = mine guess, -3 = question mark
        - 0-8 = revealed cell with adjacent mine count
        - 9 / 10 / 11 = mine / incorrect guess / exploded mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols uncovers cell (i // cols, i % cols).
        Action i >= rows * cols cycles the guess on cell i - rows * cols.

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the round
        - -10 for uncovering a mine
        - 0 for cycling a guess
        - -0.1 for invalid action (cell uncovered, or guessed as mine)

    Mines are placed on the first uncover, away from the uncovered cell.
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Layout configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or LayoutConfig()
        self.layout = MineLayout.from_config(self.config)
        self.field = RevealState(self.layout)

        self.observation_space = spaces.Box(
            low=-3,
            high=11,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # Uncover actions followed by guess actions
        self.action_space = spaces.Discrete(2 * self.config.num_cells)

        self._steps = 0
        self._mines_placed = False
        self._done = False

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new round with an empty layout.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.layout = MineLayout.from_config(self.config, rng=self.np_random)
        self.field = RevealState(self.layout)
        self._steps = 0
        self._mines_placed = False
        self._done = False

        return self.field.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self._done:
            raise RuntimeError("Round is over, call reset() first")
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action}")

        action = int(action)
        self._steps += 1

        if action < self.config.num_cells:
            row, col = self._action_to_position(action)
            reward = self._uncover(row, col)
        else:
            row, col = self._action_to_position(action - self.config.num_cells)
            reward = self._cycle_guess(row, col)

        self._done = self.field.is_game_over()
        if self._done and self.field.game_state == GameState.WON:
            reward = 10.0

        return (
            self.field.get_observation(),
            reward,
            self._done,
            False,
            self._get_info(),
        )

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        return action // self.config.cols, action % self.config.cols

    def _uncover(self, row: int, col: int) -> float:
        """Uncover a cell, placing mines first on the opening move."""
        status = self.field.get_status(row, col)
        if status.is_uncovered or status.is_flagged:
            return -0.1

        if not self._mines_placed:
            self.layout.populate(row, col)
            self._mines_placed = True

        if not self.field.uncover(row, col):
            return -10.0
        return 1.0

    def _cycle_guess(self, row: int, col: int) -> float:
        """Cycle the guess on a covered cell."""
        if self.field.is_uncovered(row, col):
            return -0.1
        self.field.cycle_guess(row, col)
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.field.num_revealed(),
            "total_safe": self.config.num_safe_cells,
            "mines_left": self.field.num_mines_left(),
            "game_state": self.field.game_state.name,
            "valid_actions": len(self.field.get_valid_actions()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        num_cells = self.config.num_cells
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.field.get_valid_actions():
            mask[row * self.config.cols + col] = True
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self.field.is_uncovered(row, col):
                    mask[num_cells + row * self.config.cols + col] = True
        return mask
