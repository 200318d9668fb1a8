"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard step/reset interface around :class:`Game` so that
scripted players and agents can drive the engine programmatically.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import HIDDEN_OBSERVATION, MINE_OBSERVATION
from .exceptions import InvalidMoveError
from .game import Game, GameConfig, format_position


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = mine (only after the game is lost)

    Actions:
        Discrete action space of size ``size * size``.
        Action i corresponds to cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 4x4 with 3 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.game = Game.from_config(self.config, random.Random())

        size = self.config.size
        self.observation_space = spaces.Box(
            low=HIDDEN_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(size * size)

        self._steps = 0
        self._total_safe_cells = size * size - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = Game.from_config(self.config, random.Random(game_seed))
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.game.get_observation()
        terminated = self.game.is_finished
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = int(action) // self.config.size
        col = int(action) % self.config.size
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal (row, col) and score the result."""
        try:
            outcome = self.game.reveal(format_position(row, col))
        except InvalidMoveError:
            return -0.1

        if outcome.mine_hit:
            return -10.0
        if outcome.win:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.revealed_count,
            "total_safe": self._total_safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": len(self.game.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = self.game.render_board(reveal_all=self.game.is_over)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.game.is_finished:
            return mask
        for row, col in self.game.hidden_positions():
            mask[row * self.config.size + col] = True
        return mask
