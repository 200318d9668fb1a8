"""
Minesweeper game engine.

Provides cell and board state, mine placement, the reveal/flood-fill game
loop and a gymnasium environment for driving games programmatically.
"""
from .cell import Cell
from .board import Board
from .exceptions import (
    MinesweeperError,
    InvalidMoveError,
    InvalidPositionError,
    CellAlreadyRevealedError,
    GameOverError,
    ConfigurationError,
)
from .game import (
    Game,
    GameConfig,
    GameState,
    RevealOutcome,
    SafetyPolicy,
    format_position,
    SMALL,
    MEDIUM,
    LARGE,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Board",
    "MinesweeperError",
    "InvalidMoveError",
    "InvalidPositionError",
    "CellAlreadyRevealedError",
    "GameOverError",
    "ConfigurationError",
    "Game",
    "GameConfig",
    "GameState",
    "RevealOutcome",
    "SafetyPolicy",
    "format_position",
    "SMALL",
    "MEDIUM",
    "LARGE",
    "MinesweeperEnv",
]
