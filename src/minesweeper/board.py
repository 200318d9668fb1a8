"""
Board module for Minesweeper game.

Implements the square grid of cells, one-shot mine placement (fixed
layouts or random placement that keeps the first click safe) and
adjacency counting.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set, Tuple

import numpy as np

from .cell import Cell
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns a ``size`` x ``size`` grid of cells. Mines are placed exactly once
    per board through :meth:`place_fixed`, :meth:`place_random_avoiding` or
    :meth:`place_random`; cells are never mined one by one from outside.

    Attributes:
        size: Number of rows and columns.
        num_mines: Mines to place (0 to size * size).
        rng: Random source used for random placement.
    """

    size: int
    num_mines: int
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(
        default_factory=list, init=False, repr=False
    )
    _mines_placed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Validate dimensions and create the empty grid."""
        if self.size < 1:
            raise ConfigurationError("Board size must be positive")
        if not 0 <= self.num_mines <= self.size * self.size:
            raise ConfigurationError(
                f"Mine count must be between 0 and {self.size * self.size}"
            )
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.size)]
            for _ in range(self.size)
        ]

    def _set_mines(self, positions: Iterable[Position]) -> None:
        """Mine the given cells, recompute counts and close placement."""
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._mines_placed = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.size):
            for col in range(self.size):
                cell = self._grid[row][col]
                if cell.is_mine:
                    cell.adjacent_mines = 0
                else:
                    cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    def _ensure_not_placed(self) -> None:
        if self._mines_placed:
            raise ConfigurationError("Mines have already been placed")

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Edges and corners have fewer neighbors; the grid never wraps.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    def place_fixed(self, layout: Sequence[Position]) -> None:
        """
        Place mines at exactly the given coordinates.

        The layout is fully validated before any cell is touched.

        Args:
            layout: (row, col) coordinates, one per mine.

        Raises:
            ConfigurationError: If mines are already placed, the layout
                length differs from ``num_mines``, a coordinate is out of
                bounds or a coordinate repeats.
        """
        self._ensure_not_placed()
        if layout is None:
            raise ConfigurationError("Mine layout cannot be None")
        positions = [(int(row), int(col)) for row, col in layout]
        if len(positions) != self.num_mines:
            raise ConfigurationError(
                f"Expected {self.num_mines} mines, got {len(positions)}"
            )
        for row, col in positions:
            if not self.in_bounds(row, col):
                raise ConfigurationError(
                    f"Mine out of bounds at ({row},{col})"
                )
        if len(set(positions)) != len(positions):
            raise ConfigurationError("Mine layout contains duplicates")

        self._set_mines(positions)
        logger.debug("Placed %d fixed mines", self.num_mines)

    def place_random_avoiding(
        self,
        safe_row: int,
        safe_col: int,
        avoid_whole_neighborhood: bool,
    ) -> bool:
        """
        Place mines randomly, keeping a safe area mine-free.

        Args:
            safe_row: Row of the cell that must stay mine-free.
            safe_col: Column of the cell that must stay mine-free.
            avoid_whole_neighborhood: Also keep the up-to-8 neighbors of
                the safe cell mine-free.

        Returns:
            True if mines were placed, False if the safe area leaves
            fewer free cells than ``num_mines`` (nothing is changed; the
            caller may retry with a narrower safe area).

        Raises:
            ConfigurationError: If mines are already placed.
        """
        self._ensure_not_placed()
        excluded = {(safe_row, safe_col)}
        if avoid_whole_neighborhood:
            excluded.update(self.neighbors(safe_row, safe_col))

        positions = self._get_valid_mine_positions(excluded)
        if len(positions) < self.num_mines:
            logger.debug(
                "Only %d free cells around (%d,%d) for %d mines "
                "(neighborhood=%s)",
                len(positions), safe_row, safe_col, self.num_mines,
                avoid_whole_neighborhood,
            )
            return False

        self._set_mines(self.rng.sample(positions, self.num_mines))
        logger.debug(
            "Placed %d random mines avoiding (%d,%d) (neighborhood=%s)",
            self.num_mines, safe_row, safe_col, avoid_whole_neighborhood,
        )
        return True

    def place_random(self) -> None:
        """
        Place mines randomly anywhere on the board.

        Raises:
            ConfigurationError: If mines are already placed.
        """
        self._ensure_not_placed()
        positions = self._get_valid_mine_positions(set())
        self._set_mines(self.rng.sample(positions, self.num_mines))
        logger.debug("Placed %d random mines without a safe area", self.num_mines)

    def _get_valid_mine_positions(
        self, excluded: Set[Position]
    ) -> List[Position]:
        """Get all positions, in row-major order, not in ``excluded``."""
        positions = []
        for row in range(self.size):
            for col in range(self.size):
                if (row, col) not in excluded:
                    positions.append((row, col))
        return positions

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def mines_placed(self) -> bool:
        """Whether placement has happened for this board."""
        return self._mines_placed

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is outside the board. Callers
                must check :meth:`in_bounds` first.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row},{col}) is outside the board")
        return self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Positions of every mine in row-major order."""
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self._grid[row][col].is_mine
        ]

    def count_mines(self) -> int:
        """Number of mined cells currently on the board."""
        return len(self.mine_positions())

    def get_observation(self, show_mines: bool = False) -> np.ndarray:
        """
        Get board state as numpy array.

        Args:
            show_mines: Mark every mine with 9, hidden or not.

        Returns:
            2D int8 array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = mine (only with ``show_mines``)
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row in range(self.size):
            for col in range(self.size):
                obs[row, col] = self._grid[row][col].to_observation(show_mines)
        return obs
