"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/adjacent count) and whether the player has revealed them.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

HIDDEN_OBSERVATION = -1
MINE_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the player has uncovered this cell.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Always 0 for a mined cell.
    """

    is_mine: bool = False
    is_revealed: bool = False
    adjacent_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it already was.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return not self.is_revealed

    def to_observation(self, show_mine: bool = False) -> int:
        """
        Convert cell to an observation value.

        Args:
            show_mine: Expose mines even though they are hidden
                (used once the game has been lost).

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Mine (only when ``show_mine`` is set)
        """
        if self.is_mine and show_mine:
            return MINE_OBSERVATION
        if not self.is_revealed:
            return HIDDEN_OBSERVATION
        return self.adjacent_mines
