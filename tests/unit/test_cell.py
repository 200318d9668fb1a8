"""
Unit tests for Cell class.

Tests cell initialization, revealing and observation values.
"""
import pytest
from minesweeper import Cell


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not be a mine by default."""
        assert hidden_cell.is_mine is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.is_revealed is False
        assert hidden_cell.is_hidden is True

    def test_default_cell_has_zero_adjacent(self, hidden_cell: Cell) -> None:
        """New cell should have zero adjacent mines."""
        assert hidden_cell.adjacent_mines == 0

    def test_mine_cell_creation(self, mine_cell: Cell) -> None:
        """Mine cell should have is_mine=True."""
        assert mine_cell.is_mine is True


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_returns_false(self, hidden_cell: Cell) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_is_not_exposed_by_default(
        self, mine_cell: Cell
    ) -> None:
        """A hidden mine looks like any other hidden cell."""
        assert mine_cell.to_observation() == -1

    def test_mine_observation_is_nine_when_shown(self, mine_cell: Cell) -> None:
        """Mines show as 9 once they may be exposed."""
        assert mine_cell.to_observation(show_mine=True) == 9

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count
