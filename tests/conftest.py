"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterator, List, Tuple

import pytest

# Add src (package) and the project root (main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minesweeper import Board, Cell, Game, GameConfig, SafetyPolicy


# ============================================================================
# Helpers
# ============================================================================

def all_positions(size: int) -> Iterator[Tuple[int, int]]:
    """Every (row, col) of a square board in row-major order."""
    for row in range(size):
        for col in range(size):
            yield row, col


def count_revealed_safe(game: Game) -> int:
    """Count revealed non-mine cells directly from the board."""
    return sum(
        1
        for row, col in all_positions(game.size)
        if game.board.cell_at(row, col).is_revealed
        and not game.board.cell_at(row, col).is_mine
    )


def snapshot(game: Game) -> List[Tuple[bool, bool, int]]:
    """Capture every cell's state for before/after comparisons."""
    return [
        (cell.is_mine, cell.is_revealed, cell.adjacent_mines)
        for cell in (game.board.cell_at(r, c) for r, c in all_positions(game.size))
    ]


# ============================================================================
# Random Source Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic placement."""
    return random.Random(123)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_board(rng: random.Random) -> Board:
    """Create a 3x3 board with 1 mine."""
    return Board(3, 1, rng)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a 9x9 board with 10 mines."""
    return Board(9, 10, rng)


@pytest.fixture
def empty_board(rng: random.Random) -> Board:
    """Create a board with no mines for flood-fill testing."""
    return Board(5, 0, rng)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game(rng: random.Random) -> Game:
    """Create a 4x4 game with 3 random mines."""
    return Game(4, 3, rng=rng)


@pytest.fixture
def demo_game(rng: random.Random) -> Game:
    """4x4 game with mines at A2, B2 and C1."""
    return Game(4, 3, rng=rng, fixed_layout=[(0, 1), (1, 1), (2, 0)])


@pytest.fixture
def corner_game(rng: random.Random) -> Game:
    """5x5 game with mines only in the four corners."""
    return Game(
        5,
        4,
        rng=rng,
        fixed_layout=[(0, 0), (0, 4), (4, 0), (4, 4)],
    )


@pytest.fixture
def diagonal_game(rng: random.Random) -> Game:
    """3x3 game with a mined diagonal and no first-click safety."""
    return Game(
        3,
        3,
        rng=rng,
        policy=SafetyPolicy.NONE,
        fixed_layout=[(0, 0), (1, 1), (2, 2)],
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(9, 10)
