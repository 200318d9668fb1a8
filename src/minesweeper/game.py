"""
Game module for Minesweeper.

Drives a single round on one board: lazy first-reveal mine placement,
single-cell reveal, flood-fill of zero-count regions, win/loss detection
and "A1"-style position parsing.
"""
import logging
import random
import re
import string
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Deque, List, Optional, Sequence, Tuple

import numpy as np

from .board import Board, Position
from .exceptions import (
    CellAlreadyRevealedError,
    GameOverError,
    InvalidPositionError,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_SIZE = 26  # one row letter per row, A..Z
NO_ADJACENT_COUNT = -1
HIDDEN_SYMBOL = "_"
MINE_SYMBOL = "*"
COLUMN_PATTERN = re.compile(r"[+-]?[0-9]+")


class SafetyPolicy(Enum):
    """How the first revealed cell is protected from mines."""

    NONE = auto()
    AVOID_CELL = auto()
    AVOID_NEIGHBORHOOD = auto()


class GameState(Enum):
    """Possible states of the game."""

    AWAITING_FIRST_REVEAL = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = frozenset({GameState.WON, GameState.LOST})


@dataclass
class GameConfig:
    """
    Configuration for a Minesweeper round.

    Out-of-range values are clamped instead of rejected, so building a
    config (and therefore a game) always succeeds.

    Attributes:
        size: Rows and columns of the square board (1-26).
        num_mines: Total mines to place (0 to size * size).
        policy: First-click safety policy.
        fixed_layout: Optional (row, col) mine coordinates used instead of
            random placement.
    """

    size: int = 4
    num_mines: int = 3
    policy: SafetyPolicy = SafetyPolicy.AVOID_NEIGHBORHOOD
    fixed_layout: Optional[Tuple[Position, ...]] = None

    def __post_init__(self) -> None:
        """Clamp configuration values into their valid ranges."""
        self._clamp()

    def _clamp(self) -> None:
        size = min(max(int(self.size), 1), MAX_SIZE)
        if size != self.size:
            logger.warning("Board size %s clamped to %d", self.size, size)
        self.size = size

        max_mines = size * size
        num_mines = min(max(int(self.num_mines), 0), max_mines)
        if num_mines != self.num_mines:
            logger.warning("Mine count %s clamped to %d", self.num_mines, num_mines)
        self.num_mines = num_mines

        if self.fixed_layout is not None:
            self.fixed_layout = tuple(
                (int(row), int(col)) for row, col in self.fixed_layout
            )


# Preset board sizes
SMALL = GameConfig(4, 3)
MEDIUM = GameConfig(9, 10)
LARGE = GameConfig(16, 40)


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a successful reveal.

    Attributes:
        mine_hit: Whether the revealed cell was a mine.
        adjacent_count: Adjacent mine count of the revealed cell, or -1
            when a mine was hit.
        win: Whether this reveal uncovered the last safe cell.
    """

    mine_hit: bool
    adjacent_count: int
    win: bool


# ============================================================================
# Position Helpers
# ============================================================================

def format_position(row: int, col: int) -> str:
    """Format 0-based (row, col) as player-facing text, e.g. (1, 2) -> "B3"."""
    return f"{chr(ord('A') + row)}{col + 1}"


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One round of Minesweeper on a square board.

    The game exclusively owns its :class:`Board`. Mines are placed on the
    first reveal, following the configured :class:`SafetyPolicy` or the
    fixed layout. Construct a new game to play again.

    Not safe for concurrent use; callers serialize access per game.
    """

    def __init__(
        self,
        size: int = 4,
        num_mines: int = 3,
        rng: Optional[random.Random] = None,
        policy: SafetyPolicy = SafetyPolicy.AVOID_NEIGHBORHOOD,
        fixed_layout: Optional[Sequence[Position]] = None,
    ) -> None:
        """
        Initialize a new round.

        Args:
            size: Rows and columns of the board, clamped to 1-26.
            num_mines: Mines to place, clamped to 0 to size * size.
            rng: Random source for mine placement (default: a fresh
                ``random.Random``).
            policy: First-click safety policy.
            fixed_layout: Optional exact mine coordinates.
        """
        self.config = GameConfig(
            size=size,
            num_mines=num_mines,
            policy=policy,
            fixed_layout=fixed_layout,
        )
        self.board = Board(
            self.config.size,
            self.config.num_mines,
            rng if rng is not None else random.Random(),
        )
        self._state = GameState.AWAITING_FIRST_REVEAL
        self._revealed_count = 0

    @classmethod
    def from_config(
        cls, config: GameConfig, rng: Optional[random.Random] = None
    ) -> "Game":
        """Create a game from an existing configuration."""
        return cls(
            size=config.size,
            num_mines=config.num_mines,
            rng=rng,
            policy=config.policy,
            fixed_layout=config.fixed_layout,
        )

    # ========================================================================
    # Position Parsing (Low-level)
    # ========================================================================

    def parse_position(self, text: Optional[str]) -> Position:
        """
        Convert player text such as ``"B3"`` into 0-based (row, col).

        The row is a single letter (case-insensitive) and the column a
        1-based number. Surrounding whitespace is ignored.

        Args:
            text: Position text.

        Returns:
            (row, col) on this board.

        Raises:
            InvalidPositionError: If the text is missing or malformed, or
                the position is outside the board.
        """
        if text is None:
            raise InvalidPositionError("Position is missing.")
        text = text.strip()
        if len(text) < 2:
            raise InvalidPositionError("Invalid position format. Use e.g., A1.")

        if text[0] not in string.ascii_letters:
            raise InvalidPositionError("Invalid row letter.")
        row = ord(text[0].upper()) - ord("A")

        col_text = text[1:].strip()
        if not COLUMN_PATTERN.fullmatch(col_text):
            raise InvalidPositionError("Invalid column number.")
        col = int(col_text) - 1

        if not self.board.in_bounds(row, col):
            raise InvalidPositionError("Position out of grid bounds.")
        return row, col

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mines(self, row: int, col: int) -> None:
        """Place mines for the first reveal at (row, col)."""
        if self.config.fixed_layout is not None:
            layout = list(self.config.fixed_layout)
            if self.config.policy != SafetyPolicy.NONE:
                layout = self._relocate_off(layout, row, col)
            self.board.place_fixed(layout)
            return

        policy = self.config.policy
        placed = False
        if policy == SafetyPolicy.AVOID_NEIGHBORHOOD:
            placed = self.board.place_random_avoiding(row, col, True)
        if not placed and policy != SafetyPolicy.NONE:
            placed = self.board.place_random_avoiding(row, col, False)
        if not placed:
            self.board.place_random()

    def _relocate_off(
        self, layout: List[Position], row: int, col: int
    ) -> List[Position]:
        """
        Move a mine sitting on (row, col) to the first free cell.

        Free cells are scanned in row-major order, skipping the clicked
        cell and cells already in the layout. When no cell is free the
        layout is returned unchanged.
        """
        adjusted = [position for position in layout if position != (row, col)]
        if len(adjusted) == len(layout):
            return layout

        occupied = set(adjusted)
        for free_row in range(self.board.size):
            for free_col in range(self.board.size):
                candidate = (free_row, free_col)
                if candidate == (row, col) or candidate in occupied:
                    continue
                logger.debug(
                    "Relocated mine from %s to %s",
                    format_position(row, col),
                    format_position(free_row, free_col),
                )
                adjusted.append(candidate)
                return adjusted
        return layout

    # ========================================================================
    # Flood Fill (Mid-level)
    # ========================================================================

    def _flood_reveal(self, row: int, col: int) -> None:
        """
        Breadth-first reveal of the zero-count region around (row, col).

        Every hidden, non-mine neighbor of a dequeued cell is revealed;
        only neighbors whose own count is zero are enqueued, each at most
        once.
        """
        size = self.board.size
        enqueued = [[False] * size for _ in range(size)]
        queue: Deque[Position] = deque([(row, col)])
        enqueued[row][col] = True

        while queue:
            current_row, current_col = queue.popleft()
            for neighbor_row, neighbor_col in self.board.neighbors(
                current_row, current_col
            ):
                neighbor = self.board.cell_at(neighbor_row, neighbor_col)
                if neighbor.is_mine or neighbor.is_revealed:
                    continue

                neighbor.reveal()
                self._revealed_count += 1

                if (
                    neighbor.adjacent_mines == 0
                    and not enqueued[neighbor_row][neighbor_col]
                ):
                    enqueued[neighbor_row][neighbor_col] = True
                    queue.append((neighbor_row, neighbor_col))

    # ========================================================================
    # Game Actions (High-level)
    # ========================================================================

    def reveal(self, position: Optional[str]) -> RevealOutcome:
        """
        Reveal the cell named by ``position`` (e.g. ``"A1"``).

        On the first reveal, mines are placed according to the fixed
        layout or the safety policy. A zero-count cell reveals its
        connected region.

        Args:
            position: Position text.

        Returns:
            The outcome of the reveal.

        Raises:
            GameOverError: If the game is already won or lost.
            InvalidPositionError: If the position cannot be parsed.
            CellAlreadyRevealedError: If the cell is already revealed.
            ConfigurationError: If the fixed layout does not fit the board.
        """
        if self.is_finished:
            raise GameOverError("Game is already over.")

        row, col = self.parse_position(position)

        if not self.board.mines_placed:
            self._place_mines(row, col)
            self._state = GameState.IN_PROGRESS

        cell = self.board.cell_at(row, col)
        if cell.is_mine:
            self._state = GameState.LOST
            logger.info("Mine detonated at %s", format_position(row, col))
            return RevealOutcome(True, NO_ADJACENT_COUNT, False)
        if cell.is_revealed:
            raise CellAlreadyRevealedError("Cell already revealed.")

        cell.reveal()
        self._revealed_count += 1
        if cell.adjacent_mines == 0:
            self._flood_reveal(row, col)

        win = self._check_win_condition()
        logger.debug(
            "Revealed %s (%d adjacent), %d safe cells uncovered",
            format_position(row, col), cell.adjacent_mines, self._revealed_count,
        )
        return RevealOutcome(False, cell.adjacent_mines, win)

    def _check_win_condition(self) -> bool:
        """Check if all non-mine cells are revealed, marking the win."""
        safe_cells = self.board.size * self.board.size - self.board.num_mines
        if self._revealed_count == safe_cells:
            self._state = GameState.WON
            logger.info("Board cleared after %d reveals", self._revealed_count)
            return True
        return False

    # ========================================================================
    # Rendering
    # ========================================================================

    def render_board(self, reveal_all: bool = False) -> str:
        """
        Render the board as a text grid.

        Args:
            reveal_all: Show every cell, with ``*`` for mines.

        Returns:
            Column numbers on the first line, then one line per row
            starting with its letter. Hidden cells show ``_``.
        """
        size = self.board.size
        width = len(str(size))
        lines = [
            "  " + " ".join(str(col).rjust(width) for col in range(1, size + 1))
        ]
        for row in range(size):
            symbols = []
            for col in range(size):
                cell = self.board.cell_at(row, col)
                if reveal_all:
                    symbol = MINE_SYMBOL if cell.is_mine else str(cell.adjacent_mines)
                elif cell.is_revealed:
                    symbol = str(cell.adjacent_mines)
                else:
                    symbol = HIDDEN_SYMBOL
                symbols.append(symbol.rjust(width))
            lines.append(chr(ord("A") + row) + " " + " ".join(symbols))
        return "\n".join(lines)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if a mine was detonated."""
        return self._state == GameState.LOST

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_finished(self) -> bool:
        """Check if the game reached a terminal state."""
        return self._state in TERMINAL_STATES

    @property
    def revealed_count(self) -> int:
        """Number of revealed non-mine cells."""
        return self._revealed_count

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def num_mines(self) -> int:
        return self.board.num_mines

    @property
    def policy(self) -> SafetyPolicy:
        return self.config.policy

    @property
    def fixed_layout(self) -> Optional[Tuple[Position, ...]]:
        return self.config.fixed_layout

    @property
    def mines_placed(self) -> bool:
        return self.board.mines_placed

    def hidden_positions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of hidden (row, col) positions in row-major order.
        """
        return [
            (row, col)
            for row in range(self.board.size)
            for col in range(self.board.size)
            if self.board.cell_at(row, col).is_hidden
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get the player's view of the board as a numpy array.

        Mines are exposed (as 9) only once the game is lost.
        """
        return self.board.get_observation(show_mines=self.is_over)
