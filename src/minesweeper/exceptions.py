"""
Exception hierarchy for the Minesweeper engine.

``InvalidMoveError`` and its subclasses describe bad player input and are
always recoverable: the game is left untouched and the front end can simply
prompt again. ``ConfigurationError`` means the embedding code broke a
placement contract and should be treated as a bug.
"""


class MinesweeperError(Exception):
    """Base class for all errors raised by the engine."""


class InvalidMoveError(MinesweeperError):
    """A move was rejected; game state is unchanged."""


class InvalidPositionError(InvalidMoveError, ValueError):
    """Position text is malformed or points outside the board."""


class CellAlreadyRevealedError(InvalidMoveError):
    """The targeted cell has already been uncovered."""


class GameOverError(InvalidMoveError):
    """A move was attempted after the game was won or lost."""


class ConfigurationError(MinesweeperError):
    """Mine placement was requested with an invalid layout or at the wrong time."""
