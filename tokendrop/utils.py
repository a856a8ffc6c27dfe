"""
utils.py - Constants, enumerations and helpers for the token-drop game

This module provides the board configuration, the player and state
enumerations, the error classes raised by the rules engine, and the ASCII
renderer shared by the board and the environment.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants
WIDTH = 5
HEIGHT = 5
X_ROW = 4  # Number of pieces in a row to win

EMPTY = 0  # Cell value of an empty cell


@dataclass(frozen=True)
class BoardConfig:
    """Board dimensions and the run length needed to win."""
    width: int = WIDTH
    height: int = HEIGHT
    x_row: int = X_ROW

    def __post_init__(self):
        for name in ('width', 'height', 'x_row'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def cell_count(self) -> int:
        return self.width * self.height


DEFAULT_CONFIG = BoardConfig()


class Player(Enum):
    """Enumeration of the two players. Values are the cell codes on the grid."""
    ONE = 1    # First player
    TWO = 2    # Second player

    def next(self) -> 'Player':
        """Get the player who moves after this one."""
        if self == Player.ONE:
            return Player.TWO
        return Player.ONE

    def __str__(self):
        if self == Player.ONE:
            return "X"
        return "O"


def cell_to_player(value) -> Optional[Player]:
    """
    Convert a cell value to a player.

    Args:
        value: None, a Player, or a raw grid code (0, 1 or 2)

    Returns:
        The occupying player, or None for an empty cell
    """
    if value is None or isinstance(value, Player):
        return value
    code = int(value)
    if code == EMPTY:
        return None
    return Player(code)


class GameState(Enum):
    """Enumeration representing the game lifecycle."""
    IN_PROGRESS = auto()
    FINISHED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameState.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing the kinds of line scanned for wins."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Step (row, col) between consecutive cells of a line. Row 0 is the bottom,
# so every line is walked upwards except rows.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1)
}


class GameError(Exception):
    """Base class for rejected moves. A rejected move changes nothing."""


class NoSuchColumn(GameError):
    """The column index is outside the board."""

    def __init__(self, column, width: int):
        super().__init__(f"Column {column!r} is not in range 0..{width - 1}")
        self.column = column


class ColumnIsFull(GameError):
    """The column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class AlreadyEnded(GameError):
    """The game already has a winner."""

    def __init__(self, winner: Player):
        super().__init__(f"Game already won by player {winner.name}")
        self.winner = winner


def render_board_ascii(board: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game grid, row 0 at the bottom

    Returns:
        ASCII representation of the board, top row first
    """
    height, width = board.shape
    result = []
    result.append("|" + "-" * (width * 2 - 1) + "|")

    for row in range(height - 1, -1, -1):
        cells = []
        for col in range(width):
            player = cell_to_player(board[row, col])
            cells.append(" " if player is None else str(player))
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (width * 2 - 1) + "|")
    result.append("|" + " ".join(str(i % 10) for i in range(width)) + "|")

    return "\n".join(result)
