"""
tokendrop - Rules engine for a two-player token-drop grid game

This package provides the board model, the column-drop rule, win detection
over rows, columns and diagonals, and a turn-based game state machine that
a user interface or training loop can drive.
"""

from tokendrop.utils import (WIDTH, HEIGHT, X_ROW, BoardConfig, DEFAULT_CONFIG,
                             Player, GameState, GameError, NoSuchColumn,
                             ColumnIsFull, AlreadyEnded)
from tokendrop.game.rules import Game

# Version number
__version__ = '0.1.0'

__all__ = ['WIDTH', 'HEIGHT', 'X_ROW', 'BoardConfig', 'DEFAULT_CONFIG',
           'Player', 'GameState', 'GameError', 'NoSuchColumn', 'ColumnIsFull',
           'AlreadyEnded', 'Game']
