"""
tokendrop.game - Core game mechanics

This package contains the board representation, line extraction,
win detection and game state management.
"""

from tokendrop.game.board import Board
from tokendrop.game.lines import Line
from tokendrop.game.series import Win, max_series, locate_run, find_win, check_winner
from tokendrop.game.rules import Game, TokenDropEnv

__all__ = ['Board', 'Line', 'Win', 'max_series', 'locate_run', 'find_win', 'check_winner',
           'Game', 'TokenDropEnv']
