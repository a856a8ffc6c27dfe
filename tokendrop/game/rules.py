"""
rules.py - Game state management and Gymnasium environment

This module provides:
1. The Game state machine: turn counting, player cycling, win detection
2. A gymnasium-compatible environment that drives a Game
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tokendrop.debug import debug
from tokendrop.game.board import Board
from tokendrop.game.series import find_win
from tokendrop.utils import (BoardConfig, DEFAULT_CONFIG, Player, GameState,
                             GameError, AlreadyEnded)


class Game:
    """
    A single match.

    The game is in progress until a player completes a run of x_row tokens,
    after which it is finished for good and every further move is rejected.
    """

    def __init__(self, config: BoardConfig = DEFAULT_CONFIG):
        """Initialize a new game with an empty board."""
        debug.debug("Initializing Game", "game")
        self._board = Board(config)
        self._turns = 0
        self._current_turn = Player.ONE
        self._winner: Optional[Player] = None
        self._winning_line: List[Tuple[int, int]] = []

    @property
    def config(self) -> BoardConfig:
        return self._board.config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turns(self) -> int:
        """Number of successful moves so far."""
        return self._turns

    @property
    def current_turn(self) -> Player:
        """The player whose token the next move drops."""
        return self._current_turn

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def winning_line(self) -> List[Tuple[int, int]]:
        """(row, col) positions of the winning run."""
        return list(self._winning_line)

    @property
    def state(self) -> GameState:
        if self._winner is not None:
            return GameState.FINISHED
        return GameState.IN_PROGRESS

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def make_turn(self, column: int) -> None:
        """
        Drop the current player's token into a column.

        The current player advances after every successful move, the winning
        move included.

        Args:
            column: Column to place a token (0-indexed)

        Raises:
            AlreadyEnded: the game already has a winner
            NoSuchColumn: column is outside the board
            ColumnIsFull: column has no empty cell
        """
        if self._winner is not None:
            debug.debug(f"Rejected move in column {column}: game is over", "game")
            raise AlreadyEnded(self._winner)

        self._board.drop(column, self._current_turn)

        debug.start_timer("win_check")
        win = find_win(self._board.grid, self.config.x_row)
        debug.end_timer("win_check", "game")
        if win is not None:
            self._winner = win.player
            self._winning_line = win.positions()
            debug.info(f"Player {win.player.name} wins on turn {self._turns + 1}", "game")

        self._turns += 1
        self._current_turn = self._current_turn.next()

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board
        """
        return self._board.render()


class TokenDropEnv(gym.Env):
    """
    Token-drop environment following the Gymnasium interface.

    Actions are column indices. Observations are the grid with row 0 at the
    bottom: 0 for empty, 1 and 2 for the players. Rewards are given from
    player ONE's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, config: BoardConfig = DEFAULT_CONFIG,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            config: Board dimensions and winning run length
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing TokenDropEnv", "env")
        self.config = config
        self.action_space = spaces.Discrete(config.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(config.height, config.width), dtype=np.int8
        )

        self.game = Game(config)
        self.render_mode = render_mode

        # Track reward settings
        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # Small negative reward to encourage faster solutions

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to a new game.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game = Game(self.config)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step in the environment by making a move.

        Args:
            action: Column to place a token (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        try:
            self.game.make_turn(action)
        except GameError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        truncated = False

        if self.game.winner == Player.ONE:
            reward = self.reward_win
            terminated = True
        elif self.game.winner == Player.TWO:
            reward = self.reward_lose
            terminated = True
        elif not self.game.board.valid_columns():
            debug.info("Board is full, ending episode", "env")
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            The board as text for "ascii", otherwise None
        """
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        valid_moves = self.game.board.valid_columns()
        winner = self.game.winner

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.current_turn.value,
            'game_state': self.game.state.name,
            'turns': self.game.turns,
            'winner': winner.value if winner is not None else None,
            'winning_line': self.game.winning_line,
        }
