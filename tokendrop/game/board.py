"""
board.py - Grid representation and the column-drop rule

This module implements the Board class which owns the cell grid, drops tokens
into columns, and exposes the grid to the line extractors and win checker.
Row 0 of the grid is the bottom row, the first cell a token lands in.
"""

from typing import Iterator, List, Optional

import numpy as np

from tokendrop.debug import debug
from tokendrop.game import lines
from tokendrop.game.lines import Line
from tokendrop.utils import (EMPTY, BoardConfig, DEFAULT_CONFIG, Player,
                             NoSuchColumn, ColumnIsFull, cell_to_player,
                             render_board_ascii)


class Board:
    """
    A fixed width x height grid of cells.

    Cells only ever go from empty to occupied; there is no removal.
    """

    def __init__(self, config: BoardConfig = DEFAULT_CONFIG):
        """Initialize an empty board."""
        debug.debug(f"Initializing {config.width}x{config.height} Board", "board")
        self.config = config
        self._grid = np.full((config.height, config.width), EMPTY, dtype=np.int8)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cell grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the grid, row 0 at the bottom
        """
        return self._grid.copy()

    def cell(self, row: int, column: int) -> Optional[Player]:
        """Get the player occupying a cell, or None if it is empty."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"Cell ({row}, {column}) is outside the board")
        return cell_to_player(self._grid[row, column])

    def _check_column(self, column) -> int:
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            raise NoSuchColumn(column, self.width)
        if not (0 <= column < self.width):
            raise NoSuchColumn(column, self.width)
        return int(column)

    def column_height(self, column: int) -> int:
        """Get the number of tokens in a column."""
        column = self._check_column(column)
        return int(np.count_nonzero(lines.column(self._grid, column).cells))

    def is_column_full(self, column: int) -> bool:
        return self.column_height(column) == self.height

    def valid_columns(self) -> List[int]:
        """
        Get the columns that can still take a token.

        Returns:
            List of column indices, left to right
        """
        return [col for col in range(self.width) if self._grid[-1, col] == EMPTY]

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def drop(self, column: int, player: Player) -> int:
        """
        Drop a token into a column.

        The token lands in the lowest empty cell of the column. On failure the
        board is left untouched.

        Args:
            column: The column to drop into (0-indexed)
            player: The player who owns the token

        Returns:
            The row the token landed in

        Raises:
            NoSuchColumn: column is not in [0, width)
            ColumnIsFull: column has no empty cell
        """
        debug.debug(f"Dropping token for {player.name} in column {column}", "board")
        try:
            column = self._check_column(column)
        except NoSuchColumn:
            debug.debug(f"Rejected drop: column {column!r} out of bounds", "board")
            raise

        empty_rows = np.flatnonzero(lines.column(self._grid, column).cells == EMPTY)
        if empty_rows.size == 0:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            raise ColumnIsFull(column)

        row = int(empty_rows[0])
        self._grid[row, column] = player.value
        debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
        return row

    def rows(self) -> Iterator[Line]:
        return lines.rows(self._grid)

    def columns(self) -> Iterator[Line]:
        return lines.columns(self._grid)

    def diagonals(self) -> Iterator[Line]:
        return lines.diagonals(self._grid)

    def all_lines(self) -> Iterator[Line]:
        """Yield rows, then columns, then diagonals."""
        return lines.all_lines(self._grid)

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board, top row first
        """
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
