"""
series.py - Run-length scanning and win checking

max_series finds the longest same-player run in a single line of cells and
works on any sequence, with or without a board. find_win and check_winner
run it across every row, column and diagonal of a grid.
"""

from itertools import groupby
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from tokendrop.debug import debug
from tokendrop.game.lines import Line, all_lines
from tokendrop.utils import Player, cell_to_player


class Win(NamedTuple):
    """A run long enough to win, and the line it was found on."""
    player: Player
    length: int
    line: Line
    offset: int  # index of the run's first cell within the line

    def positions(self) -> List[Tuple[int, int]]:
        """List the (row, col) coordinates of the winning run only."""
        return self.line.positions()[self.offset:self.offset + self.length]


def max_series(cells: Iterable) -> Tuple[Optional[Player], int]:
    """
    Find the longest contiguous run of a single player.

    Args:
        cells: Cell values in line order; None/Player or raw grid codes

    Returns:
        (player, length) for the longest run. When both players' longest
        runs are equal (including no tokens at all) the player is None and
        the length is still the shared maximum.
    """
    best = {Player.ONE: 0, Player.TWO: 0}

    for player, run in groupby(map(cell_to_player, cells)):
        if player is None:
            continue
        length = sum(1 for _ in run)
        if length > best[player]:
            best[player] = length

    one, two = best[Player.ONE], best[Player.TWO]
    if one == two:
        return None, one
    if one > two:
        return Player.ONE, one
    return Player.TWO, two


def locate_run(cells: Iterable, player: Player, length: int) -> int:
    """
    Find where a run of a given player and length starts.

    Args:
        cells: Cell values in line order
        player: Owner of the run
        length: Exact length of the run

    Returns:
        Index of the first cell of the leftmost such run

    Raises:
        ValueError: no run of that player and length exists
    """
    index = 0
    for value, run in groupby(map(cell_to_player, cells)):
        size = sum(1 for _ in run)
        if value == player and size == length:
            return index
        index += size
    raise ValueError(f"No run of {length} for player {player.name}")


def find_win(grid: np.ndarray, x_row: int) -> Optional[Win]:
    """
    Scan rows, then columns, then diagonals for a winning run.

    Args:
        grid: 2-D grid, row 0 at the bottom
        x_row: Run length needed to win

    Returns:
        The first Win found, or None
    """
    for line in all_lines(grid):
        if line.length < x_row:
            continue
        player, length = max_series(line.cells)
        if player is not None and length >= x_row:
            debug.debug(f"{player.name} has {length} in a row on {line.direction.name} "
                        f"line starting at {line.start}", "series")
            return Win(player, length, line, locate_run(line.cells, player, length))
    return None


def check_winner(grid: np.ndarray, x_row: int) -> Optional[Player]:
    """Return the player with a winning run, if any."""
    win = find_win(grid, x_row)
    return win.player if win is not None else None
