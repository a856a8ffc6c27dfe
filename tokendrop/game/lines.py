"""
lines.py - Row, column and diagonal extraction for win checking

Every extractor is a generator over a 2-D grid (row 0 at the bottom). The
lines it yields hold numpy views into the grid, so extracting a line costs
only its own length and the grid is never copied.
"""

from typing import Iterator, List, NamedTuple, Tuple

import numpy as np

from tokendrop.utils import Direction, DIRECTION_VECTORS


class Line(NamedTuple):
    """One row, column or diagonal of the grid."""
    direction: Direction
    start: Tuple[int, int]  # (row, col) of the first cell
    cells: np.ndarray

    @property
    def length(self) -> int:
        return len(self.cells)

    def positions(self) -> List[Tuple[int, int]]:
        """List the (row, col) coordinates covered by this line, in order."""
        dr, dc = DIRECTION_VECTORS[self.direction]
        row, col = self.start
        return [(row + i * dr, col + i * dc) for i in range(self.length)]


def _read_only(grid: np.ndarray) -> np.ndarray:
    view = grid.view()
    view.flags.writeable = False
    return view


def row(grid: np.ndarray, index: int) -> Line:
    """Extract a single row by index, leftmost cell first."""
    return Line(Direction.HORIZONTAL, (index, 0), _read_only(grid)[index, :])


def column(grid: np.ndarray, index: int) -> Line:
    """Extract a single column by index, bottom cell first."""
    return Line(Direction.VERTICAL, (0, index), _read_only(grid)[:, index])


def rows(grid: np.ndarray) -> Iterator[Line]:
    """Yield every row, bottom row first."""
    for index in range(grid.shape[0]):
        yield row(grid, index)


def columns(grid: np.ndarray) -> Iterator[Line]:
    """Yield every column, left to right."""
    for index in range(grid.shape[1]):
        yield column(grid, index)


def diagonals(grid: np.ndarray) -> Iterator[Line]:
    """
    Yield the diagonals of the grid, rising ones first, then falling ones.

    Cells of each diagonal run from its lowest cell upwards. Numpy diagonal
    offsets go from -(height - 1) (the top-left corner for rising lines) to
    width - 1. The last offset is the single-cell diagonal rooted in a
    bottom corner and is skipped, so each direction yields
    width + height - 2 lines and the total is 2 * (width + height - 1) - 2.
    Lines shorter than the winning run are still yielded.

    Args:
        grid: 2-D grid, row 0 at the bottom

    Yields:
        Line for each diagonal
    """
    height, width = grid.shape
    view = _read_only(grid)
    flipped = np.fliplr(view)

    for offset in range(-(height - 1), width - 1):
        start = (max(0, -offset), max(0, offset))
        yield Line(Direction.DIAGONAL_UP, start, view.diagonal(offset))

    for offset in range(-(height - 1), width - 1):
        start_row = max(0, -offset)
        start = (start_row, width - 1 - start_row - offset)
        yield Line(Direction.DIAGONAL_DOWN, start, flipped.diagonal(offset))


def all_lines(grid: np.ndarray) -> Iterator[Line]:
    """Yield rows, then columns, then diagonals."""
    yield from rows(grid)
    yield from columns(grid)
    yield from diagonals(grid)
