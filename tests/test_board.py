"""
Tests for Board class.
"""
import numpy as np
import pytest

from tokendrop.game.board import Board
from tokendrop.utils import (BoardConfig, DEFAULT_CONFIG, Player, NoSuchColumn,
                             ColumnIsFull, GameError)


def test_board_initialization():
    """A new board is empty and sized by its config."""
    board = Board()

    assert board.config == DEFAULT_CONFIG
    assert (board.width, board.height) == (5, 5)
    assert board.grid.shape == (5, 5)
    assert np.all(board.grid == 0)
    assert board.occupied_count() == 0
    assert board.valid_columns() == [0, 1, 2, 3, 4]


def test_board_uses_given_config(small_config):
    """Board dimensions follow the config passed in."""
    board = Board(small_config)
    assert board.grid.shape == (3, 4)
    assert len(list(board.rows())) == 3
    assert len(list(board.columns())) == 4
    assert len(list(board.diagonals())) == 10


def test_drop_lands_in_lowest_empty_cell():
    """Each drop stacks on top of the previous token in that column."""
    board = Board()

    assert board.drop(2, Player.ONE) == 0
    assert board.drop(2, Player.TWO) == 1
    assert board.drop(0, Player.ONE) == 0

    assert board.cell(0, 2) == Player.ONE
    assert board.cell(1, 2) == Player.TWO
    assert board.cell(0, 0) == Player.ONE
    assert board.cell(2, 2) is None
    assert board.column_height(2) == 2


def test_drop_changes_exactly_one_cell():
    """A successful drop adds one token and touches nothing else."""
    board = Board()
    player = Player.ONE
    for step in range(board.width * board.height):
        col = step % board.width
        before = board.get_state()
        expected_row = board.column_height(col)

        row = board.drop(col, player)

        after = board.get_state()
        assert row == expected_row
        assert board.occupied_count() == step + 1
        assert after[row, col] == player.value
        changed = np.argwhere(before != after)
        assert changed.tolist() == [[row, col]]
        player = player.next()


@pytest.mark.parametrize("column", [-1, 5, 6, 100, 1.0, "0", None, True])
def test_drop_rejects_columns_outside_board(column):
    """Out-of-range columns raise NoSuchColumn and leave the grid alone."""
    board = Board()
    board.drop(0, Player.ONE)
    before = board.get_state()

    with pytest.raises(NoSuchColumn):
        board.drop(column, Player.TWO)

    assert np.array_equal(board.get_state(), before)


def test_drop_accepts_numpy_integers():
    """Column indices from numpy arrays work like plain ints."""
    board = Board()
    assert board.drop(np.int64(3), Player.TWO) == 0
    assert board.cell(0, 3) == Player.TWO


def test_drop_rejects_full_column():
    """A full column raises ColumnIsFull and leaves the grid alone."""
    board = Board()
    for _ in range(board.height):
        board.drop(1, Player.ONE)
    assert board.is_column_full(1)
    assert 1 not in board.valid_columns()
    before = board.get_state()

    with pytest.raises(ColumnIsFull) as excinfo:
        board.drop(1, Player.TWO)

    assert excinfo.value.column == 1
    assert isinstance(excinfo.value, GameError)
    assert np.array_equal(board.get_state(), before)


def test_cell_out_of_range():
    """Reading outside the board is an IndexError."""
    board = Board()
    with pytest.raises(IndexError):
        board.cell(5, 0)
    with pytest.raises(IndexError):
        board.cell(0, -1)


def test_grid_is_read_only():
    """The grid property cannot be used to change the board."""
    board = Board()
    with pytest.raises(ValueError):
        board.grid[0, 0] = 1
    state = board.get_state()
    state[0, 0] = 1
    assert board.cell(0, 0) is None


def test_render(small_config):
    """The board renders top row first with column numbers underneath."""
    board = Board(small_config)
    board.drop(0, Player.ONE)
    board.drop(0, Player.TWO)
    board.drop(3, Player.ONE)

    assert str(board) == "\n".join([
        "|-------|",
        "|       |",
        "|O      |",
        "|X     X|",
        "|-------|",
        "|0 1 2 3|",
    ])
