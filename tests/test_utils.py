"""
Tests for configuration, enumerations and rendering helpers.
"""
import numpy as np
import pytest

from tokendrop.utils import (BoardConfig, DEFAULT_CONFIG, WIDTH, HEIGHT, X_ROW,
                             Player, GameState, cell_to_player, render_board_ascii,
                             NoSuchColumn, ColumnIsFull, AlreadyEnded, GameError)


def test_default_config():
    """Production defaults are a 5x5 board with four to win."""
    assert (WIDTH, HEIGHT, X_ROW) == (5, 5, 4)
    assert DEFAULT_CONFIG == BoardConfig(5, 5, 4)
    assert DEFAULT_CONFIG.cell_count == 25


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -1},
    {"x_row": 0},
    {"width": 2.5},
    {"height": True},
    {"x_row": "4"},
])
def test_config_rejects_bad_dimensions(kwargs):
    """Dimensions must be positive integers."""
    with pytest.raises(ValueError):
        BoardConfig(**kwargs)


def test_config_is_frozen():
    """Configs cannot change after construction."""
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.width = 7


def test_player_next():
    """next() swaps the two players."""
    assert Player.ONE.next() == Player.TWO
    assert Player.TWO.next() == Player.ONE
    assert Player.ONE.next().next() == Player.ONE


def test_cell_to_player():
    """Grid codes map to players, zero and None to empty."""
    assert cell_to_player(0) is None
    assert cell_to_player(None) is None
    assert cell_to_player(1) == Player.ONE
    assert cell_to_player(np.int8(2)) == Player.TWO
    assert cell_to_player(Player.TWO) == Player.TWO
    with pytest.raises(ValueError):
        cell_to_player(3)


def test_game_state():
    assert GameState.FINISHED.is_game_over()
    assert not GameState.IN_PROGRESS.is_game_over()


def test_errors_share_a_base_class():
    """All rejected moves can be caught as GameError."""
    for error in (NoSuchColumn(9, 5), ColumnIsFull(2), AlreadyEnded(Player.ONE)):
        assert isinstance(error, GameError)
    assert "0..4" in str(NoSuchColumn(9, 5))
    assert "Column 2 is full" == str(ColumnIsFull(2))
    assert "ONE" in str(AlreadyEnded(Player.ONE))


def test_render_board_ascii():
    """Row 0 is drawn at the bottom."""
    grid = np.zeros((2, 2), dtype=np.int8)
    grid[0, 0] = 1
    grid[1, 1] = 2
    assert render_board_ascii(grid) == "\n".join([
        "|---|",
        "|  O|",
        "|X  |",
        "|---|",
        "|0 1|",
    ])
