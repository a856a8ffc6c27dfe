"""
Shared fixtures for the tokendrop test suite.
"""
import numpy as np
import pytest

from tokendrop.debug import debug, DebugLevel
from tokendrop.utils import BoardConfig


@pytest.fixture(autouse=True)
def reset_debug():
    """Put the debug singleton back to its defaults after each test."""
    yield
    debug.configure(level=DebugLevel.INFO, enabled=True, log_file="", components=[])


@pytest.fixture
def small_config():
    """A 4 wide, 3 high board where two in a row wins."""
    return BoardConfig(width=4, height=3, x_row=2)


@pytest.fixture
def mixed_grid():
    """
    4x3 grid, row 0 at the bottom:

        row 2: . . . .
        row 1: . X O X
        row 0: X . O .
    """
    return np.array([
        [1, 0, 2, 0],
        [0, 1, 2, 1],
        [0, 0, 0, 0],
    ], dtype=np.int8)
