"""Pytest configuration and fixtures for othello tests."""

import matplotlib
import numpy as np
import pytest

from othello.cells import CellState, Player
from othello.constants import BOARD_DIM
from othello.engine import initialize
from othello.state import GameState

matplotlib.use("Agg")


@pytest.fixture
def game() -> GameState:
    """Fresh game in the starting position."""
    return initialize()


@pytest.fixture
def empty_game() -> GameState:
    """Game with every cell emptied, FIRST to move."""
    state = initialize()
    state.board = np.zeros((BOARD_DIM, BOARD_DIM), dtype=np.int8)
    return state


@pytest.fixture
def game_after_opening() -> GameState:
    """Game after FIRST plays (2,4) from the starting position."""
    state = initialize()
    state.board[2, 4] = CellState.WHITE
    state.board[3, 4] = CellState.WHITE
    state.active_player = Player.SECOND
    state.scores = {Player.FIRST: 4, Player.SECOND: 1}
    return state
