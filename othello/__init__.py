"""Othello/Reversi rules engine."""

from .cells import CellState, Player, cell_state_of
from .engine import (
    handle_cell_click,
    handle_pass_signal,
    handle_reset_signal,
    initialize,
    read_cell,
    read_scores,
)
from .state import GameState

__all__ = [
    "CellState",
    "GameState",
    "Player",
    "cell_state_of",
    "handle_cell_click",
    "handle_pass_signal",
    "handle_reset_signal",
    "initialize",
    "read_cell",
    "read_scores",
]
