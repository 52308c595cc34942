from typing import TYPE_CHECKING

import numpy as np

from ..constants import BLACK, EMPTY, WHITE
from .base import TerminationRule

if TYPE_CHECKING:
    from ..state import GameState


class StandardTermination(TerminationRule):
    """Game ends when either color is wiped out or the board is full."""

    @staticmethod
    def is_game_over(state: "GameState") -> bool:
        board = state.board
        return not np.any(board == WHITE) or not np.any(board == BLACK) or not np.any(board == EMPTY)


def is_game_over(state: "GameState") -> bool:
    """Check termination using the state's own termination rule."""
    return state.termination_rule.is_game_over(state)
