from typing import TYPE_CHECKING

from ..cells import CellState, Player
from ..constants import EMPTY, INITIAL_SCORE
from .base import InitializeBoard

if TYPE_CHECKING:
    from ..state import GameState


class ClassicInitialization(InitializeBoard):
    """Classic Othello initialization with 4 pieces in the center.

    Starting position: FIRST on the main diagonal of the center block at
    (3,3) and (4,4), SECOND on the anti-diagonal at (3,4) and (4,3).
    """

    @staticmethod
    def init_board(state: "GameState") -> None:
        """Overwrite the board with the classic starting position."""
        state.board[:, :] = EMPTY
        state.scores = {Player.FIRST: INITIAL_SCORE, Player.SECOND: INITIAL_SCORE}
        state.active_player = Player.FIRST
        state.board[3, 3] = CellState.WHITE
        state.board[4, 4] = CellState.WHITE
        state.board[3, 4] = CellState.BLACK
        state.board[4, 3] = CellState.BLACK


def reset(state: "GameState") -> None:
    """Reset the game using the state's own initialization rule."""
    state.initialization_rule.init_board(state)
