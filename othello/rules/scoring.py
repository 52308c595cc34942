from typing import TYPE_CHECKING

import numpy as np

from ..cells import CellState, Player, cell_state_of

if TYPE_CHECKING:
    from ..state import GameState


def count_cells(board: np.ndarray) -> dict[CellState, int]:
    """Number of cells holding each state."""
    return {cell: int(np.sum(board == cell)) for cell in CellState}


def recompute(state: "GameState") -> None:
    """Overwrite both scores with the piece counts on the board."""
    counts = count_cells(state.board)
    state.scores = {player: counts[cell_state_of(player)] for player in (Player.FIRST, Player.SECOND)}


def winner(state: "GameState") -> Player | None:
    """Player with the higher score, or None on a tie."""
    first, second = state.scores[Player.FIRST], state.scores[Player.SECOND]
    if first == second:
        return None
    return Player.FIRST if first > second else Player.SECOND
