from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..state import GameState


def advance(state: "GameState") -> None:
    """Hand the move to the other player after a successful move."""
    state.active_player = state.active_player.opponent


def toggle_manual(state: "GameState") -> None:
    """Skip the current player's turn."""
    state.active_player = state.active_player.opponent
