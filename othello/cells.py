"""Cell occupancy and player types.

``Player`` never represents an empty square; ``CellState`` does. The two are
kept as separate types and related through :func:`cell_state_of`.
"""

from enum import IntEnum

from .constants import BLACK, EMPTY, WHITE


class CellState(IntEnum):
    """Contents of a single board cell."""

    EMPTY = EMPTY
    WHITE = WHITE
    BLACK = BLACK

    @property
    def symbol(self) -> str:
        """Single character used by the text renderer."""
        return {CellState.EMPTY: ".", CellState.WHITE: "W", CellState.BLACK: "B"}[self]


class Player(IntEnum):
    """The side to move. ``FIRST`` moves first after every reset."""

    WHITE = WHITE
    BLACK = BLACK
    FIRST = WHITE
    SECOND = BLACK

    @property
    def opponent(self) -> "Player":
        return Player(-self.value)


def cell_state_of(player: Player) -> CellState:
    """Map a player to the cell state its pieces occupy."""
    return CellState(player.value)
