"""Entry points used by the input and rendering layers.

Each input event runs a fixed chain of rules against a single
:class:`~othello.state.GameState`:

* click: move -> turn advance (only if the move happened) -> scoring -> termination
* reset: initialization -> scoring
* pass: manual turn toggle
"""

import logging

from .cells import CellState, Player
from .constants import move2tuple
from .rules import initialization, move, scoring, termination, turn
from .rules.move import is_in_board
from .state import GameState

logger = logging.getLogger(__name__)


def initialize() -> GameState:
    """Create the game at process start."""
    state = GameState()
    scoring.recompute(state)
    return state


def handle_cell_click(state: GameState, row: int, col: int) -> bool:
    """Play the active player at (row, col).

    Illegal or out-of-range clicks are silently rejected. Returns whether a
    move was made. Clicks are still accepted once the game is over.
    """
    if not is_in_board(row, col):
        logger.debug("Ignoring click outside the board at (%d, %d).", row, col)
        return False

    mover = state.active_player
    moved = move.attempt_move(state, row, col)
    if moved:
        turn.advance(state)
        logger.debug("%s played (%d, %d).", mover.name, row, col)
    else:
        logger.debug("Rejected illegal move for %s at (%d, %d).", mover.name, row, col)

    scoring.recompute(state)
    if termination.is_game_over(state):
        first, second = read_scores(state)
        logger.info("Game Over (white: %d, black: %d).", first, second)
    return moved


def handle_reset_signal(state: GameState) -> None:
    """Start a new game in place."""
    initialization.reset(state)
    scoring.recompute(state)
    logger.info("Board reset.")


def handle_pass_signal(state: GameState) -> None:
    """Skip the active player's turn."""
    turn.toggle_manual(state)
    logger.info("Turn passed to %s.", state.active_player.name)


def read_cell(state: GameState, row: int, col: int) -> CellState:
    """Contents of a single cell, for rendering."""
    if not is_in_board(row, col):
        raise IndexError(f"Cell ({row}, {col}) is outside the board.")
    return state.cell(row, col)


def read_scores(state: GameState) -> tuple[int, int]:
    """(FIRST, SECOND) piece counts, for the score labels."""
    return state.scores[Player.FIRST], state.scores[Player.SECOND]


def parse_square(text: str) -> tuple[int, int]:
    """Resolve ``"d3"`` or ``"2 3"`` style input to (row, col)."""
    token = text.strip().lower()
    if token in move2tuple:
        return move2tuple[token]

    parts = token.replace(",", " ").split()
    if len(parts) == 2 and all(p.isdigit() for p in parts):
        row, col = int(parts[0]), int(parts[1])
        if is_in_board(row, col):
            return row, col

    msg = f"Cannot parse square {text!r}; expected e.g. 'd3' or '2 3'."
    raise ValueError(msg)
