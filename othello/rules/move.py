from typing import TYPE_CHECKING

from ..cells import cell_state_of
from ..constants import BOARD_DIM, DIRECTIONS, EMPTY
from .base import MoveRule

if TYPE_CHECKING:
    from ..state import GameState


def is_in_board(x: int, y: int) -> bool:
    """Check if coordinates are within the board boundaries."""
    return 0 <= x < BOARD_DIM and 0 <= y < BOARD_DIM


class FlankingMoveRule(MoveRule):
    """Standard Othello move: place a piece and flip every flanked opponent run."""

    @staticmethod
    def flips(state: "GameState", row: int, col: int) -> list[tuple[int, int]]:
        """Opponent cells that a move at (row, col) would flip, without playing it.

        A direction contributes only if its first neighbour is an opponent
        piece and the run of opponent pieces ends in one of the mover's own
        pieces. Runs broken by an empty cell or the board edge contribute
        nothing.
        """
        curr_color = state.current_cell
        target_color = cell_state_of(state.active_player.opponent)
        flipped: list[tuple[int, int]] = []

        for dx, dy in DIRECTIONS:
            nx, ny = row + dx, col + dy
            if not is_in_board(nx, ny) or state.board[nx, ny] != target_color:
                continue

            run = [(nx, ny)]
            while True:
                nx, ny = nx + dx, ny + dy
                if not is_in_board(nx, ny) or state.board[nx, ny] == EMPTY:
                    break
                if state.board[nx, ny] == curr_color:
                    flipped.extend(run)
                    break
                run.append((nx, ny))

        return flipped

    @staticmethod
    def attempt_move(state: "GameState", row: int, col: int) -> bool:
        """Place the active player's piece at (row, col) and flip flanked runs.

        Returns False and leaves the board untouched if the cell is off the
        board, occupied, or flanks nothing. Does not change the side to move.
        """
        if not is_in_board(row, col) or state.board[row, col] != EMPTY:
            return False

        flipped = FlankingMoveRule.flips(state, row, col)
        if not flipped:
            return False

        curr_color = state.current_cell
        for fx, fy in flipped:
            state.board[fx, fy] = curr_color
        state.board[row, col] = curr_color
        return True


def attempt_move(state: "GameState", row: int, col: int) -> bool:
    """Attempt a move using the state's own move rule."""
    return state.move_rule.attempt_move(state, row, col)
