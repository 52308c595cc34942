import numpy as np

from .cells import CellState, Player, cell_state_of
from .constants import BOARD_DIM, INITIAL_SCORE
from .rules.base import InitializeBoard, MoveRule, TerminationRule
from .rules.initialization import ClassicInitialization
from .rules.move import FlankingMoveRule
from .rules.termination import StandardTermination


class GameState:
    """Board, side to move and scores for a single game of Othello.

    The scores are derived from the board and can be recomputed at any time
    with :func:`othello.rules.scoring.recompute`.
    """

    def __init__(
        self,
        initialization_rule: type[InitializeBoard] = ClassicInitialization,
        move_rule: type[MoveRule] = FlankingMoveRule,
        termination_rule: type[TerminationRule] = StandardTermination,
    ) -> None:
        """Create a game and place the starting pieces."""
        self.board = np.zeros((BOARD_DIM, BOARD_DIM), dtype=np.int8)
        self.active_player = Player.FIRST
        self.scores: dict[Player, int] = {Player.FIRST: INITIAL_SCORE, Player.SECOND: INITIAL_SCORE}

        # rules
        self.initialization_rule = initialization_rule
        self.move_rule = move_rule
        self.termination_rule = termination_rule

        self._initialize_board()

    def _initialize_board(self) -> None:
        self.initialization_rule.init_board(self)

    @property
    def current_cell(self) -> CellState:
        """Cell state of the side to move."""
        return cell_state_of(self.active_player)

    def cell(self, row: int, col: int) -> CellState:
        return CellState(int(self.board[row, col]))

    def format_board(self) -> str:
        """Text rendering of the board, one row per line."""
        lines = ["  " + " ".join([chr(ord("A") + i) for i in range(BOARD_DIM)])]
        for i in range(BOARD_DIM):
            lines.append(str(i + 1) + " " + " ".join([self.cell(i, j).symbol for j in range(BOARD_DIM)]))
        lines.append(f"{self.current_cell.symbol} to move.")
        return "\n".join(lines)

    def print_board(self) -> None:
        """Prints the board state."""
        print(self.format_board())
