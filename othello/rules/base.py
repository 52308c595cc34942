"""Abstract base classes for Othello game rules."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..state import GameState


class InitializeBoard(ABC):
    """Abstract base class for board initialization rules."""

    @staticmethod
    @abstractmethod
    def init_board(state: "GameState") -> None:
        """Reset the board, scores and side to move to the starting position."""
        pass


class MoveRule(ABC):
    """Abstract base class for move rules."""

    @staticmethod
    @abstractmethod
    def attempt_move(state: "GameState", row: int, col: int) -> bool:
        """Play the active player at (row, col) if legal; return whether a move occurred."""
        pass


class TerminationRule(ABC):
    """Abstract base class for end-of-game rules."""

    @staticmethod
    @abstractmethod
    def is_game_over(state: "GameState") -> bool:
        """Check if the game has ended."""
        pass
