"""Matplotlib rendering of a game, reading the board through :func:`othello.engine.read_cell`."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .cells import CellState
from .constants import BOARD_DIM
from .engine import read_cell, read_scores
from .rules.move import is_in_board
from .state import GameState

logger = logging.getLogger(__name__)

BOARD_COLOR = "green"
PIECE_COLORS: dict[CellState, str] = {
    CellState.WHITE: "white",
    CellState.BLACK: "black",
}


def plot_board(
    state: GameState,
    ax: Axes | None = None,
    move: tuple[int, int] | None = None,
    show_scores: bool = True,
) -> Axes:
    """Plot the board.

    Each cell is drawn as a green square, with a white or black disc for an
    occupied cell. ``move`` highlights a single (row, col) cell.
    """
    if ax is None:
        _fig, ax = plt.subplots()

    ax.set_aspect("equal")
    ax.set_xlim(0, BOARD_DIM)
    ax.set_ylim(0, BOARD_DIM)

    for x, y in np.ndindex(BOARD_DIM, BOARD_DIM):
        cell_rect = plt.Rectangle((y, x), 1, 1, fill=True, color=BOARD_COLOR)
        ax.add_artist(cell_rect)

    if move is not None:
        if not is_in_board(*move):
            raise ValueError(f"Highlighted move {move} is outside the board")
        move_rect = plt.Rectangle(
            (move[1], move[0]), 1, 1, fill=True, color="cornflowerblue", alpha=0.7
        )
        ax.add_artist(move_rect)

    for x, y in np.ndindex(BOARD_DIM, BOARD_DIM):
        cell = read_cell(state, x, y)
        if cell in PIECE_COLORS:
            circle = plt.Circle((y + 0.5, x + 0.5), 0.42, color=PIECE_COLORS[cell], ec="black", lw=1)
            ax.add_artist(circle)

    ax.invert_yaxis()
    ax.axis("off")
    outline = plt.Rectangle((0, 0), BOARD_DIM, BOARD_DIM, edgecolor="black", facecolor="none")
    ax.add_artist(outline)

    for i in range(1, BOARD_DIM):
        ax.axhline(i, color="black", lw=0.5)
        ax.axvline(i, color="black", lw=0.5)

    for i in range(BOARD_DIM):
        ax.text(i + 0.5, -0.3, chr(ord("A") + i), ha="center", va="center", fontsize=12)
        ax.text(-0.3, i + 0.5, str(i + 1), ha="center", va="center", fontsize=12)

    if show_scores:
        white, black = read_scores(state)
        ax.set_title(f"white: {white}    black: {black}")

    return ax


def save_board(state: GameState, path: Path, **kwargs) -> None:
    """Render the board to an image file."""
    fig, ax = plt.subplots()
    plot_board(state, ax=ax, **kwargs)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    logger.info("Saved board: %s", path)
    plt.close(fig)
