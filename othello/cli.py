"""Play Othello in the terminal.

Commands, one per line:

* ``d3`` or ``2 3`` -- click the cell at that square
* ``reset`` / ``space`` -- start a new game
* ``pass`` / ``s`` -- skip the current player's turn
* ``quit`` / ``q`` -- exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from .engine import (
    handle_cell_click,
    handle_pass_signal,
    handle_reset_signal,
    initialize,
    parse_square,
    read_scores,
)
from .rules.scoring import winner
from .rules.termination import is_game_over
from .state import GameState

logger = logging.getLogger(__name__)

RESET_COMMANDS = {"reset", "space"}
PASS_COMMANDS = {"pass", "s"}
QUIT_COMMANDS = {"quit", "q", "exit"}


def _report(state: GameState, out: TextIO, quiet: bool) -> None:
    if not quiet:
        print(state.format_board(), file=out)
    white, black = read_scores(state)
    print(f"white: {white}  black: {black}", file=out)
    if is_game_over(state):
        best = winner(state)
        print(f"Game Over: {best.name.lower() + ' wins' if best is not None else 'draw'}.", file=out)


def run(state: GameState, lines: TextIO, out: TextIO, quiet: bool = False) -> None:
    """Dispatch commands read from ``lines`` until exhausted or told to quit."""
    _report(state, out, quiet)
    for raw in lines:
        command = raw.strip().lower()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command in RESET_COMMANDS:
            handle_reset_signal(state)
        elif command in PASS_COMMANDS:
            handle_pass_signal(state)
        else:
            try:
                row, col = parse_square(command)
            except ValueError as e:
                logger.warning("%s", e)
                continue
            if not handle_cell_click(state, row, col):
                logger.info("Illegal move: %s", command)
                continue
        _report(state, out, quiet)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Othello in the terminal.")
    parser.add_argument(
        "--script",
        type=Path,
        default=None,
        help="Read commands from this file instead of standard input.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Save an image of the final board to this path.",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print scores after each command.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    state = initialize()
    if args.script is not None:
        with args.script.open() as f:
            run(state, f, sys.stdout, quiet=args.quiet)
    else:
        run(state, sys.stdin, sys.stdout, quiet=args.quiet)

    if args.plot is not None:
        from .plotting import save_board

        save_board(state, args.plot)


if __name__ == "__main__":
    main()
