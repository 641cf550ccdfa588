"""
Main entry script for TicTacToe.

Sets up the two seats (human or one of the automated players), hooks the
match up to the console, and plays one game.

Run this script to play TicTacToe!
"""

import logging
import sys
from typing import List, Optional

import numpy as np

from logic.config import GameConfig
from logic.errors import TicTacToeError
from logic.match import Match
from logic.seat import Seat
from logic.strategies import STRATEGIES, make_strategy
from ui import ConsoleDisplay, ConsoleInput

logger = logging.getLogger(__name__)

HUMAN = "human"


def setup_logging(level: str = GameConfig.LOG_LEVEL) -> None:
    """Send log records to stderr using GameConfig.LOG_FORMAT."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(GameConfig.LOG_FORMAT))
    root.addHandler(handler)


def build_seat(mark: str, kind: str, rng: np.random.Generator, input_source=None) -> Seat:
    """
    Create a seat for the given player kind.

    Args:
        mark: The seat's mark.
        kind: "human" or a strategy name from STRATEGIES.
        rng: Shared generator for the random strategies.
        input_source: Used for human seats (default: ConsoleInput).

    Returns:
        The new Seat.
    """
    if kind == HUMAN:
        return Seat.human(mark, input_source or ConsoleInput())
    return Seat.automated(mark, make_strategy(kind, rng))


def parse_args(argv: Optional[List[str]] = None):
    import argparse

    choices = [HUMAN] + sorted(STRATEGIES)
    first, second = GameConfig.DEFAULT_MARKS

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--x",
        choices=choices,
        default=HUMAN,
        help=f"Who plays {first} (moves first)"
    )
    parser.add_argument(
        "--o",
        choices=choices,
        default="first-open",
        help=f"Who plays {second}"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the random players (repeatable games)"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    rng = np.random.default_rng(args.seed)
    first, second = GameConfig.DEFAULT_MARKS
    seats = [build_seat(first, args.x, rng), build_seat(second, args.o, rng)]

    display = ConsoleDisplay()
    if any(seat.is_human for seat in seats):
        print("Cells are numbered:")
        display.show_board(tuple(str(i) for i in range(GameConfig.CELL_COUNT)))

    try:
        match = Match(seats)
        display.show_board(match.snapshot())
        match.play(display)
    except TicTacToeError as e:
        logger.error("Match aborted: %s", e)
        print(f"ERROR: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        return 130
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
