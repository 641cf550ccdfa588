"""
TicTacToe console UI.
Text versions of the two things the game logic talks to:

- ConsoleInput: asks a human for a cell number until it gets a legal one
- ConsoleDisplay: prints the board after each turn and the result at the end
"""

from typing import Callable, Optional, Tuple

import numpy as np

from logic.board import Board
from logic.config import GameConfig
from logic.match import MatchOutcome, MatchStatus


class ConsoleInput:
    """
    Reads moves from the keyboard.

    Keeps asking until the player types a number for an empty cell, so the
    match only ever sees legal moves.
    """

    def __init__(
        self,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            read: Prompt function (default: input).
            write: Message function (default: print).
        """
        self.read = read or input
        self.write = write or print

    def request_move(self, board: Board, mark: str) -> int:
        last_cell = GameConfig.CELL_COUNT - 1
        while True:
            text = self.read(f"Enter your move ({mark}): ").strip()
            try:
                move = int(text)
            except ValueError:
                self.write(f"Please type a number 0..{last_cell}.")
                continue

            if not 0 <= move <= last_cell:
                self.write(f"Move must be between 0 and {last_cell}. Try again.")
            elif not board.is_legal(move):
                self.write("Invalid move. Try again.")
            else:
                return move


class ConsoleDisplay:
    """Prints the board and the result as plain text."""

    def __init__(self, write: Optional[Callable[[str], None]] = None):
        self.write = write or print

    @staticmethod
    def render(cells: Tuple[str, ...]) -> str:
        """
        Draw the board like:

             X | O |
            -----------
               | X |
            -----------
               |   | O
        """
        size = GameConfig.BOARD_SIZE
        grid = np.array(cells, dtype=object).reshape(size, size)
        rows = ["|".join(f" {cell} " for cell in row) for row in grid]
        return ("\n" + "-" * (4 * size - 1) + "\n").join(rows)

    def show_board(self, cells: Tuple[str, ...]) -> None:
        self.write(self.render(cells) + "\n")

    def show_outcome(self, outcome: MatchOutcome) -> None:
        if outcome.status is MatchStatus.WON:
            self.write(f"{outcome.winner} wins!")
        elif outcome.status is MatchStatus.DRAWN:
            self.write("It's a draw!")
        else:
            self.write("Game not finished.")
