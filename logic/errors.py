"""
Errors raised by the TicTacToe game logic.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for all game logic errors."""


class IllegalMoveError(TicTacToeError):
    """A move was submitted for a cell that is out of range or already taken."""

    def __init__(self, index, mark: Optional[str] = None, reason: str = ""):
        self.index = index
        self.mark = mark
        self.reason = reason
        message = f"Illegal move {index!r}"
        if mark is not None:
            message += f" for {mark}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NoLegalMoveError(TicTacToeError):
    """A player was asked to move on a board with no empty cells."""


class MalformedMatchSetupError(TicTacToeError):
    """A match was set up with bad seats or a board that is not empty."""


class MatchFinishedError(TicTacToeError):
    """A turn was requested after the match already ended."""
