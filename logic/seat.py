"""
Seats for TicTacToe.
A seat is one side of the match: a mark plus whoever picks its moves.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from .board import Board
from .errors import MalformedMatchSetupError, NoLegalMoveError
from .strategies import Strategy

logger = logging.getLogger(__name__)


@runtime_checkable
class InputSource(Protocol):
    """
    Where a human seat gets its moves from.

    request_move() must only return legal cells. Asking again after bad
    input is the input source's job.
    """

    def request_move(self, board: Board, mark: str) -> int:
        ...


class Seat:
    """
    Binds a mark to a human input source or to a strategy.

    The seat never changes the board. take_turn() returns the cell the seat
    wants, and the match applies it.
    """

    def __init__(
        self,
        mark: str,
        strategy: Optional[Strategy] = None,
        input_source: Optional[InputSource] = None,
        name: Optional[str] = None,
    ):
        """
        Initialize a seat. Use Seat.human() or Seat.automated() instead.

        Args:
            mark: One-character symbol for this seat (e.g. "X").
            strategy: Picks moves for an automated seat.
            input_source: Picks moves for a human seat.
            name: Display name (default: describes who plays).
        """
        if not Board.is_valid_mark(mark):
            raise MalformedMatchSetupError(f"Invalid mark {mark!r} - must be one visible character")
        if (strategy is None) == (input_source is None):
            raise MalformedMatchSetupError("A seat needs exactly one of a strategy or an input source")

        self.mark = mark
        self.strategy = strategy
        self.input_source = input_source

        if name is None:
            if strategy is not None:
                name = f"{mark} ({getattr(strategy, 'name', type(strategy).__name__)})"
            else:
                name = f"{mark} (human)"
        self.name = name

    @classmethod
    def human(cls, mark: str, input_source: InputSource, name: Optional[str] = None) -> "Seat":
        return cls(mark, input_source=input_source, name=name)

    @classmethod
    def automated(cls, mark: str, strategy: Strategy, name: Optional[str] = None) -> "Seat":
        return cls(mark, strategy=strategy, name=name)

    @property
    def is_human(self) -> bool:
        return self.input_source is not None

    def take_turn(self, board: Board) -> int:
        """
        Pick this seat's move.

        Args:
            board: Current board (read only).

        Returns:
            The chosen cell index.

        Raises:
            NoLegalMoveError: If the strategy found no empty cell.
        """
        if self.input_source is not None:
            return self.input_source.request_move(board, self.mark)

        move = self.strategy.choose_move(board)
        if move is None:
            raise NoLegalMoveError(f"{self.name} has no legal move on {board!r}")
        logger.debug("%s chose %d", self.name, move)
        return move

    def __repr__(self) -> str:
        return f"Seat({self.name!r})"
