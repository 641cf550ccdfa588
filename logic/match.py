"""
Match orchestration for TicTacToe.
Runs the turns, applies moves, and decides when the game is over.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple

from .board import Board
from .errors import IllegalMoveError, MalformedMatchSetupError, MatchFinishedError
from .seat import Seat

logger = logging.getLogger(__name__)


class MatchStatus(Enum):
    """Where the match stands."""
    ONGOING = "ongoing"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class TurnRecord:
    """
    One applied move.
    """
    seat_index: int     # Which seat moved (0 or 1)
    mark: str           # The mark that was placed
    cell: int           # Cell index (0-8)


@dataclass(frozen=True)
class MatchOutcome:
    """How a match ended (or stands, if still ongoing)."""
    status: MatchStatus
    winner: Optional[str] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    moves: Tuple[TurnRecord, ...] = ()

    @property
    def is_draw(self) -> bool:
        return self.status is MatchStatus.DRAWN


class Display(Protocol):
    """Receives what happens in a match so it can be shown to the players."""

    def show_board(self, cells: Tuple[str, ...]) -> None:
        ...

    def show_outcome(self, outcome: MatchOutcome) -> None:
        ...


class Match:
    """
    A single TicTacToe match between two seats.

    Game flow:
    1. The seat whose turn it is picks a cell
    2. The match checks the cell is legal and places the seat's mark
    3. A full line -> WON, a full board -> DRAWN
    4. Otherwise the other seat is up

    The match owns the board. Seats and strategies only read it.
    """

    def __init__(self, seats: Sequence[Seat], board: Optional[Board] = None):
        """
        Set up a match.

        Args:
            seats: Exactly two seats with different marks. The first one starts.
            board: A fresh, all-empty board (default: a new one).

        Raises:
            MalformedMatchSetupError: On bad seats or a board already in play.
        """
        seats = list(seats)
        if len(seats) != 2:
            raise MalformedMatchSetupError(f"A match needs exactly 2 seats, got {len(seats)}")
        if seats[0].mark == seats[1].mark:
            raise MalformedMatchSetupError(f"Both seats use the mark {seats[0].mark!r}")

        if board is None:
            board = Board()
        elif not board.is_empty():
            raise MalformedMatchSetupError(f"Match must start on an empty board, got {board!r}")

        self.seats: List[Seat] = seats
        # Private copy: nobody outside the match can change it
        self._board = board.copy()
        self.turn = 0
        self.status = MatchStatus.ONGOING
        self.winner: Optional[str] = None
        self.history: List[TurnRecord] = []

        logger.info("Match started: %s vs %s", seats[0].name, seats[1].name)

    @property
    def board(self) -> Board:
        """A copy of the board. Changing it does not affect the match."""
        return self._board.copy()

    @property
    def current_seat(self) -> Seat:
        return self.seats[self.turn]

    @property
    def is_over(self) -> bool:
        return self.status is not MatchStatus.ONGOING

    def snapshot(self) -> Tuple[str, ...]:
        return self._board.snapshot()

    def step(self) -> TurnRecord:
        """
        Play one turn.

        Returns:
            The move that was applied.

        Raises:
            MatchFinishedError: If the match is already over.
            IllegalMoveError: If the seat picked an illegal cell. The board
                and the turn are left as they were.
        """
        if self.is_over:
            raise MatchFinishedError("Match is already over!")

        seat = self.current_seat
        move = seat.take_turn(self._board.copy())

        if not self._board.is_legal(move):
            logger.error("%s tried illegal move %r on %r", seat.name, move, self._board)
            raise IllegalMoveError(move, seat.mark, "seat returned an illegal cell")

        move = int(move)
        self._board.apply(move, seat.mark)
        record = TurnRecord(seat_index=self.turn, mark=seat.mark, cell=move)
        self.history.append(record)
        logger.info("%s plays %d", seat.name, move)

        winner = self._board.winner()
        if winner is not None:
            self.status = MatchStatus.WON
            self.winner = winner
            logger.info("%s wins after %d moves", winner, len(self.history))
        elif self._board.is_full():
            self.status = MatchStatus.DRAWN
            logger.info("Draw after %d moves", len(self.history))
        else:
            self.turn = 1 - self.turn

        return record

    def play(self, display: Optional[Display] = None) -> MatchOutcome:
        """
        Play turns until someone wins or the board is full.

        Args:
            display: Gets the board after every turn and the outcome at the end.

        Returns:
            The final outcome.
        """
        while not self.is_over:
            self.step()
            if display is not None:
                display.show_board(self.snapshot())

        outcome = self.outcome()
        if display is not None:
            display.show_outcome(outcome)
        return outcome

    def outcome(self) -> MatchOutcome:
        return MatchOutcome(
            status=self.status,
            winner=self.winner,
            winning_line=self._board.winning_line(),
            moves=tuple(self.history),
        )
