"""
Tests for match flow: turn order, win/draw detection and error handling.
"""

import logging

import numpy as np
import pytest

from logic.board import Board
from logic.errors import IllegalMoveError, MalformedMatchSetupError, MatchFinishedError
from logic.match import Match, MatchOutcome, MatchStatus, TurnRecord
from logic.seat import Seat
from logic.strategies import (
    FirstOpenStrategy,
    UniformRandomStrategy,
    WeightedPriorityStrategy,
)


class ScriptedStrategy:
    """Plays a fixed list of cells, legal or not."""

    name = "scripted"

    def __init__(self, moves):
        self.moves = list(moves)

    def choose_move(self, board):
        return self.moves.pop(0)


class RecordingDisplay:
    def __init__(self):
        self.boards = []
        self.outcomes = []

    def show_board(self, cells):
        self.boards.append(cells)

    def show_outcome(self, outcome):
        self.outcomes.append(outcome)


def scripted_match(x_moves, o_moves) -> Match:
    return Match([
        Seat.automated("X", ScriptedStrategy(x_moves)),
        Seat.automated("O", ScriptedStrategy(o_moves)),
    ])


# ==================== SETUP ====================

def test_new_match_state():
    match = scripted_match([], [])
    assert match.status is MatchStatus.ONGOING
    assert match.winner is None
    assert match.turn == 0
    assert match.current_seat.mark == "X"
    assert match.board.is_empty()
    assert match.history == []
    assert not match.is_over


def test_seats_must_have_different_marks():
    with pytest.raises(MalformedMatchSetupError):
        Match([
            Seat.automated("X", FirstOpenStrategy()),
            Seat.automated("X", FirstOpenStrategy()),
        ])


@pytest.mark.parametrize("count", [0, 1, 3])
def test_match_needs_two_seats(count):
    seats = [Seat.automated(mark, FirstOpenStrategy()) for mark in "XOZ"[:count]]
    with pytest.raises(MalformedMatchSetupError):
        Match(seats)


def test_match_needs_empty_board():
    board = Board()
    board.apply(0, "X")
    with pytest.raises(MalformedMatchSetupError):
        Match([Seat.automated("X", FirstOpenStrategy()), Seat.automated("O", FirstOpenStrategy())], board)


def test_match_keeps_its_own_board():
    board = Board()
    match = Match([Seat.automated("X", FirstOpenStrategy()), Seat.automated("O", FirstOpenStrategy())], board)

    # Changes to the caller's board do not reach the match
    board.apply(0, "O")
    record = match.step()

    assert record.cell == 0
    assert match.snapshot()[0] == "X"
    assert board[0] == "O"


class TamperingStrategy:
    """Tries to write on the board it is shown, then plays the first open cell."""

    name = "tampering"

    def choose_move(self, board):
        board.apply(8, "Z")
        return board.legal_moves()[0]


def test_seats_only_see_a_copy_of_the_board():
    match = Match([Seat.automated("X", TamperingStrategy()), Seat.automated("O", FirstOpenStrategy())])
    match.step()
    assert match.snapshot() == ("X",) + (" ",) * 8


class NumpyStrategy:
    """Returns numpy integers, as a strategy built on a Generator might."""

    name = "numpy"

    def choose_move(self, board):
        return np.int64(board.legal_moves()[0])


def test_numpy_integer_moves_are_played():
    match = Match([Seat.automated("X", NumpyStrategy()), Seat.automated("O", NumpyStrategy())])

    record = match.step()

    assert record.cell == 0
    assert type(record.cell) is int
    assert match.play().winner == "X"


# ==================== TURNS ====================

def test_first_open_opens_at_zero_and_turn_passes():
    match = Match([Seat.automated("X", FirstOpenStrategy()), Seat.automated("O", FirstOpenStrategy())])

    record = match.step()

    assert record == TurnRecord(seat_index=0, mark="X", cell=0)
    assert match.snapshot()[0] == "X"
    assert match.turn == 1
    assert match.status is MatchStatus.ONGOING


def test_first_open_mirror_match_is_won_by_x():
    # X: 0, 2, 4, 6 -> diagonal 2-4-6 on move 7
    match = Match([Seat.automated("X", FirstOpenStrategy()), Seat.automated("O", FirstOpenStrategy())])

    outcome = match.play()

    assert outcome.status is MatchStatus.WON
    assert outcome.winner == "X"
    assert outcome.winning_line == (2, 4, 6)
    assert [m.cell for m in outcome.moves] == [0, 1, 2, 3, 4, 5, 6]
    assert match.turn == 0  # winner stays the current seat


def test_draw():
    #  X | O | X
    #  X | O | O
    #  O | X | X
    match = scripted_match([0, 2, 7, 3, 8], [4, 1, 5, 6])

    outcome = match.play()

    assert outcome.status is MatchStatus.DRAWN
    assert outcome.is_draw
    assert outcome.winner is None
    assert outcome.winning_line is None
    assert len(outcome.moves) == 9
    assert "".join(match.snapshot()) == "XOXXOOOXX"


def test_o_can_win():
    match = scripted_match([0, 1, 8], [3, 4, 5])
    outcome = match.play()
    assert outcome.winner == "O"
    assert outcome.winning_line == (3, 4, 5)
    assert len(outcome.moves) == 6


def test_illegal_move_aborts_turn():
    match = scripted_match([0], [0])
    match.step()
    before = match.snapshot()

    with pytest.raises(IllegalMoveError) as excinfo:
        match.step()

    assert excinfo.value.mark == "O"
    assert match.snapshot() == before
    assert match.turn == 1
    assert len(match.history) == 1
    assert match.status is MatchStatus.ONGOING


def test_illegal_move_is_logged(caplog):
    match = scripted_match([0], [0])
    match.step()

    with caplog.at_level(logging.ERROR, logger="logic.match"):
        with pytest.raises(IllegalMoveError):
            match.step()

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "O (scripted)" in errors[0].getMessage()
    assert "illegal move 0" in errors[0].getMessage()


@pytest.mark.parametrize("bad_move", [-1, 9, None])
def test_out_of_range_move_is_illegal(bad_move):
    match = scripted_match([bad_move], [])
    with pytest.raises(IllegalMoveError):
        match.step()
    assert match.board.is_empty()


def test_step_after_game_over_raises():
    match = Match([Seat.automated("X", FirstOpenStrategy()), Seat.automated("O", FirstOpenStrategy())])
    match.play()
    with pytest.raises(MatchFinishedError):
        match.step()


def test_board_property_is_a_copy():
    match = scripted_match([0], [])
    board = match.board
    board.apply(4, "Z")
    assert match.snapshot()[4] == " "


# ==================== HUMANS ====================

class FakeInput:
    def __init__(self, moves):
        self.moves = list(moves)

    def request_move(self, board, mark):
        return self.moves.pop(0)


def test_human_against_first_open():
    # Human takes the center column, first-open fills the top row then 2
    match = Match([
        Seat.human("X", FakeInput([4, 1, 7])),
        Seat.automated("O", FirstOpenStrategy()),
    ])
    outcome = match.play()
    assert outcome.winner == "X"
    assert outcome.winning_line == (1, 4, 7)
    assert [m.cell for m in outcome.moves] == [4, 0, 1, 2, 7]


# ==================== DISPLAY ====================

def test_display_sees_every_turn_and_the_outcome():
    display = RecordingDisplay()
    match = scripted_match([0, 2, 7, 3, 8], [4, 1, 5, 6])

    outcome = match.play(display)

    assert len(display.boards) == 9
    assert display.boards[0] == ("X",) + (" ",) * 8
    assert display.boards[-1] == tuple("XOXXOOOXX")
    assert display.outcomes == [outcome]
    assert isinstance(outcome, MatchOutcome)


# ==================== AUTOMATED PLAY ====================

@pytest.mark.parametrize("seed", range(25))
def test_automated_matches_always_finish(seed):
    rng = np.random.default_rng(seed)
    match = Match([
        Seat.automated("X", UniformRandomStrategy(rng)),
        Seat.automated("O", WeightedPriorityStrategy(rng)),
    ])

    outcome = match.play()

    assert outcome.status in (MatchStatus.WON, MatchStatus.DRAWN)
    assert 5 <= len(outcome.moves) <= 9
    cells = [m.cell for m in outcome.moves]
    assert len(set(cells)) == len(cells)
    marks = [m.mark for m in outcome.moves]
    assert marks == (["X", "O"] * 5)[:len(marks)]
    if outcome.status is MatchStatus.WON:
        assert outcome.winner == outcome.moves[-1].mark
    else:
        assert len(outcome.moves) == 9


def test_weighted_against_weighted():
    match = Match([
        Seat.automated("X", WeightedPriorityStrategy(rng=1)),
        Seat.automated("O", WeightedPriorityStrategy(rng=2)),
    ])
    outcome = match.play()
    # X always opens in the center
    assert outcome.moves[0].cell == 4
    assert outcome.status is not MatchStatus.ONGOING
