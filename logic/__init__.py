"""
Logic module for TicTacToe.
Handles the board, the automated players, seats and match flow.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import (
    TicTacToeError,
    IllegalMoveError,
    NoLegalMoveError,
    MalformedMatchSetupError,
    MatchFinishedError,
)
from .board import Board
from .strategies import (
    Strategy,
    FirstOpenStrategy,
    UniformRandomStrategy,
    WeightedPriorityStrategy,
    STRATEGIES,
    make_strategy,
)
from .seat import Seat, InputSource
from .match import Match, MatchStatus, MatchOutcome, TurnRecord, Display
