"""
Automated players for TicTacToe.

Every strategy has a choose_move(board) method that returns a legal cell
index, or None when the board has no empty cell left. Strategies only read
the board; the match applies the move.

None of these play optimally:
- FirstOpenStrategy: the first empty cell, scanning 0 to 8
- UniformRandomStrategy: any empty cell, picked at random
- WeightedPriorityStrategy: center, then corners, then edges, with
  random order inside each tier and memory of what it already tried
"""

import logging
from collections import deque
from typing import Deque, Dict, Optional, Protocol, Tuple, runtime_checkable

import numpy as np

from .board import Board
from .config import GameConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Strategy(Protocol):
    """Anything that can pick a cell for an automated seat."""

    def choose_move(self, board: Board) -> Optional[int]:
        ...


def _make_rng(rng) -> np.random.Generator:
    # default_rng hands back a Generator unchanged and seeds from anything else
    return np.random.default_rng(GameConfig.RANDOM_SEED if rng is None else rng)


class FirstOpenStrategy:
    """Picks the lowest-numbered empty cell. Always the same answer for the same board."""

    name = "first-open"

    def __init__(self, rng=None):
        # Deterministic, the generator is not used
        self.rng = rng

    def choose_move(self, board: Board) -> Optional[int]:
        for index in range(GameConfig.CELL_COUNT):
            if board.is_legal(index):
                return index
        return None


class UniformRandomStrategy:
    """Picks any empty cell with equal probability."""

    name = "random"

    def __init__(self, rng=None):
        """
        Args:
            rng: numpy Generator or seed (default: GameConfig.RANDOM_SEED).
        """
        self.rng = _make_rng(rng)

    def choose_move(self, board: Board) -> Optional[int]:
        legal = board.legal_moves()
        if not legal:
            return None
        return int(self.rng.choice(legal))


class WeightedPriorityStrategy:
    """
    Plays cells in priority order: center -> corners -> edges.

    The order lives in a working queue. The center always comes first,
    then the four corners shuffled, then the four edges shuffled. Corners
    and edges are shuffled separately and never mixed.

    Each call pops cells off the front of the queue, throwing away any that
    are taken, until it finds an empty one. A cell that was handed out is
    gone from the queue for good. When the queue runs dry the strategy
    builds a fresh one (new shuffles) and keeps looking.
    """

    name = "weighted"

    def __init__(self, rng=None):
        """
        Args:
            rng: numpy Generator or seed (default: GameConfig.RANDOM_SEED).
        """
        self.rng = _make_rng(rng)
        self._queue: Deque[int] = deque()
        # How many times the queue ran dry and was rebuilt
        self.reseed_count = 0
        self._build_queue()

    @property
    def queue(self) -> Tuple[int, ...]:
        """Cells still waiting in the working queue, front first."""
        return tuple(self._queue)

    def _build_queue(self):
        corners = [int(i) for i in self.rng.permutation(GameConfig.CORNERS)]
        edges = [int(i) for i in self.rng.permutation(GameConfig.EDGES)]
        self._queue = deque([GameConfig.CENTER] + corners + edges)

    def reseed(self):
        """Throw away the current queue and build a new one."""
        self.reseed_count += 1
        self._build_queue()
        logger.debug("Weighted queue rebuilt (#%d): %s", self.reseed_count, list(self._queue))

    def choose_move(self, board: Board) -> Optional[int]:
        # A full queue covers all 9 cells, so the loop below always ends
        # as long as at least one cell is empty.
        if board.is_full():
            return None

        while True:
            while self._queue:
                index = self._queue.popleft()
                if board.is_legal(index):
                    logger.debug("Weighted pick %d, %d left in queue", index, len(self._queue))
                    return index
            self.reseed()


STRATEGIES: Dict[str, type] = {
    FirstOpenStrategy.name: FirstOpenStrategy,
    UniformRandomStrategy.name: UniformRandomStrategy,
    WeightedPriorityStrategy.name: WeightedPriorityStrategy,
}


def make_strategy(name: str, rng=None) -> Strategy:
    """
    Build a strategy by name.

    Args:
        name: One of STRATEGIES ("first-open", "random", "weighted").
        rng: numpy Generator or seed, used by the random strategies.

    Returns:
        A new strategy instance.
    """
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        valid = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown strategy {name!r}. Choose one of: {valid}") from None

    return strategy_cls(rng)
