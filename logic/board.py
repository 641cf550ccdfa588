"""
Board for TicTacToe.
Holds the 9 cells and answers legality and win/draw questions.
"""

import logging
from numbers import Integral
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import GameConfig
from .errors import IllegalMoveError

logger = logging.getLogger(__name__)


class Board:
    """
    The 3x3 TicTacToe board, stored as a flat list of 9 cells.

    Cell indices:

         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8

    A cell holds GameConfig.EMPTY until a mark is applied to it.
    Only apply() changes the board, and only on a legal cell.
    """

    WINNING_LINES = GameConfig.WINNING_LINES

    def __init__(self):
        self._cells: List[str] = [GameConfig.EMPTY] * GameConfig.CELL_COUNT

    @classmethod
    def from_cells(cls, cells: Iterable[str]) -> "Board":
        """
        Build a board from an existing position.

        Args:
            cells: 9 one-character cells, GameConfig.EMPTY for unplayed ones.

        Returns:
            A new Board holding those cells.
        """
        cells = list(cells)
        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board needs {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )
        for cell in cells:
            if not isinstance(cell, str) or len(cell) != 1:
                raise ValueError(f"Cells must be one-character strings, got {cell!r}")

        board = cls()
        board._cells = cells
        return board

    @staticmethod
    def is_valid_mark(mark) -> bool:
        """True for a single visible character (no space, tab, newline...)."""
        return isinstance(mark, str) and len(mark) == 1 and not mark.isspace()

    # ==================== QUERIES ====================

    def is_legal(self, index) -> bool:
        """
        Check if a mark may be placed at index.

        Args:
            index: Cell index (0-8).

        Returns:
            True if index is in range and the cell is empty.
        """
        # bool is an int subclass, but True/False are not cells
        if not isinstance(index, Integral) or isinstance(index, bool):
            return False
        if not 0 <= index < GameConfig.CELL_COUNT:
            return False
        return self._cells[index] == GameConfig.EMPTY

    def legal_moves(self) -> List[int]:
        """Get all empty cell indices, in ascending order."""
        return [i for i, cell in enumerate(self._cells) if cell == GameConfig.EMPTY]

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return GameConfig.EMPTY not in self._cells

    def is_empty(self) -> bool:
        """True if no mark has been placed yet."""
        return all(cell == GameConfig.EMPTY for cell in self._cells)

    def marks_placed(self) -> int:
        return sum(1 for cell in self._cells if cell != GameConfig.EMPTY)

    def winner(self) -> Optional[str]:
        """
        Check if there's a winner.

        Returns:
            The mark that fills a whole line, or None if no line is complete.
        """
        line = self.winning_line()
        if line is None:
            return None
        return self._cells[line[0]]

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a cell index triple, or None.
        """
        for a, b, c in self.WINNING_LINES:
            first = self._cells[a]
            if first != GameConfig.EMPTY and first == self._cells[b] == self._cells[c]:
                return (a, b, c)
        return None

    # ==================== CHANGES ====================

    def apply(self, index: int, mark: str):
        """
        Place a mark on the board.

        Args:
            index: Cell index (0-8). Must be legal.
            mark: The mark to place.

        Raises:
            IllegalMoveError: If the cell is out of range or already taken.
            ValueError: If mark is not a one-character, non-blank string.
        """
        if not self.is_valid_mark(mark):
            raise ValueError(f"Invalid mark {mark!r}")

        if not self.is_legal(index):
            if isinstance(index, Integral) and 0 <= index < GameConfig.CELL_COUNT:
                reason = f"cell is already occupied by {self._cells[index]}"
            else:
                reason = f"must be a cell index 0-{GameConfig.CELL_COUNT - 1}"
            raise IllegalMoveError(index, mark, reason)

        self._cells[int(index)] = mark
        logger.debug("Placed %s at %d", mark, index)

    # ==================== COPIES ====================

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board.from_cells(self._cells)

    def snapshot(self) -> Tuple[str, ...]:
        """Read-only view of the cells, for displays."""
        return tuple(self._cells)

    def __getitem__(self, index: int) -> str:
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"Board({''.join(self._cells)!r})"
