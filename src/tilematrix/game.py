"""
Sliding tile game shell.

The game owns a board matrix and a turn counter. A turn slides the board in
one direction: a fresh destination board of the same shape is allocated and
a ``SlideRule`` fills it from the current board. The package ships no rule;
compaction and merging of tiles is supplied by the caller, built from the
matrix primitives (``get``, ``set``, ``row``, ``col``).

Example:
    >>> def keep(source, dest, direction):
    ...     for i in range(source.rows):
    ...         for j in range(source.cols):
    ...             dest.set(i, j, source.get(i, j))
    >>> game = SlideGame(keep)
    >>> game.slide(Direction.LEFT).turns
    1
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from ._matrix import Matrix
from .config import get_board_size

__all__ = ['Direction', 'SlideRule', 'SlideGame']

logger = logging.getLogger("tilematrix.game")


class Direction(Enum):
    """Slide direction."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# (source, dest, direction) -> None; writes the slid board into dest
SlideRule = Callable[[Matrix, Matrix, Direction], None]


class SlideGame:
    """
    Board state of a sliding tile game.

    Attributes:
        board (Matrix): Current board (integer tiles, 0 is empty)
        turns (int): Number of slides played
    """

    def __init__(
        self,
        rule: SlideRule,
        board: Optional[Matrix] = None,
        turns: int = 0,
    ):
        """
        Args:
            rule: Fills a destination board from a source board
            board: Initial board (default: empty board of the configured size)
            turns: Turns already played
        """
        if board is None:
            rows, cols = get_board_size()
            board = Matrix.new(rows, cols, dtype="uint32")
        self._rule = rule
        self._board = board
        self._turns = turns

    @property
    def board(self) -> Matrix:
        return self._board

    @property
    def turns(self) -> int:
        return self._turns

    def score(self) -> int:
        """Sum of all tiles on the board."""
        return sum(self._board.iter())

    def slide(self, direction: Direction) -> "SlideGame":
        """
        Play one turn.

        Returns:
            New game holding the slid board and ``turns + 1``; this game is
            left unchanged
        """
        direction = Direction(direction)
        rows, cols = self._board.size
        dest = Matrix.new(rows, cols, dtype=self._board.element_type)
        self._rule(self._board, dest, direction)
        logger.debug("turn %d: slid %s", self._turns + 1, direction.value)
        return SlideGame(self._rule, board=dest, turns=self._turns + 1)

    def __repr__(self) -> str:
        rows, cols = self._board.size
        return f"<SlideGame {rows}x{cols} turns={self._turns} score={self.score()}>"
