"""Exception hierarchy for the puzzle solver.

An unsolvable board is a normal outcome and never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from npuzzle.engine.solver.stats import SearchStats


class PuzzleError(Exception):
    """Base class for every error raised by ``npuzzle``."""


class InvalidBoardError(PuzzleError, ValueError):
    """Tile data does not describe a well-formed n×n board."""


class PuzzleFormatError(InvalidBoardError):
    """Puzzle text or JSON could not be parsed."""


class SearchLimitExceeded(PuzzleError):
    """The search hit a node or time limit before reaching the goal."""

    def __init__(self, message: str, stats: SearchStats) -> None:
        super().__init__(message)
        self.stats = stats
