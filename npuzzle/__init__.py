"""Optimal sliding-tile puzzle solver (A* over Manhattan distance)."""

from npuzzle.engine.solver import Solver
from npuzzle.errors import (
    InvalidBoardError,
    PuzzleError,
    PuzzleFormatError,
    SearchLimitExceeded,
)
from npuzzle.models.board import Board, Direction

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Direction",
    "InvalidBoardError",
    "PuzzleError",
    "PuzzleFormatError",
    "SearchLimitExceeded",
    "Solver",
]
