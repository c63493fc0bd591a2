"""Closed-form solvability test based on permutation parity."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable

from npuzzle.models.board import Board


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs whose order in *values* is reversed from their value order."""
    inversions = 0
    seen: list[int] = []
    for v in values:
        inversions += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    Odd n: the inversion count must be even.  Even n: with the blank on
    row ``r`` counted 1-based from the bottom, the board is solvable when
    exactly one of ``r`` and the inversion count is odd.
    """
    n = board.size
    inversions = count_inversions(v for v in board.to_flat() if v != 0)
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row = board.blank_pos[0] + 1
    row_from_bottom = n - blank_row + 1
    return (row_from_bottom + inversions) % 2 == 1
