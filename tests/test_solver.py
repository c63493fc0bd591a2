"""Solver tests: optimality, path validity, sentinels and limits.

Optimality is cross-checked against breadth-first search: exhaustively for
2×2 and on seeded scrambles for 3×3.  Every test is hard-killed by
``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import itertools
import random

import pytest

from npuzzle.config import SearchLimits
from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import SearchNode, Solver
from npuzzle.errors import PuzzleError, SearchLimitExceeded
from npuzzle.models.board import Board, Direction
from tests.helpers import (
    ONE_MOVE_3x3,
    SOLVED_3x3,
    TWO_MOVES_3x3,
    UNSOLVABLE_3x3,
    bfs_distance,
)

# -- helpers ------------------------------------------------------------------


def _assert_valid_solution(solver: Solver) -> None:
    """The path starts at the initial board, ends at the goal, one slide per step."""
    boards = solver.solution()
    assert boards is not None
    assert boards[0] == solver.initial
    assert boards[-1].is_goal()
    assert len(boards) == solver.moves() + 1
    for before, after in zip(boards, boards[1:]):
        assert after in list(before.neighbors())


def _scrambled_3x3() -> list[Board]:
    rng = random.Random(2024)
    goal = Board.goal(3)
    return [BoardGenerator.scramble(goal, steps, rng) for steps in (4, 8, 12, 14, 16, 18)]


# -- concrete scenarios -------------------------------------------------------


def test_already_solved() -> None:
    board = Board.from_rows(SOLVED_3x3)
    solver = Solver(board)
    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [board]
    assert solver.directions() == []


def test_one_slide_from_goal() -> None:
    solver = Solver(Board.from_rows(ONE_MOVE_3x3))
    assert solver.is_solvable()
    assert solver.moves() == 1
    boards = solver.solution()
    assert boards is not None and len(boards) == 2
    assert boards[-1] == Board.goal(3)
    assert solver.directions() == [Direction.LEFT]


def test_unsolvable_parity() -> None:
    solver = Solver(Board.from_rows(UNSOLVABLE_3x3))
    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None
    assert solver.directions() is None
    assert solver.stats.expanded == 0


@pytest.mark.parametrize(
    ("rows", "moves"),
    [
        ([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 0, 15]], 1),
        ([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 0], [13, 14, 15, 12]], 1),
        ([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [0, 13, 14, 15]], 3),
    ],
)
def test_even_board(rows: list[list[int]], moves: int) -> None:
    solver = Solver(Board.from_rows(rows))
    assert solver.is_solvable()
    assert solver.moves() == moves
    _assert_valid_solution(solver)


def test_even_board_unsolvable() -> None:
    rows = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 15, 14, 0]]
    solver = Solver(Board.from_rows(rows))
    assert not solver.is_solvable()
    assert solver.moves() == -1


# -- optimality ---------------------------------------------------------------


def test_every_2x2_board_matches_bfs() -> None:
    for perm in itertools.permutations(range(4)):
        board = Board.from_flat(2, list(perm))
        solver = Solver(board)
        expected = bfs_distance(board)
        if expected is None:
            assert not solver.is_solvable()
            assert solver.moves() == -1
        else:
            assert solver.moves() == expected, perm
            _assert_valid_solution(solver)


@pytest.mark.parametrize("board", _scrambled_3x3(), ids=lambda b: "".join(map(str, b.to_flat())))
def test_scrambled_3x3_matches_bfs(board: Board) -> None:
    solver = Solver(board)
    assert solver.moves() == bfs_distance(board)
    _assert_valid_solution(solver)


# -- results ------------------------------------------------------------------


def test_results_are_idempotent() -> None:
    solver = Solver(Board.from_rows([[4, 1, 3], [0, 2, 6], [7, 5, 8]]))
    first = solver.solution()
    assert solver.solution() == first
    assert solver.solution() is not first
    assert solver.moves() == solver.moves() == 5
    assert solver.directions() == solver.directions()


def test_directions_replay_to_goal() -> None:
    board = BoardGenerator.generate(3, steps=12, seed=7)
    solver = Solver(board)
    directions = solver.directions()
    assert directions is not None and len(directions) == solver.moves()
    for direction in directions:
        board = board.slide(direction)
    assert board.is_goal()


def test_stats_are_recorded() -> None:
    solver = Solver(Board.from_rows(TWO_MOVES_3x3))
    stats = solver.stats
    assert stats.expanded >= 2
    assert stats.enqueued > stats.expanded
    assert stats.pruned >= 1
    assert stats.max_frontier >= 1
    assert stats.elapsed >= 0


def test_search_node_score() -> None:
    root = SearchNode(Board.from_rows(TWO_MOVES_3x3), None, 0)
    child = SearchNode(Board.from_rows(ONE_MOVE_3x3), root, 1)
    assert root.score == 2
    assert child.score == 2
    assert child.path() == [root.board, child.board]


# -- limits -------------------------------------------------------------------


def test_node_limit_raises() -> None:
    with pytest.raises(SearchLimitExceeded) as info:
        Solver(Board.from_rows(TWO_MOVES_3x3), SearchLimits(node_limit=1))
    assert info.value.stats.expanded == 1


def test_generous_limits_do_not_change_result() -> None:
    board = Board.from_rows([[4, 1, 3], [0, 2, 6], [7, 5, 8]])
    limited = Solver(board, SearchLimits(node_limit=10_000, time_limit=30.0))
    assert limited.moves() == Solver(board).moves()


def test_unsolvable_board_ignores_limits() -> None:
    solver = Solver(Board.from_rows(UNSOLVABLE_3x3), SearchLimits(node_limit=1))
    assert solver.moves() == -1


def test_directions_reject_broken_chain() -> None:
    solver = Solver(Board.from_rows(TWO_MOVES_3x3))
    root = SearchNode(Board.from_rows(TWO_MOVES_3x3), None, 0)
    solver._goal = SearchNode(Board.goal(3), root, 1)
    with pytest.raises(PuzzleError, match="one slide apart"):
        solver.directions()
