"""Sliding puzzle solver."""

from __future__ import annotations

import logging
import time

from npuzzle.config import SearchLimits
from npuzzle.engine.solvability import is_solvable
from npuzzle.engine.solver.frontier import Frontier
from npuzzle.engine.solver.node import SearchNode
from npuzzle.engine.solver.stats import SearchStats
from npuzzle.errors import PuzzleError, SearchLimitExceeded
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Finds a shortest solution for one initial board with A*.

    The search runs once, during construction.  Unsolvable boards are
    detected by the parity check and never searched; they report
    ``moves() == -1`` and ``solution() is None``.
    """

    def __init__(self, initial: Board, limits: SearchLimits | None = None) -> None:
        self.initial = initial
        self.limits = limits or SearchLimits()
        self.stats = SearchStats()
        self._goal: SearchNode | None = None
        self._solvable = is_solvable(initial)

        if not self._solvable:
            logger.info("Board of size %d is unsolvable; skipping search.", initial.size)
            return

        self._goal = self._search()
        logger.info(
            "Solved %d×%d board in %d moves (%s).",
            initial.size,
            initial.size,
            self._goal.moves,
            self.stats.as_dict(),
        )

    # -- search ---------------------------------------------------------------

    def _search(self) -> SearchNode:
        t0 = time.perf_counter()
        frontier = Frontier()
        frontier.push(SearchNode(self.initial, None, 0))
        self.stats.enqueued = 1

        try:
            while True:
                self._check_limits(t0)
                self.stats.max_frontier = max(self.stats.max_frontier, len(frontier))

                # A solvable start always reaches the goal before the heap drains.
                node = frontier.pop()
                if node.board.is_goal():
                    return node

                self.stats.expanded += 1
                previous = node.parent.board if node.parent is not None else None
                for neighbor in node.board.neighbors():
                    # Sliding the same tile straight back recreates the parent.
                    if previous is not None and neighbor == previous:
                        self.stats.pruned += 1
                        continue
                    frontier.push(SearchNode(neighbor, node, node.moves + 1))
                    self.stats.enqueued += 1
        finally:
            self.stats.elapsed = time.perf_counter() - t0

    def _check_limits(self, t0: float) -> None:
        limits = self.limits
        if limits.unlimited:
            return
        if limits.node_limit is not None and self.stats.expanded >= limits.node_limit:
            raise SearchLimitExceeded(
                f"Node limit of {limits.node_limit} expansions reached.", self.stats
            )
        if limits.time_limit is not None and time.perf_counter() - t0 > limits.time_limit:
            raise SearchLimitExceeded(
                f"Time limit of {limits.time_limit}s reached.", self.stats
            )

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        """Return True if the initial board can reach the goal state."""
        return self._solvable

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if unsolvable."""
        if self._goal is None:
            return -1
        return self._goal.moves

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial first; ``None`` if unsolvable."""
        if self._goal is None:
            return None
        return self._goal.path()

    def directions(self) -> list[Direction] | None:
        """Tile moves along the solution; ``None`` if unsolvable."""
        boards = self.solution()
        if boards is None:
            return None
        moves: list[Direction] = []
        for before, after in zip(boards, boards[1:]):
            direction = before.direction_to(after)
            if direction is None:
                raise PuzzleError("Solution boards must be one slide apart.")
            moves.append(direction)
        return moves
