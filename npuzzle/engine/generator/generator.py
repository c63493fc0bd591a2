"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class BoardGenerator:
    """Creates solvable puzzles by random-walking the blank from a board."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *steps* random slides, never undoing the last one."""
        rng = rng or random.Random()
        current = board
        previous: Board | None = None

        for _ in range(steps):
            neighbors = list(current.neighbors())
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, current = current, rng.choice(neighbors)
        return current

    @staticmethod
    def generate(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = random.Random(seed)
        num_shuffles = steps if steps is not None else size * size * 100
        goal = BoardGenerator.solved(size)

        while True:
            board = BoardGenerator.scramble(goal, num_shuffles, rng)
            # Ensure the board is not already solved; on 2×2 every walk that
            # never backtracks cycles back to the goal after 12 slides.
            if not board.is_goal():
                return board
            num_shuffles += 1
