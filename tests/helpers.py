"""Shared helpers for the test suite."""

from __future__ import annotations

from collections import deque

from npuzzle.models.board import Board

SOLVED_3x3 = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
ONE_MOVE_3x3 = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
TWO_MOVES_3x3 = [[1, 2, 3], [4, 5, 6], [0, 7, 8]]
UNSOLVABLE_3x3 = [[1, 2, 3], [4, 5, 6], [8, 7, 0]]


def bfs_distance(start: Board) -> int | None:
    """Exact number of slides from *start* to the goal, or None if unreachable."""
    goal = Board.goal(start.size)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        if board == goal:
            return dist[board]
        for nb in board.neighbors():
            if nb not in dist:
                dist[nb] = dist[board] + 1
                queue.append(nb)
    return None


def swapped_cells(a: Board, b: Board) -> list[tuple[int, int]]:
    """Cells whose values differ between two boards of the same size."""
    return [
        (r, c)
        for r in range(a.size)
        for c in range(a.size)
        if a.tiles[r][c] != b.tiles[r][c]
    ]
