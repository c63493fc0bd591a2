from __future__ import annotations

import heapq

from npuzzle.engine.solver.node import SearchNode


class Frontier:
    """Min-heap of search nodes keyed by score; equal scores pop FIFO."""

    def __init__(self) -> None:
        self._h: list[tuple[int, int, SearchNode]] = []
        self._tiebreak = 0

    def push(self, node: SearchNode) -> None:
        self._tiebreak += 1
        heapq.heappush(self._h, (node.score, self._tiebreak, node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._h)[2]

    def __len__(self) -> int:
        return len(self._h)
