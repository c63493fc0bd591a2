"""Search tree node used by the A* solver."""

from __future__ import annotations

from dataclasses import dataclass, field

from npuzzle.models.board import Board


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    """One explored configuration: a board, its parent and the moves so far.

    ``score`` is ``moves + manhattan(board)``, fixed at construction.
    """

    board: Board
    parent: SearchNode | None
    moves: int
    score: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "score", self.moves + self.board.manhattan())

    def path(self) -> list[Board]:
        """Boards from the root to this node, oldest first."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards
