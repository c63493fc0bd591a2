"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.errors import InvalidBoardError


class Direction(StrEnum):
    """Direction a *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank moves in neighbour order: up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Board:
    """Immutable n×n sliding puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Any nested sequence passed in is copied, so boards never share storage.
    Equality and hashing only look at ``size`` and ``tiles``.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        n = self.size
        if not isinstance(n, int) or n < 2:
            raise InvalidBoardError(f"Board size must be an integer >= 2, got {n!r}.")

        try:
            rows = tuple(tuple(row) for row in self.tiles)
        except TypeError as exc:
            raise InvalidBoardError(f"Tiles must be a grid of rows: {exc}") from exc
        if len(rows) != n or any(len(row) != n for row in rows):
            raise InvalidBoardError(f"Expected a {n}×{n} grid of tiles.")

        flat = [v for row in rows for v in row]
        bad = [v for v in flat if type(v) is not int]
        if bad:
            raise InvalidBoardError(f"Tiles must be integers, got {bad!r}.")
        if set(flat) != set(range(n * n)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{n * n - 1}, got {flat}."
            )

        blank = flat.index(0)
        object.__setattr__(self, "tiles", rows)
        object.__setattr__(self, "blank_pos", divmod(blank, n))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows; the size is the row count."""
        return cls(size=len(rows), tiles=rows)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles = [flat[r * size : (r + 1) * size] for r in range(size)]
        return cls(size=size, tiles=tiles)

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, list(range(1, size * size)) + [0])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def to_flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def hamming(self) -> int:
        """Number of tiles out of place, blank excluded."""
        n = self.size
        count = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val != 0 and val != n * r + c + 1:
                    count += 1
        return count

    def manhattan(self) -> int:
        """Sum of row and column distances from each tile to its goal cell."""
        n = self.size
        dist = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                gr, gc = divmod(val - 1, n)
                dist += abs(gr - r) + abs(gc - c)
        return dist

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        last = self.size - 1
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if r == last and c == last:
                    return val == 0
                if val != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    # -- moves ----------------------------------------------------------------

    def neighbors(self) -> Iterator[Board]:
        """Yield every board one slide away, in blank order up/down/left/right."""
        br, bc = self.blank_pos
        for dr, dc in _BLANK_STEPS:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.size and 0 <= tc < self.size:
                yield self._swap_blank(tr, tc)

    def slide(self, direction: Direction) -> Board:
        """Return the board after sliding a tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Raises ``ValueError`` when no tile sits on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            raise ValueError(f"No tile can slide {direction.value} from {self.blank_pos}.")
        return self._swap_blank(tr, tc)

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        br, bc = self.blank_pos
        for direction, (dr, dc) in _TILE_OFFSETS.items():
            if other.blank_pos != (br + dr, bc + dc):
                continue
            if self.slide(direction) == other:
                return direction
        return None

    # -- helpers --------------------------------------------------------------

    def _swap_blank(self, row: int, col: int) -> Board:
        br, bc = self.blank_pos
        tiles = [list(r) for r in self.tiles]
        tiles[br][bc], tiles[row][col] = tiles[row][col], tiles[br][bc]
        return Board(size=self.size, tiles=tiles)

    def __str__(self) -> str:
        lines = [str(self.size)]
        lines.extend("".join(f"{val:2d} " for val in row) for row in self.tiles)
        return "\n".join(lines)
