"""Reading and writing puzzle definitions.

Text format: whitespace-separated integers, the side length ``n`` first,
then the ``n*n`` tiles row by row (0 is the blank)::

    3
     0  1  3
     4  2  5
     7  8  6

JSON format: ``{"size": 3, "tiles": [[0, 1, 3], [4, 2, 5], [7, 8, 6]]}``.
"""

from __future__ import annotations

import json
from pathlib import Path

from npuzzle.errors import PuzzleFormatError
from npuzzle.models.board import Board


def parse_puzzle_str(text: str) -> Board:
    tokens = text.split()
    if not tokens:
        raise PuzzleFormatError("Empty puzzle")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise PuzzleFormatError(f"Puzzle must contain only integers: {exc}") from exc

    n, tiles = values[0], values[1:]
    if n < 2:
        raise PuzzleFormatError(f"Puzzle size must be at least 2, got {n}")
    if len(tiles) != n * n:
        raise PuzzleFormatError(
            f"Expected {n * n} tiles for a {n}×{n} puzzle, got {len(tiles)}"
        )
    return Board.from_flat(n, tiles)


def parse_puzzle_json(text: str) -> Board:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"Invalid JSON puzzle: {exc}") from exc
    if not isinstance(data, dict) or "tiles" not in data:
        raise PuzzleFormatError("JSON puzzle must be an object with a 'tiles' key")

    tiles = data["tiles"]
    if not isinstance(tiles, list) or not all(isinstance(row, list) for row in tiles):
        raise PuzzleFormatError("'tiles' must be a list of rows")
    size = data.get("size", len(tiles))
    if size != len(tiles):
        raise PuzzleFormatError(f"'size' is {size} but {len(tiles)} rows were given")
    return Board(size=size, tiles=tiles)


def read_puzzle_file(path: str | Path) -> Board:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleFormatError(f"Cannot read puzzle file {path}: {exc}") from exc
    if path.suffix.lower() == ".json":
        return parse_puzzle_json(text)
    return parse_puzzle_str(text)


def format_puzzle(board: Board) -> str:
    """Serialise *board* in the text format, with a trailing newline."""
    return str(board) + "\n"
