"""Vanilla terminal frontend with no third-party dependencies.

Prints the classic report: solvability, every board of the solution in
the puzzle text format, then the move count.
"""

from __future__ import annotations

import sys
from typing import TextIO

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, color: bool = False) -> str:
    """Return a boxed text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cell = f" {'·':>{width}} "
                cells.append(f"{_DIM}{cell}{_R}" if color else cell)
            elif color and board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- public entry point -------------------------------------------------------


def show(solver: Solver, out: TextIO | None = None, boxed: bool = False) -> None:
    """Write the solver's result to *out* (stdout by default)."""
    out = out or sys.stdout
    color = boxed and out.isatty()

    if not solver.is_solvable():
        out.write("Solving state: Unsolvable.\n")
        return

    out.write("Solving state: Solvable\n\n")
    for board in solver.solution() or []:
        out.write((render_board(board, color) if boxed else str(board)) + "\n\n")
    out.write(f"Number of moves: {solver.moves()}\n")
