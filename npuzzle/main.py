"""Sliding Puzzle Solver.

Usage::

    npuzzle solve puzzle.txt               # Rich output
    npuzzle solve puzzle.txt -f vanilla    # plain text output
    npuzzle solve - < puzzle.txt           # read the puzzle from stdin
    npuzzle generate -s 3 --seed 7         # print a random solvable puzzle
"""

from __future__ import annotations

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from npuzzle.config import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    ENV_NODE_LIMIT,
    ENV_TIME_LIMIT,
    SearchLimits,
)
from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import Solver
from npuzzle.errors import InvalidBoardError, SearchLimitExceeded
from npuzzle.logs import setup_logging
from npuzzle.models.board import Board
from npuzzle.puzzleio import format_puzzle, parse_puzzle_str, read_puzzle_file

logger = logging.getLogger(__name__)

EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2
EXIT_LIMIT = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.vanilla.app",
    Frontend.rich: "npuzzle.frontend.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _load_board(path: Path) -> Board:
    if str(path) == "-":
        return parse_puzzle_str(sys.stdin.read())
    return read_puzzle_file(path)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Optimal sliding-tile puzzle solver.")


@app.command()
def solve(
    path: Path = typer.Argument(
        ...,
        help="Puzzle file (text or .json); '-' reads text from stdin.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the result.",
    ),
    node_limit: Optional[int] = typer.Option(
        None, "--node-limit",
        min=1, envvar=ENV_NODE_LIMIT,
        help="Give up after this many expansions.",
    ),
    time_limit: Optional[float] = typer.Option(
        None, "--time-limit",
        min=0.001, envvar=ENV_TIME_LIMIT,
        help="Give up after this many seconds.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel(DEFAULT_LOG_LEVEL), "--log-level",
        envvar=ENV_LOG_LEVEL, case_sensitive=False,
        help="Logging verbosity (written to stderr).",
    ),
) -> None:
    """Solve a puzzle and print the shortest solution."""
    setup_logging(log_level.value)

    try:
        board = _load_board(path)
    except InvalidBoardError as exc:
        logger.error("Invalid puzzle %s: %s", path, exc)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc

    limits = SearchLimits(node_limit=node_limit, time_limit=time_limit)
    try:
        solver = Solver(board, limits)
    except SearchLimitExceeded as exc:
        logger.error("%s Stats: %s", exc, exc.stats.as_dict())
        raise typer.Exit(code=EXIT_LIMIT) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show(solver)

    if not solver.is_solvable():
        raise typer.Exit(code=EXIT_UNSOLVABLE)


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        min=1,
        help="Random slides from the goal (default: 100 per cell).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible puzzle.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        help="Write the puzzle here instead of stdout.",
    ),
) -> None:
    """Print a random solvable puzzle in the text format."""
    board = BoardGenerator.generate(size, steps=steps, seed=seed)
    text = format_puzzle(board)
    if output is None:
        typer.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")


if __name__ == "__main__":
    app()
