"""Rich terminal frontend: boards as tables inside panels.

Renders each board of the solution as a Rich table inside a panel, with
the slide that produced it, followed by a summary line.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _summary(solver: Solver) -> Text:
    stats = solver.stats
    text = Text()
    text.append("  Moves: ", style="dim")
    text.append(str(solver.moves()), style="bold yellow")
    text.append("    Expanded: ", style="dim")
    text.append(str(stats.expanded), style="bold yellow")
    text.append("    Time: ", style="dim")
    text.append(f"{stats.elapsed:.3f}s", style="bold yellow")
    return text


# -- public entry point -------------------------------------------------------


def show(solver: Solver, out: Console | None = None) -> None:
    """Print the solver's result to *out* (the module console by default)."""
    out = out or console
    size = solver.initial.size

    if not solver.is_solvable():
        out.print(Align.center(render_board(solver.initial)))
        out.print(Align.center(Text("Board is unsolvable.", style="bold red")))
        return

    boards = solver.solution() or []
    directions = solver.directions() or []
    steps = len(boards) - 1

    for i, board in enumerate(boards):
        caption = Text(f"Step {i}/{steps}", style="bold cyan")
        if i > 0:
            caption.append(f"  ({directions[i - 1].value})", style="dim")
        panel = Panel(
            Group(Align.center(render_board(board)), Align.center(caption)),
            title=f"[bold cyan]{size}×{size}[/bold cyan]",
            border_style="bold green" if board.is_goal() else "bright_blue",
            padding=(0, 2),
        )
        out.print(Align.center(panel))

    out.print(Align.center(Text(f"Solved in {steps} moves!", style="bold green")))
    out.print(Align.center(_summary(solver)))
