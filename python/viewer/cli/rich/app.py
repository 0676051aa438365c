"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of a solution path.
"""

from __future__ import annotations

import time
from typing import Sequence

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.models.board import Board, Move

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


def _step_panel(board: Board, title: str) -> Panel:
    return Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(0, 2),
        expand=False,
    )


# -- entry point --------------------------------------------------------------


def show_solution(path: Sequence[Board], moves: Sequence[Move], delay: float = 0.0) -> None:
    """Render every step of *path*; ``moves[i]`` leads from step i to i+1."""
    console.print(_step_panel(path[0], "Start"))

    for i, (move, board) in enumerate(zip(moves, path[1:]), 1):
        if delay:
            time.sleep(delay)
        progress = Text()
        progress.append(f"  move {i}/{len(moves)} ", style="bold cyan")
        progress.append(f"(blank {move.value})", style="dim")
        console.print(progress)
        console.print(_step_panel(board, f"Step {i}"))

    if moves:
        console.print(f"[bold green]Solved in {len(moves)} moves![/bold green]")
    else:
        console.print("[green]Already solved![/green]")
