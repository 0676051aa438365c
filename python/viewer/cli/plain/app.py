"""Plain terminal frontend — no third-party dependencies.

Prints each board of a solution path with ANSI colours.
"""

from __future__ import annotations

import sys
import time
from typing import Sequence

from eightpuzzle.models.board import Board, Move

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def show_solution(path: Sequence[Board], moves: Sequence[Move], delay: float = 0.0) -> None:
    """Print every step of *path*; ``moves[i]`` leads from step i to i+1."""
    print(f"\n  {_C}Start{_R}")
    print(render_board(path[0]))

    for i, (move, board) in enumerate(zip(moves, path[1:]), 1):
        if delay:
            sys.stdout.flush()
            time.sleep(delay)
        print(f"\n  {_C}Move {i}/{len(moves)}{_R} {_DIM}(blank {move.value}){_R}")
        print(render_board(board))

    if moves:
        print(f"\n  {_G}Solved in {len(moves)} moves!{_R}\n")
    else:
        print(f"\n  {_Y}Already solved!{_R}\n")
