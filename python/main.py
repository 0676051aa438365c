#!/usr/bin/env python3
"""Eight Puzzle Solver.

Usage::

    python main.py 123456708            # solve a board, plain output
    python main.py 8,6,7,2,5,4,3,0,1 -f rich
    python main.py --scramble 20 --seed 7
    python main.py 123456780 --mode additive --max-seconds 5 -v
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightpuzzle.engine.generator import GameGenerator  # noqa: E402
from eightpuzzle.engine.moves import path_to_moves  # noqa: E402
from eightpuzzle.engine.search import ScoreMode, SearchLimits, Solver  # noqa: E402
from eightpuzzle.errors import InvalidBoardError, NoSolutionFoundError  # noqa: E402
from eightpuzzle.models.board import Board  # noqa: E402

BOARD_SIZE = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    plain = "plain"
    rich = "rich"


_RUNNERS = {
    Frontend.plain: "viewer.cli.plain.app",
    Frontend.rich: "viewer.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def parse_board(raw: str, size: int = BOARD_SIZE) -> Board:
    """Parse ``"123456708"`` or ``"1,2,3,4,5,6,7,0,8"`` into a Board.

    Only the tile count is checked here; the solver validates the rest.
    """
    text = raw.strip()
    if "," in text or " " in text:
        parts = [p for p in text.replace(",", " ").split() if p]
    else:
        parts = list(text)
    try:
        flat = [int(p) for p in parts]
    except ValueError:
        raise InvalidBoardError(f"Board {raw!r} contains a non-integer tile.") from None
    try:
        return Board.from_flat(size, flat)
    except ValueError as exc:
        raise InvalidBoardError(str(exc)) from None


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board: Optional[str] = typer.Argument(
        None,
        help="Board as 9 digits row by row (0 = blank), e.g. 123456708.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.plain, "-f", "--frontend",
        help="How to print the solution.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=1,
        help="Solve a random board this many moves from the goal instead.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    mode: ScoreMode = typer.Option(
        ScoreMode.CUMULATIVE, "--mode",
        help="Node scoring rule.",
    ),
    max_iterations: int = typer.Option(
        SearchLimits().max_iterations, "--max-iterations",
        min=1,
        help="Give up after this many frontier pops.",
    ),
    max_seconds: Optional[float] = typer.Option(
        None, "--max-seconds",
        min=0.0,
        help="Give up after this many seconds.",
    ),
    delay: float = typer.Option(
        0.0, "--delay",
        min=0.0,
        help="Pause between printed steps, in seconds.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Eight Puzzle Solver."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if board is None and scramble is None:
        typer.echo("Give a board or use --scramble N.", err=True)
        raise typer.Exit(code=2)

    try:
        start = (
            GameGenerator.generate(BOARD_SIZE, moves=scramble, seed=seed)
            if board is None
            else parse_board(board)
        )
        solver = Solver(
            start,
            limits=SearchLimits(max_iterations=max_iterations, max_seconds=max_seconds),
            mode=mode,
        )
    except InvalidBoardError as exc:
        typer.echo(f"Invalid board: {exc}", err=True)
        raise typer.Exit(code=2)

    try:
        path = solver.solve()
    except NoSolutionFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_solution(path, path_to_moves(path), delay=delay)


if __name__ == "__main__":
    app()
