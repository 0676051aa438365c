"""Solving engine for the 3×3 sliding-tile puzzle."""

from eightpuzzle.engine.search import ScoreMode, SearchLimits, Solver, solve
from eightpuzzle.errors import InvalidBoardError, NoSolutionFoundError, PuzzleError
from eightpuzzle.models import GOAL, Board, Move

__all__ = [
    "GOAL",
    "Board",
    "InvalidBoardError",
    "Move",
    "NoSolutionFoundError",
    "PuzzleError",
    "ScoreMode",
    "SearchLimits",
    "Solver",
    "solve",
]

__version__ = "0.1.0"
