"""Exceptions raised by the solving engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the engine raises on purpose."""


class InvalidBoardError(PuzzleError, ValueError):
    """The grid is not square, or is not a permutation of ``0..N²-1``."""


class NoSolutionFoundError(PuzzleError, RuntimeError):
    """The search gave up before reaching the goal board.

    Raised when the frontier runs dry (the board sits in the other parity
    class) or when one of the configured search limits trips.
    """

    def __init__(self, message: str, iterations: int = 0, explored: int = 0) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.explored = explored
