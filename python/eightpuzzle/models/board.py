"""Board model for the eight puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Iterable, Sequence

from eightpuzzle.errors import InvalidBoardError


class Move(StrEnum):
    """Direction the *blank* travels (the neighbouring tile slides the other way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def inverse(self) -> Move:
        return _INVERSES[self]


_DELTAS: dict[Move, tuple[int, int]] = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}

_INVERSES: dict[Move, Move] = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}


@dataclass(frozen=True)
class Board:
    """Represents a puzzle board as an immutable grid.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Construction does not check the tile set; call :func:`validate` for that.
    """

    tiles: tuple[tuple[int, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Board:
        """Create a board from any nested iterable of ints.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        return cls(tiles=tuple(tuple(int(v) for v in row) for row in rows))

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(flat[r * size : (r + 1) * size] for r in range(size))

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.tiles)

    @property
    def blank_pos(self) -> tuple[int, int] | None:
        """Return ``(row, col)`` of the first blank, or ``None`` if there is none."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    return (r, c)
        return None

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self == goal_board(self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- transformations ------------------------------------------------------

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        """Return a copy with the cells at *a* and *b* exchanged."""
        grid = self.rows()
        (ar, ac), (br, bc) = a, b
        grid[ar][ac], grid[br][bc] = grid[br][bc], grid[ar][ac]
        return Board.from_rows(grid)

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" if v else " " * width for v in row)
            for row in self.tiles
        )


@lru_cache(maxsize=None)
def goal_board(size: int) -> Board:
    """Return the goal-state board (all tiles in order, blank bottom-right)."""
    count = size * size
    return Board.from_flat(size, [*range(1, count), 0])


GOAL: Board = goal_board(3)


def validate(board: Board) -> Board:
    """Raise :class:`InvalidBoardError` unless *board* is a well-formed puzzle.

    A well-formed board is an N×N grid (N >= 2) holding each of
    ``0..N²-1`` exactly once. Returns the board unchanged so calls chain.
    """
    size = board.size
    if size < 2:
        raise InvalidBoardError(f"Board must be at least 2×2, got {size} row(s).")
    for r, row in enumerate(board.tiles):
        if len(row) != size:
            raise InvalidBoardError(
                f"Row {r} has {len(row)} cells; expected {size} for a square board."
            )

    flat = board.flat()
    blanks = flat.count(0)
    if blanks != 1:
        raise InvalidBoardError(f"Board must contain exactly one blank, found {blanks}.")
    if sorted(flat) != list(range(size * size)):
        missing = sorted(set(range(size * size)) - set(flat))
        raise InvalidBoardError(
            f"Board is not a permutation of 0..{size * size - 1} "
            f"(missing {missing})."
        )
    return board
