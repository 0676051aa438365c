"""Misplaced-tile (Hamming) heuristic."""

from __future__ import annotations

from eightpuzzle.models.board import Board, goal_board


def misplaced(board: Board) -> int:
    """Count the cells whose value differs from the goal board's.

    The blank is compared like any other tile. Zero only for the goal.
    """
    goal = goal_board(board.size)
    return sum(
        1
        for row, goal_row in zip(board.tiles, goal.tiles)
        for v, g in zip(row, goal_row)
        if v != g
    )
