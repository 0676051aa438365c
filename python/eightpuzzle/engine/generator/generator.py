"""Generates solvable puzzle boards."""

from __future__ import annotations

import random

from eightpuzzle.engine.moves import apply_move, legal_moves
from eightpuzzle.models.board import Board, Move, goal_board


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int = 3) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return goal_board(size)

    @staticmethod
    def scramble(
        board: Board, moves: int, rng: random.Random | None = None
    ) -> tuple[Board, list[Move]]:
        """Apply *moves* random blank slides to *board*.

        The walk never immediately undoes its previous step. Returns the
        scrambled board together with the moves that produced it.
        """
        rng = rng or random.Random()
        applied: list[Move] = []

        for _ in range(moves):
            options = legal_moves(board)
            if applied and applied[-1].inverse in options and len(options) > 1:
                options.remove(applied[-1].inverse)
            move = rng.choice(options)
            board = apply_move(board, move)
            applied.append(move)
        return board, applied

    @staticmethod
    def generate(size: int = 3, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable*, not-yet-solved board of the given size."""
        rng = random.Random(seed)
        num_shuffles = moves if moves is not None else size * size * 10
        if num_shuffles < 1:
            raise ValueError("A scramble needs at least one move.")

        while True:
            board, _ = GameGenerator.scramble(GameGenerator.solved(size), num_shuffles, rng)
            # Ensure the board is not already solved
            if not board.is_solved():
                return board
