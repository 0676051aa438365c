"""Move generation — every board one blank slide away from a given board."""

from __future__ import annotations

from typing import Sequence

from eightpuzzle.models.board import Board, Move

# Fixed expansion order; the search engine's tie-breaking depends on it.
MOVE_ORDER: tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


def legal_moves(board: Board) -> list[Move]:
    """Return the blank moves allowed from *board*, in :data:`MOVE_ORDER`.

    Row bounds gate UP/DOWN and column bounds gate LEFT/RIGHT. A board
    without a blank has no legal moves.
    """
    pos = board.blank_pos
    if pos is None:
        return []
    return _legal_from(pos, board.size)


def _legal_from(pos: tuple[int, int], size: int) -> list[Move]:
    br, bc = pos
    last = size - 1

    allowed = {
        Move.UP: br > 0,
        Move.DOWN: br < last,
        Move.LEFT: bc > 0,
        Move.RIGHT: bc < last,
    }
    return [m for m in MOVE_ORDER if allowed[m]]


def _slide(board: Board, pos: tuple[int, int], move: Move) -> Board:
    dr, dc = move.delta
    return board.swap(pos, (pos[0] + dr, pos[1] + dc))


def apply_move(board: Board, move: Move) -> Board:
    """Slide the blank one cell in *move*'s direction and return the new board."""
    pos = board.blank_pos
    if pos is None:
        raise ValueError("Board has no blank tile to move.")
    if move not in _legal_from(pos, board.size):
        raise ValueError(f"Cannot move the blank {move.value} from {pos}.")
    return _slide(board, pos, move)


def successors(board: Board) -> list[tuple[Move, Board]]:
    """Return ``(move, board)`` for every legal slide, in :data:`MOVE_ORDER`."""
    pos = board.blank_pos
    if pos is None:
        return []
    return [(m, _slide(board, pos, m)) for m in _legal_from(pos, board.size)]


def generate(board: Board) -> set[Board]:
    """Return the set of boards reachable from *board* by one blank slide.

    2 candidates for a corner blank, 3 on an edge, 4 in the middle of a
    3×3 board; empty when the board has no blank.
    """
    return {b for _, b in successors(board)}


# -- path helpers -------------------------------------------------------------


def move_between(before: Board, after: Board) -> Move | None:
    """Return the move turning *before* into *after*, or ``None`` if none does."""
    for move, candidate in successors(before):
        if candidate == after:
            return move
    return None


def path_to_moves(path: Sequence[Board]) -> list[Move]:
    """Translate a board sequence into the blank moves that produced it."""
    moves: list[Move] = []
    for i in range(1, len(path)):
        move = move_between(path[i - 1], path[i])
        if move is None:
            raise ValueError(f"Boards {i - 1} and {i} are not one slide apart.")
        moves.append(move)
    return moves
