from eightpuzzle.engine.moves.generator import (
    MOVE_ORDER,
    apply_move,
    generate,
    legal_moves,
    move_between,
    path_to_moves,
    successors,
)

__all__ = [
    "MOVE_ORDER",
    "apply_move",
    "generate",
    "legal_moves",
    "move_between",
    "path_to_moves",
    "successors",
]
