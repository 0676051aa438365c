from eightpuzzle.models.board import GOAL, Board, Move, goal_board, validate

__all__ = ["GOAL", "Board", "Move", "goal_board", "validate"]
