from eightpuzzle.engine.heuristic.scorer import misplaced

__all__ = ["misplaced"]
