from eightpuzzle.engine.search.solver import (
    DEFAULT_MAX_ITERATIONS,
    Frontier,
    ScoreMode,
    SearchLimits,
    SearchNode,
    SearchStats,
    Solver,
    solve,
)

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "Frontier",
    "ScoreMode",
    "SearchLimits",
    "SearchNode",
    "SearchStats",
    "Solver",
    "solve",
]
