"""Search engine internals — frontier ordering, scoring, limits."""

from __future__ import annotations

import logging

import pytest

from eightpuzzle.engine.search import (
    Frontier,
    ScoreMode,
    SearchLimits,
    SearchNode,
    Solver,
)
from eightpuzzle.errors import NoSolutionFoundError
from eightpuzzle.models.board import GOAL, Board

ONE_AWAY = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
# Two tiles swapped: the other parity class, unreachable from the goal.
UNSOLVABLE_3x3 = Board.from_rows([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
UNSOLVABLE_2x2 = Board.from_rows([[2, 1], [3, 0]])


# -- frontier -----------------------------------------------------------------


def test_frontier_pops_lowest_score_first() -> None:
    frontier = Frontier()
    for score in (5, 1, 3):
        frontier.push(SearchNode(score=score, board=GOAL))
    assert [frontier.pop().score for _ in range(3)] == [1, 3, 5]
    assert not frontier


def test_frontier_ties_go_to_earliest_insert() -> None:
    frontier = Frontier()
    nodes = [SearchNode(score=4, board=GOAL) for _ in range(3)]
    for node in nodes:
        frontier.push(node)
    frontier.push(SearchNode(score=9, board=GOAL))
    assert len(frontier) == 4
    assert [frontier.pop() for _ in range(3)] == nodes


# -- nodes --------------------------------------------------------------------


def test_node_path_runs_from_root() -> None:
    root = SearchNode(score=2, board=ONE_AWAY)
    leaf = root.child(4, GOAL)
    assert leaf.path == [ONE_AWAY, GOAL]
    assert leaf.depth == 1
    assert root.path == [ONE_AWAY]


# -- scoring ------------------------------------------------------------------


def test_cumulative_score_adds_parent_and_child_counts() -> None:
    solver = Solver(ONE_AWAY)
    root = SearchNode(score=2, board=ONE_AWAY)
    # 2 (parent score) + 0 (goal) + 2 (parent board)
    assert solver._score(root, 2, GOAL) == 4


def test_additive_score_is_depth_plus_misplaced() -> None:
    solver = Solver(ONE_AWAY, mode=ScoreMode.ADDITIVE)
    root = SearchNode(score=2, board=ONE_AWAY)
    assert solver._score(root, 2, GOAL) == 1


def test_mode_accepts_plain_string() -> None:
    assert Solver(ONE_AWAY, mode="additive").mode is ScoreMode.ADDITIVE


# -- statistics ---------------------------------------------------------------


def test_stats_for_one_move_board() -> None:
    solver = Solver(ONE_AWAY)
    solver.solve()
    assert solver.stats.iterations == 2
    assert solver.stats.expanded == 2
    # three children of the start, then the goal's one unexplored neighbour
    assert solver.stats.generated == 4
    assert solver.stats.elapsed >= 0.0


def test_solved_board_takes_one_iteration() -> None:
    solver = Solver(GOAL)
    assert solver.solve() == [GOAL]
    assert solver.stats.iterations == 1


# -- limits -------------------------------------------------------------------


def test_exhausted_frontier_raises() -> None:
    with pytest.raises(NoSolutionFoundError) as excinfo:
        Solver(UNSOLVABLE_2x2).solve()
    # 4!/2 boards share the start's parity class
    assert excinfo.value.explored == 12


def test_iteration_limit() -> None:
    limits = SearchLimits(max_iterations=50)
    with pytest.raises(NoSolutionFoundError) as excinfo:
        Solver(UNSOLVABLE_3x3, limits=limits).solve()
    assert excinfo.value.iterations == 51
    assert excinfo.value.explored <= 50


def test_time_limit() -> None:
    limits = SearchLimits(max_iterations=None, max_seconds=0.01)
    with pytest.raises(NoSolutionFoundError, match="time limit"):
        Solver(UNSOLVABLE_3x3, limits=limits).solve()


def test_cooperative_cancel() -> None:
    limits = SearchLimits(should_stop=lambda: True)
    with pytest.raises(NoSolutionFoundError, match="cancelled") as excinfo:
        Solver(ONE_AWAY, limits=limits).solve()
    assert excinfo.value.iterations == 1


def test_limit_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    limits = SearchLimits(max_iterations=5)
    with caplog.at_level(logging.WARNING, logger="eightpuzzle.engine.search"):
        with pytest.raises(NoSolutionFoundError):
            Solver(UNSOLVABLE_3x3, limits=limits).solve()
    assert "iteration limit" in caplog.text
