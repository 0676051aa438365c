"""Best-first search from a scrambled board to the goal board."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable

from eightpuzzle.engine.heuristic import misplaced
from eightpuzzle.engine.moves import successors
from eightpuzzle.errors import NoSolutionFoundError
from eightpuzzle.models.board import Board, goal_board, validate

LOGGER = logging.getLogger("eightpuzzle.engine.search")

# Every 3×3 search finishes well inside this; it only matters for larger boards.
DEFAULT_MAX_ITERATIONS = 1_000_000


class ScoreMode(StrEnum):
    """How a child node's score is derived from its parent's."""

    # parent score + misplaced(child) + misplaced(parent board)
    CUMULATIVE = "cumulative"
    # depth(child) + misplaced(child)
    ADDITIVE = "additive"


@dataclass(frozen=True)
class SearchLimits:
    """Bounds on a single :meth:`Solver.solve` call. ``None`` disables a bound."""

    max_iterations: int | None = DEFAULT_MAX_ITERATIONS
    max_seconds: float | None = None
    should_stop: Callable[[], bool] | None = None


@dataclass
class SearchStats:
    iterations: int = 0
    expanded: int = 0
    generated: int = 0
    elapsed: float = 0.0


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A scored partial path ending at :attr:`board`.

    The path is stored as parent links and rebuilt on demand.
    """

    score: int
    board: Board
    parent: SearchNode | None = None
    depth: int = 0

    def child(self, score: int, board: Board) -> SearchNode:
        return SearchNode(score=score, board=board, parent=self, depth=self.depth + 1)

    @property
    def path(self) -> list[Board]:
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


@dataclass
class Frontier:
    """Min-priority queue of nodes; equal scores pop in insertion order."""

    _heap: list[tuple[int, int, SearchNode]] = field(default_factory=list)
    _counter: itertools.count = field(default_factory=itertools.count)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.score, next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class Solver:
    """Solves one board. The board is validated on construction."""

    def __init__(
        self,
        board: Board,
        limits: SearchLimits | None = None,
        mode: ScoreMode = ScoreMode.CUMULATIVE,
    ) -> None:
        self.board = validate(board)
        self.goal = goal_board(board.size)
        self.limits = limits or SearchLimits()
        self.mode = ScoreMode(mode)
        self.stats = SearchStats()

    # -- scoring --------------------------------------------------------------

    def _score(self, parent: SearchNode, parent_h: int, candidate: Board) -> int:
        if self.mode is ScoreMode.ADDITIVE:
            return parent.depth + 1 + misplaced(candidate)
        return parent.score + misplaced(candidate) + parent_h

    # -- limits ---------------------------------------------------------------

    def _check_limits(self, started: float, explored: int) -> None:
        limits = self.limits
        iterations = self.stats.iterations
        reason: str | None = None
        if limits.max_iterations is not None and iterations > limits.max_iterations:
            reason = f"iteration limit of {limits.max_iterations} reached"
        elif limits.max_seconds is not None and time.monotonic() - started > limits.max_seconds:
            reason = f"time limit of {limits.max_seconds}s reached"
        elif limits.should_stop is not None and limits.should_stop():
            reason = "search cancelled"
        if reason is not None:
            LOGGER.warning("giving up: %s (explored=%d)", reason, explored)
            raise NoSolutionFoundError(
                f"No solution found: {reason}.",
                iterations=iterations,
                explored=explored,
            )

    # -- search ---------------------------------------------------------------

    def solve(self) -> list[Board]:
        """Return the board sequence from the starting board to the goal.

        Raises :class:`NoSolutionFoundError` when the frontier is exhausted
        or a limit in :attr:`limits` trips first.
        """
        self.stats = stats = SearchStats()
        started = time.monotonic()
        LOGGER.debug("solving %r (mode=%s)", self.board.flat(), self.mode.value)

        frontier = Frontier()
        frontier.push(SearchNode(score=misplaced(self.board), board=self.board))
        explored: set[Board] = set()

        try:
            while frontier:
                stats.iterations += 1
                self._check_limits(started, len(explored))

                node = frontier.pop()
                terminal = node.board
                if terminal in explored:
                    continue

                terminal_h = misplaced(terminal)
                for _, candidate in successors(terminal):
                    if candidate in explored:
                        continue
                    frontier.push(node.child(self._score(node, terminal_h, candidate), candidate))
                    stats.generated += 1

                explored.add(terminal)
                stats.expanded += 1

                if terminal == self.goal:
                    path = node.path
                    LOGGER.debug(
                        "solved in %d moves (iterations=%d, expanded=%d)",
                        len(path) - 1,
                        stats.iterations,
                        stats.expanded,
                    )
                    return path
        finally:
            stats.elapsed = time.monotonic() - started

        LOGGER.warning("frontier exhausted after %d iterations", stats.iterations)
        raise NoSolutionFoundError(
            "No solution found: every reachable board was explored.",
            iterations=stats.iterations,
            explored=len(explored),
        )


def solve(
    board: Board,
    limits: SearchLimits | None = None,
    mode: ScoreMode = ScoreMode.CUMULATIVE,
) -> list[Board]:
    """Solve *board* and return the path of boards ending at the goal."""
    return Solver(board, limits=limits, mode=mode).solve()
