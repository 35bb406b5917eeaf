"""Search strategies that find move sequences solving a cube.

The solvers work with any cube object that offers ``is_solved()``,
``move(m)`` and ``invert(m)`` for moves ``0..17``, compares by state with
``==`` and hashes by state. The cube handed to a solver is copied; the
solver's ``cube`` attribute holds its own state, solved after a
successful ``solve()``.
"""

from __future__ import annotations

import copy
import heapq
import itertools
import os
from collections import deque
from typing import Any, Protocol

from .corner_database import CornerPatternDatabase

MOVE_COUNT = 18


class NoSolutionError(Exception):
    """The search ended without reaching a solved cube."""


class _MoveCounts(Protocol):
    def get_num_moves(self, cube: Any) -> int: ...


def _expand(cube: Any):
    """Yield ``(move, child)`` for every move applied to a copy of ``cube``."""
    for move in range(MOVE_COUNT):
        child = copy.deepcopy(cube)
        child.move(move)
        yield move, child


def _trace_back(start: Any, solved: Any, move_done: dict[Any, int]) -> list[int]:
    """Rebuild the path from ``start`` to ``solved`` using back-pointers."""
    moves = []
    current = copy.deepcopy(solved)
    while not current == start:
        move = move_done[current]
        moves.append(move)
        current.invert(move)
    moves.reverse()
    return moves


class DFSSolver:
    """Depth-limited depth-first search, trying moves in order 0..17."""

    def __init__(self, cube: Any, max_search_depth: int = 8) -> None:
        self.cube = copy.deepcopy(cube)
        self.max_search_depth = max_search_depth

    def _dfs(self, depth: int, moves: list[int]) -> bool:
        if self.cube.is_solved():
            return True
        if depth > self.max_search_depth:
            return False
        for move in range(MOVE_COUNT):
            self.cube.move(move)
            moves.append(move)
            if self._dfs(depth + 1, moves):
                return True
            moves.pop()
            self.cube.invert(move)
        return False

    def solve(self) -> list[int]:
        """Return the first solution of at most ``max_search_depth`` moves."""
        moves: list[int] = []
        if not self._dfs(1, moves):
            raise NoSolutionError(
                f"no solution within {self.max_search_depth} moves"
            )
        return moves


class BFSSolver:
    """Breadth-first search; finds a shortest solution."""

    def __init__(self, cube: Any) -> None:
        self.cube = copy.deepcopy(cube)

    def _bfs(self, move_done: dict[Any, int]) -> Any:
        visited = {self.cube}
        queue = deque([self.cube])
        while queue:
            node = queue.popleft()
            if node.is_solved():
                return node
            for move, child in _expand(node):
                if child not in visited:
                    visited.add(child)
                    move_done[child] = move
                    queue.append(child)
        raise NoSolutionError("search space exhausted without a solution")

    def solve(self) -> list[int]:
        """Return a shortest move sequence that solves the cube."""
        move_done: dict[Any, int] = {}
        solved = self._bfs(move_done)
        moves = _trace_back(self.cube, solved, move_done)
        self.cube = solved
        return moves


class IDDFSSolver:
    """Iterative deepening: depth-first searches with growing depth limits."""

    def __init__(self, cube: Any, max_search_depth: int = 7) -> None:
        self.cube = copy.deepcopy(cube)
        self.max_search_depth = max_search_depth

    def solve(self) -> list[int]:
        """Return the first solution found at the smallest working depth."""
        for depth in range(1, self.max_search_depth + 1):
            dfs = DFSSolver(self.cube, depth)
            try:
                moves = dfs.solve()
            except NoSolutionError:
                continue
            self.cube = dfs.cube
            return moves
        raise NoSolutionError(f"no solution within {self.max_search_depth} moves")


class IDAstarSolver:
    """Best-first search bounded by a growing cost limit.

    ``database`` supplies a lower bound on the moves left for a cube
    through ``get_num_moves(cube)``.
    """

    _UNBOUNDED = 100

    def __init__(self, cube: Any, database: _MoveCounts) -> None:
        self.cube = copy.deepcopy(cube)
        self.database = database

    @classmethod
    def from_file(cls, cube: Any, path: str | os.PathLike[str]) -> IDAstarSolver:
        """Build a solver whose heuristic is a corner database read from ``path``."""
        if not os.path.isfile(path):
            raise FileNotFoundError(f"no pattern database at {os.fspath(path)}")
        database = CornerPatternDatabase()
        if not database.from_file(path):
            raise FileNotFoundError(f"cannot read pattern database {os.fspath(path)}")
        return cls(cube, database)

    def _search(self, bound: int, move_done: dict[Any, int]) -> tuple[Any, int]:
        """Return (solved cube, bound) on success, else (start cube, next bound)."""
        visited: set[Any] = set()
        order = itertools.count()
        start_estimate = self.database.get_num_moves(self.cube)
        heap = [(start_estimate, start_estimate, next(order), 0, 0, self.cube)]
        next_bound = self._UNBOUNDED
        while heap:
            _, _, _, depth, reached_by, cube = heapq.heappop(heap)
            if cube in visited:
                continue
            visited.add(cube)
            move_done[cube] = reached_by
            if cube.is_solved():
                return cube, bound
            depth += 1
            for move, child in _expand(cube):
                if child in visited:
                    continue
                estimate = self.database.get_num_moves(child)
                cost = estimate + depth
                if cost > bound:
                    next_bound = min(next_bound, cost)
                else:
                    heapq.heappush(
                        heap, (cost, estimate, next(order), depth, move, child)
                    )
        return self.cube, next_bound

    def solve(self) -> list[int]:
        """Return a move sequence that solves the cube."""
        bound = 1
        move_done: dict[Any, int] = {}
        found, result_bound = self._search(bound, move_done)
        while result_bound != bound:
            bound = result_bound
            move_done = {}
            found, result_bound = self._search(bound, move_done)
        if not found.is_solved():
            raise NoSolutionError(f"no solution within cost bound {bound}")
        moves = _trace_back(self.cube, found, move_done)
        self.cube = found
        return moves