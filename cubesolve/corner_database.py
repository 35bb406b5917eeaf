"""Pattern database keyed on corner permutation and orientation."""

from __future__ import annotations

from typing import Protocol

from .pattern_database import PatternDatabase
from .permutation_indexer import PermutationIndexer


class _CornerCube(Protocol):
    def corner_index(self, i: int) -> int: ...

    def corner_orientation(self, i: int) -> int: ...


class CornerPatternDatabase(PatternDatabase):
    """Stores move counts for the 8! * 3^7 corner states of a cube.

    Cubes must offer ``corner_index(i)`` and ``corner_orientation(i)``
    for corners 0..7.
    """

    SIZE = 100_179_840
    _ORIENTATION_STATES = 2187

    def __init__(self, init_val: int = 0xFF) -> None:
        super().__init__(self.SIZE, init_val)
        self._perm_indexer = PermutationIndexer(8)

    def database_index(self, cube: _CornerCube) -> int:
        perm = [cube.corner_index(i) for i in range(8)]
        rank = self._perm_indexer.rank(perm)
        # The last corner's orientation follows from the other seven.
        orientation = 0
        for i in range(7):
            orientation = orientation * 3 + cube.corner_orientation(i)
        return rank * self._ORIENTATION_STATES + orientation