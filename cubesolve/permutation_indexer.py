"""Lexicographic ranking of (partial) permutations."""

from __future__ import annotations

from collections.abc import Sequence

from .combinatorics import pick


class PermutationIndexer:
    """Ranks k-permutations of the digits 0..n-1 in lexicographic order."""

    def __init__(self, n: int, k: int | None = None) -> None:
        if k is None:
            k = n
        if n <= 0 or not 0 < k <= n:
            raise ValueError(f"invalid permutation shape n={n}, k={k}")
        self.n = n
        self.k = k
        # Place values of the Lehmer code digits, most significant first.
        self._weights = [pick(n - 1 - i, k - 1 - i) for i in range(k)]

    def rank(self, perm: Sequence[int]) -> int:
        """Return the lexicographic index of ``perm``."""
        if len(perm) != self.k:
            raise ValueError(f"expected {self.k} digits, got {len(perm)}")
        seen = 0
        index = 0
        for digit, weight in zip(perm, self._weights):
            if not 0 <= digit < self.n:
                raise ValueError(f"digit {digit} out of range 0..{self.n - 1}")
            bit = 1 << digit
            if seen & bit:
                raise ValueError(f"digit {digit} repeated in permutation")
            smaller_seen = bin(seen & (bit - 1)).count("1")
            seen |= bit
            index += (digit - smaller_seen) * weight
        return index