"""Small counting helpers used for indexing permutations."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return n!; 0! and 1! are both 1."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n: {n}")
    result = 1
    for value in range(2, n + 1):
        result *= value
    return result


def pick(n: int, k: int) -> int:
    """Return nPk, the number of ordered selections of k items from n."""
    if k < 0 or k > n:
        raise ValueError(f"cannot pick {k} items from {n}")
    return factorial(n) // factorial(n - k)


def choose(n: int, k: int) -> int:
    """Return nCk, or 0 when k exceeds n."""
    if k < 0:
        raise ValueError(f"cannot choose a negative number of items: {k}")
    if n < k:
        return 0
    return factorial(n) // (factorial(n - k) * factorial(k))