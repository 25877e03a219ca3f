"""Sorting a sequence with cyclic increments modulo m."""

from __future__ import annotations

from collections.abc import Sequence


def _feasible(values: Sequence[int], m: int, cost: int) -> bool:
    previous = 0
    for a in values:
        reach = min(m, a + cost)
        wrapped = (a + cost) % m if a + cost >= m else -1
        if previous <= wrapped:
            continue
        if previous > reach:
            return False
        previous = max(a, previous)
    return True


def min_operations_non_decreasing(values: Sequence[int], m: int) -> int:
    """Fewest operations making ``values`` non-decreasing.

    One operation adds one, modulo ``m``, to any chosen set of elements; the
    answer is the smallest number of increments any element needs.
    """
    if m <= 0:
        raise ValueError("m must be positive")
    if any(not 0 <= v < m for v in values):
        raise ValueError("values must lie in [0, m)")
    low, high = 0, m
    answer = m + 1
    while low <= high:
        mid = (low + high) // 2
        if _feasible(values, m, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer