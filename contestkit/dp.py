"""Dynamic-programming and small optimisation problems."""

from __future__ import annotations

import math
from collections.abc import Sequence

MOD = 10**9 + 7


def max_alternating_pick(first: Sequence[int], second: Sequence[int]) -> int:
    """Best total picking from two rows, never twice in a row from one row."""
    if len(first) != len(second):
        raise ValueError("rows must have the same length")
    end_first = end_second = 0
    for a, b in zip(first, second):
        end_first, end_second = (
            max(end_first, end_second + a),
            max(end_second, end_first + b),
        )
    return max(end_first, end_second)


def max_column_change_sum(grid: Sequence[Sequence[int]]) -> int:
    """Best sum taking at most one cell per row, never the same column twice in a row.

    A row may also be skipped, keeping the previous total for that column.
    """
    if not grid:
        width = 0
    else:
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("all rows must have the same length")
    if width == 0:
        raise ValueError("grid must have at least one column")

    # Index 0 stands for "nothing taken yet" and always holds zero.
    prev = [0] * (width + 1)
    for row in grid:
        ranked = sorted(range(width + 1), key=lambda k: prev[k], reverse=True)
        best, runner_up = ranked[0], ranked[1]
        cur = [0] * (width + 1)
        for j in range(1, width + 1):
            other = runner_up if best == j else best
            cur[j] = max(prev[j], prev[other] + row[j - 1])
        prev = cur
    return max(prev[1:])


def _dist(p: Sequence[int], q: Sequence[int]) -> int:
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def min_tour_cost(
    a_points: Sequence[Sequence[int]], b_points: Sequence[Sequence[int]]
) -> int:
    """Cheapest tour through both point lists in their own orders.

    The tour starts at the first A point and ends at the last A point; the
    cost of a step is the squared distance.
    """
    n, m = len(a_points), len(b_points)
    if n == 0:
        raise ValueError("at least one A point is required")
    inf = math.inf
    end_a: list[float] = []
    end_b: list[float] = []
    for i in range(1, n + 1):
        a_cur = a_points[i - 1]
        new_a = [inf] * (m + 1)
        new_b = [inf] * (m + 1)
        if i == 1:
            new_a[0] = 0
        for j in range(m + 1):
            if i > 1:
                via_a = end_a[j] + _dist(a_cur, a_points[i - 2])
                via_b = end_b[j] + _dist(a_cur, b_points[j - 1]) if j > 0 else inf
                new_a[j] = min(via_a, via_b)
            if j > 0:
                b_cur = b_points[j - 1]
                from_a = new_a[j - 1] + _dist(a_cur, b_cur)
                from_b = (
                    new_b[j - 1] + _dist(b_points[j - 2], b_cur) if j > 1 else inf
                )
                new_b[j] = min(from_a, from_b)
        end_a, end_b = new_a, new_b
    result = end_a[m]
    if math.isinf(result):
        raise ValueError("no tour ends at the last A point")
    return int(result)


def min_total_deviation(values: Sequence[int], k: int) -> float:
    """Smallest total deviation from a single chosen point.

    With ``k == 1`` the sum of absolute deviations about the median;
    otherwise the sum of squared deviations about the mean.
    """
    if not values:
        raise ValueError("at least one value is required")
    n = len(values)
    if k == 1:
        ordered = sorted(values)
        if n % 2 == 1:
            centre = float(ordered[n // 2])
        else:
            centre = (ordered[n // 2 - 1] + ordered[n // 2]) / 2.0
        return sum(abs(x - centre) for x in ordered)
    mean = sum(values) / n
    return sum((x - mean) ** 2 for x in values)


def count_parity_subsets(values: Sequence[int], parity: int) -> int:
    """Count subsets (the empty one included) with even (0) or odd sum, mod 1e9+7."""
    even, odd = 1, 0
    for x in values:
        if x % 2 == 0:
            even, odd = even * 2 % MOD, odd * 2 % MOD
        else:
            total = (even + odd) % MOD
            even, odd = total, total
    return even if parity == 0 else odd