"""Search problems: greedy scans, binary search, backtracking and BFS."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterable, Sequence


def a_to_z_span(text: str) -> int:
    """Length of the longest substring starting with 'A' and ending with 'Z'.

    Returns 0 when no such substring exists.
    """
    first_a = text.find("A")
    last_z = text.rfind("Z")
    if first_a == -1 or last_z == -1 or first_a >= last_z:
        return 0
    return last_z - first_a + 1


def min_colors(values: Iterable[int]) -> int:
    """Fewest colours so that each colour class is strictly increasing.

    Each value extends the class whose last element is the largest one still
    below it; otherwise it opens a new class.
    """
    tails: list[int] = []
    for x in values:
        i = bisect.bisect_left(tails, x)
        if i > 0:
            del tails[i - 1]
        bisect.insort(tails, x)
    return len(tails)


def _binary_search(values: Sequence[int], target: int) -> bool:
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return False


def count_self_found(n: int, m: int, a: int, c: int, x0: int) -> int:
    """Count elements that binary search finds in an unsorted generated sequence.

    The sequence is x[i] = (x[i-1] * a + c) mod m for i = 1..n, starting from x0.
    """
    if m <= 0:
        raise ValueError("m must be positive")
    generated: list[int] = []
    current = x0
    for _ in range(n):
        current = (current % m * a % m + c) % m
        generated.append(current)
    return sum(1 for x in generated if _binary_search(generated, x))


def count_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an n-by-n board."""
    if n <= 0:
        return 0
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            total += place(row + 1)
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return total

    return place(0)


def elevator_presses(
    floors: int, start: int, target: int, up: int, down: int
) -> int | None:
    """Fewest button presses to ride from ``start`` to ``target``.

    The up button moves ``up`` floors and the down button ``down`` floors,
    staying within floors 1..``floors``.  Returns ``None`` if unreachable.
    """
    queue: deque[tuple[int, int]] = deque([(start, 0)])
    seen = {start}
    while queue:
        floor, presses = queue.popleft()
        if floor == target:
            return presses
        for nxt in (floor - down, floor + up):
            if 1 <= nxt <= floors and nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, presses + 1))
    return None


def _is_sorted(perm: tuple[int, ...]) -> bool:
    return all(a <= b for a, b in zip((0, *perm), perm))


def permutation_sort_steps(perm: Sequence[int]) -> int | None:
    """Fewest operations to sort a permutation of length 2N.

    One operation swaps neighbouring pairs (1,2), (3,4), ...; the other swaps
    the two halves element by element.  Returns ``None`` if sorting is
    impossible.
    """
    if len(perm) % 2:
        raise ValueError("permutation length must be even")
    half = len(perm) // 2
    start = tuple(perm)
    queue: deque[tuple[tuple[int, ...], int]] = deque([(start, 0)])
    seen = {start}
    while queue:
        current, steps = queue.popleft()
        if _is_sorted(current):
            return steps
        paired = list(current)
        paired[0::2], paired[1::2] = current[1::2], current[0::2]
        halves = current[half:] + current[:half]
        for nxt in (tuple(paired), halves):
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return None


def _subset_sums(items: Iterable[int]) -> int:
    reach = 1
    for v in items:
        reach |= reach << v
    return reach


def disjoint_equal_sums(values: Sequence[int]) -> list[int]:
    """Every X for which two disjoint non-empty subsets both sum to X, ascending."""
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    if not values:
        return []
    first, rest = values[0], values[1:]
    found: set[int] = set()
    for mask in range(1 << len(rest)):
        group_one = [first]
        group_zero = []
        for bit, v in enumerate(rest):
            (group_one if mask >> bit & 1 else group_zero).append(v)
        common = _subset_sums(group_one) & _subset_sums(group_zero) & ~1
        while common:
            low = common & -common
            found.add(low.bit_length() - 1)
            common ^= low
    return sorted(found)


def reverse_segments(text: str, positions: Iterable[int]) -> str:
    """Apply segment reversals to ``text``.

    Each position x (1-based, with 2x at most the length) reverses the
    substring from x to len(text) - x + 1.
    """
    size = len(text)
    half = size // 2
    toggles = [0] * (half + 1)
    for x in positions:
        if x < 1 or 2 * x > size:
            raise ValueError(f"position out of range: {x}")
        toggles[x - 1] ^= 1
    chars = list(text)
    parity = 0
    for i in range(half):
        parity ^= toggles[i]
        if parity:
            chars[i], chars[size - 1 - i] = chars[size - 1 - i], chars[i]
    return "".join(chars)