"""Solutions to a handful of short greedy and sorting problems."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import cmp_to_key


def can_craft(have: Sequence[int], need: Sequence[int]) -> bool:
    """Decide whether the materials in ``have`` can be turned into ``need``.

    Only the material with the largest shortage may be raised; every other
    material must keep a surplus at least as large as that shortage.
    """
    if len(have) != len(need):
        raise ValueError("have and need must have the same length")
    if not have:
        raise ValueError("at least one material is required")
    surplus = [a - b for a, b in zip(have, need)]
    shortage = [b - a for a, b in zip(have, need)]
    worst = max(range(len(shortage)), key=shortage.__getitem__)
    return all(
        value >= shortage[worst]
        for index, value in enumerate(surplus)
        if index != worst
    )


def find_permutation(matrix: Sequence[str]) -> list[int]:
    """Recover a permutation from its adjacency matrix of '0'/'1' characters.

    An edge between values ``x < y`` means ``x`` stands before ``y``.
    The permutation is returned with 1-based values.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")

    def before(x: int, y: int) -> bool:
        if x < y:
            return matrix[x][y] == "1"
        return matrix[x][y] == "0"

    def compare(x: int, y: int) -> int:
        if x == y:
            return 0
        if before(x, y):
            return -1
        if before(y, x):
            return 1
        return 0

    return [v + 1 for v in sorted(range(n), key=cmp_to_key(compare))]


def card_order(decks: Sequence[Sequence[int]]) -> list[int] | None:
    """Find the order in which cows must play so every card beats the last.

    Each deck is sorted; decks are ordered by their smallest card and every
    column must then rise by exactly one from deck to deck.  Returns the
    1-based deck numbers in playing order, or ``None`` if no order works.
    """
    if not decks:
        raise ValueError("at least one deck is required")
    width = len(decks[0])
    if width == 0 or any(len(deck) != width for deck in decks):
        raise ValueError("decks must be non-empty and of equal size")

    ordered = sorted(
        ((sorted(deck), number) for number, deck in enumerate(decks, start=1)),
        key=lambda item: item[0][0],
    )
    for (prev, _), (cur, _) in zip(ordered, ordered[1:]):
        if any(c != p + 1 for p, c in zip(prev, cur)):
            return None
    return [number for _, number in ordered]


def count_pairs_with_sum(values: Sequence[int], k: int) -> int:
    """Count disjoint pairs summing to ``k`` formed greedily over sorted values."""
    seen: Counter[int] = Counter()
    pairs = 0
    for x in sorted(values):
        if seen[k - x] > 0:
            pairs += 1
            seen[k - x] -= 1
            seen[x] -= 1
        seen[x] += 1
    return pairs


def can_make_non_decreasing(values: Sequence[int]) -> bool:
    """Decide whether subtracting the smaller neighbour can sort the sequence."""
    remaining = list(values)
    for i in range(len(remaining) - 1):
        if remaining[i] > remaining[i + 1]:
            return False
        remaining[i + 1] -= remaining[i]
    return True


def find_trapezoid(sticks: Sequence[int]) -> tuple[int, int, int, int] | None:
    """Pick four sticks forming an isosceles trapezoid, or ``None``.

    The first two returned sticks are the equal legs.
    """
    if len(sticks) < 4:
        raise ValueError("at least four sticks are required")
    counts = Counter(sticks)
    ordered = sorted(sticks, key=lambda x: (-counts[x], x))
    leg = ordered[0]
    if ordered[0] == ordered[1] and ordered[2] == ordered[3]:
        return ordered[0], ordered[1], ordered[2], ordered[3]
    if ordered[0] != ordered[1]:
        return None
    for shorter, longer in zip(ordered[2:], ordered[3:]):
        if 2 * leg + shorter > longer:
            return leg, leg, shorter, longer
    return None


def can_transform(source: Sequence[int], target: Sequence[int]) -> bool:
    """Decide whether ``source`` can be merged into ``target``.

    Two numbers differing by at most one may be merged into their sum.  The
    check works backwards, splitting the largest target value into its two
    halves whenever it cannot be matched against the largest source value.
    Values are expected to be positive.
    """
    pool = [-x for x in source]
    wanted = [-x for x in target]
    heapq.heapify(pool)
    heapq.heapify(wanted)
    while wanted:
        if len(wanted) > len(pool):
            return False
        x = -heapq.heappop(wanted)
        if -pool[0] == x:
            heapq.heappop(pool)
        else:
            heapq.heappush(wanted, -(x // 2))
            heapq.heappush(wanted, -(x - x // 2))
    return not pool