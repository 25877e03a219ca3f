"""Disjoint sets and the connectivity problems built on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class DisjointSet:
    """Union-find over the elements 1..n with union by size and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._n = n

    def _check(self, u: int) -> None:
        if not 1 <= u <= self._n:
            raise ValueError(f"element out of range: {u}")

    def find(self, u: int) -> int:
        """Representative of the set holding ``u``."""
        self._check(u)
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._parent[y] = x
        self._size[x] += self._size[y]
        return True

    def size(self, u: int) -> int:
        """Number of elements in the set holding ``u``."""
        return self._size[self.find(u)]


def largest_group(n: int, pairs: Iterable[tuple[int, int]]) -> int:
    """Size of the largest group after joining every given pair among 1..n."""
    if n < 1:
        raise ValueError("n must be positive")
    groups = DisjointSet(n)
    for a, b in pairs:
        groups.union(a, b)
    return max(groups.size(u) for u in range(1, n + 1))


def connectivity_after_deletions(
    n: int, edges: Iterable[tuple[int, int]], order: Sequence[int]
) -> list[bool]:
    """Whether the graph is connected before each deletion in ``order``.

    The first entry is for the whole graph; entry i is for the graph left
    after deleting the first i vertices of ``order``, a permutation of 1..n.
    """
    if sorted(order) != list(range(1, n + 1)):
        raise ValueError("order must be a permutation of 1..n")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for x, y in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge out of range: {(x, y)}")
        adjacency[x].append(y)
        adjacency[y].append(x)

    groups = DisjointSet(n)
    present = [False] * (n + 1)
    components = 0
    answers: list[bool] = []
    for vertex in reversed(order):
        present[vertex] = True
        components += 1
        for other in adjacency[vertex]:
            if present[other] and groups.union(vertex, other):
                components -= 1
        answers.append(components == 1)
    answers.reverse()
    return answers


def count_distinct_in_ranges(
    values: Sequence[int], queries: Sequence[tuple[int, int]]
) -> list[int]:
    """Number of distinct values in each 1-based inclusive range ``(left, right)``."""
    n = len(values)
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"query out of range: {(left, right)}")

    tree = [0] * (n + 1)

    def add(i: int, delta: int) -> None:
        while i <= n:
            tree[i] += delta
            i += i & -i

    def prefix(i: int) -> int:
        total = 0
        while i > 0:
            total += tree[i]
            i -= i & -i
        return total

    answers = [0] * len(queries)
    by_right = sorted(range(len(queries)), key=lambda q: queries[q][1])
    last_seen: dict[int, int] = {}
    position = 0
    for q in by_right:
        left, right = queries[q]
        while position < right:
            position += 1
            x = values[position - 1]
            if x in last_seen:
                add(last_seen[x], -1)
            last_seen[x] = position
            add(position, 1)
        answers[q] = prefix(right) - prefix(left - 1)
    return answers