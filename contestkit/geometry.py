"""Integer point geometry."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

Point = Sequence[int]


def are_collinear(p1: Point, p2: Point, p3: Point) -> bool:
    """Whether three integer points lie on one line, using a cross product."""
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    return (y3 - y1) * (x2 - x1) == (y2 - y1) * (x3 - x1)


def count_triangles(points: Sequence[Point]) -> int:
    """Number of point triples that form a non-degenerate triangle."""
    return sum(
        1 for a, b, c in itertools.combinations(points, 3) if not are_collinear(a, b, c)
    )