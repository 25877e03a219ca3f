import math

from contestkit.geometry import are_collinear, count_triangles


def test_points_on_diagonal_are_collinear():
    assert are_collinear((0, 0), (1, 1), (5, 5)) is True


def test_corner_points_are_not_collinear():
    assert are_collinear((0, 0), (1, 0), (0, 1)) is False


def test_collinearity_ignores_order():
    pts = [(1, 2), (3, 7), (-2, 4)]
    expected = are_collinear(*pts)
    for perm in [(0, 2, 1), (1, 0, 2), (2, 1, 0)]:
        assert are_collinear(*(pts[i] for i in perm)) == expected


def test_all_collinear_points_give_no_triangle():
    points = [(i, 2 * i + 1) for i in range(6)]
    assert count_triangles(points) == 0


def test_square_corners():
    assert count_triangles([(0, 0), (0, 1), (1, 0), (1, 1)]) == 4


def test_too_few_points():
    assert count_triangles([(0, 0), (1, 1)]) == 0


def test_triangle_count_bounded_by_triples():
    points = [(0, 0), (1, 1), (2, 2), (0, 3), (4, 1)]
    assert count_triangles(points) <= math.comb(len(points), 3)