import pytest

from contestkit.dp import (
    MOD,
    count_parity_subsets,
    max_alternating_pick,
    max_column_change_sum,
    min_total_deviation,
    min_tour_cost,
)


def test_alternating_single_column():
    assert max_alternating_pick([4], [9]) == max(4, 9)


def test_alternating_symmetric():
    a, b = [3, 8, 1, 6], [5, 2, 7, 4]
    assert max_alternating_pick(a, b) == max_alternating_pick(b, a)


def test_alternating_bounded_by_column_maxima():
    a, b = [3, 8, 1, 6], [5, 2, 7, 4]
    assert max_alternating_pick(a, b) <= sum(max(x, y) for x, y in zip(a, b))
    assert max_alternating_pick(a, b) >= max(a + b)


def test_alternating_length_mismatch():
    with pytest.raises(ValueError):
        max_alternating_pick([1, 2], [1])


def test_column_change_single_row():
    row = [4, 11, 7]
    assert max_column_change_sum([row]) == max(row)


def test_column_change_bounded():
    grid = [[1, 5, 3], [2, 9, 4], [6, 1, 8]]
    result = max_column_change_sum(grid)
    assert max(max(r) for r in grid) <= result <= sum(max(r) for r in grid)


def test_column_change_needs_columns():
    with pytest.raises(ValueError):
        max_column_change_sum([[]])


def test_tour_single_point():
    assert min_tour_cost([(3, 4)], []) == 0


def test_tour_only_a_points():
    assert min_tour_cost([(0, 0), (1, 0), (2, 0)], []) == 2


def test_tour_translation_invariant():
    a = [(0, 0), (2, 1), (5, 5)]
    b = [(1, 3), (4, 2)]
    shifted_a = [(x + 7, y - 3) for x, y in a]
    shifted_b = [(x + 7, y - 3) for x, y in b]
    assert min_tour_cost(a, b) == min_tour_cost(shifted_a, shifted_b)


def test_tour_impossible_to_end_on_a():
    with pytest.raises(ValueError):
        min_tour_cost([(0, 0)], [(1, 1)])


@pytest.mark.parametrize("k", [1, 2])
def test_deviation_constant_values(k):
    assert min_total_deviation([6, 6, 6], k) == pytest.approx(0.0)


@pytest.mark.parametrize("k", [1, 2])
def test_deviation_shift_invariant(k):
    values = [1, 4, 9, 10]
    shifted = [x + 100 for x in values]
    assert min_total_deviation(values, k) == pytest.approx(
        min_total_deviation(shifted, k)
    )


def test_deviation_empty():
    with pytest.raises(ValueError):
        min_total_deviation([], 1)


def test_parity_counts_cover_all_subsets():
    values = [1, 2, 3, 4, 5]
    total = count_parity_subsets(values, 0) + count_parity_subsets(values, 1)
    assert total == 2 ** len(values)


def test_parity_all_even_has_no_odd_subset():
    values = [2, 4, 6]
    assert count_parity_subsets(values, 1) == count_parity_subsets([], 1)
    assert count_parity_subsets(values, 0) == 2 ** len(values)


def test_parity_split_evenly_with_an_odd_element():
    values = [2, 3, 8, 10]
    assert count_parity_subsets(values, 0) == count_parity_subsets(values, 1)


def test_parity_reduced_modulo():
    values = [2] * 40
    assert count_parity_subsets(values, 0) == pow(2, 40, MOD)