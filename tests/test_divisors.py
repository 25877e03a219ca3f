import math

import pytest

from contestkit.divisors import (
    binomial_divisor_count,
    count_non_divisible,
    fibonacci_gcd,
    kth_common_divisor,
    largest_common_divisor,
    largest_gcd_with_sum,
    max_pair_gcd,
    pisano_period,
)


def _fib(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def _divisor_count(x):
    return sum(1 for d in range(1, x + 1) if x % d == 0)


@pytest.mark.parametrize("a,b", [(12, "18"), (100, "75"), (7, "49"), (30, "1001")])
def test_largest_common_divisor_matches_gcd(a, b):
    assert largest_common_divisor(a, b) == math.gcd(a, int(b))


def test_largest_common_divisor_huge_b():
    digits = "9" * 200
    result = largest_common_divisor(27, digits)
    assert result == math.gcd(27, int(digits))


def test_largest_common_divisor_rejects_bad_digits():
    with pytest.raises(ValueError):
        largest_common_divisor(10, "12a")


@pytest.mark.parametrize("n,k", [(4, 2), (10, 3), (12, 6), (7, 0), (9, 9)])
def test_binomial_divisor_count_matches_direct(n, k):
    assert binomial_divisor_count(n, k) == _divisor_count(math.comb(n, k))


def test_binomial_divisor_count_symmetry():
    for k in range(0, 21):
        assert binomial_divisor_count(20, k) == binomial_divisor_count(20, 20 - k)


def test_binomial_divisor_count_invalid():
    with pytest.raises(ValueError):
        binomial_divisor_count(3, 5)


@pytest.mark.parametrize("parts,total", [(3, 14), (1, 9), (4, 4), (5, 100)])
def test_largest_gcd_with_sum_invariants(parts, total):
    d = largest_gcd_with_sum(parts, total)
    assert total % d == 0
    assert d * parts <= total
    assert all(total % e != 0 for e in range(d + 1, total // parts + 1))


def test_largest_gcd_with_sum_too_small_total():
    with pytest.raises(ValueError):
        largest_gcd_with_sum(5, 3)


def test_max_pair_gcd_properties():
    values = [6, 9, 15, 4]
    g = max_pair_gcd(values)
    assert g == max(math.gcd(x, y) for i, x in enumerate(values) for y in values[i + 1:])


def test_max_pair_gcd_duplicate():
    assert max_pair_gcd([8, 8, 3]) == 8


def test_max_pair_gcd_needs_two():
    with pytest.raises(ValueError):
        max_pair_gcd([5])


def test_count_non_divisible_all_primes():
    values = [2, 3, 5, 7]
    assert count_non_divisible(values) == len(values)


def test_count_non_divisible_with_one():
    assert count_non_divisible([1, 4, 6]) == 1


def test_count_non_divisible_duplicates_excluded():
    assert count_non_divisible([5, 5, 7]) == 1


def test_kth_common_divisor_first_is_gcd():
    assert kth_common_divisor(48, 36, 1) == math.gcd(48, 36)


def test_kth_common_divisor_divides_both():
    for k in range(1, 7):
        d = kth_common_divisor(48, 36, k)
        assert 48 % d == 0 and 36 % d == 0


def test_kth_common_divisor_out_of_range():
    assert kth_common_divisor(7, 13, 2) is None


@pytest.mark.parametrize("a,b,mod", [(6, 9, 1000), (12, 18, 7), (20, 30, 10**9 + 7)])
def test_fibonacci_gcd_matches_definition(a, b, mod):
    assert fibonacci_gcd(a, b, mod) == math.gcd(_fib(a), _fib(b)) % mod


def test_fibonacci_gcd_zero_zero():
    with pytest.raises(ValueError):
        fibonacci_gcd(0, 0, 5)


@pytest.mark.parametrize("base", [2, 3, 7, 10, 11])
def test_pisano_period_invariant(base):
    p = pisano_period(base)
    assert _fib(p) % base == 0
    assert _fib(p + 1) % base == 1
    assert all(
        not (_fib(q) % base == 0 and _fib(q + 1) % base == 1) for q in range(1, p)
    )


def test_pisano_period_rejects_one():
    with pytest.raises(ValueError):
        pisano_period(1)