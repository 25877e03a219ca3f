"""Problems about divisors, greatest common divisors and Fibonacci numbers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def _is_multiple(digits: str, divisor: int) -> bool:
    remainder = 0
    for ch in digits:
        remainder = (remainder * 10 + int(ch)) % divisor
    return remainder == 0


def largest_common_divisor(a: int, b_digits: str) -> int:
    """Largest divisor of ``a`` that also divides the decimal number ``b_digits``.

    ``b_digits`` may be far too long for a machine integer, so it is reduced
    digit by digit.  The answer is at least 1.
    """
    if not b_digits or not b_digits.isdigit():
        raise ValueError("b_digits must be a non-empty string of decimal digits")
    best = 1
    i = 1
    while i * i <= a:
        if a % i == 0:
            if _is_multiple(b_digits, i):
                best = max(best, i)
            j = a // i
            if _is_multiple(b_digits, j):
                best = max(best, j)
        i += 1
    return best


def _primes_up_to(n: int) -> list[int]:
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytearray(len(range(p * p, n + 1, p)))
    return [p for p, flag in enumerate(sieve) if flag]


def _factorial_exponent(n: int, p: int) -> int:
    """Exponent of the prime ``p`` in ``n!``."""
    count = 0
    while n:
        n //= p
        count += n
    return count


def binomial_divisor_count(n: int, k: int) -> int:
    """Number of divisors of the binomial coefficient C(n, k)."""
    if k < 0 or k > n:
        raise ValueError("k must satisfy 0 <= k <= n")
    result = 1
    for p in _primes_up_to(n):
        exponent = (
            _factorial_exponent(n, p)
            - _factorial_exponent(k, p)
            - _factorial_exponent(n - k, p)
        )
        result *= exponent + 1
    return result


def largest_gcd_with_sum(parts: int, total: int) -> int:
    """Largest possible gcd of ``parts`` positive integers summing to ``total``."""
    if parts <= 0:
        raise ValueError("parts must be positive")
    d = total // parts
    if d <= 0:
        raise ValueError("total must be at least the number of parts")
    while total % d != 0:
        d -= 1
    return d


def max_pair_gcd(values: Sequence[int]) -> int:
    """Largest gcd over all pairs of elements of ``values``."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    if any(x <= 0 for x in values):
        raise ValueError("values must be positive")
    freq = Counter(values)
    largest = max(values)
    for divisor in range(largest, 0, -1):
        multiples = sum(freq[m] for m in range(divisor, largest + 1, divisor))
        if multiples >= 2:
            return divisor
    return 1


def count_non_divisible(values: Sequence[int]) -> int:
    """Count elements that occur once and are divisible by no other element."""
    present = set(values)
    has_one = 1 in present

    def stands_alone(x: int) -> bool:
        if x == 1:
            return True
        if has_one:
            return False
        for i in range(2, math.isqrt(x) + 1):
            if x % i == 0 and (i in present or x // i in present):
                return False
        return True

    return sum(
        1 for x, times in Counter(values).items() if times == 1 and stands_alone(x)
    )


def kth_common_divisor(a: int, b: int, k: int) -> int | None:
    """The ``k``-th largest common divisor of ``a`` and ``b``, or ``None``."""
    remaining = k
    for i in range(min(a, b), 0, -1):
        if a % i == 0 and b % i == 0:
            if remaining == 1:
                return i
            remaining -= 1
    return None


_Matrix = tuple[tuple[int, int], tuple[int, int]]


def _mat_mul(x: _Matrix, y: _Matrix, mod: int) -> _Matrix:
    return tuple(
        tuple(
            sum(x[i][t] * y[t][j] for t in range(2)) % mod for j in range(2)
        )
        for i in range(2)
    )  # type: ignore[return-value]


def _mat_pow(m: _Matrix, n: int, mod: int) -> _Matrix:
    if n == 1:
        return m
    half = _mat_pow(m, n // 2, mod)
    square = _mat_mul(half, half, mod)
    return square if n % 2 == 0 else _mat_mul(square, m, mod)


def fibonacci_gcd(a: int, b: int, mod: int) -> int:
    """gcd(F(a), F(b)) modulo ``mod``, using gcd(F(a), F(b)) = F(gcd(a, b))."""
    if mod <= 0:
        raise ValueError("mod must be positive")
    g = math.gcd(a, b)
    if g == 0:
        raise ValueError("a and b must not both be zero")
    base: _Matrix = ((1, 1), (1, 0))
    return _mat_pow(base, g, mod)[0][1]


def pisano_period(base: int) -> int:
    """Period of the Fibonacci sequence taken modulo ``base``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    f1, f2 = 0, 1
    count = 1
    while True:
        f1, f2 = f2, (f1 + f2) % base
        if f1 == 0 and f2 == 1:
            return count
        count += 1