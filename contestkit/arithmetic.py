"""Number puzzles solved with direct arithmetic, greedy steps or counting."""

from __future__ import annotations

import itertools
import math
import re
from collections import Counter
from collections.abc import Iterable, Sequence

_INT_MAX_TEXT = str(2**31 - 1)
_LLONG_MAX_TEXT = str(2**63 - 1)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ROOT_TOLERANCE = 1e-9


def fibonacci_nim_move(n: int) -> int:
    """Smallest winning first move in Fibonacci nim with ``n`` stones.

    This is the smallest term of the Zeckendorf representation of ``n``.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    fibs = [1, 2]
    while fibs[-1] + fibs[-2] <= n:
        fibs.append(fibs[-1] + fibs[-2])
    smallest = n
    remaining = n
    for f in reversed(fibs):
        if f <= remaining:
            smallest = min(smallest, f)
            remaining -= f
    return smallest


def min_steps_to_equal(a: int, b: int) -> int:
    """Fewest steps 1, 2, 3, ... each added to either number to make them equal."""
    if a == b:
        return 0
    dist = abs(b - a)
    x = 1
    while x * (x + 1) // 2 < dist:
        x += 1
    while (x * (x + 1) // 2) % 2 != dist % 2:
        x += 1
    return x


def can_buy_cakes(n: int) -> bool:
    """Whether ``n`` dollars can be spent exactly on cakes at 4 and donuts at 7.

    Up to 100 of each item may be bought.
    """
    return any(
        4 * i + 7 * j == n for i in range(101) for j in range(101)
    )


def max_halving_steps(values: Iterable[int]) -> int:
    """Most steps possible: the total number of factors of two in the values."""
    steps = 0
    for x in values:
        if x <= 0:
            raise ValueError("values must be positive")
        while x % 2 == 0:
            x //= 2
            steps += 1
    return steps


def count_two_digit_numbers(n: int) -> int:
    """Count integers in [1, n] written with at most two distinct decimal digits."""
    if n < 1:
        raise ValueError("n must be positive")
    width = len(str(n))
    found: set[int] = set()
    for first, second in itertools.combinations("0123456789", 2):
        for length in range(1, width + 1):
            for digits in itertools.product((first, second), repeat=length):
                value = int("".join(digits))
                if 0 < value <= n:
                    found.add(value)
    return len(found)


def _add_root(roots: list[float], x: float) -> None:
    if not any(abs(x - r) < _ROOT_TOLERANCE for r in roots):
        roots.append(x)


def count_distinct_roots(equations: Iterable[Sequence[int]]) -> int | None:
    """Number of distinct real roots over equations ``a*x*x + b*x + c = 0``.

    Returns ``None`` when some equation holds for every ``x``.
    """
    roots: list[float] = []
    infinite = False
    for a, b, c in equations:
        if a == 0 and b == 0:
            if c == 0:
                infinite = True
        elif a == 0:
            _add_root(roots, -c / b)
        else:
            delta = b * b - 4 * a * c
            if delta == 0:
                _add_root(roots, -b / (2.0 * a))
            elif delta > 0:
                root = math.sqrt(delta)
                x1 = (-b + root) / (2.0 * a)
                x2 = (-b - root) / (2.0 * a)
                _add_root(roots, x1)
                _add_root(roots, x2)
    return None if infinite else len(roots)


def _is_large_integer_token(token: str) -> bool:
    if any(ch.isascii() and ch.isalpha() for ch in token):
        return False
    if not len(_INT_MAX_TEXT) <= len(token) <= len(_LLONG_MAX_TEXT):
        return False
    if len(token) == len(_INT_MAX_TEXT) and token <= _INT_MAX_TEXT:
        return False
    if len(token) == len(_LLONG_MAX_TEXT) and token > _LLONG_MAX_TEXT:
        return False
    return True


def sum_large_integers(tokens: Iterable[str]) -> int:
    """Sum the tokens that read as integers above 32 bits but within 64 bits.

    A kept token contributes the integer at its start.
    """
    total = 0
    for token in tokens:
        if _is_large_integer_token(token):
            match = _LEADING_INT.match(token)
            if match is None:
                raise ValueError(f"token does not start with an integer: {token!r}")
            total += int(match.group(1))
    return total


def ac_string_char(k: int) -> str:
    """The ``k``-th character (1-based) of the recursively built 'a'/'c' string.

    S(0) is "acc" and S(n) is S(n-1), "a", n+2 copies of "c", then S(n-1).
    """
    if k < 1:
        raise ValueError("k must be positive")
    lengths = [3]
    while lengths[-1] < k:
        n = len(lengths)
        lengths.append(2 * lengths[-1] + n + 3)
    n = len(lengths) - 1
    while n > 0:
        a_pos = lengths[n - 1] + 1
        if k == a_pos:
            return "a"
        if k > lengths[n - 1] + n + 3:
            k -= lengths[n - 1] + n + 3
        elif k < a_pos:
            pass
        else:
            return "c"
        n -= 1
    return "a" if k == 1 else "c"


def count_divisible_subarrays(values: Iterable[int], k: int) -> int:
    """Count contiguous subarrays whose sum is a multiple of ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    seen: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for x in values:
        total += x
        r = total % k
        count += seen[r]
        seen[r] += 1
    return count