"""Problems over sequences: stacks, sliding windows, counting and sorting."""

from __future__ import annotations

import bisect
import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence


def can_form_polygon(values: Sequence[int]) -> bool:
    """Whether the longest side is shorter than the sum of all the others."""
    if not values:
        raise ValueError("at least one value is required")
    longest = max(values)
    return sum(values) - longest > longest


def zigzag_arrange(values: Sequence[int]) -> list[int]:
    """Arrange values by appending even positions and prepending odd ones.

    The result is read front to back when its length is even and back to
    front otherwise.
    """
    arranged: deque[int] = deque()
    for index, x in enumerate(values):
        if index % 2 == 0:
            arranged.append(x)
        else:
            arranged.appendleft(x)
    if len(arranged) % 2 == 0:
        return list(arranged)
    return list(reversed(arranged))


def min_equalize_operations(values: Sequence[int], k: int) -> int:
    """Fewest window-minimum operations of width ``k`` to make a permutation constant.

    Each operation sets ``k`` consecutive elements to their minimum; the
    whole sequence ends up equal to 1.
    """
    if k < 2:
        raise ValueError("k must be at least 2")
    try:
        position = list(values).index(1) + 1
    except ValueError:
        raise ValueError("values must contain 1") from None
    n = len(values)
    step = k - 1
    return (n - position + step - 1) // step + (position - 1 + step - 1) // step


def count_prefix_minima(values: Sequence[int]) -> int:
    """Count elements no larger than every element before them."""
    count = 0
    smallest: int | None = None
    for x in values:
        if smallest is None or x <= smallest:
            count += 1
            smallest = x
    return count


def longest_balanced_selection(first: Sequence[int], second: Sequence[int]) -> int:
    """Largest number of index pairs whose first sum is at least their second sum."""
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    gains = sorted((a - b for a, b in zip(first, second)), reverse=True)
    balance = 0
    count = 0
    for gain in gains:
        balance += gain
        if balance < 0:
            break
        count += 1
    return count


def quicksort_pivots(values: Sequence[int]) -> list[int]:
    """Elements at least every earlier element and below every later one.

    These are the elements a quicksort partition could have used as pivot.
    The source problem prints the count and at most the first 100 of them.
    """
    n = len(values)
    suffix_min: list[int | None] = [None] * (n + 1)
    for i in range(n - 1, -1, -1):
        later = suffix_min[i + 1]
        suffix_min[i] = values[i] if later is None else min(values[i], later)
    pivots = []
    prefix_max: int | None = None
    for i, x in enumerate(values):
        later = suffix_min[i + 1]
        if (prefix_max is None or x >= prefix_max) and (later is None or x < later):
            pivots.append(x)
        prefix_max = x if prefix_max is None else max(prefix_max, x)
    return pivots


def sum_second_maximums(values: Sequence[int]) -> int:
    """Sum of the second largest element over all subarrays of length at least two.

    Intended for permutations (distinct values).
    """
    n = len(values)
    p = [0, *values, 0]
    right = [n + 1] * (n + 2)
    stack: list[int] = []
    for i in range(n, 0, -1):
        while stack and p[stack[-1]] <= p[i]:
            stack.pop()
        if stack:
            right[i] = stack[-1]
        stack.append(i)
    left = [0] * (n + 2)
    stack = []
    for i in range(1, n + 1):
        while stack and p[stack[-1]] <= p[i]:
            stack.pop()
        if stack:
            left[i] = stack[-1]
        stack.append(i)

    total = 0
    for i in range(1, n + 1):
        if left[i] == 0 and right[i] == n + 1:
            continue
        far = left[i] - 1 if left[i] else 0
        far2 = right[i] + 1 if right[i] != n + 1 else n + 1
        while far > 0 and p[far] < p[i]:
            far = left[far]
        while far2 < n + 1 and p[far2] < p[i]:
            far2 = right[far2]
        total += p[i] * (left[i] - far) * (right[i] - i)
        total += p[i] * (far2 - right[i]) * (i - left[i])
    return total


def longest_triangle_window(values: Sequence[int]) -> int:
    """Length of the longest window found where any three elements form a triangle.

    A window qualifies when its two smallest elements sum to more than its
    largest; the window slides, dropping its first element on failure.
    """
    window: list[int] = []
    start = 0
    best = 0
    for end, x in enumerate(values):
        bisect.insort(window, x)
        if len(window) >= 3:
            if window[0] + window[1] > window[-1]:
                best = max(best, end - start + 1)
            else:
                del window[bisect.bisect_left(window, values[start])]
                start += 1
    return best


def count_anagram_pairs(words: Iterable[str]) -> int:
    """Number of unordered pairs of words that are anagrams of each other."""
    groups = Counter("".join(sorted(word)) for word in words)
    return sum(f * (f - 1) // 2 for f in groups.values())


def common_element(lists: Sequence[Iterable[int]]) -> int | None:
    """Smallest value present in every list, or ``None``."""
    seen: Counter[int] = Counter()
    for index, items in enumerate(lists):
        for x in items:
            if seen[x] == index:
                seen[x] += 1
    common = [x for x, times in seen.items() if times == len(lists)]
    return min(common) if common and lists else None


def surface_area(grid: Sequence[Sequence[int]]) -> int:
    """Total surface area of stacks of unit cubes with the given heights."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    top_and_bottom = 2 * sum(1 for row in grid for h in row if h != 0)

    def sides(line: Sequence[int]) -> int:
        return line[0] + line[-1] + sum(abs(b - a) for a, b in zip(line, line[1:]))

    by_rows = sum(sides(row) for row in grid)
    by_columns = sum(sides(column) for column in zip(*grid))
    return top_and_bottom + by_rows + by_columns


def parity_merge_operations(values: Iterable[int]) -> int:
    """Operations spent merging the smallest even into the largest odd number.

    While evens remain, the smallest even ``e`` and largest odd ``o`` are
    combined: if ``e > o`` the odd one is replaced by ``e + o``; otherwise the
    even one is consumed and ``e + o`` joins the odds.  Returns 0 when the
    numbers are all of one parity.
    """
    odds: list[int] = []
    evens: list[int] = []
    for x in values:
        if x % 2 == 0:
            evens.append(x)
        else:
            odds.append(-x)
    if not odds or not evens:
        return 0
    heapq.heapify(odds)
    heapq.heapify(evens)
    operations = 0
    while evens:
        odd = -odds[0]
        even = evens[0]
        operations += 1
        if even > odd:
            heapq.heapreplace(odds, -(even + odd))
        else:
            heapq.heappop(evens)
            heapq.heappush(odds, -(even + odd))
    return operations


def final_power_of_two(values: Iterable[int | str]) -> int:
    """Largest number left after merging equal neighbours in a stack of powers of two.

    Values smaller than the incoming one are discarded, equal ones merge into
    their double, and the bottom of the stack is returned.
    """
    stack: list[int] = []
    for raw in values:
        x = int(raw)
        while stack and stack[-1] < x:
            stack.pop()
        while stack and stack[-1] == x:
            stack.pop()
            x += x
        stack.append(x)
    if not stack:
        raise ValueError("at least one value is required")
    return stack[0]


def second_place_candidate(votes: Iterable[int]) -> int | None:
    """Candidate with the second highest vote count, smallest number on ties.

    Returns ``None`` when every candidate received the same number of votes.
    """
    tally = Counter(votes)
    if not tally:
        raise ValueError("at least one vote is required")
    ranked = sorted(tally.items(), key=lambda item: (-item[1], item[0]))
    if ranked[0][1] == ranked[-1][1]:
        return None
    top = ranked[0][1]
    return next(candidate for candidate, count in ranked if count != top)