# contestkit

A collection of solutions to classic programming-contest problems. Each one is
a plain Python function that takes ordinary Python values (integers, lists,
strings, tuples) and returns its answer. The package has no dependencies beyond
the standard library and supports Python 3.10 and later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `contestkit.cf` | Short greedy and sorting problems: `can_craft`, `find_permutation`, `card_order`, `count_pairs_with_sum`, `can_make_non_decreasing`, `find_trapezoid`, `can_transform` |
| `contestkit.dp` | Dynamic programming and small optimisation: `max_alternating_pick`, `max_column_change_sum`, `min_tour_cost`, `min_total_deviation`, `count_parity_subsets` |
| `contestkit.divisors` | Divisors, GCDs and Fibonacci numbers: `largest_common_divisor`, `binomial_divisor_count`, `largest_gcd_with_sum`, `max_pair_gcd`, `count_non_divisible`, `kth_common_divisor`, `fibonacci_gcd`, `pisano_period` |
| `contestkit.arithmetic` | Number puzzles: `fibonacci_nim_move`, `min_steps_to_equal`, `can_buy_cakes`, `max_halving_steps`, `count_two_digit_numbers`, `count_distinct_roots`, `sum_large_integers`, `ac_string_char`, `count_divisible_subarrays` |
| `contestkit.sequences` | Array, stack and window problems: `can_form_polygon`, `zigzag_arrange`, `min_equalize_operations`, `count_prefix_minima`, `longest_balanced_selection`, `quicksort_pivots`, `sum_second_maximums`, `longest_triangle_window`, `count_anagram_pairs`, `common_element`, `surface_area`, `parity_merge_operations`, `final_power_of_two`, `second_place_candidate` |
| `contestkit.search` | Greedy scans, binary search, backtracking and breadth-first search: `a_to_z_span`, `min_colors`, `count_self_found`, `count_queens`, `elevator_presses`, `permutation_sort_steps`, `disjoint_equal_sums`, `reverse_segments` |
| `contestkit.graphs` | `DisjointSet` (union-find over 1..n with `find`, `union` and `size`), `largest_group`, `connectivity_after_deletions`, `count_distinct_in_ranges` |
| `contestkit.geometry` | `are_collinear`, `count_triangles` |
| `contestkit.modular` | `min_operations_non_decreasing` |

## Examples

```python
from contestkit.search import count_queens
from contestkit.arithmetic import fibonacci_nim_move
from contestkit.divisors import pisano_period
from contestkit.graphs import DisjointSet, largest_group

count_queens(8)          # 92
fibonacci_nim_move(10)   # 2, the smallest term of 10 = 8 + 2
pisano_period(10)        # 60

groups = DisjointSet(5)
groups.union(1, 2)       # True
groups.union(2, 3)       # True
groups.union(1, 3)       # False, already in one set
groups.size(1)           # 3

largest_group(5, [(1, 2), (2, 3)])   # 3
```

## Answers and errors

Where a problem can have no answer, the function says so in its return value,
as its docstring states:

- `None` from `card_order`, `find_trapezoid`, `kth_common_divisor`,
  `common_element`, `second_place_candidate`, `elevator_presses` and
  `permutation_sort_steps`; `count_distinct_roots` returns `None` when some
  equation holds for every `x`;
- `False` from the yes/no checks such as `can_craft`, `can_transform` or
  `can_buy_cakes`;
- `0` from counts and lengths such as `a_to_z_span` or
  `parity_merge_operations`.

Where the input itself is unusable (mismatched lengths, out-of-range values,
empty input where at least one item is needed), the function raises
`ValueError`.

## What it does not do

contestkit is a library only. It installs no command-line program and nothing
in it reads from standard input or prints results; you call a function and use
what it returns. Parsing contest-style input files and formatting output is
left to the caller.