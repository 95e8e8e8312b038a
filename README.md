# algosolve

Plain-Python solutions to classic algorithm problems, grouped by technique.
Functions take lists, strings and integers and return plain values. The
package has no dependencies beyond the standard library.

## Modules

- `algosolve.dynamic`: `climb_stairs`, `fib`, `rob`, `rob_circular`,
  `diff_ways_to_compute`, `length_of_lis`, `largest_divisible_subset`,
  `find_longest_chain`, `longest_str_chain`, `longest_common_subsequence`,
  `num_of_arrays`, `max_alternating_sum`, `min_extra_char`,
  `max_balanced_subsequence_sum`, and the constant `MOD` (10**9 + 7).
- `algosolve.graphs`: `DisjointSet` (union-find with `find` and `union`),
  `can_finish`, `find_order`, `find_min_height_trees`, `find_circle_num`,
  `network_delay_time`, `all_paths_source_target`, `possible_bipartition`,
  `equations_possible`, `smallest_equivalent_string`, `make_connected`,
  `count_paths`, `find_champion`.
- `algosolve.arrays`: `can_reach`, `decrypt`, `count_bad_pairs`,
  `lexicographically_smallest_array`, `query_results`, `results_array`.
- `algosolve.grids`: `exist`, `num_islands`, `sliding_puzzle`,
  `shortest_path_binary_matrix`, `minimum_obstacles`, `sort_matrix`.
- `algosolve.trees`: the `TreeNode` dataclass, `build_tree` and `tree_values`
  for converting to and from level-order lists (`None` for an absent child),
  `flip_equiv`, `deepest_leaves_sum`, `replace_value_in_tree`, and for trees
  given as edge lists or parent arrays `min_time`, `count_sub_trees`,
  `longest_path`.
- `algosolve.strings`: `shortest_palindrome`, `lexical_order`,
  `find_kth_number`, `is_prefix_of_word`, `max_unique_split`,
  `are_sentences_similar`, `remove_occurrences`, `min_swaps`,
  `sum_prefix_scores`, `min_length`, `longest_common_prefix`.
- `algosolve.structures`: `Calendar`, whose `book(start, end)` accepts
  non-overlapping half-open intervals, and `CircularDeque(k)`, a deque of at
  most `k` values with `insert_front`, `insert_last`, `delete_front`,
  `delete_last`, `front`, `rear`, `is_empty`, `is_full` and `len()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from algosolve.dynamic import climb_stairs, longest_common_subsequence
from algosolve.graphs import find_order
from algosolve.structures import CircularDeque
from algosolve.trees import build_tree, deepest_leaves_sum

climb_stairs(5)                                   # 8
longest_common_subsequence("abcde", "ace")        # 3
find_order(2, [[1, 0]])                           # [0, 1]

dq = CircularDeque(2)
dq.insert_last(1)
dq.insert_front(2)
dq.front(), dq.rear(), len(dq)                    # (2, 1, 2)

root = build_tree([1, 2, 3, 4, 5, None, 6])
deepest_leaves_sum(root)                          # 15
```

## Results and errors

Where a problem defines a "no answer" value, that value is returned: for
example `-1` from `network_delay_time`, `sliding_puzzle`,
`shortest_path_binary_matrix` and `make_connected`, an empty list from
`find_order`, and `False` from the `CircularDeque` insert and delete methods
when the deque is full or empty.

Input that does not fit the problem raises instead:

- `ValueError` from `max_balanced_subsequence_sum` on an empty sequence,
  `diff_ways_to_compute` on characters other than digits and `+ - *`,
  `equations_possible` on a malformed equation, `smallest_equivalent_string`
  when `s1` and `s2` differ in length, `sliding_puzzle` on a board that is not
  2x3, `shortest_path_binary_matrix`, `minimum_obstacles` and `sort_matrix` on
  an empty grid, `results_array` when `k < 1`, `remove_occurrences` on an empty
  `part`, and `CircularDeque` or `DisjointSet` given a negative size.
- `IndexError` from `CircularDeque.front` and `CircularDeque.rear` when the
  deque is empty.

## What it does not do

This is a library only: it has no command-line program, and it does not read
problem input from files or standard input.