# algodrills

Classic algorithm exercises as small, tested, pure-Python functions and
classes. It has no dependencies beyond the standard library. Each module
groups one family of techniques:

| Module | What it holds |
| --- | --- |
| `algodrills.binary_search` | `binary_search` (returns a `SearchResult` with `index`, `iterations` and `found`), `find_min_rotated`, `find_pivot`, `search_rotated`, `search_sorted_matrix`, `search_staircase_matrix`, `hours_to_eat`, `min_eating_speed`, `can_ship`, `ship_within_days`, `successful_pairs`, `is_perfect_square`, `integer_sqrt` |
| `algodrills.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `heap_sort`; each returns a new list |
| `algodrills.linked_list` | `Node` and `LinkedList` with 1-based `insert`, `remove`, `remove_first`, `remove_last`, plus `len`, `in` and iteration |
| `algodrills.two_pointers` | `partition_even_odd`, `move_zeroes`, `remove_duplicates`, `count_adjacent_swaps` |
| `algodrills.arrays` | `count_single_value_subarrays`, `product_except_self`, `find_duplicates`, `find_missing`, `prefix_sums`, `range_sum` |
| `algodrills.hashing` | `two_sum`, `is_anagram`, `contains_duplicate`, `contains_nearby_duplicate`, `top_k_frequent`, `intersection` |
| `algodrills.recursion` | `climb_stairs`, `climb_stairs_dp`, `fibonacci_upto` |
| `algodrills.strings` | `common_chars` |
| `algodrills.subarrays` | `count_max_at_least_k`, `count_binary_subarrays`, `longest_good_subarray`, `max_distinct_window_sum`, `max_almost_unique_sum`, `min_subarray_len`, `count_max_prefixes` |
| `algodrills.sliding_window` | `longest_ones`, `count_subarrays_with_sum`, `longest_k_distinct`, `longest_k_distinct_brute`, `min_operations_to_zero`, `max_window_sum`, `count_abc_substrings`, `longest_unique_substring` |
| `algodrills.tree` | `TreeNode`, `build_sample_tree`, and iterative `inorder`, `preorder`, `postorder`, `level_order` |
| `algodrills.stack_problems` | `baseball_score`, `decode_string`, `make_good`, `eval_rpn`, `is_valid_parentheses`, `reverse_parentheses`, `daily_temperatures` |
| `algodrills.containers` | `LinkedStack`, `QueueBackedStack`, `StackBackedQueue` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algodrills.binary_search import binary_search, min_eating_speed, search_rotated
from algodrills.sorting import merge_sort
from algodrills.stack_problems import decode_string, eval_rpn
from algodrills.tree import build_sample_tree, inorder

min_eating_speed([30, 11, 23, 4, 20], 6)      # 23
search_rotated([7, 8, 9, 1, 2, 3, 4, 5], 3)   # True
binary_search([1, 3, 5, 7], 7).index          # 3
merge_sort([9, 8, 76, 5, 4, 3, 2, 1])         # [1, 2, 3, 4, 5, 8, 9, 76]
decode_string("2[abc]3[cd]ef")                # "abcabccdcdcdef"
eval_rpn(["2", "1", "+", "3", "*"])           # 9
inorder(build_sample_tree())                  # [8, 4, 9, 2, 10, 5, 11, 1, ...]
```

The containers behave like ordinary Python collections:

```python
from algodrills.containers import LinkedStack

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.peek()   # 2
len(stack)     # 2
stack.pop()    # 2
```

Popping or peeking an empty container raises `IndexError`; invalid
arguments, such as a non-positive window size or an empty input where a
value is required, raise `ValueError`.

## What it does not do

This is a library only: there is no command-line program. The functions
return their answers and print nothing, so they do not show the
intermediate search spaces or stack contents step by step.