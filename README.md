# dailyalgo

A small library of classic algorithms. Each one is a plain function or class
that works on ordinary Python lists, strings and simple node objects. Only the
standard library is needed.

## Install

```
pip install .
pip install ".[test]"   # adds pytest, to run the tests
```

## Modules

- `dailyalgo.pairs`: two-pointer problems.
  - `count_triplets` and `count_pairs_with_sum` take sorted input.
  - `count_pairs_below`, `closest_pair_sum` and `count_triangles` sort a copy of their input first.
  - `trapped_water` computes trapped rain water.
  - `max_water_container` finds the container with the most water.
- `dailyalgo.subarrays`: prefix sums, hashing and sliding windows.
  - `group_anagrams` groups words that are anagrams of each other.
  - `count_subarrays_with_sum` and `count_subarrays_with_xor` count subarrays by sum or by XOR.
  - `find_subarray_with_sum` returns 1-based bounds, or `[-1]` when no subarray matches.
  - `count_distinct_in_windows` counts the distinct values in each window.
  - `longest_unique_substring`, `equilibrium_index`, `longest_subarray_with_sum`, `longest_balanced_binary` and `product_except_self`.
  - `window_maxima` returns the maximum of each window.
  - `longest_bounded_subarray` finds the longest subarray whose values stay within a given spread.
  - The window functions raise `ValueError` for a window size that is out of range.
- `dailyalgo.linked_list`: `ListNode` (`data`, `next`, `random`), with `build_list` and `to_values` for converting between lists and nodes.
  - `reverse_list`, `rotate`, `merge_sorted` and `reverse_in_groups`.
  - `add_numbers` adds two numbers stored with the most significant digit first.
  - `clone_random_list` copies a list along with its `random` links.
  - `has_loop`, `find_loop_start` and `remove_loop` detect, locate and break loops.
  - `merge_k_lists` merges any number of sorted lists.
- `dailyalgo.lru`: `LRUCache(capacity)`.
  - `get` returns `-1` for a missing key.
  - `put` evicts the least recently used entry when the cache is full.
  - Supports `len()` and `in`.
- `dailyalgo.backtracking`:
  - `unique_permutations` lists the distinct arrangements of a string's characters.
  - `power` raises a number to an integer exponent by repeated squaring.
  - `n_queens` gives each solution as a list of 1-based column numbers, one per row.
  - `solve_sudoku` fills a 9x9 grid in place and returns `True` when it finds a solution.
  - `word_exists` searches a grid of letters for a word.
- `dailyalgo.binary_tree`: `TreeNode` (`data`, `left`, `right`).
  - Traversals: `level_order`, `inorder` and `boundary_traversal`.
  - Shape: `height`, `diameter` and `mirror`.
  - `build_tree` rebuilds a tree from its inorder and preorder traversals.
  - Paths: `max_path_sum` and `count_paths_with_sum`.
  - Binary search trees: `is_bst`, `kth_smallest`, `has_pair_with_sum`, `correct_bst` (repairs two swapped values) and `lowest_common_ancestor`.
  - `serialize` and `deserialize` use level order, with `-1` marking a missing child.
- `dailyalgo.heaps`:
  - `k_largest` returns the values in descending order.
  - `k_closest` returns the points nearest the origin.
  - `running_medians` returns the median of every prefix.
- `dailyalgo.stacks`:
  - `MinStack` has `push`, `pop`, `peek` and `min`. The last three raise `IndexError` when the stack is empty.
  - `is_balanced` and `longest_valid_parentheses` check brackets.
  - `next_greater`, `stock_span`, `largest_rectangle` and `max_of_min_windows`.
  - `evaluate_rpn` evaluates reverse Polish notation; integer division truncates toward zero.
  - `decode_string` expands nested `k[text]` repetitions.

## Examples

```python
from dailyalgo.stacks import decode_string, MinStack
from dailyalgo.linked_list import build_list, reverse_list, to_values
from dailyalgo.lru import LRUCache

decode_string("3[b2[ca]]")                        # "bcacabcacabcaca"
to_values(reverse_list(build_list([1, 2, 3])))    # [3, 2, 1]

stack = MinStack()
stack.push(5)
stack.push(2)
stack.min()                                        # 2

cache = LRUCache(2)
cache.put(1, 10)
cache.get(1)                                       # 10
cache.get(7)                                       # -1
```

## Command line

`geekbits` prints how many days it takes to collect a number of geekBits. You
earn one geekBit a day, and every eighth day brings a bonus of eight more. Give
the number as an argument. If you leave it out, `geekbits` asks for it:

```
geekbits 20
geekbits
```

If the input is not a whole number, `geekbits` prints an error and exits with
status 1.