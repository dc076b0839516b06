# dsakit

A library of classic algorithms and a few small data structures, written in
plain Python with no runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `pigeonhole_sort`, `counting_sort`, `tim_sort`, `sort_stack` |
| `dsakit.searching` | `binary_search`, `ternary_search`, `find_pivot`, `rotated_search`, `integer_sqrt`, `find_in_matrix` |
| `dsakit.graphs` | `Graph`, `bfs_distances`, `topological_sort`, `dijkstra`, `dijkstra_dense`, `floyd_warshall`, `articulation_points`, `tsp_min_cost` |
| `dsakit.backtracking` | `Move`, `n_queens_count`, `solve_maze`, `hanoi_moves` |
| `dsakit.matrix` | `hourglass_sum`, `count_negatives`, `set_zeroes` |
| `dsakit.trees` | `TreeNode`, `build_tree`, `preorder`, `inorder`, `postorder`, `level_order`, `max_width`, `zigzag` |
| `dsakit.expressions` | `postfix_to_infix`, `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix` |
| `dsakit.strings` | `longest_unique_substring`, `longest_palindromic_subsequence`, `longest_prefix_suffix`, `reverse_vowels`, `count_vowels_consonants`, `power_set`, `find_substring` |
| `dsakit.polynomial` | `Term`, `Polynomial` |
| `dsakit.median` | `median_of_sorted` |
| `dsakit.arrays` | `two_sum`, `four_sum`, `longest_arithmetic_subarray`, `max_subarray_sum`, `largest_rectangle`, `largest_rectangle_bruteforce`, `advantage_shuffle`, `next_greater_elements`, `min_product_subset` |
| `dsakit.mathutils` | `is_power_of_two`, `reverse_integer`, `is_armstrong`, `count_primes`, `factorial`, `fibonacci_sum`, `octal_to_decimal`, `egg_drop`, `coin_change_ways`, `coin_change_min` |
| `dsakit.paging` | `fifo_page_faults` |
| `dsakit.circularqueue` | `CircularQueue` |
| `dsakit.arraystack` | `ArrayStack` |

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.graphs import floyd_warshall
from dsakit.backtracking import hanoi_moves
from dsakit.expressions import infix_to_postfix
from dsakit.mathutils import fibonacci_sum
from dsakit.circularqueue import CircularQueue

merge_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 10, 40], 10)     # 3
binary_search([2, 3, 4, 10, 40], 7)      # None

floyd_warshall([[0, 5, None], [None, 0, 3], [None, None, 0]])
# [[0, 5, 8], [None, 0, 3], [None, None, 0]]

hanoi_moves(2)
# [Move(disk=1, source='A', target='B'),
#  Move(disk=2, source='A', target='C'),
#  Move(disk=1, source='B', target='C')]

infix_to_postfix("(a+b)*c+d/e")          # 'ab+c*de/+'
fibonacci_sum(0, 3)                      # 4

queue = CircularQueue(capacity=2)
queue.enqueue(1)
queue.enqueue(2)
queue.enqueue(3)                         # full, so the capacity doubles to 4
queue.dequeue()                          # 1
```

## Conventions

- Sorting functions accept any iterable and return a new sorted list; the
  input is left alone. `radix_sort` and `counting_sort` reject negative
  numbers with `ValueError`.
- Searches return an index (or a `(row, column)` pair) when they find the
  key and `None` when they do not.
- In the graph functions vertices are the integers `0 .. n-1`, and `None`
  stands for an unreachable distance or a missing edge, in inputs and
  results alike.
- `CircularQueue.dequeue`, `front` and `rear`, and `ArrayStack.pop` and
  `peek`, raise `IndexError` on an empty container instead of returning a
  sentinel value.
- Invalid arguments, such as a negative factorial or an empty sequence where
  a value is required, raise `ValueError`.

## What it does not do

dsakit is a library only: it has no command-line program. Apart from the
ring-buffer queue, the resizing stack and the binary-tree helpers, it offers
no general container types — no linked lists, tries, segment trees, sparse
tables or disjoint-set structures.