# dsalgo

Classic data structures and algorithms in plain Python, with no runtime
dependencies. Everything is a function or a class to import; the package has
no command-line interface and does not read input or print results.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.sorting` | `bubble_sort`, `bubble_sort_adaptive`, `insertion_sort`, `selection_sort`, `quick_sort`, `merge_sort`, `merge_sort_iterative`, `count_sort`, `shell_sort`, `bin_sort`, `radix_sort` |
| `dsalgo.heap` | `insert_max_heap`, `create_max_heap`, `delete_max_heap`, `heapify`, `heap_sort` |
| `dsalgo.hashing` | `ChainedHashTable`; open addressing with `LinearProbingTable`, `QuadraticProbingTable`, `DoubleHashingTable` |
| `dsalgo.recursion` | `factorial`, `fibonacci_iterative`, `fibonacci_recursive`, `fibonacci_memoized`, `n_choose_r`, `power`, `sum_of_naturals`, `taylor_exp`, `tower_of_hanoi`, `nested_recurrence` |
| `dsalgo.text` | `is_anagram`, `text_stats` (returns `TextStats`), `duplicate_counts`, `bitwise_duplicates`, `is_alphanumeric`, `string_length`, `is_palindrome`, `permutations`, `swap_permutations`, `reverse_string`, `toggle_case` |
| `dsalgo.bits` | `xor_swap`, `is_bit_set`, `set_bit`, `clear_bit`, `toggle_bit`, `remove_last_set_bit`, `is_power_of_two`, `count_set_bits`, `count_set_bits_kernighan`, `divide`, `min_bit_flips`, `single_number`, `power_set`, `xor_upto`, `xor_range`, `two_single_numbers` |
| `dsalgo.backtracking` | `subset_sums`, `subsets_with_duplicates`, `combination_sum`, `combination_sum_unique`, `palindrome_partitions`, `kth_permutation` |
| `dsalgo.bst` | `BinarySearchTree` with `insert`, `search`, `delete`, `height`, `inorder`, `from_preorder`; `Node` |
| `dsalgo.traversal` | `bfs` and `dfs` over an adjacency matrix |
| `dsalgo.graphs` | cycle detection (`has_cycle_undirected_bfs`, `has_cycle_undirected_dfs`, `has_cycle_directed_bfs`, `has_cycle_directed_dfs`), `topological_sort_bfs`, `topological_sort_dfs`, `count_distinct_islands`, `is_bipartite_bfs`, `is_bipartite_dfs` |
| `dsalgo.spanning_tree` | `prims_mst`, `kruskals_mst`, `Edge`, `DisjointSet` |
| `dsalgo.greedy` | `fractional_knapsack` (with `Item`), `min_coins`, `max_meetings`, `min_platforms`, `job_scheduling` (with `Job`), `merge_intervals`, `assign_cookies` |
| `dsalgo.sliding_window` | `longest_unique_substring`, `max_consecutive_ones`, `fruits_in_baskets`, `longest_repeating_replacement`, `binary_subarrays_with_sum`, `nice_subarrays`, `substrings_with_all_three`, `max_card_points` |
| `dsalgo.matrices` | `DiagonalMatrix`, `LowerTriangularMatrix`, `UpperTriangularMatrix` (1-based, compact storage), `set_matrix_zeroes` |
| `dsalgo.stacks` | `ArrayStack` (bounded), `LinkedStack`; `StackOverflowError`, `StackUnderflowError` |
| `dsalgo.expressions` | `is_balanced`, `infix_to_postfix`, `infix_to_postfix_associative`, `evaluate_postfix` |
| `dsalgo.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `TwoStackQueue`; `QueueOverflowError`, `QueueUnderflowError` |
| `dsalgo.linked_list` | `LinkedList`, `Node`, `has_loop` |
| `dsalgo.circular_doubly` | `CircularDoublyLinkedList` |

## Behaviour worth knowing

- The sorting functions and `heapify`/`heap_sort` take any iterable and return
  a new list; the input is left alone. `bubble_sort_adaptive` returns the
  sorted list together with the number of passes. `count_sort`, `bin_sort`
  and `radix_sort` raise `ValueError` on negative numbers.
- `insert_max_heap` and `delete_max_heap` work on a list in place;
  `delete_max_heap` raises `IndexError` on an empty heap.
- Lookups that miss raise `KeyError`: `ChainedHashTable.search`, the open
  addressing tables' `search`, `BinarySearchTree.search` and `delete`,
  `LinkedList.search` and `move_to_head`. The hash tables and the tree also
  support `in`.
- Open addressing `insert` returns the slot used and raises `OverflowError`
  when no slot on the probe sequence is free.
- Stacks and queues raise their overflow and underflow exceptions instead of
  returning a sentinel. `ArrayStack.peek` and `LinkedStack.peek` count
  positions from 1 at the top; iterating a stack goes from the top down.
- `ArrayQueue` never reuses a freed slot; `CircularQueue(size)` holds at most
  `size - 1` values.
- `topological_sort_bfs` and `topological_sort_dfs` raise `ValueError` on a
  cyclic graph; `prims_mst` and `kruskals_mst` raise `ValueError` on a
  disconnected one. `prims_mst` takes a square cost matrix with `math.inf`
  for missing edges.
- `evaluate_postfix` takes single-digit operands, truncates division toward
  zero and raises `ValueError` on a malformed expression.
  `infix_to_postfix_associative` handles parentheses and a right-associative
  `^`, and raises `ValueError` on unmatched parentheses.
- `LinkedList.insert` counts positions from 0, `LinkedList.delete_at` from 1.
  `concat` and `merge` move the other list's nodes and leave it empty.

## Examples

```python
from dsalgo.sorting import quick_sort
from dsalgo.heap import create_max_heap, delete_max_heap
from dsalgo.bst import BinarySearchTree
from dsalgo.expressions import infix_to_postfix, evaluate_postfix

quick_sort([10, 4, 2, 19, 6, 12, 5, 9])   # [2, 4, 5, 6, 9, 10, 12, 19]

heap = create_max_heap([10, 20, 30, 25, 5, 40, 35])
delete_max_heap(heap)                      # 40

tree = BinarySearchTree.from_preorder([30, 20, 10, 15, 25, 40, 50, 45])
tree.inorder()                             # [10, 15, 20, 25, 30, 40, 45, 50]
25 in tree                                 # True

infix_to_postfix("a+b*c")                  # "abc*+"
evaluate_postfix("234*+")                  # 14
```

```python
from dsalgo.stacks import ArrayStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    ...
```

```python
from dsalgo.hashing import LinearProbingTable

table = LinearProbingTable(10)
for key in (10, 15, 19, 25, 13):
    table.insert(key)
table.search(25)                           # 6
```