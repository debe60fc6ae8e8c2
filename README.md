# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search`, `ternary_search` on ascending sequences; they return the index of the key, or `-1` |
| `dsakit.sorting` | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`; each returns a new ascending list |
| `dsakit.stacks` | bounded `Stack` (default capacity 5) with `push`, `pop`, `peek`, `is_empty`, `is_full`, raising `StackOverflowError` / `StackUnderflowError` |
| `dsakit.queues` | bounded `CircularQueue` and `TwoStackQueue` with `enqueue` and `dequeue`, raising `QueueFullError` / `QueueEmptyError` |
| `dsakit.linked_list` | `DoublyLinkedList` (`insert_begin`, `insert_end`, `delete_begin`, `delete_end`, forward and reversed iteration); singly linked `Node` chains via `build_chain`, `iter_chain` and `merge_sorted_lists` |
| `dsakit.polynomial` | `Polynomial` made of `Term`s, with `append`, `+` (terms in descending exponent order) and `str()` |
| `dsakit.sparse_matrix` | `to_triplets` giving `Entry(value, row, column)` items, `format_triplets`, `format_matrix` |
| `dsakit.graphs` | `bfs`, `dfs` over labelled adjacency matrices; `dijkstra` returning `ShortestPaths` with `path_to` |
| `dsakit.greedy` | `fractional_knapsack` with `Item`, `doubled_pair_sum`, `alternating_damage`, `collecting_rounds`, `distinct_count` |
| `dsakit.dp` | `array_descriptions`, `book_shop`, `coin_combinations_ordered`, `coin_combinations_unordered`, `dice_combinations`, `grid_paths`, `minimizing_coins`, `removing_digits`; counts are taken modulo `MOD` (10**9 + 7) |

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import merge_sort
from dsakit.stacks import Stack
from dsakit.graphs import bfs, dijkstra
from dsakit.greedy import Item, fractional_knapsack
from dsakit.dp import dice_combinations, minimizing_coins

binary_search([1, 3, 5, 7], 5)          # 2
merge_sort([75, -56, -21, 32])          # [-56, -21, 32, 75]

stack = Stack(5)
stack.push(100)
stack.pop()                             # 100

bfs(["a", "b", "c"], [[0, 1, 1], [1, 0, 0], [1, 0, 0]], "a")   # ['a', 'b', 'c']

paths = dijkstra([[0, 4, 1], [0, 0, 0], [0, 2, 0]], 0)
paths.path_to(1)                        # [0, 2, 1]

fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])  # 240.0

dice_combinations(3)                    # 4
minimizing_coins([5], 3)                # None
```

Operations that cannot succeed raise an exception instead of returning a
sentinel value: popping an empty stack, adding to a full queue, deleting from
an empty `DoublyLinkedList` (`IndexError`), or asking for a path to an
unreachable node (`NoPathError`). The two search functions are the exception:
they return `-1` when the key is absent.

## What it does not do

`dsakit` is a library only. It installs no command and reads nothing from
standard input or files; every function takes its data as Python arguments
and returns its result.

## Running the tests

```
pip install ".[test]"
pytest
```