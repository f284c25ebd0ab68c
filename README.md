# algolab

Classic algorithms and data structures in plain Python, for study and
experiment. There are no runtime dependencies.

## Modules

- `algolab.sorting`: `bubble_sort`, `insertion_sort` and `selection_sort`
  sort a list in place. `merge_sort(nums, left=0, right=None)` and
  `quick_sort(arr, left=0, right=None)` sort the closed range
  `[left, right]` in place. The whole list is sorted when `right` is left out.
- `algolab.search`: `binary_search` returns an index of the target or -1.
  `binary_search_insertion_simple` gives the insertion point for lists without
  duplicates. `binary_search_insertion` gives the leftmost insertion point.
  `interactive_search(instream, outstream)` prompts for a space-separated
  array and a target, then reports the result.
- `algolab.fibonacci`: `fibonacci(n)`, which is 0 for `n <= 0`.
- `algolab.greedy`: `coin_change_greedy(coins, amt)` takes the largest coin
  first. `coins` must be sorted ascending. The result is -1 when the greedy
  choice cannot reach the amount, and it is not always optimal.
- `algolab.backtracking`:
  - `n_queens(n)` returns boards as rows of `"Q"` and `"#"`.
  - `permutations_i` returns every permutation.
  - `permutations_ii` returns only the distinct permutations.
  - `subset_sum_i` lets each item be reused.
  - `subset_sum_ii` uses each item at most once and returns no duplicate
    subsets.
- `algolab.dp`:
  - `edit_distance(s, t)`.
  - Stair climbing in three forms: `climbing_stairs_backtrack`,
    `climbing_stairs_dfs` and `climbing_stairs_dp`.
  - 0-1 knapsack in three forms: `knapsack_dfs`, `knapsack_memo` and
    `knapsack_dp`.
  - `unbounded_knapsack_dp`.
  - Minimum path sum in three forms: `min_path_sum_dfs`, `min_path_sum_memo`
    and `min_path_sum_dp`.
  - Fewest coins: `coin_change_dp` and `coin_change_dp_compact`, which return
    -1 when the amount cannot be made.
  - Number of coin combinations: `coin_change_ii_dp` and
    `coin_change_ii_dp_compact`.
- `algolab.arrays`:
  - `insert` shifts the array right and keeps its length, so the last
    element is dropped.
  - `remove` shifts the array left.
  - `extend` returns a copy padded with zeros.
  - `random_access` returns an element chosen at random.
  - `array_demo()` prints a walk through these operations.
- `algolab.stacks`: `ArrayStack` and `LinkedListStack`. Both have `push`,
  `pop`, `peek`, `is_empty`, `to_list` and `len()`. `pop` and `peek` raise
  `IndexError` when the stack is empty.
- `algolab.queues`:
  - `ArrayQueue(capacity)` is a fixed-capacity ring buffer. Its `push`
    returns `False` and drops the value when the queue is full.
  - `LinkedListQueue` is unbounded.
  - `pop` and `peek` raise `IndexError` on an empty queue.
- `algolab.hashmaps`: both maps store `Pair` entries.
  - `ArrayHashMap` has 100 single-entry buckets. A key that collides
    replaces the entry already in its bucket. It offers `get`, `put`,
    `remove`, `pairs`, `keys` and `values`.
  - `HashMapChaining` chains entries within each bucket. It grows when the
    load factor passes 2/3, and offers `get`, `put`, `remove`,
    `load_factor` and `len()`.
  - In both maps, `get` raises `KeyError` for a missing entry.
- `algolab.linked_list`:
  - `LinkedList` has `append`, `delete`, `search`, `is_empty`, `clear`,
    iteration and `len()`. `delete` raises `ValueError` when the value is
    absent.
  - `list_demo(instream, outstream)` reads ten values, then one value to
    delete and one to search for.
- `algolab.trees`:
  - `TreeNode` with `level_order`, `pre_order`, `in_order` and `post_order`.
  - `ArrayBinaryTree`, a level-by-level list with `None` for empty slots. It
    has the same four traversals, plus `val`, `left`, `right` and `parent`.

## Example

```python
from algolab.sorting import quick_sort
from algolab.search import binary_search
from algolab.backtracking import permutations_i

arr = [3, 1, 2, 5, 4, 10]
quick_sort(arr)
print(arr)                        # [1, 2, 3, 4, 5, 10]
print(binary_search(arr, 5))      # 4
print(permutations_i([1, 2, 3]))
```

## Command line

```
algolab [sort|permutations|greedy|search]
```

Each choice runs one demonstration:

- `sort` quick-sorts a sample array and prints it. This is the default.
- `permutations` prints every permutation of `[1, 2, 3]`.
- `greedy` prints the greedy coin count for 63 with coins 1, 5, 10 and 25.
- `search` runs the interactive binary search on standard input.

`array_demo` and `list_demo` can be called from Python. They are not commands.

## Running the tests

```
pip install -e ".[test]"
pytest
```