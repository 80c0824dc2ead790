# dsakit

A small library of classic data structures and algorithms in plain Python.
It has no third-party dependencies.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `counting_sort`, `shell_sort`, `modified_shell_sort`, `radix_sort`, `count_inversions` |
| `dsakit.searching` | `linear_search`, `binary_search` |
| `dsakit.stacks` | `FixedStack`, `BoundedStack`, `KeyedStack`, `StackOverflow`, `StackUnderflow` |
| `dsakit.expressions` | `precedence`, `infix_to_postfix`, `infix_to_prefix`, `postfix_to_infix`, `prefix_to_infix` |
| `dsakit.linked_lists` | `SinglyLinkedList`, `PatientRegistry`, `Patient`, `Date`, `DigitList`, `DuplicateKeyError` |
| `dsakit.circular_queue` | `CircularQueue`, `QueueEmpty` |
| `dsakit.brackets` | `check_brackets` |
| `dsakit.trees` | `Node`, `preorder`, `inorder`, `postorder`, `level_order`, `insert_left_first`, `prune_leaf`, `tree_height` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.hashing` | `PresenceTable`, `ChainedHashTable` |
| `dsakit.open_addressing` | `LinearProbingMap`, `QuadraticProbingMap`, `DoubleHashTable`, `HashMapFull` |
| `dsakit.graphs` | `GraphMatrix` (directed), `GraphList` (undirected) |
| `dsakit.greedy` | `refills_between_stations`, `min_refills`, `maximum_loot`, `largest_number` |
| `dsakit.dynamic` | `money_change`, `max_gold`, `repetitive_knapsack`, `max_expression_value` |
| `dsakit.divide_conquer` | `has_majority`, `count_segments` |

## Examples

```python
from dsakit.sorting import merge_sort, count_inversions
from dsakit.expressions import infix_to_postfix
from dsakit.bst import BinarySearchTree
from dsakit.greedy import largest_number

merge_sort([5, 2, 9, 1])            # [1, 2, 5, 9]
count_inversions([2, 3, 9, 2, 9])   # 2
infix_to_postfix("a+b*c")           # "abc*+"

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()                      # [20, 30, 40, 50, 70]
40 in tree                          # True

largest_number(["21", "2"])         # "221"
```

## Notes on behaviour

- Every sort takes an iterable and returns a new list; the input is left
  untouched. `counting_sort` accepts integers in `0 .. value_range - 1`
  (10 by default) and `radix_sort` accepts non-negative integers; both raise
  `ValueError` otherwise.
- `modified_shell_sort` makes one compare-and-swap sweep per gap and does not
  guarantee a fully sorted result for every input.
- `linear_search` and `binary_search` return an index, or `None` when the
  value is absent.
- `FixedStack` has five integer slots; `BoundedStack` takes its capacity when
  created. Pushing onto a full stack raises `StackOverflow`; popping an empty
  one raises `StackUnderflow`.
- `check_brackets` returns the 1-based position of the first bracket error,
  or `None` when the brackets balance.
- `money_change` uses coins `(1, 3, 4)` by default and returns `None` when an
  amount cannot be made.
- Containers raise `KeyError`, `DuplicateKeyError`, `QueueEmpty`,
  `HashMapFull` or `IndexError` when an operation cannot be carried out.

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus; every structure lives in memory and nothing is stored to disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```