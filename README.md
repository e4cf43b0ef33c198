# dsakit

A library of classic algorithm and data-structure solutions, written as plain
Python functions that take ordinary lists, strings and small node classes.
It has no dependencies beyond the standard library.

## Installation

```
pip install dsakit
```

For running the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.knapsack` | coin change, subset sums, partitions, rod cutting, 0/1 and unbounded knapsack |
| `dsakit.dynamic` | square submatrices, expression evaluation orders, square streaks, grid moves, attendance records, longest palindromic substring, strange printer |
| `dsakit.backtracking` | unique splits, combination sum, N-queens, unique paths III, word search |
| `dsakit.searching` | median of sorted arrays, magnetic force, special array, extra element, integer square root |
| `dsakit.two_pointers` | grouping ones, subsequence appending, team division, next permutation, reversing, permutation in string, rescue boats |
| `dsakit.arrays` | height checker, relative sort, lucky numbers, matrix restoration, frequency sorts, lemonade change, robot simulation and more |
| `dsakit.strings` | common characters, palindromes, time differences, fraction addition, `my_atoi` and more |
| `dsakit.stacks` | boolean expression parsing, bracket balancing |
| `dsakit.graphs` | sub-islands, stone removal |
| `dsakit.linked_lists` | `ListNode`, `from_values`/`to_values`, rotations, splits, merges, spiral fill, loop detection |
| `dsakit.trees` | `TreeNode`, `NaryNode`, flip equivalence, post-order traversal |
| `dsakit.bits` | bit flips, maximum-AND subarrays, number complement |
| `dsakit.misc` | Padovan numbers, k-th bit, permutations, merge sort and other odds and ends |

Functions return new values rather than changing their arguments, except for
those documented as working in place (`sort_colors`, `next_permutation`,
`reverse_string`) and the linked-list functions, which relink the nodes they
are given. Input that a function cannot make sense of raises `ValueError`.

## Examples

```python
from dsakit.knapsack import coin_change
from dsakit.backtracking import solve_n_queens
from dsakit.bits import min_bit_flips
from dsakit.misc import padovan, process_filename
from dsakit.linked_lists import from_values, to_values, rotate_right

coin_change([1, 2, 5], 11)        # 3
len(solve_n_queens(4))            # 2
min_bit_flips(10, 12)             # 2
padovan(10)                       # 12
process_filename("my file.v2")    # "my_filev2.cpp"

head = from_values([1, 2, 3, 4, 5])
to_values(rotate_right(head, 2))  # [4, 5, 1, 2, 3]
```

## Command line

The `dsakit` command turns a title into a source file name: spaces become
underscores, dots are dropped and `.cpp` is appended. The title is taken from
the command's arguments, joined by spaces, or read as one line from standard
input when there are none.

```
dsakit my file.v2
```

prints `Processed string: my_filev2.cpp`.