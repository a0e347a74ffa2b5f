# algonotes

A compact library of classic algorithms and data structures, written for
reading, experimenting and studying. Every routine is a plain function or a
small class working on ordinary Python values: lists, strings and integers.
It has no third-party dependencies and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.trees` | `TreeNode`. Recursive and iterative pre-, in- and post-order traversals (`preorder`, `inorder`, `postorder`, `preorder_iterative`, `inorder_iterative`, `postorder_two_stacks`, `postorder_one_stack`). `all_in_one_traversal` returns all three orders from one stack pass. Also `boundary_traversal`, `is_leaf`, `height`, `diameter` (longest path through the root, in edges), `is_identical`, `max_path_sum` and `zigzag_levels`. |
| `algonotes.bst` | `BSTNode` and `FrequencyTree`, a binary search tree with `insert`, `search`, `add` (counts repeats) and `inorder` (value/frequency pairs). |
| `algonotes.linked_lists` | `ListNode` with `next` and `bottom` links. `from_values`, `to_list`, `build_multilevel`, `bottom_values`, `merge_bottom`, `flatten` (merges the sorted columns of a multilevel list) and `merge_sorted` (merges in place). |
| `algonotes.dynamic_array` | `StepVector`, whose capacity grows five slots at a time, and `DoublingArray`, whose capacity doubles. Both expose `capacity`. |
| `algonotes.searching` | `lower_bound`, `binary_search`, `partition` (Lomuto), in-place `quicksort` and `three_way_partition`. |
| `algonotes.bits` | `is_odd`, `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bit_range`, `max_xor_in_range`, `two_unique_elements`, `count_set_bits`, `total_set_bits` and `bits32` (32-bit two's complement string). |
| `algonotes.primes` | `count_almost_primes` and `PrimeSieve`, which sieves up to a limit and uses trial division above it. Also `segmented_primes`, `primes_below`, `write_primes` (appends to a text file) and `read_numbers`. |
| `algonotes.numeric` | `cubic`, `bisect_root`, `mod_pow`, `matrix_power` (modulo 1 000 000 007), `palindromic_prefix_sums` and `chefora`. |
| `algonotes.arrays` | `distinct_window_counts`, `sliding_window_max`, `smallest_subarray_over`, `majority_element`, `majority_elements_ii`, `palindrome_merge_operations`, `RangeSum` (prefix-sum range queries) and `occurrences`. |
| `algonotes.recursion` | 0/1 knapsack (`knapsack_recursive`, `knapsack`), `subsets_divisible`, `string_subsets` and `combination_sums`. |
| `algonotes.problems` | Small contest problems: `or_matrix`, `single_segment`, `RegistrationSystem`, `all_zero`, `weekly_max`, `smallest_uniform_base`, `digit_sum`, `min_notes`, `count_ending_239`, `streak_broken` and `Greeter`. |
| `algonotes.text` | `parse_attributes` (tag attribute parser), `precedence`, `infix_to_postfix` and `polynomial_hash`. |

## Examples

```python
from algonotes.text import infix_to_postfix
from algonotes.arrays import sliding_window_max, majority_element
from algonotes.primes import PrimeSieve, count_almost_primes
from algonotes.recursion import knapsack
from algonotes.problems import RegistrationSystem

infix_to_postfix("a+b*c")                          # 'abc*+'
sliding_window_max([1, 3, -1, -3, 5, 3, 6, 7], 3)  # [3, 3, 5, 5, 6, 7]
majority_element([2, 2, 1, 1, 2])                  # 2
count_almost_primes(10)                            # 2  (6 and 10)

sieve = PrimeSieve(100)
sieve.is_prime(97)                                 # True

knapsack([1, 3, 4], [15, 20, 30], 4)               # 35

names = RegistrationSystem()
names.register("first")                            # 'OK'
names.register("first")                            # 'first1'
```

Errors are reported with exceptions: for example `bisect_root` raises
`ValueError` when the function does not change sign over the interval, and
`infix_to_postfix` raises `ValueError` for unbalanced parentheses.

## What it does not do

The package is a library only. It installs no command-line programs and
reads nothing from standard input; each routine takes its input as Python
arguments and returns its result. The only file access is `write_primes` and
`read_numbers` in `algonotes.primes`.