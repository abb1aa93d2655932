# algokit

A collection of classic algorithm routines written as plain Python
functions, grouped by the kind of data they work on. There are no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Conventions

- Functions return new values unless stated otherwise. The ones that
  change their input in place are `rotate_matrix`, `next_permutation`,
  `remove_duplicates`, `remove_element` and `invert_tree`; the linked-list
  functions relink the nodes they are given.
- Invalid input raises `ValueError` (for example a non-square matrix in
  `rotate_matrix`, a pattern starting with `*` in `is_match`, a non-digit
  in `multiply_strings`). `divide` raises `ZeroDivisionError` for a zero
  divisor, and `QueueStack.pop` and `QueueStack.top` raise `IndexError`
  on an empty stack.
- Several integer routines (`divide`, `reverse_integer`, `atoi`) keep to
  the signed 32-bit range: `divide` and `atoi` clamp to it, while
  `reverse_integer` returns 0 when the result falls outside it.

## Modules

- `algokit.linked_list`: `ListNode` (a dataclass node that iterates over
  its values), `build_list`, `add_two_numbers`, `get_intersection_node`,
  `merge_two_lists`, `remove_elements`, `remove_nth_from_end`,
  `rotate_right`, `swap_pairs`.
- `algokit.binary_tree`: `TreeNode`, `build_tree` (from level-order values
  with `None` for missing nodes), `is_balanced`, `inorder_traversal`,
  `preorder_traversal`, `postorder_traversal`, `count_nodes`,
  `invert_tree`, `min_depth`, `has_path_sum`.
- `algokit.sums`: `two_sum`, `three_sum`, `three_sum_closest`, `four_sum`,
  `max_area`.
- `algokit.queue_stack`: `QueueStack`, a last-in, first-out stack backed
  by a double-ended queue, with `push`, `pop`, `top` and `len()`.
- `algokit.grids`: `insert_interval`, `merge_intervals`, `rotate_matrix`,
  `generate_spiral_matrix`, `spiral_order`, `is_valid_sudoku`.
- `algokit.combinatorics`: `combination_sum`, `combination_sum2`,
  `generate_parentheses`, `letter_combinations`, `permute`,
  `permute_unique`, `next_permutation`.
- `algokit.text`: `longest_palindrome`, `count_and_say`,
  `find_first_occurrence`, `group_anagrams`, `is_isomorphic`,
  `longest_common_prefix`, `length_of_longest_substring`,
  `is_valid_parentheses`, `zigzag_convert`, `edit_distance`, `is_match`,
  `multiply_strings`.
- `algokit.arithmetic`: `divide`, `title_to_number`, `convert_to_title`,
  `is_happy`, `int_to_roman`, `roman_to_int`, `is_palindrome_number`,
  `power`, `reverse_integer`, `int_sqrt`, `atoi`, `pascal_row`.
- `algokit.arrays`: `contains_nearby_duplicate`, `search_range`, `jump`,
  `can_jump`, `majority_element`, `remove_duplicates`, `remove_element`,
  `search_rotated`, `search_insert`, `summary_ranges`.

## Example

```python
from algokit.linked_list import build_list, add_two_numbers
from algokit.text import edit_distance
from algokit.arithmetic import int_to_roman
from algokit.grids import merge_intervals

print(list(add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))))
# [7, 0, 8]
print(edit_distance("horse", "ros"))  # 3
print(int_to_roman(1994))  # MCMXCIV
print(merge_intervals([[1, 3], [2, 6], [8, 10]]))  # [[1, 6], [8, 10]]
```

## What it does not do

The package is a library only: it installs no command-line program, and
its functions work on in-memory Python values without reading or writing
files.