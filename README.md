# algokit

A small library of solutions to well-known algorithm puzzles, written in plain
Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `algokit.linked`: `ListNode` (a dataclass with `val` and `next`; iterating
  over a node yields the values from it to the end of the list), `build_list`,
  `merge_two_lists`, `reverse_list`, `add_two_numbers`,
  `is_palindrome_linked_list`
- `algokit.trees`: `TreeNode` (a dataclass with `val`, `left` and `right`),
  `binary_tree_paths`, `has_path_sum`
- `algokit.numbers`: `add_strings`, `climb_stairs`, `reverse_integer`, `fib`,
  `is_power_of_two`, `is_power_of_three`, `is_power_of_four`, `int_sqrt`,
  `plus_one`, `single_number`, `roman_to_int`, `is_palindrome_number`
- `algokit.text`: `is_anagram`, `length_of_last_word`, `longest_common_prefix`,
  `is_palindrome_string`, `is_valid_parentheses`, `str_str`
- `algokit.arrays`: `max_profit`, `max_sub_array`, `merge`, `search_insert`,
  `remove_duplicates`, `two_sum`, `two_sum_sorted`
- `algokit.combinatorics`: `group_anagrams`, `letter_combinations`,
  `generate_parenthesis`, `three_sum`, `largest_number`
- `algokit.sequences`: `can_jump`, `daily_temperatures`, `max_area`,
  `length_of_longest_substring`, `longest_palindrome`, `is_valid_sudoku`

## Examples

```python
from algokit.linked import build_list, merge_two_lists, reverse_list
from algokit.numbers import add_strings, roman_to_int
from algokit.combinatorics import letter_combinations

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list(merged)                    # [1, 1, 2, 3, 4, 4]
reversed_head = reverse_list(build_list([1, 2, 3]))
list(reversed_head)             # [3, 2, 1]

add_strings("456", "77")        # "533"
roman_to_int("MCMXCIV")         # 1994
letter_combinations("23")       # ["ad", "ae", "af", "bd", ...]
```

## Things to know

- `merge` and `remove_duplicates` change the list they are given; the caller
  reads the result from it. `merge_two_lists` and `reverse_list` relink the
  nodes they are given rather than copying them.
- `build_list([])` returns `None`, the empty list.
- `two_sum` returns `[]` when no pair is found; `two_sum_sorted` returns
  1-based positions, or `[0, 0]` when no pair is found.
- `ValueError` is raised for input the functions cannot work on:
  `add_two_numbers` given `None`, `longest_common_prefix`, `max_profit`,
  `max_sub_array`, `search_insert` and `largest_number` given an empty list,
  `roman_to_int` given a character that is not a Roman numeral,
  `group_anagrams` given a word with anything but lowercase latin letters, and
  `is_valid_sudoku` given more than 9 rows or a row of more than 9 cells.
- `is_valid_sudoku` takes the board as rows of strings or as lists of single
  characters, with `"."` for an empty cell.

## What it does not do

algokit is a library only: it has no command-line program, and it does not
read puzzles from files or store results anywhere.