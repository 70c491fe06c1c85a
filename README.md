# algokit

A collection of well-known algorithm routines, written as plain Python
functions and a few small classes. It uses only the standard library.

## Installation

```
pip install .
```

## Modules

### `algokit.arrays`

- `max_area(height)`: largest water area between two vertical lines;
  raises `ValueError` for an empty sequence.
- `three_sum(nums)`: all distinct ascending triples summing to zero, in
  sorted order.
- `max_profit(prices)`: best gain from one buy and one later sale, or 0.
- `two_sum_sorted(numbers, target)`: 1-based positions of two entries of a
  sorted sequence that add up to `target`, or `[]`.
- `product_except_self(nums)`: product of every other entry, without
  division.
- `top_k_frequent(nums, k)`: the `k` most frequent values, most frequent
  first; a negative `k` returns every distinct value by frequency.
- `binary_search(nums, target)`: index of `target` in an ascending sequence,
  or -1.
- `last_stone_weight(stones)`: weight of the stone left after repeatedly
  smashing the two heaviest together, or 0.
- `get_concatenation(nums)`: `nums` followed by itself.

### `algokit.strings`

- `length_of_longest_substring(s)`: longest run with no repeated character.
- `group_anagrams(strs)`: anagram groups in order of first appearance.
- `is_palindrome_text(s)`: palindrome check ignoring case and anything that
  is not an ASCII letter or digit.
- `is_anagram(s, t)`: whether `t` uses exactly the letters of `s`.
- `judge_circle(moves)`: whether a walk of `U`/`D`/`L`/`R` steps returns to
  the start; other characters are ignored.
- `get_lucky(s, k)`: spell a lowercase string as alphabet positions and sum
  the digits `k` times.

### `algokit.numbers`

- `is_palindrome_number(x)`: negatives are never palindromes.
- `is_happy(n)`: whether summing squared digits reaches 1; raises
  `ValueError` for a negative `n`.
- `find_complement(num)`: flip the bits of `num` within its width.
- `self_dividing_numbers(left, right)`: numbers in the closed range
  divisible by each of their (non-zero) digits.
- `number_of_steps(num)`: steps to reach zero by halving or decrementing;
  raises `ValueError` for a negative `num`.
- `count_operations(num1, num2)`: subtractions until one number is zero;
  raises `ValueError` for negative input.
- `harshad_digit_sum(x)`: the digit sum if it divides `x`, else -1; raises
  `ValueError` for a negative `x` and `ZeroDivisionError` for 0.

### `algokit.matrix`

- `is_valid_sudoku(board)`: no repeated digit in any row, column or 3x3 box;
  `'.'` marks an empty cell.
- `set_zeroes(matrix)`: zero, in place, every row and column holding a zero.
- `search_matrix(matrix, target)`: search a matrix whose rows, read in turn,
  ascend.
- `max_increase_keeping_skyline(grid)`: total height that can be added to a
  square grid without changing its skylines; raises `ValueError` if the grid
  is not square.
- `maximum_wealth(accounts)`: largest customer total, or 0.

### `algokit.combinatorics`

- `combination_sum(candidates, target)`: every combination reaching
  `target`, candidates reusable; raises `ValueError` for a candidate that is
  not positive.
- `combination_sum_unique(candidates, target)`: distinct ascending
  combinations, each candidate used at most once.
- `subsets(nums)`: every subset of `nums`.

### `algokit.stacks`

- `MinStack`: `push(val)`, `pop()` (no-op when empty), `top()` (0 when
  empty), `get_min()` (raises `IndexError` when empty) and `len()`.
- `is_valid_parentheses(s)`: correctly nested `()[]{}`; strings shorter
  than two characters and any other characters are invalid.
- `eval_rpn(tokens)`: evaluate integer reverse Polish notation, division
  truncating toward zero; raises `ValueError` for a malformed expression and
  `ZeroDivisionError` for division by zero.

### `algokit.linkedlist`

- `ListNode`: a node with `val` and `next`.
- `build_list(values)` / `to_values(head)`: convert between lists and linked
  lists; `to_values` raises `ValueError` on a cycle.
- `merge_two_lists(list1, list2)`: merge two sorted lists by inserting new
  nodes holding the values of `list1` into `list2`, and return the head.
- `has_cycle(head)`: cycle detection.
- `reverse_list(head)`: reverse in place and return the new head.

### `algokit.trees`

- `TreeNode`: a node with `val`, `left` and `right`.
- `build_tree(values)`: build from level-order values, `None` marking a
  missing child.
- `is_same_tree(p, q)`, `max_depth(root)`, `is_balanced(root)`,
  `invert_tree(root)` (in place), `diameter_of_binary_tree(root)` (in edges),
  `is_subtree(root, sub_root)` (an empty `sub_root` is never found).

## Examples

```python
from algokit.arrays import three_sum, binary_search
from algokit.strings import length_of_longest_substring
from algokit.stacks import MinStack, eval_rpn
from algokit.linkedlist import build_list, reverse_list, to_values
from algokit.trees import build_tree, max_depth

three_sum([-1, 0, 1, 2, -1, -4])          # [[-1, -1, 2], [-1, 0, 1]]
binary_search([-1, 0, 3, 5, 9, 12], 9)    # 4
length_of_longest_substring("abcabcbb")   # 3
eval_rpn(["2", "1", "+", "3", "*"])       # 9

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()                            # -3

to_values(reverse_list(build_list([1, 2, 3])))        # [3, 2, 1]
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3
```

## What it does not do

algokit is a library only: it has no command-line program. Import the
modules and call the functions directly.

## Running the tests

```
pip install ".[test]"
pytest
```