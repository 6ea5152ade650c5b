# algokit

A small collection of classic algorithms and data structures in plain Python,
with no dependencies outside the standard library. It targets Python 3.10 and
later.

## Installation

```
pip install algokit
```

## Modules

### `algokit.searching`

- `binary_search(items, target)`: index of `target` in an ascending sequence,
  or `-1` if it is absent.
- `search_matrix(matrix, target)`: whether `target` occurs in a matrix whose
  rows and columns ascend; an empty matrix gives `False`.

### `algokit.sorting`

- `bubble_sort(items)`, `insertion_sort(items)`, `selection_sort(items)`:
  sort a mutable sequence in place.
- `merge_sort(items)`: return a new ascending list.
- `sort_colors(nums)`: sort a sequence of 0s, 1s and 2s in place in one pass.
- `merge_sorted(a, m, b, n)`: replace the list `a` with the merge of its first
  `m` items and the first `n` items of `b`.

### `algokit.arrays`

- `max_frequency_elements(nums)`: total count of the elements whose value has
  the highest frequency (`0` for an empty input).
- `repeating_elements(items)`: values seen more than once, in order of first
  appearance.
- `intersection(nums1, nums2)`: distinct values found in both, in `nums1` order.
- `majority_element(nums)`: the most frequent value.
- `max_product(nums)`, `max_subarray(nums)`: largest product and largest sum of
  a non-empty contiguous subarray.
- `remove_duplicates(nums)`: compact an ascending sequence in place and return
  the number of distinct values now at its front.
- `reverse_after(items, m)`: reverse, in place, everything after index `m`.
- `rotate(nums, k)`: rotate right by `k` places, in place.
- `running_sum(nums)`: prefix sums.
- `minimum_deletions(nums)`: fewest deletions from either end that remove both
  the minimum and the maximum.
- `pivot_index(nums)`: first index whose left and right sums are equal, or `-1`.
- `array_sum(items)`: the sum.
- `max_area(heights)`: the most water held between two of the given lines.

`majority_element`, `max_product`, `max_subarray` and `minimum_deletions` raise
`ValueError` for an empty input.

### `algokit.strings`

- `count_vowels_consonants(text)`: a `CharCounts(vowels, characters, spaces)`
  named tuple, where `characters` counts every character that is not a space.
- `letters_only(text)`: keep only ASCII letters.
- `is_palindrome(text)`: whether the ASCII letters and digits read the same
  reversed, ignoring case.
- `char_frequencies(text)`: a dict of character counts, ordered by character.
- `count_words(text)`: number of spaces plus one.
- `most_frequent_char(text)`: the character that first reaches the highest
  count; `ValueError` for an empty text.
- `remove_duplicate_chars(text)`: keep only the first occurrence of each
  character.
- `is_valid_parentheses(text)`: whether every `)`, `]` and `}` closes the most
  recently opened bracket and nothing is left open.

### `algokit.numeric`

- `evenly_divides(n)`: how many non-zero digits of `n` divide it exactly.
- `factorial(n)`: `n!`.
- `reverse_exponentiation(n)`: `n` raised to the number its digits form
  reversed.
- `nth_fibonacci(n)`: F(n) with F(0) = 0 and F(1) = 1.

`factorial`, `reverse_exponentiation` and `nth_fibonacci` raise `ValueError` for
negative input.

### `algokit.matrix`

- `rotate_image(matrix)`: rotate a square matrix a quarter turn clockwise, in
  place; `ValueError` if it is not square.
- `row_with_max_ones(mat)`: `(row, count)` for the first row with the most 1s;
  `ValueError` for an empty matrix.
- `spiral_order(matrix)`: elements read clockwise from the top-left corner.

### `algokit.linked_list`

`ListNode(val=0, next=None)` is a singly linked list node; iterating over a
node yields the values from it to the end. `from_list(values)` builds a list
(`None` when empty) and `to_list(head)` reads one back.

- `add_two_numbers(l1, l2)`: add two numbers stored as reversed digit lists.
- `delete_node(node)`: remove a node by copying its successor over it;
  `ValueError` for the last node.
- `merge_two_lists(list1, list2)`: splice two ascending lists into one.
- `middle_node(head)`: the middle node, the second one for even lengths.
- `delete_duplicates(head)`: drop repeated values from an ascending list.
- `reverse_list(head)`: reverse in place and return the new head.
- `rotate_right(head, k)`: rotate right by `k` places.
- `contains(head, target)`: whether `target` occurs in the list.

### `algokit.design_list`

`LinkedList` is a singly linked list with a tail pointer. It supports `len()`,
iteration, `get(index)` (raising `IndexError` when out of range),
`add_at_head(val)`, `add_at_tail(val)`, `add_at_index(index, val)` and
`delete_at_index(index)`. Insertions and deletions at an invalid index are
ignored.

### `algokit.stacks`

- `BoundedStack(capacity=100)`: a stack with `push`, `pop`, `is_empty` and
  `is_full`; `push` on a full stack raises `OverflowError` and `pop` on an
  empty one raises `IndexError`.
- `reverse_string(text)`: reverse a string through a `BoundedStack`.
- `MinStack(values=())`: a stack with `push`, `pop`, `top` and `get_min`, all in
  constant time; `pop`, `top` and `get_min` raise `IndexError` when empty.
- `next_greater_element(nums1, nums2)`: for each value of `nums1`, the first
  larger value after it in `nums2`, or `-1`.
- `evaluate_postfix(tokens)`: evaluate integer reverse Polish notation with
  `+ - * / ^`; division rounds toward negative infinity. A malformed expression
  raises `ValueError`, division by zero raises `ZeroDivisionError`.
- `asteroid_collision(asteroids)`: the asteroids left after all collisions.

### `algokit.queues`

`CircularQueue(capacity)` is a fixed-capacity FIFO queue. `enqueue(value)` and
`dequeue()` return `False` when the queue is full or empty; `front()` and
`rear()` raise `IndexError` on an empty queue; `is_empty()` and `is_full()`
report its state. It supports `len()` and iteration.

## Examples

```python
from algokit.searching import binary_search
from algokit.sorting import merge_sort
from algokit.strings import is_valid_parentheses
from algokit.linked_list import from_list, to_list, reverse_list
from algokit.stacks import MinStack, evaluate_postfix

binary_search([1, 4, 5, 7, 9, 10, 12, 25], 25)   # 7
merge_sort([5, 2, 3, 1])                          # [1, 2, 3, 5]
is_valid_parentheses("()[]{}")                    # True

to_list(reverse_list(from_list([1, 2, 3])))       # [3, 2, 1]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                                   # 1

evaluate_postfix(["2", "3", "1", "*", "+", "9", "-"])  # -4
```

## What it does not do

algokit is a library only: it has no command-line tool, and it reads no input
from files or the terminal. Call its functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```