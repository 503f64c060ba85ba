# arraydrills

A collection of small, well-known array and number exercises. Each one is a
plain Python function that takes lists and integers and returns a result.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `arraydrills.arrays`

- `reverse_in_place(values)`: reverses a list in place.
- `reverse_prefix(values, size)`: reverses the first `size` items of a list in
  place. It raises `ValueError` for a negative size and `IndexError` when `size`
  is larger than the list.
- `sum_and_product(values)`: returns the pair `(sum, product)`.
- `swap_max_min(values)`: swaps the first largest item with the first smallest
  item, in place. It raises `ValueError` for an empty list.
- `unique_values(values)`: returns the items that occur exactly once, in their
  original order.
- `intersection(first, second)`: returns the distinct items of `first` that also
  occur in `second`, in the order they first appear in `first`.
- `linear_search(values, target)`: returns the index of the first `target`, or
  `-1` if it is not there.

### `arraydrills.questions`

- `pair_sum(nums, target)`: returns the first index pair `(i, j)` with `i < j`
  whose values add up to `target`, or `None` if there is none.
- `two_pointer_pair_sum(nums, target)`: the same search for an ascending list,
  done with two pointers that move inwards from both ends. It returns `None`
  when no pair is found.
- `majority_element(values)`: returns the value that occurs more than
  `len(values) // 2` times, or `None` if there is no such value.
- `sorted_majority_element(values)`: finds the majority element by sorting and
  counting runs of equal values. When no run is long enough it returns the
  largest value.
- `moore_majority_element(values)`: returns the candidate chosen by Moore's
  voting algorithm. This is the majority element whenever one exists.
- `product_except_self(nums)`: for each position, returns the product of all the
  other items.

`sorted_majority_element` and `moore_majority_element` raise `ValueError` for an
empty list.

### `arraydrills.subarray`

- `subarrays(values)`: yields every contiguous subarray, ordered by start and
  then by end.
- `max_subarray_sum_brute(values)`: the largest sum of a contiguous subarray,
  found by trying every start and end.
- `max_subarray_sum(values)`: the same value, found with Kadane's algorithm.

Both maximum-sum functions raise `ValueError` for an empty list.

### `arraydrills.numbers`

- `dec_to_bin(number)`: returns an integer whose decimal digits spell the binary
  form of `number`. For example, 197 becomes 11000101.
- `bin_to_dec(number)`: the reverse. It reads the decimal digits as binary
  digits. For example, 11000101 becomes 197.
- `sum_to_n(n)`: returns `1 + 2 + ... + n`.
- `factorial(n)`: returns `n!`.
- `digit_sum(number)`: returns the sum of the decimal digits.
- `n_choose_r(n, r)`: returns `n! // (r! * (n - r)!)`.
- `bitwise_summary(a, b)`: returns a dict with the keys `and`, `or`, `xor`,
  `not`, `left_shift` and `right_shift`. The shifts move `a` by one place.

The conversions, `digit_sum`, `sum_to_n` and `factorial` take non-positive input
as the empty case. The conversions and `digit_sum` return `0`, `sum_to_n`
returns `0` and `factorial` returns `1`.

### `arraydrills.patterns`

- `hollow_diamond(n)`: returns the lines of a hollow diamond of stars. Its widest
  row is `2 * n - 1` characters wide.
- `star_lines(blocks, per_block)`: returns `blocks * per_block` lines, each one a
  single `*`.

## Example

```python
from arraydrills.subarray import max_subarray_sum
from arraydrills.numbers import dec_to_bin
from arraydrills.questions import two_pointer_pair_sum

max_subarray_sum([3, -4, 5, 4, -1, 7, -8])   # 15
dec_to_bin(197)                              # 11000101
two_pointer_pair_sum([2, 7, 11, 15], 9)      # (0, 1)
```

## Command line

```
arraydrills
```

This prints worked examples for every topic. To limit the output, name one or
more topics: `arrays`, `questions`, `subarray`, `functions` or `patterns`.

```
arraydrills subarray patterns
```