# dsabasics

Short, plain implementations of the algorithms met early on in a data
structures and algorithms course. Each function takes ordinary Python values
and returns a result instead of printing it, so results are easy to inspect
and to test.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsabasics.basic_math`

- `gcd(a, b)`: greatest common divisor, found by repeated remainders. The
  reduction runs only while both values are positive; if either is zero or
  below, the other is returned.
- `is_armstrong(n)`: whether `n` equals the sum of its digits, each raised to
  the number of digits.
- `count_digits(n)`: the number of decimal digits in `n`; raises `ValueError`
  when `n` is not positive.
- `reverse_number(n)`: the digits of `n` in reverse order; `0` for `n <= 0`.
- `is_palindrome_number(n)`: whether `n` reads the same backwards.
- `is_prime(n)`: whether `n` has exactly two divisors.
- `divisors(n)`: every positive divisor of `n`, in ascending order; an empty
  list for `n <= 0`.

```python
from dsabasics.basic_math import divisors, gcd

gcd(12, 18)    # 6
divisors(36)   # [1, 2, 3, 4, 6, 9, 12, 18, 36]
```

### `dsabasics.hashing`

- `array_hash(values, size=13)`: a list of `size` counts, indexed by value;
  raises `ValueError` for a value outside `0 <= value < size`.
- `letter_hash(text)`: a dict of counts for the lowercase letters `a` to `z`;
  raises `ValueError` for any other character.
- `byte_hash(text)`: a dict of counts for every character with a code below
  256; raises `ValueError` for a character with a higher code.
- `frequencies(items)`: a `collections.Counter` of the items.
- `answer_queries(counts, queries)`: the count for each query. With a mapping,
  a missing key counts as zero; with a list (such as the one from
  `array_hash`), each query is used as an index.

```python
from dsabasics.hashing import answer_queries, array_hash, frequencies

counts = frequencies([1, 3, 2, 1, 3])
answer_queries(counts, [1, 4])                   # [2, 0]
answer_queries(array_hash([1, 3, 1]), [1, 2])    # [2, 0]
```

### `dsabasics.patterns`

Each function returns the lines of a text figure of size `n` as a list of
strings:

- `square`, `right_triangle`, `inverted_triangle`: stars, each followed by a
  space.
- `number_triangle`, `inverted_number_triangle`: rows counting up from 1,
  each number followed by a space.
- `repeated_number_triangle`: row `i` holds `i` written `i` times.
- `pyramid`, `inverted_pyramid`: centred figures, padded with spaces on both
  sides.
- `diamond`: a pyramid followed by an inverted pyramid, `2n` rows in all.
- `arrow`: rows of stars growing from 1 to `n` and back to 1.

```python
from dsabasics.patterns import pyramid

pyramid(3)   # ['  *  ', ' *** ', '*****']
```

### `dsabasics.recursion`

Recursive exercises:

- Counting: `count_below(limit)`, `repeat_name(name, n)`, `count_up(n)`,
  `count_down(n)` and `count_up_backtracking(n)`, each returning a list.
- Sums and products: `sum_to(n)` and `factorial(n)` (both raise `ValueError`
  for negative `n`), and `sum_to_accumulated(n)` and `factorial_accumulated(n)`,
  which pass the running total down and return `0` and `1` for negative input.
- Reversal: `reverse_two_pointer(items)` and `reverse_single_pointer(items)`
  return a reversed copy and leave the input untouched.
- `is_palindrome(text)`: whether a string reads the same backwards.
- `fibonacci(n)`: plain double recursion, returning `n` itself for `n <= 1`.

```python
from dsabasics.recursion import factorial, fibonacci

factorial(5)    # 120
fibonacci(10)   # 55
```

These functions really recurse, so very large inputs reach Python's recursion
limit, and `fibonacci` takes exponential time.

### `dsabasics.sorting`

`bubble_sort`, `insertion_sort`, `merge_sort` and `selection_sort` each take
any iterable and return a new list in ascending order. `merge_sort` is stable.

```python
from dsabasics.sorting import merge_sort

merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
```

## What it does not do

The package is a library only: it installs no command and does not read
numbers or queries from standard input. Call the functions from your own
code and print their results as you like.