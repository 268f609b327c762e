# dsadrills

Small, self-contained drills on two classic topics: array operations and
recursion. Each drill is a plain Python function that you can call, read
and experiment with. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Array drills

`dsadrills.arrays` works on ordinary Python lists of integers.

```python
from dsadrills import arrays

arrays.merge_sorted([2, 4, 6], [1, 3, 5])                  # [1, 2, 3, 4, 5, 6]
arrays.union_sorted([2, 4, 6, 8, 10, 14, 16], [1, 2, 6, 7, 10])
arrays.intersection_sorted([2, 4, 6, 8, 10, 14, 16], [1, 2, 6, 7, 10])
arrays.single_missing_number([1, 2, 3, 4, 6, 7, 8])        # 5
arrays.target_sum_pairs_sorted([1, 3, 4, 5, 6, 8, 9, 10, 12, 14], 10)
```

Functions that return new values:

- `merge_sorted`, `union_sorted`, `intersection_sorted` — merge, union and
  intersection of two sorted sequences.
- `union_unsorted`, `intersection_unsorted` — the same for unsorted input,
  keeping the order of the first sequence.
- `is_sorted` — whether a sequence is in non-decreasing order.
- `single_missing_number` — the one gap in a sorted run of consecutive
  integers; raises `ValueError` if nothing is missing or the input is empty.
- `missing_natural_number` — the number missing from `1..last`, by sums.
- `missing_elements` — every gap between the first and last of a sorted
  sequence.
- `missing_elements_unsorted` — the numbers from 1 below the largest value
  that do not occur.
- `sorted_duplicates`, `count_sorted_duplicates`, `duplicate_counts` —
  repeated values, and how often each appears.
- `target_sum_pairs`, `target_sum_pairs_hashed`, `target_sum_pairs_sorted` —
  pairs adding up to a target, found by nested loops, a table of seen
  values, or closing in from both ends of a sorted sequence.
- `maximum` — the largest value; `format_array` — the values joined by
  spaces.

Functions that change a list in place: `negatives_left`, `reverse`,
`rotate_left`, `shift_left`, `shift_right` and `swap`.

## Recursion drills

`dsadrills.recursion` collects textbook recursive functions:

```python
from dsadrills import recursion

recursion.factorial(5)             # 120
recursion.combination(5, 2)        # 10
recursion.pascal_combination(5, 2) # 10
recursion.fib(10)                  # 55
recursion.memo_fib(8)              # 21
recursion.power(3, 10)
recursion.fast_power(3, 10)
recursion.sum_of_naturals(5)       # 15
recursion.nested_recursion(5)
recursion.tower_of_hanoi(3, 1, 2, 3)
```

`head_recursion`, `tail_recursion`, `tree_recursion` and
`indirect_recursion` return, as a list, the sequence of values each call
pattern visits. `tower_of_hanoi` returns its moves as `(from, to)` pairs.
`shared_counter_product` shows what happens when recursive calls share one
counter. Negative or out-of-range arguments raise `ValueError` where the
drill is undefined for them.

## Command line

`dsadrills-arrays` prints the pairs of a sorted sequence that add up to a
target (10 by default, over `1 3 4 5 6 8 9 10 12 14`):

```
dsadrills-arrays
dsadrills-arrays 13 --values 1 2 5 8 11 12
```

`dsadrills-recursion` runs one named drill and prints its result. The drill
is one of `combination`, `counter`, `factorial`, `fibonacci`, `hanoi`,
`head`, `indirect`, `nested`, `power`, `sum`, `tail` and `tree`, optionally
followed by `n`; `--r` sets the items chosen for `combination` and `--base`
the base for `power`:

```
dsadrills-recursion hanoi
dsadrills-recursion combination 6 --r 3
dsadrills-recursion power 8 --base 2
```