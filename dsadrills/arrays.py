"""Drills on integer sequences: merging, set operations, missing and duplicate
elements, target-sum pairs and in-place rearrangements."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import groupby

DEFAULT_VALUES = (1, 3, 4, 5, 6, 8, 9, 10, 12, 14)
DEFAULT_TARGET = 10


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, keeping every element."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def negatives_left(values: MutableSequence[int]) -> None:
    """Move every negative value in front of the non-negative ones, in place."""
    i, j = 0, len(values) - 1
    while i <= j:
        while i < len(values) and values[i] < 0:
            i += 1
        while j >= 0 and values[j] >= 0:
            j -= 1
        if i < j:
            swap(values, i, j)


def reverse(values: MutableSequence[int], length: int | None = None) -> None:
    """Reverse the first ``length`` elements in place (all of them by default)."""
    if length is None:
        length = len(values)
    if not 0 <= length <= len(values):
        raise ValueError(f"length {length} out of range for {len(values)} elements")
    values[:length] = list(values[:length])[::-1]


def rotate_left(values: MutableSequence[int]) -> None:
    """Rotate the sequence one place to the left, in place."""
    if values:
        first = values[0]
        del values[0]
        values.append(first)


def shift_left(values: MutableSequence[int]) -> None:
    """Shift one place to the left, filling the freed last slot with 0."""
    if values:
        del values[0]
        values.append(0)


def shift_right(values: MutableSequence[int]) -> None:
    """Shift one place to the right, dropping the last element and putting 0 first."""
    if values:
        values.pop()
        values.insert(0, 0)


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the sequence is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def union_unsorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """All of ``first``, then each element of ``second`` not already present."""
    result = list(first)
    for value in second:
        if value not in result:
            result.append(value)
    return result


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Union of two sorted sequences; an element shared by both appears once."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] > second[j]:
            result.append(second[j])
            j += 1
        elif first[i] < second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def intersection_unsorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Elements of ``first`` that also occur in ``second``, in ``first``'s order."""
    return [value for value in first if value in second]


def intersection_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Intersection of two sorted sequences."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] > second[j]:
            j += 1
        elif first[i] < second[j]:
            i += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    return result


def single_missing_number(values: Sequence[int]) -> int:
    """Find the one number missing from a sorted run of consecutive integers."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    offset = values[0]
    for index, value in enumerate(values):
        if value - index != offset:
            return offset + index
    raise ValueError("no number is missing")


def missing_natural_number(values: Sequence[int]) -> int:
    """Find the natural number missing from 1..last by comparing sums."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    last = values[-1]
    return last * (last + 1) // 2 - sum(values)


def missing_elements(values: Sequence[int]) -> list[int]:
    """All numbers missing from a sorted sequence between its first and last."""
    missing: list[int] = []
    if not values:
        return missing
    offset = values[0]
    for index, value in enumerate(values):
        while offset + index < value:
            missing.append(offset + index)
            offset += 1
    return missing


def missing_elements_unsorted(values: Sequence[int]) -> list[int]:
    """Numbers from 1 up to the largest value that do not occur, in any order."""
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    top = maximum(values)
    present = set(values)
    return [number for number in range(1, top) if number not in present]


def sorted_duplicates(values: Sequence[int]) -> list[int]:
    """Each value that repeats in a sorted sequence, once."""
    return [value for value, run in groupby(values) if len(list(run)) > 1]


def count_sorted_duplicates(values: Sequence[int]) -> dict[int, int]:
    """Map each repeated value of a sorted sequence to how often it appears."""
    counts = {value: len(list(run)) for value, run in groupby(values)}
    return {value: count for value, count in counts.items() if count > 1}


def duplicate_counts(values: Sequence[int]) -> dict[int, int]:
    """Map each repeated value, in ascending order, to how often it appears."""
    counts = Counter(values)
    return {value: counts[value] for value in sorted(counts) if counts[value] > 1}


def target_sum_pairs(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Every pair of positions i < j whose values add up to ``target``."""
    return [
        (a, b)
        for i, a in enumerate(values)
        for b in values[i + 1 :]
        if a + b == target
    ]


def target_sum_pairs_hashed(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Pairs adding up to ``target``, found in one pass with a table of seen values."""
    seen: set[int] = set()
    pairs: list[tuple[int, int]] = []
    for value in values:
        if target - value in seen:
            pairs.append((value, target - value))
        seen.add(value)
    return pairs


def target_sum_pairs_sorted(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Pairs adding up to ``target`` in a sorted sequence, by closing in from both ends."""
    pairs: list[tuple[int, int]] = []
    i, j = 0, len(values) - 1
    while i < j:
        total = values[i] + values[j]
        if total == target:
            pairs.append((values[i], values[j]))
            i += 1
            j -= 1
        elif total > target:
            j -= 1
        else:
            i += 1
    return pairs


def maximum(values: Sequence[int]) -> int:
    """The largest value."""
    if not values:
        raise ValueError("maximum of an empty sequence")
    return max(values)


def swap(values: MutableSequence[int], i: int, j: int) -> None:
    """Exchange the elements at positions ``i`` and ``j``."""
    values[i], values[j] = values[j], values[i]


def format_array(values: Sequence[int]) -> str:
    """The values separated by single spaces."""
    return " ".join(str(value) for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the pairs of a sorted sequence that add up to a target."""
    parser = argparse.ArgumentParser(
        prog="dsadrills-arrays",
        description="List the pairs of a sorted sequence that sum to a target.",
    )
    parser.add_argument("target", type=int, nargs="?", default=DEFAULT_TARGET)
    parser.add_argument("--values", type=int, nargs="+", default=list(DEFAULT_VALUES))
    args = parser.parse_args(argv)
    values = args.values
    if not is_sorted(values):
        parser.error("values must be sorted")
    for a, b in target_sum_pairs_sorted(values, args.target):
        print(f"{a} + {b} = {args.target}")
    return 0