import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsadrills.recursion import (
    combination,
    factorial,
    fast_power,
    fib,
    head_recursion,
    indirect_recursion,
    main,
    memo_fib,
    nested_recursion,
    pascal_combination,
    power,
    shared_counter_product,
    sum_of_naturals,
    tail_recursion,
    tower_of_hanoi,
    tree_recursion,
)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@given(st.integers(min_value=1, max_value=60))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@given(st.integers(min_value=0, max_value=60))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_combination_documented_example():
    assert combination(5, 2) == 10
    assert pascal_combination(5, 2) == 10


@given(st.integers(min_value=0, max_value=14), st.data())
def test_combination_methods_agree(n, data):
    r = data.draw(st.integers(min_value=0, max_value=n))
    assert combination(n, r) == pascal_combination(n, r)
    assert combination(n, r) == combination(n, n - r)


@pytest.mark.parametrize("n, r", [(3, 4), (-1, 0), (3, -1)])
def test_combination_invalid_raises(n, r):
    with pytest.raises(ValueError):
        combination(n, r)
    with pytest.raises(ValueError):
        pascal_combination(n, r)


@pytest.mark.parametrize("n, expected", [(5, 5), (10, 55), (8, 21)])
def test_fib_documented_values(n, expected):
    assert fib(n) == expected
    assert memo_fib(n) == expected


@given(st.integers(min_value=2, max_value=18))
def test_fib_recurrence_and_memo_agree(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)
    assert memo_fib(n) == fib(n)


def test_fib_small_indices_return_themselves():
    assert [fib(n) for n in (-3, 0, 1)] == [-3, 0, 1]
    assert [memo_fib(n) for n in (0, 1)] == [0, 1]


def test_memo_fib_beyond_ten():
    assert memo_fib(30) == memo_fib(29) + memo_fib(28)


def test_head_recursion_documented():
    assert head_recursion(10) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_tail_recursion_documented():
    assert tail_recursion(5) == [5, 4, 3, 2, 1, 0]


@given(st.integers(min_value=-3, max_value=50))
def test_head_is_tail_reversed(n):
    assert head_recursion(n) == tail_recursion(n)[::-1]


def test_negative_head_and_tail_are_empty():
    assert head_recursion(-1) == []
    assert tail_recursion(-1) == []


def test_tree_recursion_documented():
    assert tree_recursion(3) == [
        3, 2, 1, 0, 0, 1, 0, 0, 2, 1, 0, 0, 1, 0, 0,
        3, 2, 1, 0, 0, 1, 0, 0, 2, 1, 0, 0, 1, 0, 0,
    ]


@given(st.integers(min_value=0, max_value=8))
def test_tree_recursion_size_recurrence(n):
    assert len(tree_recursion(n)) == 2 + 2 * len(tree_recursion(n - 1))


def test_indirect_recursion_documented():
    assert indirect_recursion(20) == [20, 10, 19, 9, 17, 7, 13, 3, 5]


def test_indirect_recursion_negative_is_empty():
    assert indirect_recursion(-1) == []


def test_nested_recursion_below_hundred():
    assert nested_recursion(5) == 91


@given(st.integers(min_value=101, max_value=10_000))
def test_nested_recursion_above_hundred(n):
    assert nested_recursion(n) == n - 10


@given(st.integers(min_value=-20, max_value=100))
def test_nested_recursion_constant_at_or_below_hundred(n):
    assert nested_recursion(n) == nested_recursion(5)


@given(st.integers(min_value=-9, max_value=9), st.integers(min_value=0, max_value=40))
def test_power_methods_agree(m, n):
    assert power(m, n) == fast_power(m, n)


@given(
    st.integers(min_value=-9, max_value=9),
    st.integers(min_value=0, max_value=20),
    st.integers(min_value=0, max_value=20),
)
def test_power_adds_exponents(m, a, b):
    assert power(m, a + b) == power(m, a) * power(m, b)


def test_power_of_zero_exponent():
    assert power(7, 0) == 1
    assert fast_power(7, 0) == 1


def test_power_negative_exponent_raises():
    with pytest.raises(ValueError):
        power(2, -1)
    with pytest.raises(ValueError):
        fast_power(2, -1)


def test_sum_of_naturals_zero():
    assert sum_of_naturals(0) == 0


@given(st.integers(min_value=1, max_value=300))
def test_sum_of_naturals_step(n):
    assert sum_of_naturals(n) - sum_of_naturals(n - 1) == n


def test_sum_of_naturals_negative_raises():
    with pytest.raises(ValueError):
        sum_of_naturals(-2)


def test_tower_of_hanoi_documented():
    assert tower_of_hanoi(3, 1, 2, 3) == [
        (1, 2), (1, 3), (3, 1), (1, 2), (2, 3), (2, 1), (1, 2),
    ]


@given(st.integers(min_value=1, max_value=10))
def test_tower_of_hanoi_move_count_recurrence(n):
    assert len(tower_of_hanoi(n)) == 2 * len(tower_of_hanoi(n - 1)) + 1


def test_tower_of_hanoi_no_disks():
    assert tower_of_hanoi(0) == []


def test_shared_counter_product_source_example():
    assert shared_counter_product(5) == 6561


def test_shared_counter_product_single_call():
    assert shared_counter_product(1) == 1


def test_shared_counter_product_invalid_raises():
    with pytest.raises(ValueError):
        shared_counter_product(0)


def test_main_hanoi_output(capsys):
    assert main(["hanoi"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1 to 2", "1 to 3", "3 to 1", "1 to 2", "2 to 3", "2 to 1", "1 to 2"]


def test_main_combination_output(capsys):
    assert main(["combination"]) == 0
    assert capsys.readouterr().out.split() == ["10", "10"]


def test_main_indirect_output(capsys):
    assert main(["indirect"]) == 0
    assert capsys.readouterr().out.strip() == "20, 10, 19, 9, 17, 7, 13, 3, 5"


def test_main_rejects_invalid_input():
    with pytest.raises(SystemExit):
        main(["factorial", "-3"])