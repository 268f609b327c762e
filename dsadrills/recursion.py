"""Recursion drills.

Covers factorials, combinations, Fibonacci numbers, powers, sums and the
Tower of Hanoi, plus the head, tail, tree, indirect and nested call
patterns. Each drill returns the sequence its calls produce."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence


def factorial(n: int) -> int:
    """n! computed recursively; 0! and 1! are 1."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n in (0, 1):
        return 1
    return factorial(n - 1) * n


def _check_choose(n: int, r: int) -> None:
    if n < 0 or r < 0 or r > n:
        raise ValueError(f"cannot choose {r} from {n}")


def combination(n: int, r: int) -> int:
    """nCr from the factorial formula n! / (r! * (n-r)!)."""
    _check_choose(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def pascal_combination(n: int, r: int) -> int:
    """nCr by adding the two entries above it in Pascal's triangle."""
    _check_choose(n, r)
    if r in (0, n):
        return 1
    return pascal_combination(n - 1, r - 1) + pascal_combination(n - 1, r)


def fib(n: int) -> int:
    """The n-th Fibonacci number by plain double recursion."""
    if n <= 1:
        return n
    return fib(n - 2) + fib(n - 1)


def memo_fib(n: int) -> int:
    """The n-th Fibonacci number, remembering every value already computed."""
    memo: dict[int, int] = {}

    def compute(k: int) -> int:
        if k <= 1:
            memo[k] = k
            return k
        if k - 2 not in memo:
            memo[k - 2] = compute(k - 2)
        if k - 1 not in memo:
            memo[k - 1] = compute(k - 1)
        memo[k] = memo[k - 2] + memo[k - 1]
        return memo[k]

    return compute(n)


def head_recursion(n: int) -> list[int]:
    """Values emitted after the recursive call: 0 up to n."""
    if n < 0:
        return []
    return head_recursion(n - 1) + [n]


def tail_recursion(n: int) -> list[int]:
    """Values emitted before the recursive call: n down to 0."""
    if n < 0:
        return []
    return [n] + tail_recursion(n - 1)


def tree_recursion(n: int) -> list[int]:
    """Values emitted by a function that emits n and recurses twice."""
    if n < 0:
        return []
    below = tree_recursion(n - 1)
    return [n] + below + [n] + below


def _fun_a(n: int) -> Iterator[int]:
    if n < 0:
        return
    yield n
    yield from _fun_b(n - 10)


def _fun_b(n: int) -> Iterator[int]:
    if n < 0:
        return
    yield n
    yield from _fun_a(n * 2 - 1)


def indirect_recursion(n: int) -> list[int]:
    """Values emitted by two functions that call each other in turn.

    The first emits n and hands on n - 10, the second emits n and hands on
    2n - 1, until a value drops below zero.
    """
    return list(_fun_a(n))


def nested_recursion(n: int) -> int:
    """A function whose recursive call takes its own result as argument."""
    if n > 100:
        return n - 10
    return nested_recursion(nested_recursion(n + 11))


def power(m: int, n: int) -> int:
    """m to the power n by n successive multiplications."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    if n == 0:
        return 1
    return m * power(m, n - 1)


def fast_power(m: int, n: int) -> int:
    """m to the power n by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    if n == 0:
        return 1
    if n % 2 == 0:
        return fast_power(m * m, n // 2)
    return m * fast_power(m * m, (n - 1) // 2)


def sum_of_naturals(n: int) -> int:
    """0 + 1 + ... + n computed recursively."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return sum_of_naturals(n - 1) + n


def tower_of_hanoi(
    n: int, source: int = 1, target: int = 2, spare: int = 3
) -> list[tuple[int, int]]:
    """The moves, as (from, to) pairs, of the Tower of Hanoi drill for n disks."""
    if n <= 0:
        return []
    return (
        tower_of_hanoi(n - 1, source, spare, target)
        + [(source, target)]
        + tower_of_hanoi(n - 1, target, source, spare)
    )


def shared_counter_product(start: int) -> int:
    """Recursion over a counter shared by every call.

    Each call lowers a private count, stops at zero, and otherwise bumps the
    shared counter before recursing; the product is taken with the counter's
    value after all the calls below have returned.
    """
    if start < 1:
        raise ValueError("start must be at least 1")
    counter = start

    def step(count: int) -> int:
        nonlocal counter
        count -= 1
        if count == 0:
            return 1
        counter += 1
        return step(count) * counter

    return step(start)


def _joined(values: Sequence[int]) -> str:
    return ", ".join(str(value) for value in values)


_DEFAULT_N = {
    "combination": 5,
    "fibonacci": 8,
    "factorial": 5,
    "head": 10,
    "tail": 5,
    "tree": 3,
    "indirect": 20,
    "nested": 5,
    "power": 10,
    "sum": 5,
    "hanoi": 3,
    "counter": 5,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one recursion drill and print what it produces."""
    parser = argparse.ArgumentParser(
        prog="dsadrills-recursion", description="Run a recursion drill."
    )
    parser.add_argument("drill", choices=sorted(_DEFAULT_N))
    parser.add_argument("n", type=int, nargs="?")
    parser.add_argument("--r", type=int, default=2, help="items chosen (combination)")
    parser.add_argument("--base", type=int, default=3, help="base (power)")
    args = parser.parse_args(argv)
    n = _DEFAULT_N[args.drill] if args.n is None else args.n

    try:
        if args.drill == "combination":
            print(combination(n, args.r))
            print(pascal_combination(n, args.r))
        elif args.drill == "fibonacci":
            print(fib(n))
            print(memo_fib(n))
        elif args.drill == "factorial":
            print(factorial(n))
        elif args.drill == "head":
            print(_joined(head_recursion(n)))
        elif args.drill == "tail":
            print(_joined(tail_recursion(n)))
        elif args.drill == "tree":
            print(_joined(tree_recursion(n)))
        elif args.drill == "indirect":
            print(_joined(indirect_recursion(n)))
        elif args.drill == "nested":
            print(nested_recursion(n))
        elif args.drill == "power":
            print(power(args.base, n))
            print(fast_power(args.base, n))
        elif args.drill == "sum":
            print(sum_of_naturals(n))
        elif args.drill == "hanoi":
            for source, target in tower_of_hanoi(n):
                print(f"{source} to {target}")
        else:
            print(shared_counter_product(n))
    except ValueError as error:
        parser.error(str(error))
    return 0