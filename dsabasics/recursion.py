"""Small recursive routines: counting, sums, factorials, reversal, palindromes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

__all__ = [
    "count_below",
    "repeat_name",
    "count_up",
    "count_down",
    "count_up_backtracking",
    "sum_to",
    "sum_to_accumulated",
    "factorial",
    "factorial_accumulated",
    "reverse_two_pointer",
    "reverse_single_pointer",
    "is_palindrome",
    "fibonacci",
]

T = TypeVar("T")


def count_below(limit: int) -> list[int]:
    """The numbers 0, 1, ... up to but not including limit."""

    def step(count: int) -> list[int]:
        if count >= limit:
            return []
        return [count] + step(count + 1)

    return step(0)


def repeat_name(name: str, n: int) -> list[str]:
    """The name, once for each of 1..n."""

    def step(i: int) -> list[str]:
        if i > n:
            return []
        return [name] + step(i + 1)

    return step(1)


def count_up(n: int) -> list[int]:
    """The numbers 1..n, built going forward."""

    def step(i: int) -> list[int]:
        if i > n:
            return []
        return [i] + step(i + 1)

    return step(1)


def count_down(n: int) -> list[int]:
    """The numbers n down to 1."""

    def step(i: int) -> list[int]:
        if i < 1:
            return []
        return [i] + step(i - 1)

    return step(n)


def count_up_backtracking(n: int) -> list[int]:
    """The numbers 1..n, each emitted after the recursive call returns."""

    def step(i: int) -> list[int]:
        if i < 1:
            return []
        return step(i - 1) + [i]

    return step(n)


def sum_to(n: int) -> int:
    """0 + 1 + ... + n, each call adding its own term."""
    if n < 0:
        raise ValueError(f"sum_to needs a non-negative number, got {n}")
    if n == 0:
        return 0
    return n + sum_to(n - 1)


def sum_to_accumulated(n: int) -> int:
    """0 + 1 + ... + n with the running total passed down; 0 for n < 0."""

    def step(i: int, total: int) -> int:
        if i < 0:
            return total
        return step(i - 1, total + i)

    return step(n, 0)


def factorial(n: int) -> int:
    """n! with each call multiplying its own factor."""
    if n < 0:
        raise ValueError(f"factorial needs a non-negative number, got {n}")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def factorial_accumulated(n: int) -> int:
    """n! with the running product passed down; 1 for n < 1."""

    def step(i: int, product: int) -> int:
        if i < 1:
            return product
        return step(i - 1, product * i)

    return step(n, 1)


def reverse_two_pointer(items: Sequence[T]) -> list[T]:
    """A reversed copy, swapping from both ends towards the middle."""
    result = list(items)

    def step(left: int, right: int) -> None:
        if left >= right:
            return
        result[left], result[right] = result[right], result[left]
        step(left + 1, right - 1)

    step(0, len(result) - 1)
    return result


def reverse_single_pointer(items: Sequence[T]) -> list[T]:
    """A reversed copy, swapping position i with its mirror up to the middle."""
    result = list(items)
    size = len(result)

    def step(i: int) -> None:
        if i >= size // 2:
            return
        mirror = size - i - 1
        result[i], result[mirror] = result[mirror], result[i]
        step(i + 1)

    step(0)
    return result


def is_palindrome(text: str) -> bool:
    """True when text reads the same backwards."""

    def step(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[len(text) - i - 1]:
            return False
        return step(i + 1)

    return step(0)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number by plain double recursion; n itself for n <= 1."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)