"""Elementary number routines: gcd, digits, palindromes, primes and divisors."""

from __future__ import annotations

__all__ = [
    "gcd",
    "is_armstrong",
    "count_digits",
    "reverse_number",
    "is_palindrome_number",
    "is_prime",
    "divisors",
]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders.

    The reduction runs only while both values are positive; once either
    reaches zero (or starts at or below zero) the other is returned.
    """
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def _digits(n: int) -> list[int]:
    """Decimal digits of a positive number, least significant first."""
    result = []
    while n > 0:
        n, digit = divmod(n, 10)
        result.append(digit)
    return result


def is_armstrong(n: int) -> bool:
    """True when n equals the sum of its digits each raised to the digit count."""
    digits = _digits(n)
    power = len(digits)
    return sum(digit**power for digit in digits) == n


def count_digits(n: int) -> int:
    """Number of decimal digits in a positive number."""
    if n <= 0:
        raise ValueError(f"count_digits needs a positive number, got {n}")
    return len(str(n))


def reverse_number(n: int) -> int:
    """The decimal digits of n in reverse order; 0 for n <= 0."""
    reversed_value = 0
    for digit in _digits(n):
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome_number(n: int) -> bool:
    """True when n reads the same with its digits reversed."""
    return reverse_number(n) == n


def divisors(n: int) -> list[int]:
    """All positive divisors of n in ascending order; empty for n <= 0."""
    small: list[int] = []
    large: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            small.append(i)
            partner = n // i
            if partner != i:
                large.append(partner)
        i += 1
    return small + large[::-1]


def is_prime(n: int) -> bool:
    """True when n has exactly two divisors."""
    return len(divisors(n)) == 2