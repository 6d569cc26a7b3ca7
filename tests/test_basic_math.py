import math

import pytest

from dsabasics.basic_math import (
    count_digits,
    divisors,
    gcd,
    is_armstrong,
    is_palindrome_number,
    is_prime,
    reverse_number,
)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (1, 1), (81, 27), (17, 17)])
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(48, 36), (35, 49), (1000, 8)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0 and b % g == 0
    assert gcd(a // g, b // g) == 1


def test_gcd_with_zero_returns_other():
    assert gcd(0, 9) == 9
    assert gcd(9, 0) == 9


def test_gcd_is_symmetric():
    assert gcd(84, 60) == gcd(60, 84)


@pytest.mark.parametrize("n", [153, 370, 371, 407])
def test_known_armstrong_numbers(n):
    assert is_armstrong(n) is True


@pytest.mark.parametrize("n", [10, 100, 152, 154, 408])
def test_non_armstrong_numbers(n):
    assert is_armstrong(n) is False


def test_single_digits_are_armstrong():
    assert all(is_armstrong(n) for n in range(1, 10))


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, 12345, 10**15 - 1, 10**15])
def test_count_digits_matches_string_length(n):
    assert count_digits(n) == len(str(n))


@pytest.mark.parametrize("n", [0, -5])
def test_count_digits_rejects_non_positive(n):
    with pytest.raises(ValueError):
        count_digits(n)


@pytest.mark.parametrize("n", [1, 12, 1234, 98765, 120])
def test_reverse_number_matches_reversed_text(n):
    assert reverse_number(n) == int(str(n)[::-1])


@pytest.mark.parametrize("n", [13, 4567, 90817])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


def test_reverse_number_non_positive_gives_zero():
    assert reverse_number(0) == 0
    assert reverse_number(-12) == 0


@pytest.mark.parametrize("n", [1, 7, 11, 121, 1221, 12321])
def test_palindromes(n):
    assert is_palindrome_number(n) is True


@pytest.mark.parametrize("n", [10, 12, 123, 1231])
def test_non_palindromes(n):
    assert is_palindrome_number(n) is False


def test_negative_is_not_palindrome():
    assert is_palindrome_number(-121) is False


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [0, 1, 4, 9, 15, 100])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", range(1, 60))
def test_is_prime_agrees_with_divisors(n):
    assert is_prime(n) == (divisors(n) == [1, n])


@pytest.mark.parametrize("n", [1, 12, 36, 49, 97, 360])
def test_divisors_are_complete_and_sorted(n):
    result = divisors(n)
    assert result == [i for i in range(1, n + 1) if n % i == 0]
    assert result == sorted(set(result))


@pytest.mark.parametrize("n", [36, 100, 360])
def test_divisors_pair_up(n):
    result = divisors(n)
    assert [n // d for d in reversed(result)] == result


def test_divisors_of_non_positive_is_empty():
    assert divisors(0) == []
    assert divisors(-4) == []