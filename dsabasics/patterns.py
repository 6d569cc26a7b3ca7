"""Star and number patterns, each returned as a list of printed lines."""

from __future__ import annotations

__all__ = [
    "square",
    "right_triangle",
    "number_triangle",
    "repeated_number_triangle",
    "inverted_triangle",
    "inverted_number_triangle",
    "pyramid",
    "inverted_pyramid",
    "diamond",
    "arrow",
]


def _counting_line(count: int) -> str:
    """The numbers 1..count, each followed by a space."""
    return "".join(f"{j} " for j in range(1, count + 1))


def square(n: int) -> list[str]:
    """An n by n block of stars, each star followed by a space."""
    return ["* " * n for _ in range(n)]


def right_triangle(n: int) -> list[str]:
    """Rows of 1..n stars, each star followed by a space."""
    return ["* " * row for row in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Row i holds the numbers 1..i."""
    return [_counting_line(row) for row in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Row i holds the number i, written i times."""
    return [f"{row} " * row for row in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Rows of n down to 1 stars, each star followed by a space."""
    return ["* " * (n - row + 1) for row in range(1, n + 1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Row i holds the numbers 1..n-i+1."""
    return [_counting_line(n - row + 1) for row in range(1, n + 1)]


def pyramid(n: int) -> list[str]:
    """A centred pyramid of n rows, padded with spaces on both sides."""
    lines = []
    for row in range(n):
        padding = " " * (n - row - 1)
        lines.append(padding + "*" * (2 * row + 1) + padding)
    return lines


def inverted_pyramid(n: int) -> list[str]:
    """A centred upside-down pyramid of n rows, padded on both sides."""
    lines = []
    for row in range(n):
        padding = " " * row
        lines.append(padding + "*" * (2 * n - (2 * row + 1)) + padding)
    return lines


def diamond(n: int) -> list[str]:
    """A pyramid followed by an inverted pyramid, 2n rows in all."""
    return pyramid(n) + inverted_pyramid(n)


def arrow(n: int) -> list[str]:
    """Rows of stars growing from 1 to n and shrinking back to 1."""
    lines = []
    for row in range(1, 2 * n):
        stars = row if row <= n else 2 * n - row
        lines.append("*" * stars)
    return lines