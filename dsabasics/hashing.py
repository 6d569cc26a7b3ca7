"""Frequency tables for numbers and characters, with lookups."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping, Sequence
from string import ascii_lowercase

__all__ = [
    "array_hash",
    "letter_hash",
    "byte_hash",
    "frequencies",
    "answer_queries",
]


def array_hash(values: Iterable[int], size: int = 13) -> list[int]:
    """Count values in a fixed table indexed by value, 0 <= value < size."""
    table = [0] * size
    for value in values:
        if not 0 <= value < size:
            raise ValueError(f"value {value} outside table of size {size}")
        table[value] += 1
    return table


def letter_hash(text: str) -> dict[str, int]:
    """Count each lowercase letter 'a'..'z' in text."""
    table = dict.fromkeys(ascii_lowercase, 0)
    for char in text:
        if char not in table:
            raise ValueError(f"character {char!r} is not a lowercase letter")
        table[char] += 1
    return table


def byte_hash(text: str) -> dict[str, int]:
    """Count every character with a code below 256 in text."""
    table = {chr(code): 0 for code in range(256)}
    for char in text:
        if char not in table:
            raise ValueError(f"character {char!r} has a code of 256 or more")
        table[char] += 1
    return table


def frequencies(items: Iterable[Hashable]) -> Counter:
    """Count occurrences of each item."""
    return Counter(items)


def answer_queries(
    counts: Mapping | Sequence[int], queries: Iterable
) -> list[int]:
    """Look up the count for each query; a key missing from a mapping counts 0."""
    if isinstance(counts, Mapping):
        return [counts.get(query, 0) for query in queries]
    return [counts[query] for query in queries]