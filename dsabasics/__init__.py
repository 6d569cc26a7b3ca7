"""Beginner algorithms: number theory, hashing, text patterns, recursion and sorting."""

__version__ = "0.1.0"
__all__ = ["basic_math", "hashing", "patterns", "recursion", "sorting"]