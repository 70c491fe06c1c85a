"""Classic algorithm routines for arrays, strings, numbers, matrices, stacks, linked lists and binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "linkedlist",
    "matrix",
    "numbers",
    "stacks",
    "strings",
    "trees",
]