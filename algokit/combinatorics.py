"""Backtracking searches: combination sums and subsets."""

from __future__ import annotations

from collections.abc import Iterable


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Every way of reaching ``target`` with candidates that may repeat.

    Each combination lists candidates in their input order.  Raises
    ValueError if a candidate is not positive.
    """
    pool = list(candidates)
    if any(c <= 0 for c in pool):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    path: list[int] = []

    def search(start: int, total: int) -> None:
        if total > target:
            return
        if total == target:
            found.append(list(path))
            return
        if start >= len(pool):
            return
        path.append(pool[start])
        search(start, total + pool[start])
        path.pop()
        search(start + 1, total)

    search(0, 0)
    return found


def combination_sum_unique(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Distinct ascending combinations reaching ``target``, each candidate used at most once."""
    pool = sorted(candidates)
    found: list[list[int]] = []
    path: list[int] = []

    def search(start: int, total: int) -> None:
        if total == target:
            found.append(list(path))
            return
        if total > target or start >= len(pool):
            return
        path.append(pool[start])
        search(start + 1, total + pool[start])
        path.pop()
        following = start + 1
        while following < len(pool) and pool[following] == pool[start]:
            following += 1
        search(following, total)

    search(0, 0)
    return found


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Every subset of ``nums``; subsets with an element come before those without it."""
    items = list(nums)

    def expand(index: int) -> list[list[int]]:
        if index == len(items):
            return [[]]
        tails = expand(index + 1)
        return [[items[index], *tail] for tail in tails] + tails

    return expand(0)