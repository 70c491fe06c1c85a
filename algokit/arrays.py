"""Array puzzles: two pointers, prefix products, counting and heaps."""

from __future__ import annotations

import heapq
import operator
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from itertools import accumulate


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the given vertical lines.

    Raises ValueError for an empty sequence.
    """
    if not height:
        raise ValueError("max_area() needs at least one height")
    i, j = 0, len(height) - 1
    best = min(height[i], height[j]) * (j - i)
    while i < j:
        if height[i] < height[j]:
            i += 1
        else:
            j -= 1
        best = max(best, min(height[i], height[j]) * (j - i))
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct ascending triples of ``nums`` that sum to zero, in sorted order."""
    values = sorted(nums)
    triples: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                triples.append([first, values[j], values[k]])
                j += 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
    return triples


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from one buy followed by one later sale; 0 if none is possible."""
    best = 0
    low: int | None = None
    for price in prices:
        if low is None or price <= low:
            low = price
        else:
            best = max(best, price - low)
    return best


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """1-based positions of two entries of sorted ``numbers`` adding up to ``target``.

    Returns an empty list when there is no such pair.
    """
    start, end = 0, len(numbers) - 1
    while start < end:
        total = numbers[start] + numbers[end]
        if total == target:
            return [start + 1, end + 1]
        if total > target:
            end -= 1
        else:
            start += 1
    return []


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other entry, without division."""
    prefix = list(accumulate(nums, operator.mul, initial=1))[:-1]
    suffix = list(accumulate(reversed(nums), operator.mul, initial=1))[:-1][::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def top_k_frequent(nums: Iterable[Hashable], k: int) -> list[Hashable]:
    """The ``k`` most frequent values, most frequent first.

    A negative ``k`` yields every distinct value in order of frequency.
    """
    ranked = Counter(nums).most_common()
    if k >= 0:
        ranked = ranked[:k]
    return [value for value, _ in ranked]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or -1 if it is absent."""
    if not nums:
        return -1
    left, right = 0, len(nums) - 1
    i = right // 2
    while left < right:
        if target == nums[i]:
            return i
        if target < nums[i]:
            right = i - 1
        else:
            left = i + 1
        i = left + (right - left + 1) // 2
    return i if 0 <= i < len(nums) and nums[i] == target else -1


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones together until at most one is left; return its weight."""
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
    return -heap[0] if heap else 0


def get_concatenation(nums: Iterable[int]) -> list[int]:
    """``nums`` followed by itself."""
    return list(nums) * 2