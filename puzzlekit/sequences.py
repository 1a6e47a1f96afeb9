"""Scans, pattern counts and reductions over integer sequences and digit grids."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterator, Sequence
from math import isqrt

_ALL_DIRECTIONS = ((1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1))


def next_greater_elements(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of nums1, the first larger value after it in nums2, else -1."""

    def next_greater(value: int) -> int:
        seen = False
        for item in nums2:
            if item == value:
                seen = True
            elif seen and item > value:
                return item
        return -1

    return [next_greater(value) for value in nums1]


def _comparisons(nums: Sequence[int]) -> Iterator[int]:
    for previous, current in zip(nums, nums[1:]):
        yield (current > previous) - (current < previous)


def _prefix_function(pattern: Sequence[int]) -> list[int]:
    table = [0] * len(pattern)
    length = 0
    for i, value in enumerate(pattern[1:], start=1):
        while length and value != pattern[length]:
            length = table[length - 1]
        if value == pattern[length]:
            length += 1
        table[i] = length
    return table


def count_matching_subarrays(nums: Sequence[int], pattern: Sequence[int]) -> int:
    """Count windows of nums whose successive comparisons follow pattern.

    Pattern entries are 1 (rise), 0 (equal) and -1 (fall); a window covers
    len(pattern) + 1 elements.
    """
    if not pattern:
        return len(nums)
    table = _prefix_function(pattern)
    matches = 0
    length = 0
    for sign in _comparisons(nums):
        while length and sign != pattern[length]:
            length = table[length - 1]
        if sign == pattern[length]:
            length += 1
        if length == len(pattern):
            matches += 1
            length = table[length - 1]
    return matches


def is_prime(n: int) -> bool:
    """Whether n is a prime number."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def _straight_numbers(mat: Sequence[Sequence[int]]) -> Iterator[int]:
    rows = len(mat)
    cols = len(mat[0]) if rows else 0
    for r in range(rows):
        for c in range(cols):
            for dr, dc in _ALL_DIRECTIONS:
                x, y, number = r, c, 0
                while 0 <= x < rows and 0 <= y < cols:
                    number = 10 * number + mat[x][y]
                    yield number
                    x, y = x + dr, y + dc


def most_frequent_prime(mat: Sequence[Sequence[int]]) -> int:
    """Most frequent prime above 10 read along straight lines of the digit grid.

    Ties go to the largest such prime; -1 when there is none.
    """
    counts = Counter(_straight_numbers(mat))
    candidates = [
        (count, number)
        for number, count in counts.items()
        if number > 10 and is_prime(number)
    ]
    if not candidates:
        return -1
    return max(candidates)[1]


def min_operations(nums: Sequence[int], k: int) -> int:
    """Merges needed until every value is at least k.

    Each merge removes the two smallest values x <= y and inserts 2 * x + y.
    Raises ValueError when a single value below k is left.
    """
    heap = list(nums)
    heapq.heapify(heap)
    operations = 0
    while heap and heap[0] < k:
        if len(heap) < 2:
            raise ValueError("cannot reach the threshold")
        smallest = heapq.heappop(heap)
        second = heapq.heappop(heap)
        heapq.heappush(heap, 2 * smallest + second)
        operations += 1
    return operations