"""Heap problems: largest elements, closest points and running medians."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def k_largest(arr: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` largest values in descending order."""
    return heapq.nlargest(max(k, 0), arr)


def k_closest(points: Iterable[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin, farthest of them first.

    Points at equal distance are ordered by their coordinates.
    """
    if k <= 0:
        return []

    def key(point: Sequence[int]) -> tuple[int, list[int]]:
        x, y = point
        return x * x + y * y, list(point)

    nearest = heapq.nsmallest(k, points, key=key)
    return [list(point) for point in reversed(nearest)]


def running_medians(arr: Iterable[int]) -> list[float]:
    """Return the median of every prefix of ``arr``."""
    lower: list[int] = []  # max-heap of negated values
    upper: list[int] = []
    medians: list[float] = []
    for value in arr:
        if not upper or value <= upper[0]:
            heapq.heappush(lower, -value)
        else:
            heapq.heappush(upper, value)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) == len(upper):
            medians.append((-lower[0] + upper[0]) / 2)
        else:
            medians.append(float(-lower[0]))
    return medians