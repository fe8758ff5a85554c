"""Two-pointer problems on arrays: pairs, triplets, triangles and water."""

from __future__ import annotations

from collections.abc import Sequence


def count_triplets(arr: Sequence[int], target: int) -> int:
    """Count triplets summing to ``target`` in a sorted sequence.

    After a match both pointers move inward, so repeated values are not
    combined with each other.
    """
    n = len(arr)
    count = 0
    for i, first in enumerate(arr[:-2]):
        left, right = i + 1, n - 1
        while left < right:
            total = first + arr[left] + arr[right]
            if total == target:
                count += 1
                left += 1
                right -= 1
            elif total < target:
                left += 1
            else:
                right -= 1
    return count


def count_pairs_below(arr: Sequence[int], target: int) -> int:
    """Count pairs of distinct positions whose sum is less than ``target``."""
    values = sorted(arr)
    left, right = 0, len(values) - 1
    pairs = 0
    while left < right:
        if values[left] + values[right] < target:
            pairs += right - left
            left += 1
        else:
            right -= 1
    return pairs


def closest_pair_sum(arr: Sequence[int], target: int) -> list[int]:
    """Return the pair whose sum is closest to ``target``, smaller value first.

    Ties are broken in favour of the pair with the larger difference.
    An empty list is returned when fewer than two values are given.
    """
    if len(arr) <= 1:
        return []
    values = sorted(arr)
    left, right = 0, len(values) - 1
    best: tuple[int, int] | None = None
    best_diff = 0
    best_spread = 0
    while left < right:
        total = values[left] + values[right]
        diff = abs(total - target)
        spread = abs(values[right] - values[left])
        if best is None or diff < best_diff or (diff == best_diff and spread > best_spread):
            best = (values[left], values[right])
            best_diff = diff
            best_spread = spread
        if total < target:
            left += 1
        else:
            right -= 1
    assert best is not None
    return list(best)


def count_pairs_with_sum(arr: Sequence[int], target: int) -> int:
    """Count pairs of distinct positions summing to ``target`` in a sorted sequence."""
    left, right = 0, len(arr) - 1
    pairs = 0
    while left < right:
        total = arr[left] + arr[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        elif arr[left] == arr[right]:
            count = right - left + 1
            pairs += count * (count - 1) // 2
            break
        else:
            left_count = right_count = 1
            while left + 1 < right and arr[left] == arr[left + 1]:
                left_count += 1
                left += 1
            while right - 1 > left and arr[right] == arr[right - 1]:
                right_count += 1
                right -= 1
            pairs += left_count * right_count
            left += 1
            right -= 1
    return pairs


def count_triangles(arr: Sequence[int]) -> int:
    """Count triples of positions whose values can form a triangle."""
    values = sorted(arr)
    triangles = 0
    for i in range(len(values) - 1, 1, -1):
        longest = values[i]
        left, right = 0, i - 1
        while left < right:
            if values[left] + values[right] > longest:
                triangles += right - left
                right -= 1
            else:
                left += 1
    return triangles


def trapped_water(arr: Sequence[int]) -> int:
    """Return the units of rain water trapped between bars of the given heights."""
    stack: list[int] = []
    water = 0
    for i, height in enumerate(arr):
        while stack and arr[stack[-1]] < height:
            bottom = arr[stack.pop()]
            if not stack:
                break
            width = i - stack[-1] - 1
            water += (min(arr[stack[-1]], height) - bottom) * width
        stack.append(i)
    return water


def max_water_container(arr: Sequence[int]) -> int:
    """Return the largest area formed by two lines and the distance between them."""
    if len(arr) <= 1:
        return 0
    left, right = 0, len(arr) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(arr[left], arr[right]))
        if arr[left] < arr[right]:
            left += 1
        else:
            right -= 1
    return best