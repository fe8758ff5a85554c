"""Subarray, window and hashing problems on sequences and strings."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterable, Sequence


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def count_subarrays_with_sum(arr: Iterable[int], k: int) -> int:
    """Count contiguous subarrays whose sum is ``k``."""
    seen: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in arr:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def count_subarrays_with_xor(arr: Iterable[int], k: int) -> int:
    """Count contiguous subarrays whose bitwise XOR is ``k``."""
    seen: Counter[int] = Counter()
    running = 0
    count = 0
    for value in arr:
        running ^= value
        if running == k:
            count += 1
        count += seen[running ^ k]
        seen[running] += 1
    return count


def find_subarray_with_sum(arr: Sequence[int], target: int) -> list[int]:
    """Return 1-based ``[start, end]`` of the first subarray summing to ``target``.

    Subarrays are tried by starting position, shortest first; ``[-1]`` is
    returned when none matches.
    """
    for start in range(len(arr)):
        total = 0
        for end, value in enumerate(arr[start:], start + 1):
            total += value
            if total == target:
                return [start + 1, end]
    return [-1]


def count_distinct_in_windows(arr: Sequence[int], k: int) -> list[int]:
    """Return the number of distinct values in every window of size ``k``."""
    if not 1 <= k <= len(arr):
        raise ValueError(f"window size {k} out of range for {len(arr)} values")
    counts = Counter(arr[:k])
    result = [len(counts)]
    for outgoing, incoming in zip(arr, arr[k:]):
        counts[outgoing] -= 1
        if counts[outgoing] == 0:
            del counts[outgoing]
        counts[incoming] += 1
        result.append(len(counts))
    return result


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        if ch in last_seen:
            start = max(start, last_seen[ch] + 1)
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def equilibrium_index(arr: Sequence[int]) -> int:
    """Return the first index whose left and right sums are equal, or -1."""
    right = sum(arr)
    left = 0
    for i, value in enumerate(arr):
        right -= value
        if left == right:
            return i
        left += value
    return -1


def longest_subarray_with_sum(arr: Iterable[int], k: int) -> int:
    """Return the length of the longest subarray summing to ``k``."""
    first_index: dict[int, int] = {}
    total = 0
    best = 0
    for i, value in enumerate(arr):
        total += value
        if total == k:
            best = i + 1
        first_index.setdefault(total, i)
        if total - k in first_index:
            best = max(best, i - first_index[total - k])
    return best


def longest_balanced_binary(arr: Iterable[int]) -> int:
    """Return the length of the longest subarray with as many 1s as other values."""
    first_index = {0: -1}
    balance = 0
    best = 0
    for i, value in enumerate(arr):
        balance += 1 if value == 1 else -1
        if balance in first_index:
            best = max(best, i - first_index[balance])
        else:
            first_index[balance] = i
    return best


def product_except_self(arr: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    zeros = sum(1 for value in arr if value == 0)
    product = math.prod(value for value in arr if value != 0)
    if zeros > 1:
        return [0] * len(arr)
    if zeros == 1:
        return [product if value == 0 else 0 for value in arr]
    return [product // value for value in arr]


def window_maxima(arr: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of size ``k``."""
    if not 1 <= k <= len(arr):
        raise ValueError(f"window size {k} out of range for {len(arr)} values")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(arr):
        while window and arr[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(arr[window[0]])
    return result


def longest_bounded_subarray(arr: Sequence[int], x: int) -> list[int]:
    """Return the first longest subarray whose max and min differ by at most ``x``."""
    if not arr:
        raise ValueError("sequence must not be empty")
    if x < 0:
        raise ValueError("allowed difference must not be negative")
    highs: deque[int] = deque()
    lows: deque[int] = deque()
    start = 0
    best_start, best_end = 0, 0
    for end, value in enumerate(arr):
        while highs and arr[highs[-1]] < value:
            highs.pop()
        highs.append(end)
        while lows and arr[lows[-1]] > value:
            lows.pop()
        lows.append(end)
        while arr[highs[0]] - arr[lows[0]] > x:
            start += 1
            if highs[0] < start:
                highs.popleft()
            if lows[0] < start:
                lows.popleft()
        if end - start > best_end - best_start:
            best_start, best_end = start, end
    return list(arr[best_start : best_end + 1])