"""Stack problems: brackets, spans, histograms, expressions and decoding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

_OPENERS = {")": "(", "}": "{", "]": "["}


class MinStack:
    """A stack that also reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)
        if not self._minima or value <= self._minima[-1]:
            self._minima.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if value == self._minima[-1]:
            self._minima.pop()
        return value

    def peek(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def min(self) -> int:
        """Return the smallest value on the stack."""
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]

    def __len__(self) -> int:
        return len(self._items)


def is_balanced(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket closes the latest one.
    """
    stack: list[str] = []
    for ch in s:
        if ch in "({[":
            stack.append(ch)
            continue
        if not stack:
            return False
        expected = _OPENERS.get(ch)
        if expected is not None and stack[-1] != expected:
            return False
        stack.pop()
    return not stack


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parenthesised substring."""
    stack = [-1]
    best = 0
    for i, ch in enumerate(s):
        if ch == "(":
            stack.append(i)
            continue
        stack.pop()
        if stack:
            best = max(best, i - stack[-1])
        else:
            stack.append(i)
    return best


def next_greater(arr: Sequence[int]) -> list[int]:
    """Return, for each value, the next larger value to its right, or -1."""
    result = [-1] * len(arr)
    waiting: list[int] = []
    for i, value in enumerate(arr):
        while waiting and arr[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(i)
    return result


def stock_span(arr: Sequence[int]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had no higher price."""
    stack: list[int] = []
    spans = []
    for i, price in enumerate(arr):
        while stack and arr[stack[-1]] <= price:
            stack.pop()
        spans.append(i - stack[-1] if stack else i + 1)
        stack.append(i)
    return spans


def largest_rectangle(arr: Sequence[int]) -> int:
    """Return the largest rectangle area in a histogram of the given bar heights."""
    heights = [*arr, 0]
    stack: list[int] = []
    best = 0
    for i, h in enumerate(heights):
        while stack and heights[stack[-1]] > h:
            top = heights[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, top * width)
        stack.append(i)
    return best


def max_of_min_windows(arr: Sequence[int]) -> list[int]:
    """Return, for every window size from 1 to n, the largest window minimum."""
    n = len(arr)
    left = [-1] * n
    right = [n] * n
    stack: list[int] = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] >= value:
            stack.pop()
        if stack:
            left[i] = stack[-1]
        stack.append(i)
    stack.clear()
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        if stack:
            right[i] = stack[-1]
        stack.append(i)

    answer = [0] * n
    for value, lo, hi in zip(arr, left, right):
        size = hi - lo - 1
        answer[size - 1] = max(answer[size - 1], value)
    return list(accumulate(reversed(answer), max))[::-1]


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def evaluate_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for token in tokens:
        operation = _OPERATIONS.get(token)
        if operation is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(operation(a, b))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def decode_string(s: str) -> str:
    """Expand ``k[text]`` repetitions, which may be nested."""
    prefixes: list[str] = []
    counts: list[int] = []
    current = ""
    number = ""
    for ch in s:
        if ch.isdigit():
            number += ch
            continue
        if number:
            counts.append(int(number))
            number = ""
        if ch == "[":
            prefixes.append(current)
            current = ""
        elif ch == "]":
            if not prefixes or not counts:
                raise ValueError("unmatched ']'")
            current = prefixes.pop() + current * counts.pop()
        else:
            current += ch
    return current