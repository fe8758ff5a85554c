"""Singly linked list algorithms: reversal, rotation, merging, loops and cloning."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import count, zip_longest


@dataclass(eq=False, repr=False)
class ListNode:
    """A list node; ``random`` is an optional extra link to any node."""

    data: int
    next: ListNode | None = None
    random: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list in order.

    Raises ValueError if the list contains a loop.
    """
    seen: set[int] = set()
    values = []
    for node in _nodes(head):
        if id(node) in seen:
            raise ValueError("list contains a loop")
        seen.add(id(node))
        values.append(node.data)
    return values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def rotate(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list left by ``k`` places in place and return the new head."""
    if head is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    tail.next = head
    new_tail = head
    for _ in range(k - 1):
        assert new_tail.next is not None
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take ``second`` first."""
    if first is None:
        return second
    if second is None:
        return first
    anchor = ListNode(0)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def reverse_in_groups(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every run of ``k`` nodes in place, including a shorter last run."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: ListNode | None = None
    previous_tail: ListNode | None = None
    node = head
    while node is not None:
        group_tail = node
        reversed_head: ListNode | None = None
        taken = 0
        while taken < k and node is not None:
            following = node.next
            node.next = reversed_head
            reversed_head = node
            node = following
            taken += 1
        if new_head is None:
            new_head = reversed_head
        if previous_tail is not None:
            previous_tail.next = reversed_head
        previous_tail = group_tail
    return new_head


def add_numbers(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Add two numbers stored most significant digit first.

    Returns a new list of the sum's digits without leading zeros (a single
    zero is kept); ``None`` if both inputs are empty.
    """
    digits = []
    carry = 0
    low_first = reversed(to_values(first))
    low_second = reversed(to_values(second))
    for a, b in zip_longest(low_first, low_second, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    digits.reverse()
    while len(digits) > 1 and digits[0] == 0:
        digits.pop(0)
    return build_list(digits)


def clone_random_list(head: ListNode | None) -> ListNode | None:
    """Return a deep copy of a list whose nodes carry ``random`` links."""
    clones = {node: ListNode(node.data) for node in _nodes(head)}
    for node, clone in clones.items():
        clone.next = clones.get(node.next) if node.next is not None else None
        clone.random = clones.get(node.random) if node.random is not None else None
    return clones.get(head) if head is not None else None


def _meeting_point(head: ListNode | None) -> ListNode | None:
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_loop(head: ListNode | None) -> bool:
    """Tell whether following ``next`` links from ``head`` ever revisits a node."""
    return _meeting_point(head) is not None


def find_loop_start(head: ListNode | None) -> ListNode | None:
    """Return the first node of the loop, or ``None`` if the list has none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return None
    walker = head
    while walker is not meeting:
        assert walker is not None and meeting is not None
        walker = walker.next
        meeting = meeting.next
    return walker


def remove_loop(head: ListNode | None) -> None:
    """Break the loop in place, if there is one, so the list ends normally."""
    start = find_loop_start(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        assert node.next is not None
        node = node.next
    node.next = None


def merge_k_lists(heads: Iterable[ListNode | None]) -> ListNode | None:
    """Merge any number of sorted lists by relinking their nodes."""
    order = count()
    heap = [(head.data, next(order), head) for head in heads if head is not None]
    heapq.heapify(heap)
    anchor = ListNode(0)
    tail = anchor
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.data, next(order), node.next))
    tail.next = None
    return anchor.next