"""Binary tree and binary search tree algorithms."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice, pairwise

NULL_MARKER = -1


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of the tree level by level, left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def height(root: TreeNode | None) -> int:
    """Return the number of edges on the longest root-to-leaf path; -1 if empty."""
    if root is None:
        return -1
    return max(height(root.left), height(root.right)) + 1


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = depth(node.left), depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def mirror(root: TreeNode | None) -> None:
    """Swap the children of every node in place."""
    if root is None:
        return
    mirror(root.left)
    mirror(root.right)
    root.left, root.right = root.right, root.left


def build_tree(inorder: Sequence[int], preorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its inorder and preorder traversals."""
    if len(inorder) != len(preorder):
        raise ValueError("traversals must have the same length")
    upcoming = iter(preorder)

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo > hi:
            return None
        node = TreeNode(next(upcoming))
        if lo == hi:
            return node
        try:
            split = inorder.index(node.data, lo, hi + 1)
        except ValueError:
            raise ValueError(f"traversals disagree at value {node.data!r}") from None
        node.left = build(lo, split - 1)
        node.right = build(split + 1, hi)
        return node

    return build(0, len(inorder) - 1)


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in inorder."""
    return [node.data for node in _inorder_nodes(root)]


def boundary_traversal(root: TreeNode | None) -> list[int]:
    """Return the root, the left boundary, the leaves and the reversed right boundary."""
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [root.data]

    result = [root.data]
    node = root.left
    while node is not None:
        if node.left is not None or node.right is not None:
            result.append(node.data)
        node = node.left if node.left is not None else node.right

    result.extend(
        node.data for node in _inorder_nodes(root) if node.left is None and node.right is None
    )

    right_edge = []
    node = root.right
    while node is not None:
        if node.left is not None or node.right is not None:
            right_edge.append(node.data)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def max_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("tree must not be empty")
    best = -math.inf

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.data + left + right)
        return node.data + max(left, right)

    gain(root)
    return int(best)


def count_paths_with_sum(root: TreeNode | None, k: int) -> int:
    """Count downward paths whose values sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})

    def walk(node: TreeNode | None, total: int) -> int:
        if node is None:
            return 0
        total += node.data
        paths = prefix_counts[total - k]
        prefix_counts[total] += 1
        paths += walk(node.left, total) + walk(node.right, total)
        prefix_counts[total] -= 1
        return paths

    return walk(root, 0)


def is_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a binary search tree with distinct values."""

    def within(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.data < high:
            return False
        return within(node.left, low, node.data) and within(node.right, node.data, high)

    return within(root, -math.inf, math.inf)


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of a BST, or -1 if out of range."""
    if k < 1:
        return NULL_MARKER
    node = next(islice(_inorder_nodes(root), k - 1, None), None)
    return node.data if node is not None else NULL_MARKER


def has_pair_with_sum(root: TreeNode | None, target: int) -> bool:
    """Tell whether two different nodes hold values summing to ``target``."""
    seen: set[int] = set()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if target - node.data in seen:
            return True
        seen.add(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return False


def correct_bst(root: TreeNode | None) -> None:
    """Repair, in place, a BST in which the values of two nodes were swapped."""
    first = middle = last = None
    for previous, node in pairwise(_inorder_nodes(root)):
        if node.data < previous.data:
            if first is None:
                first, middle = previous, node
            else:
                last = node
    if first is None:
        return
    other = last if last is not None else middle
    assert other is not None
    first.data, other.data = other.data, first.data


def lowest_common_ancestor(
    root: TreeNode | None, first: TreeNode, second: TreeNode
) -> TreeNode | None:
    """Return the lowest common ancestor of two nodes of a BST."""
    node = root
    while node is not None:
        if node.data > first.data and node.data > second.data:
            node = node.left
        elif node.data < first.data and node.data < second.data:
            node = node.right
        else:
            return node
    return None


def serialize(root: TreeNode | None) -> list[int]:
    """Return the tree in level order, with -1 standing for every missing child."""
    result = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(NULL_MARKER)
        else:
            result.append(node.data)
            queue.append(node.left)
            queue.append(node.right)
    return result


def deserialize(values: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from the level-order form produced by :func:`serialize`."""
    if not values or values[0] == NULL_MARKER:
        return None
    root = TreeNode(values[0])
    queue: deque[TreeNode] = deque([root])
    children = iter(values[1:])
    while queue:
        node = queue.popleft()
        left = next(children, None)
        if left is None:
            break
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(children, None)
        if right is None:
            break
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root