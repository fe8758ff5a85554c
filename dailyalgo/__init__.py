"""Classic algorithms on arrays, strings, linked lists, trees, heaps and stacks."""

__version__ = "0.1.0"
__all__ = [
    "backtracking",
    "binary_tree",
    "geekbits",
    "heaps",
    "linked_list",
    "lru",
    "pairs",
    "stacks",
    "subarrays",
]