import pytest

from dailyalgo.binary_tree import (
    TreeNode,
    boundary_traversal,
    build_tree,
    correct_bst,
    count_paths_with_sum,
    deserialize,
    diameter,
    has_pair_with_sum,
    height,
    inorder,
    is_bst,
    kth_smallest,
    level_order,
    lowest_common_ancestor,
    max_path_sum,
    mirror,
    serialize,
)

SAMPLE = [1, 2, 3, 4, 5, 6, 7, -1, -1, 8, 9]
BST_VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 65]


def _preorder(node):
    if node is None:
        return []
    return [node.data, *_preorder(node.left), *_preorder(node.right)]


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    if value < root.data:
        root.left = _insert(root.left, value)
    else:
        root.right = _insert(root.right, value)
    return root


def _bst(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _find(root, value):
    node = root
    while node is not None and node.data != value:
        node = node.left if value < node.data else node.right
    return node


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def test_serialize_round_trip():
    tree = deserialize(SAMPLE)
    again = deserialize(serialize(tree))
    assert serialize(again) == serialize(tree)
    assert inorder(again) == inorder(tree)


def test_deserialize_empty():
    assert deserialize([]) is None
    assert deserialize([-1]) is None
    assert serialize(None) == [-1]


def test_level_order_matches_serialized_values():
    tree = deserialize(SAMPLE)
    levels = level_order(tree)
    flat = [value for level in levels for value in level]
    assert flat == [value for value in serialize(tree) if value != -1]
    assert len(levels) == height(tree) + 1
    assert level_order(None) == []


def test_height_of_chain():
    assert height(None) == -1
    assert height(_chain([5])) == 0
    assert height(_chain(list(range(6)))) == 5


def test_diameter_invariants():
    chain = _chain(list(range(7)))
    assert diameter(chain) == 6
    tree = deserialize(SAMPLE)
    assert diameter(tree) >= height(tree)
    assert diameter(None) == 0


def test_mirror_reverses_inorder_and_is_involution():
    tree = deserialize(SAMPLE)
    before_inorder = inorder(tree)
    before = serialize(tree)
    mirror(tree)
    assert inorder(tree) == before_inorder[::-1]
    mirror(tree)
    assert serialize(tree) == before


def test_build_tree_round_trip():
    tree = deserialize(SAMPLE)
    rebuilt = build_tree(inorder(tree), _preorder(tree))
    assert serialize(rebuilt) == serialize(tree)


def test_build_tree_errors():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree([1, 2, 3], [9, 1, 2])
    assert build_tree([], []) is None


def test_boundary_traversal_sample():
    assert boundary_traversal(deserialize(SAMPLE)) == [1, 2, 4, 8, 9, 6, 7, 3]


def test_boundary_traversal_single_and_empty():
    assert boundary_traversal(TreeNode(42)) == [42]
    assert boundary_traversal(None) == []


def test_max_path_sum():
    values = [3, 1, 4, 1, 5]
    assert max_path_sum(_chain(values)) == sum(values)
    negatives = deserialize([-8, -3, -7, -9])
    assert max_path_sum(negatives) == max(inorder(negatives))
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_count_paths_with_sum_on_chain():
    n = 6
    chain = _chain([1] * n)
    assert count_paths_with_sum(chain, 1) == n
    assert count_paths_with_sum(chain, 2) == n - 1
    assert count_paths_with_sum(chain, n + 1) == 0


def test_is_bst():
    assert is_bst(_bst(BST_VALUES))
    assert is_bst(None)
    assert not is_bst(deserialize(SAMPLE))
    assert not is_bst(deserialize([5, 5]))


def test_kth_smallest():
    root = _bst(BST_VALUES)
    ordered = sorted(BST_VALUES)
    for k in range(1, len(ordered) + 1):
        assert kth_smallest(root, k) == ordered[k - 1]
    assert kth_smallest(root, len(ordered) + 1) == -1
    assert kth_smallest(root, 0) == -1


@pytest.mark.parametrize("pair", [(0, 1), (0, 8), (3, 5), (2, 7)])
def test_correct_bst_restores_order(pair):
    root = _bst(BST_VALUES)
    ordered = sorted(BST_VALUES)
    a, b = (_find(root, ordered[i]) for i in pair)
    a.data, b.data = b.data, a.data
    assert not is_bst(root)
    correct_bst(root)
    assert inorder(root) == ordered
    assert is_bst(root)


def test_lowest_common_ancestor():
    root = _bst(BST_VALUES)
    lowest = _find(root, min(BST_VALUES))
    highest = _find(root, max(BST_VALUES))
    assert lowest_common_ancestor(root, lowest, highest) is root
    assert lowest_common_ancestor(root, lowest, lowest) is lowest
    parent = _find(root, 30)
    assert lowest_common_ancestor(root, _find(root, 20), _find(root, 35)) is parent