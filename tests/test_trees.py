from hypothesis import given
from hypothesis import strategies as st

from algonotes.trees import (
    TreeNode,
    describe_tree,
    in_order,
    level_order,
    post_order,
    pre_order,
    sample_tree,
)


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right


def _bst(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _depths(root):
    depths = {}
    frontier = [(root, 0)]
    while frontier:
        node, depth = frontier.pop()
        if node is None:
            continue
        depths[node.value] = depth
        frontier.append((node.left, depth + 1))
        frontier.append((node.right, depth + 1))
    return depths


unique_lists = st.lists(st.integers(-1000, 1000), min_size=1, max_size=40, unique=True)


def test_sample_pre_order():
    assert list(pre_order(sample_tree())) == [1, 2, 4, 5, 8, 3, 6, 7, 9, 10]


def test_sample_in_order():
    assert list(in_order(sample_tree())) == [4, 2, 8, 5, 1, 6, 3, 9, 7, 10]


def test_sample_post_order():
    assert list(post_order(sample_tree())) == [4, 8, 5, 2, 6, 9, 10, 7, 3, 1]


def test_sample_level_order_is_numbering():
    tree = sample_tree()
    assert list(level_order(tree)) == sorted(pre_order(tree))


def test_empty_tree_traversals():
    assert list(pre_order(None)) == []
    assert list(in_order(None)) == []
    assert list(post_order(None)) == []
    assert list(level_order(None)) == []


def test_describe_empty():
    assert describe_tree(None) == "---\n"


def test_describe_leaf():
    assert describe_tree(TreeNode(7)) == "Value = 7\nLeft : ---\nRight : ---\nDone\n"


def test_describe_sample_structure():
    text = describe_tree(sample_tree())
    assert text.count("Value = ") == 10
    assert text.count("Done\n") == 10
    assert text.count("---\n") == 11
    assert text.startswith("Value = 1\nLeft : Value = 2\n")


@given(unique_lists)
def test_in_order_of_bst_is_sorted(values):
    assert list(in_order(_bst(values))) == sorted(values)


@given(unique_lists)
def test_pre_order_starts_with_root(values):
    order = list(pre_order(_bst(values)))
    assert order[0] == values[0]
    assert sorted(order) == sorted(values)


@given(unique_lists)
def test_post_order_ends_with_root(values):
    order = list(post_order(_bst(values)))
    assert order[-1] == values[0]
    assert sorted(order) == sorted(values)


@given(unique_lists)
def test_level_order_depths_non_decreasing(values):
    root = _bst(values)
    depths = _depths(root)
    order = list(level_order(root))
    assert sorted(order) == sorted(values)
    levels = [depths[value] for value in order]
    assert levels == sorted(levels)


@given(unique_lists)
def test_post_order_children_before_parent(values):
    root = _bst(values)
    position = {value: i for i, value in enumerate(post_order(root))}
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert position[child.value] < position[node.value]
                stack.append(child)


@given(unique_lists)
def test_pre_order_parent_before_children(values):
    root = _bst(values)
    position = {value: i for i, value in enumerate(pre_order(root))}
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert position[child.value] > position[node.value]
                stack.append(child)