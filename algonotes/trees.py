"""Binary trees: node type, the four classic traversals and a printable dump."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node; missing children are ``None``."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def pre_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values root first, then the left subtree, then the right, using a stack."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node.value
        # Right goes on first so the left child is popped next.
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def in_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of the left subtree, then the root, then the right subtree."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def post_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of both subtrees before their root, using a stack."""
    if root is None:
        return
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values level by level, left to right, using a queue."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def describe_tree(root: TreeNode | None) -> str:
    """Return a recursive text dump of the tree, one value per block."""
    parts: list[str] = []

    def walk(node: TreeNode | None) -> None:
        if node is None:
            parts.append("---\n")
            return
        parts.append(f"Value = {node.value}\n")
        parts.append("Left : ")
        walk(node.left)
        parts.append("Right : ")
        walk(node.right)
        parts.append("Done\n")

    walk(root)
    return "".join(parts)


def sample_tree() -> TreeNode:
    """Build the ten-node demonstration tree and return its root."""
    n = {value: TreeNode(value) for value in range(1, 11)}
    n[1].left, n[1].right = n[2], n[3]
    n[2].left, n[2].right = n[4], n[5]
    n[5].left = n[8]
    n[3].left, n[3].right = n[6], n[7]
    n[7].left, n[7].right = n[9], n[10]
    return n[1]