"""Binary tree nodes and iterative depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_sample_tree() -> TreeNode:
    """A complete four-level tree holding 1..15 numbered level by level."""
    nodes = [TreeNode(value) for value in range(1, 16)]
    for index, node in enumerate(nodes[:7]):
        node.left = nodes[2 * index + 1]
        node.right = nodes[2 * index + 2]
    return nodes[0]


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def preorder(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, node order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values


def level_order(root: TreeNode | None) -> list[int]:
    """Values level by level, left to right within each level."""
    values: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values