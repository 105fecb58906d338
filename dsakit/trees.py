"""Binary tree nodes with counting, depth and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding one value and two optional children."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree under ``root``."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path from ``root`` to a leaf."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest path from ``root`` to a leaf."""
    if root is None:
        return 0
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, right, node order."""
    return list(_postorder(root))