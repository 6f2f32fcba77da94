"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Optional

from bintrees_kit.node import BinaryTreeNode, is_leaf

__all__ = [
    "height",
    "depth",
    "size",
    "leaves",
    "internal_nodes",
    "balance",
    "is_full",
    "is_perfect",
]


def height(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of edges on the longest path down to a leaf."""
    if tree is None or is_leaf(tree):
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def depth(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of edges between ``tree`` and the root above it."""
    count = 0
    if tree is None:
        return count
    node = tree.parent
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if is_leaf(tree):
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[BinaryTreeNode]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or is_leaf(tree):
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def _branch_height(child: Optional[BinaryTreeNode]) -> int:
    return 0 if child is None else 1 + height(child)


def balance(tree: Optional[BinaryTreeNode]) -> int:
    """Return the left branch height minus the right branch height."""
    if tree is None:
        return 0
    return _branch_height(tree.left) - _branch_height(tree.right)


def is_full(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if every node has either no children or two."""
    if tree is None:
        return False
    if is_leaf(tree):
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _all_leaves_at(tree: BinaryTreeNode, level: int) -> bool:
    if is_leaf(tree):
        return depth(tree) == level
    if tree.left is None or tree.right is None:
        return False
    return _all_leaves_at(tree.left, level) and _all_leaves_at(tree.right, level)


def is_perfect(tree: Optional[BinaryTreeNode]) -> bool:
    """Return True if every inner node has two children and all leaves sit at one level.

    Leaf levels are counted from the topmost root, so only a whole tree,
    not a subtree hanging below a parent, can be perfect.
    """
    if tree is None:
        return False
    return _all_leaves_at(tree, height(tree))