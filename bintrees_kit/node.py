"""Binary tree nodes and the operations that build and inspect their links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = [
    "BinaryTreeNode",
    "create_node",
    "insert_left",
    "insert_right",
    "delete",
    "is_leaf",
    "is_root",
    "sibling",
    "uncle",
]


@dataclass(eq=False)
class BinaryTreeNode:
    """A node holding an integer, linked to its parent and two children."""

    value: int
    parent: Optional[BinaryTreeNode] = field(default=None, repr=False)
    left: Optional[BinaryTreeNode] = field(default=None, repr=False)
    right: Optional[BinaryTreeNode] = field(default=None, repr=False)


def create_node(parent: Optional[BinaryTreeNode], value: int) -> BinaryTreeNode:
    """Create a node under ``parent``.

    The new node becomes the parent's left child when that slot is free,
    otherwise its right child (replacing any right child already there).
    """
    node = BinaryTreeNode(value, parent=parent)
    if parent is not None:
        if parent.left is None:
            parent.left = node
        else:
            parent.right = node
    return node


def _require_parent(parent: Optional[BinaryTreeNode]) -> BinaryTreeNode:
    if parent is None:
        raise ValueError("a parent node is required")
    return parent


def insert_left(parent: Optional[BinaryTreeNode], value: int) -> BinaryTreeNode:
    """Insert a node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    parent = _require_parent(parent)
    node = BinaryTreeNode(value, parent=parent)
    if parent.left is not None:
        node.left = parent.left
        node.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Optional[BinaryTreeNode], value: int) -> BinaryTreeNode:
    """Insert a node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    parent = _require_parent(parent)
    node = BinaryTreeNode(value, parent=parent)
    if parent.right is not None:
        node.right = parent.right
        node.right.parent = node
    parent.right = node
    return node


def delete(tree: Optional[BinaryTreeNode]) -> None:
    """Dismantle the subtree rooted at ``tree``, unlinking every node in it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Optional[BinaryTreeNode]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[BinaryTreeNode]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def sibling(node: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)