"""Depth-first traversals that call a function with each node's value."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from bintrees_kit.node import BinaryTreeNode

__all__ = ["preorder", "inorder", "postorder"]

Visitor = Callable[[int], object]


def _preorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    if tree is None:
        return
    yield tree.value
    yield from _preorder(tree.left)
    yield from _preorder(tree.right)


def _inorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    if tree is None:
        return
    yield from _inorder(tree.left)
    yield tree.value
    yield from _inorder(tree.right)


def _postorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    if tree is None:
        return
    yield from _postorder(tree.left)
    yield from _postorder(tree.right)
    yield tree.value


def _visit(values: Iterator[int], func: Optional[Visitor]) -> None:
    if func is None:
        return
    for value in values:
        func(value)


def preorder(tree: Optional[BinaryTreeNode], func: Optional[Visitor]) -> None:
    """Call ``func`` with each value: node first, then left and right subtrees."""
    _visit(_preorder(tree), func)


def inorder(tree: Optional[BinaryTreeNode], func: Optional[Visitor]) -> None:
    """Call ``func`` with each value: left subtree, node, then right subtree."""
    _visit(_inorder(tree), func)


def postorder(tree: Optional[BinaryTreeNode], func: Optional[Visitor]) -> None:
    """Call ``func`` with each value: left and right subtrees, then the node."""
    _visit(_postorder(tree), func)