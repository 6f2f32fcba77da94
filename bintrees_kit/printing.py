"""Render a binary tree as ASCII art, one text row per level."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from bintrees_kit.node import BinaryTreeNode

__all__ = ["render", "print_tree"]


def _height(tree: BinaryTreeNode) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(rows: List[List[str]], row: int, pos: int, char: str) -> None:
    if pos < 0:
        return
    line = rows[row]
    if pos >= len(line):
        line.extend(" " * (pos - len(line) + 1))
    line[pos] = char


def _layout(
    tree: Optional[BinaryTreeNode], offset: int, depth: int, rows: List[List[str]]
) -> int:
    """Draw ``tree`` into ``rows`` and return the width it occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows, depth, offset + left + i, char)
    if depth:
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                _put(rows, depth - 1, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                _put(rows, depth - 1, start + i, "-")
        _put(rows, depth - 1, offset + left + width // 2, ".")
    return left + width + right


def _finish(row: List[str]) -> str:
    text = "".join(row).ljust(2)
    stripped = text.rstrip(" ")
    # The first two columns are always kept, even when blank.
    return stripped if len(stripped) >= 2 else text[:2]


def render(tree: Optional[BinaryTreeNode]) -> str:
    """Return the drawing of ``tree``, each row ending in a newline."""
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(_height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Optional[BinaryTreeNode], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))