"""Example programs that build small trees and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from bintrees_kit.metrics import (
    balance,
    depth,
    height,
    internal_nodes,
    is_full,
    is_perfect,
    leaves,
    size,
)
from bintrees_kit.node import (
    BinaryTreeNode,
    create_node,
    delete,
    insert_left,
    insert_right,
    is_leaf,
    is_root,
    sibling,
    uncle,
)
from bintrees_kit.printing import print_tree
from bintrees_kit.traversal import inorder, postorder, preorder

__all__ = ["run_demo", "main"]

Demo = Callable[[TextIO], None]


def _describe(node: Optional[BinaryTreeNode]) -> str:
    return "(nil)" if node is None else str(node.value)


def _complete_tree(inner_value: int) -> BinaryTreeNode:
    """Build a two-level tree with every slot filled."""
    root = create_node(None, 98)
    left = create_node(root, 12)
    create_node(left, 6)
    create_node(left, inner_value)
    right = create_node(root, 402)
    create_node(right, 256)
    create_node(right, 512)
    return root


def _sample_tree() -> BinaryTreeNode:
    """Build the tree shared by most of the measuring demos."""
    root = create_node(None, 98)
    create_node(root, 12)
    create_node(root, 402)
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def _demo_create(out: TextIO) -> None:
    print_tree(_complete_tree(16), out)


def _demo_insert_left(out: TextIO) -> None:
    root = create_node(None, 98)
    create_node(root, 12)
    create_node(root, 402)
    print_tree(root, out)
    print(file=out)
    insert_left(root.right, 128)
    insert_left(root, 54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = create_node(None, 98)
    create_node(root, 12)
    create_node(root, 402)
    print_tree(root, out)
    print(file=out)
    insert_right(root.left, 54)
    insert_right(root, 128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    delete(root)


def _demo_predicate(
    out: TextIO, label: str, check: Callable[[Optional[BinaryTreeNode]], bool]
) -> None:
    root = _sample_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a {label}: {int(check(node))}", file=out)


def _demo_is_leaf(out: TextIO) -> None:
    _demo_predicate(out, "leaf", is_leaf)


def _demo_is_root(out: TextIO) -> None:
    _demo_predicate(out, "root", is_root)


def _demo_traversal(
    out: TextIO,
    walk: Callable[[Optional[BinaryTreeNode], Callable[[int], object]], None],
) -> None:
    root = _complete_tree(56)
    print_tree(root, out)
    walk(root, lambda value: print(value, file=out))


def _demo_preorder(out: TextIO) -> None:
    _demo_traversal(out, preorder)


def _demo_inorder(out: TextIO) -> None:
    _demo_traversal(out, inorder)


def _demo_postorder(out: TextIO) -> None:
    _demo_traversal(out, postorder)


def _demo_measure(
    out: TextIO, phrase: str, measure: Callable[[Optional[BinaryTreeNode]], int]
) -> None:
    root = _sample_tree()
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        print(f"{phrase} {node.value}: {measure(node)}", file=out)


def _demo_height(out: TextIO) -> None:
    _demo_measure(out, "Height from", height)


def _demo_depth(out: TextIO) -> None:
    _demo_measure(out, "Depth of", depth)


def _demo_size(out: TextIO) -> None:
    _demo_measure(out, "Size of", size)


def _demo_leaves(out: TextIO) -> None:
    _demo_measure(out, "Leaves in", leaves)


def _demo_nodes(out: TextIO) -> None:
    _demo_measure(out, "Nodes in", internal_nodes)


def _demo_balance(out: TextIO) -> None:
    root = _sample_tree()
    insert_left(root, 45)
    insert_right(root.left, 50)
    insert_left(root.left.left, 10)
    insert_left(root.left.left.left, 8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {balance(node):+d}", file=out)


def _demo_is_full(out: TextIO) -> None:
    root = _sample_tree()
    create_node(root.left, 10)
    create_node(root.right, 22)
    print_tree(root, out)
    print(f"Is {root.value} full: {int(is_full(root))}", file=out)


def _demo_is_perfect(out: TextIO) -> None:
    root = _sample_tree()
    create_node(root.left, 10)
    create_node(root.right, 10)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)
    print(file=out)
    create_node(root.right.right, 10)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)
    print(file=out)
    create_node(root.right.right, 10)
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)


def _family_tree() -> BinaryTreeNode:
    """Build the tree used by the sibling and uncle demos.

    Each new node is both linked by ``create_node`` and assigned to an
    explicit slot, so a slot may end up shared by two links.
    """
    root = create_node(None, 98)
    root.left = create_node(root, 12)
    root.right = create_node(root, 128)
    root.left.right = create_node(root.left, 54)
    root.right.right = create_node(root.right, 402)
    root.left.left = create_node(root.left, 10)
    root.right.left = create_node(root.right, 110)
    root.right.right.left = create_node(root.right.right, 200)
    root.right.right.right = create_node(root.right.right, 512)
    return root


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_describe(sibling(node))}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_describe(uncle(node))}", file=out)


_DEMOS: Dict[int, Demo] = {
    0: _demo_create,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _demo_preorder,
    7: _demo_inorder,
    8: _demo_postorder,
    9: _demo_height,
    10: _demo_depth,
    11: _demo_size,
    12: _demo_leaves,
    13: _demo_nodes,
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, file: Optional[TextIO] = None) -> None:
    """Run demo ``number`` and write its output to ``file`` (stdout by default)."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number}") from None
    demo(sys.stdout if file is None else file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demos named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="bintrees-demo", description="Run the binary tree demos."
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        metavar="N",
        help=f"demo numbers from 0 to {max(_DEMOS)}; all when omitted",
    )
    args = parser.parse_args(argv)
    numbers: List[int] = args.numbers or sorted(_DEMOS)
    unknown = [n for n in numbers if n not in _DEMOS]
    if unknown:
        parser.error(f"unknown demo: {unknown[0]}")
    for index, number in enumerate(numbers):
        if index:
            print()
        run_demo(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())