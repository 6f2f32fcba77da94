import pytest

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


def _family_tree():
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


def test_create_node_without_parent():
    node = create_node(None, 98)
    assert node.value == 98
    assert node.parent is None
    assert node.left is None and node.right is None


def test_create_node_fills_left_then_right():
    root = create_node(None, 98)
    first = create_node(root, 12)
    second = create_node(root, 402)
    assert root.left is first
    assert root.right is second
    assert first.parent is root and second.parent is root


def test_create_node_replaces_right_when_both_taken():
    root = create_node(None, 1)
    create_node(root, 2)
    create_node(root, 3)
    third = create_node(root, 4)
    assert root.right is third
    assert root.left.value == 2


def test_insert_left_into_empty_slot():
    root = create_node(None, 98)
    node = insert_left(root, 54)
    assert root.left is node
    assert node.parent is root
    assert node.left is None


def test_insert_left_pushes_existing_child_down():
    root = create_node(None, 98)
    old = create_node(root, 12)
    new = insert_left(root, 54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = create_node(None, 98)
    create_node(root, 12)
    old = create_node(root, 402)
    new = insert_right(root, 128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_insert_right_into_empty_slot():
    root = create_node(None, 98)
    left = create_node(root, 12)
    node = insert_right(left, 54)
    assert left.right is node
    assert node.parent is left


@pytest.mark.parametrize("insert", [insert_left, insert_right])
def test_insert_without_parent_raises(insert):
    with pytest.raises(ValueError):
        insert(None, 5)


def test_delete_unlinks_subtree_and_detaches_from_parent():
    root = _family_tree()
    branch = root.right
    grandchild = branch.right
    delete(branch)
    assert root.right is None
    assert branch.parent is None and branch.left is None and branch.right is None
    assert grandchild.left is None and grandchild.right is None
    assert root.left.value == 12


def test_delete_whole_tree():
    root = _family_tree()
    leaf = root.left.left
    delete(root)
    assert root.left is None and root.right is None
    assert leaf.parent is None


def test_delete_none_leaves_nothing_changed():
    root = create_node(None, 1)
    delete(None)
    assert root.value == 1


def test_is_leaf():
    root = create_node(None, 98)
    create_node(root, 12)
    right = create_node(root, 402)
    insert_right(root.left, 54)
    deep = insert_right(root, 128)
    assert is_leaf(root) is False
    assert is_leaf(deep) is False
    assert is_leaf(right) is True
    assert is_leaf(None) is False


def test_is_root():
    root = create_node(None, 98)
    child = create_node(root, 12)
    assert is_root(root) is True
    assert is_root(child) is False
    assert is_root(None) is False


def test_sibling_missing_returns_none():
    root = create_node(None, 1)
    only = create_node(root, 2)
    assert sibling(only) is None


def test_uncle():
    root = _family_tree()
    assert uncle(root.right.left).value == 12
    assert uncle(root.left.right).value == 128
    assert uncle(root.left) is None
    assert uncle(root) is None
    assert uncle(None) is None


def test_repr_does_not_recurse_through_links():
    root = create_node(None, 7)
    create_node(root, 8)
    assert repr(root) == "BinaryTreeNode(value=7)"


def test_nodes_compare_by_identity():
    first = BinaryTreeNode(3)
    second = BinaryTreeNode(3)
    assert first.value == second.value == 3
    assert (first == second) is False
    assert (first == first) is True
    assert [first, second].index(second) == 1