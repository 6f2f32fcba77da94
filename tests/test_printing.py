import io

from bintrees_kit.node import create_node, insert_left, insert_right
from bintrees_kit.printing import print_tree, render


def _balanced_tree():
    root = create_node(None, 98)
    root.left = create_node(root, 12)
    root.left.left = create_node(root.left, 6)
    root.left.right = create_node(root.left, 16)
    root.right = create_node(root, 402)
    root.right.left = create_node(root.right, 256)
    root.right.right = create_node(root.right, 512)
    return root


def test_render_none_is_empty():
    assert render(None) == ""


def test_render_single_node_uses_padded_label():
    assert render(create_node(None, 98)) == "(098)\n"


def test_render_balanced_tree():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_balanced_tree()) == expected


def test_render_left_child_marks_connector_before_parent():
    root = create_node(None, 1)
    create_node(root, 2)
    top, bottom = render(root).splitlines()
    assert top.index(".") < top.index("(001)")
    assert bottom.startswith("(002)")


def test_render_right_child_marks_connector_after_parent():
    root = create_node(None, 1)
    insert_right(root, 2)
    top, bottom = render(root).splitlines()
    assert top.startswith("(001)")
    assert top.rstrip().endswith(".")
    assert "(002)" in bottom


def test_render_lines_carry_no_trailing_spaces():
    for line in render(_balanced_tree()).splitlines():
        assert line == line.rstrip(" ")


def test_render_labels_large_values_in_full():
    root = create_node(None, 12345)
    assert render(root) == "(12345)\n"


def test_print_tree_writes_render_output():
    buffer = io.StringIO()
    tree = _balanced_tree()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render(tree)


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(create_node(None, 98))
    assert capsys.readouterr().out == "(098)\n"


def test_print_tree_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""