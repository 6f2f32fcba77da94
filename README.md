# bintrees-kit

A small library for working with binary trees of integers. Each node knows
its parent and its left and right children. The library can build a tree,
measure it, walk through it and draw it as ASCII art. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Building trees

`bintrees_kit.node` holds the `BinaryTreeNode` dataclass (fields `value`,
`parent`, `left`, `right`) and the functions that link nodes together.

```python
from bintrees_kit.node import create_node, insert_left, insert_right

root = create_node(None, 98)
left = create_node(root, 12)      # the first child becomes the left child
right = create_node(root, 402)    # the second becomes the right child
insert_right(left, 54)
insert_left(root, 45)             # the old left subtree moves under the new node
```

- `create_node(parent, value)` fills the parent's left slot if it is free,
  otherwise its right slot, replacing any right child already there. With
  `parent=None` it returns a new root.
- `insert_left(parent, value)` and `insert_right(parent, value)` push an
  existing child down one level beneath the new node. They raise
  `ValueError` when `parent` is `None`.
- `delete(tree)` detaches the subtree from its parent and unlinks every node
  in it.
- `is_leaf(node)`, `is_root(node)` return booleans; `sibling(node)` and
  `uncle(node)` return a node or `None`.

## Measuring

```python
from bintrees_kit.metrics import height, depth, size, leaves, internal_nodes
from bintrees_kit.metrics import balance, is_full, is_perfect

height(root)          # edges on the longest path down to a leaf
depth(root.left)      # edges up to the root
size(root)            # number of nodes
leaves(root)          # nodes without children
internal_nodes(root)  # nodes with at least one child
balance(root)         # left branch height minus right branch height
is_full(root)         # every node has zero or two children
is_perfect(root)      # full, with all leaves on one level
```

An empty tree (`None`) measures 0 and is neither full nor perfect. Leaf
levels in `is_perfect` are counted from the topmost root, so a subtree
that hangs below a parent is not reported as perfect.

## Traversing

```python
from bintrees_kit.traversal import preorder, inorder, postorder

inorder(root, print)
```

Each traversal calls the function once with every node's value. Passing
`None` as the function does nothing.

## Drawing

```python
from bintrees_kit.printing import render, print_tree

print_tree(root)
```

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

`render(root)` returns the same drawing as a string, each row ending in a
newline; `print_tree(root, file)` writes it to `file` (standard output by
default). Values are shown zero-padded to three digits.

## Demonstrations

The `bintrees-demo` command runs numbered demonstrations, from 0 to 18.
Each one builds a small tree, draws it and reports the results of one
function:

```
bintrees-demo 14
```

Several numbers may be given; with none, every demonstration runs in
order. The same can be done from Python with
`bintrees_kit.demo.run_demo(number, file)`, which raises `ValueError` for
an unknown number.