# bintree

A small binary tree library. You build trees node by node, walk them in
pre-, in- and post-order, measure them and draw them as ASCII art.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bintree.tree import Node
from bintree.render import render, print_tree

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)

print_tree(root)        # writes the drawing to standard output
print_tree(root, file)  # ...or to any text stream

list(root.preorder())   # node, left, right
list(root.inorder())    # left, node, right
list(root.postorder())  # left, right, node

root.height()           # edges on the longest path down to a leaf
right.depth()           # edges up to the root
root.size()             # number of nodes in the subtree
root.leaves()           # number of leaves in the subtree
root.internal_nodes()   # nodes in the subtree with at least one child
root.balance()          # left height minus right height (a missing side counts 0)
root.is_leaf()          # no children
root.is_root()          # no parent
root.is_full()          # either no children or both

text = render(root)     # the drawing as a string, one line per level
```

A `Node` holds `value`, `parent`, `left` and `right`. `Node(value, parent)`
sets the parent link only; attach the node to the parent yourself, or use
`insert_left` / `insert_right`, which do both.

`insert_left` and `insert_right` put a new node between a node and its
existing child: the old child becomes the matching child of the new node,
and the new node is returned.

`delete` detaches a subtree from its parent and clears every parent and
child link inside it.

`is_full` looks at the node itself only: it does not check the nodes below.

### Drawing

Each node is drawn as `(NNN)`, its value padded to three digits, and each
level of the tree takes one line. The branches joining a node to its
children are drawn on the line above them with `.` and `-`. Trailing spaces
are stripped from every line. `render(None)` returns an empty string and
`print_tree(None)` writes nothing.

## Demo

The package ships small example programs that build sample trees, draw
them and print the result of one operation each. They are numbered
`0` to `14`:

| Name | Shows |
|------|-------|
| 0 | building a complete tree of seven nodes |
| 1, 2 | `insert_left` / `insert_right` with no parent (nothing is drawn) |
| 3 | building and then deleting a tree |
| 4, 5 | `is_leaf`, `is_root` |
| 6, 7, 8 | pre-, in- and post-order traversal |
| 9, 10, 11, 12, 13 | `height`, `depth`, `size`, `leaves`, `internal_nodes` |
| 14 | `balance` |

Run all of them in order:

```
bintree-demo
```

or only the ones named:

```
bintree-demo 4 9 14
```

From Python, `bintree.demo.run_demo(name, out)` runs one demo and writes
its output to `out` (standard output by default); an unknown name raises
`ValueError`.