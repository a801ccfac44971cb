# tree-edit

Print a modified copy of the source text behind a parse tree. An *editor*
decides which nodes to change and what their text becomes. Rendering writes the
source back out with those edits applied. This suits codemods, linters that fix
code, and refactoring tools.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## What a tree must provide

The package does not parse anything. You bring a tree from a parser, and the
package works with any objects of this shape:

- a **tree** has a `walk()` method that returns a cursor at the root;
- a **cursor** has `goto_first_child()`, `goto_parent()` and
  `goto_next_sibling()`, each returning whether it moved, and `node()`;
- a **node** has `id`, `start_byte` and `end_byte` attributes, where the byte
  offsets index into the source `bytes`.

## Modules

### `tree_edit.traversal`

- `Order.PRE` and `Order.POST` choose between pre-order and post-order.
- `traverse(cursor, order)` returns an iterator over every node. The cursor
  must be at the root, and `ValueError` is raised if it is not. After the
  iterator has been used up, the cursor is back at the root.
- `traverse_tree(tree, order)` does the same using `tree.walk()`.
- `traverse_iterative(cursor, order, callback)` and
  `traverse_recursive(cursor, order, callback)` call `callback` on each node in
  the same order, without returning an iterator.
- `Cursor` is the protocol that cursors follow.

### `tree_edit.node_id`

- `NodeId` is a frozen, ordered record of a node's `id`.
- `NodeId.from_node(node)` creates one from a node.
- `NodeId.matches(node)` tests whether a node has that id.

### `tree_edit.editor`

- `Edit(position, delete, insert)` means "replace `delete` bytes at `position`
  with the bytes `insert`".
- `Editor` is the abstract base class for editors. Subclasses implement
  `has_edit(tree, node)` and `edit(source, tree, node)`. The default
  `in_order_edits(source, tree)` walks the tree in pre-order. For each node
  where `has_edit` is true, it yields an `Edit` that covers that node's span.

### `tree_edit.editors`

- `Id()` makes no changes. Its `edit` always raises `ValueError`.
- `Delete(id)` removes the text of the node with that `NodeId`.
- `Replace(id, bytes)` replaces the text of the node with that `NodeId` by
  `bytes`.
- `LeftBiasedOr(left, right)` combines two editors. A node has an edit if
  either editor has one for it, and `left` is used when both do.

`Delete.edit` and `Replace.edit` raise `ValueError` for a node they have no
edit for. When the node is not in the tree, `Delete` and `Replace` yield no
edits.

### `tree_edit.render`

- `render(stream, tree, source, editor)` writes `source` to a binary stream
  with the editor's edits applied. It returns `True` if at least one edit was
  applied. An edit that starts inside the span of an earlier applied edit is
  skipped.
- `render_bytes(tree, source, editor)` returns the edited bytes.

## Example

```python
from tree_edit.editors import Replace
from tree_edit.node_id import NodeId
from tree_edit.render import render_bytes

# `tree` is a parsed tree over `source` (bytes); `node` is a node in it.
editor = Replace(id=NodeId.from_node(node), bytes=b"1")
print(render_bytes(tree, source, editor).decode())
```

## What it does not do

This is a library with no command-line program. It has no parser and no
grammars, so trees must come from elsewhere. It also never re-parses the
edited output.