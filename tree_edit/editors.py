"""Ready-made editors: no-op, delete, replace and left-biased combination."""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from typing import Any, Iterator

from tree_edit.editor import Edit, Editor
from tree_edit.node_id import NodeId
from tree_edit.traversal import Order, traverse_tree


def _find_node(tree: Any, node_id: NodeId) -> Any:
    """Return the first node in pre-order whose id is ``node_id``, or None."""
    return next(
        (node for node in traverse_tree(tree, Order.PRE) if NodeId.from_node(node) == node_id),
        None,
    )


def _single_edit(tree: Any, node_id: NodeId, insert: builtins.bytes) -> Iterator[Edit]:
    node = _find_node(tree, node_id)
    if node is not None:
        yield Edit(
            position=node.start_byte,
            delete=node.end_byte - node.start_byte,
            insert=insert,
        )


@dataclass(frozen=True, order=True)
class Id(Editor):
    """The editor that makes no changes."""

    def has_edit(self, tree: Any, node: Any) -> bool:
        return False

    def edit(self, source: builtins.bytes, tree: Any, node: Any) -> builtins.bytes:
        raise ValueError("the identity editor has no edit for any node")

    def in_order_edits(self, source: builtins.bytes, tree: Any) -> Iterator[Edit]:
        return iter(())


@dataclass(frozen=True, order=True)
class Delete(Editor):
    """An editor that deletes the text of a single node."""

    id: NodeId

    def has_edit(self, tree: Any, node: Any) -> bool:
        return self.id.matches(node)

    def edit(self, source: builtins.bytes, tree: Any, node: Any) -> builtins.bytes:
        if not self.has_edit(tree, node):
            raise ValueError("no edit for this node")
        return b""

    def in_order_edits(self, source: builtins.bytes, tree: Any) -> Iterator[Edit]:
        return _single_edit(tree, self.id, b"")


@dataclass(frozen=True, order=True)
class Replace(Editor):
    """An editor that replaces the text of a single node with ``bytes``."""

    id: NodeId
    bytes: builtins.bytes

    def has_edit(self, tree: Any, node: Any) -> bool:
        return self.id.matches(node)

    def edit(self, source: builtins.bytes, tree: Any, node: Any) -> builtins.bytes:
        if not self.has_edit(tree, node):
            raise ValueError("no edit for this node")
        return self.bytes

    def in_order_edits(self, source: builtins.bytes, tree: Any) -> Iterator[Edit]:
        return _single_edit(tree, self.id, self.bytes)


@dataclass(frozen=True)
class LeftBiasedOr(Editor):
    """Merges the edits of two editors, preferring ``left`` where both apply."""

    left: Editor
    right: Editor

    def has_edit(self, tree: Any, node: Any) -> bool:
        return self.left.has_edit(tree, node) or self.right.has_edit(tree, node)

    def edit(self, source: builtins.bytes, tree: Any, node: Any) -> builtins.bytes:
        for side in (self.left, self.right):
            if side.has_edit(tree, node):
                return side.edit(source, tree, node)
        raise ValueError("no edit for this node")