"""The editor interface: decides which nodes change when a tree is printed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator

from tree_edit.traversal import Order, traverse_tree


@dataclass(frozen=True)
class Edit:
    """Replace ``delete`` bytes at ``position`` with ``insert``."""

    position: int
    delete: int
    insert: bytes


class Editor(ABC):
    """Modifies a parse tree when it is printed."""

    @abstractmethod
    def has_edit(self, tree: Any, node: Any) -> bool:
        """Whether this editor has an edit for ``node``."""

    @abstractmethod
    def edit(self, source: bytes, tree: Any, node: Any) -> bytes:
        """The replacement text for ``node``; only called when ``has_edit`` holds."""

    def in_order_edits(self, source: bytes, tree: Any) -> Iterator[Edit]:
        """Yield all edits to ``tree`` ordered by start byte, from a pre-order walk."""
        for node in traverse_tree(tree, Order.PRE):
            if self.has_edit(tree, node):
                yield Edit(
                    position=node.start_byte,
                    delete=node.end_byte - node.start_byte,
                    insert=self.edit(source, tree, node),
                )