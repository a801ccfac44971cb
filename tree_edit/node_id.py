"""Identifiers for nodes of a parse tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, order=True)
class NodeId:
    """The identity of a node, taken from its ``id`` attribute."""

    id: int

    @classmethod
    def from_node(cls, node: Any) -> NodeId:
        """Return the identifier of ``node``."""
        return cls(node.id)

    def matches(self, node: Any) -> bool:
        """Whether ``node`` is the node this identifier names."""
        return node.id == self.id