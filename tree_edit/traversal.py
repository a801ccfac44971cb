"""Pre-order and post-order traversal of n-ary trees through a stateful cursor."""

from __future__ import annotations

import enum
from typing import Any, Callable, Iterator, Protocol


class Cursor(Protocol):
    """A stateful cursor that always points at exactly one node of a tree."""

    def goto_first_child(self) -> bool:
        """Move to the first child; return False if there are no children."""

    def goto_parent(self) -> bool:
        """Move to the parent; return False if already at the root."""

    def goto_next_sibling(self) -> bool:
        """Move to the next sibling; return False if there is none."""

    def node(self) -> Any:
        """Return the node the cursor currently points at."""


class Order(enum.Enum):
    """Order in which to visit the nodes of a tree."""

    PRE = "pre"
    POST = "post"


def _climb_to_next_sibling(cursor: Cursor) -> bool:
    """Climb until a next sibling is reached; return False on reaching the root."""
    while cursor.goto_parent():
        if cursor.goto_next_sibling():
            return True
    return False


def _preorder(cursor: Cursor) -> Iterator[Any]:
    while True:
        node = cursor.node()
        if cursor.goto_first_child() or cursor.goto_next_sibling():
            yield node
            continue
        more = _climb_to_next_sibling(cursor)
        yield node
        if not more:
            return


def _postorder(cursor: Cursor) -> Iterator[Any]:
    retracing = False
    while True:
        if not retracing:
            while cursor.goto_first_child():
                pass
        node = cursor.node()
        retracing = not cursor.goto_next_sibling()
        done = retracing and not cursor.goto_parent()
        yield node
        if done:
            return


def traverse(cursor: Cursor, order: Order) -> Iterator[Any]:
    """Iterate over the nodes reachable from ``cursor`` in the given order.

    The cursor must be at the root of the tree; ValueError is raised otherwise.
    When the iterator is exhausted the cursor is back at the root.
    """
    if cursor.goto_parent():
        raise ValueError("cursor must be positioned at the root of the tree")
    if order is Order.PRE:
        return _preorder(cursor)
    return _postorder(cursor)


def traverse_tree(tree: Any, order: Order) -> Iterator[Any]:
    """Traverse a tree that provides a ``walk()`` method returning a cursor."""
    return traverse(tree.walk(), order)


def traverse_iterative(
    cursor: Cursor, order: Order, callback: Callable[[Any], None]
) -> None:
    """Visit every node in the given order, calling ``callback`` on each."""

    def visit(when: Order, node: Any) -> None:
        if order is when:
            callback(node)

    while True:
        visit(Order.PRE, cursor.node())
        if cursor.goto_first_child():
            continue

        node = cursor.node()
        if cursor.goto_next_sibling():
            visit(Order.POST, node)
            continue

        while True:
            visit(Order.POST, cursor.node())
            if not cursor.goto_parent():
                return
            node = cursor.node()
            if cursor.goto_next_sibling():
                visit(Order.POST, node)
                break


def traverse_recursive(
    cursor: Cursor, order: Order, callback: Callable[[Any], None]
) -> None:
    """Visit every node in the given order by recursion, calling ``callback`` on each."""
    if order is Order.PRE:
        callback(cursor.node())
    if cursor.goto_first_child():
        traverse_recursive(cursor, order, callback)
        while cursor.goto_next_sibling():
            traverse_recursive(cursor, order, callback)
        if not cursor.goto_parent():
            raise RuntimeError("cursor failed to return to the parent node")
    if order is Order.POST:
        callback(cursor.node())