import pytest

from tree_edit.traversal import (
    Order,
    traverse,
    traverse_iterative,
    traverse_recursive,
    traverse_tree,
)


class _Node:
    """A node that knows its parent and its place among its siblings."""

    def __init__(self, kind, *children):
        self.kind = kind
        self.children = list(children)
        self.parent = None
        self.index = 0
        for index, child in enumerate(self.children):
            child.parent = self
            child.index = index

    def __repr__(self):
        return f"_Node({self.kind!r})"


class _Cursor:
    def __init__(self, root):
        self.at = root

    def node(self):
        return self.at

    def goto_first_child(self):
        if not self.at.children:
            return False
        self.at = self.at.children[0]
        return True

    def goto_parent(self):
        if self.at.parent is None:
            return False
        self.at = self.at.parent
        return True

    def goto_next_sibling(self):
        parent = self.at.parent
        if parent is None or self.at.index + 1 >= len(parent.children):
            return False
        self.at = parent.children[self.at.index + 1]
        return True


class _Tree:
    def __init__(self, root):
        self.root = root

    def walk(self):
        return _Cursor(self.root)


class _Root:
    """A tree holding only a root node."""

    def goto_first_child(self):
        return False

    goto_parent = goto_first_child
    goto_next_sibling = goto_first_child

    def node(self):
        return ()


_n = _Node


def _ex1():
    # fn double(x: usize) -> usize { return 2 * x; }
    return _Tree(
        _n(
            "source_file",
            _n(
                "function_item",
                _n("fn"),
                _n("identifier"),
                _n(
                    "parameters",
                    _n("("),
                    _n("parameter", _n("identifier"), _n(":"), _n("primitive_type")),
                    _n(")"),
                ),
                _n("->"),
                _n("primitive_type"),
                _n(
                    "block",
                    _n("{"),
                    _n(
                        "expression_statement",
                        _n(
                            "return_expression",
                            _n("return"),
                            _n(
                                "binary_expression",
                                _n("integer_literal"),
                                _n("*"),
                                _n("identifier"),
                            ),
                        ),
                        _n(";"),
                    ),
                    _n("}"),
                ),
            ),
        )
    )


def _ex2():
    # A tree with an error node and several top-level items
    return _Tree(
        _n(
            "source_file",
            _n("line_comment"),
            _n("ERROR", _n("string_literal", _n('"'))),
            _n("const_item", _n("const"), _n("identifier"), _n("="), _n("integer_literal"), _n(";")),
            _n("ERROR", _n("identifier"), _n("identifier")),
            _n(
                "block",
                _n("{"),
                _n("expression_statement", _n("return_expression", _n("return")), _n(";")),
                _n("}"),
            ),
        )
    )


def _ex3():
    return _Tree(_n("source_file"))


def _generate_traversals(tree, order):
    recursive = []
    traverse_recursive(tree.walk(), order, recursive.append)
    iterative = []
    traverse_iterative(tree.walk(), order, iterative.append)
    iterator = list(traverse(tree.walk(), order))
    assert recursive == iterative
    assert iterative == iterator
    return iterator


@pytest.mark.parametrize("make_tree", [_ex1, _ex2, _ex3])
@pytest.mark.parametrize("order", [Order.PRE, Order.POST])
def test_equivalence(make_tree, order):
    tree = make_tree()
    nodes = _generate_traversals(tree, order)
    assert len(nodes) >= 1


def test_postconditions():
    tree = _ex1()
    walk = tree.walk()
    for order in (Order.PRE, Order.POST):
        it = traverse(walk, order)
        for _ in it:
            pass
        assert next(it, None) is None
        assert next(it, None) is None
        assert walk.node() is tree.root


def test_precondition_violation_raises():
    tree = _ex1()
    walk = tree.walk()
    walk.goto_first_child()
    with pytest.raises(ValueError):
        traverse(walk, Order.PRE)


def test_example():
    tree = _ex1()
    preorder = list(traverse(tree.walk(), Order.PRE))
    postorder = list(traverse_tree(tree, Order.POST))
    assert preorder != postorder
    assert len(preorder) == len(postorder)
    assert set(map(id, preorder)) == set(map(id, postorder))


@pytest.mark.parametrize("order", [Order.PRE, Order.POST])
def test_root(order):
    assert len(list(traverse(_Root(), order))) == 1


def test_preorder_and_postorder_sequences():
    tree = _Tree(_n("a", _n("b", _n("c"), _n("d")), _n("e")))
    pre = [n.kind for n in traverse_tree(tree, Order.PRE)]
    post = [n.kind for n in traverse_tree(tree, Order.POST)]
    assert pre == ["a", "b", "c", "d", "e"]
    assert post == ["c", "d", "b", "e", "a"]


def test_preorder_root_comes_first_and_postorder_root_comes_last():
    tree = _ex2()
    assert next(iter(traverse_tree(tree, Order.PRE))) is tree.root
    assert list(traverse_tree(tree, Order.POST))[-1] is tree.root