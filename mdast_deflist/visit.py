"""Depth-first traversal and node removal for syntax trees."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .nodes import Node, children_of

SKIP = "skip"

Test = str | tuple[str, ...] | Callable[[Node], bool] | None
Visitor = Callable[[Node, int | None, Node | None], Any]


def matches(node: Node, test: Test) -> bool:
    """Check a node against a type tag, a tuple of tags or a predicate."""
    if test is None:
        return True
    if isinstance(test, str):
        return node.type == test
    if isinstance(test, tuple):
        return node.type in test
    return bool(test(node))


def visit(tree: Node, test: Test, visitor: Visitor) -> None:
    """Call visitor(node, index, parent) for every matching node, in pre-order.

    The tree root is visited with index and parent set to None. Children are
    read from the live ``children`` list after the visitor returns, so a
    visitor may replace ``node.children`` or splice siblings that come after
    ``index``; those changes are seen by the rest of the walk. Removing the
    visited node itself must go through :func:`remove` instead. Returning
    SKIP from the visitor leaves the node's children unvisited.
    """
    _visit(tree, None, None, test, visitor)


def _visit(
    node: Node, index: int | None, parent: Node | None, test: Test, visitor: Visitor
) -> None:
    if matches(node, test) and visitor(node, index, parent) == SKIP:
        return

    position = 0
    while position < len(children_of(node)):
        _visit(children_of(node)[position], position, node, test, visitor)
        position += 1


def remove(tree: Node, test: Test) -> int:
    """Remove every node matching test from the tree.

    Matches are collected in a first walk and spliced out of their parents
    by identity afterwards, so sibling indices never shift under a running
    walk. The tree root itself is never removed and the descendants of a
    removed node are not inspected.

    Returns:
        Number of nodes removed.
    """
    doomed: list[tuple[Node, Node]] = []

    def collect(node: Node, index: int | None, parent: Node | None) -> str | None:
        if parent is not None and matches(node, test):
            doomed.append((parent, node))
            return SKIP
        return None

    visit(tree, None, collect)

    for parent, node in doomed:
        siblings = children_of(parent)
        for i, sibling in enumerate(siblings):
            if sibling is node:
                del siblings[i]
                break
    return len(doomed)
