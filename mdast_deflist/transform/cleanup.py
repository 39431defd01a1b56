"""Remove artifacts left behind by the other passes."""

import logging
import re
from collections.abc import Iterable

from ..nodes import (
    DESCRIPTION_DETAILS,
    LIST,
    LIST_ITEM,
    List,
    Node,
    children_of,
    first_text,
    start_line,
)
from ..prenormalize import DUPLICATED_LINES
from ..visit import remove, visit

logger = logging.getLogger(__name__)

# ": - rest" at the end of a line, left over from a duplicated definition line
DUPLICATE_FRAGMENT = re.compile(r"(: [-*+][^:\n]*)$", re.MULTILINE)


def cleanup(tree: Node, *, remove_duplicates: bool = True) -> Node:
    """Clean up lists in definition details and drop empty items and lists.

    Args:
        tree: Tree to clean, modified in place.
        remove_duplicates: Whether to strip the artifacts of source
            pre-normalization: trailing ``: - item`` fragments in item text,
            and the items built from duplicated definition lines.

    Returns:
        The same tree.
    """
    if remove_duplicates:
        remove_duplicate_items(tree)
    remove_empty_items(tree)
    remove_empty_lists(tree)
    return tree


def remove_duplicate_items(tree: Node, lines: Iterable[int] | None = None) -> int:
    """Strip duplicated definition-line artifacts from lists in details.

    An item is a duplicate when it starts on one of ``lines``, the source
    lines that pre-normalization duplicated. They default to the ones
    recorded in the tree's data.

    Returns:
        Number of list items removed.
    """
    if lines is None:
        lines = tree.data.get(DUPLICATED_LINES, ())
    duplicated = set(lines)
    doomed: set[Node] = set()

    def clean_list(node: Node, index: int | None, parent: Node | None) -> None:
        if parent is None or parent.type != DESCRIPTION_DETAILS or not isinstance(node, List):
            return
        for item in node.children:
            text = first_text(item)
            if text is not None:
                text.value = DUPLICATE_FRAGMENT.sub("", text.value)
            if start_line(item) in duplicated:
                doomed.add(item)

    visit(tree, LIST, clean_list)
    removed = remove(tree, lambda node: node in doomed) if doomed else 0
    if removed:
        logger.debug("Removed %d duplicated list items", removed)
    return removed


def remove_empty_items(tree: Node) -> int:
    """Remove every list item without children.

    Returns:
        Number of list items removed.
    """
    removed = remove(tree, lambda node: node.type == LIST_ITEM and not children_of(node))
    if removed:
        logger.debug("Removed %d empty list items", removed)
    return removed


def remove_empty_lists(tree: Node) -> int:
    """Remove every list without items.

    Returns:
        Number of lists removed.
    """
    removed = remove(tree, lambda node: node.type == LIST and not children_of(node))
    if removed:
        logger.debug("Removed %d empty lists", removed)
    return removed
