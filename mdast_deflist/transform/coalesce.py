"""Merge adjacent definition lists at the top of the document."""

import logging

from ..nodes import DescriptionList, Node, Root, children_of
from .builders import create_description_list

logger = logging.getLogger(__name__)


def coalesce_definition_lists(tree: Node) -> Node:
    """Collapse every run of adjacent root-level definition lists into one.

    Each run becomes a single new ``descriptionlist`` holding the terms and
    details of the run in document order. Definition lists separated by
    other content stay separate.
    """
    if not isinstance(tree, Root):
        return tree

    result: list[Node] = []
    pending: list[Node] = []
    runs = 0
    merged = 0

    def flush() -> None:
        nonlocal pending, runs
        if pending:
            result.append(create_description_list(pending))
            pending = []
            runs += 1

    for child in children_of(tree):
        if isinstance(child, DescriptionList):
            pending.extend(child.children)
            merged += 1
        else:
            flush()
            result.append(child)
    flush()

    tree.children = result
    if merged > runs:
        logger.debug("Coalesced %d definition lists into %d", merged, runs)
    return tree
