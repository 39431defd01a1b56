"""Decide list kinds inside definition details and strip raw markers."""

import logging

from ..markers import ALL_KINDS, is_ordinal, strip_marker
from ..nodes import DESCRIPTION_DETAILS, LIST, List, Node, children_of, first_text
from ..visit import visit

logger = logging.getLogger(__name__)


def resolve_list_kinds(tree: Node) -> Node:
    """Mark lists inside details as ordered when an item starts with ``N. ``.

    This pass is the only place where ordered vs. unordered is decided for
    lists inside definition details, so it must see the raw markers. After
    the decision every item's leading bullet or ordinal marker is removed.
    """
    visit(tree, LIST, _resolve_list)
    return tree


def _resolve_list(node: Node, index: int | None, parent: Node | None) -> None:
    if parent is None or parent.type != DESCRIPTION_DETAILS or not isinstance(node, List):
        return

    texts = [text for text in map(first_text, children_of(node)) if text is not None]

    was_ordered = node.ordered
    node.ordered = node.ordered or any(is_ordinal(text.value) for text in texts)
    if node.ordered and not was_ordered:
        logger.debug("Detected ordered list in definition details")

    for text in texts:
        text.value = strip_marker(text.value, ALL_KINDS)
