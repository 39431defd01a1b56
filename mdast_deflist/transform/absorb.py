"""Pull content that was parsed next to a definition list back into it.

CommonMark ends the paragraph holding a definition as soon as a list or
blank line follows, so the rest of the definition lands after the
``descriptionlist`` as siblings. Two passes move it back:

- :func:`absorb_sibling_lists` handles a single list right after the
  definition list, merging it into the list of the last details node
- :func:`absorb_orphans` wraps any run of following lists and paragraphs
  into a new details node
"""

import logging

from ..nodes import (
    DESCRIPTION_LIST,
    LIST,
    PARAGRAPH,
    DescriptionDetails,
    List,
    Node,
    children_of,
)
from ..visit import visit
from .builders import create_description_details

logger = logging.getLogger(__name__)

ORPHAN_TYPES = (LIST, PARAGRAPH)


def absorb_sibling_lists(tree: Node) -> Node:
    """Move a list that directly follows a definition list into its last details."""
    visit(tree, DESCRIPTION_LIST, _absorb_sibling_list)
    return tree


def _absorb_sibling_list(node: Node, index: int | None, parent: Node | None) -> None:
    if index is None or parent is None or not children_of(node):
        return

    siblings = children_of(parent)
    if index + 1 >= len(siblings) or siblings[index + 1].type != LIST:
        return

    last = children_of(node)[-1]
    if not isinstance(last, DescriptionDetails):
        return

    sibling = siblings[index + 1]
    existing = next((child for child in last.children if isinstance(child, List)), None)
    if existing is not None:
        existing.children.extend(children_of(sibling))
        sibling.children = []
    else:
        last.children.append(sibling)
    del siblings[index + 1]
    logger.debug("Absorbed sibling list into definition details")


def absorb_orphans(tree: Node) -> Node:
    """Wrap lists and paragraphs that follow a definition list into new details."""
    visit(tree, DESCRIPTION_LIST, _absorb_orphans)
    return tree


def _absorb_orphans(node: Node, index: int | None, parent: Node | None) -> None:
    if index is None or parent is None:
        return

    siblings = children_of(parent)
    end = index + 1
    while end < len(siblings) and siblings[end].type in ORPHAN_TYPES:
        end += 1
    if end == index + 1:
        return

    orphans = siblings[index + 1 : end]
    del siblings[index + 1 : end]
    if getattr(node, "children", None) is None:
        node.children = []
    node.children.append(create_description_details(orphans))
    logger.debug("Absorbed %d orphaned nodes into definition list", len(orphans))
