"""Merge orphaned list content inside definition details.

The base builder leaves list content in a ``descriptiondetails`` node as
bare list items, or as text that still starts with a bullet. This pass
gathers every run of such content into a proper ``list`` node. A run that
is directly followed by a list is moved to the front of that list.
"""

import logging

from ..markers import BULLETS, has_marker
from ..nodes import (
    DESCRIPTION_DETAILS,
    List,
    ListItem,
    Node,
    Paragraph,
    Text,
    children_of,
    join_lines,
    line_text,
    split_lines,
)
from ..visit import visit
from .builders import create_list, create_list_item

logger = logging.getLogger(__name__)


def merge_details_content(tree: Node) -> Node:
    """Wrap orphaned list items of every details node into lists."""
    visit(tree, DESCRIPTION_DETAILS, _merge_details)
    return tree


def _merge_details(details: Node, index: int | None, parent: Node | None) -> None:
    merged: list[Node] = []
    items: list[Node] = []
    merged_items = 0

    for child in children_of(details):
        if isinstance(child, ListItem):
            items.append(child)
            items.extend(split_list_item(child))
        elif isinstance(child, Text) and has_marker(child.value, BULLETS, indent=False):
            items.append(create_list_item([child]))
        elif isinstance(child, List) and items:
            merged_items += len(items)
            child.children[:0] = items
            items = []
            merged.append(child)
        else:
            if items:
                merged_items += len(items)
                merged.append(create_list(items))
                items = []
            merged.append(child)

    if items:
        merged_items += len(items)
        merged.append(create_list(items))

    # Details without list content keep their children as they are
    if not merged_items:
        return

    details.children = merged
    logger.debug("Merged %d orphaned list items in definition details", merged_items)


def split_list_item(item: ListItem) -> list[Node]:
    """Split the lines folded into the first paragraph of a list item.

    The first line stays in ``item``. Each following line that starts with a
    bullet or ordinal marker becomes a new list item; a line without a
    marker continues the item before it.

    Returns:
        The new list items, in document order.
    """
    children = children_of(item)
    if not children or not isinstance(children[0], Paragraph):
        return []

    lines = split_lines(children[0].children)
    if len(lines) < 2:
        return []

    groups = [[lines[0]]]
    for line in lines[1:]:
        if has_marker(line_text(line)):
            groups.append([line])
        else:
            groups[-1].append(line)

    children[0].children = join_lines(groups[0])
    return [create_list_item(join_lines(group)) for group in groups[1:]]
