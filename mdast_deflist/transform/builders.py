"""Constructors for the synthetic nodes created by the transforms.

Description nodes created here carry a ``data.hName`` rendering hint.
Lists and list items are standard mdast types and need none.
"""

from ..markers import BULLETS, strip_marker
from ..nodes import (
    DescriptionDetails,
    DescriptionList,
    List,
    ListItem,
    Node,
    Paragraph,
    Text,
    merge_text,
)


def create_list(items: list[Node]) -> List:
    """Create a tight, unordered list; ordering is decided later."""
    return List(children=items, ordered=False, spread=False)


def create_list_item(inlines: list[Node]) -> ListItem:
    """Create a list item from a line of inline content.

    A leading bullet marker is stripped from the first text node. Ordinal
    markers are kept so that the list kind can still be decided from them.
    """
    inlines = list(inlines)
    if inlines and isinstance(inlines[0], Text):
        inlines[0] = Text(strip_marker(inlines[0].value, BULLETS))
    paragraph = Paragraph(children=merge_text(inlines))
    return ListItem(children=[paragraph], spread=False, checked=None)


def create_description_list(children: list[Node]) -> DescriptionList:
    return DescriptionList(children=children, data={"hName": "dl"})


def create_description_details(children: list[Node]) -> DescriptionDetails:
    return DescriptionDetails(children=children, data={"hName": "dd"})
