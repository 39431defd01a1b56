"""Syntax tree node types for parsed markdown documents.

The node vocabulary follows the mdast shape: every node carries a ``type``
tag, container nodes carry ``children`` and text leaves carry ``value``.
Definition list nodes (``descriptionlist``, ``descriptionterm`` and
``descriptiondetails``) extend that vocabulary. Every other node type is
kept as a :class:`Generic` node and passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ROOT = "root"
PARAGRAPH = "paragraph"
TEXT = "text"
LIST = "list"
LIST_ITEM = "listItem"
DESCRIPTION_LIST = "descriptionlist"
DESCRIPTION_TERM = "descriptionterm"
DESCRIPTION_DETAILS = "descriptiondetails"


@dataclass(eq=False)
class Node:
    """Base class for all tree nodes.

    Nodes compare by identity so that a node can be found and spliced out of
    its parent even when a sibling has identical content.
    """

    type: str
    data: dict[str, Any] = field(default_factory=dict, kw_only=True)
    position: dict[str, Any] | None = field(default=None, kw_only=True)

    @property
    def h_name(self) -> str | None:
        """Rendering hint (target tag name) attached to the node, if any."""
        return self.data.get("hName")


@dataclass(eq=False)
class Parent(Node):
    """A node with an ordered list of children."""

    children: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class Root(Parent):
    type: str = field(default=ROOT, init=False)


@dataclass(eq=False)
class Paragraph(Parent):
    type: str = field(default=PARAGRAPH, init=False)


@dataclass(eq=False)
class Text(Node):
    type: str = field(default=TEXT, init=False)
    value: str = ""


@dataclass(eq=False)
class List(Parent):
    type: str = field(default=LIST, init=False)
    ordered: bool = False
    spread: bool = False
    start: int | None = None


@dataclass(eq=False)
class ListItem(Parent):
    type: str = field(default=LIST_ITEM, init=False)
    spread: bool = False
    checked: bool | None = None


@dataclass(eq=False)
class DescriptionList(Parent):
    """A definition list (``<dl>``): terms each followed by their details."""

    type: str = field(default=DESCRIPTION_LIST, init=False)


@dataclass(eq=False)
class DescriptionTerm(Parent):
    """The defined term (``<dt>``), holding inline content."""

    type: str = field(default=DESCRIPTION_TERM, init=False)


@dataclass(eq=False)
class DescriptionDetails(Parent):
    """The definition body (``<dd>``): paragraphs, lists or stray inline nodes."""

    type: str = field(default=DESCRIPTION_DETAILS, init=False)


@dataclass(eq=False)
class Generic(Node):
    """Any node type the transform passes through untouched.

    Leaves (``code``, ``inlineCode``, ``html``, ...) keep ``children`` as
    ``None``. Type-specific fields such as a heading's ``depth`` or a link's
    ``url`` live in ``attrs``.
    """

    children: list[Node] | None = None
    value: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict)


NODE_CLASSES: dict[str, type[Node]] = {
    ROOT: Root,
    PARAGRAPH: Paragraph,
    TEXT: Text,
    LIST: List,
    LIST_ITEM: ListItem,
    DESCRIPTION_LIST: DescriptionList,
    DESCRIPTION_TERM: DescriptionTerm,
    DESCRIPTION_DETAILS: DescriptionDetails,
}


def children_of(node: Node | None) -> list[Node]:
    """Return the children of a node, or an empty list when it has none."""
    children = getattr(node, "children", None)
    return children if children is not None else []


def to_string(node: Node) -> str:
    """Get the plain-text content of a node and its descendants."""
    value = getattr(node, "value", None)
    if value is not None:
        return value
    if isinstance(node, Generic) and "alt" in node.attrs:
        return node.attrs["alt"] or ""
    return "".join(to_string(child) for child in children_of(node))


def start_line(node: Node) -> int | None:
    """Source line where a node starts, if it has a position."""
    if node.position is None:
        return None
    return node.position.get("start", {}).get("line")


def first_text(item: Node) -> Text | None:
    """Find the leading text of a list item (item -> paragraph -> text)."""
    children = children_of(item)
    if not children or not isinstance(children[0], Paragraph):
        return None
    inlines = children[0].children
    if inlines and isinstance(inlines[0], Text):
        return inlines[0]
    return None


def merge_text(nodes: list[Node]) -> list[Node]:
    """Merge runs of adjacent text nodes into single text nodes."""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].value + node.value)
        else:
            merged.append(node)
    return merged


def split_lines(nodes: list[Node]) -> list[list[Node]]:
    """Split inline content into lines at embedded newlines.

    Text nodes are cut at each newline; any other inline node stays whole on
    the line where it starts. The result always holds at least one line.
    """
    lines: list[list[Node]] = [[]]
    for node in nodes:
        if not isinstance(node, Text):
            lines[-1].append(node)
            continue
        for i, segment in enumerate(node.value.split("\n")):
            if i:
                lines.append([])
            if segment:
                lines[-1].append(Text(segment))
    return lines


def join_lines(lines: list[list[Node]]) -> list[Node]:
    """Inverse of :func:`split_lines`."""
    nodes: list[Node] = []
    for i, line in enumerate(lines):
        if i:
            nodes.append(Text("\n"))
        nodes.extend(line)
    return merge_text(nodes)


def line_text(line: list[Node]) -> str:
    """Leading text of a line, or an empty string if it starts with markup."""
    if line and isinstance(line[0], Text):
        return line[0].value
    return ""


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node tree to mdast-shaped dictionaries."""
    result: dict[str, Any] = {"type": node.type}
    if isinstance(node, Generic):
        result.update(node.attrs)
    if isinstance(node, List):
        result["ordered"] = node.ordered
        result["spread"] = node.spread
        if node.start is not None:
            result["start"] = node.start
    elif isinstance(node, ListItem):
        result["spread"] = node.spread
        result["checked"] = node.checked
    value = getattr(node, "value", None)
    if value is not None:
        result["value"] = value
    children = getattr(node, "children", None)
    if children is not None:
        result["children"] = [to_dict(child) for child in children]
    if node.data:
        result["data"] = dict(node.data)
    if node.position is not None:
        result["position"] = node.position
    return result


def from_dict(mapping: dict[str, Any]) -> Node:
    """Build a node tree from mdast-shaped dictionaries.

    Unknown node types become :class:`Generic` nodes; their extra keys are
    kept in ``attrs``.
    """
    node_type = mapping.get("type", "")
    data = dict(mapping.get("data") or {})
    position = mapping.get("position")
    raw_children = mapping.get("children")
    children = [from_dict(child) for child in raw_children] if raw_children is not None else None

    cls = NODE_CLASSES.get(node_type)
    if cls is None:
        attrs = {
            key: value
            for key, value in mapping.items()
            if key not in ("type", "data", "position", "children", "value")
        }
        return Generic(
            node_type,
            children=children,
            value=mapping.get("value"),
            attrs=attrs,
            data=data,
            position=position,
        )
    if cls is Text:
        return Text(mapping.get("value", ""), data=data, position=position)

    node = cls(children=children or [], data=data, position=position)
    if isinstance(node, List):
        node.ordered = bool(mapping.get("ordered", False))
        node.spread = bool(mapping.get("spread", False))
        node.start = mapping.get("start")
    elif isinstance(node, ListItem):
        node.spread = bool(mapping.get("spread", False))
        node.checked = mapping.get("checked")
    return node
