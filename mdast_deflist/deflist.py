"""Base definition list builder.

Turns ``Term`` / ``: Definition`` paragraphs into preliminary
``descriptionlist``, ``descriptionterm`` and ``descriptiondetails`` nodes::

    Term
    : Definition

The builder only looks at paragraph text. It does not parse the block
structure of a definition: details whose first line starts with a list
marker are kept as a single list item holding the raw, possibly multi-line
text, and the transforms in :mod:`mdast_deflist.transform` repair them.
Such list items carry the source line of their ``: `` line as position.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .markers import has_marker
from .nodes import (
    PARAGRAPH,
    TEXT,
    DescriptionDetails,
    DescriptionList,
    DescriptionTerm,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Text,
    children_of,
    join_lines,
    line_text,
    split_lines,
    start_line,
)
from .visit import visit

logger = logging.getLogger(__name__)

DETAILS_PREFIX = re.compile(r"^:\s+")

BaseTransformer = Callable[[Root, str | None, Callable[..., None] | None], None]


def deflist() -> BaseTransformer:
    """Create the base definition list transformer.

    The returned callable takes ``(tree, source, done)``; it mutates the tree
    in place and calls ``done()`` when given one.
    """

    def transformer(
        tree: Root, source: str | None = None, done: Callable[..., None] | None = None
    ) -> None:
        build_definition_lists(tree)
        if done is not None:
            done()

    return transformer


def build_definition_lists(tree: Node) -> int:
    """Create definition lists in every container of the tree.

    Returns:
        Number of description lists created.
    """
    created = 0

    def build(node: Node, index: int | None, parent: Node | None) -> None:
        nonlocal created
        if node.type in (PARAGRAPH, TEXT) or not children_of(node):
            return
        created += _build_in(node)

    visit(tree, None, build)
    if created:
        logger.debug("Built %d definition lists", created)
    return created


def _build_in(parent: Node) -> int:
    """Rewrite the direct children of one container."""
    created = 0
    changed = False
    result: list[Node] = []

    for child in parent.children:
        if not isinstance(child, Paragraph):
            result.append(child)
            continue

        lines = split_lines(child.children)
        first_line = start_line(child)
        if _is_details_line(lines[0]):
            previous = result[-1] if result else None
            details = _build_details(lines, first_line)
            if isinstance(previous, DescriptionList):
                previous.children.extend(details)
                changed = True
                continue
            if _follows_definition_list(result):
                # The list belongs to the last details of the definition list
                lst = result.pop()
                dl = result[-1]
                dl.children[-1].children.append(lst)
                dl.children.extend(details)
                changed = True
                continue
            if isinstance(previous, Paragraph):
                result[-1] = _description_list(previous.children, details)
                created += 1
                changed = True
                continue
            result.append(child)
            continue

        split_at = next((i for i, line in enumerate(lines) if _is_details_line(line)), None)
        if split_at is None:
            result.append(child)
            continue

        term = join_lines(lines[:split_at])
        details_line = None if first_line is None else first_line + split_at
        result.append(_description_list(term, _build_details(lines[split_at:], details_line)))
        created += 1
        changed = True

    if changed:
        parent.children = result
    return created


def _is_details_line(line: list[Node]) -> bool:
    return DETAILS_PREFIX.match(line_text(line)) is not None


def _follows_definition_list(result: list[Node]) -> bool:
    """Check for a definition list followed by a list, the shape a list definition leaves."""
    if len(result) < 2 or not isinstance(result[-1], List):
        return False
    dl = result[-2]
    return (
        isinstance(dl, DescriptionList)
        and bool(dl.children)
        and isinstance(dl.children[-1], DescriptionDetails)
    )


def _build_details(lines: list[list[Node]], first_line: int | None) -> list[Node]:
    """Group lines into details nodes, one per ``: `` line.

    ``first_line`` is the source line of ``lines[0]``, if known.
    """
    groups: list[tuple[int | None, list[list[Node]]]] = []
    for offset, line in enumerate(lines):
        if _is_details_line(line):
            head = Text(DETAILS_PREFIX.sub("", line_text(line), count=1))
            line_number = None if first_line is None else first_line + offset
            groups.append((line_number, [[head, *line[1:]] if head.value else line[1:]]))
        else:
            groups[-1][1].append(line)
    return [_details_node(group, line_number) for line_number, group in groups]


def _details_node(lines: list[list[Node]], line_number: int | None) -> DescriptionDetails:
    paragraph = Paragraph(children=join_lines(lines))
    if has_marker(line_text(lines[0])):
        content: Node = ListItem(children=[paragraph], spread=False, checked=None)
        if line_number is not None:
            content.position = {
                "start": {"line": line_number},
                "end": {"line": line_number + len(lines) - 1},
            }
    else:
        content = paragraph
    return DescriptionDetails(children=[content], data={"hName": "dd"})


def _description_list(term: list[Node], details: list[Node]) -> DescriptionList:
    return DescriptionList(
        children=[DescriptionTerm(children=term, data={"hName": "dt"}), *details],
        data={"hName": "dl"},
    )

