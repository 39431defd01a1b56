"""Source-level rewriting applied before definition lists are built.

Some list shapes inside a definition cannot be recovered from the parsed
tree: CommonMark folds a ``: - item`` line and its continuation lines into
one paragraph. Rewriting the source first makes the parser see a real
nested list:

- a ``: - item`` or ``: 1. item`` line is kept and followed by a copy of
  its content indented as a list continuation (2 columns for bullets, 4 for
  ordinals); the numbers of the duplicated lines are recorded on the tree
  under ``data["duplicatedLines"]`` so that the cleanup pass removes only
  the items built from them
- such a line that follows indented list content gets a blank line before
  it, so that it starts a new definition instead of continuing the last item
- a plain ``: Definition`` line gets a blank line before it, so the term and
  the definition end up in separate paragraphs

Fenced code blocks are passed through untouched.
"""

from __future__ import annotations

import logging
import re

from .markers import Marker, MarkerKind, match_marker
from .nodes import Root
from .parser import MarkdownParser

logger = logging.getLogger(__name__)

FENCE_PREFIXES = ("```", "~~~")
CONTINUATION_PREFIX = re.compile(r"^[ \t]*:[ \t]*")
CONTENT_PREFIX = re.compile(r"^[ \t]*:[ \t]?")
DEFINITION_LINE = re.compile(r"^: ")

DUPLICATED_LINES = "duplicatedLines"

BULLET_INDENT = 2
ORDINAL_INDENT = 4


def continuation_marker(line: str) -> Marker | None:
    """Find the list marker of a ``: - item`` style definition line."""
    prefix = CONTINUATION_PREFIX.match(line)
    if prefix is None:
        return None
    rest = line[prefix.end() :]
    marker = match_marker(rest, indent=False)
    if marker is None or rest[marker.end - 1] not in " \t":
        return None
    return marker


def prenormalize_source(source: str) -> str:
    """Rewrite definition lines so that nested lists parse as lists."""
    return rewrite_source(source)[0]


def rewrite_source(source: str) -> tuple[str, list[int]]:
    """Rewrite definition lines and report which lines were duplicated.

    Returns:
        The rewritten source, and the 1-based numbers of the duplicated
        definition lines in it.
    """
    result: list[str] = []
    duplicated: list[int] = []
    in_code_block = False

    for line in source.split("\n"):
        if line.strip().startswith(FENCE_PREFIXES):
            in_code_block = not in_code_block
            result.append(line)
            continue

        if in_code_block:
            result.append(line)
            continue

        marker = continuation_marker(line)
        if marker is not None:
            indent = ORDINAL_INDENT if marker.kind is MarkerKind.ORDINAL else BULLET_INDENT
            if result and result[-1][:1] in (" ", "\t") and result[-1].strip():
                result.append("")
            result.append(line)
            duplicated.append(len(result))
            result.append(" " * indent + CONTENT_PREFIX.sub("", line, count=1))
        elif DEFINITION_LINE.match(line):
            result.append("")
            result.append(line)
        else:
            result.append(line)

    if duplicated:
        logger.debug("Duplicated %d definition lines as list continuations", len(duplicated))
    return "\n".join(result), duplicated


def prenormalize(tree: Root, source: str, parser: MarkdownParser | None = None) -> Root:
    """Re-parse the rewritten source and make it the content of tree.

    The tree keeps its identity; its children and position are replaced by
    those of the freshly parsed document, and the duplicated line numbers
    are stored in its data.
    """
    parser = parser or MarkdownParser()
    rewritten, duplicated = rewrite_source(source)
    fresh = parser.parse_content(rewritten)
    tree.children = fresh.children
    tree.position = fresh.position
    tree.data[DUPLICATED_LINES] = duplicated
    return tree
