"""Definition list transform with support for nested lists.

Extends the base definition list builder with post-processing passes that
repair lists inside definition details::

    from mdast_deflist import deflist_with_lists, MarkdownParser

    markdown = "Term\\n: - item A\\n  - item B\\n"
    transformer = deflist_with_lists()
    tree = transformer(MarkdownParser().parse_content(markdown), markdown)

Passes, in order:

1. source pre-normalization and re-parse (optional)
2. base definition list builder
3. merge orphaned list items inside details
4. absorb a list that directly follows a definition list
5. decide ordered vs. unordered and strip raw markers
6. cleanup of duplicated items, empty items and empty lists
7. absorb trailing paragraphs and lists (optional)
8. coalesce adjacent definition lists
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import TransformConfig
from .deflist import deflist
from .nodes import Root
from .parser import MarkdownParser
from .prenormalize import prenormalize
from .transform import (
    absorb_orphans,
    absorb_sibling_lists,
    cleanup,
    coalesce_definition_lists,
    merge_details_content,
    resolve_list_kinds,
)

logger = logging.getLogger(__name__)

Transformer = Callable[..., Root]


def deflist_with_lists(config: TransformConfig | None = None) -> Transformer:
    """Create the definition list transformer.

    Args:
        config: Optional stages to run; defaults to all of them.

    Returns:
        A callable ``transformer(tree, source=None)`` that rewrites the tree
        in place and returns it. ``source`` is the markdown text the tree was
        parsed from; without it the pre-normalization stage is skipped.
    """
    config = config or TransformConfig()
    base = deflist()
    parser = MarkdownParser()

    def transformer(tree: Root, source: str | None = None) -> Root:
        prenormalized = False
        if config.prenormalize:
            if source is None:
                logger.debug("No source text given, skipping pre-normalization")
            else:
                prenormalize(tree, source, parser)
                prenormalized = True

        base(tree, source, lambda *args: None)

        merge_details_content(tree)
        absorb_sibling_lists(tree)
        resolve_list_kinds(tree)
        cleanup(tree, remove_duplicates=prenormalized)
        if config.absorb_orphans:
            absorb_orphans(tree)
        coalesce_definition_lists(tree)
        return tree

    return transformer


def transform_markdown(content: str, config: TransformConfig | None = None) -> Root:
    """Parse markdown content and apply the definition list transform."""
    tree = MarkdownParser().parse_content(content)
    return deflist_with_lists(config)(tree, content)
