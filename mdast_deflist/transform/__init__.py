"""Tree-rewrite passes that repair lists inside definition lists."""

from .absorb import absorb_orphans, absorb_sibling_lists
from .cleanup import cleanup, remove_duplicate_items, remove_empty_items, remove_empty_lists
from .coalesce import coalesce_definition_lists
from .merge import merge_details_content, split_list_item
from .resolve import resolve_list_kinds

__all__ = [
    "merge_details_content",
    "split_list_item",
    "absorb_sibling_lists",
    "resolve_list_kinds",
    "cleanup",
    "remove_duplicate_items",
    "remove_empty_items",
    "remove_empty_lists",
    "absorb_orphans",
    "coalesce_definition_lists",
]
