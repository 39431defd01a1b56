"""Definition list transform for mdast-shaped markdown syntax trees."""

from ._version import __version__
from .config import TransformConfig, load_config
from .deflist import deflist
from .markers import Marker, MarkerKind, is_ordinal, match_marker, strip_marker
from .nodes import (
    DescriptionDetails,
    DescriptionList,
    DescriptionTerm,
    Generic,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Text,
    from_dict,
    to_dict,
    to_string,
)
from .parser import MarkdownParser
from .plugin import deflist_with_lists, transform_markdown
from .render import HtmlRenderer, RenderResult, render_markdown
from .visit import SKIP, remove, visit

__all__ = [
    "__version__",
    "TransformConfig",
    "load_config",
    "deflist",
    "deflist_with_lists",
    "transform_markdown",
    "MarkdownParser",
    "HtmlRenderer",
    "RenderResult",
    "render_markdown",
    "Marker",
    "MarkerKind",
    "match_marker",
    "strip_marker",
    "is_ordinal",
    "Node",
    "Root",
    "Paragraph",
    "Text",
    "List",
    "ListItem",
    "DescriptionList",
    "DescriptionTerm",
    "DescriptionDetails",
    "Generic",
    "to_dict",
    "from_dict",
    "to_string",
    "visit",
    "remove",
    "SKIP",
]
