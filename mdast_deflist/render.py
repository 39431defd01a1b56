"""HTML rendering of normalized syntax trees."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass

from .config import TransformConfig
from .nodes import (
    DESCRIPTION_DETAILS,
    DESCRIPTION_LIST,
    DESCRIPTION_TERM,
    TEXT,
    Generic,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Text,
    children_of,
)
from .parser import MarkdownParser
from .plugin import Transformer, deflist_with_lists

logger = logging.getLogger(__name__)

# Tag used when a node carries no hName hint
DEFAULT_TAGS = {
    DESCRIPTION_LIST: "dl",
    DESCRIPTION_TERM: "dt",
    DESCRIPTION_DETAILS: "dd",
    "blockquote": "blockquote",
    "emphasis": "em",
    "strong": "strong",
    "delete": "del",
}

PHRASING_TYPES = frozenset(
    {TEXT, "emphasis", "strong", "delete", "inlineCode", "link", "image", "break", "html"}
)


@dataclass
class RenderResult:
    """Result of rendering a markdown document."""

    success: bool
    error: str | None = None
    html: str | None = None


class HtmlRenderer:
    """Renders a node tree to HTML.

    Block-level nodes are separated by newlines. Paragraphs inside tight
    list items are unwrapped. Description nodes use their ``data.hName``
    hint as the tag name.
    """

    def render(self, tree: Node) -> str:
        """Render a tree to an HTML string."""
        body = self._render(tree)
        return f"{body}\n" if body else ""

    def _render(self, node: Node, tight: bool = False) -> str:
        if isinstance(node, Text):
            return html.escape(node.value, quote=False)
        if isinstance(node, Root):
            return "\n".join(self._render(child) for child in node.children)
        if isinstance(node, Paragraph):
            content = self._render_inline(node)
            return content if tight else f"<p>{content}</p>"
        if isinstance(node, List):
            return self._render_list(node)
        if isinstance(node, ListItem):
            return self._render_item(node, tight)
        if isinstance(node, Generic):
            return self._render_generic(node)

        tag = node.h_name or DEFAULT_TAGS.get(node.type)
        if tag is None:
            return self._render_inline(node)
        return self._render_element(tag, node)

    def _render_inline(self, node: Node) -> str:
        return "".join(self._render(child) for child in children_of(node))

    def _render_element(self, tag: str, node: Node) -> str:
        """Render a container, inline when all of its children are phrasing content."""
        children = children_of(node)
        if all(child.type in PHRASING_TYPES for child in children):
            return f"<{tag}>{self._render_inline(node)}</{tag}>"
        blocks = "\n".join(self._render(child) for child in children)
        return f"<{tag}>\n{blocks}\n</{tag}>"

    def _render_list(self, node: List) -> str:
        tag = "ol" if node.ordered else "ul"
        attrs = f' start="{node.start}"' if node.ordered and node.start not in (None, 1) else ""
        items = [self._render_item(item, not node.spread) for item in node.children]
        return "\n".join([f"<{tag}{attrs}>", *items, f"</{tag}>"])

    def _render_item(self, node: Node, tight: bool) -> str:
        children = children_of(node)
        parts = "\n".join(self._render(child, tight) for child in children)
        if tight and all(isinstance(child, Paragraph) for child in children):
            return f"<li>{parts}</li>"
        return f"<li>\n{parts}\n</li>"

    def _render_generic(self, node: Generic) -> str:
        if node.type == "heading":
            depth = node.attrs.get("depth", 1)
            return f"<h{depth}>{self._render_inline(node)}</h{depth}>"
        if node.type == "code":
            lang = node.attrs.get("lang")
            css = f' class="language-{html.escape(lang)}"' if lang else ""
            return f"<pre><code{css}>{html.escape(node.value or '', quote=False)}\n</code></pre>"
        if node.type == "thematicBreak":
            return "<hr />"
        if node.type == "html":
            return node.value or ""
        if node.type == "inlineCode":
            return f"<code>{html.escape(node.value or '', quote=False)}</code>"
        if node.type == "break":
            return "<br />\n"
        if node.type == "link":
            href = html.escape(node.attrs.get("url") or "")
            title = node.attrs.get("title")
            title_attr = f' title="{html.escape(title)}"' if title else ""
            return f'<a href="{href}"{title_attr}>{self._render_inline(node)}</a>'
        if node.type == "image":
            src = html.escape(node.attrs.get("url") or "")
            alt = html.escape(node.attrs.get("alt") or "")
            return f'<img src="{src}" alt="{alt}" />'

        tag = node.h_name or DEFAULT_TAGS.get(node.type)
        if tag is not None:
            return self._render_element(tag, node)
        if node.children is not None:
            return self._render_inline(node)
        return html.escape(node.value or "", quote=False)


def render_markdown(
    content: str,
    config: TransformConfig | None = None,
    transformer: Transformer | None = None,
) -> RenderResult:
    """Parse, transform and render markdown content to HTML.

    Errors raised while transforming are reported in the result instead of
    being raised.

    Args:
        content: Markdown source.
        config: Transform configuration, used when no transformer is given.
        transformer: Transformer to apply instead of the default one.

    Returns:
        RenderResult with the HTML, or the error message on failure.
    """
    transformer = transformer or deflist_with_lists(config)
    try:
        tree = transformer(MarkdownParser().parse_content(content), content)
    except Exception as e:
        logger.warning("Failed to transform markdown: %s", e)
        return RenderResult(success=False, error=str(e))

    return RenderResult(success=True, html=HtmlRenderer().render(tree))
