"""Markdown parser producing mdast-shaped syntax trees."""

from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .nodes import (
    Generic,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Text,
    merge_text,
)

# Inline container types, keyed by markdown-it name
INLINE_CONTAINERS = {"em": "emphasis", "strong": "strong", "s": "delete"}


class MarkdownParser:
    """Parser for CommonMark documents that builds a node tree.

    Parsing is delegated to markdown-it-py; its token tree is converted to
    the mdast vocabulary used by the definition list transforms. Soft line
    breaks are kept as newlines inside text leaves, as mdast does.
    """

    def __init__(self):
        self._md = MarkdownIt("commonmark")

    def parse_file(self, file_path: str | Path) -> Root:
        """Parse a markdown file and return its tree."""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with path.open("r", encoding="utf-8") as f:
            content = f.read()

        return self.parse_content(content)

    def parse_content(self, content: str) -> Root:
        """Parse markdown content and return its tree."""
        syntax_tree = SyntaxTreeNode(self._md.parse(content))
        root = Root(children=self._convert_blocks(syntax_tree.children))
        root.position = {
            "start": {"line": 1},
            "end": {"line": max(len(content.splitlines()), 1)},
        }
        return root

    def _convert_blocks(self, nodes: list[SyntaxTreeNode]) -> list[Node]:
        return [self._convert_block(node) for node in nodes]

    def _convert_block(self, node: SyntaxTreeNode) -> Node:
        """Convert one block-level syntax node."""
        converted: Node
        if node.type == "paragraph":
            converted = Paragraph(children=self._convert_inline_container(node))
        elif node.type in ("bullet_list", "ordered_list"):
            converted = self._convert_list(node)
        elif node.type == "list_item":
            converted = ListItem(children=self._convert_blocks(node.children))
        elif node.type == "heading":
            converted = Generic(
                "heading",
                children=self._convert_inline_container(node),
                attrs={"depth": int(node.tag[1:])},
            )
        elif node.type == "blockquote":
            converted = Generic("blockquote", children=self._convert_blocks(node.children))
        elif node.type in ("fence", "code_block"):
            value = node.content[:-1] if node.content.endswith("\n") else node.content
            lang = node.info.strip().split(" ")[0] if node.type == "fence" else ""
            converted = Generic("code", value=value, attrs={"lang": lang or None})
        elif node.type == "hr":
            converted = Generic("thematicBreak")
        elif node.type == "html_block":
            converted = Generic("html", value=node.content.rstrip("\n"))
        else:
            converted = Generic(node.type, children=self._convert_blocks(node.children))

        if node.map:
            start, end = node.map
            converted.position = {"start": {"line": start + 1}, "end": {"line": end}}
        return converted

    def _convert_list(self, node: SyntaxTreeNode) -> List:
        """Convert a bullet or ordered list, marking tight lists as not spread."""
        items = [self._convert_block(child) for child in node.children]
        # markdown-it hides the paragraphs of tight lists
        spread = any(
            not grandchild.hidden
            for child in node.children
            for grandchild in child.children
            if grandchild.type == "paragraph"
        )
        for item in items:
            if isinstance(item, ListItem):
                item.spread = spread

        ordered = node.type == "ordered_list"
        start = int(node.attrs.get("start", 1)) if ordered else None
        return List(children=items, ordered=ordered, spread=spread, start=start)

    def _convert_inline_container(self, node: SyntaxTreeNode) -> list[Node]:
        """Convert the inline content of a paragraph or heading."""
        inlines: list[Node] = []
        for child in node.children:
            if child.type == "inline":
                inlines.extend(self._convert_inlines(child.children))
        return merge_text(inlines)

    def _convert_inlines(self, nodes: list[SyntaxTreeNode]) -> list[Node]:
        converted: list[Node] = []
        for node in nodes:
            if node.type in ("text", "text_special"):
                converted.append(Text(node.content))
            elif node.type == "softbreak":
                converted.append(Text("\n"))
            elif node.type == "hardbreak":
                converted.append(Generic("break"))
            elif node.type == "code_inline":
                converted.append(Generic("inlineCode", value=node.content))
            elif node.type == "html_inline":
                converted.append(Generic("html", value=node.content))
            elif node.type == "link":
                converted.append(
                    Generic(
                        "link",
                        children=self._convert_inlines(node.children),
                        attrs={"url": node.attrs.get("href", ""), "title": node.attrs.get("title")},
                    )
                )
            elif node.type == "image":
                converted.append(
                    Generic(
                        "image",
                        attrs={
                            "url": node.attrs.get("src", ""),
                            "alt": node.content,
                            "title": node.attrs.get("title"),
                        },
                    )
                )
            elif node.type in INLINE_CONTAINERS:
                converted.append(
                    Generic(
                        INLINE_CONTAINERS[node.type],
                        children=merge_text(self._convert_inlines(node.children)),
                    )
                )
            else:
                converted.append(
                    Generic(node.type, children=self._convert_inlines(node.children))
                )
        return merge_text(converted)
