"""Tests for source pre-normalization."""

from mdast_deflist.markers import MarkerKind
from mdast_deflist.nodes import Root, Text
from mdast_deflist.prenormalize import (
    DUPLICATED_LINES,
    continuation_marker,
    prenormalize,
    prenormalize_source,
    rewrite_source,
)


class TestContinuationMarker:
    """Tests for continuation_marker."""

    def test_bullet(self):
        """Test a bullet after the definition colon."""
        marker = continuation_marker(": - item")
        assert marker is not None
        assert marker.kind is MarkerKind.BULLET

    def test_ordinal(self):
        """Test an ordinal marker."""
        marker = continuation_marker("  :  2. item")
        assert marker is not None
        assert marker.kind is MarkerKind.ORDINAL

    def test_plain_definition(self):
        """Test plain definition."""
        assert continuation_marker(": Definition") is None

    def test_not_a_definition(self):
        """Test not a definition."""
        assert continuation_marker("- item") is None
        assert continuation_marker("Term") is None


class TestPrenormalizeSource:
    """Tests for prenormalize_source."""

    def test_bullet_line_is_duplicated(self):
        """Test bullet line is duplicated."""
        source = "Term\n: - item A\n  - item B\n"

        assert prenormalize_source(source) == "Term\n: - item A\n  - item A\n  - item B\n"

    def test_ordinal_line_is_duplicated_with_deeper_indent(self):
        """Test ordinal line is duplicated with deeper indent."""
        source = "Term\n: 1. First\n"

        assert prenormalize_source(source) == "Term\n: 1. First\n    1. First\n"

    def test_plain_definition_gets_blank_line(self):
        """Test plain definition gets blank line."""
        source = "Term\n: Definition\n"

        assert prenormalize_source(source) == "Term\n\n: Definition\n"

    def test_other_lines_pass_through(self):
        """Test other lines pass through."""
        source = "# Title\n\nSome text: with a colon\n- item\n"

        assert prenormalize_source(source) == source

    def test_code_blocks_are_untouched(self):
        """Test code blocks are untouched."""
        source = "```\nTerm\n: - item\n: Definition\n```\n~~~\n: x\n~~~\n"

        assert prenormalize_source(source) == source

    def test_rewriting_resumes_after_code_block(self):
        """Test rewriting resumes after code block."""
        source = "```\n: - a\n```\nTerm\n: - b\n"

        assert prenormalize_source(source) == "```\n: - a\n```\nTerm\n: - b\n  - b\n"

    def test_list_definition_after_list_content_gets_blank_line(self):
        """Test list definition after list content gets blank line."""
        source = "Term\n: - a\n  - b\n: - c\n"

        assert prenormalize_source(source) == "Term\n: - a\n  - a\n  - b\n\n: - c\n  - c\n"

    def test_consecutive_list_definitions_are_separated(self):
        """Test consecutive list definitions are separated."""
        source = "Term\n: - a\n: 1. b\n"

        assert prenormalize_source(source) == "Term\n: - a\n  - a\n\n: 1. b\n    1. b\n"


class TestRewriteSource:
    """Tests for rewrite_source."""

    def test_reports_duplicated_lines(self):
        """Test reports duplicated lines."""
        source = "Term\n: - a\n  - b\n: - c\n"

        rewritten, duplicated = rewrite_source(source)

        lines = rewritten.split("\n")
        assert duplicated == [2, 6]
        assert [lines[number - 1] for number in duplicated] == [": - a", ": - c"]

    def test_nothing_duplicated(self):
        """Test nothing duplicated."""
        assert rewrite_source("Term\n: Definition\n") == ("Term\n\n: Definition\n", [])


class TestPrenormalize:
    """Tests for prenormalize."""

    def test_replaces_tree_content(self, parser):
        """Test replaces tree content."""
        source = "Term\n: Definition\n"
        tree = Root(children=[Text("stale")])

        result = prenormalize(tree, source, parser)

        assert result is tree
        assert [child.type for child in tree.children] == ["paragraph", "paragraph"]
        assert tree.children[1].children[0].value == ": Definition"
        assert tree.position == {"start": {"line": 1}, "end": {"line": 3}}

    def test_default_parser(self):
        """Test default parser."""
        tree = prenormalize(Root(), "Term\n: - a\n")
        assert [child.type for child in tree.children] == ["paragraph", "list"]

    def test_records_duplicated_lines(self, parser):
        """Test records duplicated lines."""
        tree = prenormalize(Root(), "Term\n: - a\n", parser)

        assert tree.data[DUPLICATED_LINES] == [2]
