"""Tests for the cleanup pass."""

from mdast_deflist.nodes import (
    DescriptionDetails,
    DescriptionList,
    List,
    ListItem,
    Paragraph,
    Root,
    Text,
    to_string,
)
from mdast_deflist.transform.cleanup import (
    cleanup,
    remove_duplicate_items,
    remove_empty_items,
    remove_empty_lists,
)
from mdast_deflist.visit import visit


def item(text: str, line: int | None = None) -> ListItem:
    node = ListItem(children=[Paragraph(children=[Text(text)])])
    if line is not None:
        node.position = {"start": {"line": line}, "end": {"line": line}}
    return node


def texts(lst: List) -> list[str]:
    return [to_string(child) for child in lst.children]


class TestRemoveDuplicateItems:
    """Tests for remove_duplicate_items."""

    def test_items_on_duplicated_lines_are_removed(self):
        """Test that items starting on a duplicated line are removed."""
        lst = List(children=[item("a", line=2), item("a", line=3), item("b", line=4)])
        tree = Root(children=[DescriptionDetails(children=[lst])], data={"duplicatedLines": [2]})

        removed = remove_duplicate_items(tree)

        assert removed == 1
        assert texts(lst) == ["a", "b"]

    def test_explicit_lines_override_tree_data(self):
        """Test passing the duplicated lines directly."""
        lst = List(children=[item("a", line=5), item("a", line=6)])
        tree = Root(children=[DescriptionDetails(children=[lst])], data={"duplicatedLines": [6]})

        remove_duplicate_items(tree, lines=[5])

        assert [child.position["start"]["line"] for child in lst.children] == [6]

    def test_nothing_recorded_keeps_every_item(self):
        """Test that a tree without duplicated lines keeps its first item."""
        lst = List(children=[item("a", line=2), item("b", line=3)])
        tree = Root(children=[DescriptionDetails(children=[lst])])

        assert remove_duplicate_items(tree) == 0
        assert texts(lst) == ["a", "b"]

    def test_items_without_position_are_kept(self):
        """Test that synthetic items without a position are never removed."""
        lst = List(children=[item("a"), item("b")])
        tree = Root(children=[DescriptionDetails(children=[lst])], data={"duplicatedLines": [1]})

        assert remove_duplicate_items(tree) == 0
        assert texts(lst) == ["a", "b"]

    def test_every_list_in_details_is_checked(self):
        """Test duplicates in a second list of the same details."""
        first = List(children=[item("a", line=2), item("b", line=3)])
        second = List(children=[item("c", line=6), item("c", line=7)])
        tree = Root(
            children=[DescriptionDetails(children=[first, second])],
            data={"duplicatedLines": [2, 6]},
        )

        assert remove_duplicate_items(tree) == 2
        assert texts(first) == ["b"]
        assert texts(second) == ["c"]

    def test_trailing_fragments_are_stripped(self):
        """Test stripping of leftover ': - item' fragments."""
        lst = List(children=[item("item: - leftover\nnext: + more")])
        details = DescriptionDetails(children=[Paragraph(children=[Text("x")]), lst])
        tree = Root(children=[details])

        remove_duplicate_items(tree)

        assert texts(lst) == ["item\nnext"]

    def test_colon_without_marker_is_kept(self):
        """Test that a colon not followed by a marker is plain text."""
        lst = List(children=[item("time: 10:00")])
        details = DescriptionDetails(children=[Paragraph(children=[Text("x")]), lst])

        remove_duplicate_items(Root(children=[details]))

        assert texts(lst) == ["time: 10:00"]

    def test_lists_outside_details_are_untouched(self):
        """Test that lists outside definition details are not cleaned."""
        lst = List(children=[item("a", line=2), item("b", line=3)])
        tree = Root(children=[lst], data={"duplicatedLines": [2]})

        assert remove_duplicate_items(tree) == 0
        assert texts(lst) == ["a", "b"]


class TestRemoveEmptyItems:
    """Tests for remove_empty_items."""

    def test_empty_items_are_removed_everywhere(self):
        """Test removal of empty items at any depth."""
        nested = List(children=[ListItem(), item("kept")])
        tree = Root(
            children=[
                List(children=[ListItem(), item("a")]),
                DescriptionList(children=[DescriptionDetails(children=[nested])]),
            ]
        )

        removed = remove_empty_items(tree)

        assert removed == 2
        items = []
        visit(tree, "listItem", lambda node, index, parent: items.append(node))
        assert len(items) == 2
        assert all(node.children for node in items)


class TestRemoveEmptyLists:
    """Tests for remove_empty_lists."""

    def test_empty_list_is_removed(self):
        """Test that a list without items is removed from its details."""
        kept = List(children=[item("a")])
        details = DescriptionDetails(children=[List(), kept])
        tree = Root(children=[details])

        assert remove_empty_lists(tree) == 1
        assert details.children == [kept]


class TestCleanup:
    """Tests for cleanup."""

    def test_without_duplicate_removal(self):
        """Test that only empty items go when duplicate removal is off."""
        lst = List(children=[item("a", line=2), ListItem(), item("b", line=3)])
        tree = Root(children=[DescriptionDetails(children=[lst])], data={"duplicatedLines": [2]})

        result = cleanup(tree, remove_duplicates=False)

        assert result is tree
        assert texts(lst) == ["a", "b"]

    def test_with_duplicate_removal(self):
        """Test removal of duplicated and empty items together."""
        lst = List(children=[item("a", line=2), item("a", line=3), ListItem()])
        tree = Root(children=[DescriptionDetails(children=[lst])], data={"duplicatedLines": [2]})

        cleanup(tree)

        assert texts(lst) == ["a"]

    def test_list_emptied_by_cleanup_is_dropped(self):
        """Test that a list left without items disappears."""
        lst = List(children=[item("a", line=2)])
        details = DescriptionDetails(
            children=[List(children=[item("b", line=4)]), lst]
        )
        tree = Root(children=[details], data={"duplicatedLines": [2]})

        cleanup(tree)

        assert len(details.children) == 1
        assert to_string(details) == "b"
