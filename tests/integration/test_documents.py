#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_documents.py
"""Integration tests parsing whole documents with the default rule sets."""

import pytest

from mdspans import parse
from mdspans.ast import ListItemNode, StyleNode, TextNode, nodes_to_dicts
from mdspans.renderers import PlainTextRenderer, RichTextRenderer

DOCUMENT = "Heading\n=======\nSome **bold** text\n* first item\n* second _item_\n## Sub\n"


@pytest.mark.integration
class TestMarkdownDocument:
    """Parse a document mixing headers, inline styles and lists."""

    def test_structure(self):
        """Test the top-level node sequence."""
        nodes = parse(DOCUMENT)
        assert [type(node) for node in nodes] == [
            StyleNode,
            TextNode,
            TextNode,
            StyleNode,
            TextNode,
            TextNode,
            ListItemNode,
            TextNode,
            ListItemNode,
            TextNode,
            StyleNode,
            TextNode,
        ]
        assert nodes[0] == StyleNode(styles=["bold underline"], children=[TextNode("Heading")])
        assert nodes[1:5] == [
            TextNode("\n"),
            TextNode("Some "),
            StyleNode(styles=["bold"], children=[TextNode("bold")]),
            TextNode(" text"),
        ]
        assert nodes[10] == StyleNode(styles=["bold"], children=[TextNode("Sub")])

    def test_list_items(self):
        """Test list item content is parsed with the inline rules."""
        nodes = nodes_to_dicts(parse(DOCUMENT))
        assert nodes[8] == {
            "node_type": "list_item",
            "bullet": "bullet(•, gap=2, color=#6E7B7F)",
            "children": [
                {"node_type": "text", "content": "second "},
                {"node_type": "style", "styles": ["italic"], "children": [{"node_type": "text", "content": "item"}]},
            ],
        }

    def test_plain_text(self):
        """Test the plain rendering of the whole document."""
        text = PlainTextRenderer().render_to_string(parse(DOCUMENT))
        assert text == "Heading\nSome bold text\n•  first item\n•  second item\nSub\n"

    def test_rich_text_matches_plain_text(self):
        """Test rich rendering writes the same characters as plain rendering."""
        nodes = parse(DOCUMENT)
        assert RichTextRenderer().render(nodes).plain == PlainTextRenderer().render_to_string(nodes)


@pytest.mark.integration
class TestClassedDocument:
    """Parse documents with classed underline headers."""

    CLASS_STYLES = {"red": "red", "blue": "blue"}

    def test_classes_applied(self):
        """Test each known class contributes a style."""
        nodes = parse("Title {red blue}\n---\nBody", classed_headers=True, class_styles=self.CLASS_STYLES)
        assert nodes == [
            StyleNode(styles=["red", "blue"], children=[TextNode("Title")]),
            TextNode("\n"),
            TextNode("Body"),
        ]

    def test_header_without_suffix(self):
        """Test an unclassed header with inline markup keeps the header style."""
        nodes = parse("Plain **x**\n===", classed_headers=True, class_styles=self.CLASS_STYLES)
        assert nodes == [
            StyleNode(
                styles=["bold underline"],
                children=[TextNode("Plain "), StyleNode(styles=["bold"], children=[TextNode("x")])],
            )
        ]

    def test_hash_headers_unaffected(self):
        """Test hash headers ignore class suffixes."""
        nodes = parse("# Title {red}", classed_headers=True, class_styles=self.CLASS_STYLES)
        assert nodes == [
            StyleNode(styles=["bold underline"], children=[TextNode("Title "), TextNode("{red"), TextNode("}")])
        ]
