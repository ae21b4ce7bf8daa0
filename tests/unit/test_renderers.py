#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_renderers.py
"""Unit tests for the rich, plain text and tree renderers."""

import pytest
from rich.style import Style

from mdspans import parse
from mdspans.ast import ListItemNode, StyleNode, TextNode
from mdspans.exceptions import RenderingError
from mdspans.renderers import PlainTextRenderer, RichTextRenderer, TreeRenderer, to_rich_style
from mdspans.styles import BulletStyle


@pytest.mark.unit
class TestPlainTextRenderer:
    """Tests for PlainTextRenderer."""

    def test_header_and_list(self):
        """Test styles are dropped and bullets kept."""
        nodes = parse("# Title\n* item one")
        assert PlainTextRenderer().render_to_string(nodes) == "Title\n•  item one"

    def test_without_bullets(self):
        """Test bullets can be left out."""
        nodes = parse("* a\n* b")
        assert PlainTextRenderer(include_bullets=False).render_to_string(nodes) == "a\nb"

    def test_non_bullet_descriptor(self):
        """Test foreign bullet descriptors are written with str()."""
        node = ListItemNode(bullet_provider=lambda: "-", children=[TextNode("x")])
        assert PlainTextRenderer().render_to_string([node]) == "-x"

    def test_renderer_reusable(self):
        """Test output does not accumulate between calls."""
        renderer = PlainTextRenderer()
        assert renderer.render_to_string([TextNode("a")]) == "a"
        assert renderer.render_to_string([TextNode("b")]) == "b"


@pytest.mark.unit
class TestRichTextRenderer:
    """Tests for RichTextRenderer."""

    def test_inline_span(self):
        """Test styled children become a span over their text."""
        text = RichTextRenderer().render(parse("**b** c"))
        assert text.plain == "b c"
        assert [(span.start, span.end, span.style) for span in text.spans] == [(0, 1, Style.parse("bold"))]

    def test_header_style(self):
        """Test the default level 1 header style."""
        text = RichTextRenderer().render(parse("# T"))
        assert text.spans[0].style == Style.parse("bold underline")

    def test_bullet_colored(self):
        """Test the bullet prefix carries the bullet color."""
        text = RichTextRenderer().render(parse("* x"))
        assert text.plain == "•  x"
        assert text.spans[0].start == 0
        assert text.spans[0].end == 3
        assert text.spans[0].style == Style(color=BulletStyle().color)

    def test_non_rich_descriptor_skipped(self):
        """Test descriptors rich cannot use are ignored."""
        text = RichTextRenderer().render([StyleNode(styles=[42], children=[TextNode("x")])])
        assert text.plain == "x"
        assert text.spans == []

    def test_invalid_style_string(self):
        """Test malformed style strings raise RenderingError."""
        with pytest.raises(RenderingError):
            RichTextRenderer().render([StyleNode(styles=["nonsensecolor"], children=[TextNode("x")])])

    def test_to_rich_style(self):
        """Test descriptor conversion."""
        style = Style(bold=True)
        assert to_rich_style(style) is style
        assert to_rich_style("italic") == Style(italic=True)
        assert to_rich_style(None) is None


@pytest.mark.unit
class TestTreeRenderer:
    """Tests for TreeRenderer."""

    def test_one_branch_per_top_level_node(self):
        """Test the root has a branch for each top-level node."""
        nodes = parse("# Title\n* item")
        tree = TreeRenderer(label="doc").render(nodes)
        assert tree.label.plain == "doc"
        assert len(tree.children) == len(nodes) == 3

    def test_nested_branches(self):
        """Test container children become sub-branches."""
        tree = TreeRenderer().render([StyleNode(styles=["bold"], children=[TextNode("a"), TextNode("b")])])
        branch = tree.children[0]
        assert branch.label.plain == "StyleNode ['bold']"
        assert [child.label.plain for child in branch.children] == ["TextNode 'a'", "TextNode 'b'"]
