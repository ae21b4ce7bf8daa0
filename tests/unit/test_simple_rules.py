#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_simple_rules.py
"""Unit tests for the inline markdown rules."""

import pytest

from mdspans.ast import StyleNode, TextNode
from mdspans.parser import Parser
from mdspans.rules import StyleRule, TextRule, create_simple_markdown_rules


@pytest.mark.unit
class TestInlineStyles:
    """Tests for bold, underline, italics and strikethrough."""

    @pytest.mark.parametrize(
        "source,style,content",
        [
            ("**b**", "bold", "b"),
            ("__u__", "underline", "u"),
            ("*i*", "italic", "i"),
            ("_i_", "italic", "i"),
            ("~~s~~", "strikethrough", "s"),
        ],
    )
    def test_single_span(self, inline_parser, source, style, content):
        """Test each delimiter produces its style."""
        assert inline_parser.parse(source) == [StyleNode(styles=[style], children=[TextNode(content)])]

    def test_span_inside_text(self, inline_parser):
        """Test a styled span between plain runs."""
        assert inline_parser.parse("a **b** c") == [
            TextNode("a "),
            StyleNode(styles=["bold"], children=[TextNode("b")]),
            TextNode(" c"),
        ]

    def test_nested_spans(self, inline_parser):
        """Test inline spans nest."""
        assert inline_parser.parse("**bold _it_**") == [
            StyleNode(
                styles=["bold"],
                children=[
                    TextNode("bold "),
                    StyleNode(styles=["italic"], children=[TextNode("it")]),
                ],
            )
        ]

    def test_unclosed_delimiter_is_text(self, inline_parser):
        """Test a lone asterisk stays literal."""
        assert inline_parser.parse("a*b") == [TextNode("a"), TextNode("*b")]

    def test_strikethrough_needs_adjacent_content(self, inline_parser):
        """Test ``~~`` followed by a space is not strikethrough."""
        assert inline_parser.parse("~~ s~~") == [TextNode("~"), TextNode("~ s"), TextNode("~"), TextNode("~")]


@pytest.mark.unit
class TestEscapesAndNewlines:
    """Tests for the escape and newline rules."""

    def test_escaped_delimiters(self, inline_parser):
        """Test escaped asterisks are emitted literally."""
        assert inline_parser.parse("\\*not italic\\*") == [TextNode("*"), TextNode("not italic"), TextNode("*")]

    def test_escaped_bold_stays_literal(self, inline_parser):
        """Test escaped asterisks never combine into a bold span."""
        nodes = inline_parser.parse(r"\*\*x\*\*")
        assert not any(isinstance(node, StyleNode) for node in nodes)
        assert "".join(node.content for node in nodes) == "**x**"
        assert all(len(node.content) == 1 for node in nodes)

    def test_blank_lines_collapse(self, inline_parser):
        """Test a run of blank lines after a line break becomes one newline."""
        assert inline_parser.parse("a\n\n\nb") == [TextNode("a"), TextNode("\n"), TextNode("\n"), TextNode("b")]

    def test_single_newline_kept(self, inline_parser):
        """Test a single newline is preserved."""
        assert inline_parser.parse("a\nb") == [TextNode("a"), TextNode("\n"), TextNode("b")]


@pytest.mark.unit
class TestTextRule:
    """Tests for the catch-all text rule."""

    def test_matches_any_non_empty_input(self):
        """Test the text rule alone consumes punctuation and unicode."""
        parser = Parser([TextRule()])
        for source in ["x", "!", "café ☕", "http://example.com", "  \n"]:
            nodes = parser.parse(source)
            assert all(isinstance(node, TextNode) for node in nodes)
            assert "".join(node.content for node in nodes) == source

    def test_unicode_is_one_capture(self):
        """Test letters outside ASCII do not end a capture."""
        assert Parser([TextRule()]).parse("café ☕") == [TextNode("café ☕")]

    def test_stops_before_punctuation(self):
        """Test a single text capture ends at a character another rule could use."""
        match = TextRule().match("ab*c", None, False)
        assert match.group(0) == "ab"

    def test_newline_is_its_own_capture(self):
        """Test a newline is captured alone so line-start rules can follow."""
        assert TextRule().match("\nabc", None, False).group(0) == "\n"
        assert TextRule().match("ab\ncd", None, False).group(0) == "ab"


@pytest.mark.unit
class TestRuleSetFactory:
    """Tests for create_simple_markdown_rules."""

    def test_text_rule_last(self):
        """Test the catch-all rule closes the rule set."""
        rules = create_simple_markdown_rules()
        assert isinstance(rules[-1], TextRule)
        assert len(rules) == 7

    def test_without_text_rule(self):
        """Test the text rule can be omitted."""
        rules = create_simple_markdown_rules(include_text_rule=False)
        assert len(rules) == 6
        assert not any(isinstance(rule, TextRule) for rule in rules)

    def test_default_styles(self):
        """Test default inline styles are rich style strings."""
        parser = Parser(create_simple_markdown_rules())
        assert parser.parse("~~x~~") == [StyleNode(styles=["strike"], children=[TextNode("x")])]

    def test_style_rule_names(self):
        """Test style rules report their style kind."""
        names = [rule.name for rule in create_simple_markdown_rules() if isinstance(rule, StyleRule)]
        assert names == [
            "StyleRule[bold]",
            "StyleRule[underline]",
            "StyleRule[italic]",
            "StyleRule[strikethrough]",
        ]
