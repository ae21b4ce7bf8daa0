#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdspans - markdown-like text to styled span trees.

A small rule-driven recursive-descent parser. Block rules recognise hash
headers, underline headers (optionally with ``{class}`` style suffixes) and
``*`` list items; inline rules handle bold, italics, underline,
strikethrough and escapes. The result is a tree of TextNode, StyleNode and
ListItemNode objects carrying opaque style descriptors, which renderers turn
into terminal output or plain text.

Examples
--------
    >>> from mdspans import parse
    >>> from mdspans.renderers import PlainTextRenderer
    >>> nodes = parse("# Title\\n* item one")
    >>> PlainTextRenderer().render_to_string(nodes)
    'Title\\n•  item one'

"""

from mdspans.api import build_parser, build_rules, parse
from mdspans.ast import ListItemNode, Node, StyleNode, TextNode
from mdspans.exceptions import (
    ConfigurationError,
    InputTooLargeError,
    MdSpansError,
    ParsingError,
    RenderingError,
    RuleConfigurationError,
    ValidationError,
)
from mdspans.options import MarkdownRuleOptions, ParserOptions
from mdspans.parser import BlockRule, ParseSpec, Parser, PatternMatcher, Rule
from mdspans.styles import BulletStyle, StyleTheme

__all__ = [
    "BlockRule",
    "BulletStyle",
    "ConfigurationError",
    "InputTooLargeError",
    "ListItemNode",
    "MarkdownRuleOptions",
    "MdSpansError",
    "Node",
    "ParseSpec",
    "Parser",
    "ParserOptions",
    "ParsingError",
    "PatternMatcher",
    "RenderingError",
    "Rule",
    "RuleConfigurationError",
    "StyleNode",
    "StyleTheme",
    "TextNode",
    "ValidationError",
    "build_parser",
    "build_rules",
    "parse",
]
