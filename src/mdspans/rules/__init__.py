#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/rules/__init__.py
"""Rule sets for the parser engine.

- markdown: block rules (headers, underline headers, classed headers, list items)
- simple: inline rules (escape, newline, bold, underline, italics,
  strikethrough) and the catch-all text rule
"""

from mdspans.rules.markdown import (
    BlockRuleKind,
    ClassedSuffixRule,
    MarkdownBlockRule,
    create_classed_header_inner_rules,
    create_classed_header_rules,
    create_header_rules,
    create_list_item_rule,
    create_markdown_rules,
)
from mdspans.rules.simple import (
    EscapeRule,
    NewlineRule,
    StyleRule,
    TextRule,
    create_simple_markdown_rules,
    create_text_rule,
)

__all__ = [
    "BlockRuleKind",
    "ClassedSuffixRule",
    "EscapeRule",
    "MarkdownBlockRule",
    "NewlineRule",
    "StyleRule",
    "TextRule",
    "create_classed_header_inner_rules",
    "create_classed_header_rules",
    "create_header_rules",
    "create_list_item_rule",
    "create_markdown_rules",
    "create_simple_markdown_rules",
    "create_text_rule",
]
