#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/rules/simple.py
"""Inline markdown rules.

Escapes, newlines, bold, underline, italics, strikethrough and the
catch-all text rule. The text rule must be the last entry of any rule set:
it matches every non-empty input.

"""

from __future__ import annotations

import re
from typing import Optional

from mdspans.ast.nodes import StyleNode, TextNode
from mdspans.constants import (
    PATTERN_BOLD,
    PATTERN_ESCAPE,
    PATTERN_ITALICS,
    PATTERN_NEWLINE,
    PATTERN_STRIKETHROUGH,
    PATTERN_TEXT,
    PATTERN_UNDERLINE,
    InlineStyleName,
)
from mdspans.parser.core import BlockRule, ParseSpec, Parser, Rule
from mdspans.styles import InlineStyleProvider, create_inline_style_provider


class TextRule(Rule):
    """Emit the matched text as a literal node."""

    def __init__(self) -> None:
        """Use the catch-all text pattern."""
        super().__init__(PATTERN_TEXT)

    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Return a terminal text node."""
        return ParseSpec.create_terminal(TextNode(match.group(0)))


class EscapeRule(Rule):
    r"""Turn ``\*`` and friends into the literal character."""

    def __init__(self) -> None:
        """Use the escape pattern."""
        super().__init__(PATTERN_ESCAPE)

    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Return a terminal text node holding the escaped character."""
        return ParseSpec.create_terminal(TextNode(match.group(1)))


class NewlineRule(BlockRule):
    """Collapse a run of blank lines into a single newline."""

    def __init__(self) -> None:
        """Use the newline pattern."""
        super().__init__(PATTERN_NEWLINE)

    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Return a terminal newline node."""
        return ParseSpec.create_terminal(TextNode("\n"))


class StyleRule(Rule):
    """Wrap the first non-empty capture group in a styled node.

    Parameters
    ----------
    pattern : str
        Pattern whose content is in one of its capture groups
    style_name : {"bold", "italic", "underline", "strikethrough"}
        Inline style kind passed to ``style_provider``
    style_provider : callable
        Resolver from style kind to descriptor

    """

    def __init__(self, pattern: str, style_name: InlineStyleName, style_provider: InlineStyleProvider):
        """Bind the pattern to an inline style kind."""
        super().__init__(pattern)
        self.style_name = style_name
        self.style_provider = style_provider

    @property
    def name(self) -> str:
        """Name used in log messages."""
        return f"StyleRule[{self.style_name}]"

    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Return a nonterminal style node over the captured content."""
        group = next(index for index, value in enumerate(match.groups(), start=1) if value is not None)
        node = StyleNode(styles=[self.style_provider(self.style_name)])
        return ParseSpec.create_nonterminal(node, match.start(group), match.end(group))


def create_text_rule() -> TextRule:
    """Return the catch-all text rule."""
    return TextRule()


def create_simple_markdown_rules(
    include_text_rule: bool = True,
    style_provider: Optional[InlineStyleProvider] = None,
) -> list[Rule]:
    """Build the inline markdown rule set.

    Parameters
    ----------
    include_text_rule : bool, default = True
        Append the catch-all text rule
    style_provider : callable, optional
        Resolver from ``"bold"``, ``"italic"``, ``"underline"`` and
        ``"strikethrough"`` to style descriptors; defaults to rich style strings

    Returns
    -------
    list of Rule
        Rules in priority order

    """
    provider = style_provider or create_inline_style_provider()
    rules: list[Rule] = [
        EscapeRule(),
        NewlineRule(),
        StyleRule(PATTERN_BOLD, "bold", provider),
        StyleRule(PATTERN_UNDERLINE, "underline", provider),
        StyleRule(PATTERN_ITALICS, "italic", provider),
        StyleRule(PATTERN_STRIKETHROUGH, "strikethrough", provider),
    ]
    if include_text_rule:
        rules.append(create_text_rule())
    return rules
