#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/rules/markdown.py
"""Block-level markdown rules: headers, underline headers and list items.

Supported syntax::

    # Header 1
    ## Header 2

    Alternative Header 1
    ====================

    Alternative Header 2
    --------------------

    Classed Header {red underline}
    ==============================

    * item 1
    * item 2

The four block rules share one class, :class:`MarkdownBlockRule`, tagged by
a :class:`BlockRuleKind`. Each kind has an entry in the pattern, nesting and
resolver tables below; adding a block rule means adding a kind and its table
entries.

Classed headers (``Title {class names}``) are not part of markdown. They let
an underline header request named styles, resolved by a caller-supplied
class resolver.

"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Optional, Sequence

from mdspans.ast.nodes import BulletProvider, ListItemNode, Node, StyleNode, TextNode
from mdspans.constants import (
    PATTERN_HEADER_ITEM,
    PATTERN_HEADER_ITEM_ALT,
    PATTERN_HEADING_CLASS,
    PATTERN_LIST_ITEM,
)
from mdspans.exceptions import ValidationError
from mdspans.parser.core import BlockRule, ParseSpec, Parser, Rule
from mdspans.parser.patterns import PatternMatcher
from mdspans.rules.simple import create_simple_markdown_rules, create_text_rule
from mdspans.styles import ClassStyleResolver, HeaderStyleResolver, InlineStyleProvider

logger = logging.getLogger(__name__)


class BlockRuleKind(Enum):
    """The closed set of block rules."""

    HEADER = "header"
    HEADER_LINE = "header_line"
    HEADER_LINE_CLASSED = "header_line_classed"
    LIST_ITEM = "list_item"


_HEADER_KINDS = frozenset({BlockRuleKind.HEADER, BlockRuleKind.HEADER_LINE, BlockRuleKind.HEADER_LINE_CLASSED})

_PATTERNS: dict[BlockRuleKind, PatternMatcher] = {
    BlockRuleKind.HEADER: PatternMatcher(PATTERN_HEADER_ITEM),
    BlockRuleKind.HEADER_LINE: PatternMatcher(PATTERN_HEADER_ITEM_ALT),
    BlockRuleKind.HEADER_LINE_CLASSED: PatternMatcher(PATTERN_HEADER_ITEM_ALT),
    BlockRuleKind.LIST_ITEM: PatternMatcher(PATTERN_LIST_ITEM),
}

# Only the classed header runs inside nested parses, where it emits literal text
_APPLY_ON_NESTED_PARSE: dict[BlockRuleKind, bool] = {
    BlockRuleKind.HEADER: False,
    BlockRuleKind.HEADER_LINE: False,
    BlockRuleKind.HEADER_LINE_CLASSED: True,
    BlockRuleKind.LIST_ITEM: False,
}

CLASSED_SUFFIX_PATTERN = PatternMatcher(PATTERN_HEADING_CLASS)


class MarkdownBlockRule(BlockRule):
    """One of the block rules listed in :class:`BlockRuleKind`.

    Parameters
    ----------
    kind : BlockRuleKind
        Which block rule this is
    header_style_resolver : callable, optional
        ``level -> style``; required for the header kinds
    bullet_provider : callable, optional
        Bullet descriptor provider; required for ``LIST_ITEM``
    inner_rules : sequence of Rule, optional
        Rule set for the header text; required for ``HEADER_LINE_CLASSED``

    Raises
    ------
    ValidationError
        If a collaborator required by ``kind`` is missing

    """

    def __init__(
        self,
        kind: BlockRuleKind,
        header_style_resolver: Optional[HeaderStyleResolver] = None,
        bullet_provider: Optional[BulletProvider] = None,
        inner_rules: Optional[Sequence[Rule]] = None,
    ):
        """Validate the collaborators needed by ``kind``."""
        if kind in _HEADER_KINDS and header_style_resolver is None:
            raise ValidationError(f"{kind.value} rule requires a header style resolver", "header_style_resolver")
        if kind is BlockRuleKind.LIST_ITEM and bullet_provider is None:
            raise ValidationError("list_item rule requires a bullet provider", "bullet_provider")
        if kind is BlockRuleKind.HEADER_LINE_CLASSED and not inner_rules:
            raise ValidationError("header_line_classed rule requires inner rules", "inner_rules")

        super().__init__(_PATTERNS[kind], apply_on_nested_parse=_APPLY_ON_NESTED_PARSE[kind])
        self.kind = kind
        self.header_style_resolver = header_style_resolver
        self.bullet_provider = bullet_provider
        self.inner_rules: tuple[Rule, ...] = tuple(inner_rules or ())

    @property
    def name(self) -> str:
        """Name used in log messages."""
        return f"MarkdownBlockRule[{self.kind.value}]"

    def header_level(self, match: re.Match[str]) -> int:
        """Return the header level of a header match.

        Hash headers count their ``#`` run. Underline headers are level 1
        for ``=`` and level 2 for anything else.
        """
        if self.kind is BlockRuleKind.HEADER:
            return len(match.group(1))
        return 1 if match.group(2) == "=" else 2

    def create_header_style_node(self, match: re.Match[str]) -> StyleNode:
        """Build the childless style node for a header match.

        Raises
        ------
        ValidationError
            If the rule was built without a header style resolver

        """
        if self.header_style_resolver is None:
            raise ValidationError(f"{self.kind.value} rule has no header style resolver", "header_style_resolver")
        return StyleNode(styles=[self.header_style_resolver(self.header_level(match))])

    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Dispatch to the resolver registered for this rule's kind."""
        return _RESOLVERS[self.kind](self, match, parser, is_nested)


def _resolve_header(rule: MarkdownBlockRule, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
    return ParseSpec.create_nonterminal(rule.create_header_style_node(match), match.start(2), match.end(2))


def _resolve_header_line(
    rule: MarkdownBlockRule, match: re.Match[str], parser: Parser, is_nested: bool
) -> ParseSpec:
    # the underline is consumed without producing a node
    return ParseSpec.create_nonterminal(rule.create_header_style_node(match), match.start(1), match.end(1))


def _resolve_header_line_classed(
    rule: MarkdownBlockRule, match: re.Match[str], parser: Parser, is_nested: bool
) -> ParseSpec:
    if is_nested:
        return ParseSpec.create_terminal(TextNode(match.group(0)))

    # nested on purpose: a classed header met again inside its own text stays literal
    children = parser.parse(match.group(1), is_nested=True, rules=rule.inner_rules)
    node: Node
    if len(children) == 1:
        node = children[0]
    else:
        node = rule.create_header_style_node(match)
        for child in children:
            node.add_child(child)
    return ParseSpec.create_terminal(node)


def _resolve_list_item(
    rule: MarkdownBlockRule, match: re.Match[str], parser: Parser, is_nested: bool
) -> ParseSpec:
    return ParseSpec.create_nonterminal(ListItemNode(bullet_provider=rule.bullet_provider), match.start(1), match.end(1))


_RESOLVERS: dict[BlockRuleKind, Callable[[MarkdownBlockRule, re.Match[str], Parser, bool], ParseSpec]] = {
    BlockRuleKind.HEADER: _resolve_header,
    BlockRuleKind.HEADER_LINE: _resolve_header_line,
    BlockRuleKind.HEADER_LINE_CLASSED: _resolve_header_line_classed,
    BlockRuleKind.LIST_ITEM: _resolve_list_item,
}


class ClassedSuffixRule(Rule):
    """Strip a ``{class names}`` suffix and style the text before it.

    Each space-separated name is resolved independently; names the resolver
    does not know are dropped.

    Parameters
    ----------
    class_style_resolver : callable
        ``name -> style or None``

    """

    def __init__(self, class_style_resolver: ClassStyleResolver):
        """Bind the class resolver."""
        super().__init__(CLASSED_SUFFIX_PATTERN)
        self.class_style_resolver = class_style_resolver

    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Return a nonterminal style node over the text before the brace."""
        names = match.group(2).split()
        styles = []
        for name in names:
            style = self.class_style_resolver(name)
            if style is None:
                logger.debug("Dropping unknown header class %r", name)
                continue
            styles.append(style)
        return ParseSpec.create_nonterminal(StyleNode(styles=styles), match.start(1), match.end(1))


def create_classed_header_inner_rules(
    class_style_resolver: ClassStyleResolver,
    inline_style_provider: Optional[InlineStyleProvider] = None,
) -> list[Rule]:
    """Build the rule set used to parse the text of a classed header.

    The classed-suffix rule comes first, then the inline markdown rules,
    then the catch-all text rule.
    """
    return [
        ClassedSuffixRule(class_style_resolver),
        *create_simple_markdown_rules(include_text_rule=False, style_provider=inline_style_provider),
        create_text_rule(),
    ]


def create_header_rules(header_style_resolver: HeaderStyleResolver) -> list[Rule]:
    """Return ``[hash header, underline header]``.

    The hash header is tried first so a line starting with ``#`` is never
    read as the text of an underline header.
    """
    return [
        MarkdownBlockRule(BlockRuleKind.HEADER, header_style_resolver=header_style_resolver),
        MarkdownBlockRule(BlockRuleKind.HEADER_LINE, header_style_resolver=header_style_resolver),
    ]


def create_classed_header_rules(
    header_style_resolver: HeaderStyleResolver,
    class_style_resolver: ClassStyleResolver,
    inline_style_provider: Optional[InlineStyleProvider] = None,
) -> list[Rule]:
    """Return ``[hash header, classed underline header]``.

    The classed rule's inner rule set is built here, once.
    """
    inner_rules = create_classed_header_inner_rules(class_style_resolver, inline_style_provider)
    return [
        MarkdownBlockRule(BlockRuleKind.HEADER, header_style_resolver=header_style_resolver),
        MarkdownBlockRule(
            BlockRuleKind.HEADER_LINE_CLASSED,
            header_style_resolver=header_style_resolver,
            inner_rules=inner_rules,
        ),
    ]


def create_list_item_rule(bullet_provider: BulletProvider) -> MarkdownBlockRule:
    """Return the ``* item`` rule."""
    return MarkdownBlockRule(BlockRuleKind.LIST_ITEM, bullet_provider=bullet_provider)


def create_markdown_rules(
    header_style_resolver: HeaderStyleResolver,
    bullet_provider: BulletProvider,
    class_style_resolver: Optional[ClassStyleResolver] = None,
    inline_style_provider: Optional[InlineStyleProvider] = None,
) -> list[Rule]:
    """Build the block rule set: headers first, list item last.

    Parameters
    ----------
    header_style_resolver : callable
        ``level -> style``
    bullet_provider : callable
        Zero-argument bullet descriptor provider, called at render time
    class_style_resolver : callable, optional
        When given, the underline header accepts ``{class}`` suffixes
    inline_style_provider : callable, optional
        Inline styles used inside classed headers

    Returns
    -------
    list of Rule
        Block rules in priority order. Append inline rules and a text rule
        before handing the list to a :class:`~mdspans.parser.core.Parser`.

    """
    if class_style_resolver is not None:
        headers = create_classed_header_rules(header_style_resolver, class_style_resolver, inline_style_provider)
    else:
        headers = create_header_rules(header_style_resolver)
    return [*headers, create_list_item_rule(bullet_provider)]
