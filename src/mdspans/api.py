"""The exported API functions for building parsers and parsing text."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdspans/api.py
import logging
from dataclasses import fields
from typing import Any, Optional, TypeVar, Union

from mdspans.ast.nodes import Node
from mdspans.options import MarkdownRuleOptions, ParserOptions
from mdspans.parser.core import Parser, Rule
from mdspans.rules.markdown import create_markdown_rules
from mdspans.rules.simple import create_simple_markdown_rules
from mdspans.styles import StyleTheme
from mdspans.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", MarkdownRuleOptions, ParserOptions)


def _update_options_from_kwargs(options: OptionsT, kwargs: dict[str, Any]) -> OptionsT:
    """Apply the entries of ``kwargs`` that name fields of ``options``.

    Consumed entries are removed from ``kwargs``.
    """
    names = {field.name for field in fields(options)}
    updates = {key: kwargs.pop(key) for key in list(kwargs) if key in names}
    return options.create_updated(**updates) if updates else options


def build_rules(options: Optional[Union[MarkdownRuleOptions, StyleTheme]] = None) -> list[Rule]:
    """Build the full rule set: block rules, inline rules, then text.

    Parameters
    ----------
    options : MarkdownRuleOptions or StyleTheme, optional
        Style configuration. Passing a :class:`StyleTheme` binds the rules to
        it, so later ``theme.apply(...)`` calls restyle list bullets lazily.

    Returns
    -------
    list of Rule
        Rules in priority order

    """
    theme = options if isinstance(options, StyleTheme) else StyleTheme(options)
    rule_options = theme.options

    rules = create_markdown_rules(
        header_style_resolver=theme.header_style,
        bullet_provider=theme.bullet,
        class_style_resolver=theme.class_style if rule_options.classed_headers else None,
        inline_style_provider=theme.inline_style,
    )
    rules.extend(
        create_simple_markdown_rules(
            include_text_rule=rule_options.include_text_rule,
            style_provider=theme.inline_style,
        )
    )
    logger.debug("Built rule set with %d rules (classed headers: %s)", len(rules), rule_options.classed_headers)
    return rules


def build_parser(
    options: Optional[Union[MarkdownRuleOptions, StyleTheme]] = None,
    parser_options: Optional[ParserOptions] = None,
) -> Parser:
    """Create a :class:`Parser` loaded with :func:`build_rules`.

    The parser is reusable; build it once and call ``parse`` many times.
    """
    return Parser(build_rules(options), options=parser_options)


def parse(
    source: str,
    *,
    options: Optional[MarkdownRuleOptions] = None,
    parser_options: Optional[ParserOptions] = None,
    **kwargs: Any,
) -> list[Node]:
    """Parse markdown-like text into a list of nodes.

    Parameters
    ----------
    source : str
        Text to parse
    options : MarkdownRuleOptions, optional
        Rule set configuration
    parser_options : ParserOptions, optional
        Engine configuration
    kwargs : Any
        Individual option fields overriding ``options`` or ``parser_options``
        (e.g. ``classed_headers=True``, ``max_input_length=10_000``)

    Returns
    -------
    list of Node
        Top-level nodes in document order

    Raises
    ------
    TypeError
        If a keyword argument names no option field
    InputTooLargeError
        If ``source`` exceeds ``max_input_length``
    ParsingError
        If the rule set cannot consume the input

    Examples
    --------
        >>> from mdspans import parse
        >>> nodes = parse("Title {red}\\n====", classed_headers=True, class_styles={"red": "red"})

    """
    remaining = dict(kwargs)
    rule_options = _update_options_from_kwargs(options or MarkdownRuleOptions(), remaining)
    engine_options = _update_options_from_kwargs(parser_options or ParserOptions(), remaining)
    if remaining:
        raise TypeError(f"Unknown option(s): {', '.join(sorted(remaining))}")

    parser = build_parser(rule_options, engine_options)
    with debug_timer(logger, "Parsing"):
        return parser.parse(source)
