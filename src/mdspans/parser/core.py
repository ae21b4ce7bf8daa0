#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/parser/core.py
"""Recursive-descent parser engine.

The engine offers the unconsumed input to each rule of a rule set in
priority order. The first rule whose pattern matches resolves the match into
a :class:`ParseSpec`:

- a terminal spec carries a finished node
- a nonterminal spec carries a childless node plus the ``[start, end)``
  range of the source that must be parsed to produce its children

Nonterminal ranges are parsed with the same rule set and the resulting nodes
are appended to the spec's node. Pending specs live on an explicit stack, not
the call stack.

Rule sets must end with a catch-all text rule. A position no rule matches
raises :class:`~mdspans.exceptions.ParsingError`.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from mdspans.ast.nodes import ContainerNode, Node, StyleNode
from mdspans.exceptions import InputTooLargeError, ParsingError
from mdspans.options import ParserOptions
from mdspans.parser.patterns import PatternMatcher

logger = logging.getLogger(__name__)


@dataclass
class ParseSpec:
    """Outcome of resolving a rule match.

    Parameters
    ----------
    node : Node or None
        The node produced by the rule, or None when the match produces no node
    is_terminal : bool
        True when ``node`` is complete and must not be parsed further
    start_index : int, default = 0
        Inclusive start of the range still to be parsed (nonterminal only)
    end_index : int, default = 0
        Exclusive end of the range still to be parsed (nonterminal only)

    """

    node: Optional[Node]
    is_terminal: bool
    start_index: int = 0
    end_index: int = 0

    @classmethod
    def create_terminal(cls, node: Optional[Node]) -> ParseSpec:
        """Build a spec for a fully resolved node."""
        return cls(node=node, is_terminal=True)

    @classmethod
    def create_nonterminal(cls, node: Node, start_index: int, end_index: int) -> ParseSpec:
        """Build a spec whose children come from ``source[start_index:end_index]``."""
        return cls(node=node, is_terminal=False, start_index=start_index, end_index=end_index)

    def apply_offset(self, offset: int) -> None:
        """Shift the pending range by ``offset`` characters."""
        self.start_index += offset
        self.end_index += offset


class Rule(ABC):
    """A grammar rule: a start-anchored pattern plus a resolution step.

    Parameters
    ----------
    pattern : str, re.Pattern or PatternMatcher
        Pattern recognizing the span this rule handles
    apply_on_nested_parse : bool, default = True
        When False the rule is skipped by parses started with ``is_nested=True``

    Raises
    ------
    RuleConfigurationError
        If ``pattern`` is a string that does not compile

    """

    def __init__(self, pattern: Union[str, re.Pattern[str], PatternMatcher], apply_on_nested_parse: bool = True):
        """Compile the pattern eagerly."""
        self.matcher = pattern if isinstance(pattern, PatternMatcher) else PatternMatcher(pattern)
        self.apply_on_nested_parse = apply_on_nested_parse

    @property
    def name(self) -> str:
        """Name used in log messages."""
        return type(self).__name__

    def match(self, source: str, last_capture: Optional[str], is_nested: bool) -> Optional[re.Match[str]]:
        """Match the beginning of ``source``.

        Parameters
        ----------
        source : str
            Unconsumed input of the range being parsed
        last_capture : str or None
            Full text of the previous match in this parse, None at the start
        is_nested : bool
            Whether the enclosing parse was started by another rule

        Returns
        -------
        re.Match or None
            The match, or None to let the next rule try

        """
        if is_nested and not self.apply_on_nested_parse:
            return None
        return self.matcher.try_match(source)

    @abstractmethod
    def resolve(self, match: re.Match[str], parser: Parser, is_nested: bool) -> ParseSpec:
        """Turn a match into a parse outcome.

        Group offsets of ``match`` are relative to the inspected range; the
        engine shifts nonterminal ranges onto the original source.

        Parameters
        ----------
        match : re.Match
            Match returned by :meth:`match`
        parser : Parser
            The running parser, for rules that parse sub-strings themselves
        is_nested : bool
            Whether the enclosing parse was started by another rule

        Returns
        -------
        ParseSpec
            Terminal or nonterminal outcome

        """
        pass

    def __repr__(self) -> str:
        """Show the rule name and its pattern."""
        return f"{self.name}({self.matcher.pattern.pattern!r})"


class BlockRule(Rule):
    """A rule that only matches at the start of a line.

    The start of the input counts as a line start, as does any position
    directly after a match ending in a newline.
    """

    def match(self, source: str, last_capture: Optional[str], is_nested: bool) -> Optional[re.Match[str]]:
        """Match only when the previous capture ended a line."""
        if last_capture is not None and not last_capture.endswith("\n"):
            return None
        return super().match(source, last_capture, is_nested)


class Parser:
    """Rule-driven parser producing a list of nodes.

    Parameters
    ----------
    rules : iterable of Rule, optional
        Default rule set, in priority order
    options : ParserOptions or None, default = None
        Engine configuration

    Examples
    --------
        >>> from mdspans.rules import create_simple_markdown_rules
        >>> parser = Parser(create_simple_markdown_rules())
        >>> nodes = parser.parse("some **bold** text")

    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None, options: Optional[ParserOptions] = None):
        """Initialize with an optional default rule set."""
        self.options = options or ParserOptions()
        self._rules: list[Rule] = list(rules) if rules else []

    @property
    def rules(self) -> tuple[Rule, ...]:
        """The default rule set."""
        return tuple(self._rules)

    def add_rule(self, rule: Rule) -> Parser:
        """Append a rule to the default rule set, returning the parser."""
        self._rules.append(rule)
        return self

    def add_rules(self, rules: Iterable[Rule]) -> Parser:
        """Append several rules to the default rule set, returning the parser."""
        self._rules.extend(rules)
        return self

    def parse(self, source: Optional[str], is_nested: bool = False, rules: Optional[Sequence[Rule]] = None) -> list[Node]:
        """Parse ``source`` into a list of nodes.

        Parameters
        ----------
        source : str or None
            Text to parse
        is_nested : bool, default = False
            Set by rules that parse a sub-string on their own
        rules : sequence of Rule, optional
            Rule set overriding the parser's default rules for this call

        Returns
        -------
        list of Node
            Top-level nodes in document order

        Raises
        ------
        InputTooLargeError
            If a top-level ``source`` is longer than ``options.max_input_length``
        ParsingError
            If no rule matches some position of the input, or a rule matches an empty span

        """
        if not source:
            return []

        limit = self.options.max_input_length
        if not is_nested and limit is not None and len(source) > limit:
            raise InputTooLargeError(len(source), limit)

        active_rules = self._rules if rules is None else rules
        root = StyleNode()
        remaining = [ParseSpec.create_nonterminal(root, 0, len(source))]
        last_capture: Optional[str] = None

        while remaining:
            spec = remaining.pop()
            if spec.start_index >= spec.end_index:
                continue

            offset = spec.start_index
            inspection_source = source[spec.start_index : spec.end_index]

            for rule in active_rules:
                match = rule.match(inspection_source, last_capture, is_nested)
                if match is None:
                    continue
                if match.end() == 0:
                    raise ParsingError(f"Rule {rule.name} matched an empty span", source, offset)

                if self.options.debug_matches:
                    logger.debug("%s matched %r", rule.name, match.group(0))

                outcome = rule.resolve(match, self, is_nested)
                parent = spec.node
                if outcome.node is not None:
                    _attach(parent, outcome.node)

                match_end = match.end() + offset
                if match_end != spec.end_index:
                    # rest of this range, resumed after the new node's children
                    remaining.append(ParseSpec.create_nonterminal(parent, match_end, spec.end_index))

                if not outcome.is_terminal:
                    outcome.apply_offset(offset)
                    remaining.append(outcome)

                last_capture = match.group(0)
                break
            else:
                raise ParsingError("No rule matched the input", source, offset)

        logger.debug("Parsed %d characters into %d top-level nodes", len(source), len(root.children))
        return root.children


def _attach(parent: Optional[Node], node: Node) -> None:
    """Append ``node`` to ``parent``; every match stays its own node."""
    if not isinstance(parent, ContainerNode):
        raise ParsingError(f"Cannot attach children to {type(parent).__name__}", "", 0)
    parent.add_child(node)
