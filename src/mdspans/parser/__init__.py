#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/parser/__init__.py
"""Generic rule-driven parser engine."""

from mdspans.parser.core import BlockRule, ParseSpec, Parser, Rule
from mdspans.parser.patterns import PatternMatcher

__all__ = ["BlockRule", "ParseSpec", "Parser", "PatternMatcher", "Rule"]
