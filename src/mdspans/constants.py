#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdspans library.

Constants are organized by category:
1. Type Definitions
2. Grammar Patterns - regular expressions used by the rule sets
3. Style Defaults - default descriptors handed to the style resolvers
4. Configuration - config file discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["rich", "plain", "tree", "json"]
InlineStyleName = Literal["bold", "italic", "underline", "strikethrough"]

# =============================================================================
# Grammar Patterns
# =============================================================================

# `* item`; exactly one space or tab after the asterisk
PATTERN_LIST_ITEM = r"^\*[ \t](.*)(?=\n|$)"

# `## Header`; trailing spaces are not part of the text capture
PATTERN_HEADER_ITEM = r"^ *(#+)[ \t](.*?) *(?=\n|$)"

# `Header` followed by a line of 3+ `=` or 3+ `-`
PATTERN_HEADER_ITEM_ALT = r"^(.+)\n[ \t]*([=-])\2{2,}[ \t]*(?=\n|$)"

# `Some header title {class names}`
PATTERN_HEADING_CLASS = r"^(.*) \{([\w ]+)\}\s*$"

PATTERN_ESCAPE = r"^\\([^0-9A-Za-z\s])"
PATTERN_NEWLINE = r"^(?:\n *)*\n"
PATTERN_BOLD = r"^\*\*([\s\S]+?)\*\*(?!\*)"
PATTERN_UNDERLINE = r"^__([\s\S]+?)__(?!_)"
PATTERN_STRIKETHROUGH = r"^~~(?=\S)([\s\S]*?\S)~~"
PATTERN_ITALICS = (
    # `_` only around words
    r"^\b_((?:__|\\[\s\S]|[^\\_])+?)_\b"
    r"|"
    # `*` followed by a non-space; `**` inside does not close the italics
    r"^\*(?=\S)((?:\*\*|\s+(?:[^*\s]|\*\*)|[^\s*])+?)\*(?!\*)"
)
# A lone newline, or a run of text up to the next character that could start another rule
PATTERN_TEXT = r"^(?:\n|[\s\S]+?(?=[^0-9A-Za-z\s\u00c0-\uffff]|\n| {2,}\n|\w+:\S|$))"

# =============================================================================
# Style Defaults
# =============================================================================

DEFAULT_HEADER_STYLES: tuple[str, ...] = (
    "bold underline",
    "bold",
    "bold dim",
    "italic",
    "italic dim",
    "dim",
)
DEFAULT_FALLBACK_HEADER_STYLE = "bold italic"

DEFAULT_INLINE_STYLES: dict[str, str] = {
    "bold": "bold",
    "italic": "italic",
    "underline": "underline",
    "strikethrough": "strike",
}

DEFAULT_BULLET_CHAR = "•"
DEFAULT_BULLET_GAP_WIDTH = 2
DEFAULT_BULLET_COLOR = "#6E7B7F"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".mdspans.toml", ".mdspans.yaml", ".mdspans.yml", ".mdspans.json", "pyproject.toml"]
PYPROJECT_SECTION = "mdspans"
