#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option classes for the parser engine and the markdown rule sets.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdspans.constants import (
    DEFAULT_BULLET_CHAR,
    DEFAULT_BULLET_COLOR,
    DEFAULT_BULLET_GAP_WIDTH,
    DEFAULT_FALLBACK_HEADER_STYLE,
    DEFAULT_HEADER_STYLES,
    DEFAULT_INLINE_STYLES,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ParserOptions(CloneFrozenMixin):
    """Configuration for the :class:`~mdspans.parser.core.Parser` engine.

    Parameters
    ----------
    max_input_length : int or None, default = None
        Reject top-level inputs longer than this many characters. None disables the check.
    debug_matches : bool, default = False
        Log every rule match at DEBUG level

    """

    max_input_length: Optional[int] = field(
        default=None,
        metadata={"help": "Maximum number of characters accepted by a top-level parse", "type": int},
    )
    debug_matches: bool = field(
        default=False,
        metadata={"help": "Log each rule match (rule name and matched text) at DEBUG level"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``max_input_length`` is not positive.

        """
        if self.max_input_length is not None and self.max_input_length <= 0:
            raise ValueError(f"max_input_length must be positive, got {self.max_input_length}")


@dataclass(frozen=True)
class MarkdownRuleOptions(CloneFrozenMixin):
    """Configuration for building the markdown rule set.

    Style values are rich style definitions (e.g. ``"bold red"``). They are
    passed through the parser untouched and only interpreted by renderers.

    Parameters
    ----------
    header_styles : tuple of str
        Styles for header levels 1..N; level 0 uses the first entry
    fallback_header_style : str
        Style for header levels beyond ``len(header_styles)``
    class_styles : dict
        Class name to style mapping for ``{class}`` header suffixes
    inline_styles : dict
        Styles for bold, italic, underline and strikethrough spans
    bullet_char : str
        Bullet glyph for list items
    bullet_gap_width : int
        Cells between the bullet and the item text
    bullet_color : str
        Bullet color
    classed_headers : bool
        Enable ``Title {class}`` suffixes on underline headers
    include_text_rule : bool
        Append the catch-all text rule; disable only when supplying your own

    """

    header_styles: tuple[str, ...] = field(
        default=DEFAULT_HEADER_STYLES,
        metadata={"help": "Header styles by level, starting at level 1"},
    )
    fallback_header_style: str = field(
        default=DEFAULT_FALLBACK_HEADER_STYLE,
        metadata={"help": "Style for header levels without an entry in header_styles"},
    )
    class_styles: dict[str, str] = field(
        default_factory=dict,
        metadata={"help": "Style for each class name usable in a '{name}' header suffix"},
    )
    inline_styles: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_INLINE_STYLES),
        metadata={"help": "Styles for bold, italic, underline and strikethrough"},
    )
    bullet_char: str = field(default=DEFAULT_BULLET_CHAR, metadata={"help": "List bullet glyph"})
    bullet_gap_width: int = field(
        default=DEFAULT_BULLET_GAP_WIDTH,
        metadata={"help": "Number of cells between bullet and item text", "type": int},
    )
    bullet_color: str = field(default=DEFAULT_BULLET_COLOR, metadata={"help": "List bullet color"})
    classed_headers: bool = field(
        default=False,
        metadata={"help": "Allow '{class}' suffixes on underline headers"},
    )
    include_text_rule: bool = field(
        default=True,
        metadata={"help": "Append the catch-all text rule to the rule set"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not self.header_styles:
            raise ValueError("header_styles must contain at least one style")
        if self.bullet_gap_width < 0:
            raise ValueError(f"bullet_gap_width must be non-negative, got {self.bullet_gap_width}")
        if len(self.bullet_char) != 1:
            raise ValueError(f"bullet_char must be a single character, got {self.bullet_char!r}")
        unknown = set(self.inline_styles) - set(DEFAULT_INLINE_STYLES)
        if unknown:
            raise ValueError(f"Unknown inline style names: {', '.join(sorted(unknown))}")
