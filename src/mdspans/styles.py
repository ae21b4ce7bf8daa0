#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Default style descriptors and resolver factories.

The parser treats style descriptors as opaque. The defaults built here are
rich style definitions (style strings such as ``"bold red"``) so the
:class:`~mdspans.renderers.rich_text.RichTextRenderer` can apply them
directly. Any other value may be used with a custom renderer.

Resolvers are pure and total: unknown levels fall back to a default style,
unknown class names resolve to None and are dropped by the rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from mdspans.ast.nodes import BulletProvider, StyleDescriptor
from mdspans.constants import (
    DEFAULT_BULLET_CHAR,
    DEFAULT_BULLET_COLOR,
    DEFAULT_BULLET_GAP_WIDTH,
    DEFAULT_FALLBACK_HEADER_STYLE,
    DEFAULT_HEADER_STYLES,
    DEFAULT_INLINE_STYLES,
)
from mdspans.options import MarkdownRuleOptions

HeaderStyleResolver = Callable[[int], StyleDescriptor]
ClassStyleResolver = Callable[[str], Optional[StyleDescriptor]]
InlineStyleProvider = Callable[[str], StyleDescriptor]


@dataclass(frozen=True)
class BulletStyle:
    """Bullet descriptor for list items.

    Parameters
    ----------
    char : str
        Bullet glyph
    gap_width : int
        Cells between the bullet and the item text
    color : str
        Bullet color, any rich color definition

    """

    char: str = DEFAULT_BULLET_CHAR
    gap_width: int = DEFAULT_BULLET_GAP_WIDTH
    color: str = DEFAULT_BULLET_COLOR

    @property
    def prefix(self) -> str:
        """Bullet glyph followed by the gap."""
        return self.char + " " * self.gap_width

    def __str__(self) -> str:
        """Render as ``bullet(<char>, gap=<n>, color=<color>)``."""
        return f"bullet({self.char}, gap={self.gap_width}, color={self.color})"


def create_header_style_resolver(
    header_styles: Sequence[StyleDescriptor] = DEFAULT_HEADER_STYLES,
    fallback: StyleDescriptor = DEFAULT_FALLBACK_HEADER_STYLE,
) -> HeaderStyleResolver:
    """Build a resolver from header level to style.

    Level 0 maps to the first style, levels ``1..len(header_styles)`` to
    their own entry, and every other level to ``fallback``.

    Parameters
    ----------
    header_styles : sequence
        Styles for levels 1..N
    fallback : StyleDescriptor
        Style for out-of-range levels

    Returns
    -------
    callable
        ``level -> style``

    """
    styles = tuple(header_styles)

    def resolve(level: int) -> StyleDescriptor:
        if level == 0 and styles:
            return styles[0]
        if 1 <= level <= len(styles):
            return styles[level - 1]
        return fallback

    return resolve


def create_class_style_resolver(class_styles: Mapping[str, StyleDescriptor]) -> ClassStyleResolver:
    """Build a resolver from class name to style; unknown names give None."""
    styles = dict(class_styles)

    def resolve(name: str) -> Optional[StyleDescriptor]:
        return styles.get(name)

    return resolve


def create_inline_style_provider(
    inline_styles: Optional[Mapping[str, StyleDescriptor]] = None,
) -> InlineStyleProvider:
    """Build the provider used by the bold/italic/underline/strikethrough rules."""
    styles = dict(DEFAULT_INLINE_STYLES)
    if inline_styles:
        styles.update(inline_styles)

    def provide(name: str) -> StyleDescriptor:
        return styles[name]

    return provide


def create_bullet_provider(
    char: str = DEFAULT_BULLET_CHAR,
    gap_width: int = DEFAULT_BULLET_GAP_WIDTH,
    color: str = DEFAULT_BULLET_COLOR,
) -> BulletProvider:
    """Build a zero-argument provider returning a :class:`BulletStyle`."""
    bullet = BulletStyle(char=char, gap_width=gap_width, color=color)
    return lambda: bullet


class StyleTheme:
    """Mutable holder for the resolvers derived from :class:`MarkdownRuleOptions`.

    Rule sets receive the bound methods of a theme rather than the raw
    mappings, so assigning new options with :meth:`apply` restyles nodes that
    resolve lazily (list bullets) without rebuilding the rule set. Header and
    class styles are resolved at parse time and only affect later parses.

    Parameters
    ----------
    options : MarkdownRuleOptions or None, default = None
        Initial style configuration

    """

    def __init__(self, options: Optional[MarkdownRuleOptions] = None):
        """Initialize from ``options``."""
        self.apply(options or MarkdownRuleOptions())

    def apply(self, options: MarkdownRuleOptions) -> None:
        """Replace the active styles."""
        self.options = options
        self._header = create_header_style_resolver(options.header_styles, options.fallback_header_style)
        self._class = create_class_style_resolver(options.class_styles)
        self._inline = create_inline_style_provider(options.inline_styles)
        self._bullet = create_bullet_provider(options.bullet_char, options.bullet_gap_width, options.bullet_color)

    def header_style(self, level: int) -> StyleDescriptor:
        """Resolve the style for a header level."""
        return self._header(level)

    def class_style(self, name: str) -> Optional[StyleDescriptor]:
        """Resolve the style for a header class name."""
        return self._class(name)

    def inline_style(self, name: str) -> StyleDescriptor:
        """Resolve the style for an inline span kind."""
        return self._inline(name)

    def bullet(self) -> BulletStyle:
        """Resolve the current bullet descriptor."""
        return self._bullet()
