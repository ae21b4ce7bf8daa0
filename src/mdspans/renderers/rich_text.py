#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/renderers/rich_text.py
"""Terminal rendering of span trees with rich.

Style descriptors that are rich style definitions (style strings or
:class:`rich.style.Style`) become spans on a :class:`rich.text.Text`. Other
descriptors are skipped; a renderer for another target is expected to
understand them instead.

"""

from __future__ import annotations

import logging
from typing import Any

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from mdspans.ast.nodes import ListItemNode, Node, StyleNode, TextNode
from mdspans.ast.visitors import NodeVisitor
from mdspans.exceptions import RenderingError
from mdspans.styles import BulletStyle

logger = logging.getLogger(__name__)


def to_rich_style(descriptor: Any) -> Style | None:
    """Convert a style descriptor to a rich Style.

    Parameters
    ----------
    descriptor : Any
        Style string, rich Style, or an unrelated descriptor

    Returns
    -------
    Style or None
        The rich style, or None when the descriptor is not a rich style definition

    Raises
    ------
    RenderingError
        If a style string cannot be parsed

    """
    if isinstance(descriptor, Style):
        return descriptor
    if isinstance(descriptor, str):
        try:
            return Style.parse(descriptor)
        except StyleSyntaxError as e:
            raise RenderingError(f"Invalid style {descriptor!r}", original_error=e) from e
    return None


class RichTextRenderer(NodeVisitor):
    """Render nodes to a :class:`rich.text.Text`.

    Examples
    --------
        >>> from rich.console import Console
        >>> from mdspans import parse
        >>> text = RichTextRenderer().render(parse("# Title"))
        >>> Console().print(text)

    """

    def __init__(self) -> None:
        """Initialize an empty output buffer."""
        self._text = Text()

    def render(self, nodes: list[Node]) -> Text:
        """Render ``nodes`` in order into a new Text."""
        self._text = Text()
        self.visit_children(nodes)
        return self._text

    def visit_text(self, node: TextNode) -> None:
        """Append the literal text."""
        self._text.append(node.content)

    def visit_style(self, node: StyleNode) -> None:
        """Render children, then apply each rich-compatible descriptor over them."""
        start = len(self._text)
        self.visit_children(node.children)
        end = len(self._text)
        for descriptor in node.styles:
            style = to_rich_style(descriptor)
            if style is None:
                logger.debug("Skipping non-rich style descriptor %r", descriptor)
                continue
            self._text.stylize(style, start, end)

    def visit_list_item(self, node: ListItemNode) -> None:
        """Append the bullet, resolved now, followed by the item content."""
        bullet = node.bullet()
        if isinstance(bullet, BulletStyle):
            self._text.append(bullet.prefix, style=Style(color=bullet.color))
        elif bullet is not None:
            self._text.append(str(bullet))
        self.visit_children(node.children)
