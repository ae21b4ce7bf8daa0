#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/renderers/plaintext.py
"""Plain text rendering from span trees.

All style descriptors are ignored; only text content and list bullets are
written.

"""

from __future__ import annotations

from mdspans.ast.nodes import ListItemNode, Node, StyleNode, TextNode
from mdspans.ast.visitors import NodeVisitor
from mdspans.styles import BulletStyle


class PlainTextRenderer(NodeVisitor):
    """Render nodes to an unformatted string.

    Parameters
    ----------
    include_bullets : bool, default = True
        Prefix list items with their bullet

    """

    def __init__(self, include_bullets: bool = True):
        """Initialize the renderer."""
        self.include_bullets = include_bullets
        self._output: list[str] = []

    def render_to_string(self, nodes: list[Node]) -> str:
        """Render ``nodes`` to a string."""
        self._output = []
        self.visit_children(nodes)
        return "".join(self._output)

    def visit_text(self, node: TextNode) -> None:
        """Write the literal text."""
        self._output.append(node.content)

    def visit_style(self, node: StyleNode) -> None:
        """Write children, ignoring styles."""
        self.visit_children(node.children)

    def visit_list_item(self, node: ListItemNode) -> None:
        """Write the bullet and the children."""
        if self.include_bullets:
            bullet = node.bullet()
            if isinstance(bullet, BulletStyle):
                self._output.append(bullet.prefix)
            elif bullet is not None:
                self._output.append(str(bullet))
        self.visit_children(node.children)
