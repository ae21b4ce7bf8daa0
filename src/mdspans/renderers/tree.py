#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/renderers/tree.py
"""Structural dump of span trees as a :class:`rich.tree.Tree`."""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from mdspans.ast.nodes import ListItemNode, Node, StyleNode, TextNode
from mdspans.ast.visitors import NodeVisitor


class TreeRenderer(NodeVisitor):
    """Render the node structure, one tree branch per node.

    Parameters
    ----------
    label : str, default = "nodes"
        Label of the root branch

    """

    def __init__(self, label: str = "nodes"):
        """Initialize the renderer."""
        self.label = label
        self._branch = Tree(Text(label))

    def render(self, nodes: list[Node]) -> Tree:
        """Build a tree for ``nodes``."""
        root = Tree(Text(self.label, style="bold"))
        self._branch = root
        self.visit_children(nodes)
        return root

    def visit_text(self, node: TextNode) -> None:
        """Add a leaf showing the text repr."""
        self._branch.add(Text(f"TextNode {node.content!r}", style="green"))

    def visit_style(self, node: StyleNode) -> None:
        """Add a branch listing the descriptors."""
        styles = ", ".join(repr(style) if isinstance(style, str) else str(style) for style in node.styles)
        self._descend(Text(f"StyleNode [{styles}]", style="cyan"), node.children)

    def visit_list_item(self, node: ListItemNode) -> None:
        """Add a branch for the list item."""
        bullet = node.bullet()
        label = "ListItemNode" if bullet is None else f"ListItemNode {bullet}"
        self._descend(Text(label, style="magenta"), node.children)

    def _descend(self, label: Text, children: list[Node]) -> None:
        parent = self._branch
        self._branch = parent.add(label)
        try:
            self.visit_children(children)
        finally:
            self._branch = parent
