#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/ast/visitors.py
"""Visitor pattern base class for span tree traversal.

Renderers subclass :class:`NodeVisitor` and implement one ``visit_*`` method
per node type. Nodes dispatch through ``node.accept(visitor)``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdspans.ast.nodes import ListItemNode, Node, StyleNode, TextNode


class NodeVisitor(ABC):
    """Abstract base class for span tree visitors.

    Examples
    --------
    Counting text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     def visit_style(self, node):
        ...         self.visit_children(node.children)
        ...     def visit_list_item(self, node):
        ...         self.visit_children(node.children)

    """

    @abstractmethod
    def visit_text(self, node: TextNode) -> Any:
        """Visit a TextNode.

        Parameters
        ----------
        node : TextNode
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_style(self, node: StyleNode) -> Any:
        """Visit a StyleNode.

        Parameters
        ----------
        node : StyleNode
            The style node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItemNode) -> Any:
        """Visit a ListItemNode.

        Parameters
        ----------
        node : ListItemNode
            The list item node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    def visit_children(self, nodes: list[Node]) -> list[Any]:
        """Visit ``nodes`` in order and collect the results."""
        return [child.accept(self) for child in nodes]
