#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/ast/nodes.py
"""Node classes for the parsed span tree.

The rule sets in :mod:`mdspans.rules` turn input text into an ordered tree of
three node types:

- TextNode: a leaf holding literal text
- StyleNode: a container carrying zero or more style descriptors
- ListItemNode: a container tagged as a list entry, whose bullet descriptor
  is produced lazily at render time

Style descriptors are opaque values produced by caller-supplied resolvers.
The parsing machinery never interprets them; renderers do.

Containers are built childless by the rules and filled, in document order,
by the parser engine. Children are only ever appended.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

StyleDescriptor = Any
BulletProvider = Callable[[], StyleDescriptor]


class Node(ABC):
    """Base class for all span tree nodes.

    All nodes support the visitor pattern for traversal and rendering.
    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class ContainerNode(Node):
    """Mixin for nodes holding an ordered ``children`` list."""

    children: list[Node]

    def add_child(self, child: Node) -> None:
        """Append ``child`` after the existing children."""
        self.children.append(child)


@dataclass
class TextNode(Node):
    """Leaf node holding literal text.

    Parameters
    ----------
    content : str
        The literal text

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class StyleNode(ContainerNode):
    """Container that applies style descriptors to its children.

    Parameters
    ----------
    styles : list of StyleDescriptor, default = empty list
        Descriptors in the order they were resolved
    children : list of Node, default = empty list
        Child nodes in document order

    """

    styles: list[StyleDescriptor] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_style``."""
        return visitor.visit_style(self)


@dataclass
class ListItemNode(ContainerNode):
    """Container representing one list entry.

    The bullet descriptor is not stored. ``bullet_provider`` is called by the
    renderer, so a theme change between parsing and rendering is honoured.

    Parameters
    ----------
    bullet_provider : callable or None, default = None
        Zero-argument function returning the bullet style descriptor
    children : list of Node, default = empty list
        Child nodes in document order

    """

    bullet_provider: Optional[BulletProvider] = None
    children: list[Node] = field(default_factory=list)

    def bullet(self) -> StyleDescriptor:
        """Resolve the bullet descriptor now, or None without a provider."""
        if self.bullet_provider is None:
            return None
        return self.bullet_provider()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


def get_node_children(node: Node) -> list[Node]:
    """Return the children of ``node``, or an empty list for leaves."""
    if isinstance(node, ContainerNode):
        return node.children
    return []
