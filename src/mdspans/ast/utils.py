#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/ast/utils.py
"""Utility functions for working with span tree nodes.

Examples
--------
Extract the text of a header node:

    >>> from mdspans.ast import StyleNode, TextNode
    >>> from mdspans.ast.utils import extract_text
    >>> extract_text(StyleNode(["bold"], [TextNode("Hello "), TextNode("world")]))
    'Hello world'

"""

from __future__ import annotations

from typing import Iterator, Union

from mdspans.ast.nodes import Node, TextNode, get_node_children


def extract_text(node_or_nodes: Union[Node, list[Node]]) -> str:
    """Concatenate the literal text below a node or list of nodes.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes

    Returns
    -------
    str
        All TextNode content in document order, with no separator

    """
    nodes = node_or_nodes if isinstance(node_or_nodes, list) else [node_or_nodes]
    return "".join(text.content for text in iter_text_nodes(nodes))


def iter_text_nodes(nodes: list[Node]) -> Iterator[TextNode]:
    """Yield every TextNode below ``nodes`` in document order."""
    for node in nodes:
        if isinstance(node, TextNode):
            yield node
        else:
            yield from iter_text_nodes(get_node_children(node))


def count_nodes(nodes: list[Node]) -> int:
    """Return the number of nodes in the forest rooted at ``nodes``."""
    return sum(1 + count_nodes(get_node_children(node)) for node in nodes)
