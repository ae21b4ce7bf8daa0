#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/ast/__init__.py
"""Span tree module.

The parser produces a forest of nodes:

- nodes: TextNode, StyleNode and ListItemNode
- visitors: visitor base class used by the renderers
- serialization: JSON-friendly dumps for inspection
- utils: text extraction and traversal helpers

Examples
--------
    >>> from mdspans.ast import StyleNode, TextNode
    >>> header = StyleNode(styles=["bold"], children=[TextNode("Title")])

"""

from __future__ import annotations

from mdspans.ast.nodes import (
    BulletProvider,
    ContainerNode,
    ListItemNode,
    Node,
    StyleDescriptor,
    StyleNode,
    TextNode,
    get_node_children,
)
from mdspans.ast.serialization import node_to_dict, nodes_to_dicts, nodes_to_json
from mdspans.ast.utils import count_nodes, extract_text, iter_text_nodes
from mdspans.ast.visitors import NodeVisitor

__all__ = [
    "BulletProvider",
    "ContainerNode",
    "ListItemNode",
    "Node",
    "NodeVisitor",
    "StyleDescriptor",
    "StyleNode",
    "TextNode",
    "count_nodes",
    "extract_text",
    "get_node_children",
    "iter_text_nodes",
    "node_to_dict",
    "nodes_to_dicts",
    "nodes_to_json",
]
