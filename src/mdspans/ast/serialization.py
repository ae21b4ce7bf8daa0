#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/ast/serialization.py
"""JSON-friendly dumps of span trees.

The tree has no wire format of its own; this module exists so trees can be
inspected from the command line and compared in tests. Style descriptors are
opaque, so they are written with ``str()``. Bullet providers are resolved at
dump time, like a renderer would.

"""

from __future__ import annotations

import json
from typing import Any

from mdspans.ast.nodes import ListItemNode, Node, StyleNode, TextNode


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a single node (and its subtree) to a plain dictionary.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        ``{"node_type": ..., ...}`` with nested ``children`` lists

    Raises
    ------
    TypeError
        If ``node`` is not one of the known node types

    """
    if isinstance(node, TextNode):
        return {"node_type": "text", "content": node.content}
    if isinstance(node, StyleNode):
        return {
            "node_type": "style",
            "styles": [str(style) for style in node.styles],
            "children": nodes_to_dicts(node.children),
        }
    if isinstance(node, ListItemNode):
        bullet = node.bullet()
        return {
            "node_type": "list_item",
            "bullet": None if bullet is None else str(bullet),
            "children": nodes_to_dicts(node.children),
        }
    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def nodes_to_dicts(nodes: list[Node]) -> list[dict[str, Any]]:
    """Convert a list of nodes with :func:`node_to_dict`."""
    return [node_to_dict(node) for node in nodes]


def nodes_to_json(nodes: list[Node], indent: int | None = 2) -> str:
    """Serialize a list of nodes to a JSON string."""
    return json.dumps(nodes_to_dicts(nodes), indent=indent, ensure_ascii=False)
