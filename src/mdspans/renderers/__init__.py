#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/renderers/__init__.py
"""Renderers turning span trees into terminal text, plain text or debug trees."""

from mdspans.renderers.plaintext import PlainTextRenderer
from mdspans.renderers.rich_text import RichTextRenderer, to_rich_style
from mdspans.renderers.tree import TreeRenderer

__all__ = ["PlainTextRenderer", "RichTextRenderer", "TreeRenderer", "to_rich_style"]
