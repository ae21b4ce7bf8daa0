"""Shared helpers for the mdspans test suite.

Style descriptors in the core tests are plain marker strings (``"h1"``,
``"RED"``, ``"bold"``) so assertions can compare node trees with ``==``.
"""

HEADER_STYLES = ("h1", "h2", "h3", "h4", "h5", "h6")
CLASS_STYLES = {"red": "RED", "blue": "BLUE"}


def inline_style(name):
    """Inline style provider returning the style kind itself."""
    return name


def bullet():
    """Bullet provider returning a marker string."""
    return "bullet"
