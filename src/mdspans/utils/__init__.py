"""Utility helpers for mdspans."""
