#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/parser/patterns.py
"""Start-anchored pattern matching for parser rules."""

from __future__ import annotations

import re
from typing import Optional, Union

from mdspans.exceptions import RuleConfigurationError


class PatternMatcher:
    """Compiled regular expression matched at the start of the remaining input.

    Matching never searches past the first character: ``try_match`` uses
    :meth:`re.Pattern.match`, so a pattern only succeeds at offset 0 of the
    text it is given, whether or not it starts with ``^``.

    Parameters
    ----------
    pattern : str or re.Pattern
        Pattern source or an already compiled pattern
    flags : int, default = 0
        Flags used when compiling a pattern source

    Raises
    ------
    RuleConfigurationError
        If the pattern does not compile

    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: Union[str, re.Pattern[str]], flags: int = 0):
        """Compile the pattern, failing fast on malformed input."""
        if isinstance(pattern, re.Pattern):
            self._pattern = pattern
        else:
            try:
                self._pattern = re.compile(pattern, flags)
            except re.error as e:
                raise RuleConfigurationError(str(pattern), original_error=e) from e

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled pattern."""
        return self._pattern

    def try_match(self, remaining: str) -> Optional[re.Match[str]]:
        """Match at the beginning of ``remaining``.

        Parameters
        ----------
        remaining : str
            The unconsumed input

        Returns
        -------
        re.Match or None
            The match, with group offsets relative to ``remaining``

        """
        return self._pattern.match(remaining)

    def __repr__(self) -> str:
        """Show the pattern source."""
        return f"PatternMatcher({self._pattern.pattern!r})"
