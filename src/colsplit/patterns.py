"""
Suppression patterns used to drop rows by their group key text.
"""

import re
from typing import Any, Iterable, List, Optional, Protocol, Sequence, Union


# Title rows ("Table 3 ...") and county header rows of the combined reports
DEFAULT_IGNORE_PATTERNS = (
    r"^(?i:table)\s+\d+",
    r"^(?i:county)\b",
)


class Matcher(Protocol):
    """Anything that can tell whether it occurs in a piece of text."""

    def search(self, text: str) -> Any:
        ...


class LiteralMatcher:
    """
    Plain substring rule, usable wherever a compiled regular expression is.
    """

    def __init__(self, needle: str, ignore_case: bool = False):
        self.needle = needle
        self.ignore_case = ignore_case
        self._folded = needle.casefold() if ignore_case else needle

    def search(self, text: str) -> bool:
        haystack = text.casefold() if self.ignore_case else text
        return self._folded in haystack

    def __repr__(self) -> str:
        return f"LiteralMatcher({self.needle!r}, ignore_case={self.ignore_case})"


def compile_patterns(
    patterns: Optional[Iterable[Union[str, Matcher]]],
    literal: bool = False
) -> List[Matcher]:
    """
    Build matchers from pattern strings.

    Args:
        patterns: Pattern strings or ready matchers (None for no patterns)
        literal: Treat strings as plain substrings instead of regular expressions

    Returns:
        List of matchers in the given order

    Raises:
        ValueError: If a pattern is not a valid regular expression
    """
    matchers: List[Matcher] = []

    for pattern in patterns or ():
        if not isinstance(pattern, str):
            matchers.append(pattern)
        elif literal:
            matchers.append(LiteralMatcher(pattern))
        else:
            try:
                matchers.append(re.compile(pattern))
            except re.error as e:
                raise ValueError(f"Invalid ignore pattern '{pattern}': {e}")

    return matchers


def matches_any(text: str, matchers: Sequence[Matcher]) -> bool:
    """Return True if any matcher is found anywhere in the text."""
    for matcher in matchers:
        if matcher.search(text):
            return True

    return False
