"""
Literal substring matching inside a single text leaf.
"""

from typing import List

from .models import MatchSpan


def find_occurrences(text: str, pattern: str, case_sensitive: bool = False) -> List[MatchSpan]:
    """
    Find every occurrence of ``pattern`` in ``text``.

    Scanning resumes one character after each match start, so occurrences
    may overlap: ``"aa"`` in ``"aaaa"`` is found at 0, 1 and 2.

    Args:
        text: Text of one leaf
        pattern: Literal text to look for
        case_sensitive: Whether letter case must match

    Returns:
        Spans indexing into the original ``text``
    """
    if not pattern or not text:
        return []

    haystack = text if case_sensitive else _fold(text)
    needle = pattern if case_sensitive else _fold(pattern)

    spans = []
    start = 0
    while True:
        index = haystack.find(needle, start)
        if index == -1:
            break
        spans.append(MatchSpan(index, index + len(needle)))
        start = index + 1

    return spans


def _fold(text: str) -> str:
    """Lower-case ``text`` without changing its length."""
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    # A few characters (e.g. U+0130) grow when lower-cased; keep those as-is
    return "".join(
        lower if len(lower) == 1 else char
        for char, lower in ((c, c.lower()) for c in text)
    )
