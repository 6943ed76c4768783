"""
Core logic for the Inkmark reader: document model, search and selection.
"""

from .document import ElementNode, MarkdownRenderer, TextNode, parse_html, to_html
from .pinned import PinnedSearch, PinnedSearches, PinnedSearchManager
from .search import HighlightColor, HighlightEngine, PinnedSearchDef, SearchSnapshot
from .selection import CapturedSelection, capture_selection, restore_selection

__all__ = [
    "ElementNode",
    "TextNode",
    "MarkdownRenderer",
    "parse_html",
    "to_html",
    "HighlightEngine",
    "HighlightColor",
    "PinnedSearchDef",
    "SearchSnapshot",
    "PinnedSearch",
    "PinnedSearches",
    "PinnedSearchManager",
    "CapturedSelection",
    "capture_selection",
    "restore_selection",
]
