"""
Search and highlight functionality for rendered documents.
"""

from .decorations import DecorationNode, apply_decorations, remove_decoration
from .matcher import find_occurrences
from .models import (
    ContextSnippet,
    HighlightColor,
    HighlightKind,
    MatchSpan,
    PinnedSearchDef,
    SearchMatch,
    SearchSnapshot,
)
from .search_engine import HighlightEngine
from .snippets import extract_context, split_context
from .traversal import is_excluded, iter_text_leaves

__all__ = [
    "HighlightEngine",
    "DecorationNode",
    "apply_decorations",
    "remove_decoration",
    "find_occurrences",
    "extract_context",
    "split_context",
    "is_excluded",
    "iter_text_leaves",
    "ContextSnippet",
    "HighlightColor",
    "HighlightKind",
    "MatchSpan",
    "PinnedSearchDef",
    "SearchMatch",
    "SearchSnapshot",
]
