"""
Pinned searches: persistent, colored highlight patterns.
"""
from .manager import PinnedSearchManager
from .models import PinnedSearch, PinnedSearches, new_pinned_id
from .persistence import PinnedSearchPersistence

__all__ = [
    'PinnedSearch',
    'PinnedSearches',
    'PinnedSearchManager',
    'PinnedSearchPersistence',
    'new_pinned_id',
]
