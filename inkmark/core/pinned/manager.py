"""
Pinned search manager that keeps the stored list and its listeners in sync.
"""
from typing import List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from ..search.models import HighlightColor, PinnedSearchDef
from .models import PinnedSearch, PinnedSearches
from .persistence import PinnedSearchPersistence


class PinnedSearchManager(QObject):
    """Manages pinned searches with automatic saving."""

    # Emitted with the full list of definitions after every change
    pinned_changed = pyqtSignal(object)

    def __init__(self, persistence: Optional[PinnedSearchPersistence] = None, parent=None):
        super().__init__(parent)
        self.persistence = persistence or PinnedSearchPersistence()
        self.searches = PinnedSearches()

    def load(self) -> None:
        """Load the stored list and notify listeners."""
        self.searches = self.persistence.load()
        self._notify()

    def add(self, pattern: str) -> Optional[str]:
        """
        Pin a pattern.

        Returns:
            Id of the new pinned search, or None for an empty pattern
        """
        if not pattern:
            return None
        pinned = self.searches.add(pattern)
        self._commit()
        return pinned.id

    def remove(self, pinned_id: str) -> bool:
        if not self.searches.remove(pinned_id):
            return False
        self._commit()
        return True

    def set_color(self, pinned_id: str, color: HighlightColor) -> bool:
        if not self.searches.set_color(pinned_id, color):
            return False
        self._commit()
        return True

    def toggle_disabled(self, pinned_id: str) -> bool:
        if not self.searches.toggle_disabled(pinned_id):
            return False
        self._commit()
        return True

    def get_all(self) -> List[PinnedSearch]:
        return list(self.searches.pinned_searches)

    def definitions(self) -> List[PinnedSearchDef]:
        return self.searches.to_defs()

    def _commit(self) -> None:
        self.persistence.save(self.searches)
        self._notify()

    def _notify(self) -> None:
        self.pinned_changed.emit(self.definitions())
