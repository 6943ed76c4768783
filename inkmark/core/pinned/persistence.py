"""
Handles persistence of pinned searches to/from a JSON file.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from ...utils.resource_loader import get_app_data_dir
from .models import PinnedSearches

logger = logging.getLogger(__name__)

FILENAME = "pinned-searches.json"


class PinnedSearchPersistence:
    """Saves and loads the pinned search list."""

    def __init__(self, file_path: Optional[Path] = None):
        self._file_path = Path(file_path) if file_path else None

    @property
    def file_path(self) -> Path:
        """Path of the JSON file, resolved lazily in the app data directory."""
        if self._file_path is None:
            self._file_path = get_app_data_dir() / FILENAME
        return self._file_path

    def save(self, searches: PinnedSearches) -> bool:
        """
        Save pinned searches. An empty list removes the file instead.

        Args:
            searches: Pinned searches to save

        Returns:
            True if save was successful, False otherwise
        """
        path = self.file_path
        logger.debug("Saving %d pinned searches to %s", len(searches), path)

        if not searches.pinned_searches:
            return self.delete()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(searches.to_dict(), f, indent=2)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save pinned searches: %s", e)
            return False

    def load(self) -> PinnedSearches:
        """
        Load pinned searches.

        Returns:
            The stored collection, or an empty one when the file is
            missing or unreadable
        """
        path = self.file_path
        if not path.exists():
            return PinnedSearches()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return PinnedSearches.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Failed to load pinned searches from %s: %s", path, e)
            return PinnedSearches()

    def delete(self) -> bool:
        """
        Delete the JSON file.

        Returns:
            True if deletion was successful or file didn't exist
        """
        path = self.file_path
        if not path.exists():
            return True

        try:
            path.unlink()
            return True
        except OSError as e:
            logger.error("Failed to remove pinned searches file: %s", e)
            return False
