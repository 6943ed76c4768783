"""
Live search and highlight engine for a rendered document.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from ..document.models import ElementNode
from .constants import CONTEXT_CHARS, FLASH_DURATION_MS
from .decorations import (
    DecorationFactory,
    DecorationNode,
    apply_decorations,
    remove_decoration,
)
from .matcher import find_occurrences
from .models import HighlightKind, PinnedSearchDef, SearchMatch, SearchSnapshot
from .snippets import extract_context
from .traversal import iter_text_leaves

logger = logging.getLogger(__name__)

SearchCallback = Callable[[SearchSnapshot], None]


class HighlightEngine(QObject):
    """
    Owns the transient search and the pinned searches of one document view.

    Every operation tears down the decorations it supersedes and rebuilds
    them from scratch, then emits a full ``SearchSnapshot`` through
    ``results_changed`` (and returns it). Operations never raise: without
    a document they report an empty snapshot, and unknown ids or indices
    are ignored.

    Calling engine operations from a ``results_changed`` listener is not
    supported.
    """

    # Signals
    results_changed = pyqtSignal(object)  # SearchSnapshot
    scroll_requested = pyqtSignal(str)  # decoration anchor name
    decorations_changed = pyqtSignal()

    def __init__(self, root: Optional[ElementNode] = None, parent=None):
        super().__init__(parent)
        self._root = root
        self._callback: Optional[SearchCallback] = None

        # Transient search state
        self.current_search_term: str = ""
        self.current_search_index: int = -1
        self.search_results: List[DecorationNode] = []

        # Pinned search state
        self.pinned_searches: List[PinnedSearchDef] = []
        self.pinned_results: Dict[str, List[DecorationNode]] = {}

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    @property
    def root(self) -> Optional[ElementNode]:
        return self._root

    def set_document(self, root: Optional[ElementNode]) -> None:
        """
        Bind the engine to a freshly rendered document (or to none).

        Decorations of the previous tree are dropped on the next
        recomputation; call ``reapply`` to rebuild them on the new one.
        """
        self._root = root

    def setup(self, callback: Optional[SearchCallback]) -> None:
        """Register the notification sink, replacing the previous one."""
        if self._callback is not None:
            self.results_changed.disconnect(self._callback)
        self._callback = callback
        if callback is not None:
            self.results_changed.connect(callback)

    # ------------------------------------------------------------------
    # Transient search
    # ------------------------------------------------------------------

    def find(self, query: str) -> SearchSnapshot:
        """
        Search the whole document for ``query``.

        The first match becomes active without being scrolled to.

        Returns:
            The emitted snapshot
        """
        self.current_search_term = query
        if self._root is None:
            self._clear_transient()
            return self._emit(SearchSnapshot())

        self._clear_transient()
        self.search_results = self._apply_set(
            query,
            False,
            lambda text, match_text: DecorationNode(text, match_text, HighlightKind.TRANSIENT),
        )

        if self.search_results:
            self.current_search_index = 0
            self.search_results[0].active = True
        else:
            self.current_search_index = -1

        logger.debug("Search for %r found %d matches", query, len(self.search_results))
        self.decorations_changed.emit()
        return self._emit(self._snapshot())

    def navigate(self, direction: str) -> SearchSnapshot:
        """
        Move the active match one step, wrapping around.

        Args:
            direction: ``"next"`` or ``"prev"``
        """
        if self._root is None:
            return self._emit(SearchSnapshot())
        if not self.search_results:
            return self._emit(self._snapshot())
        if direction not in ("next", "prev"):
            logger.warning("Ignoring unknown navigation direction %r", direction)
            return self._emit(self._snapshot())

        count = len(self.search_results)
        if direction == "next":
            new_index = (self.current_search_index + 1) % count
        else:
            new_index = (self.current_search_index - 1) % count

        self._activate(new_index)
        return self._emit(self._snapshot())

    def navigate_to(self, index: int) -> Optional[SearchSnapshot]:
        """
        Jump straight to the match at ``index``.

        Returns:
            The emitted snapshot, or None when ``index`` is out of range
            (nothing is emitted then)
        """
        if self._root is None:
            return self._emit(SearchSnapshot())
        if index < 0 or index >= len(self.search_results):
            return None

        self._activate(index)
        return self._emit(self._snapshot())

    def clear(self) -> SearchSnapshot:
        """Drop the transient search; pinned highlights stay."""
        self.current_search_term = ""
        if self._root is None:
            self._clear_transient()
            return self._emit(SearchSnapshot())

        self._clear_transient()
        self.decorations_changed.emit()
        return self._emit(self._snapshot())

    # ------------------------------------------------------------------
    # Pinned searches
    # ------------------------------------------------------------------

    def set_pinned(self, entries: Iterable[Any]) -> SearchSnapshot:
        """
        Replace all pinned searches and re-highlight them.

        Args:
            entries: ``PinnedSearchDef`` objects or mappings with keys
                ``id``, ``pattern``, ``color``, ``caseSensitive``, ``disabled``

        Returns:
            The emitted snapshot; transient fields are left untouched
        """
        self.pinned_searches = self._coerce_entries(entries)
        if self._root is None:
            self._clear_pinned()
            return self._emit(SearchSnapshot())

        self._apply_pinned()
        self.decorations_changed.emit()
        return self._emit(self._snapshot())

    def scroll_to_pinned_match(self, pinned_id: str, index: int) -> None:
        """Scroll to a pinned match and flash it briefly."""
        decorations = self.pinned_results.get(pinned_id)
        if not decorations or index < 0 or index >= len(decorations):
            return

        target = decorations[index]
        target.flashing = True
        self.decorations_changed.emit()
        self.scroll_requested.emit(target.anchor_name)
        # Parented to the engine so the timer dies with it
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._end_flash(target))
        timer.timeout.connect(timer.deleteLater)
        timer.start(FLASH_DURATION_MS)

    def _end_flash(self, target: DecorationNode) -> None:
        target.flashing = False
        self.decorations_changed.emit()

    # ------------------------------------------------------------------
    # Re-rendering
    # ------------------------------------------------------------------

    def reapply(self) -> SearchSnapshot:
        """
        Rebuild every highlight after the document was re-rendered.

        Pinned searches are applied first, from their stored definitions,
        then the transient query (if any) is searched again.
        """
        if self._root is None:
            return self._emit(SearchSnapshot())

        self._clear_transient()
        self._apply_pinned()
        logger.debug("Reapplied %d pinned searches", len(self.pinned_searches))

        if self.current_search_term:
            return self.find(self.current_search_term)

        self.decorations_changed.emit()
        return self._emit(self._snapshot())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_result_count(self) -> int:
        """Get total number of transient matches."""
        return len(self.search_results)

    def get_current_index(self) -> int:
        """Get current match index (0-based, -1 if none)."""
        return self.current_search_index

    def get_current_result(self) -> Optional[DecorationNode]:
        if 0 <= self.current_search_index < len(self.search_results):
            return self.search_results[self.current_search_index]
        return None

    def get_pinned_count(self, pinned_id: str) -> int:
        return len(self.pinned_results.get(pinned_id, []))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _activate(self, index: int) -> None:
        current = self.get_current_result()
        if current is not None:
            current.active = False

        self.current_search_index = index
        target = self.search_results[index]
        target.active = True

        self.decorations_changed.emit()
        self.scroll_requested.emit(target.anchor_name)

    def _apply_set(self, pattern: str, case_sensitive: bool,
                   make_decoration: DecorationFactory) -> List[DecorationNode]:
        """Decorate every occurrence of ``pattern`` in the current document."""
        if not pattern or self._root is None:
            return []

        decorations: List[DecorationNode] = []
        for leaf in list(iter_text_leaves(self._root)):
            spans = find_occurrences(leaf.text, pattern, case_sensitive)
            if spans:
                decorations.extend(apply_decorations(leaf, spans, make_decoration))

        for index, decoration in enumerate(decorations):
            decoration.index = index
        return decorations

    def _apply_pinned(self) -> None:
        self._clear_pinned()

        for pinned in self.pinned_searches:
            self.pinned_results[pinned.id] = self._apply_set(
                pinned.pattern,
                pinned.case_sensitive,
                self._pinned_factory(pinned),
            )

    @staticmethod
    def _pinned_factory(pinned: PinnedSearchDef) -> DecorationFactory:
        def make_decoration(text: str, match_text: str) -> DecorationNode:
            return DecorationNode(
                text,
                match_text,
                HighlightKind.PERSISTENT,
                owner_id=pinned.id,
                color=pinned.color,
                enabled=not pinned.disabled,
            )
        return make_decoration

    def _clear_transient(self) -> None:
        self._unwrap(self.search_results)
        self.search_results = []
        self.current_search_index = -1

    def _clear_pinned(self) -> None:
        for decorations in self.pinned_results.values():
            self._unwrap(decorations)
        self.pinned_results = {}

    def _unwrap(self, decorations: List[DecorationNode]) -> None:
        # Decorations of a replaced tree are simply forgotten
        for decoration in decorations:
            if self._root is not None and decoration.is_inside(self._root):
                remove_decoration(decoration)

    def _coerce_entries(self, entries: Iterable[Any]) -> List[PinnedSearchDef]:
        result: List[PinnedSearchDef] = []
        seen = set()

        for entry in entries or []:
            if isinstance(entry, PinnedSearchDef):
                pinned = entry
            elif isinstance(entry, Mapping):
                try:
                    pinned = PinnedSearchDef.from_dict(entry)
                except (KeyError, ValueError, TypeError) as e:
                    logger.warning("Skipping malformed pinned search %r: %s", entry, e)
                    continue
            else:
                logger.warning("Skipping pinned search of type %s", type(entry).__name__)
                continue

            if pinned.id in seen:
                logger.warning("Skipping duplicate pinned search id %r", pinned.id)
                continue
            seen.add(pinned.id)
            result.append(pinned)

        return result

    def _collect_matches(self, decorations: List[DecorationNode]) -> List[SearchMatch]:
        matches = []
        for index, decoration in enumerate(decorations):
            snippet = extract_context(decoration, self._root, CONTEXT_CHARS)
            matches.append(SearchMatch(
                index=index,
                text=decoration.match_text,
                context=snippet.text,
                context_start=snippet.match_start,
                context_end=snippet.match_end,
            ))
        return matches

    def _snapshot(self) -> SearchSnapshot:
        current = self.get_current_result()
        return SearchSnapshot(
            count=len(self.search_results),
            current=self.current_search_index + 1 if current is not None else 0,
            query=self.current_search_term,
            matches=self._collect_matches(self.search_results),
            pinned_matches={
                pinned_id: self._collect_matches(decorations)
                for pinned_id, decorations in self.pinned_results.items()
            },
        )

    def _emit(self, snapshot: SearchSnapshot) -> SearchSnapshot:
        self.results_changed.emit(snapshot)
        return snapshot
