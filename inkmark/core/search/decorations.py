"""
Wrapping matched text in decoration elements and unwrapping it again.
"""

from typing import Callable, List, Optional, Sequence

from ..document.models import ElementNode, Node, TextNode
from .constants import (
    PINNED_HIGHLIGHT_CLASS,
    PINNED_HIGHLIGHT_DISABLED_CLASS,
    PINNED_HIGHLIGHT_FLASH_CLASS,
    SEARCH_HIGHLIGHT_ACTIVE_CLASS,
    SEARCH_HIGHLIGHT_CLASS,
)
from .models import HighlightColor, HighlightKind, MatchSpan


class DecorationNode(ElementNode):
    """
    A ``mark`` element around one match, owned by one highlight set.

    When a match overlaps the one before it, the element only wraps the
    characters the previous decoration left over, while ``match_text``
    keeps the full occurrence.
    """

    def __init__(self, text: str, match_text: str, kind: HighlightKind,
                 owner_id: Optional[str] = None,
                 color: Optional[HighlightColor] = None,
                 enabled: bool = True):
        super().__init__("mark")
        self.kind = kind
        self.owner_id = owner_id
        self.color = color
        self.enabled = enabled
        self.match_text = match_text
        self.index = 0
        self._active = False
        self._flashing = False

        self.append_child(TextNode(text))
        self._sync_attributes()

    @property
    def anchor_name(self) -> str:
        """Anchor the viewer scrolls to."""
        return f"hl-{self.node_id}"

    @property
    def overlap(self) -> int:
        """Number of leading match characters wrapped by the previous decoration."""
        return len(self.match_text) - len(self.text_content)

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value
        if value:
            self.add_class(SEARCH_HIGHLIGHT_ACTIVE_CLASS)
        else:
            self.remove_class(SEARCH_HIGHLIGHT_ACTIVE_CLASS)

    @property
    def flashing(self) -> bool:
        return self._flashing

    @flashing.setter
    def flashing(self, value: bool) -> None:
        self._flashing = value
        if value:
            self.add_class(PINNED_HIGHLIGHT_FLASH_CLASS)
        else:
            self.remove_class(PINNED_HIGHLIGHT_FLASH_CLASS)

    def _sync_attributes(self) -> None:
        if self.kind == HighlightKind.TRANSIENT:
            self.classes = [SEARCH_HIGHLIGHT_CLASS]
        elif self.enabled:
            self.classes = [PINNED_HIGHLIGHT_CLASS]
            if self.color is not None:
                self.classes.append(self.color.css_class)
        else:
            # Disabled pinned searches keep their elements, just invisible
            self.classes = [PINNED_HIGHLIGHT_DISABLED_CLASS]

        self.attrs["id"] = self.anchor_name
        if self.kind == HighlightKind.PERSISTENT:
            if self.color is not None:
                self.attrs["data-color"] = self.color.value
            if self.owner_id is not None:
                self.attrs["data-pinned-id"] = self.owner_id

    def __repr__(self):
        return f"DecorationNode({self.text_content!r}, kind={self.kind.value}, index={self.index})"


DecorationFactory = Callable[[str, str], DecorationNode]


def apply_decorations(leaf: TextNode, spans: Sequence[MatchSpan],
                      make_decoration: DecorationFactory) -> List[DecorationNode]:
    """
    Replace a text leaf with plain text and decoration slices.

    Args:
        leaf: Text leaf to rewrite; must be attached to a parent
        spans: Matches in ascending start order, possibly overlapping
        make_decoration: Builds a decoration from (wrapped text, matched text)

    Returns:
        The decorations created, in document order
    """
    parent = leaf.parent
    if parent is None or not spans:
        return []

    text = leaf.text
    pieces: List[Node] = []
    decorations: List[DecorationNode] = []
    last_end = 0

    for span in spans:
        if span.start > last_end:
            pieces.append(TextNode(text[last_end:span.start]))

        owned_start = max(span.start, last_end)
        if span.end <= owned_start:
            continue

        decoration = make_decoration(text[owned_start:span.end], text[span.start:span.end])
        pieces.append(decoration)
        decorations.append(decoration)
        last_end = span.end

    if last_end < len(text):
        pieces.append(TextNode(text[last_end:]))

    parent.replace_child(leaf, pieces)
    return decorations


def remove_decoration(decoration: DecorationNode) -> None:
    """Unwrap a decoration back into plain text and merge adjacent text."""
    parent = decoration.parent
    if parent is None:
        return
    parent.replace_child(decoration, [TextNode(decoration.text_content)])
    parent.normalize()
