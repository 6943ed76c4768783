"""
Saving and restoring the user's text selection around transient overlays.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QTextEdit

logger = logging.getLogger(__name__)

# QTextCursor.selectedText() separates paragraphs with U+2029
PARAGRAPH_SEPARATOR = "\u2029"


@dataclass(frozen=True)
class CapturedSelection:
    """
    A user selection, as character positions in the view's plain text.

    Highlighting never changes the plain text, so positions captured
    before a re-highlight still point at the same characters after it.
    """

    anchor: int
    position: int
    text: str

    @property
    def start(self) -> int:
        return min(self.anchor, self.position)

    @property
    def end(self) -> int:
        return max(self.anchor, self.position)

    @property
    def has_selection(self) -> bool:
        return bool(self.text)


def capture_selection(view: QTextEdit) -> Optional[CapturedSelection]:
    """
    Record the current selection of a text view.

    Returns:
        The captured selection, or None when nothing is selected
    """
    cursor = view.textCursor()
    if not cursor.hasSelection():
        return None

    text = cursor.selectedText().replace(PARAGRAPH_SEPARATOR, "\n")
    return CapturedSelection(cursor.anchor(), cursor.position(), text)


def restore_selection(view: QTextEdit, captured: Optional[CapturedSelection]) -> bool:
    """
    Reinstate a previously captured selection.

    Args:
        view: View the selection was captured from
        captured: Value returned by ``capture_selection``

    Returns:
        True if a selection was restored
    """
    if captured is None:
        return False

    document = view.document()
    last_position = document.characterCount() - 1
    if captured.end > last_position:
        logger.debug("Selection %d-%d no longer fits the document", captured.start, captured.end)
        return False

    cursor = QTextCursor(document)
    cursor.setPosition(captured.anchor)
    cursor.setPosition(captured.position, QTextCursor.KeepAnchor)
    view.setTextCursor(cursor)
    return True
