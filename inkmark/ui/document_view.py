"""
Read-only view that projects the document model onto a QTextBrowser.
"""

import logging
from typing import Optional

import pyperclip
from PyQt5.QtCore import QPoint, pyqtSignal
from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QMenu, QTextBrowser

from ..core.document import (
    ContentContext,
    ContextMenuData,
    ContextType,
    ElementNode,
    Node,
    TextNode,
    detect_context,
    to_html,
)
from ..core.search import HighlightEngine
from ..core.selection import capture_selection, restore_selection
from ..styles import ThemeManager

logger = logging.getLogger(__name__)

# QTextBrowser only scrolls to named anchors and has no ``mark`` element
VIEW_TAG_MAP = {"mark": "a"}
VIEW_ATTR_MAP = {"id": "name"}


class DocumentView(QTextBrowser):
    """
    Shows one rendered document and keeps it in step with its engine.

    The model is the source of truth: every time the engine changes the
    decorations, the view re-serialises the tree and puts the scroll
    position and the user's selection back where they were.
    """

    pin_selection_requested = pyqtSignal(str)

    def __init__(self, engine: HighlightEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.dark_mode = True
        self.setOpenExternalLinks(True)

        self.engine.decorations_changed.connect(self.refresh)
        self.engine.scroll_requested.connect(self.scrollToAnchor)

    def set_dark_mode(self, dark_mode: bool) -> None:
        self.dark_mode = dark_mode
        self.refresh()

    def refresh(self) -> None:
        """Re-project the engine's document, keeping scroll and selection."""
        root = self.engine.root
        selection = capture_selection(self)
        scroll_value = self.verticalScrollBar().value()

        self.document().setDefaultStyleSheet(ThemeManager.document_stylesheet(self.dark_mode))
        if root is None:
            self.clear()
            return
        self.setHtml(to_html(root, VIEW_TAG_MAP, VIEW_ATTR_MAP))

        self.verticalScrollBar().setValue(scroll_value)
        restore_selection(self, selection)

    # ------------------------------------------------------------------
    # Context menu
    # ------------------------------------------------------------------

    def context_menu_data(self, pos: QPoint) -> ContextMenuData:
        """Describe what lies under ``pos`` (viewport coordinates)."""
        selection = capture_selection(self)
        context = ContentContext()

        root = self.engine.root
        if root is not None:
            target = self._target_at(pos, root)
            if target is not None:
                context = detect_context(target, root)

        return ContextMenuData(
            context=context,
            x=pos.x(),
            y=pos.y(),
            has_selection=selection is not None,
            selected_text=selection.text if selection is not None else "",
        )

    def contextMenuEvent(self, event):
        data = self.context_menu_data(event.pos())
        menu = QMenu(self)

        if data.has_selection:
            menu.addAction("Copy", lambda: self._copy(data.selected_text))
            menu.addAction(
                "Pin Selection",
                lambda: self.pin_selection_requested.emit(data.selected_text.strip()),
            )

        context = data.context
        if context.type == ContextType.LINK and context.href:
            menu.addAction("Copy Link Address", lambda: self._copy(context.href))
        elif context.type == ContextType.IMAGE and context.src:
            menu.addAction("Copy Image Address", lambda: self._copy(context.src))
        elif context.type == ContextType.CODE_BLOCK and context.content is not None:
            label = f"Copy {context.language} Code" if context.language else "Copy Code"
            menu.addAction(label, lambda: self._copy(context.content))
        elif context.type == ContextType.MERMAID and context.source is not None:
            menu.addAction("Copy Diagram Source", lambda: self._copy(context.source))

        if not menu.isEmpty():
            menu.addSeparator()
        menu.addAction("Select All", self.selectAll)
        menu.exec_(event.globalPos())

    def _copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard copy failed: %s", e)

    def _target_at(self, pos: QPoint, root: ElementNode) -> Optional[Node]:
        """
        Find the model node shown under a viewport position.

        Links and images are matched by address; any other text by the
        first leaf containing the word at that point.
        """
        cursor = self.cursorForPosition(pos)
        char_format = cursor.charFormat()

        href = self.anchorAt(pos)
        if href:
            return root.find_first(
                lambda node: isinstance(node, ElementNode) and node.tag == "a"
                and node.get("href") == href
            )

        if char_format.isImageFormat():
            src = char_format.toImageFormat().name()
            return root.find_first(
                lambda node: isinstance(node, ElementNode) and node.tag == "img"
                and node.get("src") == src
            )

        cursor.select(QTextCursor.WordUnderCursor)
        word = cursor.selectedText().strip()
        if not word:
            return None
        return root.find_first(
            lambda node: isinstance(node, TextNode) and word in node.text
        )
