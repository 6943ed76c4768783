from typing import Dict, List

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMenu,
    QVBoxLayout,
    QWidget,
)

from ..core.pinned import PinnedSearch
from ..core.search.models import HighlightColor


class PinnedPanel(QWidget):
    """Side panel listing pinned searches with their match counts."""

    # (pinned id, match index)
    match_requested = pyqtSignal(str, int)
    remove_requested = pyqtSignal(str)
    toggle_requested = pyqtSignal(str)
    color_requested = pyqtSignal(str, object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedWidth(220)
        self._next_index: Dict[str, int] = {}
        self._counts: Dict[str, int] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        header = QLabel("Pinned", self)
        header.setStyleSheet("font-weight: bold; color: #8899AA;")
        layout.addWidget(header)

        self.list_widget = QListWidget(self)
        self.list_widget.setContextMenuPolicy(Qt.CustomContextMenu)
        self.list_widget.itemClicked.connect(self._item_clicked)
        self.list_widget.customContextMenuRequested.connect(self._show_menu)
        self.list_widget.setToolTip("Click to cycle through matches.")
        layout.addWidget(self.list_widget)

    def set_searches(self, searches: List[PinnedSearch], counts: Dict[str, int]):
        """Rebuild the list from the pinned searches and their match counts."""
        self._counts = dict(counts)
        self._next_index = {pid: i for pid, i in self._next_index.items() if pid in counts}
        self.list_widget.clear()

        for pinned in searches:
            count = counts.get(pinned.id, 0)
            label = f"{pinned.pattern}  ({count})"
            if pinned.disabled:
                label += "  [off]"
            item = QListWidgetItem(label)
            item.setData(Qt.UserRole, pinned.id)
            item.setToolTip(f"{pinned.color.value}, {count} matches")
            self.list_widget.addItem(item)

    def _item_clicked(self, item: QListWidgetItem):
        pinned_id = item.data(Qt.UserRole)
        count = self._counts.get(pinned_id, 0)
        if not count:
            return
        index = self._next_index.get(pinned_id, 0) % count
        self._next_index[pinned_id] = index + 1
        self.match_requested.emit(pinned_id, index)

    def _show_menu(self, pos):
        item = self.list_widget.itemAt(pos)
        if item is None:
            return
        pinned_id = item.data(Qt.UserRole)

        menu = QMenu(self)
        menu.addAction("Enable / Disable", lambda: self.toggle_requested.emit(pinned_id))
        color_menu = menu.addMenu("Color")
        for color in HighlightColor:
            color_menu.addAction(
                color.value.capitalize(),
                lambda c=color: self.color_requested.emit(pinned_id, c),
            )
        menu.addSeparator()
        menu.addAction("Remove", lambda: self.remove_requested.emit(pinned_id))
        menu.exec_(self.list_widget.mapToGlobal(pos))
