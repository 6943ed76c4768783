from PyQt5.QtCore import QEvent, Qt, pyqtSignal
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
)

from ..core.search.models import SearchSnapshot
from ..core.search.snippets import split_context


class SearchLineEdit(QLineEdit):
    """
    QLineEdit that turns Tab/Shift+Tab into match navigation.

    Tab has to be caught in ``event`` because Qt uses it for focus
    changes before ``keyPressEvent`` ever sees it.
    """

    navigate_next = pyqtSignal()
    navigate_prev = pyqtSignal()
    escape_pressed = pyqtSignal()

    def event(self, event: QEvent) -> bool:
        if event.type() == QEvent.KeyPress:
            key = event.key()

            if key == Qt.Key_Tab:
                self.navigate_next.emit()
                return True
            elif key == Qt.Key_Backtab:
                self.navigate_prev.emit()
                return True
            elif key == Qt.Key_Escape:
                self.escape_pressed.emit()
                return True

        return super().event(event)


class SearchBar(QFrame):
    """Floating live-search panel with navigation, a match list and a pin button."""

    search_requested = pyqtSignal(str)
    next_result_requested = pyqtSignal()
    prev_result_requested = pyqtSignal()
    match_selected = pyqtSignal(int)
    pin_requested = pyqtSignal(str)
    close_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("SearchBar")
        self.setup_ui()
        self.hide()

    def setup_ui(self):
        self.setFixedWidth(320)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Preferred)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 10, 12, 10)
        main_layout.setSpacing(8)

        # Header
        header_layout = QHBoxLayout()
        header_layout.setSpacing(8)

        header_label = QLabel("Search", self)
        header_label.setStyleSheet("font-weight: bold; color: #8899AA;")
        header_layout.addWidget(header_label)
        header_layout.addStretch()

        self.close_button = QToolButton(self)
        self.close_button.setText("✕")
        self.close_button.setToolTip("Close (Esc)")
        self.close_button.setFixedSize(24, 24)
        self.close_button.clicked.connect(self._on_close)
        header_layout.addWidget(self.close_button)

        main_layout.addLayout(header_layout)

        # Search input, searched on every keystroke
        self.search_input = SearchLineEdit(self)
        self.search_input.setPlaceholderText("Search in document...")
        self.search_input.setFixedHeight(32)
        self.search_input.textChanged.connect(self._on_text_changed)
        self.search_input.returnPressed.connect(self.next_result_requested.emit)
        self.search_input.navigate_next.connect(self.next_result_requested.emit)
        self.search_input.navigate_prev.connect(self.prev_result_requested.emit)
        self.search_input.escape_pressed.connect(self._on_close)
        main_layout.addWidget(self.search_input)

        # Navigation
        nav_layout = QHBoxLayout()
        nav_layout.setSpacing(6)

        self.prev_button = QToolButton(self)
        self.prev_button.setText("◀")
        self.prev_button.setToolTip("Previous (Shift+Tab)")
        self.prev_button.setFixedSize(28, 28)
        self.prev_button.clicked.connect(self.prev_result_requested.emit)
        nav_layout.addWidget(self.prev_button)

        self.next_button = QToolButton(self)
        self.next_button.setText("▶")
        self.next_button.setToolTip("Next (Tab, Enter)")
        self.next_button.setFixedSize(28, 28)
        self.next_button.clicked.connect(self.next_result_requested.emit)
        nav_layout.addWidget(self.next_button)

        self.status_label = QLabel("", self)
        self.status_label.setStyleSheet("color: #8899AA; font-size: 12px;")
        nav_layout.addWidget(self.status_label)
        nav_layout.addStretch()

        self.pin_button = QToolButton(self)
        self.pin_button.setText("📌")
        self.pin_button.setToolTip("Pin this search")
        self.pin_button.setFixedSize(28, 28)
        self.pin_button.clicked.connect(self._on_pin)
        nav_layout.addWidget(self.pin_button)

        main_layout.addLayout(nav_layout)

        # Match previews
        self.match_list = QListWidget(self)
        self.match_list.setMaximumHeight(180)
        self.match_list.itemClicked.connect(self._on_match_clicked)
        self.match_list.hide()
        main_layout.addWidget(self.match_list)

        self.adjustSize()

        # Shadow
        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(20)
        shadow.setColor(QColor(0, 0, 0, 80))
        shadow.setOffset(0, 2)
        self.setGraphicsEffect(shadow)

    def _on_text_changed(self, text: str):
        self.search_requested.emit(text.strip())

    def _on_pin(self):
        search_term = self.search_input.text().strip()
        if search_term:
            self.pin_requested.emit(search_term)

    def _on_match_clicked(self, item: QListWidgetItem):
        index = item.data(Qt.UserRole)
        if index is not None:
            self.match_selected.emit(int(index))

    def _on_close(self):
        """Close the search bar."""
        self.close_requested.emit()
        self.hide()

    def show_bar(self):
        """Show and focus the search bar."""
        self.show()
        self.raise_()
        self.search_input.setFocus()
        self.search_input.selectAll()

    def set_status(self, text: str):
        self.status_label.setText(text)

    def update_results(self, snapshot: SearchSnapshot):
        """Show the transient part of a snapshot: status line and previews."""
        if not snapshot.query:
            self.set_status("")
        elif snapshot.count == 0:
            self.set_status("0 results")
        else:
            self.set_status(f"{snapshot.current} of {snapshot.count}")

        self.match_list.clear()
        for match in snapshot.matches:
            before, matched, after = split_context(
                match.context, match.context_start, match.context_end
            )
            item = QListWidgetItem(f"{before}[{matched}]{after}")
            item.setData(Qt.UserRole, match.index)
            self.match_list.addItem(item)

        if snapshot.current > 0:
            self.match_list.setCurrentRow(snapshot.current - 1)
        self.match_list.setVisible(bool(snapshot.matches))
        self.adjustSize()

    def clear_search(self):
        """Clear search state."""
        self.search_input.blockSignals(True)
        self.search_input.clear()
        self.search_input.blockSignals(False)
        self.status_label.setText("")
        self.match_list.clear()
        self.match_list.hide()

    def get_search_text(self) -> str:
        return self.search_input.text()
