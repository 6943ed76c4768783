"""
Main application window for the Inkmark reader.
"""

import logging
import os
from typing import Optional

from PyQt5.QtCore import QFileSystemWatcher, QTimer, pyqtSignal
from PyQt5.QtWidgets import (
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ..controllers import UserInputHandler
from ..core.document import MarkdownRenderer
from ..core.pinned import PinnedSearchManager
from ..core.search import HighlightEngine, SearchSnapshot
from ..styles import ThemeManager
from .document_view import DocumentView
from .pinned_panel import PinnedPanel
from .search_bar import SearchBar

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Reader window: one document view, live search and pinned searches."""

    # Signals
    document_loaded = pyqtSignal(str)
    document_closed = pyqtSignal()
    theme_changed = pyqtSignal(bool)

    def __init__(self, file_path: Optional[str] = None):
        super().__init__()

        self._init_core_components()
        self._setup_window()
        self._setup_ui()
        self._setup_connections()

        self._apply_theme()
        self.pinned_manager.load()

        if file_path and os.path.exists(file_path):
            self.load_document(file_path)

    def _init_core_components(self):
        """Initialize core business logic components."""
        self.renderer = MarkdownRenderer()
        self.search_engine = HighlightEngine(parent=self)
        self.pinned_manager = PinnedSearchManager(parent=self)
        self.input_handler = UserInputHandler(self)

        # Live reload
        self.file_watcher = QFileSystemWatcher(self)

        self.dark_mode = True
        self.current_file_path: Optional[str] = None

    def _setup_window(self):
        self.setWindowTitle("Inkmark")
        self.setMinimumSize(800, 600)

    def _setup_ui(self):
        """Setup the user interface."""
        self._create_toolbar()

        self.document_view = DocumentView(self.search_engine, self)
        self.pinned_panel = PinnedPanel(self)

        content_layout = QHBoxLayout()
        content_layout.setSpacing(0)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.addWidget(self.pinned_panel)
        content_layout.addWidget(self.document_view)

        content_widget = QWidget()
        content_widget.setLayout(content_layout)

        main_layout = QVBoxLayout()
        main_layout.setSpacing(0)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self.top_frame)
        main_layout.addWidget(content_widget)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        # Floating search bar
        self.search_bar = SearchBar(self)
        self.search_bar.raise_()
        QTimer.singleShot(0, self._update_search_bar_position)

    def _create_toolbar(self):
        """Create the top toolbar."""
        self.top_frame = QFrame()
        self.top_frame.setObjectName("TopFrame")
        top_layout = QHBoxLayout(self.top_frame)
        top_layout.setContentsMargins(10, 8, 10, 8)
        top_layout.setSpacing(8)

        self._add_toolbar_button(top_layout, "Open", "Open Markdown (Ctrl+O)", self.open_document)
        self._add_toolbar_button(top_layout, "Close", "Close document (Ctrl+W)", self.close_document)
        self._add_toolbar_button(top_layout, "Search", "Search (Ctrl+F)", self.show_search_bar)

        top_layout.addStretch()
        self.file_name_label = QLabel("", self.top_frame)
        top_layout.addWidget(self.file_name_label)
        top_layout.addStretch()

        self.toggle_button = self._add_toolbar_button(
            top_layout, "Theme", "Switch to Light Mode", self.toggle_theme
        )

    def _add_toolbar_button(self, layout, text: str, tooltip: str, callback) -> QToolButton:
        btn = QToolButton(self.top_frame)
        btn.setText(text)
        btn.setToolTip(tooltip)
        btn.clicked.connect(callback)
        layout.addWidget(btn)
        return btn

    def _setup_connections(self):
        """Setup signal/slot connections."""
        self.search_engine.setup(self._on_results_changed)

        self.search_bar.search_requested.connect(self._execute_search)
        self.search_bar.next_result_requested.connect(self.find_next)
        self.search_bar.prev_result_requested.connect(self.find_prev)
        self.search_bar.match_selected.connect(self.search_engine.navigate_to)
        self.search_bar.pin_requested.connect(self.pin_pattern)
        self.search_bar.close_requested.connect(self._clear_search)

        self.pinned_manager.pinned_changed.connect(self.search_engine.set_pinned)
        self.pinned_panel.match_requested.connect(self.search_engine.scroll_to_pinned_match)
        self.pinned_panel.remove_requested.connect(self.pinned_manager.remove)
        self.pinned_panel.toggle_requested.connect(self.pinned_manager.toggle_disabled)
        self.pinned_panel.color_requested.connect(self.pinned_manager.set_color)

        self.document_view.pin_selection_requested.connect(self.pin_pattern)
        self.file_watcher.fileChanged.connect(self._on_file_changed)

    def _apply_theme(self):
        ThemeManager.apply_theme(self, self.dark_mode)
        ThemeManager.apply_theme(self.search_bar, self.dark_mode)
        self.document_view.set_dark_mode(self.dark_mode)
        self.theme_changed.emit(self.dark_mode)

    def _update_search_bar_position(self):
        x = self.width() - 18 - self.search_bar.width()
        y = self.top_frame.height() + 20
        self.search_bar.move(x, y)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._update_search_bar_position()

    def keyPressEvent(self, event):
        if not self.input_handler.handle_key_press(event):
            super().keyPressEvent(event)

    # Document Management Methods

    def load_document(self, file_path: str) -> bool:
        """Render a Markdown file and rebuild every highlight on it."""
        try:
            root = self.renderer.render_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not open %s: %s", file_path, e)
            QMessageBox.warning(self, "Open Failed", f"Could not open {file_path}:\n{e}")
            return False

        if self.current_file_path and self.current_file_path != file_path:
            self.file_watcher.removePath(self.current_file_path)
        if file_path not in self.file_watcher.files():
            self.file_watcher.addPath(file_path)

        is_reload = file_path == self.current_file_path
        self.current_file_path = file_path
        self.file_name_label.setText(os.path.basename(file_path))

        self.search_engine.set_document(root)
        if not is_reload:
            self.search_engine.clear()
            self.search_bar.clear_search()
        self.search_engine.reapply()

        self.document_loaded.emit(file_path)
        return True

    def open_document(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Markdown", "", "Markdown Files (*.md *.markdown);;All Files (*)"
        )
        if file_path:
            self.load_document(file_path)

    def reload_document(self):
        if self.current_file_path:
            self.load_document(self.current_file_path)

    def close_document(self):
        if self.current_file_path:
            self.file_watcher.removePath(self.current_file_path)
        self.current_file_path = None
        self.file_name_label.setText("")

        self._clear_search()
        self.search_engine.set_document(None)
        self.document_view.refresh()
        self.document_closed.emit()

    def _on_file_changed(self, file_path: str):
        # Editors that replace the file drop it from the watcher
        if os.path.exists(file_path):
            self.load_document(file_path)

    # Theme Methods

    def toggle_theme(self):
        self.dark_mode = not self.dark_mode
        self.toggle_button.setToolTip(
            "Switch to Light Mode" if self.dark_mode else "Switch to Dark Mode"
        )
        self._apply_theme()

    # Search Methods

    def show_search_bar(self):
        """Show or hide the search bar."""
        if self.search_bar.isVisible():
            self.hide_search_bar()
        else:
            self._update_search_bar_position()
            self.search_bar.show_bar()

    def hide_search_bar(self):
        self.search_bar.hide()
        self._clear_search()

    def _execute_search(self, search_term: str):
        if not search_term:
            self.search_engine.clear()
            return
        self.search_engine.find(search_term)

    def find_next(self):
        self.search_engine.navigate("next")

    def find_prev(self):
        self.search_engine.navigate("prev")

    def _clear_search(self):
        self.search_engine.clear()
        self.search_bar.clear_search()

    def _on_results_changed(self, snapshot: SearchSnapshot):
        self.search_bar.update_results(snapshot)
        counts = {pid: len(matches) for pid, matches in snapshot.pinned_matches.items()}
        self.pinned_panel.set_searches(self.pinned_manager.get_all(), counts)

    # Pinned Search Methods

    def pin_pattern(self, pattern: str):
        """Pin a pattern unless it is empty or already pinned."""
        if not pattern or self.pinned_manager.searches.contains_pattern(pattern):
            return
        self.pinned_manager.add(pattern)
